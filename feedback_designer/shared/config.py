"""Configuration management for the application."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv


@dataclass
class SolverConfig:
    """Configuration for the feedback resistor search."""

    voltage_weight: float = 1e5
    alternatives: int = 5
    voltage_tolerance: float = 0.01  # V, deviation reported as a warning


@dataclass
class CatalogConfig:
    """Configuration for the resistor catalog."""

    # JSON file mapping ohms to part id; built-in LCSC 0402 list when unset
    catalog_path: Optional[str] = None


@dataclass
class ServerConfig:
    """Configuration for the Gradio web server."""

    host: str = "0.0.0.0"
    port: int = 7860
    share: bool = False


@dataclass
class LoggingConfig:
    """Configuration for application logging."""

    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class AppConfig:
    """Application configuration."""

    solver: SolverConfig = field(default_factory=SolverConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> AppConfig:
        """Load configuration from environment variables."""
        load_dotenv(env_file or ".env")

        solver = SolverConfig(
            voltage_weight=float(os.getenv("FEEDBACK_VOLTAGE_WEIGHT", "1e5")),
            alternatives=int(os.getenv("FEEDBACK_ALTERNATIVES", "5")),
            voltage_tolerance=float(os.getenv("FEEDBACK_VOLTAGE_TOLERANCE", "0.01")),
        )

        catalog = CatalogConfig(
            catalog_path=os.getenv("RESISTOR_CATALOG_PATH") or None,
        )

        server = ServerConfig(
            host=os.getenv("GRADIO_SERVER_NAME", "0.0.0.0"),
            port=int(os.getenv("GRADIO_SERVER_PORT", "7860")),
            share=_env_flag("GRADIO_SHARE"),
        )

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
        )

        return cls(
            solver=solver,
            catalog=catalog,
            server=server,
            logging=logging_config,
        )


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}
