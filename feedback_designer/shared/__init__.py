"""Shared utilities and data transfer objects."""

from .dto import (
    FeedbackDesignResult,
    FeedbackRequest,
    ValidationIssue,
    ValidationSeverity,
)
from .config import AppConfig, CatalogConfig, LoggingConfig, ServerConfig, SolverConfig

__all__ = [
    "FeedbackDesignResult",
    "FeedbackRequest",
    "ValidationIssue",
    "ValidationSeverity",
    "AppConfig",
    "CatalogConfig",
    "LoggingConfig",
    "ServerConfig",
    "SolverConfig",
]
