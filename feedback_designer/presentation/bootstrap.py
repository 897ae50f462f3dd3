"""Wire configuration, catalog, registry and rules into a design service."""

from __future__ import annotations

from typing import Optional

from feedback_designer.application.services import FeedbackDesignService
from feedback_designer.domain.feedback import FeedbackSolver
from feedback_designer.domain.regulators import DeviceRegistry, register_default_devices
from feedback_designer.domain.validation import ValidationEngine, register_default_rules
from feedback_designer.infrastructure import resolve_catalog
from feedback_designer.shared.config import AppConfig


def build_design_service(config: Optional[AppConfig] = None) -> FeedbackDesignService:
    config = config or AppConfig()

    registry = register_default_devices(DeviceRegistry())
    validator = register_default_rules(ValidationEngine(), registry)

    return FeedbackDesignService(
        registry=registry,
        validation_engine=validator,
        catalog=resolve_catalog(config.catalog.catalog_path),
        solver=FeedbackSolver(config.solver.voltage_weight),
        alternatives=config.solver.alternatives,
        voltage_tolerance=config.solver.voltage_tolerance,
    )
