"""Orchestrates the end-to-end flow of a feedback divider design."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import List, Optional

from feedback_designer.domain.catalog import LCSC_0402_CATALOG, ResistorCatalog
from feedback_designer.domain.errors import InvalidInputError
from feedback_designer.domain.feedback import FeedbackSolution, FeedbackSolver, FeedbackTarget
from feedback_designer.domain.regulators import DeviceInfo, DeviceRegistry
from feedback_designer.domain.validation.engine import ValidationEngine
from feedback_designer.shared.dto import (
    FeedbackDesignResult,
    FeedbackRequest,
    ValidationIssue,
    ValidationSeverity,
)

from .template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)


class ValidationFailedError(InvalidInputError):
    """Raised when blocking validation issues prevent the search."""

    def __init__(self, issues: Iterable[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        message = ", ".join(issue.code for issue in self.issues) or "validation failed"
        super().__init__(message)


class FeedbackDesignService:
    """Facade that coordinates device lookup, validation, search and rendering."""

    def __init__(
        self,
        *,
        registry: DeviceRegistry,
        validation_engine: ValidationEngine,
        catalog: ResistorCatalog = LCSC_0402_CATALOG,
        solver: Optional[FeedbackSolver] = None,
        renderer: Optional[TemplateRenderer] = None,
        alternatives: int = 5,
        voltage_tolerance: float = 0.01,
    ) -> None:
        self._registry = registry
        self._validation_engine = validation_engine
        self.catalog = catalog
        self._solver = solver or FeedbackSolver()
        self._renderer = renderer or TemplateRenderer()
        self._alternatives = alternatives
        self._voltage_tolerance = voltage_tolerance

    def run(self, request: FeedbackRequest) -> FeedbackDesignResult:
        """Execute validation, search and template rendering for ``request``."""

        device = self._registry.resolve(request.device_id)
        target = FeedbackTarget(request.target_voltage, request.target_total_resistance)

        issues = self._validation_engine.check(request, device)
        blocking = [issue for issue in issues if issue.severity == ValidationSeverity.ERROR]
        if blocking:
            raise ValidationFailedError(blocking)

        alternatives: List[FeedbackSolution] = []
        if self._alternatives > 0:
            # rank() ties break like solve(), so its head is the solution
            alternatives = self._solver.rank(
                device.formula,
                target.target_voltage,
                target.target_total_resistance,
                self.catalog,
                top_n=self._alternatives,
            )
            solution = alternatives[0]
        else:
            solution = self._solver.solve(
                device.formula,
                target.target_voltage,
                target.target_total_resistance,
                self.catalog,
            )

        issues.extend(self._accuracy_issues(solution, target))
        logger.info(
            "%s: %.3f V / %.0f ohm -> R1=%g R2=%g (%.4f V)",
            device.name,
            target.target_voltage,
            target.target_total_resistance,
            solution.r1,
            solution.r2,
            solution.achieved_voltage,
        )

        return FeedbackDesignResult(
            request=request,
            device_name=device.name,
            solution=solution,
            r1_part=self.catalog.part_id(solution.r1),
            r2_part=self.catalog.part_id(solution.r2),
            design_text=self._renderer.render(device.template, solution, self.catalog),
            issues=issues,
            alternatives=alternatives,
        )

    def available_devices(self) -> Iterable[DeviceInfo]:
        return self._registry.available_devices()

    def resolve_device(self, device_id: str) -> DeviceInfo:
        return self._registry.resolve(device_id)

    def _accuracy_issues(
        self, solution: FeedbackSolution, target: FeedbackTarget
    ) -> List[ValidationIssue]:
        error = solution.voltage_error(target.target_voltage)
        if error <= self._voltage_tolerance:
            return []
        return [
            ValidationIssue(
                code="voltage_deviation",
                message="No catalog pair reaches the target voltage within tolerance",
                severity=ValidationSeverity.WARNING,
                details={
                    "achieved_voltage": solution.achieved_voltage,
                    "voltage_error": error,
                    "tolerance": self._voltage_tolerance,
                },
            )
        ]
