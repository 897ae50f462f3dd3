"""Shared data transfer objects for the feedback design workflow."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import List, Mapping

from feedback_designer.domain.feedback.models import FeedbackSolution


class ValidationSeverity(str, Enum):
    """Severity levels returned by the validation engine."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(slots=True)
class ValidationIssue:
    """Represents a rule violation or advisory detected during validation."""

    code: str
    message: str
    severity: ValidationSeverity
    details: Mapping[str, float | str] = field(default_factory=dict)


@dataclass(slots=True)
class FeedbackRequest:
    """Request envelope provided by the presentation layer."""

    device_id: str
    target_voltage: float  # V
    target_total_resistance: float  # ohms


@dataclass(slots=True)
class FeedbackDesignResult:
    """Outcome of a feedback design run for one regulator."""

    request: FeedbackRequest
    device_name: str
    solution: FeedbackSolution
    r1_part: str
    r2_part: str
    design_text: str
    issues: List[ValidationIssue] = field(default_factory=list)
    alternatives: List[FeedbackSolution] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def voltage_error(self) -> float:
        return self.solution.voltage_error(self.request.target_voltage)
