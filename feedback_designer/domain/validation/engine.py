"""Validation engine responsible for enforcing device rules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from ...shared.dto import FeedbackRequest, ValidationIssue, ValidationSeverity
from ..errors import DeviceNotSupportedError
from ..regulators.base import DeviceId, DeviceInfo


class RuleEvaluator(Protocol):
    """Callable signature used to evaluate a validation rule."""

    def __call__(
        self, request: FeedbackRequest, device: DeviceInfo
    ) -> tuple[bool, Dict[str, float | str]]:  # pragma: no cover - structural
        ...


@dataclass(slots=True)
class ValidationRule:
    """Representation of a single validation rule tied to a device."""

    code: str
    message: str
    severity: ValidationSeverity
    evaluator: RuleEvaluator


@dataclass(slots=True)
class DeviceRuleSet:
    """Group of rules associated with a particular device."""

    device_id: DeviceId
    rules: Iterable[ValidationRule] = field(default_factory=list)


class ValidationEngine:
    """Central coordinator that evaluates rules over feedback requests."""

    def __init__(self) -> None:
        self._rulesets: Dict[DeviceId, DeviceRuleSet] = {}

    def register_ruleset(self, rule_set: DeviceRuleSet, *, override: bool = False) -> None:
        """Register the rule set for a device."""

        if not override and rule_set.device_id in self._rulesets:
            raise ValueError(f"Ruleset for {rule_set.device_id.value} already registered")

        self._rulesets[rule_set.device_id] = rule_set

    def check(
        self,
        request: FeedbackRequest,
        device: DeviceInfo,
        ruleset: Optional[DeviceRuleSet] = None,
    ) -> List[ValidationIssue]:
        """Evaluate all applicable rules and collect issues."""

        if ruleset is None:
            ruleset = self._rulesets.get(device.device_id)
            if ruleset is None:
                return []

        issues: List[ValidationIssue] = []
        for rule in ruleset.rules:
            passed, details = rule.evaluator(request, device)
            if passed:
                continue
            issues.append(
                ValidationIssue(
                    code=rule.code,
                    message=rule.message,
                    severity=rule.severity,
                    details=details,
                )
            )
        return issues

    def get_ruleset(self, device_id: DeviceId) -> DeviceRuleSet:
        """Retrieve the registered ruleset for a device."""

        try:
            return self._rulesets[device_id]
        except KeyError as exc:
            raise DeviceNotSupportedError(f"No ruleset registered for {device_id}") from exc
