"""Validation rules and engines for feedback requests."""

from .engine import DeviceRuleSet, ValidationEngine, ValidationRule
from .rulesets import register_default_rules

__all__ = [
	"DeviceRuleSet",
	"ValidationEngine",
	"ValidationRule",
	"register_default_rules",
]
