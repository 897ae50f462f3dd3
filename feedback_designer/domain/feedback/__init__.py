"""Feedback divider search."""

from .models import DividerFormula, FeedbackSolution, FeedbackTarget
from .solver import VOLTAGE_ERROR_WEIGHT, FeedbackSolver, solve

__all__ = [
    "DividerFormula",
    "FeedbackSolution",
    "FeedbackTarget",
    "FeedbackSolver",
    "VOLTAGE_ERROR_WEIGHT",
    "solve",
]
