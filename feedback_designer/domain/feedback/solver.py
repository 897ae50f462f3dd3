"""Exhaustive search for the best feedback resistor pair."""

from __future__ import annotations

import heapq
import logging
import math
import numbers
from collections.abc import Iterator
from typing import List, Optional, Tuple

from ..catalog import ResistorCatalog
from ..errors import ConfigurationError, InvalidInputError
from .models import DividerFormula, FeedbackSolution, FeedbackTarget

logger = logging.getLogger(__name__)

# Voltage error dominates among pairs of equal total resistance; across
# different totals 1 mV of error trades against 100 ohm.
VOLTAGE_ERROR_WEIGHT = 1e5

_Candidate = Tuple[float, float, float, float]  # score, r1, r2, achieved voltage


class FeedbackSolver:
    """Weighted two-objective search over every (R1, R2) catalog pair.

    Each pair is graded as ``weight * |Vt - Vout| + |Rt - (R1 + R2)|``, so
    voltage accuracy dominates and total resistance only separates pairs
    with (nearly) equal voltage error. Pairs are visited R1-outer,
    R2-inner in ascending catalog order and the first pair with the
    strictly lowest score wins.
    """

    def __init__(self, voltage_weight: float = VOLTAGE_ERROR_WEIGHT):
        if not math.isfinite(voltage_weight) or voltage_weight <= 0:
            raise ConfigurationError(f"Voltage weight must be positive and finite, got {voltage_weight}")
        self.voltage_weight = voltage_weight

    def solve(
        self,
        formula: DividerFormula,
        target_voltage: float,
        target_total_resistance: float,
        catalog: ResistorCatalog,
    ) -> FeedbackSolution:
        """Return the best-scoring resistor pair for the targets."""
        target = FeedbackTarget(target_voltage, target_total_resistance)

        best: Optional[_Candidate] = None
        for candidate in self._scored_pairs(formula, target, catalog):
            if best is None or candidate[0] < best[0]:
                best = candidate

        if best is None:
            raise ConfigurationError("Divider formula produced no finite voltage for any catalog pair")

        score, r1, r2, achieved = best
        return FeedbackSolution(r1=r1, r2=r2, achieved_voltage=achieved, score=score)

    def rank(
        self,
        formula: DividerFormula,
        target_voltage: float,
        target_total_resistance: float,
        catalog: ResistorCatalog,
        top_n: int = 5,
    ) -> List[FeedbackSolution]:
        """Return the ``top_n`` best pairs, best first.

        Equal scores keep enumeration order, so the head of the list is
        always the pair :meth:`solve` returns.
        """
        if top_n < 1:
            raise InvalidInputError(f"top_n must be at least 1, got {top_n}")
        target = FeedbackTarget(target_voltage, target_total_resistance)

        best = heapq.nsmallest(
            top_n,
            self._scored_pairs(formula, target, catalog),
            key=lambda candidate: candidate[0],
        )
        if not best:
            raise ConfigurationError("Divider formula produced no finite voltage for any catalog pair")

        return [
            FeedbackSolution(r1=r1, r2=r2, achieved_voltage=achieved, score=score)
            for score, r1, r2, achieved in best
        ]

    def _scored_pairs(
        self,
        formula: DividerFormula,
        target: FeedbackTarget,
        catalog: ResistorCatalog,
    ) -> Iterator[_Candidate]:
        values = tuple(catalog.values())
        if not values:
            raise ConfigurationError("Resistor catalog is empty; nothing to search")

        weight = self.voltage_weight
        target_voltage = target.target_voltage
        target_resistance = target.target_total_resistance

        for r1 in values:
            for r2 in values:
                achieved = _evaluate(formula, r1, r2)
                if achieved is None:
                    continue
                score = weight * abs(target_voltage - achieved) + abs(target_resistance - (r1 + r2))
                if not math.isfinite(score):
                    continue
                yield score, r1, r2, achieved


def _evaluate(formula: DividerFormula, r1: float, r2: float) -> Optional[float]:
    """Evaluate the divider, mapping arithmetic failures to ``None``."""
    try:
        voltage = formula(r1, r2)
    except (ArithmeticError, ValueError) as exc:
        logger.debug("Skipping R1=%s R2=%s: %s", r1, r2, exc)
        return None
    if not isinstance(voltage, numbers.Real):
        logger.debug("Skipping R1=%s R2=%s: non-real voltage %r", r1, r2, voltage)
        return None
    if not math.isfinite(voltage):
        logger.debug("Skipping R1=%s R2=%s: non-finite voltage %s", r1, r2, voltage)
        return None
    return voltage


def solve(
    formula: DividerFormula,
    target_voltage: float,
    target_total_resistance: float,
    catalog: ResistorCatalog,
) -> FeedbackSolution:
    """Solve with the default voltage weight."""
    return FeedbackSolver().solve(formula, target_voltage, target_total_resistance, catalog)
