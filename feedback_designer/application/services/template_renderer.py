"""Fill design templates with a solved feedback network."""

from __future__ import annotations

from typing import Dict

from feedback_designer.domain.catalog import ResistorCatalog
from feedback_designer.domain.feedback import FeedbackSolution


def format_kilohms(value: float) -> str:
    """Format ohms as a kilo-ohm value string, e.g. 10000 -> "10k", 4700 -> "4.7k"."""
    return f"{value / 1e3:g}k"


def format_voltage(value: float) -> str:
    return f"{value:.2f}"


class TemplateRenderer:
    """Replaces the fixed placeholder tokens of a device template."""

    def replacements(self, solution: FeedbackSolution, catalog: ResistorCatalog) -> Dict[str, str]:
        return {
            "{{VOUT}}": format_voltage(solution.achieved_voltage),
            "{{R1val}}": format_kilohms(solution.r1),
            "{{R2val}}": format_kilohms(solution.r2),
            "{{R1lcsc}}": catalog.part_id(solution.r1),
            "{{R2lcsc}}": catalog.part_id(solution.r2),
        }

    def render(self, template: str, solution: FeedbackSolution, catalog: ResistorCatalog) -> str:
        """Return ``template`` with every placeholder occurrence substituted."""
        for token, value in self.replacements(solution, catalog).items():
            template = template.replace(token, value)
        return template
