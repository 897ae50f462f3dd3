"""Adapter to connect the Gradio UI with the application logic."""

import logging
from typing import List, Optional, Tuple

import pandas as pd

from feedback_designer.application.services import FeedbackDesignService, ValidationFailedError
from feedback_designer.application.services.template_renderer import format_kilohms
from feedback_designer.domain.errors import FeedbackDesignError
from feedback_designer.domain.feedback import FeedbackSolution
from feedback_designer.domain.regulators import DeviceInfo
from feedback_designer.shared.config import AppConfig
from feedback_designer.shared.dto import FeedbackDesignResult, FeedbackRequest, ValidationSeverity
from .bootstrap import build_design_service
from .form_schema import TARGET_RESISTANCE, TARGET_VOLTAGE

logger = logging.getLogger(__name__)

CANDIDATE_COLUMNS = ["#", "R1", "R2", "R1 LCSC", "R2 LCSC", "Vout (V)", "Error (mV)", "R1+R2", "Score"]

_SEVERITY_ICONS = {
    ValidationSeverity.ERROR: "⛔",
    ValidationSeverity.WARNING: "⚠️",
    ValidationSeverity.INFO: "ℹ️",
}


def _create_empty_df() -> pd.DataFrame:
    return pd.DataFrame(columns=CANDIDATE_COLUMNS)


def _as_float(value: Optional[float]) -> float:
    # Cleared gr.Number fields arrive as None
    return float("nan") if value is None else float(value)


class GradioAdapter:
    def __init__(
        self,
        service: Optional[FeedbackDesignService] = None,
        config: Optional[AppConfig] = None,
    ):
        self.service = service or build_design_service(config)

    def get_device_choices(self) -> List[Tuple[str, str]]:
        """Returns list of (Display Name, ID) for the device dropdown."""
        return [(device.name, device.device_id.value) for device in self.service.available_devices()]

    def describe_device(self, device_id: str) -> str:
        """Markdown summary of a device's operating ranges."""
        if not device_id:
            return ""
        try:
            device = self.service.resolve_device(device_id)
        except FeedbackDesignError as exc:
            return f"⛔ {exc}"
        return self._device_markdown(device)

    def run_design(
        self,
        device_id: str,
        target_voltage: Optional[float],
        target_resistance_k: Optional[float],
    ) -> Tuple[str, pd.DataFrame, str]:
        """
        Executes the feedback design workflow.
        Returns:
            - Markdown report string
            - Pandas DataFrame with the best-scoring alternatives
            - Design text ready to paste into KiCad
        """
        if not device_id:
            return "Select a device.", _create_empty_df(), ""

        try:
            request = FeedbackRequest(
                device_id=device_id,
                target_voltage=_as_float(target_voltage) * TARGET_VOLTAGE.scale,
                target_total_resistance=_as_float(target_resistance_k) * TARGET_RESISTANCE.scale,
            )
            result = self.service.run(request)
        except ValidationFailedError as exc:
            logger.warning(f"Design request failed validation: {exc}")
            issues = "\n".join(f"- {issue.message}" for issue in exc.issues)
            return f"### ⛔ Invalid design request\n\n{issues}", _create_empty_df(), ""
        except FeedbackDesignError as exc:
            logger.warning(f"Design request rejected: {exc}")
            return f"### ⛔ Invalid design request\n\n{exc}", _create_empty_df(), ""
        except Exception as exc:
            logger.exception("Error running design")
            return f"### ❌ System error\n\n{exc}", _create_empty_df(), ""

        return self._generate_markdown_report(result), self._candidates_df(result), result.design_text

    def _device_markdown(self, device: DeviceInfo) -> str:
        lines = [
            f"**Vin:** {device.vin_min:g}V - {device.vin_max:g}V",
            f"**Vout:** {device.vout_min:g}V - {device.vout_max:g}V",
            f"**Output current:** {device.current_max:g}A",
        ]
        if device.description:
            lines.insert(0, f"*{device.description}*")
        return "\n\n".join(lines)

    def _generate_markdown_report(self, result: FeedbackDesignResult) -> str:
        solution = result.solution
        lines = [
            f"## Solution: {result.device_name}",
            f"- **R1:** {format_kilohms(solution.r1)} ({result.r1_part})",
            f"- **R2:** {format_kilohms(solution.r2)} ({result.r2_part})",
            f"- **Achieved Voltage:** {solution.achieved_voltage:.3f}V",
            f"- **Total Resistance:** {format_kilohms(solution.total_resistance)}",
        ]
        if result.issues:
            lines.append("\n### Notes")
            for issue in result.issues:
                lines.append(f"- {_SEVERITY_ICONS[issue.severity]} {issue.message}")
        return "\n".join(lines)

    def _candidates_df(self, result: FeedbackDesignResult) -> pd.DataFrame:
        rows = [
            self._candidate_row(index, candidate, result.request.target_voltage)
            for index, candidate in enumerate(result.alternatives, start=1)
        ]
        if not rows:
            return _create_empty_df()
        return pd.DataFrame(rows, columns=CANDIDATE_COLUMNS)

    def _candidate_row(self, index: int, candidate: FeedbackSolution, target_voltage: float) -> list:
        catalog = self.service.catalog
        return [
            index,
            format_kilohms(candidate.r1),
            format_kilohms(candidate.r2),
            catalog.part_id(candidate.r1),
            catalog.part_id(candidate.r2),
            round(candidate.achieved_voltage, 4),
            round(candidate.voltage_error(target_voltage) * 1e3, 2),
            format_kilohms(candidate.total_resistance),
            round(candidate.score, 1),
        ]
