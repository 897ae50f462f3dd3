"""Command line entry point for headless feedback design."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from feedback_designer.application.services import FeedbackDesignService
from feedback_designer.application.services.template_renderer import format_kilohms
from feedback_designer.domain.errors import FeedbackDesignError
from feedback_designer.domain.regulators import DeviceId
from feedback_designer.shared.config import AppConfig
from feedback_designer.shared.dto import FeedbackRequest
from feedback_designer.shared.logging_config import setup_logging
from .bootstrap import build_design_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feedback-designer",
        description="Pick standard feedback resistors for a step-down regulator.",
    )
    parser.add_argument("device", choices=[device.value for device in DeviceId])
    parser.add_argument("voltage", type=float, help="target output voltage (V)")
    parser.add_argument("resistance", type=float, help="target R1 + R2 (kilo-ohms)")
    parser.add_argument(
        "--alternatives",
        action="store_true",
        help="also list the best-scoring alternative pairs",
    )
    parser.add_argument("--env-file", default=None, help="dotenv file to load")
    return parser


def main(argv: Optional[Sequence[str]] = None, service: Optional[FeedbackDesignService] = None) -> int:
    args = build_parser().parse_args(argv)
    config = AppConfig.from_env(args.env_file)
    setup_logging(config.logging.level, config.logging.log_file)

    try:
        service = service or build_design_service(config)
        result = service.run(
            FeedbackRequest(
                device_id=args.device,
                target_voltage=args.voltage,
                target_total_resistance=args.resistance * 1e3,
            )
        )
    except FeedbackDesignError as exc:
        logger.error(f"Design failed: {exc}")
        print(f"error: {exc}", file=sys.stderr)
        return 1

    solution = result.solution
    print(f"R1: {format_kilohms(solution.r1)} ({result.r1_part})")
    print(f"R2: {format_kilohms(solution.r2)} ({result.r2_part})")
    print(f"Achieved Voltage: {solution.achieved_voltage:.3f}V")
    for issue in result.issues:
        print(f"{issue.severity.value}: {issue.message}")

    if args.alternatives:
        print()
        for candidate in result.alternatives:
            print(
                f"  {format_kilohms(candidate.r1):>6} / {format_kilohms(candidate.r2):<6}"
                f" {candidate.achieved_voltage:.4f}V  score {candidate.score:.1f}"
            )

    print()
    print(result.design_text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
