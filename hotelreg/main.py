from __future__ import annotations

import argparse
import json
from typing import Sequence

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

from hotelreg.infrastructure.config import settings
from hotelreg.infrastructure.logging_config import setup_logging
from hotelreg.services.reservation_service import (
    StepOutcome,
    build_registry,
    list_bookings_service,
    load_scenario,
    run_scenario,
)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hotelreg-demo",
        description="Replay a booking scenario against a fresh reservation registry.",
    )
    parser.add_argument("--scenario", default=str(settings.scenario_path), help="YAML scenario file")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level.upper())
    parser.add_argument("--json", action="store_true", help="print the final bookings as JSON")
    return parser.parse_args(argv)


def format_outcome(outcome: StepOutcome) -> str:
    label = f"[{outcome.index}] {outcome.action}"
    if outcome.description:
        label += f" ({outcome.description})"

    if outcome.ok:
        booking = outcome.booking
        return f"{label}: ok, booking #{booking.booking_id} total {booking.total_price}"
    return f"{label}: {outcome.error_kind.value}: {outcome.message}"


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    scenario = load_scenario(args.scenario)
    registry = build_registry()

    for outcome in run_scenario(scenario, registry):
        print(format_outcome(outcome))

    if args.json:
        bookings = [summary.model_dump(mode="json") for summary in list_bookings_service(registry)]
        print(json.dumps(bookings, indent=2))
    else:
        print("Active bookings:")
        for line in registry.list_summaries():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
