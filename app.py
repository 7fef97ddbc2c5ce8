"""Command line interface for the toll fee calculator."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from src.config.env_loader import load_environment_variables

# Load environment variables before the settings are first read
load_environment_variables(Path(__file__).parent)

from pydantic import ValidationError

from src.config.logging_config import setup_logging
from src.config.messages import CLI_INVALID_INPUT, CLI_NO_CHARGEABLE
from src.config.settings import get_settings
from src.core.calculator import EmptyChargeableInputError, TollCalculator
from src.core.policy_loader import PolicyLoader
from src.models.request_models import FeeRequest


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the toll-fee command."""
    parser = argparse.ArgumentParser(
        prog="toll-fee",
        description="Calculate the toll fee for one vehicle's entries into the toll zone.",
    )
    parser.add_argument(
        "timestamps",
        nargs="*",
        help="Entry timestamps in ISO 8601 local time, e.g. 2023-02-01T07:15",
    )
    parser.add_argument("--vehicle", default=None, help="Vehicle type, e.g. Car or Motorbike")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help='JSON request file: {"vehicle_type": ..., "timestamps": [...]}',
    )
    parser.add_argument("--policy", type=Path, default=None, help="Policy JSON file to use")
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Print the per-day breakdown as JSON instead of the bare total",
    )
    return parser


def read_request(args: argparse.Namespace) -> FeeRequest:
    """Build the fee request from a JSON file or from the command line."""
    if args.input is not None:
        return FeeRequest.model_validate_json(args.input.read_text(encoding="utf-8"))
    return FeeRequest(vehicle_type=args.vehicle, timestamps=args.timestamps)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the toll-fee command.

    Returns:
        0 on success, 1 if no entry is chargeable, 2 on invalid input
    """
    args = build_parser().parse_args(argv)

    # stdout carries the result only
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file, stream=sys.stderr)

    try:
        request = read_request(args)
        policy = PolicyLoader.load_from_json(args.policy) if args.policy else None
    except (ValidationError, OSError) as e:
        print(CLI_INVALID_INPUT.format(error=e), file=sys.stderr)
        return 2

    calculator = TollCalculator(policy=policy)
    try:
        result = calculator.calculate(request.vehicle, request.timestamps)
    except EmptyChargeableInputError as e:
        print(CLI_NO_CHARGEABLE.format(error=e), file=sys.stderr)
        return 1

    if args.breakdown:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
