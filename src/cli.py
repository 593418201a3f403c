"""Command line interface: reconstruct the secret from a share-set JSON file."""

import argparse
import logging
import sys
from typing import Optional, Sequence

import jsonschema

from src.core.domain.share_set import ShareSet
from src.interpolation.reconstructor import ReconstructionConfig, reconstruct_share_set
from src.interpolation.report import format_report

logger = logging.getLogger("lagrange_recover")

DEFAULT_INPUT = "data/input.json"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INSUFFICIENT_POINTS = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lagrange-recover",
        description="Recover f(0) from threshold shares with exact Lagrange interpolation",
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="Share-set JSON file")
    parser.add_argument(
        "--preview-digits",
        type=int,
        default=ReconstructionConfig.preview_digits,
        help="Leading digits of each decoded share shown in the report",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = ReconstructionConfig(preview_digits=args.preview_digits)
        share_set = ShareSet.from_file(args.input)
        points, result = reconstruct_share_set(share_set, config)
    except (OSError, ValueError, ArithmeticError, jsonschema.ValidationError) as exc:
        # ValueError покрывает JSONDecodeError, pydantic.ValidationError,
        # InvalidDigit и DuplicateAbscissa, ArithmeticError покрывает NonIntegerResult
        logger.error("Reconstruction failed: %s", exc)
        return EXIT_ERROR

    print(format_report(share_set, points, result, config))
    return EXIT_OK if result.succeeded else EXIT_INSUFFICIENT_POINTS


if __name__ == "__main__":
    sys.exit(main())
