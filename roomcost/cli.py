"""Command-line interface: ``roomcost ITEMS INSTRUCTIONS OUTPUT``."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import pathlib

from roomcost.config import LOG_LEVELS, load_settings
from roomcost.exceptions import RoomCostError
from roomcost.pipeline import DecorationPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roomcost",
        description="Price wall and floor coverings for a set of rooms",
    )
    parser.add_argument("items", help="Path to the rooms and coverings file")
    parser.add_argument("instructions", help="Path to the decoration instructions file")
    parser.add_argument("output", help="Path to write the priced report")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (overrides ROOMCOST_LOG_LEVEL)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        parser.error(str(exc))
    if args.log_level:
        settings = dataclasses.replace(settings, log_level=args.log_level)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pipeline = DecorationPipeline(settings)
    try:
        pipeline.run(
            pathlib.Path(args.items),
            pathlib.Path(args.instructions),
            pathlib.Path(args.output),
        )
    except RoomCostError as exc:
        logger.error("Run aborted: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
