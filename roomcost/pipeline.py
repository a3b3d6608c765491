"""Decoration pipeline: items file + instructions file -> priced report."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from roomcost.config import Settings
from roomcost.formatting import ReportWriter
from roomcost.ingest import iter_instructions, load_items
from roomcost.registry import DecorationRegistry

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result of one complete decoration run."""

    total_cost: int
    items_loaded: int
    lines_written: int
    processing_time_seconds: float


class DecorationPipeline:
    """Runs a full batch: populate, decorate each room, write the total.

    The first error aborts the run.  Lines already written stay in the
    output file, and the total line is not written.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()

    def run(
        self,
        items_path: Path,
        instructions_path: Path,
        output_path: Path,
    ) -> PipelineResult:
        """Process both input files and write the report to output_path.

        Raises
        ------
        MalformedRecordError
            If a record cannot be parsed.
        UnknownNameError
            If an instruction names an unregistered room or covering.
        DuplicateNameError
            If a room or covering name is declared twice.
        InvalidGeometryError
            If a dimension, price or tile area is out of range.
        """
        start = time.monotonic()
        settings = self._settings

        with output_path.open("w", encoding=settings.encoding) as out:
            report = ReportWriter(out)
            registry = DecorationRegistry(report)
            items_loaded = load_items(
                registry,
                items_path,
                delimiter=settings.delimiter,
                encoding=settings.encoding,
            )

            with instructions_path.open(encoding=settings.encoding) as fh:
                for instruction in iter_instructions(fh, settings.delimiter):
                    registry.apply(
                        instruction.room_name,
                        instruction.wall_covering,
                        instruction.floor_covering,
                    )

            total = registry.report_total()

        elapsed = time.monotonic() - start
        logger.info(
            "Decorated %d rooms for %dTL in %.3fs",
            report.lines_written,
            total,
            elapsed,
        )
        return PipelineResult(
            total_cost=total,
            items_loaded=items_loaded,
            lines_written=report.lines_written,
            processing_time_seconds=elapsed,
        )
