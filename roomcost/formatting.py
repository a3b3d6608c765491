"""Formatting helpers for decoration report output.

One line is produced per decorated room, e.g.::

    Classroom A101 used 54m2 of Paint for walls and used 80 Tiles for flooring, these costed 908TL.

followed by a single ``Total price is: <total>TL.`` line with no
trailing newline.  All numbers are already integers when they reach
this module and are printed as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from roomcost.models.enums import CoveringKind

if TYPE_CHECKING:
    from typing import TextIO

    from roomcost.models.report import DecorationLine

CURRENCY = "TL"

_SUFFIXES: dict[CoveringKind, str] = {
    CoveringKind.PAINT: "m2 of Paint",
    CoveringKind.WALLPAPER: "m2 of Wallpaper",
    CoveringKind.TILE: " Tiles",
}


def format_quantity(units: int, kind: CoveringKind) -> str:
    """Format a material quantity with its kind suffix (e.g. '54m2 of Paint')."""
    return f"{units}{_SUFFIXES[kind]}"


def format_decoration(line: DecorationLine) -> str:
    """Format the report line for one decorated room, without newline."""
    walls = format_quantity(line.walls.units, line.walls.covering_kind)
    floor = format_quantity(line.floor.units, line.floor.covering_kind)
    return (
        f"Classroom {line.room_name} used {walls} for walls and used {floor} "
        f"for flooring, these costed {line.cost}{CURRENCY}."
    )


def format_total(total: int) -> str:
    """Format the closing total-cost line."""
    return f"Total price is: {total}{CURRENCY}."


class ReportWriter:
    """Writes report lines to an explicit text sink.

    The sink is owned by the caller; the writer never opens or closes it.
    """

    def __init__(self, sink: TextIO) -> None:
        self._sink = sink
        self.lines_written = 0

    def write_decoration(self, line: DecorationLine) -> None:
        self._sink.write(format_decoration(line) + "\n")
        self.lines_written += 1

    def write_total(self, total: int) -> None:
        self._sink.write(format_total(total))
