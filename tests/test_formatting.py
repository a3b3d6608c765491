"""Tests for report formatting and the ReportWriter sink."""

from __future__ import annotations

import io

import pytest

from roomcost.formatting import (
    ReportWriter,
    format_decoration,
    format_quantity,
    format_total,
)
from roomcost.models.enums import CoveringKind
from roomcost.models.report import DecorationLine, SurfaceCost

# ---------- Helpers ----------


def _line(
    wall_kind: CoveringKind = CoveringKind.PAINT,
    floor_kind: CoveringKind = CoveringKind.TILE,
) -> DecorationLine:
    return DecorationLine(
        room_name="A101",
        walls=SurfaceCost(
            covering_name="White", covering_kind=wall_kind, area=54.0, units=54, cost=108
        ),
        floor=SurfaceCost(
            covering_name="Blue", covering_kind=floor_kind, area=20.0, units=80, cost=800
        ),
    )


# ---------- format_quantity ----------


class TestFormatQuantity:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (CoveringKind.PAINT, "12m2 of Paint"),
            (CoveringKind.WALLPAPER, "12m2 of Wallpaper"),
            (CoveringKind.TILE, "12 Tiles"),
        ],
    )
    def test_suffix_per_kind(self, kind: CoveringKind, expected: str) -> None:
        assert format_quantity(12, kind) == expected


# ---------- format_decoration / format_total ----------


class TestFormatLines:
    def test_decoration_line(self) -> None:
        assert format_decoration(_line()) == (
            "Classroom A101 used 54m2 of Paint for walls and used 80 Tiles "
            "for flooring, these costed 908TL."
        )

    def test_wallpaper_on_walls_and_paint_on_floor(self) -> None:
        text = format_decoration(_line(CoveringKind.WALLPAPER, CoveringKind.PAINT))
        assert "used 54m2 of Wallpaper for walls" in text
        assert "used 80m2 of Paint for flooring" in text

    def test_total_line(self) -> None:
        assert format_total(1816) == "Total price is: 1816TL."

    def test_zero_total(self) -> None:
        assert format_total(0) == "Total price is: 0TL."


# ---------- ReportWriter ----------


class TestReportWriter:
    def test_lines_end_with_newline_total_does_not(self) -> None:
        sink = io.StringIO()
        writer = ReportWriter(sink)
        writer.write_decoration(_line())
        writer.write_decoration(_line())
        writer.write_total(1816)

        lines = sink.getvalue().split("\n")
        assert len(lines) == 3
        assert lines[2] == "Total price is: 1816TL."
        assert not sink.getvalue().endswith("\n")
        assert writer.lines_written == 2

    def test_does_not_close_sink(self) -> None:
        sink = io.StringIO()
        ReportWriter(sink).write_total(5)
        assert not sink.closed
