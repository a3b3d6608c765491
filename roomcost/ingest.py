"""Parsing of the two delimited input files.

The items file declares rooms and coverings, one per line::

    CLASSROOM   <name>  Circle  <diameter>  [<unused>]  <height>
    CLASSROOM   <name>  <other> <width>     <length>    <height>
    DECORATION  <name>  Tile    <unit price> <area per tile>
    DECORATION  <name>  Paint|Wallpaper  <unit price>

The instructions file lists one decoration per line::

    <room name>  <wall covering name>  <floor covering name>
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from roomcost.config import DEFAULT_DELIMITER, DEFAULT_ENCODING
from roomcost.exceptions import MalformedRecordError
from roomcost.models.coverings import PaintCovering, TileCovering, WallpaperCovering
from roomcost.models.rooms import CircularRoom, RectangularRoom

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from roomcost.models.coverings import Covering
    from roomcost.models.rooms import Room
    from roomcost.registry import DecorationRegistry

logger = logging.getLogger(__name__)

ROOM_TAG = "CLASSROOM"
COVERING_TAG = "DECORATION"
CIRCLE_SHAPE = "Circle"


class DecorationInstruction(BaseModel):
    """One request to decorate a room's walls and floor."""

    model_config = ConfigDict(frozen=True)

    room_name: str
    wall_covering: str
    floor_covering: str


def split_record(line: str, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """Split a raw line into fields, dropping the line terminator."""
    return line.rstrip("\r\n").split(delimiter)


def _number(value: str, field: str, line_number: int | None) -> float:
    try:
        number = float(value)
    except ValueError:
        msg = f"{field} is not a number: {value!r}"
        raise MalformedRecordError(msg, line_number) from None
    if not math.isfinite(number):
        msg = f"{field} is not finite: {value!r}"
        raise MalformedRecordError(msg, line_number)
    return number


def _require(fields: list[str], counts: tuple[int, ...], line_number: int | None) -> None:
    if len(fields) not in counts:
        expected = " or ".join(str(c) for c in counts)
        msg = f"{fields[0]} record needs {expected} fields, got {len(fields)}"
        raise MalformedRecordError(msg, line_number)


def parse_room(fields: list[str], line_number: int | None = None) -> Room:
    """Build a room from the fields of a CLASSROOM record."""
    if len(fields) < 5:
        _require(fields, (5, 6), line_number)
    name, shape = fields[1], fields[2]
    if shape == CIRCLE_SHAPE:
        _require(fields, (5, 6), line_number)
        diameter = _number(fields[3], "diameter", line_number)
        height = _number(fields[-1], "height", line_number)
        return CircularRoom.from_diameter(name, diameter, height)

    _require(fields, (6,), line_number)
    return RectangularRoom.from_dimensions(
        name,
        width=_number(fields[3], "width", line_number),
        length=_number(fields[4], "length", line_number),
        height=_number(fields[5], "height", line_number),
    )


def parse_covering(fields: list[str], line_number: int | None = None) -> Covering:
    """Build a covering from the fields of a DECORATION record."""
    if len(fields) < 4:
        _require(fields, (4, 5), line_number)
    name, kind = fields[1], fields[2]
    unit_price = _number(fields[3], "unit price", line_number)
    if kind == "Tile":
        _require(fields, (5,), line_number)
        area_per_tile = _number(fields[4], "area per tile", line_number)
        return TileCovering.priced(name, unit_price, area_per_tile)

    _require(fields, (4, 5), line_number)
    if kind == "Paint":
        return PaintCovering.priced(name, unit_price)
    if kind == "Wallpaper":
        return WallpaperCovering.priced(name, unit_price)
    msg = f"unknown decoration kind {kind!r}"
    raise MalformedRecordError(msg, line_number)


def parse_instruction(
    fields: list[str], line_number: int | None = None
) -> DecorationInstruction:
    """Build a decoration instruction from a three-field record."""
    if len(fields) != 3:
        msg = f"decoration instruction needs 3 fields, got {len(fields)}"
        raise MalformedRecordError(msg, line_number)
    return DecorationInstruction(
        room_name=fields[0], wall_covering=fields[1], floor_covering=fields[2]
    )


def _records(lines: Iterable[str], delimiter: str) -> Iterator[tuple[int, list[str]]]:
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        yield line_number, split_record(line, delimiter)


def populate(
    registry: DecorationRegistry,
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> int:
    """Register every room and covering in ``lines``; return the count."""
    count = 0
    for line_number, fields in _records(lines, delimiter):
        tag = fields[0]
        if tag == ROOM_TAG:
            registry.register_room(parse_room(fields, line_number))
        elif tag == COVERING_TAG:
            registry.register_covering(parse_covering(fields, line_number))
        else:
            msg = f"unknown record type {tag!r}"
            raise MalformedRecordError(msg, line_number)
        count += 1
    return count


def iter_instructions(
    lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER
) -> Iterator[DecorationInstruction]:
    """Yield decoration instructions in file order."""
    for line_number, fields in _records(lines, delimiter):
        yield parse_instruction(fields, line_number)


def load_items(
    registry: DecorationRegistry,
    path: Path,
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Populate ``registry`` from an items file."""
    with path.open(encoding=encoding) as fh:
        count = populate(registry, fh, delimiter)
    logger.info("Loaded %d items from %s", count, path)
    return count
