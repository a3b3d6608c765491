"""Decoration registry: the catalog of rooms and coverings plus pricing.

The registry is populated first (rooms and coverings, keyed by unique
name) and then asked to decorate rooms.  Each decoration:

1. **Resolves names**: the room, the wall covering and the floor
   covering must all be registered.
2. **Measures**: wall area and floor area come from the room geometry.
3. **Prices each surface**: units and cost are computed per surface by
   its covering, each cost rounded up on its own.
4. **Accumulates**: the sum of both surface costs is added to the
   running total and the line is written to the report.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from roomcost.exceptions import DuplicateNameError, UnknownNameError
from roomcost.models.coverings import PaintCovering, TileCovering, WallpaperCovering
from roomcost.models.report import DecorationLine, SurfaceCost
from roomcost.models.rooms import CircularRoom, RectangularRoom

if TYPE_CHECKING:
    from collections.abc import Mapping

    from roomcost.formatting import ReportWriter
    from roomcost.models.coverings import Covering
    from roomcost.models.rooms import Room

logger = logging.getLogger(__name__)


class DecorationRegistry:
    """Owns every room and covering of a run and the accumulated total cost.

    Args:
        report: Optional writer that receives one line per decoration and
            the final total.  Without one, results are only returned.

    Example::

        registry = DecorationRegistry()
        registry.add_rectangular_room("R1", width=4, length=5, height=3)
        registry.add_paint("Paint", unit_price=2)
        registry.add_tile("Tile", unit_price=10, area_per_tile=0.25)
        registry.apply("R1", "Paint", "Tile")  # 908
    """

    def __init__(self, report: ReportWriter | None = None) -> None:
        self._rooms: dict[str, Room] = {}
        self._coverings: dict[str, Covering] = {}
        self._total_cost = 0
        self._report = report

    @property
    def rooms(self) -> Mapping[str, Room]:
        return MappingProxyType(self._rooms)

    @property
    def coverings(self) -> Mapping[str, Covering]:
        return MappingProxyType(self._coverings)

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def register_room(self, room: Room) -> Room:
        """Add a room under its name.

        Raises:
            DuplicateNameError: If a room with the same name exists.
        """
        if room.name in self._rooms:
            raise DuplicateNameError("room", room.name)
        self._rooms[room.name] = room
        return room

    def register_covering(self, covering: Covering) -> Covering:
        """Add a covering under its name.

        Raises:
            DuplicateNameError: If a covering with the same name exists.
        """
        if covering.name in self._coverings:
            raise DuplicateNameError("covering", covering.name)
        self._coverings[covering.name] = covering
        return covering

    def add_circular_room(self, name: str, diameter: float, height: float) -> Room:
        return self.register_room(CircularRoom.from_diameter(name, diameter, height))

    def add_rectangular_room(
        self, name: str, width: float, length: float, height: float
    ) -> Room:
        return self.register_room(
            RectangularRoom.from_dimensions(name, width, length, height)
        )

    def add_paint(self, name: str, unit_price: float) -> Covering:
        return self.register_covering(PaintCovering.priced(name, unit_price))

    def add_wallpaper(self, name: str, unit_price: float) -> Covering:
        return self.register_covering(WallpaperCovering.priced(name, unit_price))

    def add_tile(self, name: str, unit_price: float, area_per_tile: float) -> Covering:
        return self.register_covering(TileCovering.priced(name, unit_price, area_per_tile))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_room(self, name: str) -> Room:
        """Return the room registered under name.

        Raises:
            UnknownNameError: If no such room was registered.
        """
        room = self._rooms.get(name)
        if room is None:
            raise UnknownNameError("room", name)
        return room

    def get_covering(self, name: str) -> Covering:
        """Return the covering registered under name.

        Raises:
            UnknownNameError: If no such covering was registered.
        """
        covering = self._coverings.get(name)
        if covering is None:
            raise UnknownNameError("covering", name)
        return covering

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------

    def decorate(
        self, room_name: str, wall_covering_name: str, floor_covering_name: str
    ) -> DecorationLine:
        """Price a room's walls and floor and add the cost to the total.

        All three names are resolved before anything is priced, so a
        failed lookup leaves the total unchanged.

        Raises:
            UnknownNameError: If the room or either covering is unknown.
        """
        room = self.get_room(room_name)
        wall_covering = self.get_covering(wall_covering_name)
        floor_covering = self.get_covering(floor_covering_name)

        line = DecorationLine(
            room_name=room.name,
            walls=_price_surface(wall_covering, room.wall_area()),
            floor=_price_surface(floor_covering, room.floor_area()),
        )

        self._total_cost += line.cost
        logger.debug(
            "Decorated %s: walls=%d floor=%d total=%d",
            room.name,
            line.walls.cost,
            line.floor.cost,
            self._total_cost,
        )
        if self._report is not None:
            self._report.write_decoration(line)
        return line

    def apply(
        self, room_name: str, wall_covering_name: str, floor_covering_name: str
    ) -> int:
        """Decorate a room and return the cost of that single line."""
        return self.decorate(room_name, wall_covering_name, floor_covering_name).cost

    def total_cost(self) -> int:
        return self._total_cost

    def report_total(self) -> int:
        """Write the final total line (if a report is attached) and return it."""
        if self._report is not None:
            self._report.write_total(self._total_cost)
        return self._total_cost


def _price_surface(covering: Covering, area: float) -> SurfaceCost:
    return SurfaceCost(
        covering_name=covering.name,
        covering_kind=covering.kind,
        area=area,
        units=covering.units_needed(area),
        cost=covering.cost(area),
    )
