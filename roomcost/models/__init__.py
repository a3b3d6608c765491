"""Domain models for roomcost."""

from roomcost.models.coverings import (
    Covering,
    PaintCovering,
    TileCovering,
    WallpaperCovering,
)
from roomcost.models.enums import CoveringKind, RoomShape
from roomcost.models.report import DecorationLine, SurfaceCost
from roomcost.models.rooms import CircularRoom, RectangularRoom, Room

__all__ = [
    "CircularRoom",
    "Covering",
    "CoveringKind",
    "DecorationLine",
    "PaintCovering",
    "RectangularRoom",
    "Room",
    "RoomShape",
    "SurfaceCost",
    "TileCovering",
    "WallpaperCovering",
]
