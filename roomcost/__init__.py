"""roomcost: wall and floor covering cost calculator.

Usage::

    from roomcost import DecorationRegistry

    registry = DecorationRegistry()
    registry.add_circular_room("C1", diameter=4, height=3)
    registry.add_paint("White", unit_price=1)
    registry.apply("C1", "White", "White")  # 51
"""

from roomcost.exceptions import (
    DuplicateNameError,
    InvalidGeometryError,
    MalformedRecordError,
    RoomCostError,
    UnknownNameError,
)
from roomcost.factory import create_registry
from roomcost.formatting import ReportWriter
from roomcost.models.coverings import (
    Covering,
    PaintCovering,
    TileCovering,
    WallpaperCovering,
)
from roomcost.models.enums import CoveringKind, RoomShape
from roomcost.models.report import DecorationLine, SurfaceCost
from roomcost.models.rooms import CircularRoom, RectangularRoom, Room
from roomcost.pipeline import DecorationPipeline, PipelineResult
from roomcost.registry import DecorationRegistry

__all__ = [
    "CircularRoom",
    "Covering",
    "CoveringKind",
    "DecorationLine",
    "DecorationPipeline",
    "DecorationRegistry",
    "DuplicateNameError",
    "InvalidGeometryError",
    "MalformedRecordError",
    "PaintCovering",
    "PipelineResult",
    "RectangularRoom",
    "ReportWriter",
    "Room",
    "RoomCostError",
    "RoomShape",
    "SurfaceCost",
    "TileCovering",
    "UnknownNameError",
    "WallpaperCovering",
    "create_registry",
]
