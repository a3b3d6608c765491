"""Enums for the roomcost domain models."""

from enum import StrEnum


class RoomShape(StrEnum):
    """Floor plan shapes a room can have."""

    CIRCULAR = "circular"
    RECTANGULAR = "rectangular"


class CoveringKind(StrEnum):
    """Surface covering materials.

    Paint and wallpaper are priced per square metre covered; tiles are
    sold in discrete units that each cover a fixed area.
    """

    PAINT = "paint"
    WALLPAPER = "wallpaper"
    TILE = "tile"
