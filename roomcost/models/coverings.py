"""Surface covering models and their pricing rules.

Two pricing families exist:

- **Flat coverage** (paint, wallpaper): priced per square metre.  The
  material used is reported as the covered area rounded up, and the cost
  is ``ceil(area * unit_price)``.
- **Unit coverage** (tiles): sold in discrete units that each cover
  ``area_per_unit`` square metres.  The unit count is
  ``ceil(area / area_per_unit)`` and the cost is
  ``ceil(units * unit_price)``.

Fractional currency is always rounded up so the vendor is never
undercharged.
"""

from __future__ import annotations

import math
from typing import Annotated, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from roomcost.exceptions import InvalidGeometryError
from roomcost.models.enums import CoveringKind


def _ceil(value: float, covering_name: str) -> int:
    if not math.isfinite(value):
        msg = f"Quantity for covering '{covering_name}' is not finite: {value}"
        raise InvalidGeometryError(msg)
    return math.ceil(value)


class _FlatCovering(BaseModel):
    """Shared pricing for coverings priced per square metre."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    name: str
    unit_price: float = Field(ge=0)

    @classmethod
    def priced(cls, name: str, unit_price: float) -> Self:
        """Build a covering, rejecting a negative price.

        Raises:
            InvalidGeometryError: If unit_price is negative.
        """
        try:
            return cls(name=name, unit_price=unit_price)
        except ValidationError as exc:
            msg = f"Invalid {cls.__name__} '{name}': unit_price={unit_price}"
            raise InvalidGeometryError(msg) from exc

    def units_needed(self, area: float) -> int:
        return _ceil(area, self.name)

    def cost(self, area: float) -> int:
        return _ceil(area * self.unit_price, self.name)


class PaintCovering(_FlatCovering):
    """Paint, priced per square metre."""

    kind: Literal[CoveringKind.PAINT] = CoveringKind.PAINT


class WallpaperCovering(_FlatCovering):
    """Wallpaper, priced per square metre."""

    kind: Literal[CoveringKind.WALLPAPER] = CoveringKind.WALLPAPER


class TileCovering(BaseModel):
    """Tiles, each covering a fixed area and sold at a fixed price."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: Literal[CoveringKind.TILE] = CoveringKind.TILE
    name: str
    unit_price: float = Field(ge=0)
    area_per_unit: float = Field(gt=0)

    @classmethod
    def priced(cls, name: str, unit_price: float, area_per_unit: float) -> TileCovering:
        """Build a tile covering.

        Raises:
            InvalidGeometryError: If unit_price is negative or
                area_per_unit is not positive.
        """
        try:
            return cls(name=name, unit_price=unit_price, area_per_unit=area_per_unit)
        except ValidationError as exc:
            msg = (
                f"Invalid tile '{name}': "
                f"unit_price={unit_price}, area_per_unit={area_per_unit}"
            )
            raise InvalidGeometryError(msg) from exc

    def units_needed(self, area: float) -> int:
        return _ceil(area / self.area_per_unit, self.name)

    def cost(self, area: float) -> int:
        return _ceil(self.units_needed(area) * self.unit_price, self.name)


Covering = Annotated[
    PaintCovering | WallpaperCovering | TileCovering,
    Field(discriminator="kind"),
]
