"""Result models for priced decoration instructions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from roomcost.models.enums import CoveringKind


class SurfaceCost(BaseModel):
    """Material and cost for one surface (walls or floor) of a room."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    covering_name: str
    covering_kind: CoveringKind
    area: float = Field(ge=0)
    units: int = Field(ge=0)
    cost: int = Field(ge=0)


class DecorationLine(BaseModel):
    """The priced outcome of decorating one room.

    Wall and floor costs are rounded independently before being summed.
    """

    model_config = ConfigDict(frozen=True)

    room_name: str
    walls: SurfaceCost
    floor: SurfaceCost

    @property
    def cost(self) -> int:
        return self.walls.cost + self.floor.cost
