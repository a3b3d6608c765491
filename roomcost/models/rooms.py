"""Room geometry models.

Each room variant knows how to compute the area of its walls and of its
floor from the dimensions it was built with.  Rooms are immutable once
constructed.
"""

from __future__ import annotations

import math
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from roomcost.exceptions import InvalidGeometryError
from roomcost.models.enums import RoomShape


class CircularRoom(BaseModel):
    """A cylindrical room described by its radius and ceiling height."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    shape: Literal[RoomShape.CIRCULAR] = RoomShape.CIRCULAR
    name: str
    radius: float = Field(gt=0)
    height: float = Field(gt=0)

    @classmethod
    def from_diameter(cls, name: str, diameter: float, height: float) -> CircularRoom:
        """Build a circular room from its diameter.

        Raises:
            InvalidGeometryError: If diameter or height is not positive.
        """
        try:
            return cls(name=name, radius=diameter / 2, height=height)
        except ValidationError as exc:
            msg = f"Invalid circular room '{name}': diameter={diameter}, height={height}"
            raise InvalidGeometryError(msg) from exc

    @property
    def diameter(self) -> float:
        return self.radius * 2

    def wall_area(self) -> float:
        return 2 * math.pi * self.radius * self.height

    def floor_area(self) -> float:
        return math.pi * self.radius * self.radius


class RectangularRoom(BaseModel):
    """A box-shaped room described by width, length and ceiling height."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    shape: Literal[RoomShape.RECTANGULAR] = RoomShape.RECTANGULAR
    name: str
    width: float = Field(gt=0)
    length: float = Field(gt=0)
    height: float = Field(gt=0)

    @classmethod
    def from_dimensions(
        cls, name: str, width: float, length: float, height: float
    ) -> RectangularRoom:
        """Build a rectangular room.

        Raises:
            InvalidGeometryError: If any dimension is not positive.
        """
        try:
            return cls(name=name, width=width, length=length, height=height)
        except ValidationError as exc:
            msg = (
                f"Invalid rectangular room '{name}': "
                f"width={width}, length={length}, height={height}"
            )
            raise InvalidGeometryError(msg) from exc

    def wall_area(self) -> float:
        return 2 * (self.width + self.length) * self.height

    def floor_area(self) -> float:
        return self.width * self.length


Room = Annotated[CircularRoom | RectangularRoom, Field(discriminator="shape")]
