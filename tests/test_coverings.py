"""Tests for covering models and their pricing rules."""

from __future__ import annotations

import math

import pytest

from roomcost.exceptions import InvalidGeometryError
from roomcost.models.coverings import PaintCovering, TileCovering, WallpaperCovering
from roomcost.models.enums import CoveringKind


class TestFlatCoverings:
    def test_paint_cost_rounds_up(self) -> None:
        paint = PaintCovering.priced("White", unit_price=2.0)
        assert paint.cost(54.0) == 108
        assert paint.cost(10.1) == 21

    def test_paint_units_are_area_rounded_up(self) -> None:
        paint = PaintCovering.priced("White", unit_price=2.0)
        assert paint.units_needed(54.0) == 54
        assert paint.units_needed(37.7) == 38

    def test_wallpaper_prices_like_paint(self) -> None:
        wallpaper = WallpaperCovering.priced("Floral", unit_price=3.5)
        assert wallpaper.kind == CoveringKind.WALLPAPER
        assert wallpaper.cost(12.566) == math.ceil(12.566 * 3.5)
        assert wallpaper.units_needed(12.566) == 13

    def test_zero_area(self) -> None:
        paint = PaintCovering.priced("White", unit_price=2.0)
        assert paint.cost(0.0) == 0
        assert paint.units_needed(0.0) == 0

    def test_cost_is_non_decreasing_in_area(self) -> None:
        paint = PaintCovering.priced("White", unit_price=1.3)
        costs = [paint.cost(a / 4) for a in range(200)]
        assert costs == sorted(costs)

    def test_free_paint_costs_nothing(self) -> None:
        paint = PaintCovering.priced("Sample", unit_price=0.0)
        assert paint.cost(100.0) == 0

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError, match="White"):
            PaintCovering.priced("White", unit_price=-1.0)

    def test_priced_returns_own_kind(self) -> None:
        assert isinstance(WallpaperCovering.priced("W", 1.0), WallpaperCovering)
        assert PaintCovering.priced("P", 1.0).kind == CoveringKind.PAINT


class TestTileCovering:
    def test_units_and_cost(self) -> None:
        tile = TileCovering.priced("Blue", unit_price=10.0, area_per_unit=0.25)
        assert tile.units_needed(20.0) == 80
        assert tile.cost(20.0) == 800

    def test_partial_tile_rounds_up(self) -> None:
        tile = TileCovering.priced("Blue", unit_price=10.0, area_per_unit=0.25)
        assert tile.units_needed(20.01) == 81
        assert tile.cost(20.01) == 810

    def test_fractional_price_rounds_up_after_counting(self) -> None:
        tile = TileCovering.priced("Cheap", unit_price=0.3, area_per_unit=1.0)
        # 13 tiles * 0.3 = 3.9 -> 4
        assert tile.units_needed(12.566) == 13
        assert tile.cost(12.566) == 4

    def test_zero_area(self) -> None:
        tile = TileCovering.priced("Blue", unit_price=10.0, area_per_unit=0.25)
        assert tile.units_needed(0.0) == 0
        assert tile.cost(0.0) == 0

    @pytest.mark.parametrize("area_per_unit", [0.0, -0.5])
    def test_non_positive_area_per_unit_rejected(self, area_per_unit: float) -> None:
        with pytest.raises(InvalidGeometryError, match="Blue"):
            TileCovering.priced("Blue", unit_price=10.0, area_per_unit=area_per_unit)


class TestNonFiniteQuantities:
    def test_infinite_price_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError):
            PaintCovering.priced("White", unit_price=math.inf)

    def test_nan_tile_area_rejected(self) -> None:
        with pytest.raises(InvalidGeometryError):
            TileCovering.priced("Blue", unit_price=1.0, area_per_unit=math.nan)

    def test_overflowing_tile_count(self) -> None:
        tile = TileCovering.priced("Dust", unit_price=1.0, area_per_unit=1e-320)
        with pytest.raises(InvalidGeometryError, match="Dust"):
            tile.units_needed(20.0)
        with pytest.raises(InvalidGeometryError, match="Dust"):
            tile.cost(20.0)

    def test_overflowing_area(self) -> None:
        paint = PaintCovering.priced("White", unit_price=2.0)
        with pytest.raises(InvalidGeometryError):
            paint.cost(1e308 * 10)
        with pytest.raises(InvalidGeometryError):
            paint.cost(1e308)
