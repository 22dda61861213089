"""Unit tests for the outline offsetter."""

import math

import pytest

from glyphbold.config import OffsetConfig
from glyphbold.core.geometry import signed_area
from glyphbold.core.offset import deduplicate, offset_outline, polyline_normals
from glyphbold.domain import Point
from glyphbold.exceptions import DegenerateContourError, InvalidParameterError

SQUARE = [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0), Point(0.0, 10.0)]
HALF_SQRT2 = math.sqrt(2) / 2


def _approx(point: Point, x: float, y: float) -> bool:
    return point.x == pytest.approx(x, abs=1e-9) and point.y == pytest.approx(y, abs=1e-9)


class TestDeduplicate:
    """Tests for grid-based vertex deduplication."""

    def test_merges_points_in_same_cell(self):
        points = [Point(0.1, 0.1), Point(0.9, 0.2), Point(5.0, 5.0), Point(5.5, 5.1)]
        assert deduplicate(points, 1.0) == [Point(0.1, 0.1), Point(5.0, 5.0)]

    def test_keeps_first_and_preserves_order(self):
        points = [Point(3, 3), Point(1, 1), Point(3.2, 3.4), Point(2, 2)]
        assert deduplicate(points, 1.0) == [Point(3, 3), Point(1, 1), Point(2, 2)]

    def test_non_adjacent_duplicates_removed(self):
        points = [Point(0, 0), Point(5, 0), Point(0.5, 0.5)]
        assert deduplicate(points, 1.0) == [Point(0, 0), Point(5, 0)]

    def test_negative_coordinates_use_floor(self):
        """-0.5 and 0.5 fall in different cells."""
        assert len(deduplicate([Point(-0.5, 0), Point(0.5, 0)], 1.0)) == 2

    def test_idempotent(self):
        points = [Point(i * 0.7, (i * 1.3) % 5) for i in range(40)]
        once = deduplicate(points, 1.5)
        assert deduplicate(once, 1.5) == once

    def test_coarse_resolution_collapses(self):
        assert len(deduplicate(SQUARE, 1000.0)) == 1

    @pytest.mark.parametrize("resolution", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_resolution(self, resolution):
        with pytest.raises(InvalidParameterError):
            deduplicate(SQUARE, resolution)

    def test_resolution_too_small_for_coordinates(self):
        """A tiny but positive cell size overflows the cell index."""
        with pytest.raises(InvalidParameterError) as exc_info:
            deduplicate(SQUARE, 1e-320)
        assert exc_info.value.name == "sampling_resolution"


class TestPolylineNormals:
    """Tests for per-vertex miter normals."""

    def test_one_entry_per_vertex(self):
        assert len(polyline_normals(SQUARE)) == 4

    def test_square_corner_miter(self):
        normals = polyline_normals(SQUARE)
        (nx, ny), length = normals[1]

        assert nx == pytest.approx(-HALF_SQRT2)
        assert ny == pytest.approx(HALF_SQRT2)
        assert length == pytest.approx(math.sqrt(2))

    def test_seam_vertex_uses_wrap_miter(self):
        (nx, ny), length = polyline_normals(SQUARE)[0]

        assert nx == pytest.approx(HALF_SQRT2)
        assert ny == pytest.approx(HALF_SQRT2)
        assert length == pytest.approx(math.sqrt(2))

    def test_straight_run_has_unit_miter(self):
        line = [Point(0, 0), Point(5, 0), Point(10, 0), Point(10, 10)]
        (nx, ny), length = polyline_normals(line, closed=False)[1]

        assert (nx, ny) == pytest.approx((0.0, 1.0))
        assert length == pytest.approx(1.0)

    def test_open_polyline_endpoints_use_segment_normals(self):
        line = [Point(0, 0), Point(10, 0), Point(10, 10)]
        normals = polyline_normals(line, closed=False)

        assert normals[0][0] == pytest.approx((0.0, 1.0))
        assert normals[-1][0] == pytest.approx((-1.0, 0.0))

    def test_reversal_falls_back_to_segment_normal(self):
        normals = polyline_normals([Point(0, 0), Point(10, 0)])

        for (nx, ny), length in normals:
            assert math.isfinite(nx) and math.isfinite(ny)
            assert length == 1.0

    def test_too_few_points(self):
        assert polyline_normals([Point(0, 0)]) == []


class TestOffsetOutline:
    """Tests for offset outline construction."""

    def test_output_is_closed(self):
        outline = offset_outline(SQUARE, 1.0, 0.5)

        assert len(outline) == len(SQUARE) + 1
        assert outline[0] == outline[-1]

    def test_zero_boldness_keeps_vertices(self):
        outline = offset_outline(SQUARE, 0.0, 0.5)
        assert outline[:-1] == SQUARE

    def test_first_vertex_uses_first_edge_normal(self):
        outline = offset_outline(SQUARE, 1.0, 0.5)
        assert _approx(outline[0], 0.0, -1.0)

    def test_other_vertices_use_miter_direction(self):
        outline = offset_outline(SQUARE, 1.0, 0.5)
        assert _approx(outline[1], 10.0 + HALF_SQRT2, -HALF_SQRT2)
        assert _approx(outline[2], 10.0 + HALF_SQRT2, 10.0 + HALF_SQRT2)

    def test_seam_miter_option(self):
        outline = offset_outline(SQUARE, 1.0, 0.5, config=OffsetConfig(seam_miter=True))
        assert _approx(outline[0], -HALF_SQRT2, -HALF_SQRT2)

    def test_scale_by_miter_option(self):
        config = OffsetConfig(scale_by_miter=True)
        outline = offset_outline(SQUARE, 1.0, 0.5, config=config)
        assert _approx(outline[1], 11.0, -1.0)

    def test_miter_limit_caps_spikes(self):
        sliver = [Point(0, 0), Point(100, 0), Point(0, 1)]
        config = OffsetConfig(scale_by_miter=True, miter_limit=2.0)
        outline = offset_outline(sliver, 1.0, 0.1, config=config)

        for original, moved in zip(sliver, outline):
            assert math.hypot(moved.x - original.x, moved.y - original.y) <= 2.0 + 1e-9

    def test_positive_boldness_grows_solid(self):
        outline = offset_outline(SQUARE, 2.0, 0.5)
        assert signed_area(outline[:-1]) > signed_area(SQUARE)

    def test_positive_boldness_shrinks_hole(self):
        hole = list(reversed(SQUARE))
        outline = offset_outline(hole, 2.0, 0.5)

        assert signed_area(outline[:-1]) < 0
        assert abs(signed_area(outline[:-1])) < abs(signed_area(hole))

    def test_negative_boldness_thins(self):
        outline = offset_outline(SQUARE, -2.0, 0.5)
        assert signed_area(outline[:-1]) < signed_area(SQUARE)

    def test_baseline_translation(self):
        plain = offset_outline(SQUARE, 1.0, 0.5)
        shifted = offset_outline(SQUARE, 1.0, 0.5, baseline=100.0)

        for a, b in zip(plain, shifted):
            assert b.x == pytest.approx(a.x)
            assert b.y == pytest.approx(a.y + 100.0)

    def test_duplicates_removed_before_offset(self):
        noisy = [SQUARE[0], SQUARE[0], SQUARE[1], Point(10.1, 0.1), SQUARE[2], SQUARE[3]]
        outline = offset_outline(noisy, 1.0, 0.5)
        assert len(outline) == 5

    def test_two_point_contour_is_finite(self):
        outline = offset_outline([Point(0, 0), Point(10, 0)], 1.0, 0.5)

        assert len(outline) == 3
        assert all(math.isfinite(p.x) and math.isfinite(p.y) for p in outline)

    def test_collapsed_contour_is_degenerate(self):
        with pytest.raises(DegenerateContourError) as exc_info:
            offset_outline(SQUARE, 1.0, 1000.0)
        assert exc_info.value.point_count == 1

    def test_empty_contour_is_degenerate(self):
        with pytest.raises(DegenerateContourError):
            offset_outline([], 1.0, 1.0)

    def test_invalid_resolution(self):
        with pytest.raises(InvalidParameterError):
            offset_outline(SQUARE, 1.0, 0.0)
