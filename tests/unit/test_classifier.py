"""Unit tests for contour classification.

Tests cover:
- Single contours and disjoint contours
- Holes inside solids (opposite winding)
- Same-winding nesting (no hole relation)
- Islands inside holes
- Edge cases (empty input, empty contours)
"""

from glyphbold.core.builder import ContourBuilder
from glyphbold.core.classifier import ContourClassifier, classify_contours
from glyphbold.domain import Point, Polygon


def _rect(x0: float, y0: float, x1: float, y1: float, reverse: bool = False) -> Polygon:
    """Closed rectangle; positive area unless reversed."""
    points = [Point(x0, y0), Point(x1, y0), Point(x1, y1), Point(x0, y1)]
    if reverse:
        points.reverse()
    builder = ContourBuilder()
    for p in points:
        builder.append(p)
    return builder.close()


class TestContourClassifier:
    """Tests for ContourClassifier."""

    def test_single_contour_is_root(self):
        outer = _rect(0, 0, 10, 10)
        forest = ContourClassifier().classify([outer])

        assert forest.roots == [outer]
        assert outer.children == []

    def test_letter_o(self):
        """Outer (+1000) with an opposite-wound inner (-300) forms one root with one hole."""
        outer = _rect(0, 0, 40, 25)
        inner = _rect(10, 5, 30, 20, reverse=True)
        assert outer.area == 1000.0
        assert inner.area == -300.0

        forest = ContourClassifier().classify([outer, inner])

        assert forest.roots == [outer]
        assert outer.children == [inner]
        assert inner.children == []

    def test_input_order_does_not_matter(self):
        outer = _rect(0, 0, 100, 100)
        inner = _rect(25, 25, 75, 75, reverse=True)

        forest = ContourClassifier().classify([inner, outer])

        assert forest.roots == [outer]
        assert outer.children == [inner]

    def test_disjoint_contours_are_roots(self):
        a = _rect(0, 0, 10, 10)
        b = _rect(20, 0, 30, 10, reverse=True)

        forest = ContourClassifier().classify([a, b])

        assert len(forest.roots) == 2
        assert a.children == []
        assert b.children == []

    def test_same_winding_nested_is_not_a_hole(self):
        outer = _rect(0, 0, 100, 100)
        inner = _rect(25, 25, 75, 75)

        forest = ContourClassifier().classify([outer, inner])

        assert len(forest.roots) == 2
        assert outer.children == []

    def test_two_holes(self):
        """A 'B'-like glyph keeps both counters as holes of the outer contour."""
        outer = _rect(0, 0, 50, 100)
        upper = _rect(10, 55, 40, 90, reverse=True)
        lower = _rect(10, 10, 40, 45, reverse=True)

        forest = ContourClassifier().classify([outer, upper, lower])

        assert forest.roots == [outer]
        assert set(map(id, outer.children)) == {id(upper), id(lower)}

    def test_island_inside_hole(self):
        """A solid inside a counter attaches to the counter, not the outer ring."""
        outer = _rect(0, 0, 100, 100)
        hole = _rect(10, 10, 90, 90, reverse=True)
        island = _rect(30, 30, 70, 70)

        forest = ContourClassifier().classify([island, outer, hole])

        assert forest.roots == [outer]
        assert outer.children == [hole]
        assert hole.children == [island]

    def test_separate_glyphs_each_get_their_hole(self):
        left = _rect(0, 0, 40, 40)
        left_hole = _rect(10, 10, 30, 30, reverse=True)
        right = _rect(50, 0, 90, 40)
        right_hole = _rect(60, 10, 80, 30, reverse=True)

        forest = ContourClassifier().classify([left, left_hole, right, right_hole])

        assert len(forest.roots) == 2
        assert left.children == [left_hole]
        assert right.children == [right_hole]

    def test_roots_sorted_by_area(self):
        small = _rect(100, 0, 105, 5)
        large = _rect(0, 0, 50, 50)

        forest = ContourClassifier().classify([small, large])

        assert forest.roots == [large, small]

    def test_empty_input(self):
        forest = ContourClassifier().classify([])
        assert len(forest) == 0

    def test_empty_contour_is_root(self):
        outer = _rect(0, 0, 10, 10)
        empty = Polygon(closed=True)

        forest = classify_contours([outer, empty])

        assert len(forest.roots) == 2
        assert outer.children == []
