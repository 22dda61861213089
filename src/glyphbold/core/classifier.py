"""Contour classification into solids and holes.

A glyph's contours are nested: the counter of an "O" sits inside its outer
ring and winds the other way. The classifier recovers that nesting from
winding signs and point containment and returns a ContourForest.
"""

import structlog

from glyphbold.core.geometry import point_in_polygon
from glyphbold.domain import ContourForest, Polygon

logger = structlog.get_logger(__name__)


class ContourClassifier:
    """Builds a contour forest from closed polygons.

    Contours are visited from the largest absolute area to the smallest, so
    a candidate parent is always placed before anything it could contain.
    Each contour takes as parent the most recently placed contour that
    contains its first point and winds the opposite way.

    The classifier is stateless.
    """

    def classify(self, polygons: list[Polygon]) -> ContourForest:
        """Classify polygons into roots and holes.

        Attaches every hole to its parent's ``children`` list.

        Args:
            polygons: Closed polygons from one render request

        Returns:
            ContourForest of root contours, largest area first
        """
        ordered = sorted(polygons, key=lambda p: abs(p.area), reverse=True)
        forest = ContourForest()

        for i, polygon in enumerate(ordered):
            parent = self._find_parent(polygon, ordered[:i])
            if parent is not None:
                parent.children.append(polygon)
            else:
                forest.roots.append(polygon)

        logger.debug(
            "Contour classification",
            total=len(ordered),
            roots=len(forest.roots),
            holes=len(ordered) - len(forest.roots),
        )
        return forest

    def _find_parent(self, polygon: Polygon, placed: list[Polygon]) -> Polygon | None:
        """Find the parent of a contour among already placed contours.

        Scans in reverse placement order and returns the first contour that
        contains this contour's first point and has an opposite area sign.

        Args:
            polygon: The contour to place
            placed: Contours visited before it

        Returns:
            The parent contour, or None for a root
        """
        if not polygon.points:
            return None

        test_point = polygon.points[0]
        for candidate in reversed(placed):
            if polygon.area * candidate.area >= 0:
                continue
            if point_in_polygon(test_point, candidate.points):
                return candidate

        return None


def classify_contours(polygons: list[Polygon]) -> ContourForest:
    """Convenience wrapper around ContourClassifier.classify."""
    return ContourClassifier().classify(polygons)
