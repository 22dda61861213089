"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for the contour
builder. Not intended for public use.

Curves are sampled at a fixed number of evenly spaced parameter values. The
step count comes from the control-polygon length, which always overestimates
the arc length and is cheap to compute.
"""

import math

from glyphbold.core.geometry import distance, lerp
from glyphbold.domain import Point

STEP_SIZE = 3.0
MIN_STEPS = 2
MAX_STEPS = 10


def step_count(length: float, step_size: float = STEP_SIZE, max_steps: int = MAX_STEPS) -> int:
    """Number of line segments used to approximate a curve.

    Args:
        length: Control-polygon length of the curve
        step_size: Length covered by one step
        max_steps: Upper bound on the step count

    Returns:
        ceil(length / step_size) clamped to [MIN_STEPS, max_steps]
    """
    steps = math.ceil(length / step_size)
    return max(MIN_STEPS, min(max_steps, steps))


def flatten_quadratic(
    p0: Point,
    control: Point,
    target: Point,
    step_size: float = STEP_SIZE,
    max_steps: int = MAX_STEPS,
) -> list[Point]:
    """Flatten a quadratic Bezier curve.

    The start point is not emitted; it already ends the previous segment.

    Args:
        p0: Start point
        control: Control point
        target: End point
        step_size: Length covered by one step
        max_steps: Upper bound on the step count

    Returns:
        Points at t = i/steps for i = 1..steps, ending at target
    """
    steps = step_count(distance(p0, control) + distance(control, target), step_size, max_steps)

    points: list[Point] = []
    for i in range(1, steps + 1):
        t = i / steps
        points.append(lerp(lerp(p0, control, t), lerp(control, target, t), t))
    return points


def flatten_cubic(
    p0: Point,
    control1: Point,
    control2: Point,
    target: Point,
    step_size: float = STEP_SIZE,
    max_steps: int = MAX_STEPS,
) -> list[Point]:
    """Flatten a cubic Bezier curve using De Casteljau's algorithm.

    Args:
        p0: Start point
        control1: First control point
        control2: Second control point
        target: End point
        step_size: Length covered by one step
        max_steps: Upper bound on the step count

    Returns:
        Points at t = i/steps for i = 1..steps, ending at target
    """
    length = distance(p0, control1) + distance(control1, control2) + distance(control2, target)
    steps = step_count(length, step_size, max_steps)

    points: list[Point] = []
    for i in range(1, steps + 1):
        t = i / steps
        a = lerp(lerp(p0, control1, t), lerp(control1, control2, t), t)
        b = lerp(lerp(control1, control2, t), lerp(control2, target, t), t)
        points.append(lerp(a, b, t))
    return points
