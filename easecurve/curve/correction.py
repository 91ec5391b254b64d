from __future__ import annotations

import logging
from typing import Tuple

from .base import Point

log = logging.getLogger(__name__)


def correct_control_points(
    p0: Point, p1: Point, p2: Point, p3: Point
) -> Tuple[Point, Point, Point, Point]:
    """Reposition the two handles so the curve is monotonic in x.

    Treats P0 and P3 as keys and P1, P2 as their handles, the way animation
    editors do. A handle pointing backwards in time is pulled onto its key's
    vertical; then, if the handles together reach further than the key
    spacing, both are shortened by the same factor. Afterwards
    p0x <= p1x <= p2x <= p3x, so x(t) never turns back.

    The result can be a curve whose x(t) is only quadratic or linear (for
    instance x = (0, 0, 1/3, 1) once a backward P1 is pulled onto P0). The
    solver rejects those with DegenerateCurveError, and EasingCurve.correct()
    then restores the previous control points.
    """
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = p0, p1, p2, p3
    span = x3 - x0
    if span <= 0.0:
        raise ValueError(f"Keys must increase in time, got p0x={x0} p3x={x3}")

    x1 = max(x1, x0)
    x2 = min(x2, x3)

    # Handle vectors relative to their keys
    h1x, h1y = x0 - x1, y0 - y1
    h2x, h2y = x3 - x2, y3 - y2
    len1 = abs(h1x)
    len2 = abs(h2x)
    if len1 + len2 > span:
        fac = span / (len1 + len2)
        x1, y1 = x0 - fac * h1x, y0 - fac * h1y
        x2, y2 = x3 - fac * h2x, y3 - fac * h2y
        log.debug(f"Scaled handles by {fac:.6f} to keep the curve monotonic")

    return (x0, y0), (x1, y1), (x2, y2), (x3, y3)
