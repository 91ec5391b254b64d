from __future__ import annotations

from typing import List

from .base import Curve, Point


class BezierCurve(Curve):
    """Plain 2D cubic Bézier curve."""

    def __init__(
        self,
        p0x: float, p0y: float,
        p1x: float, p1y: float,
        p2x: float, p2y: float,
        p3x: float, p3y: float,
    ):
        self._points: List[Point] = [(p0x, p0y), (p1x, p1y), (p2x, p2y), (p3x, p3y)]

    @classmethod
    def from_points(cls, points) -> "BezierCurve":
        if len(points) != 4:
            raise ValueError("A cubic Bézier needs exactly 4 control points")
        coords = [float(v) for p in points for v in p]
        return cls(*coords)

    def _check_index(self, index: int) -> int:
        if not 1 <= index <= 4:
            raise IndexError(f"Control point index must be 1..4, got {index}")
        return index - 1

    def get_control_point(self, index: int) -> Point:
        return self._points[self._check_index(index)]

    def set_control_point(self, index: int, x: float, y: float) -> None:
        self._points[self._check_index(index)] = (float(x), float(y))

    def control_points(self) -> List[Point]:
        return list(self._points)

    def translate(self, dx: float, dy: float) -> None:
        self._points = [(x + dx, y + dy) for x, y in self._points]

    def evaluate(self, t: float) -> Point:
        mt = 1.0 - t
        w0 = mt * mt * mt
        w1 = 3.0 * mt * mt * t
        w2 = 3.0 * mt * t * t
        w3 = t * t * t
        (x0, y0), (x1, y1), (x2, y2), (x3, y3) = self._points
        return (
            w0 * x0 + w1 * x1 + w2 * x2 + w3 * x3,
            w0 * y0 + w1 * y1 + w2 * y2 + w3 * y3,
        )

    def horizontal(self, t: float) -> float:
        return self.evaluate(t)[0]

    def vertical(self, t: float) -> float:
        return self.evaluate(t)[1]

    def __repr__(self) -> str:
        return f"BezierCurve({self._points!r})"
