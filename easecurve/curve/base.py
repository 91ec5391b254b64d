from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

Point = Tuple[float, float]


class Curve(ABC):
    """Abstract cubic Bézier with four control points indexed 1..4."""

    @abstractmethod
    def get_control_point(self, index: int) -> Point:
        ...

    @abstractmethod
    def set_control_point(self, index: int, x: float, y: float) -> None:
        """Move a control point. Any coefficient cache built from it is now stale."""
        ...

    @abstractmethod
    def evaluate(self, t: float) -> Point:
        ...
