from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import SolverConfig
from ..solver.cache import CoefficientCache, rebuild_cache
from ..solver.cubic import NoSolution, OneSolution, RootResult, solve, solve_fast
from ..solver.errors import SolveError
from ..solver.numeric import DEGENERATE_EPSILON, ROOT_TOLERANCE, accept_root, is_degenerate, power_basis
from .base import Curve, Point
from .bezier import BezierCurve
from .correction import correct_control_points


def linear(u: float) -> float:
    if u <= 0.0:
        return 0.0
    if u >= 1.0:
        return 1.0
    return u


class EasingCurve:
    """A curve and its coefficient cache, kept in lockstep.

    Every edit made through this object rebuilds the cache before returning,
    so find_t() never sees coefficients from older control points. Edits
    made directly on ``curve`` bypass this; call rebuild() after them.
    """

    def __init__(self, curve: Curve, config: Optional[SolverConfig] = None):
        self.curve = curve
        self.cfg = config or SolverConfig()
        self._cache = self._build_cache()

    @classmethod
    def create(
        cls,
        p0x: float, p0y: float,
        p1x: float, p1y: float,
        p2x: float, p2y: float,
        p3x: float, p3y: float,
        config: Optional[SolverConfig] = None,
    ) -> "EasingCurve":
        return cls(BezierCurve(p0x, p0y, p1x, p1y, p2x, p2y, p3x, p3y), config)

    @property
    def cache(self) -> CoefficientCache:
        return self._cache

    def _build_cache(self) -> CoefficientCache:
        return CoefficientCache.from_curve(self.curve, epsilon=self.cfg.degenerate_epsilon)

    def rebuild(self) -> None:
        self._cache = self._build_cache()

    def _points(self) -> List[Point]:
        return [self.curve.get_control_point(i) for i in range(1, 5)]

    def _replace_points(self, points: List[Point]) -> None:
        old = self._points()
        for i, (x, y) in enumerate(points, start=1):
            self.curve.set_control_point(i, x, y)
        try:
            self._cache = self._build_cache()
        except SolveError:
            # Leave curve and cache as they were
            for i, (x, y) in enumerate(old, start=1):
                self.curve.set_control_point(i, x, y)
            raise

    def set_control_point(self, index: int, x: float, y: float) -> None:
        points = self._points()
        self.curve.get_control_point(index)  # IndexError before anything moves
        points[index - 1] = (x, y)
        self._replace_points(points)

    def translate(self, dx: float, dy: float) -> None:
        self._replace_points([(x + dx, y + dy) for x, y in self._points()])

    def correct(self) -> None:
        """Move the handles so the curve crosses each time at most once.

        Raises DegenerateCurveError, leaving the curve untouched, when the
        corrected handles make x(t) less than cubic.
        """
        self._replace_points(list(correct_control_points(*self._points())))

    def _allow_multiple(self, allow_multiple: Optional[bool]) -> bool:
        return (not self.cfg.strict_multiple) if allow_multiple is None else allow_multiple

    def find_t(self, time: float, allow_multiple: Optional[bool] = None) -> RootResult:
        return solve_fast(
            time,
            self._cache,
            tolerance=self.cfg.root_tolerance,
            allow_multiple=self._allow_multiple(allow_multiple),
        )

    def find_t_exact(self, time: float, allow_multiple: Optional[bool] = None) -> RootResult:
        """Like find_t() but recomputes every coefficient from the curve."""
        xs = [self.curve.get_control_point(i)[0] for i in range(1, 5)]
        return solve(
            time,
            *xs,
            tolerance=self.cfg.root_tolerance,
            epsilon=self.cfg.degenerate_epsilon,
            allow_multiple=self._allow_multiple(allow_multiple),
        )

    def sample(self, time: float) -> Optional[float]:
        """Return the curve's y where its x equals ``time``, or None outside the curve."""
        result = self.find_t(time, allow_multiple=False)
        if isinstance(result, OneSolution):
            return self.curve.evaluate(result.t)[1]
        return None


@dataclass(frozen=True)
class CubicBezier:
    # Control points (x1, y1, x2, y2); start is (0,0) end is (1,1)
    p1x: float
    p1y: float
    p2x: float
    p2y: float
    tolerance: float = ROOT_TOLERANCE
    # None when x(t) is only quadratic or linear
    _cache: Optional[CoefficientCache] = field(init=False, repr=False, compare=False)
    _c2: float = field(init=False, repr=False, compare=False)
    _c1: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        c3, c2, c1 = power_basis(0.0, self.p1x, self.p2x, 1.0)
        cache = None
        if not is_degenerate(c3, 0.0, self.p1x, self.p2x, 1.0, DEGENERATE_EPSILON):
            cache = rebuild_cache(0.0, self.p1x, self.p2x, 1.0)
        object.__setattr__(self, "_cache", cache)
        object.__setattr__(self, "_c2", c2)
        object.__setattr__(self, "_c1", c1)

    def _solve_quadratic(self, u: float) -> Optional[float]:
        # c3 == 0 leaves x(t) = c2 t^2 + c1 t; this form of the root stays
        # accurate when c2 is tiny and reduces to u / c1 when it is zero
        disc = self._c1 * self._c1 + 4.0 * self._c2 * u
        if disc < 0.0:
            return None
        denom = self._c1 + math.sqrt(disc)
        if denom == 0.0:
            return None
        return accept_root(2.0 * u / denom, self.tolerance)

    def solve_t(self, u: float) -> float:
        if self._cache is None:
            t = self._solve_quadratic(u)
            if t is None:
                raise SolveError(f"No curve parameter for u={u!r}")
            return t
        result = solve_fast(u, self._cache, tolerance=self.tolerance)
        if isinstance(result, NoSolution):
            raise SolveError(f"No curve parameter for u={u!r}")
        return result.t

    def sample(self, u: float) -> float:
        """Return y for a given u in [0,1], solving x(t) = u, then y(t)."""
        if u <= 0.0:
            return 0.0
        if u >= 1.0:
            return 1.0

        t = self.solve_t(u)
        mt = 1 - t
        return 3 * mt * mt * t * self.p1y + 3 * mt * t * t * self.p2y + t ** 3
