from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Union

from .cache import CoefficientCache
from .errors import DegenerateCurveError, MultipleSolutionsError
from .numeric import (
    DEGENERATE_EPSILON,
    ROOT_TOLERANCE,
    TWO_PI,
    accept_root,
    cbrt,
    is_degenerate,
    merge_roots,
    power_basis,
)


@dataclass(frozen=True)
class NoSolution:
    """The query time lies outside the curve's horizontal span."""


@dataclass(frozen=True)
class OneSolution:
    t: float


@dataclass(frozen=True)
class ThreeCandidates:
    # Each root is already filtered to [0, 1]; None marks a rejected one
    t1: Optional[float]
    t2: Optional[float]
    t3: Optional[float]

    @property
    def roots(self) -> List[float]:
        return [t for t in (self.t1, self.t2, self.t3) if t is not None]


RootResult = Union[NoSolution, OneSolution, ThreeCandidates]


def solve(
    time: float,
    p0x: float,
    p1x: float,
    p2x: float,
    p3x: float,
    *,
    tolerance: float = ROOT_TOLERANCE,
    epsilon: float = DEGENERATE_EPSILON,
    allow_multiple: bool = False,
) -> RootResult:
    """Find t in [0, 1] where the curve's horizontal coordinate equals ``time``.

    Self-contained: every coefficient is derived from the four horizontal
    control coordinates on each call. Use solve_fast() with a cache when the
    same curve is queried repeatedly.

    The cubic x(t) - time = 0 is divided by its leading coefficient, giving
    t^3 + a t^2 + b t + c = 0, and solved through the depressed form with

        Q = (a^2 - 3b) / 9 = (a/3)^2 - b/3
        R = (2a^3 - 9ab + 27c) / 54 = (2(a/3)^3 - (a/3)b + c) / 2

    Raises DegenerateCurveError when c3 is zero and MultipleSolutionsError
    when more than one root falls inside [0, 1], unless ``allow_multiple``
    is set, in which case the filtered candidates are returned.
    """
    c3, c2, c1 = power_basis(p0x, p1x, p2x, p3x)
    if is_degenerate(c3, p0x, p1x, p2x, p3x, epsilon):
        raise DegenerateCurveError(c3)
    c0 = p0x - time

    a = c2 / c3
    b = c1 / c3
    c = c0 / c3
    a_div3 = a / 3.0

    q = a_div3 * a_div3 - b / 3.0
    r = (2.0 * a_div3 * a_div3 * a_div3 - a_div3 * b + c) / 2.0

    rr = r * r
    qqq = q * q * q
    if rr < qqq:
        candidates = _trig_roots(r, math.sqrt(qqq), -2.0 * math.sqrt(q), a_div3, tolerance)
        return _classify(time, candidates, allow_multiple)
    return _cardano_root(r, rr, q, qqq, a_div3, tolerance)


def solve_fast(
    time: float,
    cache: CoefficientCache,
    *,
    tolerance: float = ROOT_TOLERANCE,
    allow_multiple: bool = False,
) -> RootResult:
    """Same as solve(), reusing the constants from rebuild_cache().

    Only the time-dependent half of R is computed here; the reduction by c3
    and the /2 are already folded into ``cache.inv_c3_half``.
    """
    r = cache.partial_r + (cache.p0x - time) * cache.inv_c3_half
    rr = r * r
    if rr < cache.qqq:
        # qqq > 0 here, so the square roots were cached
        candidates = _trig_roots(r, cache.sqrt_qqq, cache.neg2_sqrt_q, cache.a_div3, tolerance)
        return _classify(time, candidates, allow_multiple)
    return _cardano_root(r, rr, cache.q, cache.qqq, cache.a_div3, tolerance)


def _trig_roots(
    r: float,
    sqrt_qqq: float,
    neg2_sqrt_q: float,
    a_div3: float,
    tolerance: float,
) -> ThreeCandidates:
    # Three distinct real roots
    cos_theta = max(-1.0, min(1.0, r / sqrt_qqq))
    theta = math.acos(cos_theta)
    t1 = neg2_sqrt_q * math.cos(theta / 3.0) - a_div3
    t2 = neg2_sqrt_q * math.cos((theta + TWO_PI) / 3.0) - a_div3
    t3 = neg2_sqrt_q * math.cos((theta - TWO_PI) / 3.0) - a_div3
    return ThreeCandidates(
        accept_root(t1, tolerance),
        accept_root(t2, tolerance),
        accept_root(t3, tolerance),
    )


def _cardano_root(
    r: float,
    rr: float,
    q: float,
    qqq: float,
    a_div3: float,
    tolerance: float,
) -> RootResult:
    # One real root plus a complex pair (or a repeated real root).
    # Pick the sign that keeps R and sqrt(R^2 - Q^3) from cancelling.
    root_disc = math.sqrt(rr - qqq)
    if r > 0.0:
        big_a = -cbrt(r + root_disc)
    else:
        big_a = cbrt(-r + root_disc)
    # A == 0 only when Q == 0 too (triple root)
    t = big_a + (0.0 if big_a == 0.0 else q / big_a) - a_div3
    accepted = accept_root(t, tolerance)
    if accepted is None:
        return NoSolution()
    return OneSolution(accepted)


def _classify(time: float, candidates: ThreeCandidates, allow_multiple: bool) -> RootResult:
    # near-equal roots (or ones clamped onto the same boundary) count once
    roots = merge_roots(candidates.roots)
    if not roots:
        return NoSolution()
    if len(roots) == 1:
        # Three real roots overall, but the curve is monotonic over [0, 1]
        return OneSolution(roots[0])
    if allow_multiple:
        return candidates
    raise MultipleSolutionsError(time, candidates)
