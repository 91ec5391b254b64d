from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from .errors import DegenerateCurveError
from .numeric import DEGENERATE_EPSILON, is_degenerate, power_basis

if TYPE_CHECKING:
    from ..curve.base import Curve

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoefficientCache:
    """Query-independent constants for solving x(t) = time on one curve.

    Only valid for the control points it was built from; build a new one with
    rebuild_cache() after any edit.
    """

    a_div3: float
    q: float
    qqq: float
    # None when Q < 0, where the three-root branch cannot be taken
    sqrt_qqq: Optional[float]
    neg2_sqrt_q: Optional[float]
    partial_r: float
    inv_c3_half: float
    p0x: float

    @classmethod
    def from_curve(cls, curve: "Curve", epsilon: float = DEGENERATE_EPSILON) -> "CoefficientCache":
        xs = [curve.get_control_point(i)[0] for i in range(1, 5)]
        return rebuild_cache(*xs, epsilon=epsilon)


def rebuild_cache(
    p0x: float,
    p1x: float,
    p2x: float,
    p3x: float,
    epsilon: float = DEGENERATE_EPSILON,
) -> CoefficientCache:
    c3, c2, c1 = power_basis(p0x, p1x, p2x, p3x)
    if is_degenerate(c3, p0x, p1x, p2x, p3x, epsilon):
        raise DegenerateCurveError(c3)

    a = c2 / c3
    b = c1 / c3
    a_div3 = a / 3.0
    q = a_div3 * a_div3 - b / 3.0
    qqq = q * q * q
    # The /2 of R is folded in here and into inv_c3_half
    partial_r = (2.0 * a_div3 * a_div3 * a_div3 - a_div3 * b) / 2.0

    cache = CoefficientCache(
        a_div3=a_div3,
        q=q,
        qqq=qqq,
        sqrt_qqq=math.sqrt(qqq) if q >= 0.0 else None,
        neg2_sqrt_q=-2.0 * math.sqrt(q) if q >= 0.0 else None,
        partial_r=partial_r,
        inv_c3_half=(1.0 / c3) / 2.0,
        p0x=p0x,
    )
    log.debug(f"Rebuilt coefficient cache for x=({p0x}, {p1x}, {p2x}, {p3x}): Q={q}")
    return cache
