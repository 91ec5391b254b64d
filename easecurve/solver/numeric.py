from __future__ import annotations

import math
from typing import List, Optional, Tuple

TWO_PI = 2.0 * math.pi

# Slack allowed around [0, 1] when accepting a root; 0.0 means strict bounds
ROOT_TOLERANCE = 1e-9

# |c3| at or below this (scaled by the control-point magnitude) is treated as zero
DEGENERATE_EPSILON = 1e-12

_ONE_THIRD = 1.0 / 3.0


def cbrt(x: float) -> float:
    """Real cube root, keeping the sign of x."""
    if x == 0.0:
        return 0.0
    return math.copysign(abs(x) ** _ONE_THIRD, x)


def power_basis(p0x: float, p1x: float, p2x: float, p3x: float) -> Tuple[float, float, float]:
    """Return (c3, c2, c1) of x(t) = c3 t^3 + c2 t^2 + c1 t + p0x.

    Expanded from (1-t)^3 P0 + 3t(1-t)^2 P1 + 3t^2(1-t) P2 + t^3 P3.
    """
    c3 = p3x + 3.0 * (p1x - p2x) - p0x
    c2 = 3.0 * (p2x - 2.0 * p1x + p0x)
    c1 = 3.0 * (p1x - p0x)
    return c3, c2, c1


def is_degenerate(c3: float, p0x: float, p1x: float, p2x: float, p3x: float, epsilon: float) -> bool:
    scale = max(1.0, abs(p0x), abs(p1x), abs(p2x), abs(p3x))
    return abs(c3) <= epsilon * scale


def accept_root(t: float, tolerance: float) -> Optional[float]:
    if -tolerance <= t <= 1.0 + tolerance:
        # clamp what the tolerance let through
        return 0.0 if t < 0.0 else (1.0 if t > 1.0 else t)
    return None


# Roots closer than this are one crossing split by rounding (a flat-tangent
# inflection spreads a single root by roughly sqrt(machine epsilon))
ROOT_CLUSTER_TOLERANCE = 1e-5


def merge_roots(roots: List[float], tolerance: float = ROOT_CLUSTER_TOLERANCE) -> List[float]:
    """Sort roots and replace each run of near-equal ones by its mean."""
    merged: List[float] = []
    cluster: List[float] = []
    for t in sorted(roots):
        if cluster and t - cluster[-1] > tolerance:
            merged.append(sum(cluster) / len(cluster))
            cluster = []
        cluster.append(t)
    if cluster:
        merged.append(sum(cluster) / len(cluster))
    return merged
