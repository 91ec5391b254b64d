from __future__ import annotations

from typing import Callable, List, Tuple

from ..curve.easing import CubicBezier, linear
from .models import Keyframe, Track


def ease_fn(kf: Keyframe) -> Callable[[float], float]:
    e = kf.ease
    if e.type == "cubic-bezier":
        x1, y1, x2, y2 = e.p  # type: ignore
        return CubicBezier(x1, y1, x2, y2).sample
    return linear


def sample_track(track: Track, dt: float = 0.01) -> Tuple[List[float], List[float]]:
    """Sample a keyframe track into time and value arrays.

    - dt: sampling interval in seconds (default 10ms)
    Returns (times, values)
    """
    kfs = track.keyframes
    # One easing per segment, built once rather than per sample
    eases = [ease_fn(k) for k in kfs]
    times: List[float] = []
    values: List[float] = []
    total_t = kfs[-1].t

    seg_start_idx = 0
    t = kfs[0].t
    while t <= total_t + 1e-9:
        # Find current segment
        while seg_start_idx < len(kfs) - 2 and t > kfs[seg_start_idx + 1].t:
            seg_start_idx += 1
        k0 = kfs[seg_start_idx]
        k1 = kfs[seg_start_idx + 1]
        u = (t - k0.t) / (k1.t - k0.t)
        u = 0.0 if u < 0.0 else (1.0 if u > 1.0 else u)
        f = eases[seg_start_idx + 1]  # easing stored on arrival keyframe
        times.append(t)
        values.append(k0.value + (k1.value - k0.value) * f(u))
        t += dt

    # Ensure last sample is exactly last keyframe
    if times[-1] < total_t:
        times.append(total_t)
        values.append(kfs[-1].value)

    return times, values
