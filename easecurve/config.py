from __future__ import annotations

import os
from dataclasses import dataclass

from .solver.numeric import DEGENERATE_EPSILON, ROOT_TOLERANCE


@dataclass
class SolverConfig:
    # Slack around [0, 1] when accepting a root (0.0 = strict bounds)
    root_tolerance: float = ROOT_TOLERANCE
    # Relative threshold for treating the cubic coefficient as zero
    degenerate_epsilon: float = DEGENERATE_EPSILON

    # Reject curves that cross a query time more than once
    strict_multiple: bool = True


def load_config() -> SolverConfig:
    cfg = SolverConfig()
    # Allow simple env overrides
    cfg.root_tolerance = float(os.getenv("EASECURVE_ROOT_TOLERANCE", cfg.root_tolerance))
    cfg.degenerate_epsilon = float(os.getenv("EASECURVE_DEGENERATE_EPSILON", cfg.degenerate_epsilon))
    cfg.strict_multiple = os.getenv("EASECURVE_ALLOW_MULTIPLE", "false").lower() not in ("1", "true", "yes")
    if cfg.root_tolerance < 0.0:
        raise ValueError("EASECURVE_ROOT_TOLERANCE must be >= 0")
    return cfg
