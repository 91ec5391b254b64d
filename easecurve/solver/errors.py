from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cubic import ThreeCandidates


class SolveError(ValueError):
    """Base class for curves that cannot be inverted."""


class DegenerateCurveError(SolveError):
    """The horizontal motion is at most quadratic (c3 is zero)."""

    def __init__(self, c3: float):
        super().__init__(f"Degenerate curve: cubic coefficient c3={c3!r} is zero")
        self.c3 = c3


class MultipleSolutionsError(SolveError):
    """The curve crosses the query time more than once inside [0, 1].

    The filtered crossings are kept on ``candidates`` for callers that want
    to log or inspect them; pass ``allow_multiple=True`` to the solver to get
    them back as a result instead.
    """

    def __init__(self, time: float, candidates: "ThreeCandidates"):
        super().__init__(
            f"Multiple solutions for sampling the curve at time={time!r}: {candidates.roots}"
        )
        self.time = time
        self.candidates = candidates
