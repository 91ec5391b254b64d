from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Point(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


class CurveModel(BaseModel):
    points: List[Point] = Field(..., min_length=4, max_length=4, description="Control points P0..P3")

    def as_tuples(self) -> List[Tuple[float, float]]:
        return [p.as_tuple() for p in self.points]


class SolveRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    curve: CurveModel
    time: float
    allow_multiple: bool = False
    exact: bool = Field(False, description="Recompute coefficients instead of using the cache")


class SampleRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    curve: CurveModel
    times: List[float] = Field(..., min_length=1)


class Ease(BaseModel):
    type: Literal["linear", "cubic-bezier"] = "linear"
    p: Optional[list[float]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")

    @model_validator(mode="after")
    def validate_bezier(self):
        if self.type == "cubic-bezier":
            if not self.p or len(self.p) != 4:
                raise ValueError("cubic-bezier requires p=[x1,y1,x2,y2]")
            x1, _, x2, _ = self.p
            if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
                raise ValueError("cubic-bezier x1 and x2 must lie in [0, 1]")
        return self


class Keyframe(BaseModel):
    t: float = Field(..., ge=0.0, description="Time in seconds")
    value: float
    ease: Ease = Field(default_factory=Ease)


class Track(BaseModel):
    keyframes: List[Keyframe]

    @model_validator(mode="after")
    def validate_keyframes(self):
        if not self.keyframes or len(self.keyframes) < 2:
            raise ValueError("At least two keyframes required")
        # sort and ensure increasing time
        self.keyframes.sort(key=lambda k: k.t)
        last_t = -1.0
        for k in self.keyframes:
            if k.t <= last_t:
                raise ValueError("Keyframe times must be strictly increasing")
            last_t = k.t
        return self


class TrackSampleRequest(BaseModel):
    track: Track
    dt: float = Field(0.01, gt=0)
