from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..config import SolverConfig, load_config
from ..curve.bezier import BezierCurve
from ..curve.correction import correct_control_points
from ..curve.easing import EasingCurve
from ..motion.models import CurveModel, Point, SampleRequest, SolveRequest, TrackSampleRequest
from ..motion.planner import sample_track
from ..solver.cubic import NoSolution, OneSolution, RootResult
from ..solver.errors import SolveError

log = logging.getLogger(__name__)


app = FastAPI(title="Easing Curve API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

cfg: SolverConfig = load_config()


def _easing(curve: CurveModel) -> EasingCurve:
    try:
        return EasingCurve(BezierCurve.from_points(curve.as_tuples()), cfg)
    except SolveError as e:
        log.warning(f"Rejected curve {curve.as_tuples()}: {e}")
        raise HTTPException(422, detail=str(e))


def _describe(result: RootResult, easing: EasingCurve) -> dict:
    if isinstance(result, NoSolution):
        kind, roots = "none", []
    elif isinstance(result, OneSolution):
        kind, roots = "one", [result.t]
    else:
        kind, roots = "multiple", result.roots
    return {
        "kind": kind,
        "roots": roots,
        "points": [list(easing.curve.evaluate(t)) for t in roots],
    }


@app.get("/api/config")
def api_config():
    return asdict(cfg)


@app.post("/api/solve")
def api_solve(req: SolveRequest):
    easing = _easing(req.curve)
    try:
        if req.exact:
            result = easing.find_t_exact(req.time, allow_multiple=req.allow_multiple)
        else:
            result = easing.find_t(req.time, allow_multiple=req.allow_multiple)
    except SolveError as e:
        log.warning(f"Solve failed at time={req.time}: {e}")
        raise HTTPException(422, detail=str(e))
    return _describe(result, easing)


@app.post("/api/sample")
def api_sample(req: SampleRequest):
    easing = _easing(req.curve)
    try:
        values = [easing.sample(t) for t in req.times]
    except SolveError as e:
        log.warning(f"Sampling failed: {e}")
        raise HTTPException(422, detail=str(e))
    return {"values": values}


@app.post("/api/correct")
def api_correct(curve: CurveModel):
    try:
        points = correct_control_points(*curve.as_tuples())
    except ValueError as e:
        raise HTTPException(422, detail=str(e))
    return CurveModel(points=[Point(x=x, y=y) for x, y in points])


@app.post("/api/track/sample")
def api_track_sample(req: TrackSampleRequest):
    try:
        times, values = sample_track(req.track, dt=req.dt)
    except SolveError as e:
        log.warning(f"Track sampling failed: {e}")
        raise HTTPException(422, detail=str(e))
    return {"times": times, "values": values}
