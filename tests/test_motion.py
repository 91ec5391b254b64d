import pytest
from pydantic import ValidationError

from easecurve.motion.models import CurveModel, Ease, Keyframe, Track
from easecurve.motion.planner import sample_track


def make_track():
    return Track(
        keyframes=[
            Keyframe(t=0.0, value=0.0),
            Keyframe(t=1.0, value=10.0),
            Keyframe(t=2.0, value=20.0, ease=Ease(type="cubic-bezier", p=[0.42, 0.0, 0.58, 1.0])),
        ]
    )


def test_sample_track_hits_keyframes():
    times, values = sample_track(make_track(), dt=0.5)
    assert times == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])
    assert values == pytest.approx([0.0, 5.0, 10.0, 15.0, 20.0], abs=1e-9)


def test_sample_track_eases_segment():
    times, values = sample_track(make_track(), dt=0.05)
    eased = [v for t, v in zip(times, values) if 1.05 < t < 1.45]
    linear = [10.0 + 10.0 * (t - 1.0) for t in times if 1.05 < t < 1.45]
    # ease-in-out lags behind linear in the first half
    assert all(e < l for e, l in zip(eased, linear))
    assert values[-1] == pytest.approx(20.0)
    assert times[-1] == pytest.approx(2.0)


def test_sample_track_ends_on_last_keyframe():
    track = Track(keyframes=[Keyframe(t=0.0, value=1.0), Keyframe(t=1.0, value=3.0)])
    times, values = sample_track(track, dt=0.3)
    assert times[-1] == 1.0
    assert values[-1] == 3.0


def test_track_sorts_keyframes():
    track = Track(keyframes=[Keyframe(t=1.0, value=1.0), Keyframe(t=0.0, value=0.0)])
    assert [k.t for k in track.keyframes] == [0.0, 1.0]


def test_track_rejects_duplicate_times():
    with pytest.raises(ValidationError):
        Track(keyframes=[Keyframe(t=0.0, value=0.0), Keyframe(t=0.0, value=1.0)])


def test_track_needs_two_keyframes():
    with pytest.raises(ValidationError):
        Track(keyframes=[Keyframe(t=0.0, value=0.0)])


def test_ease_validation():
    with pytest.raises(ValidationError):
        Ease(type="cubic-bezier")
    with pytest.raises(ValidationError):
        Ease(type="cubic-bezier", p=[1.5, 0.0, 0.5, 1.0])
    assert Ease(type="cubic-bezier", p=[0.25, 0.1, 0.25, 1.0]).p == [0.25, 0.1, 0.25, 1.0]


def test_curve_model_needs_four_points():
    with pytest.raises(ValidationError):
        CurveModel(points=[{"x": 0, "y": 0}, {"x": 1, "y": 1}])
    with pytest.raises(ValidationError):
        CurveModel(points=[{"x": float("nan"), "y": 0}] * 4)
    model = CurveModel(points=[{"x": i, "y": i} for i in range(4)])
    assert model.as_tuples()[3] == (3.0, 3.0)
