import pytest

from easecurve.curve.bezier import BezierCurve


# (0,0)-(0.25,0.1)-(0.75,0.9)-(1,1)
EASE_IN_OUT = (0.0, 0.0, 0.25, 0.1, 0.75, 0.9, 1.0, 1.0)
# CSS "ease"
CSS_EASE = (0.0, 0.0, 0.25, 0.1, 0.25, 1.0, 1.0, 1.0)
# Pixel-space curve from an interactive editor
PIXEL = (101.0, 502.115, 302.708, 707.152, 354.712, 57.166, 601.0, 314.901)

MONOTONIC_CURVES = {
    "ease-in-out": EASE_IN_OUT,
    "css-ease": CSS_EASE,
    "pixel": PIXEL,
}


def xs(coords):
    return coords[0::2]


@pytest.fixture
def ease_in_out():
    return BezierCurve(*EASE_IN_OUT)


@pytest.fixture(params=sorted(MONOTONIC_CURVES))
def monotonic_curve(request):
    return BezierCurve(*MONOTONIC_CURVES[request.param])
