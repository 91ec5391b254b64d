import pytest

from easecurve.config import SolverConfig, load_config
from easecurve.solver.numeric import DEGENERATE_EPSILON, ROOT_TOLERANCE


def test_defaults(monkeypatch):
    for name in ("EASECURVE_ROOT_TOLERANCE", "EASECURVE_DEGENERATE_EPSILON", "EASECURVE_ALLOW_MULTIPLE"):
        monkeypatch.delenv(name, raising=False)
    cfg = load_config()
    assert cfg == SolverConfig()
    assert cfg.root_tolerance == ROOT_TOLERANCE
    assert cfg.degenerate_epsilon == DEGENERATE_EPSILON
    assert cfg.strict_multiple is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("EASECURVE_ROOT_TOLERANCE", "0")
    monkeypatch.setenv("EASECURVE_DEGENERATE_EPSILON", "1e-6")
    monkeypatch.setenv("EASECURVE_ALLOW_MULTIPLE", "yes")
    cfg = load_config()
    assert cfg.root_tolerance == 0.0
    assert cfg.degenerate_epsilon == 1e-6
    assert cfg.strict_multiple is False


def test_negative_tolerance_rejected(monkeypatch):
    monkeypatch.setenv("EASECURVE_ROOT_TOLERANCE", "-1e-9")
    with pytest.raises(ValueError):
        load_config()
