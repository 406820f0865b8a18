"""Tests for settings and logging setup."""

import logging

from diagrams2d import log
from diagrams2d.config import Settings, settings
from diagrams2d.core.angle import Angle
from diagrams2d.core.point import mk_p2
from diagrams2d.core.transform import translation
from diagrams2d.core.vector import V2
from diagrams2d.svg.primitives import polyline


def test_settings_defaults():
    s = Settings()
    assert s.diagrams2d_float_tolerance == 1e-9
    assert s.diagrams2d_svg_precision >= 0


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DIAGRAMS2D_LOG_LEVEL", "debug")
    monkeypatch.setenv("DIAGRAMS2D_SVG_PRECISION", "5")
    s = Settings()
    assert s.diagrams2d_log_level == "debug"
    assert s.diagrams2d_svg_precision == 5


def test_configure_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    log.configure_logging("debug")
    log.configure_logging("bogus")
    assert calls[0]["level"] == logging.DEBUG
    assert calls[1]["level"] == logging.WARNING
    assert "%(name)s" in calls[0]["format"]


def test_is_close_helpers_follow_configured_tolerance(monkeypatch):
    monkeypatch.setattr(settings, "diagrams2d_float_tolerance", 1e-3)
    eps = 1e-6
    assert Angle(1.0).is_close(Angle(1.0 + eps))
    assert V2(1.0, 2.0).is_close(V2(1.0 + eps, 2.0))
    assert mk_p2(1.0, 2.0).is_close(mk_p2(1.0, 2.0 + eps))
    assert translation(V2(1.0, 0.0)).is_close(translation(V2(1.0 + eps, 0.0)))
    assert polyline([(0.0, 0.0), (1.0, 0.0)]).is_close(polyline([(0.0, 0.0), (1.0 + eps, 0.0)]))
    # An explicit tolerance still wins
    assert not V2(1.0, 2.0).is_close(V2(1.0 + eps, 2.0), tol=1e-9)


def test_is_close_helpers_default_tolerance_is_tight():
    eps = 1e-6
    assert not V2(1.0, 2.0).is_close(V2(1.0 + eps, 2.0))
    assert not translation(V2(1.0, 0.0)).is_close(translation(V2(1.0 + eps, 0.0)))
