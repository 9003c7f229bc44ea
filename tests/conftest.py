"""
Pytest configuration and shared fixtures for braidpreflight tests.
"""

import pytest

from braidpreflight.io import BraidParams


# ─── Parameter sets ──────────────────────────────────────────────────────


@pytest.fixture
def default_params():
    """The UI defaults: nominal on every check."""
    return _make_params()


@pytest.fixture
def dense_params():
    """Small radius, many strands, high tension: one error, one warning."""
    return _make_params(radius=3, length=50, strand_count=60, angle_deg=30, tension=0.8)


@pytest.fixture
def extreme_angle_params():
    """Defaults with the braid angle past the extreme threshold."""
    return _make_params(angle_deg=80)


@pytest.fixture
def make_params():
    """Factory fixture: defaults with keyword overrides."""
    return _make_params


# ─── Helper functions (no pytest dependency) ──────────────────────────────


def _make_params(**overrides):
    """Build BraidParams from the defaults plus overrides (snake_case)."""
    values = {
        "radius": 12.0,
        "length": 120.0,
        "strand_count": 24,
        "angle_deg": 55.0,
        "tension": 0.55,
    }
    values.update(overrides)
    return BraidParams(**values)
