"""
Shared test fixtures: test client, common geometry.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.layout.geometry import Plane, Transform, Unit, Viewport


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def plane():
    """4m x 3m plane."""
    return Plane(width=4.0, height=3.0)


@pytest.fixture
def square_unit():
    """1m x 1m unit."""
    return Unit(width=1.0, length=1.0)


@pytest.fixture
def viewport():
    """440 x 340 px with 20px padding: a 4x3 plane maps to exactly 100 px/m."""
    return Viewport(width=440.0, height=340.0, padding=20.0)


@pytest.fixture
def transform():
    """Transform produced by the plane + viewport fixtures."""
    return Transform(scale=100.0, x0=20.0, y0=20.0, x1=420.0, y1=320.0)
