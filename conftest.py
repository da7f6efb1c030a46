"""Pytest configuration for the n-vector geometry package."""

import pytest

from geospatial.nvector import NVector


@pytest.fixture
def origin() -> NVector:
    """(0°, 0°)."""
    return NVector.from_degrees(0.0, 0.0)


@pytest.fixture
def london() -> NVector:
    return NVector.from_degrees(-0.1278, 51.5074)


@pytest.fixture
def new_york() -> NVector:
    return NVector.from_degrees(-74.0060, 40.7128)
