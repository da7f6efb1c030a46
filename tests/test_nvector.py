import numpy as np
import pytest

from common.types import LonLat
from geospatial.nvector import (
    DegenerateVectorError,
    NVector,
    as_nvector,
    lonlat_to_nvectors,
    nvectors_to_lonlat,
)


@pytest.mark.parametrize(
    "lon, lat",
    [(0.0, 0.0), (-0.1278, 51.5074), (151.2093, -33.8688), (179.9, 89.9), (-179.9, -89.9)],
)
def test_from_degrees_is_unit_vector(lon, lat):
    assert NVector.from_degrees(lon, lat).norm() == pytest.approx(1.0, abs=1e-15)


@pytest.mark.parametrize(
    "lon, lat",
    [(0.0, 0.0), (-0.1278, 51.5074), (151.2093, -33.8688), (-179.5, 89.5), (179.5, -89.5), (90.0, 0.0)],
)
def test_degrees_round_trip(lon, lat):
    lon_back, lat_back = NVector.from_degrees(lon, lat).to_degrees()
    assert lon_back == pytest.approx(lon, abs=1e-9)
    assert lat_back == pytest.approx(lat, abs=1e-9)


def test_axes():
    assert NVector.from_degrees(0.0, 0.0).isclose(NVector(1.0, 0.0, 0.0))
    assert NVector.from_degrees(90.0, 0.0).isclose(NVector(0.0, 1.0, 0.0))
    assert NVector.from_degrees(0.0, 90.0).isclose(NVector(0.0, 0.0, 1.0))


def test_pole_longitude_is_finite():
    lon, lat = NVector(0.0, 0.0, 1.0).to_degrees()
    assert lat == pytest.approx(90.0)
    assert lon == 0.0


def test_longitude_is_not_wrapped_on_input():
    # 190°E and 170°W are the same point
    assert NVector.from_degrees(190.0, 10.0).isclose(NVector.from_degrees(-170.0, 10.0))
    assert NVector.from_degrees(190.0, 10.0).longitude == pytest.approx(-170.0)


def test_normalize_is_idempotent(london):
    again = london.normalized()
    assert again.isclose(london, atol=1e-15)


def test_normalize_in_place_returns_self():
    vec = NVector(3.0, 0.0, 4.0)
    assert vec.normalize() is vec
    assert vec.isclose(NVector(0.6, 0.0, 0.8))


def test_normalize_zero_vector_raises():
    with pytest.raises(DegenerateVectorError):
        NVector(0.0, 0.0, 0.0).normalize()


def test_degenerate_error_is_value_error():
    with pytest.raises(ValueError):
        NVector().normalized()


def test_vec_is_a_copy(london):
    vec = london.vec
    vec[0] = 42.0
    assert london.x != 42.0


def test_arithmetic():
    a = NVector(1.0, 0.0, 0.0)
    b = NVector(0.0, 1.0, 0.0)
    assert (a + b).isclose(NVector(1.0, 1.0, 0.0))
    assert (a - b).isclose(NVector(1.0, -1.0, 0.0))
    assert (a * 2.0).isclose(NVector(2.0, 0.0, 0.0))
    assert (2.0 * a).isclose(NVector(2.0, 0.0, 0.0))
    assert (-a).isclose(NVector(-1.0, 0.0, 0.0))
    assert a.dot(b) == 0.0
    assert a.cross(b).isclose(NVector(0.0, 0.0, 1.0))


def test_lonlat_conversions():
    position = LonLat(-74.0060, 40.7128)
    assert position.as_tuple() == (-74.0060, 40.7128)
    point = NVector.from_lonlat(position)
    assert point.isclose(NVector.from_degrees(-74.0060, 40.7128), atol=0.0)
    back = point.to_lonlat()
    assert back.longitude == pytest.approx(position.longitude, abs=1e-9)
    assert back.latitude == pytest.approx(position.latitude, abs=1e-9)
    assert as_nvector(position).isclose(point)
    assert as_nvector(point) is point


def test_lonlat_equality_is_exact():
    assert LonLat(1.0, 2.0) == LonLat(1.0, 2.0)
    assert LonLat(1.0, 2.0) != LonLat(1.0, 2.0 + 1e-12)
    assert LonLat(1.0, 2.0) != LonLat(2.0, 1.0)
    assert len({LonLat(1.0, 2.0), LonLat(1.0, 2.0)}) == 1


def test_batch_conversion_matches_scalar():
    lons = np.array([0.0, -0.1278, 151.2093, 45.0])
    lats = np.array([0.0, 51.5074, -33.8688, -45.0])

    vecs = lonlat_to_nvectors(lons, lats)
    assert vecs.shape == (4, 3)
    for vec, lon, lat in zip(vecs, lons, lats):
        np.testing.assert_allclose(vec, NVector.from_degrees(lon, lat).vec, atol=1e-14)

    lons_back, lats_back = nvectors_to_lonlat(vecs)
    np.testing.assert_allclose(lons_back, lons, atol=1e-9)
    np.testing.assert_allclose(lats_back, lats, atol=1e-9)
