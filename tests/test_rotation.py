import numpy as np
import pytest

from geospatial.nvector import NVector
from geospatial.rotation import RotationMatrix


def test_default_is_identity(london):
    rotation = RotationMatrix()
    np.testing.assert_array_equal(rotation.matrix, np.eye(3))
    assert rotation.transform(london).isclose(london, atol=1e-15)


def test_rejects_non_square_matrix():
    with pytest.raises(ValueError):
        RotationMatrix(np.eye(2))


@pytest.mark.parametrize("builder", ["rotate_x", "rotate_y", "rotate_z"])
@pytest.mark.parametrize("theta", [0.0, 0.3, -1.2, np.pi])
def test_elementary_rotations_are_proper(builder, theta):
    assert getattr(RotationMatrix, builder)(theta).is_proper_rotation()


def test_rotate_z_moves_meridian_to_zero():
    rotated = RotationMatrix.rotate_z(np.radians(30.0)).transform(NVector.from_degrees(30.0, 0.0))
    assert rotated.isclose(NVector(1.0, 0.0, 0.0))


def test_orient_to_north_is_transposed_x_rotation():
    theta = 25.0
    expected = RotationMatrix.rotate_x(np.radians(theta)).matrix.T
    np.testing.assert_allclose(RotationMatrix.orient_to_north(theta).matrix, expected)
    np.testing.assert_allclose(
        RotationMatrix.orient_to_north(theta).matrix,
        RotationMatrix.rotate_x(np.radians(-theta)).matrix,
        atol=1e-15,
    )


@pytest.mark.parametrize(
    "orientation, lat, lon",
    [(0.0, 51.5074, -0.1278), (45.0, -33.8688, 151.2093), (270.0, 89.0, 179.0), (-30.0, 0.0, 0.0)],
)
def test_compose_is_proper_rotation(orientation, lat, lon):
    assert RotationMatrix.compose(orientation, lat, lon).is_proper_rotation()


@pytest.mark.parametrize("orientation", [0.0, 90.0, 213.0])
def test_compose_moves_centre_to_origin(orientation):
    rotation = RotationMatrix.compose(orientation, 51.5074, -0.1278)
    centre = rotation.transform(NVector.from_degrees(-0.1278, 51.5074))
    assert centre.isclose(NVector(1.0, 0.0, 0.0))


def test_compose_applies_longitude_first():
    orientation = RotationMatrix.orient_to_north(10.0)
    latitude = RotationMatrix.rotate_y(np.radians(20.0))
    longitude = RotationMatrix.rotate_z(np.radians(30.0))
    expected = orientation.matrix @ latitude.matrix @ longitude.matrix
    np.testing.assert_allclose(RotationMatrix.compose(10.0, 20.0, 30.0).matrix, expected)


def test_north_up_keeps_north_up():
    rotation = RotationMatrix.compose(0.0, 0.0, 0.0)
    lon, lat = rotation.transform(NVector.from_degrees(0.0, 1.0)).to_degrees()
    assert lon == pytest.approx(0.0, abs=1e-12)
    assert lat == pytest.approx(1.0)


def test_east_up_turns_north_to_the_left():
    rotation = RotationMatrix.compose(90.0, 0.0, 0.0)
    lon, lat = rotation.transform(NVector.from_degrees(0.0, 1.0)).to_degrees()
    assert lon == pytest.approx(-1.0)
    assert lat == pytest.approx(0.0, abs=1e-12)

    lon, lat = rotation.transform(NVector.from_degrees(1.0, 0.0)).to_degrees()
    assert lon == pytest.approx(0.0, abs=1e-12)
    assert lat == pytest.approx(1.0)


def test_transform_returns_unit_vector(new_york):
    rotation = RotationMatrix.compose(12.0, 34.0, 56.0)
    assert rotation.transform(new_york).norm() == pytest.approx(1.0, abs=1e-15)


def test_transform_renormalizes_drift(new_york):
    drifted = RotationMatrix(np.eye(3) * 1.001)
    assert drifted.transform(new_york).norm() == pytest.approx(1.0, abs=1e-15)
    assert not drifted.is_proper_rotation()


def test_transform_many_matches_transform(london, new_york):
    rotation = RotationMatrix.compose(30.0, 45.0, -60.0)
    rotated = rotation.transform_many(np.array([london.vec, new_york.vec]))
    np.testing.assert_allclose(rotated[0], rotation.transform(london).vec, atol=1e-14)
    np.testing.assert_allclose(rotated[1], rotation.transform(new_york).vec, atol=1e-14)


def test_reflection_is_not_proper_rotation():
    assert not RotationMatrix(np.diag([1.0, 1.0, -1.0])).is_proper_rotation()


def test_matmul_composes():
    a = RotationMatrix.rotate_x(0.4)
    b = RotationMatrix.rotate_z(1.1)
    np.testing.assert_allclose((a @ b).matrix, a.matrix @ b.matrix)
    np.testing.assert_allclose((a @ a.transpose()).matrix, np.eye(3), atol=1e-15)
