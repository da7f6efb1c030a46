import logging

import numpy as np
import pytest

from geospatial.nvector import lonlat_to_nvectors
from geospatial.rotation import RotationMatrix
from validation.geometry_checks import GeometryConsistencyChecker


@pytest.fixture
def checker():
    return GeometryConsistencyChecker(log_violations=False)


def test_unit_norm_passes_for_converted_points(checker):
    vectors = lonlat_to_nvectors(np.array([0.0, 45.0, -120.0]), np.array([0.0, 30.0, -60.0]))
    result = checker.check_unit_norm(vectors)
    assert result.passed
    assert result.details['num_vectors'] == 3


def test_unit_norm_counts_violations(checker):
    result = checker.check_unit_norm(np.array([[1.0, 0.0, 0.0], [2.0, 0.0, 0.0]]))
    assert not result.passed
    assert result.details['num_violations'] == 1
    assert result.details['max_deviation'] == pytest.approx(1.0)


def test_composed_rotation_is_proper(checker):
    result = checker.check_rotation_matrix(RotationMatrix.compose(30.0, 51.5, -0.12))
    assert result.passed
    assert result.details['determinant'] == pytest.approx(1.0)


def test_reflection_fails_rotation_check(checker):
    result = checker.check_rotation_matrix(RotationMatrix(np.diag([1.0, -1.0, 1.0])))
    assert not result.passed


def test_round_trip_wraps_longitude(checker):
    result = checker.check_round_trip(np.array([190.0, -0.1278, 45.0]), np.array([10.0, 51.5074, 90.0]))
    assert result.passed


def test_round_trip_flags_out_of_range_latitude(checker):
    result = checker.check_round_trip(np.array([0.0]), np.array([100.0]))
    assert not result.passed


def test_check_all_runs_given_checks(checker):
    results = checker.check_all(
        vectors=np.array([[0.0, 0.0, 1.0]]),
        rotation=RotationMatrix.identity(),
    )
    assert [r.test_name for r in results] == ["unit_norm", "proper_rotation"]
    assert all(r.passed for r in results)


def test_strict_mode_raises():
    strict = GeometryConsistencyChecker(strict_mode=True, log_violations=False)
    with pytest.raises(ValueError, match="unit_norm"):
        strict.check_unit_norm(np.array([[0.0, 0.0, 0.5]]))


def test_violations_are_logged(caplog):
    logging_checker = GeometryConsistencyChecker()
    with caplog.at_level(logging.WARNING):
        logging_checker.check_unit_norm(np.array([[0.0, 0.0, 0.5]]))
    assert "GEOMETRY CHECK | unit_norm | FAIL" in caplog.text
