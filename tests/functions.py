
from pytest import approx

from geodist.calc import DistanceResult


def assert_results_equal(r1: DistanceResult, r2: DistanceResult, abs_tol=1e-6):
    """
    Asserts that two distance results are equal within a specified absolute tolerance.

    Args:
        r1: The first DistanceResult
        r2: The second DistanceResult
        abs_tol: The absolute tolerance (meters) for floating point comparison.
                 Default is 1e-6 (one micrometer).
    """
    try:
        assert r1.ellipsoidal_distance == approx(r2.ellipsoidal_distance, abs=abs_tol)
        assert r1.spherical_distance == approx(r2.spherical_distance, abs=abs_tol)
    except AssertionError as e:
        print(r1)
        print(r2)
        raise e
