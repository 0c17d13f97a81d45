from geodist._version import __version__  # noqa: F401
from geodist.utils.logging import LOGGER
from geodist.calc import DistanceResult, compute
from geodist.coordinates import GeoPoint
from geodist.ellipsoids import Ellipsoid
from geodist.errors import ErrorKind, Failure


__all__ = [
    'DistanceResult',
    'Ellipsoid',
    'ErrorKind',
    'Failure',
    'GeoPoint',
    'compute',
    'LOGGER',
]
