"""
Reference ellipsoids supported by geodist
"""

__all__ = ['Ellipsoid']

from enum import IntEnum
import math
from typing import Tuple

from geodist._const import (
    BESSEL_R_X, BESSEL_R_Y, ELLIPSOID_NAMES,
    GRS80_R_X, GRS80_R_Y, WGS84_R_X, WGS84_R_Y
)


class Ellipsoid(IntEnum):
    """
    A reference ellipsoid, keyed by its integer selector.

        0: Bessel 1841 (old Japanese datum)
        1: GRS80 (world geodetic system)
        2: WGS84 (GPS)

    Ellipsoid(<selector>) raises ValueError for any other selector.
    """
    BESSEL = 0
    GRS80 = 1
    WGS84 = 2

    @property
    def display_name(self) -> str:
        """The name used in printed reports, e.g. 'GRS-80'"""
        return ELLIPSOID_NAMES[self.value]

    @property
    def radii(self) -> Tuple[float, float]:
        """The (equatorial, polar) radii in meters"""
        return _RADII[self]

    @property
    def r_x(self) -> float:
        """Equatorial radius (meters)"""
        return self.radii[0]

    @property
    def r_y(self) -> float:
        """Polar radius (meters)"""
        return self.radii[1]

    @property
    def eccentricity(self) -> float:
        """First eccentricity, sqrt((a^2 - b^2) / a^2)"""
        return math.sqrt((self.r_x ** 2 - self.r_y ** 2) / self.r_x ** 2)

    def _w(self, latitude: float) -> float:
        # Shared denominator of both radii of curvature
        return math.sqrt(1 - self.eccentricity ** 2 * math.sin(latitude) ** 2)

    def meridional_radius(self, latitude: float) -> float:
        """
        The radius of curvature along the meridian (north-south) at a given latitude.

        Args:
            latitude:
                The latitude, in radians

        Returns:
            (float) the radius in meters
        """
        return self.r_x * (1 - self.eccentricity ** 2) / self._w(latitude) ** 3

    def prime_vertical_radius(self, latitude: float) -> float:
        """
        The radius of curvature along the prime vertical (east-west) at a given latitude.

        Args:
            latitude:
                The latitude, in radians

        Returns:
            (float) the radius in meters
        """
        return self.r_x / self._w(latitude)


_RADII = {
    Ellipsoid.BESSEL: (BESSEL_R_X, BESSEL_R_Y),
    Ellipsoid.GRS80: (GRS80_R_X, GRS80_R_Y),
    Ellipsoid.WGS84: (WGS84_R_X, WGS84_R_Y),
}
