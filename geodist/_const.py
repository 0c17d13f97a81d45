"""
Constants declarations for geodist
"""

# Bessel 1841 Ellipsoid (Tokyo Datum)
BESSEL_R_X = 6377397.155  # Equatorial radius (meters)
BESSEL_R_Y = 6356079.0  # Polar radius (meters)

# GRS80 Ellipsoid (JGD2000 / ITRF)
GRS80_R_X = 6378137.0
GRS80_R_Y = 6356752.314140

# WGS84 Ellipsoid (GPS)
WGS84_R_X = 6378137.0
WGS84_R_Y = 6356752.314245

# Display names, indexed by ellipsoid selector
ELLIPSOID_NAMES = ('BESSEL', 'GRS-80', 'WGS-84')

# Decimal places used when printing coordinates
COORDINATE_PRECISION = 8
