"""
Conversion of geodetic coordinates to geocentric radius, latitude and normal gravity
"""

__all__ = ['GeocentricState', 'geocentric_metrics']

from typing import NamedTuple

import numpy as np

from egm96._const import WGS84_A, WGS84_E2, WGS84_GEQT, WGS84_K


class GeocentricState(NamedTuple):
    """Geocentric quantities of a point on the WGS84 ellipsoid"""
    radius: float  # meters
    latitude: float  # radians
    gravity: float  # m/s^2


def geocentric_metrics(latitude: float, longitude: float) -> GeocentricState:
    """
    Computes the geocentric distance to a point on the ellipsoid, its geocentric latitude,
    and an approximate value of normal gravity there, using the WGS84(G873) constants.

    NaN or infinite inputs propagate to NaN results rather than raising. At exactly
    +/-90 degrees cos(latitude) is a tiny non-zero float, so the geocentric latitude
    remains finite (approximately +/-pi/2); no clamping is applied near the poles.

    Args:
        latitude:
            Geodetic latitude, in radians

        longitude:
            Longitude, in radians

    Returns:
        GeocentricState
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        sin_lat = np.sin(latitude)
        t1 = sin_lat * sin_lat
        n = WGS84_A / np.sqrt(1.0 - (WGS84_E2 * t1))
        t2 = n * np.cos(latitude)
        x = t2 * np.cos(longitude)
        y = t2 * np.sin(longitude)
        z = (n * (1 - WGS84_E2)) * sin_lat

        re = np.sqrt((x * x) + (y * y) + (z * z))
        rlat = np.arctan(z / np.sqrt((x * x) + (y * y)))
        gr = WGS84_GEQT * (1 + (WGS84_K * t1)) / np.sqrt(1 - (WGS84_E2 * t1))

    return GeocentricState(float(re), float(rlat), float(gr))
