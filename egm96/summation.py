"""
Spherical harmonic synthesis of the geoid undulation
"""

__all__ = ['harmonic_undulation']

from typing import Sequence

from egm96._const import (
    HEIGHT_ANOMALY_SCALE, MAX_DEGREE, WGS84_A, WGS84_GM, WGS84_UNDULATION_OFFSET
)
from egm96.coefficients import CoefficientTable


def harmonic_undulation(
    p: Sequence[float],
    sinml: Sequence[float],
    cosml: Sequence[float],
    gravity: float,
    radius: float,
    coefficients: CoefficientTable,
    max_degree: int = MAX_DEGREE,
) -> float:
    """
    Sums the harmonic expansion into the geoid undulation at one point.

    Two series are accumulated degree by degree in triangular order: the height anomaly
    correction series (unweighted) and the disturbing potential series (weighted by
    (a / r)^n). Degrees 0 and 1 only contribute to the correction series.

    Args:
        p:
            Normalized Legendre values, keyed by triangular index

        sinml:
            sin(m * longitude), indexed by m

        cosml:
            cos(m * longitude), indexed by m

        gravity:
            Normal gravity at the point (m/s^2)

        radius:
            Geocentric radius of the point (m)

        coefficients:
            The coefficient table

        max_degree:
            The degree at which to truncate the expansion

    Returns:
        The undulation, in meters
    """
    cc, cs, hc, hs = coefficients.columns

    ar = WGS84_A / radius
    arn = ar
    ac = 0.0
    a = 0.0

    # Triangular key of (1, 1); each degree starts one past the previous degree's end
    k = 2
    for n in range(2, max_degree + 1):
        arn *= ar
        k += 1
        total = p[k] * hc[k]
        totalc = p[k] * cc[k]

        for m in range(1, n + 1):
            k += 1
            tempc = cc[k] * cosml[m] + cs[k] * sinml[m]
            temp = hc[k] * cosml[m] + hs[k] * sinml[m]
            totalc += p[k] * tempc
            total += p[k] * temp

        ac += totalc
        a += total * arn

    ac += cc[0] + (p[1] * cc[1]) + (p[2] * (cc[2] * cosml[1] + cs[2] * sinml[1]))

    # ac / 100 converts the height anomaly on the ellipsoid to the undulation, and the
    # offset makes the undulation refer to the WGS84 ellipsoid
    return (
        ((a * WGS84_GM) / (gravity * radius))
        + (ac / HEIGHT_ANOMALY_SCALE)
        + WGS84_UNDULATION_OFFSET
    )
