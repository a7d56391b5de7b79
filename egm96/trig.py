"""
Sines and cosines of integer multiples of a longitude
"""

__all__ = ['longitude_series']

from typing import List, Tuple

import numpy as np

from egm96._const import MAX_DEGREE


def longitude_series(
    longitude: float,
    max_degree: int = MAX_DEGREE
) -> Tuple[List[float], List[float]]:
    """
    Generates sin(m * longitude) and cos(m * longitude) for m = 0..max_degree using the
    two-term recurrence x[m] = 2 cos(longitude) x[m-1] - x[m-2].

    Args:
        longitude:
            Longitude, in radians

        max_degree:
            The highest multiple to generate (at least 2)

    Returns:
        (sinml, cosml), two lists of length max_degree + 1 indexed by m
    """
    with np.errstate(invalid='ignore'):
        a = float(np.sin(longitude))
        b = float(np.cos(longitude))

    sinml = [0.0] * (max_degree + 1)
    cosml = [0.0] * (max_degree + 1)
    cosml[0] = 1.0

    sinml[1] = a
    cosml[1] = b
    sinml[2] = 2 * b * a
    cosml[2] = 2 * b * b - 1

    for m in range(3, max_degree + 1):
        sinml[m] = 2 * b * sinml[m - 1] - sinml[m - 2]
        cosml[m] = 2 * b * cosml[m - 1] - cosml[m - 2]

    return sinml, cosml
