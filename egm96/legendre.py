"""
Fully normalized associated Legendre functions, evaluated one order at a time.

Values follow the geodetic normalization, where

    P[n, m] = sqrt((2 - delta(m, 0)) * (2n + 1) * (n - m)! / (n + m)!) * Pnm(cos(theta))

so that P[1, 1] = sqrt(3) sin(theta). Each order is computed independently by a
forward column recurrence over degree, seeded by its sectoral (degree == order) term.
"""

__all__ = ['coefficient_count', 'flattened_legendre', 'legendre_column', 'triangular_index']

import math
from typing import List, Optional

from egm96._const import MAX_DEGREE
from egm96.normalization import NormalizationTables, normalization_tables


def triangular_index(degree: int, order: int) -> int:
    """
    Maps a (degree, order) pair, 0 <= order <= degree, to its key in flat triangular
    storage. Keys are 0-based and dense: degree n occupies keys n(n+1)/2 .. n(n+1)/2 + n.

    Args:
        degree:
            The harmonic degree

        order:
            The harmonic order

    Returns:
        int
    """
    return degree * (degree + 1) // 2 + order


def coefficient_count(max_degree: int) -> int:
    """Number of (degree, order) pairs in an expansion truncated at max_degree"""
    return triangular_index(max_degree + 1, 0)


def _sectoral_terms(order: int, sithet: float, drts, dirt) -> List[float]:
    """P[n, n] for n = 0..order"""
    rlnn = [0.0] * (order + 2)
    rlnn[0] = 1.0
    rlnn[1] = sithet * drts[3]
    for n in range(2, order + 1):
        n2 = 2 * n
        rlnn[n] = drts[n2 + 1] * dirt[n2] * sithet * rlnn[n - 1]

    return rlnn


def legendre_column(
    order: int,
    colatitude: float,
    tables: Optional[NormalizationTables] = None,
    max_degree: int = MAX_DEGREE,
) -> List[float]:
    """
    Computes the normalized associated Legendre functions of a single order for every
    degree up to max_degree.

    The sectoral term seeds the column, the first off-sectoral term is
    P[m+1, m] = sqrt(2m + 3) cos(theta) P[m, m], and the remaining degrees follow the
    standard three-term recurrence. For orders 0 and 1 these seeds reduce to
    P[0, 0] = 1, P[1, 0] = sqrt(3) cos(theta) and P[1, 1] = sqrt(3) sin(theta),
    P[2, 1] = sqrt(5) cos(theta) P[1, 1].

    Args:
        order:
            The harmonic order, 0..max_degree

        colatitude:
            Geocentric colatitude, in radians

        tables: (Default None)
            Normalization tables built for at least max_degree; the process-wide
            tables are used if not provided

        max_degree:
            The highest degree to evaluate

    Returns:
        A new list of length max_degree + 1, indexed by degree. Degrees below
        the order hold 0.0.
    """
    if tables is None:
        tables = normalization_tables(max_degree)

    drts, dirt = tables.drts, tables.dirt
    m = order
    cothet = math.cos(colatitude)
    sithet = math.sin(colatitude)

    rleg = [0.0] * (max_degree + 1)
    rleg[m] = _sectoral_terms(m, sithet, drts, dirt)[m]

    if m + 1 <= max_degree:
        rleg[m + 1] = drts[m * 2 + 3] * cothet * rleg[m]

    for n in range(m + 2, max_degree + 1):
        n2 = 2 * n
        rleg[n] = drts[n2 + 1] * dirt[n + m] * dirt[n - m] * (
            drts[n2 - 1] * cothet * rleg[n - 1]
            - drts[n + m - 1] * drts[n - m - 1] * dirt[n2 - 3] * rleg[n - 2]
        )

    return rleg


def flattened_legendre(
    colatitude: float,
    tables: Optional[NormalizationTables] = None,
    max_degree: int = MAX_DEGREE,
) -> List[float]:
    """
    Evaluates every order's Legendre column and lays the values out in triangular
    order, so that p[triangular_index(n, m)] == P[n, m].

    Args:
        colatitude:
            Geocentric colatitude, in radians

        tables: (Default None)
            Normalization tables; the process-wide tables are used if not provided

        max_degree:
            The maximum degree and order

    Returns:
        List[float] of length (max_degree + 1)(max_degree + 2) / 2
    """
    if tables is None:
        tables = normalization_tables(max_degree)

    p = [0.0] * coefficient_count(max_degree)
    for m in range(max_degree + 1):
        rleg = legendre_column(m, colatitude, tables, max_degree)
        for n in range(m, max_degree + 1):
            p[triangular_index(n, m)] = rleg[n]

    return p
