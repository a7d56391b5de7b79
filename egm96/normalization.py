"""
Square root tables used to keep the normalized Legendre recurrence numerically bounded
"""

__all__ = ['NormalizationTables', 'build_normalization_tables', 'normalization_tables']

from functools import lru_cache
from typing import Tuple

import numpy as np

from egm96._const import MAX_DEGREE


class NormalizationTables:
    """
    Immutable tables of sqrt(n) (drts) and 1/sqrt(n) (dirt) for n in 1..2*max_degree+1.

    Slot 0 of each table is NaN and is never read by the recurrence.
    """

    def __init__(self, max_degree: int = MAX_DEGREE):
        roots = np.sqrt(np.arange(1, 2 * max_degree + 2, dtype=np.float64))

        self.max_degree = max_degree
        self.drts: Tuple[float, ...] = (np.nan, *roots.tolist())
        self.dirt: Tuple[float, ...] = (np.nan, *(1 / roots).tolist())

    def __repr__(self):
        return f'<NormalizationTables(max_degree={self.max_degree})>'

    def __len__(self):
        return len(self.drts)


def build_normalization_tables(max_degree: int = MAX_DEGREE) -> NormalizationTables:
    """
    Builds the normalization tables for a harmonic expansion of a given degree.

    Args:
        max_degree:
            The maximum degree (and order) of the expansion

    Returns:
        NormalizationTables
    """
    return NormalizationTables(max_degree)


@lru_cache(maxsize=None)
def normalization_tables(max_degree: int = MAX_DEGREE) -> NormalizationTables:
    """Process-wide normalization tables, built once per degree"""
    return build_normalization_tables(max_degree)
