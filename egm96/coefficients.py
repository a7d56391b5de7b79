"""
The EGM96 coefficient table: correction and harmonic coefficients in triangular order
"""

__all__ = ['COEFFICIENT_COUNT', 'CoefficientTable']

from pathlib import Path
from typing import Iterator, Tuple

import numpy as np
from pydantic import validate_call

from egm96._const import MAX_DEGREE, MIN_DEGREE, WGS84_EVEN_ZONALS
from egm96.legendre import coefficient_count, triangular_index
from egm96.utils.logging import LOGGER
from egm96.utils.mixins import LoggingMixin

# Rows in a full degree 360 table
COEFFICIENT_COUNT = coefficient_count(MAX_DEGREE)


def _fortran_lines(path: Path) -> Iterator[str]:
    """Yields the lines of a text file with Fortran 'D' exponents made numpy-readable"""
    with open(path, 'r', encoding='utf-8') as fh:
        for line in fh:
            yield line.replace('D', 'E').replace('d', 'e')


class CoefficientTable(LoggingMixin):
    """
    Immutable (count, 4) table of EGM96 coefficients, with rows keyed by
    triangular_index(degree, order) and columns:

        0: correction coefficient C (height anomaly to undulation)
        1: correction coefficient S
        2: harmonic coefficient C, WGS84 normal field even zonals removed
        3: harmonic coefficient S

    A table exported with 1-based keys (one leading padding row) is accepted; the
    padding row is dropped.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, values: np.ndarray, max_degree: int = MAX_DEGREE):
        super().__init__()
        if max_degree < MIN_DEGREE:
            raise ValueError(
                f'Coefficient table degree must be at least {MIN_DEGREE}, received {max_degree}'
            )

        count = coefficient_count(max_degree)
        values = np.array(values, dtype=np.float64)

        if values.shape == (count + 1, 4):
            self.logger.debug('Dropping leading padding row of a 1-based coefficient table')
            values = values[1:]

        if values.shape != (count, 4):
            raise ValueError(
                f'Coefficient table for degree {max_degree} must have shape ({count}, 4), '
                f'received {values.shape}'
            )

        values.flags.writeable = False
        self.values = values
        self.max_degree = max_degree

        # Plain float columns for the scalar summation loop
        self.columns: Tuple[Tuple[float, ...], ...] = tuple(
            tuple(column.tolist()) for column in values.T
        )

    def __len__(self):
        return len(self.values)

    def __repr__(self):
        return f'<CoefficientTable(max_degree={self.max_degree})>'

    def coefficient(self, degree: int, order: int) -> Tuple[float, float, float, float]:
        """
        Returns the (correction C, correction S, harmonic C, harmonic S) coefficients of
        a single degree and order.
        """
        if not 0 <= order <= degree <= self.max_degree:
            raise ValueError(
                f'Degree/order ({degree}, {order}) outside of the table, '
                f'maximum degree {self.max_degree}'
            )

        cc, cs, hc, hs = self.values[triangular_index(degree, order)].tolist()
        return cc, cs, hc, hs

    @classmethod
    @validate_call
    def from_nga_files(
        cls,
        harmonics_path: Path,
        corrections_path: Path,
        max_degree: int = MAX_DEGREE,
    ):
        """
        Builds the table from the NGA text distribution of EGM96.

        The harmonics file lists "n m C S sigmaC sigmaS" per row (the sigmas are
        ignored); the corrections file lists "n m C S". Degrees above max_degree are
        skipped. The even degree zonals of the WGS84 normal field are removed from the
        harmonic C coefficients so the synthesis yields the disturbing potential.

        Args:
            harmonics_path:
                Path to the EGM96 potential coefficient file

            corrections_path:
                Path to the CORCOEF correction coefficient file

            max_degree: (Default 360)
                The degree at which to truncate the table

        Returns:
            CoefficientTable
        """
        values = np.zeros((coefficient_count(max_degree), 4))
        for path, column in ((corrections_path, 0), (harmonics_path, 2)):
            cls._fill_from_file(values, path, column, max_degree)

        for degree, zonal in WGS84_EVEN_ZONALS.items():
            if degree <= max_degree:
                values[triangular_index(degree, 0), 2] += zonal / np.sqrt(2 * degree + 1)

        return cls(values, max_degree)

    @staticmethod
    def _fill_from_file(values: np.ndarray, path: Path, column: int, max_degree: int):
        """Writes a file's C and S coefficients into a pair of table columns"""
        rows = np.loadtxt(_fortran_lines(path), usecols=(0, 1, 2, 3), ndmin=2)
        degrees = rows[:, 0].astype(int)
        orders = rows[:, 1].astype(int)

        if np.any(degrees != rows[:, 0]) or np.any(orders != rows[:, 1]):
            raise ValueError(f'Non-integer degree or order in {path}')

        if np.any((orders < 0) | (orders > degrees)):
            raise ValueError(f'Order outside of 0..degree in {path}')

        keep = degrees <= max_degree
        if not np.all(keep):
            LOGGER.debug(
                'Skipping %d coefficients above degree %d in %s',
                np.count_nonzero(~keep), max_degree, path
            )

        keys = triangular_index(degrees[keep], orders[keep])
        values[keys, column] = rows[keep, 2]
        values[keys, column + 1] = rows[keep, 3]
        LOGGER.info('Loaded %d coefficients from %s', len(keys), path)

    @classmethod
    @validate_call
    def from_npy(cls, path: Path, max_degree: int = MAX_DEGREE):
        """
        Loads a table packed with CoefficientTable.to_npy()

        Args:
            path:
                Path to the .npy file

            max_degree: (Default 360)
                The degree the table was built for

        Returns:
            CoefficientTable
        """
        values = np.load(path, allow_pickle=False)
        LOGGER.info('Loaded coefficient table %s from %s', values.shape, path)
        return cls(values, max_degree)

    def to_npy(self, path: Path) -> None:
        """Packs the table into a .npy file"""
        np.save(path, self.values, allow_pickle=False)
