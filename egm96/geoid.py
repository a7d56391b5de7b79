"""
Geoid undulation from the EGM96 spherical harmonic model.

Usage:

    model = GeoidModel.from_nga_files('EGM96', 'CORCOEF')
    model.compute_altitude_offset(38.628155, 269.779155)  # approximately -31.63

The model only reads its coefficient and normalization tables, so a single instance
may be shared between threads.
"""

__all__ = [
    'GeoidModel', 'compute_altitude_offset', 'get_default_model', 'set_default_model'
]

import math
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
from pydantic import validate_call

from egm96._const import MAX_DEGREE
from egm96.coefficients import CoefficientTable
from egm96.coordinates import Coordinate
from egm96.geocentric import geocentric_metrics
from egm96.legendre import flattened_legendre
from egm96.normalization import normalization_tables
from egm96.summation import harmonic_undulation
from egm96.trig import longitude_series
from egm96.utils.functions import round_half_up
from egm96.utils.mixins import LoggingMixin


class GeoidModel(LoggingMixin):
    """
    Evaluates the geoid undulation (height of the geoid above the WGS84 ellipsoid) at
    arbitrary points.

    Args:
        coefficients:
            The EGM96 coefficient table. The expansion is truncated at the table's
            maximum degree.
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, coefficients: CoefficientTable):
        super().__init__()
        self.coefficients = coefficients
        self.max_degree = coefficients.max_degree
        self.tables = normalization_tables(self.max_degree)

    def __repr__(self):
        return f'<GeoidModel(max_degree={self.max_degree})>'

    @classmethod
    def from_nga_files(
        cls,
        harmonics_path: Path,
        corrections_path: Path,
        max_degree: int = MAX_DEGREE,
    ) -> 'GeoidModel':
        """Creates a model from the NGA EGM96 and CORCOEF text files"""
        return cls(
            CoefficientTable.from_nga_files(harmonics_path, corrections_path, max_degree)
        )

    @classmethod
    def from_npy(cls, path: Path, max_degree: int = MAX_DEGREE) -> 'GeoidModel':
        """Creates a model from a coefficient table packed with CoefficientTable.to_npy()"""
        return cls(CoefficientTable.from_npy(path, max_degree))

    def compute_altitude_offset(self, latitude: float, longitude: float) -> float:
        """
        Computes the geoid undulation for a given latitude and longitude.

        Inputs are not validated: NaN or infinite values produce NaN. Exactly at the
        poles the geocentric latitude is evaluated from a near-zero (but non-zero)
        equatorial distance and the result stays finite.

        Args:
            latitude:
                Geodetic latitude, in degrees

            longitude:
                Longitude, in degrees

        Returns:
            The undulation in meters, positive when the geoid is above the ellipsoid
        """
        if abs(latitude) == 90:
            self.warn_once(
                'Undulation requested exactly at a pole, where the geocentric latitude is '
                'numerically degenerate. (this warning will not repeat)'
            )

        rad = 180.0 / math.pi
        return self._compute_altitude_offset_radians(latitude / rad, longitude / rad)

    def _compute_altitude_offset_radians(self, latitude: float, longitude: float) -> float:
        """Runs the synthesis for a latitude and longitude in radians"""
        state = geocentric_metrics(latitude, longitude)
        colatitude = (math.pi / 2) - state.latitude

        p = flattened_legendre(colatitude, self.tables, self.max_degree)
        sinml, cosml = longitude_series(longitude, self.max_degree)

        return harmonic_undulation(
            p, sinml, cosml, state.gravity, state.radius, self.coefficients, self.max_degree
        )

    def compute_altitude_offsets(
        self,
        latitudes: Iterable[float],
        longitudes: Iterable[float],
    ) -> np.ndarray:
        """
        Computes the undulation at each (latitude, longitude) pair. Every point is
        evaluated independently.

        Args:
            latitudes:
                Geodetic latitudes, in degrees

            longitudes:
                Longitudes, in degrees, of the same shape as latitudes

        Returns:
            np.ndarray of undulations in meters, shaped like the inputs
        """
        lats = np.asarray(latitudes, dtype=np.float64)
        lons = np.asarray(longitudes, dtype=np.float64)
        if lats.shape != lons.shape:
            raise ValueError(
                f'Latitudes {lats.shape} and longitudes {lons.shape} must have the same shape'
            )

        return np.fromiter(
            (
                self.compute_altitude_offset(lat, lon)
                for lat, lon in zip(lats.ravel().tolist(), lons.ravel().tolist())
            ),
            dtype=np.float64,
            count=lats.size,
        ).reshape(lats.shape)

    def undulation(self, coordinate: Coordinate, precision: Optional[int] = None) -> float:
        """
        Computes the geoid undulation at a Coordinate.

        Args:
            coordinate:
                The Coordinate

            precision: (Default None)
                Decimal places to round the result to, if any

        Returns:
            The undulation, in meters
        """
        result = self.compute_altitude_offset(coordinate.latitude, coordinate.longitude)
        if precision is None:
            return result

        return round_half_up(result, precision)


# The model used by the module-level compute_altitude_offset()
_DEFAULT_MODEL: Optional[GeoidModel] = None


def set_default_model(model: Optional[GeoidModel]) -> None:
    """
    Set the process-wide geoid model. Install it before sharing between threads.

    Args:
        model:
            A GeoidModel, or None to clear the default
    """
    global _DEFAULT_MODEL  # pylint: disable=global-statement
    _DEFAULT_MODEL = model


def get_default_model() -> GeoidModel:
    """Returns the process-wide geoid model"""
    if _DEFAULT_MODEL is None:
        raise RuntimeError(
            'No default geoid model has been set; load one with GeoidModel.from_nga_files() '
            'or GeoidModel.from_npy() and install it with set_default_model()'
        )

    return _DEFAULT_MODEL


def compute_altitude_offset(
    latitude: float,
    longitude: float,
    model: Optional[GeoidModel] = None
) -> float:
    """
    Compute the geoid undulation (in meters) for a latitude and longitude in degrees.

    Args:
        latitude:
            Geodetic latitude, in degrees

        longitude:
            Longitude, in degrees

        model: (Default None)
            The model to evaluate; the default model if not provided

    Returns:
        The undulation, in meters
    """
    return (model or get_default_model()).compute_altitude_offset(latitude, longitude)
