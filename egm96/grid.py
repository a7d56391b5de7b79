"""
Evaluation of the undulation over a regular latitude/longitude grid
"""

__all__ = ['undulation_grid']

from typing import Tuple

import numpy as np

from egm96.geoid import GeoidModel
from egm96.utils.logging import warn_once


def _nodes(start: float, stop: float, step: float) -> np.ndarray:
    """Evenly spaced nodes from start to stop inclusive, spaced as close to step as fits"""
    count = max(int(round(abs(stop - start) / step)), 1)
    if not np.isclose(count * step, abs(stop - start)):
        warn_once(
            f'Grid step {step} does not divide {abs(stop - start)} degrees; '
            f'using {abs(stop - start) / count} instead'
        )

    return np.linspace(start, stop, count + 1)


def undulation_grid(
    model: GeoidModel,
    lat_step: float = 5.0,
    lon_step: float = 5.0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Evaluates the model at every node of a global grid, from 90 to -90 degrees latitude
    and from 0 to 360 degrees longitude (both inclusive), the layout of the NGA
    EGM96 grid products.

    Every node is a separate degree 360 synthesis (tens of milliseconds each), so
    the cost grows with the node count: the default 5 degree grid is 2,701 nodes,
    while a 1 degree grid is 65,341 nodes and takes over an hour.

    Args:
        model:
            The geoid model

        lat_step: (Default 5.0)
            The grid spacing in latitude, in degrees

        lon_step: (Default 5.0)
            The grid spacing in longitude, in degrees

    Returns:
        latitudes (n,), longitudes (m,), and the (n, m) array of undulations in meters
    """
    if lat_step <= 0 or lon_step <= 0:
        raise ValueError('Grid spacing must be positive')

    latitudes = _nodes(90., -90., lat_step)
    longitudes = _nodes(0., 360., lon_step)
    lon_grid, lat_grid = np.meshgrid(longitudes, latitudes)

    return latitudes, longitudes, model.compute_altitude_offsets(lat_grid, lon_grid)
