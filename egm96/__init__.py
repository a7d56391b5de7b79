
from egm96._version import __version__  # noqa: F401
from egm96.utils.logging import LOGGER
from egm96.coefficients import CoefficientTable
from egm96.coordinates import Coordinate
from egm96.geoid import (
    GeoidModel, compute_altitude_offset, get_default_model, set_default_model
)
from egm96.heights import HeightSystem, convert_height


__all__ = [
    'CoefficientTable',
    'Coordinate',
    'GeoidModel',
    'HeightSystem',
    'compute_altitude_offset',
    'convert_height',
    'get_default_model',
    'set_default_model',
    'LOGGER',
]
