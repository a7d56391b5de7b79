"""
Module for height system conversions

Ellipsoidal height (h): height above the WGS84 ellipsoid, as reported by GNSS receivers
Orthometric height (H): height above the geoid, i.e. mean sea level
Undulation (N): height of the geoid above the ellipsoid

h = H + N
"""
__all__ = [
    'HeightSystem', 'convert_height', 'ellipsoidal_to_orthometric',
    'orthometric_to_ellipsoidal'
]

from enum import Enum
from typing import Optional, Union

from egm96.coordinates import Coordinate
from egm96.geoid import GeoidModel, get_default_model


class HeightSystem(Enum):
    """Supported height reference systems"""
    ELLIPSOIDAL = 'ellipsoidal'
    ORTHOMETRIC = 'orthometric'


def ellipsoidal_to_orthometric(height: float, undulation: float) -> float:
    """
    Converts a height above the ellipsoid to a height above the geoid.

    Args:
        height (float): The ellipsoidal height, in meters.
        undulation (float): The geoid undulation at the point, in meters.

    Returns:
        float: The orthometric height in meters.
    """
    return height - undulation


def orthometric_to_ellipsoidal(height: float, undulation: float) -> float:
    """
    Converts a height above the geoid to a height above the ellipsoid.

    Args:
        height (float): The orthometric height, in meters.
        undulation (float): The geoid undulation at the point, in meters.

    Returns:
        float: The ellipsoidal height in meters.
    """
    return height + undulation


def convert_height(
    coordinate: Coordinate,
    height: float,
    source: Union[HeightSystem, str],
    target: Union[HeightSystem, str],
    model: Optional[GeoidModel] = None,
) -> float:
    """
    Converts a height at a coordinate between the ellipsoidal and orthometric systems.

    Args:
        coordinate:
            The location of the height

        height:
            The height to convert, in meters

        source:
            The height system of the input ('ellipsoidal' or 'orthometric')

        target:
            The desired height system ('ellipsoidal' or 'orthometric')

        model: (Default None)
            The geoid model; the default model if not provided

    Returns:
        float: The converted height, in meters
    """
    source, target = HeightSystem(source), HeightSystem(target)
    if source == target:
        return height

    undulation = (model or get_default_model()).undulation(coordinate)
    conversions = {
        HeightSystem.ELLIPSOIDAL: ellipsoidal_to_orthometric,
        HeightSystem.ORTHOMETRIC: orthometric_to_ellipsoidal,
    }
    return conversions[source](height, undulation)
