import pytest

from egm96 import Coordinate, GeoidModel, set_default_model
from egm96.heights import *

from tests.functions import make_table, random_table


@pytest.fixture(scope='module')
def model():
    return GeoidModel(random_table(10))


def test_ellipsoidal_to_orthometric():
    assert ellipsoidal_to_orthometric(100., 30.) == 70.
    assert ellipsoidal_to_orthometric(100., -30.) == 130.


def test_orthometric_to_ellipsoidal():
    assert orthometric_to_ellipsoidal(70., 30.) == 100.
    assert orthometric_to_ellipsoidal(130., -30.) == 100.


def test_convert_height(model):
    coord = Coordinate(-90.220845, 38.628155)
    undulation = model.undulation(coord)

    assert convert_height(coord, 150., 'ellipsoidal', 'orthometric', model) == 150. - undulation
    assert convert_height(
        coord, 150., HeightSystem.ORTHOMETRIC, HeightSystem.ELLIPSOIDAL, model
    ) == 150. + undulation

    # Round trip
    orthometric = convert_height(coord, 150., 'ellipsoidal', 'orthometric', model)
    assert convert_height(
        coord, orthometric, 'orthometric', 'ellipsoidal', model
    ) == pytest.approx(150., abs=1e-9)


def test_convert_height_same_system():
    # No model is needed
    set_default_model(None)
    assert convert_height(Coordinate(0., 0.), 12., 'ellipsoidal', 'ellipsoidal') == 12.


def test_convert_height_default_model():
    set_default_model(GeoidModel(make_table(2)))
    try:
        assert convert_height(
            Coordinate(0., 0.), 12., 'orthometric', 'ellipsoidal'
        ) == pytest.approx(12. - 0.53)
    finally:
        set_default_model(None)


def test_convert_height_unknown_system(model):
    with pytest.raises(ValueError):
        convert_height(Coordinate(0., 0.), 12., 'dynamic', 'ellipsoidal', model)
