import logging
import math

import numpy as np
import pytest

from egm96.coefficients import *
from egm96.legendre import coefficient_count


HARMONICS = """\
    2    0 -0.484165371736D-03  0.000000000000D+00  0.35610635D-10  0.00000000D+00
    2    1 -0.186987635955D-09  0.119528012031D-08  0.10000000D-10  0.10000000D-10
    2    2  0.243914352398D-05 -0.140016683654D-05  0.53739154D-10  0.54353269D-10
    3    0  0.957254173792D-06  0.000000000000D+00  0.18094237D-10  0.00000000D+00
    4    0  0.539873863789D-06  0.000000000000D+00  0.10423678D-09  0.00000000D+00
"""

CORRECTIONS = """\
    0    0  0.138169197993D+01  0.000000000000D+00
    1    1  0.500000000000D+00 -0.250000000000D+00
    3    2  0.120000000000D+01  0.700000000000D+00
"""


@pytest.fixture
def nga_files(tmp_path):
    harmonics = tmp_path / 'EGM96'
    harmonics.write_text(HARMONICS)
    corrections = tmp_path / 'CORCOEF'
    corrections.write_text(CORRECTIONS)
    return harmonics, corrections


def test_coefficient_count():
    assert COEFFICIENT_COUNT == 65341
    assert coefficient_count(2) == 6
    assert coefficient_count(10) == 66


def test_coefficient_table_init():
    values = np.zeros((COEFFICIENT_COUNT, 4))
    table = CoefficientTable(values)
    assert len(table) == 65341
    assert table.max_degree == 360
    assert repr(table) == '<CoefficientTable(max_degree=360)>'
    assert len(table.columns) == 4
    assert all(len(column) == 65341 for column in table.columns)


def test_coefficient_table_immutable():
    values = np.zeros((COEFFICIENT_COUNT, 4))
    table = CoefficientTable(values)

    with pytest.raises(ValueError):
        table.values[0, 0] = 1.

    # The table holds its own copy
    values[0, 0] = 1.
    assert table.values[0, 0] == 0.


def test_coefficient_table_padding_row():
    values = np.arange((COEFFICIENT_COUNT + 1) * 4, dtype=float).reshape(-1, 4)
    table = CoefficientTable(values)
    assert len(table) == COEFFICIENT_COUNT
    assert table.coefficient(0, 0) == (4., 5., 6., 7.)


def test_coefficient_table_bad_shape():
    with pytest.raises(ValueError):
        CoefficientTable(np.zeros((100, 4)))

    with pytest.raises(ValueError):
        CoefficientTable(np.zeros((COEFFICIENT_COUNT, 3)))

    with pytest.raises(ValueError):
        CoefficientTable(np.zeros(COEFFICIENT_COUNT * 4))

    with pytest.raises(ValueError):
        CoefficientTable(np.zeros((COEFFICIENT_COUNT, 4)), max_degree=10)

    # Must be an array
    with pytest.raises(ValueError):
        CoefficientTable([[0., 0., 0., 0.]] * COEFFICIENT_COUNT)

    # Degrees 0 and 1 are too small for the low-degree correction terms
    for max_degree in (0, 1):
        with pytest.raises(ValueError):
            CoefficientTable(np.zeros((coefficient_count(max_degree), 4)), max_degree)


def test_coefficient_table_coefficient():
    values = np.zeros((10, 4))
    values[8] = (1., 2., 3., 4.)
    table = CoefficientTable(values, max_degree=3)
    assert table.coefficient(3, 2) == (1., 2., 3., 4.)
    assert all(isinstance(x, float) for x in table.coefficient(3, 2))

    with pytest.raises(ValueError):
        table.coefficient(2, 3)

    with pytest.raises(ValueError):
        table.coefficient(4, 0)


def test_coefficient_table_from_nga_files(nga_files):
    table = CoefficientTable.from_nga_files(*nga_files, max_degree=3)
    assert len(table) == 10

    # Normal field J2 removed from C20
    assert table.coefficient(2, 0)[2] == pytest.approx(
        -0.484165371736e-03 + 0.108262982131e-2 / math.sqrt(5), rel=1e-12
    )
    assert table.coefficient(2, 1) == (0., 0., -0.186987635955e-09, 0.119528012031e-08)
    assert table.coefficient(2, 2)[3] == -0.140016683654e-05
    assert table.coefficient(3, 0)[2] == 0.957254173792e-06

    assert table.coefficient(0, 0) == (0.138169197993e+01, 0., 0., 0.)
    assert table.coefficient(1, 1) == (0.5, -0.25, 0., 0.)
    assert table.coefficient(3, 2) == (1.2, 0.7, 0., 0.)
    assert table.coefficient(1, 0) == (0., 0., 0., 0.)


def test_coefficient_table_from_nga_files_degree_four(nga_files):
    table = CoefficientTable.from_nga_files(*nga_files, max_degree=4)
    assert table.coefficient(4, 0)[2] == pytest.approx(
        0.539873863789e-06 - 0.237091120053e-05 / 3, rel=1e-12
    )


def test_coefficient_table_from_nga_files_logging(nga_files, caplog):
    caplog.set_level(logging.INFO, logger='egm96')
    CoefficientTable.from_nga_files(*nga_files, max_degree=3)
    assert 'Loaded 3 coefficients' in caplog.text
    assert 'Loaded 4 coefficients' in caplog.text


def test_coefficient_table_from_nga_files_invalid(tmp_path, nga_files):
    _, corrections = nga_files

    bad_order = tmp_path / 'bad_order'
    bad_order.write_text('    2    3  0.1D-05  0.2D-05  0.0D+00  0.0D+00\n')
    with pytest.raises(ValueError):
        CoefficientTable.from_nga_files(bad_order, corrections, max_degree=3)

    malformed = tmp_path / 'malformed'
    malformed.write_text('    2    0  abc  0.2D-05  0.0D+00  0.0D+00\n')
    with pytest.raises(ValueError):
        CoefficientTable.from_nga_files(malformed, corrections, max_degree=3)


def test_coefficient_table_npy(tmp_path, nga_files):
    table = CoefficientTable.from_nga_files(*nga_files, max_degree=3)
    table.to_npy(tmp_path / 'egm96.npy')

    loaded = CoefficientTable.from_npy(tmp_path / 'egm96.npy', max_degree=3)
    np.testing.assert_array_equal(loaded.values, table.values)
    assert loaded.columns == table.columns

    # Paths may be strings
    loaded = CoefficientTable.from_npy(str(tmp_path / 'egm96.npy'), max_degree=3)
    assert loaded.max_degree == 3
