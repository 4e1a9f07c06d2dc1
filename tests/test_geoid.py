# -*- coding: utf-8 -*-
"""
Geoid Undulation Tests - Scalar/array/(2,N) dispatch and method choice.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

import numpy as np
import pytest

from geoidgrid.exceptions import InvalidQueryError, ValidationError
from geoidgrid.geoid import GeoidUndulation
from geoidgrid.grid import SENTINEL
from geoidgrid.interpolation import bilinear, interpolate
from geoidgrid.vocabulary import InterpolationMethod


class TestConstruction:
    """Test GeoidUndulation construction."""

    def test_from_model(self, model):
        geoid = GeoidUndulation(model)
        assert geoid.model is model
        assert geoid.method is InterpolationMethod.SPLINE
        assert geoid.max_radius_km == 12.0

    def test_from_path(self, grid_file):
        geoid = GeoidUndulation(grid_file)
        assert geoid.model.source == grid_file

    def test_nonexistent_path_raises(self):
        with pytest.raises(FileNotFoundError, match="does not exist"):
            GeoidUndulation('/nonexistent/ww15mgh.grd.tsv')

    def test_method_from_string(self, model):
        assert GeoidUndulation(model, method='bilinear').method is (
            InterpolationMethod.BILINEAR
        )

    def test_unknown_method(self, model):
        with pytest.raises(ValidationError, match="Unknown interpolation"):
            GeoidUndulation(model, method='nearest')


class TestDispatch:
    """Test the three input forms of get_undulation."""

    def test_scalar(self, model):
        geoid = GeoidUndulation(model)
        result = geoid.get_undulation(38.628155, 269.779155)
        assert isinstance(result, float)
        assert result == interpolate(model, 12.0, 38.628155, 269.779155)

    def test_arrays(self, model):
        geoid = GeoidUndulation(model)
        lats = np.array([38.628155, -14.621217])
        lons = np.array([269.779155, 305.021114])
        result = geoid.get_undulation(lats, lons)
        assert isinstance(result, np.ndarray)
        assert result.shape == (2,)
        assert result[1] == interpolate(model, 12.0, -14.621217, 305.021114)

    def test_lists(self, model):
        geoid = GeoidUndulation(model)
        result = geoid.get_undulation([10.0, 20.0], [30.0, 40.0])
        assert result.shape == (2,)

    def test_stacked_2xN(self, model):
        geoid = GeoidUndulation(model)
        pts = np.array([[10.0, 20.0, -90.0], [30.0, 40.0, 0.0]])
        result = geoid.get_undulation(pts)
        assert result.shape == (3,)
        assert result[2] == SENTINEL

    def test_bad_stacked_shape(self, model):
        geoid = GeoidUndulation(model)
        with pytest.raises(ValueError, match="Expected \\(2, N\\)"):
            geoid.get_undulation(np.zeros((3, 2)))

    def test_negative_longitude_shifted(self, model):
        geoid = GeoidUndulation(model)
        assert geoid.get_undulation(38.6, -90.2) == pytest.approx(
            geoid.get_undulation(38.6, 269.8), abs=1e-9
        )

    def test_longitude_below_range_rejected(self, model):
        geoid = GeoidUndulation(model)
        with pytest.raises(InvalidQueryError):
            geoid.get_undulation(0.0, -200.0)

    def test_shift_lower_bound(self, model):
        geoid = GeoidUndulation(model)
        assert geoid.get_undulation(10.0, -180.0) == pytest.approx(
            geoid.get_undulation(10.0, 180.0), abs=1e-9
        )
        with pytest.raises(InvalidQueryError, match="Longitude"):
            geoid.get_undulation(10.0, -180.25)

    def test_array_with_longitude_below_range(self, model):
        geoid = GeoidUndulation(model)
        with pytest.raises(InvalidQueryError, match="Longitude"):
            geoid.get_undulation([10.0, 10.0], [-90.0, -359.0])

    def test_zero_dim_array_is_scalar(self, model):
        geoid = GeoidUndulation(model)
        result = geoid.get_undulation(np.float64(10.0), np.array(30.0))
        assert isinstance(result, float)

    def test_bilinear_method(self, model):
        geoid = GeoidUndulation(model, method=InterpolationMethod.BILINEAR)
        assert geoid.get_undulation(-90.0, 0.0) == bilinear(model, -90.0, 0.0)

    def test_is_sentinel(self, model):
        geoid = GeoidUndulation(model)
        values = geoid.get_undulation([-90.0, 0.0], [0.0, 10.0])
        np.testing.assert_array_equal(
            GeoidUndulation.is_sentinel(values), [True, False]
        )
