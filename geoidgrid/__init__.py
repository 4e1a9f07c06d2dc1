# -*- coding: utf-8 -*-
"""
geoidgrid - EGM96 15-arc-minute geoid undulation interpolation.

Loads the global EGM96 geoid grid (0.25 x 0.25 degree, 721 x 1441
samples) into a padded lookup table and evaluates the geoid undulation
at arbitrary coordinates with a local bicubic spline, or with a
bilinear fallback.

Usage
-----
    >>> from geoidgrid import load_grid, interpolate, bilinear
    >>> model = load_grid('ww15mgh.grd.tsv')
    >>> interpolate(model, 12.0, 38.628155, 269.779155)
    -31.628...
    >>> interpolate(model, 12.0, -90.0, 360.0)
    999999.0
    >>> bilinear(model, -90.0, 360.0) != 999999.0
    True

Dependencies
------------
numpy

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

__version__ = "0.1.0"

from geoidgrid.exceptions import (
    GeoidGridError,
    GridFormatError,
    GridLookupError,
    InvalidQueryError,
    ValidationError,
)
from geoidgrid.vocabulary import InterpolationMethod
from geoidgrid.grid import SENTINEL, GridHeader, GridModel, GridTable
from geoidgrid.loader import load_grid, parse_grid
from geoidgrid.spline import evaluate, solve_coefficients
from geoidgrid.interpolation import (
    DEFAULT_RADIUS_KM,
    bilinear,
    bilinear_array,
    interpolate,
    interpolate_array,
)
from geoidgrid.geoid import GeoidUndulation
from geoidgrid.convert import convert_raw_grid, dms_to_decimal
from geoidgrid.batch import process_records, run_batch

__all__ = [
    'GeoidGridError',
    'GridFormatError',
    'GridLookupError',
    'InvalidQueryError',
    'ValidationError',
    'InterpolationMethod',
    'SENTINEL',
    'GridHeader',
    'GridModel',
    'GridTable',
    'load_grid',
    'parse_grid',
    'evaluate',
    'solve_coefficients',
    'DEFAULT_RADIUS_KM',
    'bilinear',
    'bilinear_array',
    'interpolate',
    'interpolate_array',
    'GeoidUndulation',
    'convert_raw_grid',
    'dms_to_decimal',
    'process_records',
    'run_batch',
]
