# -*- coding: utf-8 -*-
"""
Shared fixtures - Synthetic global grids for geoidgrid tests.

The synthetic surface is smooth and periodic in longitude, so the
samples at 0 and 360 degrees agree as they do in EGM96.

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

from geoidgrid.grid import (
    GRID_SPACING,
    NLAT,
    NLON_DATA,
    GridHeader,
    GridModel,
    GridTable,
)

HEADER = GridHeader(-90.0, 90.0, 0.0, 360.0, 0.25, 0.25)
HEADER_RECORD = "-90.000000\t90.000000\t.000000\t360.000000\t.250000\t.250000"


def analytic_height(lat, lon):
    """Smooth test surface in meters, periodic in longitude."""
    lat_r = np.radians(lat)
    lon_r = np.radians(lon)
    return (
        20.0 * np.sin(lat_r) * np.cos(lon_r)
        + 5.0 * np.cos(2.0 * lon_r) * np.cos(lat_r)
        - 10.0
    )


def seam_slope_height(lat, lon):
    """Latitude-independent surface with a steep slope at 0/360 degrees."""
    return 10.0 * np.sin(np.radians(lon)) - 5.0 + 0.0 * lat


def band_latitude(row):
    """Latitude of 1-based table row ``row``."""
    return -90.0 + (row - 1) * GRID_SPACING


def band_longitudes():
    """The 1441 sample longitudes of a band, 0..360."""
    return np.arange(NLON_DATA) * GRID_SPACING


def build_model(func=analytic_height):
    """Build a frozen ``GridModel`` straight from ``func``."""
    table = GridTable()
    lons = band_longitudes()
    for row in range(1, NLAT + 1):
        table.put_row(row, func(band_latitude(row), lons))
    table.freeze()
    return GridModel(header=HEADER, table=table)


def build_grid_lines(func=analytic_height):
    """Tabular grid records, header first, bands north to south."""
    lons = band_longitudes()
    lines = [HEADER_RECORD]
    for row in range(NLAT, 0, -1):
        band = func(band_latitude(row), lons)
        lines.append('\t'.join('%.6f' % v for v in band))
    return lines


@pytest.fixture(scope="session")
def model():
    """Synthetic grid model built in memory."""
    return build_model()


@pytest.fixture(scope="session")
def grid_lines():
    """Records of the synthetic grid in tabular form."""
    return build_grid_lines()


@pytest.fixture(scope="session")
def grid_file(tmp_path_factory, grid_lines):
    """Synthetic tabular grid written to disk."""
    path = tmp_path_factory.mktemp("grid") / "ww15mgh.grd.tsv"
    path.write_text('\n'.join(grid_lines) + '\n', encoding='ascii')
    return path
