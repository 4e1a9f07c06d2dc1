# -*- coding: utf-8 -*-
"""
Grid Loader Tests - Parsing tabular grid files into a ``GridModel``.

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

from geoidgrid.exceptions import GridFormatError
from geoidgrid.grid import NLAT, GridModel
from geoidgrid.loader import load_grid, parse_grid, parse_header

from conftest import HEADER, analytic_height


# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------

class TestParseHeader:
    """Test header record parsing."""

    def test_tab_delimited(self):
        header = parse_header("-90.0\t90.0\t0.0\t360.0\t0.25\t0.25")
        assert header == HEADER

    def test_whitespace_delimited(self):
        header = parse_header(
            "  -90.000000   90.000000     .000000  360.000000     .250000     .250000"
        )
        assert header == HEADER

    def test_wrong_field_count(self):
        with pytest.raises(GridFormatError, match="6 fields"):
            parse_header("-90.0\t90.0\t0.0\t360.0\t0.25")

    def test_non_numeric(self):
        with pytest.raises(GridFormatError, match="Non-numeric"):
            parse_header("south\t90.0\t0.0\t360.0\t0.25\t0.25")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_header("")


# ---------------------------------------------------------------------------
# Whole grid
# ---------------------------------------------------------------------------

class TestParseGrid:
    """Test band parsing, orientation and failure modes."""

    def test_returns_frozen_model(self, grid_lines):
        model = parse_grid(grid_lines)
        assert isinstance(model, GridModel)
        assert model.header == HEADER
        assert model.table.is_frozen
        assert np.all(np.isfinite(model.table.values))

    def test_first_band_is_north_pole(self, grid_lines):
        model = parse_grid(grid_lines)
        first = [float(v) for v in grid_lines[1].split('\t')]
        assert model.table.get(NLAT, 5) == first[0]
        assert model.table.get(NLAT, 1445) == first[-1]
        assert model.table.get(NLAT, 5) == pytest.approx(
            analytic_height(90.0, 0.0), abs=1e-6
        )

    def test_last_band_is_south_pole(self, grid_lines):
        model = parse_grid(grid_lines)
        assert model.table.get(1, 5) == pytest.approx(
            analytic_height(-90.0, 0.0), abs=1e-6
        )

    def test_row_latitudes(self, grid_lines):
        model = parse_grid(grid_lines)
        # row 361 is the equator, column 5 + 4 * 90 is 90 degrees east
        assert model.table.get(361, 365) == pytest.approx(
            analytic_height(0.0, 90.0), abs=1e-6
        )

    def test_blank_records_ignored(self, grid_lines):
        lines = ['', '   '] + grid_lines[:10] + [''] + grid_lines[10:] + ['']
        model = parse_grid(lines)
        assert np.array_equal(
            model.table.values, parse_grid(grid_lines).table.values
        )

    def test_whitespace_delimited_bands(self, grid_lines):
        lines = [grid_lines[0]] + [r.replace('\t', '   ') for r in grid_lines[1:]]
        model = parse_grid(lines)
        assert np.array_equal(
            model.table.values, parse_grid(grid_lines).table.values
        )

    def test_empty(self):
        with pytest.raises(GridFormatError, match="empty"):
            parse_grid([])

    def test_short_band(self, grid_lines):
        lines = list(grid_lines)
        lines[5] = '\t'.join(lines[5].split('\t')[:-1])
        with pytest.raises(GridFormatError, match="Band 5"):
            parse_grid(lines)

    def test_long_band(self, grid_lines):
        lines = list(grid_lines)
        lines[3] = lines[3] + '\t1.0'
        with pytest.raises(GridFormatError, match="Band 3"):
            parse_grid(lines)

    def test_non_numeric_sample(self, grid_lines):
        lines = list(grid_lines)
        fields = lines[2].split('\t')
        fields[100] = 'abc'
        lines[2] = '\t'.join(fields)
        with pytest.raises(GridFormatError, match="non-numeric"):
            parse_grid(lines)

    def test_missing_band(self, grid_lines):
        with pytest.raises(GridFormatError, match="720 latitude bands"):
            parse_grid(grid_lines[:-1])

    def test_extra_band(self, grid_lines):
        with pytest.raises(GridFormatError, match="more than 721"):
            parse_grid(grid_lines + [grid_lines[-1]])


class TestLoadGrid:
    """Test loading from disk."""

    def test_load(self, grid_file, grid_lines):
        model = load_grid(grid_file)
        assert model.source == grid_file
        assert np.array_equal(
            model.table.values, parse_grid(grid_lines).table.values
        )

    def test_accepts_str_path(self, grid_file):
        assert load_grid(str(grid_file)).header == HEADER

    def test_nonexistent_path_raises(self):
        with pytest.raises(FileNotFoundError, match="does not exist"):
            load_grid('/nonexistent/ww15mgh.grd.tsv')

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.tsv"
        path.write_text("-90\t90\t0\t360\n1\t2\t3\n", encoding='ascii')
        with pytest.raises(GridFormatError):
            load_grid(path)
