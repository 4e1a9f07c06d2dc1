# -*- coding: utf-8 -*-
"""
Grid Model - Padded lookup table for the EGM96 15-arc-minute geoid grid.

Holds the grid header, the padded table of undulation samples, and the
``GridModel`` value object that every interpolation call receives in
place of process-wide state.

Grid Layout
-----------
- Rows: 1..721, one per 0.25 degree latitude step, row 1 = 90S,
  row 721 = 90N.
- Columns: 1..1449. Columns 5..1445 hold the 1441 longitude samples
  (0 to 360 degrees east). Columns 1..4 repeat the samples at
  359.00..359.75 and columns 1446..1449 repeat 0.00..0.75, so a window
  straddling the 0/360 seam reads real data.
- Values: geoid undulation in meters, float64.

Rows and columns are 1-based in the public ``get``/``put`` API. The
backing ``values`` array is 0-based with shape ``(721, 1449)``.

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

# Standard library
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

# Third-party
import numpy as np

# geoidgrid internal
from geoidgrid.exceptions import GridFormatError, GridLookupError

# EGM96 15-arc-minute grid constants
WINDOW = 4               # spline window width (samples)
PAD = WINDOW * 2         # total padding columns, half on each side
NLAT = 721               # latitude rows, pole to pole
NLON_DATA = 1441         # longitude samples per band, 0..360 inclusive
NLON = NLON_DATA + PAD   # padded columns
GRID_SPACING = 0.25      # degrees (15 arc-minutes)
SENTINEL = 999999.0      # undulation returned for unsafe query points

_SPACING_TOL = 1e-9


@dataclass(frozen=True)
class GridHeader:
    """Extent and spacing record from the first line of a grid file.

    Parameters
    ----------
    south, north : float
        Latitude bounds in degrees.
    west, east : float
        Longitude bounds in degrees east.
    dphi, dlam : float
        Latitude and longitude spacing in degrees.
    """

    south: float
    north: float
    west: float
    east: float
    dphi: float
    dlam: float

    def validate(self) -> None:
        """Check the header against the fixed 721 x 1441 layout.

        Raises
        ------
        GridFormatError
            If the spacing is not 0.25 degrees or the extent does not
            span 721 latitude rows and 1441 longitude columns.
        """
        for name, step in (('dphi', self.dphi), ('dlam', self.dlam)):
            if abs(step - GRID_SPACING) > _SPACING_TOL:
                raise GridFormatError(
                    f"Grid spacing {name}={step} is not supported; "
                    f"expected {GRID_SPACING}."
                )
        lat_span = self.north - self.south
        if abs(lat_span - (NLAT - 1) * self.dphi) > _SPACING_TOL:
            raise GridFormatError(
                f"Latitude extent {self.south}..{self.north} does not "
                f"match {NLAT} rows at {self.dphi} degree spacing."
            )
        lon_span = self.east - self.west
        if abs(lon_span - (NLON_DATA - 1) * self.dlam) > _SPACING_TOL:
            raise GridFormatError(
                f"Longitude extent {self.west}..{self.east} does not "
                f"match {NLON_DATA} columns at {self.dlam} degree spacing."
            )


class GridTable:
    """Padded table of undulation samples addressed by (row, column).

    The table starts empty (every cell NaN). The loader fills it with
    ``put_row`` or ``put``, then calls ``freeze`` which checks that every
    cell of the padded domain was populated and makes the table
    read-only.

    Examples
    --------
    >>> table = GridTable()
    >>> table.put(1, 1, -29.5)
    >>> table.get(1, 1)
    -29.5
    """

    def __init__(self) -> None:
        self._values = np.full((NLAT, NLON), np.nan, dtype=np.float64)
        self._frozen = False

    @property
    def shape(self) -> tuple:
        """Padded table shape ``(rows, columns)``."""
        return self._values.shape

    @property
    def is_frozen(self) -> bool:
        """True once ``freeze`` has run."""
        return self._frozen

    @property
    def values(self) -> np.ndarray:
        """0-based backing array, shape ``(721, 1449)``.

        Read-only after ``freeze``.
        """
        return self._values

    @staticmethod
    def _index(row: int, col: int) -> tuple:
        if not (1 <= row <= NLAT and 1 <= col <= NLON):
            raise GridLookupError((row, col))
        return row - 1, col - 1

    def get(self, row: int, col: int) -> float:
        """Return the sample at 1-based ``(row, col)``.

        Raises
        ------
        GridLookupError
            If the pair lies outside ``[1, 721] x [1, 1449]`` or was
            never populated.
        """
        value = self._values[self._index(row, col)]
        if np.isnan(value):
            raise GridLookupError((row, col))
        return float(value)

    def put(self, row: int, col: int, height: float) -> None:
        """Store one sample at 1-based ``(row, col)``."""
        if self._frozen:
            raise GridFormatError("Grid table is frozen after load.")
        self._values[self._index(row, col)] = height

    def put_row(self, row: int, samples: Sequence[float]) -> None:
        """Store one latitude band and its wraparound padding.

        Parameters
        ----------
        row : int
            1-based row index.
        samples : sequence of float
            The 1441 longitude samples of the band, west to east.

        Raises
        ------
        GridFormatError
            If ``samples`` does not hold exactly 1441 values or the
            table is frozen.
        """
        if self._frozen:
            raise GridFormatError("Grid table is frozen after load.")
        band = np.asarray(samples, dtype=np.float64)
        if band.shape != (NLON_DATA,):
            raise GridFormatError(
                f"Row {row}: expected {NLON_DATA} samples, got {band.size}."
            )
        r = self._index(row, 1)[0]
        half = PAD // 2
        self._values[r, half:half + NLON_DATA] = band
        # columns 1..4 <- data samples 1437..1440
        self._values[r, :half] = band[NLON_DATA - 1 - half:NLON_DATA - 1]
        # columns 1446..1449 <- data samples 1..4
        self._values[r, half + NLON_DATA:] = band[:half]

    def freeze(self) -> None:
        """Verify full population and make the table read-only.

        Raises
        ------
        GridFormatError
            If any cell of the padded domain is still unpopulated.
        """
        missing = np.isnan(self._values)
        if missing.any():
            rows = np.unique(np.nonzero(missing)[0]) + 1
            raise GridFormatError(
                f"Grid table has {int(missing.sum())} unpopulated cells "
                f"in {rows.size} rows (first row {int(rows[0])})."
            )
        self._values.setflags(write=False)
        self._frozen = True


@dataclass(frozen=True)
class GridModel:
    """A loaded grid: header, frozen table, and where it came from.

    Passed explicitly to every interpolation call so several grids can
    coexist in one process.
    """

    header: GridHeader
    table: GridTable
    source: Optional[Path] = None
