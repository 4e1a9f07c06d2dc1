# -*- coding: utf-8 -*-
"""
Grid Loader - Parse a tabular EGM96 grid file into a ``GridModel``.

The tabular grid has one header record followed by one record per
latitude band:

- Header: six floats ``south north west east dphi dlam``.
- Bands: 721 records of 1441 floats each, ordered north to south.

Fields may be separated by tabs or any run of whitespace. Blank records
are ignored. The first band record becomes row 721 (90N) and the last
becomes row 1 (90S).

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
import logging
import time
from pathlib import Path
from typing import Iterable, Optional, Union

# Third-party
import numpy as np

# geoidgrid internal
from geoidgrid.exceptions import GridFormatError
from geoidgrid.grid import NLAT, NLON_DATA, GridHeader, GridModel, GridTable

logger = logging.getLogger(__name__)

_HEADER_FIELDS = 6


def parse_header(record: str) -> GridHeader:
    """Parse the six-field header record.

    Parameters
    ----------
    record : str
        Header line, e.g. ``"-90.0\\t90.0\\t0.0\\t360.0\\t0.25\\t0.25"``.

    Returns
    -------
    GridHeader
        Validated header.

    Raises
    ------
    GridFormatError
        If the record does not hold exactly six numeric fields or
        describes a grid other than the 0.25 degree global layout.
    """
    fields = record.split()
    if len(fields) != _HEADER_FIELDS:
        raise GridFormatError(
            f"Grid header must have {_HEADER_FIELDS} fields, "
            f"got {len(fields)}: {record.strip()!r}"
        )
    try:
        values = [float(f) for f in fields]
    except ValueError as e:
        raise GridFormatError(f"Non-numeric grid header: {record.strip()!r}") from e

    header = GridHeader(*values)
    header.validate()
    return header


def _parse_band(record: str, band: int) -> np.ndarray:
    fields = record.split()
    if len(fields) != NLON_DATA:
        raise GridFormatError(
            f"Band {band}: expected {NLON_DATA} samples, got {len(fields)}."
        )
    try:
        samples = np.array(fields, dtype=np.float64)
    except ValueError as e:
        raise GridFormatError(f"Band {band}: non-numeric sample.") from e
    if not np.all(np.isfinite(samples)):
        raise GridFormatError(f"Band {band}: non-finite sample.")
    return samples


def parse_grid(
    lines: Iterable[str],
    source: Optional[Path] = None,
) -> GridModel:
    """Build a ``GridModel`` from the records of a tabular grid.

    Parameters
    ----------
    lines : iterable of str
        Grid file records, header first.
    source : Path, optional
        Origin of the records, kept on the returned model.

    Returns
    -------
    GridModel
        Model with a frozen, fully populated table.

    Raises
    ------
    GridFormatError
        If the header is malformed, a band has the wrong number of
        samples, or the file does not hold exactly 721 bands.
    """
    records = (line.strip() for line in lines)
    records = (r for r in records if r)

    header_record = next(records, None)
    if header_record is None:
        raise GridFormatError("Grid file is empty.")
    header = parse_header(header_record)
    logger.debug("Grid header: %s", header)

    table = GridTable()
    band = 0
    for record in records:
        if band >= NLAT:
            raise GridFormatError(
                f"Grid file has more than {NLAT} latitude bands."
            )
        # first band is the north pole, row 721
        table.put_row(NLAT - band, _parse_band(record, band + 1))
        band += 1

    if band != NLAT:
        raise GridFormatError(
            f"Grid file has {band} latitude bands, expected {NLAT}."
        )

    table.freeze()
    return GridModel(header=header, table=table, source=source)


def load_grid(grid_path: Union[str, Path]) -> GridModel:
    """Load a tabular EGM96 grid file.

    Parameters
    ----------
    grid_path : str or Path
        Path to the tabular grid (e.g. ``ww15mgh.grd.tsv``).

    Returns
    -------
    GridModel
        Loaded grid, read-only.

    Raises
    ------
    FileNotFoundError
        If ``grid_path`` does not exist.
    GridFormatError
        If the file is not a valid tabular grid.

    Examples
    --------
    >>> from geoidgrid import load_grid, interpolate
    >>> model = load_grid('ww15mgh.grd.tsv')
    >>> round(interpolate(model, 12.0, 38.628155, 269.779155), 3)
    -31.628
    """
    grid_path = Path(grid_path)
    if not grid_path.exists():
        raise FileNotFoundError(f"Grid file does not exist: {grid_path}")

    logger.info("Loading grid file %s", grid_path)
    start = time.perf_counter()
    with open(grid_path, 'r', encoding='ascii') as f:
        model = parse_grid(f, source=grid_path)
    logger.info(
        "Loaded %d x %d grid in %.2f s",
        NLAT, NLON_DATA, time.perf_counter() - start,
    )
    return model
