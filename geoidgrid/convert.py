# -*- coding: utf-8 -*-
"""
Converters - Reshape the raw EGM96 grid and sexagesimal query records.

``WW15MGH.GRD`` as distributed by NGA wraps each 1441-sample latitude
band over many fixed-width lines. ``raw_to_tabular`` regroups it into
the tabular form ``load_grid`` reads: a tab-delimited header line
followed by one tab-delimited record per band.

``dms_to_decimal`` turns packed ``+-DDMMSS.sss`` coordinates (e.g.
``383741.358`` for 38 deg 37 min 41.358 sec) into decimal degrees.

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
from pathlib import Path
from typing import Iterable, Iterator, Union

# geoidgrid internal
from geoidgrid.exceptions import GridFormatError, InvalidQueryError
from geoidgrid.grid import NLON_DATA

logger = logging.getLogger(__name__)


def raw_to_tabular(lines: Iterable[str]) -> Iterator[str]:
    """Regroup raw grid lines into tabular records.

    Parameters
    ----------
    lines : iterable of str
        Lines of the raw grid file, header first.

    Yields
    ------
    str
        The tab-delimited header, then one tab-delimited record of 1441
        samples per latitude band. Records carry no line terminator.

    Raises
    ------
    GridFormatError
        If the input is empty or the sample count is not a multiple of
        1441.
    """
    records = (line.strip() for line in lines)
    records = (r for r in records if r)

    header = next(records, None)
    if header is None:
        raise GridFormatError("Raw grid file is empty.")
    yield '\t'.join(header.split())

    band = []
    for record in records:
        for token in record.split():
            band.append(token)
            if len(band) == NLON_DATA:
                yield '\t'.join(band)
                band = []

    if band:
        raise GridFormatError(
            f"Raw grid ends with a partial band of {len(band)} samples."
        )


def convert_raw_grid(
    raw_path: Union[str, Path],
    tabular_path: Union[str, Path],
) -> int:
    """Convert a raw ``WW15MGH.GRD`` file to the tabular grid format.

    Parameters
    ----------
    raw_path : str or Path
        Raw grid file.
    tabular_path : str or Path
        Destination, overwritten.

    Returns
    -------
    int
        Number of latitude bands written.
    """
    raw_path = Path(raw_path)
    if not raw_path.exists():
        raise FileNotFoundError(f"Raw grid file does not exist: {raw_path}")

    logger.info("Converting %s -> %s", raw_path, tabular_path)
    bands = -1
    with open(raw_path, 'r', encoding='ascii') as src, \
            open(tabular_path, 'w', encoding='ascii', newline='\n') as dst:
        for record in raw_to_tabular(src):
            dst.write(record)
            dst.write('\n')
            bands += 1
    logger.info("Wrote %d latitude bands", bands)
    return bands


def dms_to_decimal(value: Union[str, float]) -> float:
    """Convert a packed ``+-DDMMSS.sss`` value to decimal degrees.

    Parameters
    ----------
    value : str or float
        Packed degrees, minutes and seconds, e.g. ``2694644.958``.

    Returns
    -------
    float
        Signed decimal degrees.

    Raises
    ------
    InvalidQueryError
        If ``value`` is not numeric.

    Examples
    --------
    >>> round(dms_to_decimal('383741.358'), 6)
    38.628155
    >>> round(dms_to_decimal(-143716.3812), 6)
    -14.621217
    """
    try:
        packed = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidQueryError(f"Not a DDMMSS value: {value!r}") from e

    sign = 1.0
    if packed < 0:
        sign = -1.0
        packed = -packed

    sec = packed % 100
    minutes = int(packed / 100) % 100
    deg = int(packed / 10000)
    return sign * (deg + minutes / 60.0 + sec / 3600.0)


def convert_dms_records(lines: Iterable[str]) -> Iterator[str]:
    """Convert tab-delimited DMS query records to decimal degrees.

    Blank lines are skipped. A third field, if present, is passed
    through as the remark.

    Yields
    ------
    str
        ``"lat\\tlon[\\tremark]"`` with six decimals.
    """
    for number, line in enumerate(lines, start=1):
        line = line.strip('\r\n')
        if not line.strip():
            continue
        fields = line.strip().split('\t')
        if len(fields) < 2:
            raise InvalidQueryError(
                f"Line {number}: expected latitude and longitude, "
                f"got {line!r}"
            )
        try:
            lat, lon = dms_to_decimal(fields[0]), dms_to_decimal(fields[1])
        except InvalidQueryError as e:
            raise InvalidQueryError(f"Line {number}: {e}") from e
        record = '%f\t%f' % (lat, lon)
        if len(fields) > 2:
            record += '\t' + fields[2]
        yield record
