# -*- coding: utf-8 -*-
"""
Batch Runner - Undulation for every record of a query file.

Query records are tab-delimited ``latitude, longitude[, remark]`` in
decimal degrees. Each result record echoes the coordinates as given,
adds the undulation rounded to three decimals, and passes the remark
through unchanged::

    38.628155	269.779155	-31.628
    -90.000000	360.000000	999999.000
    35.360555	138.727222	41.300	Mt.Fuji seismograph

Points the spline rejects keep the ``999999.000`` marker in the output
so they can be filtered afterwards.

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
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

# geoidgrid internal
from geoidgrid.exceptions import InvalidQueryError, ValidationError
from geoidgrid.grid import SENTINEL, GridModel
from geoidgrid.interpolation import DEFAULT_RADIUS_KM, bilinear, interpolate
from geoidgrid.vocabulary import InterpolationMethod

logger = logging.getLogger(__name__)

RESULT_HEADER = 'Latitude\tLongitude\tUndulation(m)'


@dataclass(frozen=True)
class Query:
    """One parsed query record.

    ``lat_text`` and ``lon_text`` keep the fields as written so results
    echo them verbatim.
    """

    lat: float
    lon: float
    lat_text: str
    lon_text: str
    remark: Optional[str] = None


@dataclass
class BatchSummary:
    """Counts from one batch run."""

    records: int = 0
    rejected: int = 0


def parse_query(record: str) -> Query:
    """Parse one tab-delimited query record.

    Raises
    ------
    InvalidQueryError
        If the record has fewer than two fields or a non-numeric
        coordinate.
    """
    fields = record.strip('\r\n').strip().split('\t')
    if len(fields) < 2:
        raise InvalidQueryError(
            f"Expected latitude and longitude, got {record.strip()!r}"
        )
    lat_text, lon_text = fields[0].strip(), fields[1].strip()
    try:
        lat, lon = float(lat_text), float(lon_text)
    except ValueError as e:
        raise InvalidQueryError(
            f"Non-numeric coordinate in {record.strip()!r}"
        ) from e
    remark = fields[2] if len(fields) > 2 else None
    return Query(lat, lon, lat_text, lon_text, remark)


def format_result(query: Query, value: float) -> str:
    """Format one result record."""
    record = f"{query.lat_text}\t{query.lon_text}\t{value:.3f}"
    if query.remark is not None:
        record += f"\t{query.remark}"
    return record


def _is_header(record: str) -> bool:
    # column titles start with a letter; "38,6" is a bad record, not a title
    first = record.strip().split('\t')[0].strip()
    if not first[:1].isalpha():
        return False
    try:
        float(first)
    except ValueError:
        return True
    return False


def process_records(
    model: GridModel,
    lines: Iterable[str],
    max_radius_km: float = DEFAULT_RADIUS_KM,
    method: Union[InterpolationMethod, str] = InterpolationMethod.SPLINE,
    summary: Optional[BatchSummary] = None,
) -> Iterator[str]:
    """Yield one result record per query record.

    Parameters
    ----------
    model : GridModel
        Loaded grid.
    lines : iterable of str
        Query records. Blank lines are skipped. A first record whose
        latitude field starts with a letter and is not numeric is
        treated as a column header.
    max_radius_km : float
        Spline interpolation radius.
    method : InterpolationMethod or str
        ``'spline'`` or ``'bilinear'``.
    summary : BatchSummary, optional
        Updated in place with record and sentinel counts.

    Yields
    ------
    str
        Result records without line terminators.

    Raises
    ------
    InvalidQueryError
        For a malformed or out-of-range record; the message carries the
        line number.
    """
    try:
        method = InterpolationMethod(method)
    except ValueError as e:
        raise ValidationError(f"Unknown interpolation method {method!r}") from e
    if summary is None:
        summary = BatchSummary()

    seen_record = False
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if not seen_record:
            seen_record = True
            if _is_header(line):
                fields = line.strip().split('\t')
                header = RESULT_HEADER
                if len(fields) > 2:
                    header += '\t' + fields[2]
                yield header
                continue

        try:
            query = parse_query(line)
            if method is InterpolationMethod.BILINEAR:
                value = bilinear(model, query.lat, query.lon)
            else:
                value = interpolate(model, max_radius_km, query.lat, query.lon)
        except InvalidQueryError as e:
            raise InvalidQueryError(f"Line {number}: {e}") from e

        summary.records += 1
        if value == SENTINEL:
            summary.rejected += 1
            logger.debug(
                "Line %d: (%s, %s) outside the interpolable region",
                number, query.lat_text, query.lon_text,
            )
        yield format_result(query, value)


def run_batch(
    model: GridModel,
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    max_radius_km: float = DEFAULT_RADIUS_KM,
    method: Union[InterpolationMethod, str] = InterpolationMethod.SPLINE,
) -> BatchSummary:
    """Interpolate every record of ``input_path`` into ``output_path``.

    Parameters
    ----------
    model : GridModel
        Loaded grid.
    input_path : str or Path
        Tab-delimited query file.
    output_path : str or Path
        Result file, overwritten.
    max_radius_km : float
        Spline interpolation radius.
    method : InterpolationMethod or str
        ``'spline'`` or ``'bilinear'``.

    Returns
    -------
    BatchSummary
        Number of records written and how many hold the sentinel.

    Raises
    ------
    FileNotFoundError
        If ``input_path`` does not exist.
    InvalidQueryError
        For a malformed record. The output file is not written.
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file does not exist: {input_path}")

    summary = BatchSummary()
    with open(input_path, 'r', encoding='utf-8') as f:
        results = list(
            process_records(model, f, max_radius_km, method, summary)
        )

    with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
        for record in results:
            f.write(record)
            f.write('\n')

    logger.info("Output > %d records written to %s", summary.records, output_path)
    if summary.rejected:
        logger.warning(
            "%d of %d records outside the interpolable region (%.3f)",
            summary.rejected, summary.records, SENTINEL,
        )
    return summary
