# -*- coding: utf-8 -*-
"""
Interpolation - Undulation at arbitrary coordinates from a ``GridModel``.

Two algorithms are offered:

- ``interpolate`` / ``interpolate_array``: separable bicubic spline. Each
  query selects the 4x4 window of grid nodes around it, runs a local
  1-D spline along each of the four window rows at the query longitude,
  then a fifth spline through those four values at the query latitude.
  Queries whose window reaches past the grid, or lies closer to a pole
  or the padded seam than the safety margin derived from
  ``max_radius_km``, return ``SENTINEL`` (999999.0).
- ``bilinear`` / ``bilinear_array``: weighted mean of the four nearest
  nodes with edge clamping. Always defined: it never returns the
  sentinel and applies no pole or seam safety check, so near the poles
  it quietly returns clamped edge values where the spline declines to
  answer.

Queries must already be in decimal degrees with latitude in [-90, 90]
and longitude in [0, 360]; anything else raises ``InvalidQueryError``.

Reference
---------
R. H. Rapp and NIMA, INTPT.F, EGM96 15-minute geoid interpolation
program, 1996.

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
import math
from typing import Tuple

# Third-party
import numpy as np

# geoidgrid internal
from geoidgrid.exceptions import InvalidQueryError
from geoidgrid.grid import NLAT, NLON, PAD, SENTINEL, WINDOW, GridModel
from geoidgrid.spline import evaluate, solve_coefficients

RHO = 57.29577951            # degrees per radian
EARTH_RADIUS = 6371000.0     # meters
DEFAULT_RADIUS_KM = 12.0


def _validate_query(
    lats: np.ndarray, lons: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    lats = np.asarray(lats, dtype=np.float64)
    lons = np.asarray(lons, dtype=np.float64)
    if lats.shape != lons.shape:
        raise InvalidQueryError(
            f"Latitude and longitude shapes differ: {lats.shape} vs "
            f"{lons.shape}"
        )
    if not (np.all(np.isfinite(lats)) and np.all(np.isfinite(lons))):
        raise InvalidQueryError("Query coordinates must be finite.")
    if np.any((lats < -90.0) | (lats > 90.0)):
        raise InvalidQueryError("Latitude must be within [-90, 90].")
    if np.any((lons < 0.0) | (lons > 360.0)):
        raise InvalidQueryError("Longitude must be within [0, 360].")
    return lats, lons


def _pad_origin(model: GridModel) -> float:
    """Longitude of padded column 1."""
    h = model.header
    return h.west - PAD // 2 * h.dlam


def safety_margins(model: GridModel, max_radius_km: float) -> Tuple[float, float]:
    """Cell-count margins kept clear of poles and seam.

    Parameters
    ----------
    model : GridModel
        Loaded grid.
    max_radius_km : float
        Interpolation radius in kilometers.

    Returns
    -------
    tuple of float
        ``(ilim, jlim)`` margins in latitude rows and longitude columns.
    """
    if not math.isfinite(max_radius_km) or max_radius_km < 0.0:
        raise InvalidQueryError(
            f"max_radius_km must be finite and >= 0, got {max_radius_km}"
        )
    h = model.header
    f1 = max_radius_km * 1000 * RHO
    ilim = f1 / (EARTH_RADIUS * h.dphi)
    jlim = f1 / (
        EARTH_RADIUS * h.dlam * math.cos((h.south + h.dphi * NLAT / 2.0) / RHO)
    )
    return ilim, jlim


def interpolate_array(
    model: GridModel,
    max_radius_km: float,
    lats: np.ndarray,
    lons: np.ndarray,
) -> np.ndarray:
    """Bicubic spline undulation for arrays of coordinates.

    Parameters
    ----------
    model : GridModel
        Loaded grid.
    max_radius_km : float
        Interpolation radius in kilometers. Larger radii widen the
        band near the poles and the seam that is rejected.
    lats : np.ndarray
        Latitudes in degrees north. Shape ``(N,)``.
    lons : np.ndarray
        Longitudes in degrees east, [0, 360]. Shape ``(N,)``.

    Returns
    -------
    np.ndarray
        Undulation in meters, shape ``(N,)``. ``SENTINEL`` where the
        window is outside the grid or inside the safety margins.

    Raises
    ------
    InvalidQueryError
        If a coordinate is out of range or ``max_radius_km`` is negative.
    """
    lats, lons = _validate_query(lats, lons)
    ilim, jlim = safety_margins(model, max_radius_km)
    h = model.header

    ri = (lats - h.south) / h.dphi
    rj = (lons - _pad_origin(model)) / h.dlam

    # window origin, 0-based; window rows i6..i8, columns i7..i9
    i6 = np.floor(ri).astype(np.intp) - WINDOW // 2 + 1
    i7 = np.floor(rj).astype(np.intp) - WINDOW // 2 + 1
    i8 = i6 + WINDOW - 1
    i9 = i7 + WINDOW - 1

    outside = (i6 < 0) | (i8 >= NLAT) | (i7 < 0) | (i9 >= NLON)
    unsafe = (i6 < ilim) | (i8 > NLAT - ilim) | (i7 < jlim) | (i9 > NLON - jlim)
    ok = ~(outside | unsafe)

    result = np.full(lats.shape, SENTINEL, dtype=np.float64)
    if not np.any(ok):
        return result

    i6, i7 = i6[ok], i7[ok]
    offsets = np.arange(WINDOW)
    rows = (i6[:, np.newaxis] + offsets)[:, :, np.newaxis]
    cols = (i7[:, np.newaxis] + offsets)[:, np.newaxis, :]
    window = model.table.values[rows, cols]          # (M, 4, 4)

    # along each window row at the query longitude
    x_col = rj[ok] - i7 + 1
    row_values = evaluate(
        x_col[:, np.newaxis], window, solve_coefficients(window)
    )                                                 # (M, 4)

    # across the four row values at the query latitude
    x_row = ri[ok] - i6 + 1
    result[ok] = evaluate(x_row, row_values, solve_coefficients(row_values))
    return result


def interpolate(
    model: GridModel,
    max_radius_km: float,
    lat: float,
    lon: float,
) -> float:
    """Bicubic spline undulation at one coordinate.

    Parameters
    ----------
    model : GridModel
        Loaded grid.
    max_radius_km : float
        Interpolation radius in kilometers (12.0 in the reference tool).
    lat : float
        Latitude in degrees north, [-90, 90].
    lon : float
        Longitude in degrees east, [0, 360].

    Returns
    -------
    float
        Undulation in meters, or ``SENTINEL`` (999999.0) when the point
        is too close to a pole, the seam, or the grid edge.

    Examples
    --------
    >>> interpolate(model, 12.0, -90.0, 360.0)
    999999.0
    """
    result = interpolate_array(
        model, max_radius_km, np.array([lat]), np.array([lon])
    )
    return float(result[0])


def bilinear_array(
    model: GridModel,
    lats: np.ndarray,
    lons: np.ndarray,
) -> np.ndarray:
    """Bilinear undulation for arrays of coordinates.

    Rows are clamped to ``[1, 720]`` and columns to ``[1, 1448]``
    (1-based); at a clamp the fractional weight is forced to 0 or 1.
    Never returns ``SENTINEL``.

    Parameters
    ----------
    model : GridModel
        Loaded grid.
    lats : np.ndarray
        Latitudes in degrees north. Shape ``(N,)``.
    lons : np.ndarray
        Longitudes in degrees east, [0, 360]. Shape ``(N,)``.

    Returns
    -------
    np.ndarray
        Undulation in meters, shape ``(N,)``.
    """
    lats, lons = _validate_query(lats, lons)
    h = model.header

    # 1-based table coordinates
    ri = (lats - h.south) / h.dphi + 1.0
    rj = (lons - _pad_origin(model)) / h.dlam + 1.0

    i1 = np.floor(ri).astype(np.intp)
    i2 = np.floor(rj).astype(np.intp)
    rn = ri - i1
    re = rj - i2

    rn = np.where(i1 < 1, 0.0, np.where(i1 >= NLAT, 1.0, rn))
    i1 = np.clip(i1, 1, NLAT - 1)
    re = np.where(i2 < 1, 0.0, np.where(i2 >= NLON, 1.0, re))
    i2 = np.clip(i2, 1, NLON - 1)

    v = model.table.values
    r0, c0 = i1 - 1, i2 - 1
    h00 = v[r0, c0]
    h10 = v[r0 + 1, c0]
    h01 = v[r0, c0 + 1]
    h11 = v[r0 + 1, c0 + 1]

    return (
        (1 - rn) * (1 - re) * h00
        + rn * (1 - re) * h10
        + (1 - rn) * re * h01
        + rn * re * h11
    )


def bilinear(model: GridModel, lat: float, lon: float) -> float:
    """Bilinear undulation at one coordinate.

    Lower accuracy than ``interpolate`` but defined everywhere,
    including the poles. See ``bilinear_array``.
    """
    result = bilinear_array(model, np.array([lat]), np.array([lon]))
    return float(result[0])


