# -*- coding: utf-8 -*-
"""
Geoid Undulation - Object interface over a loaded EGM96 grid.

Loads a tabular EGM96 15-arc-minute grid once and answers undulation
queries with either the bicubic spline or the bilinear algorithm.
Undulation is the height of the geoid (MSL) above the WGS84
ellipsoid: ``height_HAE = height_MSL + undulation``.

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
from pathlib import Path
from typing import Any, Optional, Union

# Third-party
import numpy as np

# geoidgrid internal
from geoidgrid.exceptions import ValidationError
from geoidgrid.grid import SENTINEL, GridModel
from geoidgrid.interpolation import (
    DEFAULT_RADIUS_KM,
    bilinear_array,
    interpolate_array,
)
from geoidgrid.loader import load_grid
from geoidgrid.vocabulary import InterpolationMethod


def _coordinates(values: Any) -> np.ndarray:
    """Coordinates as a float64 array, at least 1-D."""
    return np.atleast_1d(np.asarray(values, dtype=np.float64))


class GeoidUndulation:
    """Geoid undulation lookup from an EGM96 tabular grid.

    Parameters
    ----------
    grid : str, Path, or GridModel
        Path to the tabular grid file (``ww15mgh.grd.tsv``) or an
        already loaded model.
    max_radius_km : float
        Interpolation radius for the spline safety margins. Default 12.
    method : InterpolationMethod or str
        ``'spline'`` (default) or ``'bilinear'``.

    Raises
    ------
    FileNotFoundError
        If the grid path does not exist.
    GridFormatError
        If the grid file is malformed.
    ValidationError
        If ``method`` is not a known interpolation method.

    Notes
    -----
    With ``method='spline'`` points near the poles or the seam return
    ``SENTINEL`` (999999.0). With ``method='bilinear'`` every point
    gets a value, with lower accuracy and no safety check.

    Longitudes in ``[-180, 0)`` are shifted into ``[0, 360)`` before
    lookup.

    Examples
    --------
    >>> geoid = GeoidUndulation('ww15mgh.grd.tsv')
    >>> round(geoid.get_undulation(38.628155, 269.779155), 3)
    -31.628
    >>> geoid.get_undulation(np.array([38.6, 40.7]), np.array([-90.2, -74.0])).shape
    (2,)
    """

    def __init__(
        self,
        grid: Union[str, Path, GridModel],
        max_radius_km: float = DEFAULT_RADIUS_KM,
        method: Union[InterpolationMethod, str] = InterpolationMethod.SPLINE,
    ) -> None:
        try:
            self.method = InterpolationMethod(method)
        except ValueError as e:
            raise ValidationError(
                f"Unknown interpolation method {method!r}; expected one of "
                f"{[m.value for m in InterpolationMethod]}"
            ) from e

        if isinstance(grid, GridModel):
            self._model = grid
        else:
            self._model = load_grid(grid)
        self.max_radius_km = max_radius_km

    @property
    def model(self) -> GridModel:
        """The loaded grid."""
        return self._model

    @staticmethod
    def is_sentinel(value: Union[float, np.ndarray]) -> Union[bool, np.ndarray]:
        """True where ``value`` is the out-of-domain sentinel."""
        return np.asarray(value) == SENTINEL

    def get_undulation(
        self,
        lat_or_points: Union[float, list, np.ndarray],
        lon: Optional[Union[float, list, np.ndarray]] = None,
    ) -> Union[float, np.ndarray]:
        """Undulation in meters at ``(lat, lon)``.

        ``lat_or_points`` is a latitude (scalar or sequence) matched by
        ``lon``, or, with ``lon`` omitted, a ``(2, N)`` array of
        ``[lats; lons]``. Scalar pairs give a float, anything else an
        ndarray. Points the spline rejects hold ``SENTINEL``.

        Raises
        ------
        ValueError
            If ``lon`` is omitted and the points are not ``(2, N)``.
        InvalidQueryError
            If a coordinate is out of range.
        """
        if lon is None:
            pts = np.asarray(lat_or_points, dtype=np.float64)
            if pts.ndim != 2 or pts.shape[0] != 2:
                raise ValueError(
                    f"Expected (2, N) array, got shape {pts.shape}"
                )
            return self._lookup(pts[0], pts[1])

        result = self._lookup(_coordinates(lat_or_points), _coordinates(lon))
        if np.ndim(lat_or_points) == 0 and np.ndim(lon) == 0:
            return float(result[0])
        return result

    def _lookup(self, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
        # only [-180, 0) is shifted; the rest is left for validation
        lons = np.where((lons >= -180.0) & (lons < 0.0), lons + 360.0, lons)
        if self.method is InterpolationMethod.BILINEAR:
            return bilinear_array(self._model, lats, lons)
        return interpolate_array(self._model, self.max_radius_km, lats, lons)
