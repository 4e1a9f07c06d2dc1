# -*- coding: utf-8 -*-
"""
Local Spline - Closed-form cubic spline over a fixed 4-sample window.

Solves the second-derivative (curvature) coefficients of a natural
cubic spline through four unit-spaced samples, then evaluates it at a
fractional position. Outside the window the spline continues as a
straight line matching the end slope.

The natural end condition applies to each window on its own, not to
the global grid. The tridiagonal system reduces to a forward
elimination over the two interior samples:

    Q[i] = -0.5 / (Q[i-1] / 2 + 2)
    R[i] = (3 (y[i+1] - 2 y[i] + y[i-1]) - R[i-1] / 2) / (Q[i-1] / 2 + 2)

followed by back substitution ``R[i] = Q[i] R[i+1] + R[i]``.

Both functions work on the last axis, so a ``(4, 4)`` window can be
solved row by row in one call. Coefficients are returned to the caller
and never kept in module state, which keeps concurrent calls
independent.

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
from typing import Union

# Third-party
import numpy as np

# geoidgrid internal
from geoidgrid.exceptions import ValidationError
from geoidgrid.grid import WINDOW


def _as_window(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] != WINDOW:
        raise ValidationError(
            f"{name} must have last axis of length {WINDOW}, "
            f"got shape {arr.shape}"
        )
    return arr


def solve_coefficients(samples: Union[list, np.ndarray]) -> np.ndarray:
    """Solve local curvature coefficients for 4-sample windows.

    Parameters
    ----------
    samples : array_like
        Sample values, shape ``(..., 4)``, unit spaced.

    Returns
    -------
    np.ndarray
        Second-derivative estimates, same shape as ``samples``. The
        first and last entries of each window are zero.

    Raises
    ------
    ValidationError
        If the last axis of ``samples`` is not of length 4.
    """
    y = _as_window(samples, 'samples')
    q = np.zeros(y.shape, dtype=np.float64)
    r = np.zeros(y.shape, dtype=np.float64)

    for i in range(1, WINDOW - 1):
        p = q[..., i - 1] / 2.0 + 2.0
        q[..., i] = -0.5 / p
        r[..., i] = (
            3.0 * (y[..., i + 1] - 2.0 * y[..., i] + y[..., i - 1])
            - r[..., i - 1] / 2.0
        ) / p

    for i in range(WINDOW - 2, 0, -1):
        r[..., i] = q[..., i] * r[..., i + 1] + r[..., i]

    return r


def evaluate(
    x: Union[float, np.ndarray],
    samples: Union[list, np.ndarray],
    coeffs: Union[list, np.ndarray],
) -> Union[float, np.ndarray]:
    """Evaluate a local spline at fractional window position ``x``.

    Parameters
    ----------
    x : float or np.ndarray
        Position in window coordinates, 1.0 at the first sample and 4.0
        at the last. Broadcast against ``samples.shape[:-1]``.
    samples : array_like
        Sample values, shape ``(..., 4)``.
    coeffs : array_like
        Coefficients from ``solve_coefficients(samples)``.

    Returns
    -------
    float
        When ``x`` and ``samples`` describe a single window.
    np.ndarray
        Otherwise, shape ``samples.shape[:-1]``.

    Notes
    -----
    Below 1.0 and above 4.0 the value is extrapolated linearly:

    - ``x < 1``: ``y1 + (x - 1) (y2 - y1 - R2 / 6)``
    - ``x > 4``: ``y4 + (x - 4) (y4 - y3 + R3 / 6)``

    Inside, the cubic segment starting at ``floor(x)`` is used. At
    exactly 4.0 the last segment is evaluated at its end.
    """
    y = _as_window(samples, 'samples')
    r = _as_window(coeffs, 'coeffs')
    x = np.broadcast_to(np.asarray(x, dtype=np.float64), y.shape[:-1])

    seg = np.asarray(np.clip(np.floor(x), 1, WINDOW - 1)).astype(np.intp)
    frac = x - seg
    lo = seg[..., np.newaxis] - 1
    hi = seg[..., np.newaxis]
    y2 = np.take_along_axis(y, lo, axis=-1)[..., 0]
    y1 = np.take_along_axis(y, hi, axis=-1)[..., 0]
    r2 = np.take_along_axis(r, lo, axis=-1)[..., 0]
    r1 = np.take_along_axis(r, hi, axis=-1)[..., 0]

    cubic = y2 + frac * (
        (y1 - y2 - r2 / 3.0 - r1 / 6.0)
        + frac * (r2 / 2.0 + frac * (r1 - r2) / 6.0)
    )
    below = y[..., 0] + (x - 1.0) * (y[..., 1] - y[..., 0] - r[..., 1] / 6.0)
    above = y[..., WINDOW - 1] + (x - WINDOW) * (
        y[..., WINDOW - 1] - y[..., WINDOW - 2] + r[..., WINDOW - 2] / 6.0
    )

    result = np.where(x < 1.0, below, np.where(x > WINDOW, above, cubic))
    if result.ndim == 0:
        return float(result)
    return result
