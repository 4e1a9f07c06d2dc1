# -*- coding: utf-8 -*-
"""
Geoidgrid Exception Hierarchy - Domain-specific exceptions for grid lookup.

Lets callers catch geoid grid failures distinctly from Python built-in
exceptions. Every exception subclasses both ``GeoidGridError`` and the
matching built-in so existing ``except ValueError`` / ``except KeyError``
handlers keep working.

Points that are too close to a pole, the seam or the grid edge are not
reported through this hierarchy: ``interpolate`` returns the sentinel
``999999.0`` for them.

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


class GeoidGridError(Exception):
    """Base exception for all geoidgrid errors."""


class GridFormatError(GeoidGridError, ValueError):
    """Malformed grid file.

    Raised for a header without six numeric fields, inconsistent
    extent or spacing, a latitude band with the wrong number of
    samples, the wrong number of bands, or a table left with
    unpopulated cells. Loading aborts; no partial grid is returned.
    """


class GridLookupError(GeoidGridError, KeyError):
    """Read of a (row, column) pair outside the padded grid domain."""


class InvalidQueryError(GeoidGridError, ValueError):
    """Query coordinate outside the accepted range or not numeric.

    Callers normalize coordinates before calling in; the engine fails
    fast instead of clamping.
    """


class ValidationError(GeoidGridError, ValueError):
    """Invalid parameter, such as a spline window of the wrong length
    or an unknown interpolation method name.
    """
