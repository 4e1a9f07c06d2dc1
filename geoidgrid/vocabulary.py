# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for geoidgrid.

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

from enum import Enum


class InterpolationMethod(Enum):
    """Undulation interpolation algorithms.

    ``SPLINE`` is the separable bicubic local spline over a 4x4 window.
    It returns the sentinel ``999999.0`` near poles, the seam, and grid
    edges. ``BILINEAR`` uses the four nearest nodes with edge clamping.
    It is always defined and never returns the sentinel, but it is less
    accurate and applies no safety check.
    """

    SPLINE = "spline"
    BILINEAR = "bilinear"
