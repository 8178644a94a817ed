# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Numeric helpers shared by the transform engine"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

import numpy as np
from numba import njit

__all__ = ["deg2rad", "rad2deg", "hypot", "trim_decimal_value", "wrap_to_360"]


def deg2rad(deg: float) -> float:
    """Convert an angle from degrees to radians"""
    return deg * np.pi / 180.0


def rad2deg(rad: float) -> float:
    """Convert an angle from radians to degrees"""
    return rad * 180.0 / np.pi


def hypot(a: float, b: float) -> float:
    """Euclidean norm of a two-component vector"""
    return float(np.hypot(a, b))


def trim_decimal_value(value: float, digits: float) -> float:
    """
    Round a value to a fixed number of decimal digits

    Parameters:
    -----------
    value : float
        Value to round
    digits : float
        Number of decimal digits to keep. Fractional counts are truncated
        and non-positive counts round to an integer value.

    Returns:
    --------
    trimmed : float
        Rounded value

    Notes:
    ------
    Exact halves of the stored binary value round away from zero
    (2.5 -> 3, -2.5 -> -3); 1.005 stays 1.00 because its binary value
    lies below the half.
    """
    digits = max(int(digits), 0)
    if not math.isfinite(value):
        return float(value)

    exact = Decimal(float(value))
    # room for every integer digit plus the kept decimals
    context = Context(prec=max(exact.adjusted(), 0) + digits + 2)
    trimmed = exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=context)
    return float(trimmed)


@njit(cache=True)
def wrap_to_360(deg):
    """
    Wrap an angle in degrees to [0, 360).

    Parameters
    ----------
    deg : float
        Angle in degrees

    Returns
    -------
    float
        Equivalent angle in [0, 360), or NaN for NaN input
    """
    wrapped = deg % 360.0
    # tiny negative inputs round up to exactly 360
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped
