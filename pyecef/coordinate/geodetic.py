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

"""Geodetic computations and utilities"""


import numpy as np
from numba import njit

from ..core.constants import E2_WGS84, RE_WGS84


@njit(cache=True)
def radius_of_curvature(lat):
    """
    Compute the prime vertical radius of curvature at given latitude

    This is the length of the ellipsoid normal from the surface to its
    intersection with the polar axis. For an oblate ellipsoid the normal
    of a northern latitude crosses the axis below the equatorial plane.

    Parameters:
    -----------
    lat : float
        Latitude (rad)

    Returns:
    --------
    N : float
        Prime vertical radius of curvature (m)
    """
    sin_lat = np.sin(lat)
    return RE_WGS84 / np.sqrt(1.0 - E2_WGS84 * sin_lat**2)
