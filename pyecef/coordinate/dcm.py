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

"""Direction Cosine Matrix (DCM) transformations for local tangent frames"""

import numpy as np

from ..utils.numeric import deg2rad


def _trig(lat: float, lon: float):
    lat_rad = deg2rad(lat)
    lon_rad = deg2rad(lon)
    return np.sin(lat_rad), np.cos(lat_rad), np.sin(lon_rad), np.cos(lon_rad)


def ecef2ned_dcm(lat: float, lon: float) -> np.ndarray:
    """
    Earth-Centered-Earth-Fixed to North-East-Down direction cosine matrix

    Parameters:
    -----------
    lat : float
        Reference latitude (deg)
    lon : float
        Reference longitude (deg)

    Returns:
    --------
    C_e_n : np.ndarray
        ECEF->NED direction cosine matrix (3x3)
    """
    sin_lat, cos_lat, sin_lon, cos_lon = _trig(lat, lon)

    C_e_n = np.array([
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [-sin_lon, cos_lon, 0.0],
        [-cos_lat * cos_lon, -cos_lat * sin_lon, -sin_lat]
    ], dtype=np.float64)

    return C_e_n


def ned2ecef_dcm(lat: float, lon: float) -> np.ndarray:
    """
    North-East-Down to Earth-Centered-Earth-Fixed direction cosine matrix

    Parameters:
    -----------
    lat : float
        Reference latitude (deg)
    lon : float
        Reference longitude (deg)

    Returns:
    --------
    C_n_e : np.ndarray
        NED->ECEF direction cosine matrix (3x3)
    """
    return ecef2ned_dcm(lat, lon).T


def ecef2enu_dcm(lat: float, lon: float) -> np.ndarray:
    """
    Earth-Centered-Earth-Fixed to East-North-Up direction cosine matrix

    Parameters:
    -----------
    lat : float
        Reference latitude (deg)
    lon : float
        Reference longitude (deg)

    Returns:
    --------
    C_e_n : np.ndarray
        ECEF->ENU direction cosine matrix (3x3)
    """
    sin_lat, cos_lat, sin_lon, cos_lon = _trig(lat, lon)

    C_e_n = np.array([
        [-sin_lon, cos_lon, 0.0],
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
        [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]
    ], dtype=np.float64)

    return C_e_n


def enu2ecef_dcm(lat: float, lon: float) -> np.ndarray:
    """
    East-North-Up to Earth-Centered-Earth-Fixed direction cosine matrix

    Parameters:
    -----------
    lat : float
        Reference latitude (deg)
    lon : float
        Reference longitude (deg)

    Returns:
    --------
    C_n_e : np.ndarray
        ENU->ECEF direction cosine matrix (3x3)
    """
    return ecef2enu_dcm(lat, lon).T
