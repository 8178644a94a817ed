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

"""Position transformations between geodetic and ECEF coordinates

The formulae follow "Datum Transformations of GPS Positions" (NAL Research,
GPS.G1-X-00006), section 2.2 for the closed-form inverse.
"""

import logging

import numpy as np

from ..core.constants import EP2_WGS84, E2_WGS84, RE_WGS84, RP_WGS84
from ..core.data_structures import ECEFPoint, GeodeticPoint
from ..utils.numeric import deg2rad, hypot, rad2deg
from .geodetic import radius_of_curvature

logger = logging.getLogger(__name__)


def lla2ecef(point: GeodeticPoint) -> ECEFPoint:
    """Convert geodetic coordinates to ECEF coordinates

    Parameters
    ----------
    point : GeodeticPoint
        Latitude and longitude in degrees, altitude in meters above
        the WGS84 ellipsoid

    Returns
    -------
    ECEFPoint
        ECEF coordinates in meters

    Notes
    -----
    This transformation is exact and valid at the poles, where x and y
    degenerate to (numerically) zero.

    Examples
    --------
    >>> ecef = lla2ecef(GeodeticPoint(28.4187, -81.5812, 33.0))
    >>> print(f"{ecef.x:.4f}, {ecef.y:.4f}, {ecef.z:.4f}")
    821905.3405, -5553322.6958, 3017411.1335
    """
    lat = deg2rad(point.lat)
    lon = deg2rad(point.lon)
    h = point.alt

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    N = radius_of_curvature(lat)

    x = (N + h) * cos_lat * cos_lon
    y = (N + h) * cos_lat * sin_lon
    z = (N * (RP_WGS84**2 / RE_WGS84**2) + h) * sin_lat

    return ECEFPoint(float(x), float(y), float(z))


def ecef2lla(point: ECEFPoint, legacy: bool = False) -> GeodeticPoint:
    """Convert ECEF coordinates to geodetic coordinates

    Uses the closed-form (non-iterative) approximation. Accurate to well
    below a millimeter near the surface and to sub-meter level through
    low-Earth-orbit altitudes.

    Parameters
    ----------
    point : ECEFPoint
        ECEF coordinates in meters
    legacy : bool, optional
        Reproduce the single-argument arctangent behaviour: longitude is
        ``atan(y / x)`` (wrong half-plane for x < 0, NaN when x = y = 0)
        and altitude is ``p / cos(lat) - N``. Default False.

    Returns
    -------
    GeodeticPoint
        Latitude and longitude in degrees (longitude in [-180, 180]),
        altitude in meters above the WGS84 ellipsoid

    Notes
    -----
    The geocenter has no defined geodetic position; the result there is
    NaN/inf per IEEE rules rather than an exception.
    """
    x, y, z = point.x, point.y, point.z

    if x == 0.0 and y == 0.0 and z == 0.0:
        logger.debug("ecef2lla called at the geocenter, result is undefined")
        if not legacy:
            return GeodeticPoint(np.nan, np.nan, np.nan)

    with np.errstate(divide='ignore', invalid='ignore'):
        p = hypot(x, y)

        if legacy:
            theta = np.arctan(np.divide(z * RE_WGS84, p * RP_WGS84))
            lon = np.arctan(np.divide(y, x))
        else:
            theta = np.arctan2(z * RE_WGS84, p * RP_WGS84)
            lon = np.arctan2(y, x)

        num = z + EP2_WGS84 * RP_WGS84 * np.sin(theta)**3
        den = p - E2_WGS84 * RE_WGS84 * np.cos(theta)**3

        if legacy:
            lat = np.arctan(np.divide(num, den))
        else:
            lat = np.clip(np.arctan2(num, den), -np.pi / 2.0, np.pi / 2.0)

        N = radius_of_curvature(lat)

        if legacy:
            h = np.divide(p, np.cos(lat)) - N
        else:
            # exact for a given latitude and stable at the poles
            h = p * np.cos(lat) + z * np.sin(lat) - RE_WGS84**2 / N

    # atan output is within +-90 deg; clip rounding from the degree conversion
    lat_deg = min(max(float(rad2deg(lat)), -90.0), 90.0)

    return GeodeticPoint(lat_deg, float(rad2deg(lon)), float(h))
