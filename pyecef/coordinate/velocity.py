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

"""Velocity rotations between ECEF and local tangent frames"""

import logging

import numpy as np

from ..core.data_structures import ECEFVelocity, ENUVelocity, NEDVelocity, TangentVelocity
from ..utils.numeric import hypot, rad2deg, wrap_to_360
from .dcm import ecef2enu_dcm, ecef2ned_dcm, enu2ecef_dcm, ned2ecef_dcm

logger = logging.getLogger(__name__)


def ecef2ned_vel(vel: ECEFVelocity, lat: float, lon: float) -> NEDVelocity:
    """
    Rotate an ECEF velocity into the North-East-Down frame

    Parameters:
    -----------
    vel : ECEFVelocity
        ECEF velocity (m/s)
    lat : float
        Latitude of the reference point (deg)
    lon : float
        Longitude of the reference point (deg)

    Returns:
    --------
    ned : NEDVelocity
        Velocity in the local NED frame (m/s)
    """
    return NEDVelocity.from_array(ecef2ned_dcm(lat, lon) @ vel.to_array())


def ned2ecef_vel(vel: NEDVelocity, lat: float, lon: float) -> ECEFVelocity:
    """
    Rotate a North-East-Down velocity into the ECEF frame

    Parameters:
    -----------
    vel : NEDVelocity
        Velocity in the local NED frame (m/s)
    lat : float
        Latitude of the reference point (deg)
    lon : float
        Longitude of the reference point (deg)

    Returns:
    --------
    ecef : ECEFVelocity
        ECEF velocity (m/s)
    """
    return ECEFVelocity.from_array(ned2ecef_dcm(lat, lon) @ vel.to_array())


def ecef2enu_vel(vel: ECEFVelocity, lat: float, lon: float) -> ENUVelocity:
    """
    Rotate an ECEF velocity into the East-North-Up frame

    Parameters:
    -----------
    vel : ECEFVelocity
        ECEF velocity (m/s)
    lat : float
        Latitude of the reference point (deg)
    lon : float
        Longitude of the reference point (deg)

    Returns:
    --------
    enu : ENUVelocity
        Velocity in the local ENU frame (m/s)
    """
    return ENUVelocity.from_array(ecef2enu_dcm(lat, lon) @ vel.to_array())


def enu2ecef_vel(vel: ENUVelocity, lat: float, lon: float) -> ECEFVelocity:
    """
    Rotate an East-North-Up velocity into the ECEF frame

    Parameters:
    -----------
    vel : ENUVelocity
        Velocity in the local ENU frame (m/s)
    lat : float
        Latitude of the reference point (deg)
    lon : float
        Longitude of the reference point (deg)

    Returns:
    --------
    ecef : ECEFVelocity
        ECEF velocity (m/s)
    """
    return ECEFVelocity.from_array(enu2ecef_dcm(lat, lon) @ vel.to_array())


def enu2ned_vel(vel: ENUVelocity) -> NEDVelocity:
    """Convert an ENU velocity to NED at the same reference point"""
    return NEDVelocity(vel.vn, vel.ve, -vel.vu)


def ned2enu_vel(vel: NEDVelocity) -> ENUVelocity:
    """Convert a NED velocity to ENU at the same reference point"""
    return ENUVelocity(vel.ve, vel.vn, -vel.vd)


def ground_speed(vel: TangentVelocity) -> float:
    """
    Horizontal speed of a NED or ENU velocity

    Parameters:
    -----------
    vel : TangentVelocity
        Any velocity exposing north (vn) and east (ve) components

    Returns:
    --------
    speed : float
        Ground speed (m/s)
    """
    return hypot(vel.vn, vel.ve)


def heading(vel: TangentVelocity, legacy: bool = False) -> float:
    """Compute the heading of a NED or ENU velocity

    Parameters
    ----------
    vel : TangentVelocity
        Any velocity exposing north (vn) and east (ve) components
    legacy : bool, optional
        Use ``atan(ve / vn)`` instead of the quadrant-aware arctangent.
        The legacy form reports southbound headings in the wrong half
        plane (a south-east track reads as north-west). Default False.

    Returns
    -------
    float
        Heading clockwise from north in degrees, in [0, 360).
        NaN when both horizontal components are zero.

    Examples
    --------
    >>> heading(NEDVelocity(vn=34.39, ve=123.876, vd=-636.3845))  # ~74.4845
    >>> heading(NEDVelocity(vn=-1.0, ve=1.0, vd=0.0))  # 135.0
    """
    vn, ve = vel.vn, vel.ve

    if vn == 0.0 and ve == 0.0:
        logger.debug("Heading undefined for zero horizontal velocity")
        return float('nan')

    if legacy:
        with np.errstate(divide='ignore'):
            heading_rad = np.arctan(np.divide(ve, vn))
    else:
        heading_rad = np.arctan2(ve, vn)

    return float(wrap_to_360(float(rad2deg(heading_rad))))
