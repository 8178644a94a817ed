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

"""Core position and velocity value types"""

import math
from dataclasses import astuple, dataclass, fields
from typing import Protocol, runtime_checkable

import numpy as np

from ..utils.numeric import trim_decimal_value

__all__ = [
    "GeodeticPoint",
    "ECEFPoint",
    "ECEFVelocity",
    "TangentVelocity",
    "NEDVelocity",
    "ENUVelocity",
]


class _Vector3:
    """Array interop shared by the three-component value types"""

    def to_array(self) -> np.ndarray:
        """Components as a float64 array in field order"""
        return np.array(astuple(self), dtype=np.float64)

    @classmethod
    def from_array(cls, arr):
        """Build an instance from a three-component sequence or array"""
        values = np.asarray(arr, dtype=np.float64).ravel()
        if values.shape != (3,):
            raise ValueError(
                f"{cls.__name__} requires exactly 3 components, got {values.size}"
            )
        return cls(*(float(v) for v in values))

    def rounded(self, digits: int):
        """Copy with every component rounded to ``digits`` decimal places"""
        return type(self)(*(trim_decimal_value(getattr(self, f.name), digits)
                            for f in fields(self)))


@dataclass(frozen=True)
class GeodeticPoint(_Vector3):
    """Geodetic position on the WGS84 ellipsoid.

    Attributes
    ----------
    lat : float
        Geodetic latitude in degrees, within [-90, 90]
    lon : float
        Longitude in degrees. Not normalized.
    alt : float
        Height above the ellipsoid in meters

    Raises
    ------
    ValueError
        If a finite latitude lies outside [-90, 90]. Non-finite values are
        accepted so that degenerate inverse projections can return NaN.
    """
    lat: float
    lon: float
    alt: float

    def __post_init__(self):
        if math.isfinite(self.lat) and not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude must be within [-90, 90] degrees, got {self.lat}")


@dataclass(frozen=True)
class ECEFPoint(_Vector3):
    """Earth-Centered Earth-Fixed position.

    Attributes
    ----------
    x : float
        Component through the prime meridian at the equator (m)
    y : float
        Component through 90 deg east at the equator (m)
    z : float
        Component toward the north pole (m)
    """
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class ECEFVelocity(_Vector3):
    """Velocity expressed in the ECEF frame (m/s)"""
    vx: float
    vy: float
    vz: float


@runtime_checkable
class TangentVelocity(Protocol):
    """Horizontal components shared by the local tangent-plane frames"""
    vn: float
    ve: float


@dataclass(frozen=True)
class NEDVelocity(_Vector3):
    """Velocity in the local North-East-Down frame (m/s).

    Attributes
    ----------
    vn : float
        North component
    ve : float
        East component
    vd : float
        Down component (positive toward the ellipsoid)
    """
    vn: float
    ve: float
    vd: float


@dataclass(frozen=True)
class ENUVelocity(_Vector3):
    """Velocity in the local East-North-Up frame (m/s).

    Attributes
    ----------
    ve : float
        East component
    vn : float
        North component
    vu : float
        Up component (positive away from the ellipsoid)
    """
    ve: float
    vn: float
    vu: float
