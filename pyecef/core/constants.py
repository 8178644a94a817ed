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

"""WGS84 Ellipsoid Constants"""

from dataclasses import dataclass

import numpy as np

# Earth Parameters (WGS84)
RE_WGS84 = 6378137.0           # earth semimajor axis (m)
FE_WGS84 = 1.0 / 298.257223563 # earth flattening

# Derived ellipsoid parameters
RP_WGS84 = RE_WGS84 * (1.0 - FE_WGS84)                                     # polar radius (m)
E_WGS84 = np.sqrt((RE_WGS84**2 - RP_WGS84**2) / RE_WGS84**2)               # first eccentricity
EP_WGS84 = np.sqrt((RE_WGS84**2 - RP_WGS84**2) / RP_WGS84**2)              # second eccentricity
E2_WGS84 = E_WGS84 * E_WGS84   # first eccentricity squared
EP2_WGS84 = EP_WGS84 * EP_WGS84 # second eccentricity squared

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid parameters.

    Attributes
    ----------
    radius : float
        Equatorial radius (semi-major axis) in meters
    flattening : float
        Flattening
    polar_radius : float
        Polar radius (semi-minor axis) in meters
    eccentricity : float
        First eccentricity
    second_eccentricity : float
        Second eccentricity
    """
    radius: float
    flattening: float
    polar_radius: float
    eccentricity: float
    second_eccentricity: float

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return self.eccentricity**2

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return self.second_eccentricity**2


WGS84 = Ellipsoid(
    radius=RE_WGS84,
    flattening=FE_WGS84,
    polar_radius=RP_WGS84,
    eccentricity=float(E_WGS84),
    second_eccentricity=float(EP_WGS84),
)
