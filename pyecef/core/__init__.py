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

"""Core Module.

This module provides the fundamental components shared by the transform engine:

- **Constants**: WGS84 defining constants, the derived polar radius and
  eccentricities, and unit conversion factors
- **Data Structures**: Immutable value types for geodetic and ECEF positions,
  ECEF velocities and the NED/ENU tangent-plane velocities

Example Usage:
    >>> from pyecef.core import *
    >>>
    >>> point = GeodeticPoint(lat=28.4187, lon=-81.5812, alt=33.0)
    >>> point.to_array()
    array([ 28.4187, -81.5812,  33.    ])
    >>> WGS84.polar_radius
    6356752.314245179
"""

from .constants import *
from .data_structures import *
