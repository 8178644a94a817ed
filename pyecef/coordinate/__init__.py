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

"""Coordinate transformation utilities

This module provides the WGS84 transform engine:
- Position transforms (geodetic LLA <-> ECEF)
- Velocity rotations (ECEF <-> NED, ECEF <-> ENU)
- Derived kinematics (ground speed, heading)
- DCM (Direction Cosine Matrix) for local tangent frames
"""

# DCM for local tangent frames
from .dcm import ecef2enu_dcm, ecef2ned_dcm, enu2ecef_dcm, ned2ecef_dcm

# Geodetic utilities
from .geodetic import radius_of_curvature

# Position transforms
from .transforms import ecef2lla, lla2ecef

# Velocity transforms
from .velocity import (
    ecef2enu_vel,
    ecef2ned_vel,
    enu2ecef_vel,
    enu2ned_vel,
    ground_speed,
    heading,
    ned2ecef_vel,
    ned2enu_vel,
)
