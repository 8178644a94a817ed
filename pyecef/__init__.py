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

"""
PyECEF - WGS84 Geodetic Transformation Library

A Python library for converting between geodetic (latitude, longitude,
altitude) and Earth-Centered Earth-Fixed positions, rotating velocities
between ECEF and local North-East-Down / East-North-Up frames, and deriving
ground speed and heading.
"""

__version__ = "1.0.0"
__author__ = "PyECEF Development Team"
__title__ = "pyecef"
__description__ = "WGS84 geodetic and ECEF transformation library"

from .core import *
from .coordinate import *
from .utils import *
