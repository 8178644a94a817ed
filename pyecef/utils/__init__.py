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
PyECEF Utils Module

Numeric helpers used by the transform engine:

- Degree/radian conversion
- Two-argument hypotenuse
- Decimal rounding for presenting results
- Heading wrapping to [0, 360)

Examples
--------
>>> from pyecef.utils import trim_decimal_value
>>> trim_decimal_value(28394.2028437465, 3)
28394.203
"""

from .numeric import *
