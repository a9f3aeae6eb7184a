# Copyright 2025 Berkan Tali
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

"""2D line segment geometry: intersection, projection, resampling, transforms."""

from .config import GeometryConfig, get_config, load_config, set_config
from .errors import DegenerateGeometryError, GeometryError, InvalidParameterError
from .intersection import IntersectionResult, IntersectionType, intersect_segments
from .ray import Ray2D
from .resample import append_segments, split_into_array, split_into_segments
from .segment import Segment
from .vec2d import Vec2D

__version__ = '0.1.0'

__all__ = [
    'Vec2D', 'Segment', 'Ray2D',
    'IntersectionType', 'IntersectionResult', 'intersect_segments',
    'split_into_segments', 'append_segments', 'split_into_array',
    'GeometryError', 'DegenerateGeometryError', 'InvalidParameterError',
    'GeometryConfig', 'load_config', 'get_config', 'set_config',
]
