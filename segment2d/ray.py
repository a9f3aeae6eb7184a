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

"""Ray2D - Half-line with an origin and a unit direction."""

from .vec2d import Vec2D


class Ray2D:
    """Represent a 2D ray starting at origin and pointing along direction."""

    def __init__(self, origin, direction):
        """
        Initialize ray; direction is normalized on construction.

        Args:
            origin : Vec2D or array-like
                Start point [x, y]
            direction : Vec2D or array-like
                Direction vector [x, y]

        """
        self.origin = Vec2D.coerce(origin)
        self.direction = Vec2D.coerce(direction).normalized()

    def point_at_distance(self, distance):
        """Get the point at the given distance from the origin."""
        return self.origin.add(self.direction.scale(distance))

    def to_segment(self, distance):
        """Return a new segment from the origin to the point at distance."""
        from .segment import Segment

        return Segment(self.origin.copy(), self.point_at_distance(distance))

    def __repr__(self):
        """Return string representation of ray."""
        return f"Ray2D(origin={self.origin!r}, direction={self.direction!r})"
