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

"""Segment - Pure geometry primitive for 2D line segments."""

import numpy as np

from .config import get_config
from .errors import DegenerateGeometryError
from .intersection import intersect_segments
from .ray import Ray2D
from .resample import append_segments, split_into_segments
from .vec2d import Vec2D


class Segment:
    """
    Represent a finite 2D line segment between endpoints a and b.

    Endpoints passed as Vec2D are stored by reference, so the in-place
    transforms (set, scale, offset_and_grow_by) are visible through them.
    Use copy() for an independent segment.

    Equality ignores endpoint order. The hash follows the current endpoint
    values, so do not mutate a segment while it is used as a dict key.
    """

    __slots__ = ('a', 'b')

    def __init__(self, a, b):
        """
        Initialize segment from two endpoints.

        Args:
            a : Vec2D or array-like
                First endpoint [x, y]
            b : Vec2D or array-like
                Second endpoint [x, y]

        Raises
        ------
        ValueError
            If points are not 2D

        """
        self.a = Vec2D.coerce(a)
        self.b = Vec2D.coerce(b)

    def copy(self):
        return Segment(self.a.copy(), self.b.copy())

    def set(self, a, b):
        """Replace both endpoints and return self."""
        self.a = Vec2D.coerce(a)
        self.b = Vec2D.coerce(b)
        return self

    # Derived quantities

    def length(self):
        return self.a.distance_to(self.b)

    def length_squared(self):
        return self.a.distance_to_squared(self.b)

    def midpoint(self):
        return self.a.add(self.b).scale_self(0.5)

    def is_degenerate(self, tolerance=None):
        """Check whether the segment is shorter than the degenerate tolerance."""
        if tolerance is None:
            tolerance = get_config().degenerate_tolerance
        return self.length() <= tolerance

    def direction(self):
        """
        Calculate the unit vector pointing from a to b.

        Raises
        ------
        DegenerateGeometryError
            If segment is degenerate (zero length)

        """
        self._require_length()
        return self.b.sub(self.a).normalize_self()

    def normal(self):
        """
        Calculate the vector perpendicular to b - a, with the same length.

        Raises
        ------
        DegenerateGeometryError
            If segment is degenerate (zero length)

        """
        self._require_length()
        return self.b.sub(self.a).perpendicular_self()

    def angle(self):
        """Angle in radians between the endpoints taken as position vectors."""
        return self.a.angle_between(self.b, True)

    def has_endpoint(self, p):
        p = Vec2D.coerce(p)
        return self.a == p or self.b == p

    def point_at(self, t):
        """
        Get point along segment at parameter t.

        Args:
            t: Parameter value (0 = a, 1 = b), not clamped

        Returns
        -------
        Vec2D
            Point at parameter t

        """
        return self.a.interpolate_to(self.b, t)

    def as_array(self):
        """Return endpoints as a 2x2 array [[ax, ay], [bx, by]]."""
        return np.array([self.a.as_tuple(), self.b.as_tuple()], dtype=float)

    # Intersection and projection

    def intersect_line(self, other, strict_parallel=False):
        """
        Compute the intersection between this and another segment.

        Parallel lines are reported as COINCIDENT whether or not they
        overlap; pass strict_parallel=True to get PARALLEL for lines that
        are parallel but not collinear.

        Returns
        -------
        IntersectionResult
            Intersection type and, if the segments cross, the point

        """
        return intersect_segments(self, other, strict_parallel=strict_parallel)

    def closest_point_to(self, p):
        """
        Compute the point on this segment closest to p.

        Args:
            p : Vec2D or array-like
                Point to check against

        Returns
        -------
        Vec2D
            New point, clamped to the segment's extent

        Raises
        ------
        DegenerateGeometryError
            If segment is degenerate (zero length)

        """
        self._require_length()
        p = Vec2D.coerce(p)
        v = self.b.sub(self.a)
        t = p.sub(self.a).dot(v) / v.magnitude_squared()
        if t < 0.0:
            return self.a.copy()
        elif t > 1.0:
            return self.b.copy()
        return self.a.add(v.scale_self(t))

    def distance_to(self, p):
        """Distance from p to the closest point on this segment."""
        p = Vec2D.coerce(p)
        return self.closest_point_to(p).distance_to(p)

    # Resampling

    def split_into_segments(self, step_length, include_first=True, points=None):
        """
        Split this segment into points spaced step_length apart.

        Args:
            step_length : float
                Distance between points, must be positive
            include_first : bool, optional
                Start the sequence with a copy of a (default is True)
            points : list, optional
                Existing list to append to; a new list is returned if None

        Returns
        -------
        list
            Vec2D points ending with a copy of b

        """
        if points is None:
            return split_into_segments(self.a, self.b, step_length, include_first)
        return append_segments(points, self.a, self.b, step_length, include_first)

    # Transforms

    def scale(self, factor):
        """
        Grow or shrink the segment about its midpoint, in place.

        A factor of 0.5 halves the length, 1.0 leaves it unchanged.
        """
        delta = (1.0 - factor) * 0.5
        new_a = self.a.interpolate_to(self.b, delta)
        self.b.interpolate_to_self(self.a, delta)
        self.a.set(new_a)
        return self

    def offset_and_grow_by(self, offset, grow_scale, reference=None):
        """
        Move the segment sideways and extend both ends, in place.

        The segment is shifted by offset along its normal, flipped if needed
        so it moves away from reference. Each end is then pushed outward by
        grow_scale along the segment direction.

        Args:
            offset : float
                Sideways distance
            grow_scale : float
                Extension added at each end
            reference : Vec2D or array-like, optional
                Point to move away from

        Returns
        -------
        Segment
            self

        Raises
        ------
        DegenerateGeometryError
            If segment is degenerate (zero length)

        """
        m = self.midpoint()
        d = self.direction()
        n = d.perpendicular()
        if reference is not None and m.sub(Vec2D.coerce(reference)).dot(n) < 0:
            n.invert_self()
        n.normalize_to_self(offset)
        self.a.add_self(n)
        self.b.add_self(n)
        d.scale_self(grow_scale)
        self.a.sub_self(d)
        self.b.add_self(d)
        return self

    def to_ray(self):
        """
        Return a ray starting at a and pointing towards b.

        Raises
        ------
        DegenerateGeometryError
            If segment is degenerate (zero length)

        """
        return Ray2D(self.a.copy(), self.direction())

    def _require_length(self):
        if self.is_degenerate():
            raise DegenerateGeometryError(
                f"Segment is degenerate (length {self.length():g})")

    # Comparison

    def _key(self):
        return tuple(sorted((self.a.as_tuple(), self.b.as_tuple())))

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Segment):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        """Return string representation of segment."""
        return f"Segment(a={self.a!r}, b={self.b!r})"
