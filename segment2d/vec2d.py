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

"""Vec2D - Mutable 2D vector used as the point type of the geometry primitives."""

import numpy as np

from .config import get_config


class Vec2D:
    """
    Represent a 2D vector (or point) with float components.

    Methods ending in ``_self`` modify the vector in place and return it;
    the remaining arithmetic returns new vectors.
    """

    __slots__ = ('_xy',)

    def __init__(self, x=0.0, y=0.0):
        self._xy = np.array([x, y], dtype=float)

    @classmethod
    def coerce(cls, value):
        """
        Return value as a Vec2D.

        Vec2D instances are returned unchanged (no copy). Anything else is
        converted through numpy.

        Raises
        ------
        ValueError
            If value is not a 2D point

        """
        if isinstance(value, cls):
            return value
        arr = np.asarray(value, dtype=float)
        if arr.shape != (2,):
            raise ValueError("Point must be 2D [x, y]")
        return cls(arr[0], arr[1])

    @property
    def x(self):
        return float(self._xy[0])

    @x.setter
    def x(self, value):
        self._xy[0] = value

    @property
    def y(self):
        return float(self._xy[1])

    @y.setter
    def y(self, value):
        self._xy[1] = value

    def copy(self):
        return Vec2D(self._xy[0], self._xy[1])

    def set(self, other):
        """Copy the components of other into this vector."""
        self._xy[:] = Vec2D.coerce(other)._xy
        return self

    def set_xy(self, x, y):
        self._xy[0] = x
        self._xy[1] = y
        return self

    def as_tuple(self):
        return (self.x, self.y)

    def to_array(self):
        """Return the components as a new numpy array of shape (2,)."""
        return self._xy.copy()

    # Copying arithmetic

    def add(self, other):
        return Vec2D(*(self._xy + other._xy))

    def sub(self, other):
        return Vec2D(*(self._xy - other._xy))

    def scale(self, factor):
        return Vec2D(*(self._xy * factor))

    def interpolate_to(self, other, f):
        """Return the point a fraction f of the way from this vector to other."""
        return Vec2D(*(self._xy + (other._xy - self._xy) * f))

    def normalized(self):
        return self.copy().normalize_self()

    def normalized_to(self, length):
        return self.copy().normalize_to_self(length)

    def perpendicular(self):
        """Return this vector rotated a quarter turn, (x, y) -> (-y, x)."""
        return self.copy().perpendicular_self()

    def inverted(self):
        return self.copy().invert_self()

    # In-place arithmetic

    def add_self(self, other):
        self._xy += other._xy
        return self

    def sub_self(self, other):
        self._xy -= other._xy
        return self

    def scale_self(self, factor):
        self._xy *= factor
        return self

    def interpolate_to_self(self, other, f):
        self._xy += (other._xy - self._xy) * f
        return self

    def normalize_self(self):
        """Scale to unit length. A zero vector is left unchanged."""
        mag = self.magnitude_squared()
        if mag > 0:
            self._xy /= np.sqrt(mag)
        return self

    def normalize_to_self(self, length):
        mag = self.magnitude()
        if mag > 0:
            self._xy *= length / mag
        return self

    def limit_self(self, limit):
        """Shorten to the given length if currently longer."""
        if self.magnitude_squared() > limit * limit:
            return self.normalize_to_self(limit)
        return self

    def perpendicular_self(self):
        x = self._xy[0]
        self._xy[0] = -self._xy[1]
        self._xy[1] = x
        return self

    def invert_self(self):
        self._xy *= -1.0
        return self

    # Measures

    def dot(self, other):
        return float(np.dot(self._xy, other._xy))

    def cross(self, other):
        """2D cross product (z-component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    def magnitude(self):
        return float(np.hypot(self._xy[0], self._xy[1]))

    def magnitude_squared(self):
        return float(np.dot(self._xy, self._xy))

    def distance_to(self, other):
        return float(np.linalg.norm(other._xy - self._xy))

    def distance_to_squared(self, other):
        d = other._xy - self._xy
        return float(np.dot(d, d))

    def angle_between(self, other, force_normalize=False):
        """
        Calculate the unsigned angle between this vector and other.

        Args:
            other : Vec2D
                Second vector
            force_normalize : bool, optional
                Normalize copies of both vectors first; pass False only when
                both are already unit length (default is False)

        Returns
        -------
        float
            Angle in radians, in the range [0, pi]

        """
        if force_normalize:
            theta = self.normalized().dot(other.normalized())
        else:
            theta = self.dot(other)
        return float(np.arccos(np.clip(theta, -1.0, 1.0)))

    def is_zero(self):
        return not self._xy.any()

    # Comparison

    def equals_with_tolerance(self, other, tolerance=None):
        """Compare component-wise within tolerance (config default when None)."""
        if tolerance is None:
            tolerance = get_config().equality_tolerance
        return bool(np.all(np.abs(self._xy - other._xy) <= tolerance))

    def __eq__(self, other):
        if not isinstance(other, Vec2D):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    # Operators

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.sub(other)

    def __mul__(self, factor):
        return self.scale(factor)

    def __rmul__(self, factor):
        return self.scale(factor)

    def __truediv__(self, divisor):
        return self.scale(1.0 / divisor)

    def __neg__(self):
        return self.inverted()

    def __iter__(self):
        return iter(self.as_tuple())

    def __len__(self):
        return 2

    def __repr__(self):
        """Return string representation of vector."""
        return f"Vec2D({self.x:g}, {self.y:g})"
