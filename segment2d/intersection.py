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

"""Segment/segment intersection classification."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class IntersectionType(Enum):
    """Relationship between two segments."""

    COINCIDENT = 'coincident'
    PARALLEL = 'parallel'
    NON_INTERSECTING = 'non_intersecting'
    INTERSECTING = 'intersecting'


class IntersectionResult:
    """
    Outcome of intersecting two segments.

    The crossing point is only present for INTERSECTING results. It is owned
    by the result and handed out as a copy.
    """

    __slots__ = ('_type', '_pos')

    def __init__(self, kind, pos=None):
        self._type = kind
        self._pos = pos

    @property
    def type(self):
        return self._type

    @property
    def pos(self):
        """Copy of the intersection point, or None."""
        return self._pos.copy() if self._pos is not None else None

    def is_intersecting(self):
        return self._type is IntersectionType.INTERSECTING

    def __eq__(self, other):
        if not isinstance(other, IntersectionResult):
            return NotImplemented
        return self._type is other._type and self._pos == other._pos

    def __hash__(self):
        return hash((self._type, self._pos))

    def __repr__(self):
        """Return string representation of result."""
        return f"type: {self._type.name} pos: {self._pos}"

    __str__ = __repr__


def intersect_segments(first, second, strict_parallel=False):
    """
    Classify the intersection of two segments.

    Based on Paul Bourke's line/line parametric test. When the determinant
    is exactly zero the lines are parallel; both the collinear and the
    disjoint parallel case are reported as COINCIDENT unless strict_parallel
    is set, in which case disjoint parallel lines report PARALLEL.

    Never raises, degenerate segments end up in the zero-determinant branch.

    Args:
        first : Segment
            Segment (a, b); the intersection point is interpolated along it
        second : Segment
            Segment (c, d)
        strict_parallel : bool, optional
            Distinguish parallel from collinear lines (default is False)

    Returns
    -------
    IntersectionResult
        Classification and, for INTERSECTING, the crossing point

    """
    a, b = first.a, first.b
    c, d = second.a, second.b

    denom = (d.y - c.y) * (b.x - a.x) - (d.x - c.x) * (b.y - a.y)
    num_a = (d.x - c.x) * (a.y - c.y) - (d.y - c.y) * (a.x - c.x)
    num_b = (b.x - a.x) * (a.y - c.y) - (b.y - a.y) * (a.x - c.x)

    if denom != 0.0:
        ua = num_a / denom
        ub = num_b / denom
        if 0.0 <= ua <= 1.0 and 0.0 <= ub <= 1.0:
            result = IntersectionResult(IntersectionType.INTERSECTING,
                                        a.interpolate_to(b, ua))
        else:
            result = IntersectionResult(IntersectionType.NON_INTERSECTING)
    elif num_a == 0.0 and num_b == 0.0:
        result = IntersectionResult(IntersectionType.COINCIDENT)
    elif strict_parallel:
        result = IntersectionResult(IntersectionType.PARALLEL)
    else:
        result = IntersectionResult(IntersectionType.COINCIDENT)

    logger.debug("Intersect %r with %r: %s", first, second, result)
    return result
