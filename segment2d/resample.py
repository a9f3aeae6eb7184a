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

"""Resampling of straight lines into evenly spaced points."""

import logging
import math

import numpy as np

from .config import get_config
from .errors import InvalidParameterError
from .vec2d import Vec2D

logger = logging.getLogger(__name__)


def append_segments(points, a, b, step_length, include_first=True):
    """
    Append points spaced step_length apart along the line from a to b.

    The last point appended is always a copy of b, so the final gap is
    usually shorter than step_length.

    Parameters
    ----------
    points : list
        List the Vec2D points are appended to.
    a : Vec2D or array-like
        Start point.
    b : Vec2D or array-like
        End point (always appended).
    step_length : float
        Distance between consecutive points, must be positive.
    include_first : bool, optional
        Append a copy of a before the first step (default True).

    Returns
    -------
    list
        The points list passed in.

    Raises
    ------
    InvalidParameterError
        If step_length is not a positive finite number.

    """
    if not (math.isfinite(step_length) and step_length > 0):
        raise InvalidParameterError(f"step_length must be positive, got {step_length}")

    a = Vec2D.coerce(a)
    b = Vec2D.coerce(b)
    start_count = len(points)

    if include_first:
        points.append(a.copy())

    dist = a.distance_to(b)
    if dist > step_length:
        step = b.sub(a).limit_self(step_length)
        # intermediate points k * step_length < dist, none within tolerance of b
        count = math.ceil(dist / step_length) - 1
        if count > 0 and dist - count * step_length <= get_config().degenerate_tolerance:
            count -= 1
        for k in range(1, count + 1):
            points.append(a.add(step.scale(k)))

    points.append(b.copy())

    logger.debug("Resampled %r -> %r into %d points (step %g)",
                 a, b, len(points) - start_count, step_length)
    return points


def split_into_segments(a, b, step_length, include_first=True):
    """
    Split the line from a to b into points spaced step_length apart.

    Returns
    -------
    list
        New list of Vec2D points ending with a copy of b.

    """
    return append_segments([], a, b, step_length, include_first)


def split_into_array(a, b, step_length, include_first=True):
    """Same as split_into_segments, as an (n, 2) float array."""
    points = split_into_segments(a, b, step_length, include_first)
    return np.array([p.as_tuple() for p in points], dtype=float)
