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

import math

import numpy as np
import pytest

from segment2d import DegenerateGeometryError, Segment, Vec2D


def test_accepts_array_like_endpoints():
    seg = Segment([1, 2], (3.5, -4))
    assert seg.a == Vec2D(1.0, 2.0)
    assert seg.b == Vec2D(3.5, -4.0)


def test_rejects_non_2d_points():
    with pytest.raises(ValueError):
        Segment([0, 0, 0], [1, 1, 1])


def test_vec2d_endpoints_are_stored_by_reference():
    a = Vec2D(0, 0)
    seg = Segment(a, Vec2D(10, 0))
    seg.scale(0.5)
    assert a == Vec2D(2.5, 0)


def test_copy_equals_original():
    seg = Segment(Vec2D(1, 2), Vec2D(3, 4))
    assert seg.copy() == seg


def test_copy_does_not_alias_endpoints():
    seg = Segment(Vec2D(1, 2), Vec2D(3, 4))
    dup = seg.copy()
    dup.a.set_xy(100, 100)
    dup.b.x = -7
    assert seg.a == Vec2D(1, 2)
    assert seg.b == Vec2D(3, 4)


def test_equality_ignores_endpoint_order():
    a, b = Vec2D(1, 2), Vec2D(-3, 7.5)
    assert Segment(a, b) == Segment(b, a)
    assert hash(Segment(a, b)) == hash(Segment(b, a))


def test_equality_differs_for_different_endpoints():
    assert Segment([0, 0], [1, 1]) != Segment([0, 0], [1, 2])
    assert Segment([0, 0], [0, 0]) != Segment([0, 0], [1, 1])


def test_segments_usable_as_set_members():
    segs = {Segment([0, 0], [1, 0]), Segment([1, 0], [0, 0]), Segment([0, 0], [0, 1])}
    assert len(segs) == 2


def test_set_replaces_endpoints_and_returns_self():
    seg = Segment([0, 0], [1, 1])
    result = seg.set(Vec2D(5, 5), [6, 7])
    assert result is seg
    assert seg.a == Vec2D(5, 5)
    assert seg.b == Vec2D(6, 7)


def test_length_and_length_squared():
    seg = Segment([1, 1], [4, 5])
    assert seg.length() == pytest.approx(5.0)
    assert seg.length_squared() == pytest.approx(25.0)


@pytest.mark.parametrize('a, b', [
    ((0, 0), (1, 1)),
    ((-3.2, 7.1), (12.5, -0.4)),
    ((1e3, 1e3), (1e3 + 1e-3, 1e3)),
])
def test_length_squared_matches_length(a, b):
    seg = Segment(a, b)
    assert seg.length() ** 2 == pytest.approx(seg.length_squared())


def test_midpoint():
    assert Segment([0, 0], [10, 4]).midpoint() == Vec2D(5, 2)


def test_direction_is_unit_vector():
    d = Segment([1, 1], [4, 5]).direction()
    assert d.x == pytest.approx(0.6)
    assert d.y == pytest.approx(0.8)
    assert d.magnitude() == pytest.approx(1.0)


def test_normal_is_perpendicular_and_unnormalized():
    seg = Segment([0, 0], [3, 4])
    n = seg.normal()
    assert n == Vec2D(-4, 3)
    assert n.dot(seg.b.sub(seg.a)) == pytest.approx(0.0)


def test_angle_between_endpoint_vectors():
    assert Segment([1, 0], [0, 1]).angle() == pytest.approx(math.pi / 2)
    assert Segment([1, 0], [5, 0]).angle() == pytest.approx(0.0)
    assert Segment([1, 0], [-2, 0]).angle() == pytest.approx(math.pi)


def test_has_endpoint():
    seg = Segment([0, 0], [2, 3])
    assert seg.has_endpoint(Vec2D(0, 0))
    assert seg.has_endpoint(Vec2D(2, 3))
    assert not seg.has_endpoint(Vec2D(1, 1.5))


@pytest.mark.parametrize('point', [[0, 0], (2, 3), np.array([2.0, 3.0])])
def test_has_endpoint_accepts_array_like(point):
    assert Segment([0, 0], [2, 3]).has_endpoint(point)


def test_has_endpoint_array_like_miss():
    assert not Segment([0, 0], [2, 3]).has_endpoint((1, 1))


def test_point_at():
    seg = Segment([0, 0], [10, 20])
    assert seg.point_at(0.25) == Vec2D(2.5, 5)
    assert seg.point_at(0) == seg.a
    assert seg.point_at(1) == seg.b


def test_as_array():
    arr = Segment([1, 2], [3, 4]).as_array()
    assert arr.shape == (2, 2)
    np.testing.assert_allclose(arr, [[1, 2], [3, 4]])


def test_degenerate_segment_has_zero_length():
    seg = Segment([2, 2], [2, 2])
    assert seg.length() == 0.0
    assert seg.is_degenerate()


@pytest.mark.parametrize('method', ['direction', 'normal', 'to_ray'])
def test_degenerate_segment_raises(method):
    seg = Segment([2, 2], [2, 2])
    with pytest.raises(DegenerateGeometryError):
        getattr(seg, method)()


def test_degenerate_error_is_value_error():
    with pytest.raises(ValueError):
        Segment([0, 0], [0, 0]).direction()


def test_repr():
    assert repr(Segment([0, 0], [1, 2.5])) == "Segment(a=Vec2D(0, 0), b=Vec2D(1, 2.5))"
