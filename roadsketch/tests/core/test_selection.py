# ==============================================================================
# Roadsketch - Road Alignment Sketching Tools
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Tests for Element Selection
============================

Tests proximity picking of elements and IP handles.
"""

import pytest

from roadsketch.core.constants import SELECTION_TOLERANCE
from roadsketch.core.horizontal_alignment import (
    ArcElement,
    Point,
    TangentElement,
    compute_elements,
    find_element_at,
    find_point_at,
)
from roadsketch.core.horizontal_alignment.selection import is_element_at_position


class TestFindElementAt:
    """Tests for first-match element picking."""

    @pytest.mark.unit
    def test_tangent_wins_tie(self, right_angle_elements):
        # The arc start (80, 0) lies on both tangent 0 and the arc circle
        picked = find_element_at(Point(80, 0), right_angle_elements, 1.0)
        assert isinstance(picked, TangentElement)
        assert picked.index == 0

    @pytest.mark.unit
    def test_tangent_wins_when_arc_is_closer(self, right_angle_elements):
        # Arc residual ~0.29, tangent residual ~1.08; both inside 1.5
        query = Point(80.5, 0.3)
        arc = right_angle_elements[-1]
        assert is_element_at_position(query, arc, 1.5)

        picked = find_element_at(query, right_angle_elements, 1.5)
        assert isinstance(picked, TangentElement)
        assert picked.index == 0

    @pytest.mark.unit
    def test_arc_only(self, right_angle_elements):
        # Midpoint of the arc, well away from both tangents
        picked = find_element_at(Point(94.142, 5.858), right_angle_elements)
        assert isinstance(picked, ArcElement)
        assert picked.ip_index == 1

    @pytest.mark.unit
    def test_arc_hit_ignores_sweep(self, right_angle_elements):
        # On the full circle but outside the drawn quarter
        picked = find_element_at(Point(60, 20), right_angle_elements, 1.0)
        assert isinstance(picked, ArcElement)

    @pytest.mark.unit
    def test_second_tangent(self, right_angle_elements):
        picked = find_element_at(Point(101, 60), right_angle_elements, 2.0)
        assert isinstance(picked, TangentElement)
        assert picked.index == 1

    @pytest.mark.unit
    def test_miss(self, right_angle_elements):
        assert find_element_at(Point(500, 500), right_angle_elements, 5.0) is None

    @pytest.mark.unit
    def test_empty_sequence(self):
        assert find_element_at(Point(0, 0), [], 100.0) is None

    @pytest.mark.unit
    def test_accepts_pairs_and_default_tolerance(self, right_angle_elements):
        picked = find_element_at((40, 3), right_angle_elements)
        assert isinstance(picked, TangentElement)

    @pytest.mark.unit
    def test_order_is_respected(self, right_angle_elements):
        reversed_elements = list(reversed(right_angle_elements))
        picked = find_element_at(Point(80, 0), reversed_elements, 1.0)
        assert isinstance(picked, ArcElement)

    @pytest.mark.unit
    def test_default_tolerance_value(self):
        assert SELECTION_TOLERANCE == 15.0


class TestElementAtPosition:
    """Tests for the per-element predicate."""

    @pytest.mark.unit
    def test_tangent_band(self):
        tangent = compute_elements([(0, 0), (100, 0)])[0]
        assert is_element_at_position(Point(50, 0), tangent, 0.5)
        assert not is_element_at_position(Point(150, 0), tangent, 0.5)

    @pytest.mark.unit
    def test_arc_ring(self, right_angle_elements):
        arc = right_angle_elements[-1]
        assert is_element_at_position(Point(80, 40.5), arc, 1.0)
        assert not is_element_at_position(Point(80, 20), arc, 1.0)


class TestFindPointAt:
    """Tests for IP handle picking."""

    @pytest.mark.unit
    def test_hit(self, right_angle_points):
        assert find_point_at(Point(102, 1), right_angle_points, 5.0) == 1

    @pytest.mark.unit
    def test_boundary_inclusive(self, right_angle_points):
        assert find_point_at(Point(0, 5), right_angle_points, 5.0) == 0

    @pytest.mark.unit
    def test_first_match_wins(self):
        points = [Point(0, 0), Point(1, 0)]
        assert find_point_at(Point(0.6, 0), points, 5.0) == 0

    @pytest.mark.unit
    def test_miss(self, right_angle_points):
        assert find_point_at(Point(50, 50), right_angle_points, 5.0) is None

    @pytest.mark.unit
    def test_accepts_pairs(self):
        assert find_point_at((10, 10), [(0, 0), (10, 12)], 3.0) == 1
