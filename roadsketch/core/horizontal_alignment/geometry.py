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
Planar Geometry Primitives
===========================

Stateless helpers used by the alignment, offset and selection code.

Conventions:
    - Bearings are measured clockwise from north and normalized to [0, 2π).
      The sketch plane's second axis grows southward, so northward
      displacement is (a.y - b.y).
    - Perpendiculars rotate (x, y) -> (-y, x).
    - Signed angles between vectors are positive for a clockwise turn as
      seen on the sketch plane ("right"), matching the bearing sense.
"""

import math
from typing import Optional

from ..constants import PARALLEL_TOLERANCE
from .vector import Point

TWO_PI = 2 * math.pi

_COMPASS_OCTANTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def unit_vector(a: Point, b: Point) -> Point:
    """Unit vector from a to b.

    Returns:
        Unit vector, or (0, 0) when the points coincide.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0:
        return Point(0.0, 0.0)
    return Point(dx / length, dy / length)


def perpendicular_vector(v: Point) -> Point:
    """Vector rotated by 90°: (x, y) -> (-y, x)."""
    return Point(-v.y, v.x)


def bearing(a: Point, b: Point) -> float:
    """Bearing from a to b, clockwise from north, in [0, 2π).

    Coincident points give a bearing of 0.
    """
    east = b.x - a.x
    north = a.y - b.y
    if east == 0 and north == 0:
        return 0.0
    return normalize_angle(math.atan2(east, north))


def line_intersection(
    p1: Point,
    d1: Point,
    p2: Point,
    d2: Point
) -> Optional[Point]:
    """Intersect two parametric lines p1 + t*d1 and p2 + s*d2.

    Args:
        p1: Point on first line
        d1: Direction of first line
        p2: Point on second line
        d2: Direction of second line

    Returns:
        Intersection point, or None if the lines are parallel (or a
        direction is zero).
    """
    denominator = d1.x * d2.y - d1.y * d2.x
    if abs(denominator) < PARALLEL_TOLERANCE:
        return None

    dx = p2.x - p1.x
    dy = p2.y - p1.y
    t1 = (dx * d2.y - dy * d2.x) / denominator

    return Point(p1.x + t1 * d1.x, p1.y + t1 * d1.y)


def angle_between_vectors(v1: Point, v2: Point) -> float:
    """Signed angle turning v1 onto v2, in (-π, π].

    Positive is a clockwise ("right") turn on the sketch plane. Zero vectors
    give 0.
    """
    cross = v1.x * v2.y - v1.y * v2.x
    dot = v1.x * v2.x + v1.y * v2.y
    angle = math.atan2(cross, dot)
    if angle <= -math.pi:
        angle += TWO_PI
    return angle


def is_point_on_segment(p: Point, a: Point, b: Point, tol: float) -> bool:
    """Check whether p lies on segment ab within tolerance.

    Compares the detour a -> p -> b with the direct length, so the band is
    an ellipse collapsed onto the segment: narrow along the middle and
    wider around the endpoints.
    """
    detour = distance(p, a) + distance(p, b)
    return abs(detour - distance(a, b)) < tol


def is_point_on_arc(p: Point, center: Point, radius: float, tol: float) -> bool:
    """Check whether p lies on the circle of given center and radius.

    Only the radial distance is tested; the arc's angular sweep is ignored.
    """
    return abs(distance(p, center) - radius) <= tol


def is_point_near(a: Point, b: Point, tol: float) -> bool:
    """Check whether two points are within tol of each other."""
    return distance(a, b) <= tol


def normalize_angle(angle: float) -> float:
    """Reduce an angle to [0, 2π)."""
    result = math.fmod(angle, TWO_PI)
    if result < 0:
        result += TWO_PI
    # fmod of a tiny negative angle can round up to exactly 2π
    if result >= TWO_PI:
        result = 0.0
    return result


def format_bearing(value: float) -> str:
    """Format a bearing as compass octant and degrees.

    Args:
        value: Bearing in radians

    Returns:
        Label such as "NE 45.0°"

    Example:
        >>> format_bearing(math.pi / 2)
        'E 90.0°'
    """
    degrees = math.degrees(value)
    octant = int(((degrees % 360.0) + 22.5) // 45.0) % 8
    return f"{_COMPASS_OCTANTS[octant]} {degrees:.1f}°"


__all__ = [
    "TWO_PI",
    "distance",
    "unit_vector",
    "perpendicular_vector",
    "bearing",
    "line_intersection",
    "angle_between_vectors",
    "is_point_on_segment",
    "is_point_on_arc",
    "is_point_near",
    "normalize_angle",
    "format_bearing",
]
