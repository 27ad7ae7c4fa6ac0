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
2D Point Type for Alignment Sketching
======================================

A small planar point/vector type shared by every alignment calculation.

Coordinates live in a single abstract sketch plane. The second axis grows
"downward" (screen convention), which is why bearings flip its sign before
measuring from north. The type itself is convention-free.
"""

import math


class Point:
    """Planar point or displacement vector.

    Points are plain values: elements always store copies, and anything that
    needs to refer back to an intersection point does so by index.

    Attributes:
        x: First coordinate (east)
        y: Second coordinate (grows southward on the sketch plane)

    Example:
        >>> a = Point(0.0, 0.0)
        >>> b = Point(3.0, 4.0)
        >>> (b - a).length
        5.0
    """

    __slots__ = ("x", "y")

    def __init__(self, x, y=0):
        """Initialize from coordinates, a tuple/list, or another point.

        Args:
            x: X coordinate, (x, y) sequence, or object with x/y attributes
            y: Y coordinate (ignored unless x is a number)
        """
        if isinstance(x, (list, tuple)):
            self.x = float(x[0])
            self.y = float(x[1])
        elif hasattr(x, "x") and hasattr(x, "y"):
            self.x = float(x.x)
            self.y = float(x.y)
        else:
            self.x = float(x)
            self.y = float(y)

    def __sub__(self, other):
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other):
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar):
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __truediv__(self, scalar):
        return Point(self.x / scalar, self.y / scalar)

    def __neg__(self):
        return Point(-self.x, -self.y)

    def __eq__(self, other):
        """Check equality with tolerance."""
        if not isinstance(other, Point):
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f})"

    @property
    def length(self) -> float:
        """Vector magnitude."""
        return math.sqrt(self.x**2 + self.y**2)

    def normalized(self) -> "Point":
        """Return unit vector in same direction.

        Returns:
            Unit vector, or the zero vector if length is zero.
        """
        length = self.length
        if length > 0:
            return Point(self.x / length, self.y / length)
        return Point(0, 0)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        """2D cross product (z-component of the 3D cross product)."""
        return self.x * other.y - self.y * other.x

    def perpendicular(self) -> "Point":
        """Rotate by +90° in coordinate terms: (x, y) -> (-y, x)."""
        return Point(-self.y, self.x)

    def distance_to(self, other: "Point") -> float:
        return (other - self).length

    def copy(self) -> "Point":
        return Point(self.x, self.y)

    def to_tuple(self) -> tuple:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)


__all__ = ["Point"]
