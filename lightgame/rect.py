"""Axis-aligned 2D rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

Point = tuple[float, float]


def _pair(value: Iterable[float]) -> Point:
    x, y = value
    return (float(x), float(y))


@dataclass
class Rect:
    """A rectangle whose origin is its top-left corner, y growing downwards."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.w, self.h)

    @classmethod
    def fraction(
        cls, x: float, y: float, w: float, h: float, reference: Rect
    ) -> Rect:
        """Create a rect as a fraction of the reference rect's size."""
        return cls(x / reference.w, y / reference.h, w / reference.w, h / reference.h)

    @classmethod
    def from_ints(cls, x: int, y: int, w: int, h: int) -> Rect:
        """Create a rect from integer coordinates."""
        return cls(float(x), float(y), float(w), float(h))

    @classmethod
    def zero(cls) -> Rect:
        """A rect with every value zero."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Rect:
        """A unit rect at the origin."""
        return cls(0.0, 0.0, 1.0, 1.0)

    def size(self) -> Point:
        """Width and height."""
        return (self.w, self.h)

    def point(self) -> Point:
        """The top-left corner."""
        return (self.x, self.y)

    def center(self) -> Point:
        """The centre point."""
        return (self.x + self.w / 2.0, self.y + self.h / 2.0)

    def left(self) -> float:
        """The left edge."""
        return self.x

    def right(self) -> float:
        """The right edge."""
        return self.x + self.w

    def top(self) -> float:
        """The top edge."""
        return self.y

    def bottom(self) -> float:
        """The bottom edge."""
        return self.y + self.h

    def contains(self, point: Iterable[float]) -> bool:
        """Whether the point lies inside the rect or on its border."""
        px, py = _pair(point)
        return (
            self.left() <= px <= self.right()
            and self.top() <= py <= self.bottom()
        )

    def overlaps(self, other: Rect) -> bool:
        """Whether this rect overlaps another, touching edges included."""
        return (
            self.left() <= other.right()
            and self.right() >= other.left()
            and self.top() <= other.bottom()
            and self.bottom() >= other.top()
        )

    def overlaps_circle(self, point: Iterable[float], radius: float) -> bool:
        """Whether this rect overlaps the circle at ``point`` with ``radius``."""
        px, py = _pair(point)
        cx, cy = self.center()
        dx, dy = abs(px - cx), abs(py - cy)
        half_w, half_h = self.w / 2.0, self.h / 2.0

        if dx > half_w + radius or dy > half_h + radius:
            return False
        if dx <= half_w or dy <= half_h:
            return True
        corner_distance_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
        return corner_distance_sq <= radius**2

    def translate(self, offset: Iterable[float]) -> None:
        """Shift the rect by an (x, y) offset."""
        ox, oy = _pair(offset)
        self.x += ox
        self.y += oy

    def move_to(self, destination: Iterable[float]) -> None:
        """Move the top-left corner to the given point."""
        self.x, self.y = _pair(destination)

    def scale(self, sx: float, sy: float) -> None:
        """Scale width and height, keeping the origin fixed."""
        self.w *= sx
        self.h *= sy

    def rotate(self, rotation: float) -> None:
        """Replace the rect by the bounding box of it rotated about the origin."""
        cos, sin = math.cos(rotation), math.sin(rotation)
        corners = [
            (cx, cy)
            for cx in (self.x, self.right())
            for cy in (self.y, self.bottom())
        ]
        rotated = [(cos * px - sin * py, sin * px + cos * py) for px, py in corners]
        xs = [p[0] for p in rotated]
        ys = [p[1] for p in rotated]
        x_min, y_min = min(xs), min(ys)
        self.x = x_min
        self.y = y_min
        self.w = max(xs) - x_min
        self.h = max(ys) - y_min

    def combine_with(self, other: Rect) -> Rect:
        """A new rect covering both this rect and ``other``."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        w = max(self.right(), other.right()) - x
        h = max(self.bottom(), other.bottom()) - y
        return Rect(x, y, w, h)

    def isclose(
        self, other: Rect, rel_tol: float = 1e-5, abs_tol: float = 1e-6
    ) -> bool:
        """Whether every component is close to the other rect's."""
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )