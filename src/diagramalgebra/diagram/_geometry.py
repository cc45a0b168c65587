# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Rectangles and the geometric combinators used during layout.

All coordinates use a y-up convention: a :class:`Rect`'s ``origin`` is
its bottom-left corner, and an alignment of ``(0, 0)`` means "flush to
the left and bottom edges".
"""

from __future__ import annotations

__all__ = [
    "ALIGN_BOTTOM",
    "ALIGN_CENTER",
    "ALIGN_LEFT",
    "ALIGN_RIGHT",
    "ALIGN_TOP",
    "Rect",
    "fit",
    "split_vertical",
]

import logging
import math
import typing as t

from ._vector2d import Vec2Element, Vec2ish, Vector2D

LOGGER = logging.getLogger(__name__)

ALIGN_CENTER = Vector2D(0.5, 0.5)
ALIGN_LEFT = Vector2D(0, 0.5)
ALIGN_RIGHT = Vector2D(1, 0.5)
ALIGN_TOP = Vector2D(0.5, 1)
ALIGN_BOTTOM = Vector2D(0.5, 0)


class Rect(t.NamedTuple):
    """An axis-aligned rectangle, given by its origin and size."""

    origin: Vector2D = Vector2D(0, 0)
    size: Vector2D = Vector2D(0, 0)

    @classmethod
    def from_xywh(
        cls,
        x: Vec2Element,
        y: Vec2Element,
        width: Vec2Element,
        height: Vec2Element,
    ) -> Rect:
        return cls(Vector2D(x, y), Vector2D(width, height))

    @classmethod
    def coerce(cls, value: Rect | tuple[Vec2ish, Vec2ish]) -> Rect:
        """Convert a pair of 2-tuples into a Rect."""
        if (
            isinstance(value, Rect)
            and isinstance(value.origin, Vector2D)
            and isinstance(value.size, Vector2D)
        ):
            return value
        origin, size = value
        return cls(Vector2D(*origin), Vector2D(*size))

    @property
    def x(self) -> Vec2Element:
        return self.origin.x

    @property
    def y(self) -> Vec2Element:
        return self.origin.y

    @property
    def width(self) -> Vec2Element:
        return self.size.x

    @property
    def height(self) -> Vec2Element:
        return self.size.y

    @property
    def minx(self) -> Vec2Element:
        return min(self.origin.x, self.origin.x + self.size.x)

    @property
    def maxx(self) -> Vec2Element:
        return max(self.origin.x, self.origin.x + self.size.x)

    @property
    def miny(self) -> Vec2Element:
        return min(self.origin.y, self.origin.y + self.size.y)

    @property
    def maxy(self) -> Vec2Element:
        return max(self.origin.y, self.origin.y + self.size.y)

    @property
    def center(self) -> Vector2D:
        return self.origin + self.size / 2

    def contains(self, other: Rect, tolerance: float = 1e-9) -> bool:
        """Check whether ``other`` lies fully inside this rectangle."""
        return (
            other.minx >= self.minx - tolerance
            and other.miny >= self.miny - tolerance
            and other.maxx <= self.maxx + tolerance
            and other.maxy <= self.maxy + tolerance
        )

    def isfinite(self) -> bool:
        return self.origin.isfinite() and self.size.isfinite()

    def __str__(self) -> str:  # pragma: no cover
        return f"[{self.origin} {self.size}]"


def fit(size: Vec2ish, align: Vec2ish, bounds: Rect) -> Rect:
    """Fit a box of virtual ``size`` into ``bounds``.

    The box is scaled uniformly, so that it keeps the aspect ratio of
    ``size``, to the largest size that still fits into ``bounds``. The
    remaining free space is then distributed according to ``align``:
    ``0`` places the box flush against the ``bounds.origin`` edge, ``1``
    flush against the opposite edge. Values outside of ``0..1`` push
    the box past the edges of ``bounds``.

    Parameters
    ----------
    size
        The virtual (unscaled) size of the box to place.
    align
        Fractions of the free space to put before the box, per axis.
    bounds
        The available space.

    Notes
    -----
    A zero component of ``size`` can't constrain the scale factor and
    is ignored when calculating it. If both components are zero, the
    result is a zero-size rectangle at the aligned position.
    """
    size = Vector2D(*size)
    align = Vector2D(*align)
    bounds = Rect.coerce(bounds)

    factors = [
        avail / want
        for avail, want in zip(bounds.size, size, strict=True)
        if want != 0
    ]
    if factors:
        scale = min(factors)
    else:
        LOGGER.debug("Fitting zero-size box into %s", bounds)
        scale = 0

    fitted = scale * size
    offset = align @ (bounds.size - fitted)
    return Rect(bounds.origin + offset, fitted)


def split_vertical(
    top: Vec2ish, bottom: Vec2ish, bounds: Rect
) -> tuple[Rect, Rect]:
    """Split ``bounds`` into two vertically stacked parts.

    The available height is distributed in proportion to the heights of
    ``top`` and ``bottom``. Both parts span the full width of
    ``bounds``. The bottom part is anchored at ``bounds.origin``, and
    the top part sits directly above it.

    If the combined height of ``top`` and ``bottom`` is zero, the
    height is split evenly.

    Returns
    -------
    tuple[Rect, Rect]
        The top and the bottom part, in that order.
    """
    bounds = Rect.coerce(bounds)
    total = top[1] + bottom[1]
    if total == 0:
        LOGGER.debug("Splitting %s evenly between two flat boxes", bounds)
        top_share = 0.5
    else:
        top_share = top[1] / total
    if not math.isfinite(top_share):
        raise ValueError(f"Cannot split between heights {top!r}, {bottom!r}")

    top_height = top_share * bounds.height
    # Subtracting guarantees that both heights add up to bounds.height
    bottom_height = bounds.height - top_height
    bottom_rect = Rect(bounds.origin, Vector2D(bounds.width, bottom_height))
    top_rect = Rect(
        Vector2D(bounds.x, bounds.y + bottom_height),
        Vector2D(bounds.width, top_height),
    )
    return top_rect, bottom_rect
