# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""The immutable diagram tree and its smart constructors.

A diagram describes *what* to draw. It is built from
:class:`Primitive` shapes, which are stacked with :class:`Below` and
decorated with attributes through :class:`Annotated`. None of these
carry any concrete position or pixel size; that is decided when the
diagram is drawn.

>>> from diagramalgebra import diagram
>>> sample = diagram.circle(0.5).fill("green") / diagram.square(2).fill("red")
>>> diagram.size(sample)
Vector2D(x=2, y=3.0)
"""

from __future__ import annotations

__all__ = [
    "Alignment",
    "Annotated",
    "Attribute",
    "Below",
    "Diagram",
    "FillColor",
    "Primitive",
    "Shape",
    "align",
    "align_bottom",
    "align_left",
    "align_right",
    "align_top",
    "below",
    "circle",
    "ellipse",
    "fill",
    "rectangle",
    "square",
    "vstack",
]

import dataclasses
import enum
import functools
import typing as t

from . import _geometry
from ._colors import RGB, ColorSpec
from ._vector2d import Vec2Element, Vector2D


class Shape(enum.Enum):
    """The kind of figure a :class:`Primitive` is drawn as."""

    ELLIPSE = enum.auto()
    RECTANGLE = enum.auto()


@dataclasses.dataclass(frozen=True)
class FillColor:
    """Fill all primitives in the annotated subtree with ``color``."""

    color: RGB

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", RGB.coerce(self.color))


@dataclasses.dataclass(frozen=True)
class Alignment:
    """Anchor the annotated subtree within its bounds.

    Each component is the fraction of free space placed before the
    subtree along that axis, where ``0`` means left or bottom and ``1``
    means right or top. Values outside of ``0..1`` are allowed and move
    the subtree past the edges of its bounds.
    """

    align: Vector2D

    def __post_init__(self) -> None:
        if not isinstance(self.align, Vector2D):
            object.__setattr__(self, "align", Vector2D(*self.align))


Attribute = t.Union[FillColor, Alignment]


class Diagram:
    """Base class for all diagram nodes.

    The set of node types is closed: it consists of :class:`Primitive`,
    :class:`Below` and :class:`Annotated`. All nodes are immutable, so
    subtrees may safely be shared between several parents.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: t.Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"Cannot subclass {Diagram.__name__}:"
                " the set of diagram node types is closed"
            )

    def fill(self, color: ColorSpec) -> Annotated:
        """Fill this diagram with ``color``."""
        return Annotated(FillColor(color), self)

    def align(self, x: Vec2Element, y: Vec2Element) -> Annotated:
        """Anchor this diagram at the fractions ``x`` and ``y``."""
        return Annotated(Alignment(Vector2D(x, y)), self)

    def align_left(self) -> Annotated:
        return self.align(*_geometry.ALIGN_LEFT)

    def align_right(self) -> Annotated:
        return self.align(*_geometry.ALIGN_RIGHT)

    def align_top(self) -> Annotated:
        return self.align(*_geometry.ALIGN_TOP)

    def align_bottom(self) -> Annotated:
        return self.align(*_geometry.ALIGN_BOTTOM)

    def below(self, other: Diagram) -> Below:
        """Place ``other`` below this diagram."""
        return Below(self, other)

    def __truediv__(self, other: Diagram) -> Below:
        if not isinstance(other, Diagram):
            return NotImplemented
        return Below(self, other)


@dataclasses.dataclass(frozen=True)
class Primitive(Diagram):
    """A single shape with an intrinsic virtual size."""

    size: Vector2D
    shape: Shape

    def __post_init__(self) -> None:
        if not isinstance(self.size, Vector2D):
            object.__setattr__(self, "size", Vector2D(*self.size))
        if not isinstance(self.shape, Shape):
            raise TypeError(f"Expected a Shape, got {self.shape!r}")


@dataclasses.dataclass(frozen=True)
class Below(Diagram):
    """Two diagrams stacked vertically, ``top`` above ``bottom``."""

    top: Diagram
    bottom: Diagram


@dataclasses.dataclass(frozen=True)
class Annotated(Diagram):
    """A diagram with an attribute applying to its entire subtree.

    Nested annotations of the same kind override outer ones for their
    own subtree.
    """

    attribute: Attribute
    diagram: Diagram


def square(side: Vec2Element) -> Primitive:
    return Primitive(Vector2D(side, side), Shape.RECTANGLE)


def circle(radius: Vec2Element) -> Primitive:
    return Primitive(Vector2D(2 * radius, 2 * radius), Shape.ELLIPSE)


def rectangle(width: Vec2Element, height: Vec2Element) -> Primitive:
    return Primitive(Vector2D(width, height), Shape.RECTANGLE)


def ellipse(width: Vec2Element, height: Vec2Element) -> Primitive:
    return Primitive(Vector2D(width, height), Shape.ELLIPSE)


def fill(diagram: Diagram, color: ColorSpec) -> Annotated:
    """Fill ``diagram`` with ``color``.

    The color can be given as :class:`RGB`, as one of the names in
    :data:`COLORS` or as CSS color string.
    """
    return diagram.fill(color)


def align(diagram: Diagram, x: Vec2Element, y: Vec2Element) -> Annotated:
    return diagram.align(x, y)


def align_left(diagram: Diagram) -> Annotated:
    return diagram.align_left()


def align_right(diagram: Diagram) -> Annotated:
    return diagram.align_right()


def align_top(diagram: Diagram) -> Annotated:
    return diagram.align_top()


def align_bottom(diagram: Diagram) -> Annotated:
    return diagram.align_bottom()


def below(top: Diagram, bottom: Diagram) -> Below:
    """Stack ``top`` above ``bottom``.

    Equivalent to ``top / bottom``.
    """
    return Below(top, bottom)


def vstack(first: Diagram, *rest: Diagram) -> Diagram:
    """Stack any number of diagrams from top to bottom.

    The result nests to the left, the same way as chaining the ``/``
    operator does: ``vstack(a, b, c) == (a / b) / c``.
    """
    return functools.reduce(Below, rest, first)

