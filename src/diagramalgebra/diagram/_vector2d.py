# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Two dimensional vector calculation utility."""

from __future__ import annotations

__all__ = [
    "Align",
    "Point",
    "Size",
    "Vec2Element",
    "Vec2ish",
    "Vector2D",
]

import collections.abc as cabc
import math
import operator
import typing as t

Vec2Element = t.Union[float, int]
Vec2ish = t.Tuple[Vec2Element, Vec2Element]


class Vector2D(t.NamedTuple):
    """A vector in 2-dimensional space.

    The same type is used for points, sizes and alignment fractions.
    For sizes, :attr:`width` and :attr:`height` are aliases of the
    ``x`` and ``y`` components.
    """

    x: Vec2Element = 0
    y: Vec2Element = 0

    def __add__(self, other: Vec2ish) -> Vector2D:  # type: ignore[override]
        return self.__map2(operator.add, other)

    def __radd__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.add, other, True)

    def __sub__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.sub, other)

    def __rsub__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.sub, other, True)

    def __mul__(self, other: Vec2Element) -> Vector2D:  # type: ignore
        return self.__map(operator.mul, other)

    def __rmul__(self, other: Vec2Element) -> Vector2D:  # type: ignore
        return self.__map(operator.mul, other, True)

    def __matmul__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.mul, other)

    def __rmatmul__(self, other: Vec2ish) -> Vector2D:
        return self.__map2(operator.mul, other, True)

    def __truediv__(self, other: Vec2Element | Vec2ish) -> Vector2D:
        result = self.__map2(operator.truediv, other)
        if result is NotImplemented:
            return self.__map(operator.truediv, other)
        return result

    def __rtruediv__(self, other: Vec2Element | Vec2ish) -> Vector2D:
        result = self.__map2(operator.truediv, other, True)
        if result is NotImplemented:
            return self.__map(operator.truediv, other, True)
        return result

    def __str__(self) -> str:  # pragma: no cover
        return f"({self[0]}, {self[1]})"

    @property
    def width(self) -> Vec2Element:
        """The horizontal extent, if this vector describes a size."""
        return self[0]

    @property
    def height(self) -> Vec2Element:
        """The vertical extent, if this vector describes a size."""
        return self[1]

    def isfinite(self) -> bool:
        """Check that neither component is infinite or NaN."""
        return math.isfinite(self[0]) and math.isfinite(self[1])

    def __map(
        self,
        func: cabc.Callable[[Vec2Element, Vec2Element], Vec2Element],
        other: Vec2Element | Vec2ish,
        reflected: bool = False,
    ) -> Vector2D:
        if not isinstance(other, (int, float)):  # pragma: no cover
            return NotImplemented
        if reflected:
            return type(self)(func(other, self[0]), func(other, self[1]))
        return type(self)(func(self[0], other), func(self[1], other))

    def __map2(
        self,
        func: cabc.Callable[[Vec2Element, Vec2Element], Vec2Element],
        other: Vec2Element | Vec2ish,
        reflected: bool = False,
    ) -> Vector2D:
        if isinstance(other, (int, float)):
            return NotImplemented
        if not len(other) == 2:  # pragma: no cover
            raise ValueError("Length of 'other' must be 2")
        if reflected:
            return type(self)(func(other[0], self[0]), func(other[1], self[1]))
        return type(self)(func(self[0], other[0]), func(self[1], other[1]))


Point = Vector2D
Size = Vector2D
Align = Vector2D
