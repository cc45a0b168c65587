# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Size inference for diagram trees."""

from __future__ import annotations

__all__ = ["size"]

from ._diagram import Annotated, Below, Diagram, Primitive
from ._vector2d import Vector2D


def size(diagram: Diagram) -> Vector2D:
    """Calculate the virtual size of a diagram.

    The virtual size is the intrinsic, unscaled size of the diagram.
    Stacked diagrams are as wide as the wider one of both, and as high
    as both together. Attributes never change the size.

    Raises
    ------
    TypeError
        If ``diagram`` is not one of the known diagram node types.
    """
    match diagram:
        case Primitive(size=sz):
            return sz
        case Below(top=top, bottom=bottom):
            ts = size(top)
            bs = size(bottom)
            return Vector2D(max(ts.width, bs.width), ts.height + bs.height)
        case Annotated(diagram=inner):
            return size(inner)
        case _:
            raise TypeError(f"Not a diagram: {type(diagram).__name__}")
