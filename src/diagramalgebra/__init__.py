# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""A declarative diagram composition library.

Diagrams are immutable trees of shapes, vertical stacks and attributes.
They are laid out and drawn onto any object implementing the
:class:`~diagramalgebra.render.DrawingContext` protocol, for example an
:class:`~diagramalgebra.svg.SVGContext`.
"""

from importlib import metadata

try:
    __version__ = metadata.version("diagramalgebra")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+unknown"
del metadata

from .diagram import (
    RGB as RGB,
    Diagram as Diagram,
    Rect as Rect,
    Vector2D as Vector2D,
    align as align,
    align_bottom as align_bottom,
    align_left as align_left,
    align_right as align_right,
    align_top as align_top,
    below as below,
    circle as circle,
    ellipse as ellipse,
    fill as fill,
    rectangle as rectangle,
    size as size,
    square as square,
    vstack as vstack,
)
from .render import DrawingContext as DrawingContext
from .render import draw as draw
