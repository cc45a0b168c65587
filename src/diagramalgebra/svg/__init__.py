# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""A drawing context that renders diagrams into SVG.

The context wraps an svgwrite ``Drawing``. Diagram layout happens in a
y-up coordinate system, while SVG's y axis points down, so all shapes
are mirrored vertically when they are added to the document.
"""

from __future__ import annotations

__all__ = ["DEBUG", "SVGContext", "render_svg"]

import logging
import os
import typing as t

from svgwrite import container, drawing

from diagramalgebra import diagram, render

LOGGER = logging.getLogger(__name__)
DEBUG = "DIAGRAMALGEBRA_SVG_DEBUG" in os.environ
"""Debug flag to render the outline of every filled frame."""


class SVGContext:
    """A drawing context producing an SVG document.

    Parameters
    ----------
    size
        Width and height of the canvas. The canvas' :attr:`bounds`
        start at the origin and cover the full size.
    filename
        The default file name used by :meth:`save_as`.
    background
        Whether to add a white backdrop behind all shapes.
    fill_color
        The initial fill color.
    """

    def __init__(
        self,
        size: diagram.Vec2ish,
        *,
        filename: str = "diagram.svg",
        background: bool = True,
        fill_color: diagram.ColorSpec = "black",
    ) -> None:
        self.size = diagram.Vector2D(*size)
        self.__drawing = drawing.Drawing(
            filename=filename,
            size=tuple(self.size),
            viewBox=f"0 0 {self.size.width} {self.size.height}",
            shape_rendering="geometricPrecision",
        )
        if background:
            self._add_backdrop()

        self.fill_color = diagram.RGB.coerce(fill_color)
        self.__groups: list[container.Group] = []
        self.__colors: list[diagram.RGB] = []

    @property
    def bounds(self) -> diagram.Rect:
        """The rectangle covering the whole canvas."""
        return diagram.Rect(diagram.Vector2D(0, 0), self.size)

    @property
    def depth(self) -> int:
        """The current number of saved states."""
        return len(self.__colors)

    @property
    def filename(self) -> str:
        return self.__drawing.filename

    @filename.setter
    def filename(self, name: str) -> None:
        self.__drawing.filename = name

    def save_as(self, filename: str | None = None, **kw: t.Any) -> None:
        """Write the SVG to a file.

        If ``filename`` wasn't given the underlying ``filename`` is
        taken.
        """
        kw["filename"] = filename or self.__drawing.filename
        LOGGER.debug("Writing SVG to %s", kw["filename"])
        self.__drawing.saveas(**kw)

    def to_string(self) -> str:
        """Return a string representation of the SVG."""
        return self.__drawing.tostring()

    def fill_rectangle(self, rect: diagram.Rect) -> None:
        x, y, width, height = self._to_svg(rect)
        self._add(
            self.__drawing.rect(
                insert=(x, y),
                size=(width, height),
                class_="Rectangle",
                **self._fill_params(),
            )
        )
        self._add_debug_outline(x, y, width, height)

    def fill_ellipse(self, rect: diagram.Rect) -> None:
        x, y, width, height = self._to_svg(rect)
        self._add(
            self.__drawing.ellipse(
                center=(x + width / 2, y + height / 2),
                r=(width / 2, height / 2),
                class_="Ellipse",
                **self._fill_params(),
            )
        )
        self._add_debug_outline(x, y, width, height)

    def set_fill_color(self, color: diagram.RGB) -> None:
        self.fill_color = diagram.RGB.coerce(color)

    def save_state(self) -> None:
        """Save the fill color and open a new group for nested shapes."""
        self.__colors.append(self.fill_color)
        group = self.__drawing.g()
        self._add(group)
        self.__groups.append(group)

    def restore_state(self) -> None:
        if not self.__colors:
            raise RuntimeError("restore_state() without matching save_state()")
        self.fill_color = self.__colors.pop()
        self.__groups.pop()

    def _to_svg(
        self, rect: diagram.Rect
    ) -> tuple[float, float, float, float]:
        """Convert a y-up layout rectangle into SVG's y-down space."""
        if not rect.isfinite():
            raise ValueError(f"Cannot draw non-finite rectangle {rect}")
        width = rect.maxx - rect.minx
        height = rect.maxy - rect.miny
        return (
            rect.minx,
            self.size.height - rect.maxy,
            width,
            height,
        )

    def _fill_params(self) -> dict[str, t.Any]:
        params: dict[str, t.Any] = {
            "fill": str(self.fill_color.opaque),
            "stroke": "none",
        }
        if self.fill_color.a < 1.0:
            params["fill_opacity"] = self.fill_color.a
        return params

    def _add(self, element: t.Any) -> None:
        if self.__groups:
            self.__groups[-1].add(element)
        else:
            self.__drawing.add(element)

    def _add_backdrop(self) -> None:
        """Add a white background rectangle to the drawing."""
        self.__backdrop = self.__drawing.rect(
            insert=(0, 0),
            size=tuple(self.size),
            fill="#fff",
            stroke="none",
        )
        self.__drawing.add(self.__backdrop)

    def _add_debug_outline(
        self, x: float, y: float, width: float, height: float
    ) -> None:
        if not DEBUG:
            return
        self._add(
            self.__drawing.rect(
                insert=(x, y),
                size=(width, height),
                fill="none",
                stroke="#f00",
                stroke_dasharray="2,2",
                class_="Debug",
            )
        )

    def __repr__(self) -> str:
        return self.__drawing._repr_svg_()


def render_svg(
    diagram_: diagram.Diagram,
    size: diagram.Vec2ish,
    **kw: t.Any,
) -> SVGContext:
    """Draw a diagram onto a new canvas of the given size.

    Keyword arguments are passed on to :class:`SVGContext`.
    """
    context = SVGContext(size, **kw)
    render.draw(diagram_, context, context.bounds)
    return context
