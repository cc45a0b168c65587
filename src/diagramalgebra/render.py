# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Lay out diagrams and draw them onto a drawing context.

The drawing context is the only stateful part involved in rendering.
It is supplied by the caller and must implement the
:class:`DrawingContext` protocol. Rectangles passed to it use the
y-up coordinate system of :class:`~diagramalgebra.diagram.Rect`.
"""

from __future__ import annotations

__all__ = [
    "Command",
    "DrawingContext",
    "RecordingContext",
    "draw",
    "saved_state",
]

import collections.abc as cabc
import contextlib
import logging
import typing as t

from diagramalgebra import diagram

LOGGER = logging.getLogger(__name__)


@t.runtime_checkable
class DrawingContext(t.Protocol):
    """A 2D surface that can fill shapes.

    Implementations keep a current fill color, which is used by all
    fill operations, and a stack to save and restore it.
    """

    def fill_rectangle(self, rect: diagram.Rect) -> None: ...

    def fill_ellipse(self, rect: diagram.Rect) -> None:
        """Fill the ellipse inscribed in ``rect``."""

    def set_fill_color(self, color: diagram.RGB) -> None: ...

    def save_state(self) -> None:
        """Push the current graphics state, including the fill color."""

    def restore_state(self) -> None:
        """Pop the graphics state pushed by the last ``save_state``."""


@contextlib.contextmanager
def saved_state(context: DrawingContext) -> cabc.Iterator[DrawingContext]:
    """Save the context's state and restore it when leaving the block.

    The state is restored even if the block raises an exception.
    """
    context.save_state()
    try:
        yield context
    finally:
        context.restore_state()


def draw(
    diagram_: diagram.Diagram,
    context: DrawingContext | None,
    bounds: diagram.Rect | tuple[diagram.Vec2ish, diagram.Vec2ish],
    align: diagram.Vec2ish = diagram.ALIGN_CENTER,
) -> None:
    """Draw a diagram into ``bounds`` on the given context.

    Parameters
    ----------
    diagram_
        The diagram to draw.
    context
        The drawing context that receives the fill commands. If it is
        ``None``, nothing is drawn.
    bounds
        The space available to the diagram. The diagram is scaled to
        the largest size that fits, keeping its aspect ratio.
    align
        How to align primitives within the space they are given, if no
        :class:`~diagramalgebra.diagram.Alignment` attribute says
        otherwise. Defaults to centered.

    Raises
    ------
    TypeError
        If the tree contains an unknown node or attribute type.
    """
    if context is None:
        LOGGER.debug("No drawing context available, not drawing")
        return

    bounds = diagram.Rect.coerce(bounds)
    match diagram_:
        case diagram.Primitive(size=size, shape=shape):
            frame = diagram.fit(size, align, bounds)
            match shape:
                case diagram.Shape.ELLIPSE:
                    context.fill_ellipse(frame)
                case diagram.Shape.RECTANGLE:
                    context.fill_rectangle(frame)
                case _:
                    raise TypeError(f"Unknown shape: {shape!r}")

        case diagram.Below(top=top, bottom=bottom):
            top_bounds, bottom_bounds = diagram.split_vertical(
                diagram.size(top), diagram.size(bottom), bounds
            )
            draw(top, context, top_bounds, align)
            draw(bottom, context, bottom_bounds, align)

        case diagram.Annotated(
            attribute=diagram.FillColor(color=color), diagram=inner
        ):
            with saved_state(context):
                context.set_fill_color(color)
                draw(inner, context, bounds, align)

        case diagram.Annotated(
            attribute=diagram.Alignment(align=inner_align), diagram=inner
        ):
            new_bounds = diagram.fit(diagram.size(inner), inner_align, bounds)
            draw(inner, context, new_bounds, align)

        case diagram.Annotated(attribute=attribute):
            raise TypeError(
                f"Unknown attribute type: {type(attribute).__name__}"
            )

        case _:
            raise TypeError(f"Not a diagram: {type(diagram_).__name__}")


class Command(t.NamedTuple):
    """A single call recorded by a :class:`RecordingContext`."""

    name: str
    args: tuple[t.Any, ...] = ()


class RecordingContext:
    """A drawing context that only records the calls made to it.

    Fill commands are recorded together with the fill color that was
    active at the time, which makes it easy to inspect the outcome of
    a layout without an actual drawing surface.
    """

    def __init__(self, fill_color: diagram.RGB = diagram.COLORS["black"]):
        self.commands: list[Command] = []
        self.fill_color = fill_color
        self.max_depth = 0
        self.__stack: list[diagram.RGB] = []

    @property
    def depth(self) -> int:
        """The current number of saved states."""
        return len(self.__stack)

    @property
    def fills(self) -> list[tuple[str, diagram.Rect, diagram.RGB]]:
        """All fill commands as ``(shape, rect, color)`` triples."""
        return [
            (cmd.name.removeprefix("fill_"), *cmd.args)
            for cmd in self.commands
            if cmd.name.startswith("fill_")
        ]

    def fill_rectangle(self, rect: diagram.Rect) -> None:
        self.commands.append(
            Command("fill_rectangle", (rect, self.fill_color))
        )

    def fill_ellipse(self, rect: diagram.Rect) -> None:
        self.commands.append(
            Command("fill_ellipse", (rect, self.fill_color))
        )

    def set_fill_color(self, color: diagram.RGB) -> None:
        self.commands.append(Command("set_fill_color", (color,)))
        self.fill_color = color

    def save_state(self) -> None:
        self.commands.append(Command("save_state"))
        self.__stack.append(self.fill_color)
        self.max_depth = max(self.max_depth, len(self.__stack))

    def restore_state(self) -> None:
        if not self.__stack:
            raise RuntimeError("restore_state() without matching save_state()")
        self.commands.append(Command("restore_state"))
        self.fill_color = self.__stack.pop()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} with {len(self.commands)} commands,"
            f" depth {self.depth}>"
        )
