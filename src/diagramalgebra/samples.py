# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""A collection of sample diagrams."""

from __future__ import annotations

__all__ = [
    "SAMPLES",
    "blue_square",
    "green_circle",
    "red_square",
    "sample_diagram1",
]

from diagramalgebra import diagram

blue_square = diagram.square(1).fill("blue")
red_square = diagram.square(2).fill("red")
green_circle = diagram.circle(0.5).fill("green")

sample_diagram1 = green_circle / red_square

SAMPLES: dict[str, diagram.Diagram] = {
    "blue-square": blue_square,
    "red-square": red_square,
    "green-circle": green_circle,
    "circle-over-square": sample_diagram1,
    "red-over-blue": red_square / blue_square,
    "three-tier": diagram.vstack(
        red_square,
        diagram.square(0.1).fill("green"),
        blue_square,
    ),
    "right-aligned": red_square / blue_square.align_right(),
    "right-aligned-stack": (
        red_square / blue_square.align_right()
    ).align_right(),
    "wide-over-circle": (
        diagram.rectangle(3, 1).fill("orange") / green_circle.align_top()
    ),
    "bottom-left": diagram.square(1).fill("purple").align(0, 0),
}
