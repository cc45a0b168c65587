# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import math

import pytest

from diagramalgebra import diagram
from diagramalgebra.diagram import Rect


def xywh(rect: Rect) -> tuple[float, float, float, float]:
    return (*rect.origin, *rect.size)


@pytest.mark.parametrize(
    ["size", "align", "bounds", "expected"],
    [
        pytest.param(
            (100, 200),
            (0, 0),
            Rect.from_xywh(0, 0, 200, 200),
            Rect.from_xywh(0, 0, 100, 200),
            id="Flush to origin",
        ),
        pytest.param(
            (100, 200),
            (0.5, 1),
            Rect.from_xywh(0, 0, 200, 200),
            Rect.from_xywh(50, 0, 100, 200),
            id="Centered horizontally",
        ),
        pytest.param(
            (100, 200),
            (0.5, 1),
            Rect.from_xywh(0, 0, 300, 300),
            Rect.from_xywh(75, 0, 150, 300),
            id="Scaled up",
        ),
        pytest.param(
            (100, 200),
            (0, 0),
            Rect.from_xywh(-20, -30, 100, 100),
            Rect.from_xywh(-20, -30, 50, 100),
            id="Scaled down with negative origin",
        ),
        pytest.param(
            (2, 1),
            (1, 1),
            Rect.from_xywh(0, 0, 100, 100),
            Rect.from_xywh(0, 50, 100, 50),
            id="Top right",
        ),
        pytest.param(
            (1, 1),
            (2, -1),
            Rect.from_xywh(0, 0, 200, 100),
            Rect.from_xywh(200, 0, 100, 100),
            id="Alignment outside of the unit range extrapolates",
        ),
    ],
)
def test_fit(
    size: diagram.Vec2ish,
    align: diagram.Vec2ish,
    bounds: Rect,
    expected: Rect,
):
    actual = diagram.fit(size, align, bounds)

    assert isinstance(actual, Rect)
    assert xywh(actual) == pytest.approx(xywh(expected))


@pytest.mark.parametrize(
    "size", [(1, 1), (100, 200), (3, 0.5), (0.001, 7), (16, 9)]
)
@pytest.mark.parametrize(
    "bounds",
    [
        Rect.from_xywh(0, 0, 100, 100),
        Rect.from_xywh(-5, 10, 30, 400),
        Rect.from_xywh(3.5, -2.25, 0.75, 0.5),
    ],
)
@pytest.mark.parametrize("align", [(0, 0), (0.5, 0.5), (1, 0.25), (0.3, 1)])
def test_fit_keeps_aspect_ratio_and_stays_inside_bounds(
    size: diagram.Vec2ish, bounds: Rect, align: diagram.Vec2ish
):
    actual = diagram.fit(size, align, bounds)

    assert actual.width / actual.height == pytest.approx(size[0] / size[1])
    assert bounds.contains(actual)
    assert math.isclose(actual.width, bounds.width) or math.isclose(
        actual.height, bounds.height
    )


def test_fit_does_not_modify_bounds():
    bounds = Rect.from_xywh(1, 2, 30, 40)

    diagram.fit((1, 1), diagram.ALIGN_CENTER, bounds)

    assert bounds == Rect.from_xywh(1, 2, 30, 40)


@pytest.mark.parametrize(
    ["size", "bounds", "expected"],
    [
        pytest.param(
            (0, 0),
            Rect.from_xywh(0, 0, 10, 10),
            Rect.from_xywh(5, 5, 0, 0),
            id="Zero size",
        ),
        pytest.param(
            (0, 2),
            Rect.from_xywh(0, 0, 10, 10),
            Rect.from_xywh(5, 0, 0, 10),
            id="Zero width",
        ),
        pytest.param(
            (4, 0),
            Rect.from_xywh(0, 0, 10, 10),
            Rect.from_xywh(0, 5, 10, 0),
            id="Zero height",
        ),
        pytest.param(
            (1, 2),
            Rect.from_xywh(3, 4, 0, 0),
            Rect.from_xywh(3, 4, 0, 0),
            id="Zero bounds",
        ),
    ],
)
def test_fit_degenerate_sizes_produce_finite_rects(
    size: diagram.Vec2ish, bounds: Rect, expected: Rect
):
    actual = diagram.fit(size, diagram.ALIGN_CENTER, bounds)

    assert actual.isfinite()
    assert xywh(actual) == pytest.approx(xywh(expected))


def test_split_vertical():
    top, bottom = diagram.split_vertical(
        (10, 10), (20, 20), Rect.from_xywh(0, 0, 300, 300)
    )

    assert top == Rect.from_xywh(0, 200, 300, 100)
    assert bottom == Rect.from_xywh(0, 0, 300, 200)


@pytest.mark.parametrize(
    ["top", "bottom", "bounds"],
    [
        ((10, 10), (20, 20), Rect.from_xywh(0, 0, 300, 300)),
        ((5, 1), (1, 3), Rect.from_xywh(0, 0, 40, 1)),
        ((1, 3), (2, 7), Rect.from_xywh(0, 0, 10, 1)),
    ],
)
def test_split_vertical_heights_add_up_exactly(
    top: diagram.Vec2ish, bottom: diagram.Vec2ish, bounds: Rect
):
    top_rect, bottom_rect = diagram.split_vertical(top, bottom, bounds)

    assert top_rect.height + bottom_rect.height == bounds.height
    assert top_rect.width == bottom_rect.width == bounds.width
    assert top_rect.y == bottom_rect.y + bottom_rect.height


@pytest.mark.parametrize(
    ["top", "bottom", "bounds"],
    [
        ((1, 0.1), (1, 0.2), Rect.from_xywh(-3, 7, 11, 0.3)),
        ((4, 17), (9, 5), Rect.from_xywh(2.5, -1.5, 8, 123.456)),
        ((1, 1), (1, 1e-9), Rect.from_xywh(0, 0, 1, 1)),
    ],
)
def test_split_vertical_is_proportional(
    top: diagram.Vec2ish, bottom: diagram.Vec2ish, bounds: Rect
):
    top_rect, bottom_rect = diagram.split_vertical(top, bottom, bounds)

    assert bottom_rect.origin == bounds.origin
    assert top_rect.x == bounds.x
    assert top_rect.height + bottom_rect.height == pytest.approx(
        bounds.height
    )
    assert top_rect.height / bounds.height == pytest.approx(
        top[1] / (top[1] + bottom[1])
    )


def test_split_vertical_between_flat_boxes_splits_evenly():
    top, bottom = diagram.split_vertical(
        (3, 0), (5, 0), Rect.from_xywh(0, 0, 10, 10)
    )

    assert top == Rect.from_xywh(0, 5, 10, 5)
    assert bottom == Rect.from_xywh(0, 0, 10, 5)


def test_split_vertical_with_one_flat_box_gives_it_no_space():
    top, bottom = diagram.split_vertical(
        (3, 0), (5, 2), Rect.from_xywh(0, 0, 10, 10)
    )

    assert top == Rect.from_xywh(0, 10, 10, 0)
    assert bottom == Rect.from_xywh(0, 0, 10, 10)


def test_rect_properties():
    rect = Rect.from_xywh(10, 20, -4, 6)

    assert (rect.x, rect.y, rect.width, rect.height) == (10, 20, -4, 6)
    assert (rect.minx, rect.maxx) == (6, 10)
    assert (rect.miny, rect.maxy) == (20, 26)
    assert rect.center == (8, 23)


def test_rect_coerce_converts_tuples():
    rect = Rect.coerce(((1, 2), (3, 4)))

    assert isinstance(rect.origin, diagram.Vector2D)
    assert isinstance(rect.size, diagram.Vector2D)
    assert rect == Rect.from_xywh(1, 2, 3, 4)


def test_rect_coerce_converts_plain_tuple_size():
    rect = Rect.coerce(Rect(diagram.Vector2D(0, 0), (10, 20)))  # type: ignore

    assert isinstance(rect.size, diagram.Vector2D)
    assert rect.height == 20
