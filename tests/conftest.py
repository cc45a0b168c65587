# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Global fixtures for pytest."""

import pytest

from diagramalgebra import diagram, render


@pytest.fixture
def context() -> render.RecordingContext:
    """Return a fresh drawing context that records all calls."""
    return render.RecordingContext()


@pytest.fixture
def nested_diagram() -> diagram.Diagram:
    """Return a diagram mixing all node and attribute types."""
    return diagram.vstack(
        diagram.circle(0.5).fill("green").align_left(),
        (diagram.square(2).fill("red") / diagram.rectangle(3, 1))
        .fill("blue")
        .align_right(),
        diagram.ellipse(2, 1).align(0.25, 0.75).fill("#ff00ff80"),
    )
