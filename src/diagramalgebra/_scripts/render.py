# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0

import logging
import pathlib

import click

from diagramalgebra import samples, svg

logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "names",
    nargs=-1,
    type=click.Choice(sorted(samples.SAMPLES)),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(file_okay=False, dir_okay=True, path_type=pathlib.Path),
    default="./diagrams",
    help="Directory to store the rendered diagrams in",
    show_default=True,
    envvar="DIAGRAMALGEBRA_OUTPUT_DIR",
    show_envvar=True,
)
@click.option(
    "--width",
    type=click.FloatRange(min=0),
    default=100,
    help="Width of the canvas",
    show_default=True,
)
@click.option(
    "--height",
    type=click.FloatRange(min=0),
    default=100,
    help="Height of the canvas",
    show_default=True,
)
@click.option(
    "--background/--no-background",
    help="Inserts a white background into the diagrams.",
    default=True,
    show_default=True,
    envvar="DIAGRAMALGEBRA_INSERT_BACKGROUND",
    show_envvar=True,
)
@click.option("-v", "--verbose", is_flag=True, help="Log more details")
def main(
    names: tuple[str, ...],
    output: pathlib.Path,
    width: float,
    height: float,
    background: bool,
    verbose: bool,
) -> None:
    """Render sample diagrams to SVG files.

    If no NAMES are given, all samples are rendered. Each sample is
    written to OUTPUT/<name>.svg.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    if not names:
        names = tuple(samples.SAMPLES)

    output.mkdir(parents=True, exist_ok=True)
    for name in names:
        context = svg.render_svg(
            samples.SAMPLES[name],
            (width, height),
            background=background,
        )
        path = output / f"{name}.svg"
        context.save_as(str(path))
        logger.info("Rendered %r to %s", name, path)
