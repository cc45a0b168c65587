# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0

import click

from diagramalgebra import diagram, samples


@click.command()
def main() -> None:
    """Show the names and virtual sizes of the sample diagrams."""
    print("The following sample diagrams are available:")
    for name, sample in samples.SAMPLES.items():
        width, height = diagram.size(sample)
        print(f"  - {name} ({width:g} x {height:g})")
