# SPDX-FileCopyrightText: Copyright diagramalgebra contributors
# SPDX-License-Identifier: Apache-2.0
"""Main entry point for the diagramalgebra CLI scripts."""

import contextlib
import importlib
import importlib.resources as imr

import click

from . import _scripts


class LazyGroup(click.Group):
    """A group that finds its commands in the modules of ``_scripts``.

    Each public module provides one command as its ``main``. Underscores
    in the module name become dashes, so ``list_samples.py`` is the
    ``list-samples`` command.
    """

    def list_commands(self, ctx):
        cmds: list[str] = []
        for i in imr.files(_scripts).iterdir():
            if i.name.endswith(".py") and not i.name.startswith("_"):
                cmds.append(i.name.removesuffix(".py").replace("_", "-"))
        cmds.sort()
        return super().list_commands(ctx) + cmds

    def get_command(self, ctx, name):
        with contextlib.suppress(ImportError):
            modname = name.replace("-", "_")
            cmd = importlib.import_module(
                f"{_scripts.__name__}.{modname}"
            ).main
            assert isinstance(cmd, click.Command)
            cmd.name = name
            return cmd

        return super().get_command(ctx, name)


@click.group(cls=LazyGroup, no_args_is_help=True)
def main():
    """Compose, list and render diagrams."""


if __name__ == "__main__":
    main()
