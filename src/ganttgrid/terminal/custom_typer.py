# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR_P = re.compile(r"\s*,\s*")


def split_aliases(command_name: str) -> list[str]:
    """Split a registered name like "geometry, geo" into ["geometry", "geo"]."""
    return _ALIAS_SEPARATOR_P.split(command_name.strip())


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup whose commands are registered as "name, alias" and invoked by either"""

    def resolve_alias(self, cmd_name: str) -> str:
        """Return the registered name that cmd_name is one of the aliases of, or cmd_name itself"""
        for registered_name in self.commands:
            if cmd_name in split_aliases(registered_name):
                return registered_name
        return cmd_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name or ""

        # A bare alias of an already registered command is not added twice
        registered_name = self.resolve_alias(name)
        if registered_name != name and registered_name in self.commands:
            return

        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists commands in workflow order in --help instead of registration order"""

    desired_order = [
        "render, r",
        "geometry, geo",
        "milestones, m",
        "config, c",
    ]

    def list_commands(self, ctx: click.Context) -> list[str]:
        ordered = [name for name in self.desired_order if name in self.commands]
        return ordered + [name for name in self.commands if name not in ordered]
