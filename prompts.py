#!/usr/bin/env python3
"""Interactive prompts used when locations are not given on the command line."""

from __future__ import annotations

from typing import Callable, Optional

import click

from config import CopyRequest

BANNER = """gh-copy
Copy a git repository to another remote interactively or via CLI
--------------------------------------------------------------------"""


def _required(message: str) -> Callable[[str], str]:
    def check(value: str) -> str:
        if not value.strip():
            raise click.BadParameter(message)
        return value

    return check


def prompt_for_request(preserve_default: bool = False) -> Optional[CopyRequest]:
    """Ask for source, destination and preservation.

    Returns None when the user aborts (Ctrl-C or end of input).
    """
    try:
        source = click.prompt(
            "Source repository URL",
            value_proc=_required("Please provide a source repository URL"),
        )
        destination = click.prompt(
            "Destination repository URL",
            value_proc=_required("Please provide a destination repository URL"),
        )
        preserve = click.confirm(
            "Preserve the local clone after copying?", default=preserve_default
        )
    except click.Abort:
        return None

    return CopyRequest(source=source, destination=destination, preserve=preserve)
