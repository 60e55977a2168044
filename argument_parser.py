#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

import click

from config import Config, CopyRequest, GitConfig
from logging_utils import Logger
from prompts import BANNER, prompt_for_request
from security import SecurityValidator

# Exit codes
EXIT_MISSING_ARGUMENTS = 1

USAGE = "usage: gh-copy <source> <destination> [--preserve|-p]"


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gh-copy",
        description="Copy all branches and tags of a git repository to another remote",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s https://github.com/org/demo.git https://github.com/org2/demo.git
  %(prog)s git@github.com:org/demo.git git@gitlab.com:team/demo.git --preserve
  %(prog)s            (prompts for source and destination)
        """,
    )
    parser.add_argument(
        "source",
        nargs="?",
        help="Repository to copy from",
    )
    parser.add_argument(
        "destination",
        nargs="?",
        help="Repository to push every branch and tag to",
    )
    parser.add_argument(
        "-p",
        "--preserve",
        action="store_true",
        dest="preserve",
        help="Keep the local clone after copying",
    )
    return parser


def _resolve_request(args: argparse.Namespace) -> Optional[CopyRequest]:
    """Take locations from the command line or ask for them."""
    if args.source and args.destination:
        return CopyRequest(
            source=args.source,
            destination=args.destination,
            preserve=args.preserve,
        )

    Logger.info("running interactive mode, answer a few questions")
    click.echo(BANNER)
    return prompt_for_request(preserve_default=args.preserve)


def _validate_request(request: CopyRequest) -> CopyRequest:
    """Validate and sanitize the resolved locations."""
    if not request.source or not request.destination:
        Logger.error("source and destination are required")
        Logger.error(USAGE)
        sys.exit(EXIT_MISSING_ARGUMENTS)

    try:
        request.source = SecurityValidator.validate_location(
            request.source, "Source"
        )
        request.destination = SecurityValidator.validate_location(
            request.destination, "Destination"
        )
    except ValueError as e:
        Logger.error(f"configuration validation error: {e}")
        Logger.error(USAGE)
        sys.exit(EXIT_MISSING_ARGUMENTS)

    return request


def parse_arguments(argv: Optional[List[str]] = None) -> Optional[Config]:
    """Parse command line arguments and return configuration object.

    Returns None when the user cancels the interactive prompts.
    """
    parser = _create_argument_parser()
    try:
        args, ignored = parser.parse_known_intermixed_args(argv)
    except SystemExit as e:
        # argparse reports malformed options with status 2; --help exits 0
        if e.code == 0:
            raise
        sys.exit(EXIT_MISSING_ARGUMENTS)
    if ignored:
        Logger.warn(f"ignoring unrecognized arguments: {' '.join(ignored)}")

    request = _resolve_request(args)
    if request is None:
        return None

    return Config(request=_validate_request(request), git=GitConfig())
