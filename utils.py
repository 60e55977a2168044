#!/usr/bin/env python3
"""Utility functions for gh-copy."""

import re

from security import SecurityValidator

GIT_SUFFIX = ".git"


def derive_clone_dir_name(source: str) -> str:
    """Derive the local clone directory name from a source location.

    Takes the last path segment (after '/' or ':'), drops trailing
    slashes and one '.git' suffix, and replaces dots with hyphens.
    Example: 'https://host/group/my.repo.git/' -> 'my-repo'
    """
    trimmed = source.strip().rstrip("/\\")
    name = re.split(r"[/\\:]", trimmed)[-1]
    if name.endswith(GIT_SUFFIX):
        name = name[: -len(GIT_SUFFIX)]
    name = name.replace(".", "-")
    return SecurityValidator.validate_dir_name(name)
