#!/usr/bin/env python3
"""Configuration dataclasses for gh-copy."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CopyRequest:
    """What to copy and where."""
    source: str
    destination: str
    preserve: bool = False


@dataclass
class GitConfig:
    """Git invocation configuration."""
    binary: str = "git"
    remote: str = "origin"
    work_dir: str = "."


@dataclass
class Config:
    """Main configuration for a repository copy."""
    request: CopyRequest
    git: GitConfig = field(default_factory=GitConfig)
