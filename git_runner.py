#!/usr/bin/env python3
"""Thin wrapper around the git command line."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from typing import List, Optional

from config import GitConfig
from logging_utils import Logger

# Exit codes
EXIT_EXECUTION_ERROR = 1


@dataclass
class CommandResult:
    """Captured outcome of a finished command."""
    args: List[str]
    code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.code == 0

    @property
    def output(self) -> str:
        """Error text of the command, falling back to its standard output."""
        return (self.stderr or self.stdout).strip()


class GitRunner:
    """Runs git subcommands and captures their results."""

    def __init__(self, config: GitConfig) -> None:
        self.config = config

    def run(self, *args: str, cwd: Optional[str] = None) -> CommandResult:
        """Run a git subcommand to completion, capturing its output."""
        cmd = [self.config.binary, *args]
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            check=False,
        )
        return CommandResult(
            args=cmd,
            code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )

    def ensure_available(self) -> None:
        """Exit if the git binary cannot be run."""
        try:
            result = self.run("--version")
        except OSError as e:
            Logger.debug(f"failed to run {self.config.binary}: {e}")
            result = None

        if result is None or not result.ok:
            Logger.error("git is not installed or not in PATH")
            sys.exit(EXIT_EXECUTION_ERROR)

        Logger.debug(result.stdout.strip())

    def clone(self, source: str, target_dir: str, cwd: str) -> CommandResult:
        return self.run("clone", source, target_dir, cwd=cwd)

    def list_refs(self, *patterns: str, cwd: str) -> CommandResult:
        return self.run("for-each-ref", "--format=%(refname)", *patterns, cwd=cwd)

    def create_branch(self, name: str, start_point: str, cwd: str) -> CommandResult:
        return self.run("branch", name, start_point, cwd=cwd)

    def set_remote_url(self, url: str, cwd: str) -> CommandResult:
        return self.run("remote", "set-url", self.config.remote, url, cwd=cwd)

    def push_branches(self, cwd: str) -> CommandResult:
        return self.run("push", "--all", self.config.remote, cwd=cwd)

    def push_tags(self, cwd: str) -> CommandResult:
        return self.run("push", "--tags", self.config.remote, cwd=cwd)
