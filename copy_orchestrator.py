#!/usr/bin/env python3
"""Main orchestrator for copying a repository to another remote."""

from __future__ import annotations

import os
import shutil
import stat
import sys

from config import Config
from git_runner import CommandResult, GitRunner
from logging_utils import Logger
from utils import derive_clone_dir_name

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1

LOCAL_PREFIX = "refs/heads/"


class CopyOrchestrator:
    """Clone, repoint, push and clean up, in that order."""

    def __init__(self, cfg: Config) -> None:
        self.cfg = cfg
        self.git = GitRunner(cfg.git)

    def run(self) -> int:
        try:
            self.git.ensure_available()
            clone_dir = self._clone()

            try:
                copied = (
                    self._track_branches(clone_dir)
                    and self._rewrite_remote(clone_dir)
                    and self._publish(clone_dir)
                )
            finally:
                self._cleanup(clone_dir)

            return EXIT_SUCCESS if copied else EXIT_EXECUTION_ERROR
        except SystemExit as e:
            return int(e.code) if isinstance(e.code, int) else EXIT_EXECUTION_ERROR
        except Exception as e:
            Logger.error(f"unexpected error: {e}")
            return EXIT_EXECUTION_ERROR

    def _clone(self) -> str:
        """Clone the source and return the absolute clone directory."""
        source = self.cfg.request.source
        try:
            dir_name = derive_clone_dir_name(source)
        except ValueError as e:
            Logger.error(f"cannot derive a directory name from '{source}': {e}")
            sys.exit(EXIT_EXECUTION_ERROR)

        work_dir = os.path.abspath(self.cfg.git.work_dir)
        clone_dir = os.path.join(work_dir, dir_name)

        Logger.info(f"cloning {source} ...")
        result = self.git.clone(source, dir_name, cwd=work_dir)
        if not result.ok:
            Logger.security_event("GIT_CLONE_FAILED", f"git clone failed for {source}")
            Logger.error(f"clone failed: {result.output}")
            sys.exit(EXIT_EXECUTION_ERROR)

        # git may succeed without producing the directory we expect
        if not os.path.isdir(clone_dir):
            Logger.error(f"cloned folder not found, expected: {clone_dir}")
            sys.exit(EXIT_EXECUTION_ERROR)

        Logger.security_event("GIT_CLONE_SUCCESS", f"cloned {source} into {clone_dir}")
        return clone_dir

    def _track_branches(self, clone_dir: str) -> bool:
        """Create a local branch for every remote-tracking branch.

        A fresh clone only has the default branch locally and
        'git push --all' pushes local branches only.
        """
        remote_prefix = f"refs/remotes/{self.cfg.git.remote}/"
        result = self.git.list_refs(remote_prefix, LOCAL_PREFIX, cwd=clone_dir)
        if not result.ok:
            Logger.error(f"failed to list branches: {result.output}")
            return False

        refs = result.stdout.splitlines()
        local = {ref[len(LOCAL_PREFIX):] for ref in refs if ref.startswith(LOCAL_PREFIX)}
        created = 0
        for ref in refs:
            if not ref.startswith(remote_prefix):
                continue
            branch = ref[len(remote_prefix):]
            if branch == "HEAD" or branch in local:
                continue
            result = self.git.create_branch(branch, ref, cwd=clone_dir)
            if not result.ok:
                Logger.error(f"failed to create branch '{branch}': {result.output}")
                return False
            created += 1

        Logger.debug(f"branches: {len(local) + created} ({created} created from remote)")
        return True

    def _rewrite_remote(self, clone_dir: str) -> bool:
        destination = self.cfg.request.destination
        Logger.info("setting remote to destination...")
        result = self.git.set_remote_url(destination, cwd=clone_dir)
        if not result.ok:
            Logger.error(f"failed to set remote url to {destination}: {result.output}")
            return False
        return True

    def _publish(self, clone_dir: str) -> bool:
        """Push every branch and every tag; both pushes always run."""
        destination = self.cfg.request.destination
        Logger.info(f"pushing all branches and tags to {destination} ...")
        branches = self.git.push_branches(cwd=clone_dir)
        tags = self.git.push_tags(cwd=clone_dir)

        if not (branches.ok and tags.ok):
            Logger.security_event("GIT_PUSH_FAILED", f"git push failed for {destination}")
            Logger.error("push failed:")
            self._report(branches)
            self._report(tags)
            return False

        Logger.security_event("GIT_PUSH_SUCCESS", f"pushed to {destination}")
        Logger.success("repository copied successfully!")
        return True

    @staticmethod
    def _report(result: CommandResult) -> None:
        if result.output:
            Logger.error(result.output)

    def _cleanup(self, clone_dir: str) -> None:
        if self.cfg.request.preserve:
            Logger.info(f"preserved local clone at: {clone_dir}")
            return

        try:
            # git writes its object files read-only
            for root, dirs, files in os.walk(clone_dir):
                for name in dirs + files:
                    path = os.path.join(root, name)
                    if not os.path.islink(path):
                        os.chmod(path, os.stat(path).st_mode | stat.S_IWUSR)

            shutil.rmtree(clone_dir)
            Logger.info("cleaned up local directory")
            Logger.security_event("CLEANUP_SUCCESS", f"removed {clone_dir}")
        except OSError as e:
            Logger.security_event("CLEANUP_FAILED", f"failed to remove {clone_dir}")
            Logger.warn(f"failed to clean up: {e}")
