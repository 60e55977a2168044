#!/usr/bin/env python3
"""Security validation utilities for gh-copy."""

import re


class SecurityValidator:
    """Security validation utilities for input sanitization and validation."""

    # Maximum lengths to prevent oversized arguments reaching git
    MAX_LOCATION_LENGTH = 2048
    MAX_DIR_NAME_LENGTH = 255

    @classmethod
    def validate_location(cls, location: str, label: str = "Location") -> str:
        """Validate a repository location (URL, scp-style address or path)."""
        if not isinstance(location, str) or not location.strip():
            raise ValueError(f"{label} must be a non-empty string")

        if len(location) > cls.MAX_LOCATION_LENGTH:
            raise ValueError(
                f"{label} exceeds maximum length of {cls.MAX_LOCATION_LENGTH}"
            )

        # Check for null bytes and control characters
        if "\x00" in location or any(ord(c) < 32 for c in location):
            raise ValueError(f"{label} contains null bytes or control characters")

        # git would parse a leading hyphen as an option
        if location.startswith("-"):
            raise ValueError(f"{label} must not start with '-'")

        return location

    @classmethod
    def validate_dir_name(cls, name: str) -> str:
        """Validate a derived clone directory name."""
        if not name:
            raise ValueError("Clone directory name is empty")

        if len(name) > cls.MAX_DIR_NAME_LENGTH:
            raise ValueError(
                f"Clone directory name exceeds maximum length of "
                f"{cls.MAX_DIR_NAME_LENGTH}"
            )

        # Check for path traversal attempts
        if "/" in name or "\\" in name or name.startswith("-"):
            raise ValueError(f"Clone directory name is not safe: {name!r}")

        return name

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Sanitize message for safe logging by removing potential credentials."""
        if not message:
            return message

        # Patterns to redact
        patterns = [
            (r"(https?)://[^/@\s]+@", r"\1://[REDACTED]@"),  # URLs with credentials
            (r"token[=:\s]+[^\s]+", "token=[REDACTED]"),  # Token assignments
            (r"password[=:\s]+[^\s]+", "password=[REDACTED]"),  # Password assignments
            (r"glpat-[A-Za-z0-9_-]+", "[GITLAB_TOKEN_REDACTED]"),  # GitLab tokens
            (r"gh[pousr]_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # GitHub tokens
            (r"github_pat_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),  # Fine-grained
        ]

        sanitized = message
        for pattern, replacement in patterns:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

        return sanitized
