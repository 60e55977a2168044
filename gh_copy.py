#!/usr/bin/env python3
"""
gh-copy - Copy a git repository, with all of its branches and tags,
to another remote.

The source is cloned into the current directory, its origin remote is
repointed at the destination, every branch and tag is pushed, and the
local clone is removed unless --preserve is given. Without source and
destination arguments the tool asks for them interactively.

Copyright (c) 2026 The gh-copy Authors
Licensed under the MIT License. See LICENSE file for details.

Author: The gh-copy Authors
License: MIT
"""

from __future__ import annotations

import sys
from typing import List, NoReturn, Optional

from argument_parser import parse_arguments
from copy_orchestrator import CopyOrchestrator

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1


def main(argv: Optional[List[str]] = None) -> NoReturn:
    cfg = parse_arguments(argv)
    if cfg is None:
        # Prompt cancelled by the user
        sys.exit(EXIT_SUCCESS)

    orchestrator = CopyOrchestrator(cfg)
    sys.exit(orchestrator.run())


if __name__ == "__main__":
    main()
