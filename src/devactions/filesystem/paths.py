# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Path presentation helpers."""

from __future__ import annotations

from pathlib import Path


def display_relative_path(path: Path, root: Path) -> str:
    """Return ``path`` as a POSIX string relative to ``root`` when it lives below it.

    Args:
        path: Path to present to the user.
        root: Base directory used for relativisation.

    Returns:
        str: Relative POSIX path when possible, otherwise the absolute path.
    """

    resolved = path.resolve()
    try:
        return resolved.relative_to(root.resolve()).as_posix()
    except ValueError:
        return resolved.as_posix()


__all__ = ["display_relative_path"]
