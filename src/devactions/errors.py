# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the devactions operations."""

from __future__ import annotations

from typing import Final

MISSING_NAME: Final[str] = "missing name"
INVALID_IDENTIFIER: Final[str] = "invalid identifier"
NAME_COLLISION: Final[str] = "name collision"


class DevActionsError(Exception):
    """Base class for every error raised by devactions."""


class ConfigError(DevActionsError):
    """Raised when configuration input is invalid."""


class InputError(DevActionsError, ValueError):
    """Raised when user supplied input is rejected before any side effect.

    Attributes:
        reason: Short machine-friendly reason describing the rejection.
    """

    def __init__(self, reason: str, message: str | None = None) -> None:
        """Initialise the error with a ``reason`` and an optional message.

        Args:
            reason: Short reason string such as ``"missing name"``.
            message: Human-readable message; defaults to ``reason``.
        """

        super().__init__(message or reason)
        self.reason = reason


class MigrationValidationError(InputError):
    """Raised when a migration name is missing, malformed, or already taken."""


class SummaryParseError(DevActionsError):
    """Raised when the coding standards summary line is absent or malformed."""


__all__ = [
    "ConfigError",
    "DevActionsError",
    "INVALID_IDENTIFIER",
    "InputError",
    "MISSING_NAME",
    "MigrationValidationError",
    "NAME_COLLISION",
    "SummaryParseError",
]
