# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scaffold timestamped migration files from a free-text name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from ..errors import INVALID_IDENTIFIER, MISSING_NAME, NAME_COLLISION, MigrationValidationError
from ..interfaces.runtime import NameRegistry
from .template import DEFAULT_TEMPLATE, MigrationTemplate

TIMESTAMP_FORMAT: Final[str] = "%Y%m%d%H%M%S"
IDENTIFIER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z_\x7f-\xff][a-zA-Z0-9_\x7f-\xff]*")
_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class MigrationDescriptor:
    """Identity of a migration about to be written."""

    timestamp: str
    class_name: str
    extension: str = ".php"

    @property
    def file_name(self) -> str:
        """Return ``<timestamp>_<class_name><extension>``."""

        return f"{self.timestamp}_{self.class_name}{self.extension}"


def normalize_name(raw_name: str) -> str:
    """Turn ``raw_name`` into a class name.

    Whitespace runs become underscores, the result is split on underscores
    and only the first character of each part is upper-cased, so interior
    capitals survive (``"myAPI_name"`` becomes ``"MyAPIName"``). Only ASCII
    letters change case, so ``"ÿes_fix"`` becomes ``"ÿesFix"``.
    """

    parts = _WHITESPACE.sub("_", raw_name).split("_")
    return "".join(_upper_first(part) for part in parts)


def _upper_first(part: str) -> str:
    head = part[:1]
    return (head.upper() if head.isascii() else head) + part[1:]


def is_valid_identifier(name: str) -> bool:
    """Return ``True`` when ``name`` is a legal class identifier."""

    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def format_timestamp(moment: datetime | None = None) -> str:
    """Return ``moment`` (default: now) in UTC as ``YYYYMMDDHHMMSS``."""

    current = moment or datetime.now(UTC)
    if current.tzinfo is not None:
        current = current.astimezone(UTC)
    return current.strftime(TIMESTAMP_FORMAT)


def describe(
    raw_name: str | None,
    *,
    registry: NameRegistry,
    extension: str = ".php",
    now: datetime | None = None,
) -> MigrationDescriptor:
    """Validate ``raw_name`` and derive the migration descriptor.

    Args:
        raw_name: Name supplied by the user, e.g. ``"add index to links"``.
        registry: Names that are already taken.
        extension: Suffix of the generated file.
        now: Moment used for the timestamp; defaults to the current UTC time.

    Returns:
        MigrationDescriptor: Timestamp and class name of the new migration.

    Raises:
        MigrationValidationError: If the name is missing, not a valid
            identifier once normalised, or already taken.
    """

    if raw_name is None or not raw_name.strip():
        raise MigrationValidationError(MISSING_NAME, "You must provide an argument with the migration name.")
    class_name = normalize_name(raw_name)
    if not is_valid_identifier(class_name):
        raise MigrationValidationError(INVALID_IDENTIFIER, f"{class_name} is not a valid migration name.")
    if class_name in registry:
        raise MigrationValidationError(NAME_COLLISION, f"A class with the name {class_name} already exists.")
    return MigrationDescriptor(timestamp=format_timestamp(now), class_name=class_name, extension=extension)


def generate(
    raw_name: str | None,
    *,
    migrations_dir: Path,
    registry: NameRegistry,
    template: MigrationTemplate = DEFAULT_TEMPLATE,
    extension: str = ".php",
    now: datetime | None = None,
) -> Path:
    """Write a new migration file for ``raw_name``.

    Nothing is written when validation fails. An existing file with the same
    name is overwritten.

    Args:
        raw_name: Name supplied by the user.
        migrations_dir: Directory receiving the file; created when missing.
        registry: Names that are already taken.
        template: Template rendered into the file.
        extension: Suffix of the generated file.
        now: Moment used for the timestamp; defaults to the current UTC time.

    Returns:
        Path: Location of the written migration.

    Raises:
        MigrationValidationError: If the name is rejected.
    """

    descriptor = describe(raw_name, registry=registry, extension=extension, now=now)
    content = template.render(descriptor.class_name)
    migrations_dir.mkdir(parents=True, exist_ok=True)
    target = migrations_dir / descriptor.file_name
    target.write_text(content, encoding="utf-8")
    return target


__all__ = [
    "IDENTIFIER_PATTERN",
    "MigrationDescriptor",
    "TIMESTAMP_FORMAT",
    "describe",
    "format_timestamp",
    "generate",
    "is_valid_identifier",
    "normalize_name",
]
