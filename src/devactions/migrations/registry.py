# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of type names already taken by existing migrations."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Final

from ..interfaces.runtime import NameRegistry

RESERVED_NAMES: Final[frozenset[str]] = frozenset({"Migration"})
_CLASS_DECLARATION: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?:(?:abstract|final)\s+)*class\s+(?P<name>[A-Za-z_\x7f-\xff][A-Za-z0-9_\x7f-\xff]*)",
    re.MULTILINE,
)
_MIGRATION_STEM: Final[re.Pattern[str]] = re.compile(r"^\d{14}_(?P<name>.+)$")


class MigrationNameRegistry(NameRegistry):
    """Immutable set of names that a new migration must not reuse."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names = frozenset(names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    @classmethod
    def from_directory(cls, directory: Path, *, extension: str = ".php") -> MigrationNameRegistry:
        """Collect names declared by the migration files inside ``directory``.

        Both the class declarations inside each file and the name encoded in
        ``<timestamp>_<Name><extension>`` file names are registered, together
        with :data:`RESERVED_NAMES`. A missing directory yields only the
        reserved names.

        Args:
            directory: Migrations directory to scan.
            extension: Suffix of migration source files.

        Returns:
            MigrationNameRegistry: Registry of taken names.
        """

        names: set[str] = set(RESERVED_NAMES)
        if not directory.is_dir():
            return cls(names)
        for path in sorted(directory.iterdir()):
            if not path.is_file() or not path.name.endswith(extension):
                continue
            stem = path.name[: -len(extension)] if extension else path.name
            stem_match = _MIGRATION_STEM.match(stem)
            if stem_match is not None:
                names.add(stem_match.group("name"))
            source = path.read_text(encoding="utf-8", errors="ignore")
            names.update(match.group("name") for match in _CLASS_DECLARATION.finditer(source))
        return cls(names)


__all__ = ["MigrationNameRegistry", "RESERVED_NAMES"]
