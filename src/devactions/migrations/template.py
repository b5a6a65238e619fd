# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Source template for newly scaffolded migrations."""

from __future__ import annotations

from dataclasses import dataclass
from string import Template
from typing import Final

DEFAULT_PLUGIN: Final[str] = "free"

# ``$$`` escapes a literal PHP ``$``.
_PHP_MIGRATION: Final[str] = """<?php
/**
 * Yoast SEO Plugin File.
 *
 * @package Yoast\\WP\\SEO\\Config\\Migrations
 */

namespace Yoast\\WP\\SEO\\Config\\Migrations;

use Yoast\\WP\\Lib\\Migrations\\Migration;

/**
 * ${class_name} class.
 */
class ${class_name} extends Migration {

	/**
	 * The plugin this migration belongs to.
	 *
	 * @var string
	 */
	public static $$plugin = '${plugin}';

	/**
	 * Migration up.
	 *
	 * @return void
	 */
	public function up() {

	}

	/**
	 * Migration down.
	 *
	 * @return void
	 */
	public function down() {

	}
}
"""


@dataclass(frozen=True, slots=True)
class MigrationTemplate:
    """Template text with ``${class_name}`` and ``${plugin}`` placeholders."""

    text: str = _PHP_MIGRATION
    plugin: str = DEFAULT_PLUGIN

    def render(self, class_name: str) -> str:
        """Return the template populated for ``class_name``.

        Raises:
            KeyError: If the template references an unknown placeholder.
        """

        return Template(self.text).substitute(class_name=class_name, plugin=self.plugin)


DEFAULT_TEMPLATE: Final[MigrationTemplate] = MigrationTemplate()

__all__ = ["DEFAULT_PLUGIN", "DEFAULT_TEMPLATE", "MigrationTemplate"]
