# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem helpers."""

from .paths import display_relative_path

__all__ = ["display_relative_path"]
