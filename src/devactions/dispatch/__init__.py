# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Menu-driven command dispatch."""

from .menu import DEFAULT_MENU, ChoiceMenu, DispatchOutcome, build_handlers, dispatch, render_menu

__all__ = ["ChoiceMenu", "DEFAULT_MENU", "DispatchOutcome", "build_handlers", "dispatch", "render_menu"]
