"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Sequence

from salvager.services.status_service import StatusView

BANNER = r"""
  ____                          ____        _
 / ___| _ __   __ _  ___ ___   / ___|  __ _| |_   ____ _  __ _  ___ _ __
 \___ \| '_ \ / _` |/ __/ _ \  \___ \ / _` | \ \ / / _` |/ _` |/ _ \ '__|
  ___) | |_) | (_| | (_|  __/   ___) | (_| | |\ V / (_| | (_| |  __/ |
 |____/| .__/ \__,_|\___\___|  |____/ \__,_|_| \_/ \__,_|\__, |\___|_|
       |_|                                               |___/
"""


def debug_enabled() -> bool:
    """Return True only when SALVAGER_DEBUG is explicitly set to '1'."""
    return os.getenv("SALVAGER_DEBUG") == "1"


def render_banner() -> None:
    print(BANNER)


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def format_status(view: StatusView) -> list[str]:
    """Return the status panel lines for ``view``."""
    lines = [f"{view.name} | HP: {view.hp} | Credits: {view.credits} | Score: {view.score}"]
    if view.inventory is not None:
        lines.append(f"Location: {view.location}")
        items = ", ".join(view.inventory) if view.inventory else "(empty)"
        lines.append(f"Inventory ({len(view.inventory)}): {items}")
    return lines


def render_status(view: StatusView) -> None:
    for line in format_status(view):
        print(line)
