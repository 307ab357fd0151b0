"""Native menu commands and their front-end event mapping.

The command set is closed: every identifier the native menu can deliver is
listed in :class:`MenuCommand`, and each maps to exactly one outbound
:class:`FrontendEvent`.  Lookups by identifier are total; unknown
identifiers resolve to None rather than raising.
"""

from __future__ import annotations

import sys
from enum import StrEnum
from typing import NamedTuple


class MenuCommand(StrEnum):
    """Stable menu identifiers delivered by the host UI on activation."""

    ABOUT = "about"
    SET_LAYOUT_CONCEPT_CENTRIC = "set_layout_concept"
    SET_LAYOUT_SPHERE = "set_layout_sphere"
    SET_LAYOUT_GRID = "set_layout_grid"
    TOGGLE_XRAY = "toggle_xray"
    RESET_CAMERA = "reset_camera"
    TOGGLE_SIDEBAR = "toggle_sidebar"


class FrontendEvent(NamedTuple):
    """An event name plus optional string payload sent to the front-end."""

    name: str
    payload: str | None = None


class MenuEntry(NamedTuple):
    """One labelled native menu item."""

    command: MenuCommand
    label: str

    @property
    def id(self) -> str:
        return str(self.command)


# Menu order as shown in the menu bar.
MENU_ENTRIES: tuple[MenuEntry, ...] = (
    MenuEntry(MenuCommand.ABOUT, "About"),
    MenuEntry(MenuCommand.SET_LAYOUT_CONCEPT_CENTRIC, "Concept-Centric Layout"),
    MenuEntry(MenuCommand.SET_LAYOUT_SPHERE, "Sphere Layout"),
    MenuEntry(MenuCommand.SET_LAYOUT_GRID, "Grid Layout"),
    MenuEntry(MenuCommand.TOGGLE_XRAY, "Toggle X-Ray"),
    MenuEntry(MenuCommand.RESET_CAMERA, "Reset Camera"),
    MenuEntry(MenuCommand.TOGGLE_SIDEBAR, "Toggle Sidebar"),
)

COMMAND_EVENTS: dict[MenuCommand, FrontendEvent] = {
    MenuCommand.ABOUT: FrontendEvent("about"),
    MenuCommand.SET_LAYOUT_CONCEPT_CENTRIC: FrontendEvent("set-layout", "concept-centric"),
    MenuCommand.SET_LAYOUT_SPHERE: FrontendEvent("set-layout", "sphere"),
    MenuCommand.SET_LAYOUT_GRID: FrontendEvent("set-layout", "grid"),
    MenuCommand.TOGGLE_XRAY: FrontendEvent("toggle-xray"),
    MenuCommand.RESET_CAMERA: FrontendEvent("reset-camera"),
    MenuCommand.TOGGLE_SIDEBAR: FrontendEvent("toggle-sidebar"),
}

# Platforms without a native menu bar.
NO_MENU_PLATFORMS: frozenset[str] = frozenset({"android", "ios"})


def parse_command(identifier: str) -> MenuCommand | None:
    """Return the command for *identifier*, or None if it is not in the menu."""
    try:
        return MenuCommand(identifier)
    except ValueError:
        return None


def event_for(identifier: str) -> FrontendEvent | None:
    """Resolve a menu identifier to its outbound event (None for unknown ids)."""
    command = parse_command(identifier)
    if command is None:
        return None
    return COMMAND_EVENTS[command]


def supports_native_menu(platform: str | None = None) -> bool:
    """Whether *platform* (default: ``sys.platform``) has a native menu bar."""
    return (platform or sys.platform) not in NO_MENU_PLATFORMS
