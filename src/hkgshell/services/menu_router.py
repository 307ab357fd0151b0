"""MenuEventRouter — native menu activations to front-end events.

The router is built once at startup, only on platforms with a native menu
bar.  Elsewhere :func:`build_menu_router` returns None and callers must
cope with its absence.

INVARIANT: :meth:`MenuEventRouter.dispatch` is total.  Unknown identifiers
are no-ops and emission failures never reach the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from hkgshell.domain.menu import (
    COMMAND_EVENTS,
    MENU_ENTRIES,
    FrontendEvent,
    MenuEntry,
    parse_command,
    supports_native_menu,
)
from hkgshell.errors import MenuConstructionError

if TYPE_CHECKING:
    from hkgshell.plugins.channel import FrontendChannel

logger = logging.getLogger(__name__)


class MenuEventRouter:
    """Ordered native menu plus its dispatch function.

    Parameters:
        channel: Front-end channel events are emitted on.
        entries: Menu entries in display order.  Validated at construction.
    """

    def __init__(
        self,
        channel: FrontendChannel,
        entries: Sequence[MenuEntry] = MENU_ENTRIES,
    ) -> None:
        self._channel = channel
        self._entries = _validate_entries(entries)
        self._by_id = {entry.id: entry for entry in self._entries}

    def menu_items(self) -> tuple[MenuEntry, ...]:
        """Return the menu entries in display order."""
        return self._entries

    def dispatch(self, identifier: str) -> FrontendEvent | None:
        """Emit the event bound to *identifier*.

        Returns the emitted event, or None when the identifier is not an
        entry of this menu.
        """
        entry = self._by_id.get(identifier)
        if entry is None:
            logger.debug("Ignoring unknown menu id %r", identifier)
            return None
        event = COMMAND_EVENTS[entry.command]
        return self._channel.emit(event.name, event.payload)


def _validate_entries(entries: Sequence[MenuEntry]) -> tuple[MenuEntry, ...]:
    """Reject malformed menus before the event loop starts."""
    seen: set[str] = set()
    for entry in entries:
        if parse_command(entry.id) is None:
            msg = f"Menu entry {entry.id!r} has no command mapping"
            raise MenuConstructionError(msg)
        if not entry.label.strip():
            msg = f"Menu entry {entry.id!r} has an empty label"
            raise MenuConstructionError(msg)
        if entry.id in seen:
            msg = f"Duplicate menu entry {entry.id!r}"
            raise MenuConstructionError(msg)
        seen.add(entry.id)
    return tuple(entries)


def build_menu_router(
    channel: FrontendChannel,
    *,
    platform: str | None = None,
    enabled: bool = True,
) -> MenuEventRouter | None:
    """Construct the router, or return None where no native menu exists."""
    if not enabled:
        logger.debug("Native menu disabled by configuration")
        return None
    if not supports_native_menu(platform):
        logger.debug("Platform %s has no native menu bar", platform)
        return None
    return MenuEventRouter(channel)
