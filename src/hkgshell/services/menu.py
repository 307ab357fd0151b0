"""MenuService — inspect and activate the native menu from the CLI."""

from __future__ import annotations

from hkgshell.domain.menu import event_for
from hkgshell.services.base import BaseService
from hkgshell.services.result import ServiceError, ServiceResult


class MenuService(BaseService):
    """Operations over the shell's menu router."""

    def list_items(self) -> ServiceResult:
        """Return the menu entries in display order with their events."""
        op = "menu_list"
        router = self._shell.menu
        if router is None:
            return _no_menu(op)

        items = []
        for entry in router.menu_items():
            event = event_for(entry.id)
            if event is None:
                continue
            items.append(
                {
                    "id": entry.id,
                    "label": entry.label,
                    "event": event.name,
                    "payload": event.payload,
                }
            )
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})

    def activate(self, identifier: str) -> ServiceResult:
        """Simulate a menu activation.

        Unknown identifiers succeed with a warning and emit nothing.
        """
        op = "menu_activate"
        if self._shell.menu is None:
            return _no_menu(op)

        event = self._shell.on_menu_event(identifier)
        if event is None:
            return ServiceResult(
                ok=True,
                op=op,
                data={"id": identifier, "emitted": False},
                warnings=[f"Unknown menu id '{identifier}' ignored"],
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": identifier,
                "emitted": True,
                "event": event.name,
                "payload": event.payload,
            },
        )


def _no_menu(op: str) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code="NO_NATIVE_MENU",
            message="No native menu on this platform or it is disabled",
        ),
    )
