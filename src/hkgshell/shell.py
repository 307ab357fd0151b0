"""Shell — the host application object.

Wires the baked build identity, the front-end event channel, the invoke
handler table and (where supported) the native menu router.  Constructed
once per process before the event loop starts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from hkgshell.config.settings import ShellSettings
from hkgshell.domain.build_info import BuildInfo
from hkgshell.domain.menu import FrontendEvent
from hkgshell.errors import UnknownCommandError
from hkgshell.identity import bake_build_info
from hkgshell.plugins.channel import FrontendChannel
from hkgshell.plugins.manager import ListenerManager
from hkgshell.services.menu_router import MenuEventRouter, build_menu_router

logger = logging.getLogger(__name__)


class Shell:
    """Native side of the desktop application.

    Parameters:
        settings: Resolved settings; defaults are used when omitted.
        listeners: Listener registry for front-end events.
        platform: Platform override (default: ``sys.platform``).
        environ: Build environment override (default: ``os.environ``).
        discover_listeners: Load listeners from entry points at startup.
    """

    def __init__(
        self,
        settings: ShellSettings | None = None,
        *,
        listeners: ListenerManager | None = None,
        platform: str | None = None,
        environ: Mapping[str, str] | None = None,
        discover_listeners: bool = False,
    ) -> None:
        self.settings = settings or ShellSettings()
        self.build_info: BuildInfo = bake_build_info(
            semver=self.settings.build.semver,
            minutes_env=self.settings.build.minutes_env,
            environ=environ,
        )
        self.listeners = listeners or ListenerManager()
        if discover_listeners:
            self.listeners.discover()
        self.channel = FrontendChannel(self.listeners)
        self.menu: MenuEventRouter | None = build_menu_router(
            self.channel,
            platform=platform,
            enabled=self.settings.menu.enabled,
        )
        self._handlers: dict[str, Callable[..., Any]] = {
            "get_build_info": self.get_build_info,
        }

    def get_build_info(self) -> dict[str, str]:
        """Query handler: the baked build identity as a wire payload."""
        return self.build_info.to_wire()

    @property
    def commands(self) -> list[str]:
        """Names accepted by :meth:`invoke`."""
        return sorted(self._handlers)

    def invoke(self, command: str, **kwargs: Any) -> Any:
        """Run a front-end invoke request by command name.

        Raises:
            UnknownCommandError: No handler is registered for *command*.
        """
        handler = self._handlers.get(command)
        if handler is None:
            raise UnknownCommandError(command)
        return handler(**kwargs)

    def on_menu_event(self, identifier: str) -> FrontendEvent | None:
        """Host callback for menu activations. No-op without a native menu."""
        if self.menu is None:
            return None
        return self.menu.dispatch(identifier)
