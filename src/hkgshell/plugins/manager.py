"""Listener discovery and registration.

Discovery: entry_points (pip-installed) in the ``hkgshell.listeners``
group via pluggy setuptools entrypoints, plus direct registration by the
host (the web view bridge, tests).
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from hkgshell.plugins.hookspecs import FrontendHookSpec

PROJECT_NAME = "hkgshell"
ENTRY_POINT_GROUP = "hkgshell.listeners"

logger = logging.getLogger(__name__)


class ListenerManager:
    """Manages front-end listener registration and hook access."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(FrontendHookSpec)

    def discover(self) -> list[str]:
        """Load listeners advertised under the ``hkgshell.listeners`` entry point group.

        Returns a list of registered listener names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._normalize_listener_instances()
        return self.list_listener_names()

    def register_listener(self, listener: object, name: str | None = None) -> None:
        """Register a listener instance directly."""
        resolved_name = name or listener.__class__.__name__
        self._pm.register(listener, name=resolved_name)
        logger.debug("Registered listener: %s", resolved_name)

    def unregister(self, listener: object) -> None:
        """Unregister a listener instance."""
        self._pm.unregister(listener)

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_listener_names(self) -> list[str]:
        """Return names of all registered listeners."""
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def _normalize_listener_instances(self) -> None:
        """Replace listener classes registered by entry points with instances.

        Hook dispatch against class objects leaves ``self`` unbound.
        """
        for listener in list(self._pm.get_plugins()):
            if not inspect.isclass(listener):
                continue

            name = self._pm.get_name(listener) or listener.__name__
            self._pm.unregister(listener)

            try:
                instance = listener()
            except Exception:
                logger.warning("Failed to instantiate entry-point listener %s", name, exc_info=True)
                continue

            self._pm.register(instance, name=name)
            logger.debug("Instantiated entry-point listener: %s", name)
