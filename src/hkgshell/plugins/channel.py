"""Fire-and-forget event emission to the front-end.

INVARIANT: Emission never raises.  A missing listener or a listener that
fails is logged and ignored; callers get no acknowledgment.

Listeners registered as hook wrappers are not supported and are skipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hkgshell.domain.menu import FrontendEvent

if TYPE_CHECKING:
    from hkgshell.plugins.manager import ListenerManager

logger = logging.getLogger(__name__)


class FrontendChannel:
    """One-way event channel from the shell to front-end listeners.

    Each listener is called independently so one failing listener does
    not stop delivery to the rest.
    """

    def __init__(self, listeners: ListenerManager) -> None:
        self._listeners = listeners

    def emit(self, event: str, payload: str | None = None) -> FrontendEvent:
        """Send *event* with optional *payload* to every listener.

        Returns the event that was sent, for reporting only.
        """
        sent = FrontendEvent(event, payload)
        impls = self._listeners.hook.on_frontend_event.get_hookimpls()
        if not impls:
            logger.debug("No listener attached for event %s", event)
            return sent

        args = {"event": event, "payload": payload}
        for impl in impls:
            if impl.hookwrapper or impl.wrapper:
                logger.warning(
                    "Listener %s is a hook wrapper, skipped for event %s",
                    impl.plugin_name,
                    event,
                )
                continue
            try:
                impl.function(**{name: args[name] for name in impl.argnames})
            except Exception as exc:
                logger.warning(
                    "Listener %s failed on event %s: %s",
                    impl.plugin_name,
                    event,
                    exc,
                )
        logger.debug("Emitted event %s payload=%r to %d listener(s)", event, payload, len(impls))
        return sent
