"""Pluggy hook specifications for the front-end event channel."""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("hkgshell")


class FrontendHookSpec:
    """Hook specifications implemented by front-end listeners."""

    @hookspec
    def on_frontend_event(self, event: str, payload: str | None) -> None:
        """Called once per emitted event. Return values are ignored."""
