"""Exception types raised by the shell.

Runtime paths (build-info queries, menu dispatch, event emission) never
raise; they degrade to sentinel values.  Only construction and unknown
invoke commands surface as exceptions.
"""

from __future__ import annotations


class ShellError(Exception):
    """Base class for hkgshell errors."""


class MenuConstructionError(ShellError):
    """The native menu could not be built from its entry list.

    Treated as an unrecoverable configuration error that aborts startup.
    """


class UnknownCommandError(ShellError):
    """An invoke request named a command with no registered handler."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name!r}")
        self.name = name
