"""BaseService — foundation for all hkgshell services.

Every service receives a :class:`~hkgshell.shell.Shell` at construction
time.  The shell owns the baked build identity, the front-end channel and
(on platforms with a menu bar) the menu router.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hkgshell.shell import Shell


class BaseService:
    """Base for all service-layer classes."""

    def __init__(self, shell: Shell) -> None:
        self._shell = shell
