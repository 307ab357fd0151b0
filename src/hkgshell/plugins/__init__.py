"""Front-end event delivery built on pluggy.

Front-end listeners implement the ``on_frontend_event`` hook and are
registered with :class:`~hkgshell.plugins.manager.ListenerManager`.
"""

import pluggy

hookimpl = pluggy.HookimplMarker("hkgshell")
