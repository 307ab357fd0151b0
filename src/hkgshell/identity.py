"""Process-wide build identity, baked once at startup.

Python has no compile step to embed constants, so the values the build
would have baked are computed the first time :func:`bake_build_info` runs
and held for the life of the process.  Later calls return the same object.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping

from hkgshell import __version__
from hkgshell.domain.build_info import BuildInfo, compute_build_info
from hkgshell.domain.build_number import resolve_git_sha

DEFAULT_MINUTES_ENV = "BUILD_MINUTES"

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_baked: BuildInfo | None = None


def bake_build_info(
    *,
    semver: str | None = None,
    minutes_env: str = DEFAULT_MINUTES_ENV,
    environ: Mapping[str, str] | None = None,
    now: float | None = None,
) -> BuildInfo:
    """Compute the build identity exactly once and return it.

    Args:
        semver: Version override; defaults to the package version.
        minutes_env: Environment variable holding an injected minute stamp.
        environ: Environment to read (default: ``os.environ``).
        now: Clock override used when no stamp is injected.
    """
    global _baked
    with _lock:
        if _baked is not None:
            return _baked
        env = os.environ if environ is None else environ
        _baked = compute_build_info(
            env.get(minutes_env),
            semver=semver or __version__,
            git_sha=resolve_git_sha(env),
            now=now,
        )
        logger.debug(
            "Baked build identity %s (minutes=%d, sha=%s)",
            _baked.build_number,
            _baked.epoch_minutes,
            _baked.git_sha,
        )
        return _baked
