"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, hkgshell.toml only contains
overrides.  An empty (or missing) file yields a fully working shell.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- hkgshell.toml sections ---


class BuildConfig(BaseModel):
    """[build] section."""

    model_config = {"frozen": True}

    semver: str | None = None
    minutes_env: str = "BUILD_MINUTES"


class MenuConfig(BaseModel):
    """[menu] section."""

    model_config = {"frozen": True}

    enabled: bool = True
