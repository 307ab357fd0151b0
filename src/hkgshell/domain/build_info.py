"""The BuildInfo record and its wire representation.

Field names on the wire (``buildNumber``, ``epochMinutes``, ``epoch``,
``semver``, ``gitSha``) are a front-end contract and must not change.
``epochMinutes`` and ``epoch`` travel as decimal strings.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, field_validator

from hkgshell.domain.build_number import (
    build_number_from_raw,
    built_at_iso,
    compute_version_build,
    current_epoch_minutes,
    encode_build_number,
    epoch_seconds,
    parse_epoch_minutes,
    validate_build_number,
)

logger = logging.getLogger(__name__)


class BuildInfo(BaseModel):
    """Immutable build identity, produced once per process.

    Attributes:
        build_number: Five-character base-36 build number.
        epoch_minutes: Whole minutes since the Unix epoch at build time.
        epoch_seconds: ``epoch_minutes * 60``, saturating.
        semver: Declared package version, opaque.
        git_sha: Revision identifier or ``"unknown"``.
        built_at_iso: ISO-8601 rendering of the build minute.
        version_build: Splash-screen version tag.
    """

    model_config = {"frozen": True}

    build_number: str
    epoch_minutes: int
    epoch_seconds: int
    semver: str
    git_sha: str
    built_at_iso: str
    version_build: str

    @field_validator("build_number")
    @classmethod
    def _check_build_number(cls, v: str) -> str:
        if not validate_build_number(v):
            msg = f"Build number must be five characters of 0-9A-Z, got {v!r}"
            raise ValueError(msg)
        return v

    def to_wire(self) -> dict[str, str]:
        """Serialize to the payload returned by the ``get_build_info`` query."""
        return {
            "buildNumber": self.build_number,
            "epochMinutes": str(self.epoch_minutes),
            "epoch": str(self.epoch_seconds),
            "semver": self.semver,
            "gitSha": self.git_sha,
            "builtAtIso": self.built_at_iso,
            "versionBuild": self.version_build,
        }


def from_minutes(
    epoch_minutes: int,
    *,
    semver: str,
    git_sha: str,
    build_number: str | None = None,
) -> BuildInfo:
    """Derive every BuildInfo field from a minute count.

    *build_number* overrides the encoded value when the caller already has one.
    """
    minutes = max(epoch_minutes, 0)
    seconds = epoch_seconds(minutes)
    return BuildInfo(
        build_number=build_number or encode_build_number(minutes),
        epoch_minutes=minutes,
        epoch_seconds=seconds,
        semver=semver,
        git_sha=git_sha,
        built_at_iso=built_at_iso(minutes),
        version_build=compute_version_build(semver, seconds),
    )


def compute_build_info(
    raw_minutes: str | None,
    *,
    semver: str,
    git_sha: str,
    now: float | None = None,
) -> BuildInfo:
    """Build the record from a raw elapsed-minutes source.

    * ``raw_minutes`` is None: no stamp was injected, read the clock.
    * ``raw_minutes`` does not parse: degrade to the ``"00000"`` sentinel
      with zero minutes.  Never raises.
    """
    if raw_minutes is None:
        return from_minutes(current_epoch_minutes(now), semver=semver, git_sha=git_sha)

    minutes = parse_epoch_minutes(raw_minutes)
    if minutes is None:
        logger.warning("Unparsable build minutes %r, using sentinel build number", raw_minutes)
    return from_minutes(
        minutes or 0,
        semver=semver,
        git_sha=git_sha,
        build_number=build_number_from_raw(raw_minutes),
    )


def metadata_payload(epoch_minutes: int) -> dict[str, int | str]:
    """JSON payload written by the build-metadata export step."""
    return {
        "epochMinutes": epoch_minutes,
        "buildNumber": encode_build_number(epoch_minutes),
        "epochSeconds": epoch_seconds(epoch_minutes),
        "builtAtIso": built_at_iso(epoch_minutes),
    }


def metadata_env_lines(epoch_minutes: int) -> list[str]:
    """``KEY=value`` lines consumed by later build steps (and CI env files)."""
    return [
        f"BUILD_MINUTES={epoch_minutes}",
        f"BUILD_NUMBER={encode_build_number(epoch_minutes)}",
        f"BUILD_EPOCH={epoch_seconds(epoch_minutes)}",
        f"BUILD_ISO={built_at_iso(epoch_minutes)}",
    ]
