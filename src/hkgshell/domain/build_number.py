"""Build-number encoding and build-stamp arithmetic.

The build number is the base-36 rendering of whole minutes since the Unix
epoch, truncated to its five least-significant digits and zero-padded on
the left.  Truncation drops high-order digits; it never re-encodes, so the
identifier rolls over instead of growing.

INVARIANT: every build number is exactly ``BUILD_NUMBER_WIDTH`` characters
drawn from ``0-9A-Z``.  No function in this module raises for bad input.
"""

from __future__ import annotations

import os
import re
import time
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

BASE36_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BUILD_NUMBER_WIDTH = 5
SENTINEL_BUILD_NUMBER = "0" * BUILD_NUMBER_WIDTH

# Minutes and seconds travel as unsigned 64-bit values.
U64_MAX = 2**64 - 1

UNKNOWN_REVISION = "unknown"
REVISION_ENV_VARS: tuple[str, ...] = ("GITHUB_SHA", "GIT_COMMIT")

BUILD_NUMBER_PATTERN = re.compile(rf"^[0-9A-Z]{{{BUILD_NUMBER_WIDTH}}}$")
_DECIMAL = re.compile(r"[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_base36(value: int) -> str:
    """Return the full, untruncated base-36 digits of *value* (most significant first)."""
    if value <= 0:
        return "0"
    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def pad_build_number(digits: str) -> str:
    """Keep the last ``BUILD_NUMBER_WIDTH`` digits and left-pad with ``0``."""
    return digits[-BUILD_NUMBER_WIDTH:].rjust(BUILD_NUMBER_WIDTH, "0")


def encode_build_number(epoch_minutes: int) -> str:
    """Encode *epoch_minutes* as a five-character build number.

    Negative input is clamped to zero, so the function is total over ints.

    >>> encode_build_number(35)
    '0000Z'
    >>> encode_build_number(36)
    '00010'
    """
    return pad_build_number(to_base36(max(epoch_minutes, 0)))


def parse_epoch_minutes(raw: str | None) -> int | None:
    """Parse a raw elapsed-minutes value.

    Only plain ASCII decimal digits that fit in an unsigned 64-bit integer
    are accepted.  Returns None for anything else (missing, signed,
    fractional, corrupt, or too large).
    """
    if raw is None:
        return None
    text = raw.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    value = int(text)
    if value > U64_MAX:
        return None
    return value


def build_number_from_raw(raw: str | None) -> str:
    """Encode a raw elapsed-minutes value, or return ``"00000"`` if it does not parse."""
    minutes = parse_epoch_minutes(raw)
    if minutes is None:
        return SENTINEL_BUILD_NUMBER
    return encode_build_number(minutes)


def epoch_seconds(epoch_minutes: int) -> int:
    """Convert minutes to seconds, saturating at ``U64_MAX`` instead of wrapping."""
    minutes = max(epoch_minutes, 0)
    if minutes > U64_MAX // 60:
        return U64_MAX
    return minutes * 60


def current_epoch_minutes(now: float | None = None) -> int:
    """Whole minutes elapsed since the Unix epoch at *now* (default: wall clock)."""
    seconds = time.time() if now is None else now
    return max(int(seconds // 60), 0)


def built_at_iso(epoch_minutes: int) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2024-01-01T00:00:00.000Z``.

    Returns an empty string when the instant lies outside the range a
    calendar date can represent.
    """
    try:
        moment = _EPOCH + timedelta(minutes=max(epoch_minutes, 0))
    except OverflowError:
        return ""
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def parse_major_minor(semver: str | None) -> tuple[int, int]:
    """Extract ``(major, minor)`` from a version string; unparsable parts become 0."""
    parts = str(semver or "").split(".")
    major_raw = parts[0] if parts else "0"
    minor_raw = parts[1] if len(parts) > 1 else "0"
    return _leading_int(major_raw), _leading_int(minor_raw)


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([0-9]+)", text)
    return int(match.group(1)) if match else 0


def compute_version_build(semver: str | None, seconds: int) -> str:
    """Splash-screen version tag: ``v{major}.{minor:02}{bucket:04}``.

    The bucket is the epoch second count in hundreds, modulo 10000.
    """
    major, minor = parse_major_minor(semver)
    bucket = (max(seconds, 0) // 100) % 10000
    return f"v{major}.{minor:02d}{bucket:04d}"


def resolve_git_sha(environ: Mapping[str, str] | None = None) -> str:
    """Resolve the revision identifier from the build environment.

    ``GITHUB_SHA`` wins over ``GIT_COMMIT``; empty values count as missing.
    """
    env = os.environ if environ is None else environ
    for name in REVISION_ENV_VARS:
        value = env.get(name, "").strip()
        if value:
            return value
    return UNKNOWN_REVISION


def validate_build_number(build_number: str) -> bool:
    """Check whether *build_number* has the canonical five-character shape."""
    return BUILD_NUMBER_PATTERN.match(build_number) is not None
