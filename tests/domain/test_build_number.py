"""Tests for base-36 build-number encoding and build-stamp arithmetic."""

import pytest

from hkgshell.domain.build_number import (
    BASE36_DIGITS,
    SENTINEL_BUILD_NUMBER,
    U64_MAX,
    build_number_from_raw,
    built_at_iso,
    compute_version_build,
    current_epoch_minutes,
    encode_build_number,
    epoch_seconds,
    pad_build_number,
    parse_epoch_minutes,
    parse_major_minor,
    resolve_git_sha,
    to_base36,
    validate_build_number,
)


class TestEncodeBuildNumber:
    def test_zero(self) -> None:
        assert encode_build_number(0) == "00000"

    def test_single_digit_boundaries(self) -> None:
        assert encode_build_number(9) == "00009"
        assert encode_build_number(10) == "0000A"
        assert encode_build_number(35) == "0000Z"

    def test_carry_into_second_digit(self) -> None:
        assert encode_build_number(36) == "00010"

    def test_largest_untruncated_value(self) -> None:
        assert encode_build_number(36**5 - 1) == "ZZZZZ"

    def test_known_minute(self) -> None:
        """2024-01-01T00:00Z is minute 28401120."""
        assert encode_build_number(28_401_120) == "GWQG0"

    def test_truncation_drops_high_order_digits(self) -> None:
        assert to_base36(36**5) == "100000"
        assert encode_build_number(36**5) == "00000"
        assert encode_build_number(36**5 + 35) == "0000Z"

    def test_truncation_keeps_last_five_of_full_representation(self) -> None:
        for value in (36**6 + 1234, 10**12, U64_MAX):
            assert encode_build_number(value) == to_base36(value)[-5:]

    def test_negative_clamped_to_zero(self) -> None:
        assert encode_build_number(-1) == "00000"

    @pytest.mark.parametrize("value", [0, 1, 35, 36, 1295, 1296, 28_401_120, 36**5, U64_MAX])
    def test_always_five_base36_chars(self, value: int) -> None:
        result = encode_build_number(value)
        assert len(result) == 5
        assert all(ch in BASE36_DIGITS for ch in result)
        assert validate_build_number(result)

    def test_deterministic(self) -> None:
        assert encode_build_number(123_456) == encode_build_number(123_456)

    def test_monotonic_within_window(self) -> None:
        assert encode_build_number(1000) < encode_build_number(1001)


class TestPadBuildNumber:
    def test_pads_short_sequences(self) -> None:
        assert pad_build_number("Z") == "0000Z"

    def test_padding_is_idempotent(self) -> None:
        assert pad_build_number("AB12C") == "AB12C"
        assert pad_build_number(pad_build_number("7")) == "00007"


class TestParseEpochMinutes:
    def test_plain_digits(self) -> None:
        assert parse_epoch_minutes("28401120") == 28_401_120

    def test_surrounding_whitespace(self) -> None:
        assert parse_epoch_minutes(" 42\n") == 42

    @pytest.mark.parametrize("raw", [None, "", "abc", "-5", "+5", "1.5", "12a", "1_000", "٣"])
    def test_rejects_non_decimal(self, raw: str | None) -> None:
        assert parse_epoch_minutes(raw) is None

    def test_rejects_values_beyond_u64(self) -> None:
        assert parse_epoch_minutes(str(U64_MAX)) == U64_MAX
        assert parse_epoch_minutes(str(U64_MAX + 1)) is None


class TestBuildNumberFromRaw:
    def test_valid(self) -> None:
        assert build_number_from_raw("36") == "00010"

    @pytest.mark.parametrize("raw", [None, "", "not-a-number", "-1"])
    def test_unparsable_yields_sentinel(self, raw: str | None) -> None:
        assert build_number_from_raw(raw) == SENTINEL_BUILD_NUMBER == "00000"


class TestEpochSeconds:
    def test_multiplies_by_sixty(self) -> None:
        assert epoch_seconds(0) == 0
        assert epoch_seconds(28_401_120) == 1_704_067_200

    def test_last_exact_value_before_overflow(self) -> None:
        boundary = U64_MAX // 60
        assert epoch_seconds(boundary) == boundary * 60
        assert epoch_seconds(boundary) % 60 == 0

    def test_clamps_instead_of_wrapping(self) -> None:
        boundary = U64_MAX // 60
        assert epoch_seconds(boundary + 1) == U64_MAX
        assert epoch_seconds(U64_MAX) == U64_MAX


class TestCurrentEpochMinutes:
    def test_floors_to_whole_minutes(self) -> None:
        assert current_epoch_minutes(1_704_067_259.9) == 28_401_120

    def test_wall_clock_is_positive(self) -> None:
        assert current_epoch_minutes() > 28_401_120


class TestBuiltAtIso:
    def test_epoch(self) -> None:
        assert built_at_iso(0) == "1970-01-01T00:00:00.000Z"

    def test_known_minute(self) -> None:
        assert built_at_iso(28_401_120) == "2024-01-01T00:00:00.000Z"

    def test_out_of_calendar_range(self) -> None:
        assert built_at_iso(U64_MAX) == ""


class TestVersionBuild:
    def test_parse_major_minor(self) -> None:
        assert parse_major_minor("1.2.3") == (1, 2)
        assert parse_major_minor("2") == (2, 0)
        assert parse_major_minor("x.y") == (0, 0)
        assert parse_major_minor("3-beta.4rc") == (3, 4)
        assert parse_major_minor(None) == (0, 0)

    def test_compute_version_build(self) -> None:
        assert compute_version_build("0.1.0", 1_704_067_200) == "v0.010672"
        assert compute_version_build("12.3.0", 0) == "v12.030000"


class TestResolveGitSha:
    def test_prefers_github_sha(self) -> None:
        env = {"GITHUB_SHA": "aaa", "GIT_COMMIT": "bbb"}
        assert resolve_git_sha(env) == "aaa"

    def test_falls_back_to_git_commit(self) -> None:
        assert resolve_git_sha({"GIT_COMMIT": "bbb"}) == "bbb"

    def test_empty_counts_as_missing(self) -> None:
        assert resolve_git_sha({"GITHUB_SHA": "  ", "GIT_COMMIT": "bbb"}) == "bbb"

    def test_unknown_when_absent(self) -> None:
        assert resolve_git_sha({}) == "unknown"
