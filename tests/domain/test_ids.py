"""Tests for identifier generation and input parsers."""

from datetime import date
from uuid import UUID

import pytest

from skillmgr.domain.errors import ValidationError
from skillmgr.domain.ids import (
    new_id,
    parse_date,
    parse_id,
    parse_level,
    parse_optional_date,
)


class TestNewId:
    def test_is_uuid4(self) -> None:
        assert new_id().version == 4

    def test_unique(self) -> None:
        assert len({new_id() for _ in range(200)}) == 200


class TestParseId:
    def test_string(self) -> None:
        raw = "0b6f0c4e-3b5d-4a8e-9a3c-2f1d5e7a9b10"
        assert parse_id(raw) == UUID(raw)

    def test_strips_whitespace(self) -> None:
        raw = "0b6f0c4e-3b5d-4a8e-9a3c-2f1d5e7a9b10"
        assert parse_id(f"  {raw}\n") == UUID(raw)

    def test_uuid_passthrough(self) -> None:
        value = new_id()
        assert parse_id(value) is value

    def test_malformed(self) -> None:
        with pytest.raises(ValidationError, match="Invalid skill id"):
            parse_id("not-a-uuid", "skill id")

    def test_error_code(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_id("42")
        assert excinfo.value.code == "VALIDATION_FAILED"
        assert excinfo.value.detail["value"] == "42"


class TestParseDate:
    def test_iso(self) -> None:
        assert parse_date("2024-01-15") == date(2024, 1, 15)

    def test_date_passthrough(self) -> None:
        d = date(2020, 2, 29)
        assert parse_date(d) is d

    @pytest.mark.parametrize("raw", ["15.01.2024", "2024/01/15", "2024-1-5", "", "yesterday"])
    def test_wrong_shape(self, raw: str) -> None:
        with pytest.raises(ValidationError, match="expected YYYY-MM-DD"):
            parse_date(raw, "start date")

    def test_impossible_day(self) -> None:
        with pytest.raises(ValidationError, match="Invalid start date"):
            parse_date("2023-02-30", "start date")


class TestParseOptionalDate:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_absent(self, raw: str | None) -> None:
        assert parse_optional_date(raw) is None

    def test_present(self) -> None:
        assert parse_optional_date("2024-12-31") == date(2024, 12, 31)


class TestParseLevel:
    @pytest.mark.parametrize(("raw", "expected"), [(0, 0), ("3", 3), (" 7 ", 7)])
    def test_valid(self, raw: int | str, expected: int) -> None:
        assert parse_level(raw) == expected

    def test_negative(self) -> None:
        with pytest.raises(ValidationError, match="must be >= 0"):
            parse_level(-1)

    @pytest.mark.parametrize("raw", ["expert", "2.5", ""])
    def test_not_an_integer(self, raw: str) -> None:
        with pytest.raises(ValidationError, match="not an integer"):
            parse_level(raw)
