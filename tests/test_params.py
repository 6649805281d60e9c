"""Tests for pathseg.segments.params — segment value coercion."""

import datetime
from concurrent.futures import ThreadPoolExecutor

import pytest

from pathseg.segments.params import CONVERTERS, DATE_PARSER, DateParser, coerce
from pathseg.segments.result import UnnamedMismatch
from pathseg.segments.values import DateValue, NumberValue, SegType, StringValue


class TestConverters:
    def test_all_types_registered(self) -> None:
        assert set(CONVERTERS) == set(SegType)

    def test_shared_date_parser(self) -> None:
        assert isinstance(DATE_PARSER, DateParser)


class TestCoerceString:
    @pytest.mark.parametrize("value", ["hello", "", "hello world", "42", "a/b", "line\nbreak"])
    def test_identity(self, value: str) -> None:
        assert coerce(SegType.STRING, value) == StringValue(value)


class TestCoerceNumber:
    def test_decimal(self) -> None:
        assert coerce(SegType.NUMBER, "123.45") == NumberValue(123.45)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("42", 42.0),
            ("-7", -7.0),
            ("+7", 7.0),
            ("0.5", 0.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-3", 0.0025),
        ],
    )
    def test_valid_literals(self, value: str, expected: float) -> None:
        result = coerce(SegType.NUMBER, value)
        assert isinstance(result, NumberValue)
        assert result.value == pytest.approx(expected)

    def test_result_is_float(self) -> None:
        result = coerce(SegType.NUMBER, "42")
        assert isinstance(result, NumberValue)
        assert isinstance(result.value, float)

    @pytest.mark.parametrize(
        "value",
        [
            "123.45.67",
            "12abc",
            "world",
            "",
            " 1",
            "1 ",
            "1_000",
            "inf",
            "nan",
            "0x10",
            "1e",
            ".",
            "-",
            "١٢٣",
        ],
    )
    def test_invalid_literals(self, value: str) -> None:
        assert coerce(SegType.NUMBER, value) == UnnamedMismatch(expected="number", got=value)


class TestCoerceDate:
    def test_iso_date(self) -> None:
        assert coerce(SegType.DATE, "2021-01-01") == DateValue(datetime.date(2021, 1, 1))

    def test_leap_day(self) -> None:
        assert coerce(SegType.DATE, "2024-02-29") == DateValue(datetime.date(2024, 2, 29))

    @pytest.mark.parametrize(
        "value",
        [
            "2021-01-01-01",
            "2021-02-29",
            "2021-13-01",
            "2021-00-10",
            "2021-01-32",
            "0000-01-01",
            "20210101",
            "2021-1-1",
            "2021-01-01T00:00",
            " 2021-01-01",
            "2021-01-01\n",
            "yesterday",
            "",
        ],
    )
    def test_invalid_dates(self, value: str) -> None:
        assert coerce(SegType.DATE, value) == UnnamedMismatch(expected="date", got=value)


class TestDateParser:
    def test_parse_date(self) -> None:
        assert DATE_PARSER.parse_date("1999-12-31") == datetime.date(1999, 12, 31)

    def test_parse_date_rejects(self) -> None:
        assert DATE_PARSER.parse_date("1999-12-31-01") is None

    def test_shared_across_threads(self) -> None:
        days = [f"2021-03-{d:02d}" for d in range(1, 32)]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(DATE_PARSER.parse_date, days))
        assert results == [datetime.date(2021, 3, d) for d in range(1, 32)]
