"""Tests for raw config value parsers."""

import pytest

from nragent.exceptions import ConfigParseError
from nragent.resolution.parsing import parse_app_names, parse_bool, parse_labels, parse_port


class TestParsePort:
    """Tests for parse_port."""

    def test_integer_passthrough(self) -> None:
        assert parse_port(443) == 443

    def test_numeric_string(self) -> None:
        assert parse_port("443") == 443
        assert parse_port("8080") == 8080

    def test_signed_string(self) -> None:
        """A leading sign is accepted like any integer literal."""
        assert parse_port("+443") == 443

    @pytest.mark.parametrize("value", ["abc", "", " 443", "443 ", "4_43", "44.3", "0x1bb"])
    def test_malformed_string_fails(self, value: str) -> None:
        """Anything but a plain integer string fails."""
        with pytest.raises(ConfigParseError) as exc_info:
            parse_port(value)
        assert exc_info.value.key == "port"
        assert exc_info.value.value == value

    @pytest.mark.parametrize("value", [None, 443.0, True, [443]])
    def test_other_types_fail(self, value: object) -> None:
        with pytest.raises(ConfigParseError):
            parse_port(value)


class TestParseAppNames:
    """Tests for parse_app_names."""

    def test_none_stays_none(self) -> None:
        assert parse_app_names(None) is None

    def test_single_name(self) -> None:
        assert parse_app_names("checkout") == ["checkout"]

    def test_splits_and_trims(self) -> None:
        assert parse_app_names("a; b;c") == ["a", "b", "c"]

    def test_keeps_empty_segments(self) -> None:
        """Empty segments are not filtered out."""
        assert parse_app_names("a;") == ["a", ""]


class TestParseLabels:
    """Tests for parse_labels."""

    def test_none_yields_empty_list(self) -> None:
        assert parse_labels(None) == []

    def test_pairs(self) -> None:
        assert parse_labels("k1:v1;k2:v2") == [("k1", "v1"), ("k2", "v2")]

    def test_trailing_token_dropped(self) -> None:
        assert parse_labels("k1:v1;k2") == [("k1", "v1")]

    def test_trims_whitespace(self) -> None:
        assert parse_labels(" team : payments ; tier:backend ") == [
            ("team", "payments"),
            ("tier", "backend"),
        ]

    def test_empty_tokens_skipped(self) -> None:
        """Doubled or trailing separators do not shift the pairing."""
        assert parse_labels("k1::v1;;k2:v2;") == [("k1", "v1"), ("k2", "v2")]

    def test_separators_interchangeable(self) -> None:
        assert parse_labels("k1;v1:k2;v2") == [("k1", "v1"), ("k2", "v2")]

    def test_empty_string(self) -> None:
        assert parse_labels("") == []


class TestParseBool:
    """Tests for parse_bool."""

    def test_exact_literals(self) -> None:
        assert parse_bool("true") is True
        assert parse_bool("false") is False
        assert parse_bool(True) is True
        assert parse_bool(False) is False

    @pytest.mark.parametrize("value", ["TRUE", "False", "1", "yes", "", None, 1])
    def test_everything_else_is_unset(self, value: object) -> None:
        assert parse_bool(value) is None
