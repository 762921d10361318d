"""Tests for nightlytests.config.validation."""

from __future__ import annotations

import logging

import pytest

from nightlytests.config.validation import _suggest_key, validate_config

KEY = "plugins.nightlytests.listOfTests"


class TestSuggestKey:
    """Tests for _suggest_key function."""

    def test_suggests_typo_fix(self) -> None:
        assert _suggest_key("listofTests", {"listOfTests"}) == "listOfTests"

    def test_returns_none_for_no_match(self) -> None:
        assert _suggest_key("xyz", {"listOfTests"}) is None

    def test_handles_empty_valid_keys(self) -> None:
        assert _suggest_key("test", set()) is None


class TestValidateConfig:
    """Tests for validate_config function."""

    def test_valid_string_value(self) -> None:
        assert validate_config({KEY: "A,B"}, source="test.yml") == []

    def test_valid_list_value(self) -> None:
        assert validate_config({KEY: ["A", "B"]}, source="test.yml") == []

    def test_empty_value_is_left_to_the_plugin(self) -> None:
        assert validate_config({KEY: None}, source="test.yml") == []

    def test_ignores_foreign_keys(self) -> None:
        data = {"plugins.other.enabled": True, "tool": "x"}
        assert validate_config(data, source="test.yml") == []

    def test_warns_on_unknown_plugin_key(self) -> None:
        warnings = validate_config({"plugins.nightlytests.listOfTest": "A"}, source="test.yml")
        assert len(warnings) == 1
        assert warnings[0].key == "plugins.nightlytests.listOfTest"
        assert warnings[0].suggestion == "listOfTests"
        assert warnings[0].source == "test.yml"

    @pytest.mark.parametrize("value", [42, {"a": 1}, ["A", 1], True])
    def test_warns_on_wrong_type(self, value) -> None:
        warnings = validate_config({KEY: value}, source="test.yml")
        assert len(warnings) == 1
        assert "must be a string" in warnings[0].message

    def test_logs_warnings(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="nightlytests"):
            validate_config({"plugins.nightlytests.listofTests": "A"}, source="test.yml")
        assert "did you mean 'listOfTests'" in caplog.text
