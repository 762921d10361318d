"""Tests for nightlytests.config.loader."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from nightlytests.config.loader import (
    ConfigError,
    expand_env_vars,
    find_project_config,
    flatten_properties,
    load_project_properties,
    load_yaml_file,
)

KEY = "plugins.nightlytests.listOfTests"


class TestExpandEnvVars:
    """Tests for expand_env_vars function."""

    def test_expands_simple_env_var(self) -> None:
        with patch.dict(os.environ, {"SLOW_TESTS": "tests.test_slow"}):
            assert expand_env_vars("${SLOW_TESTS}") == "tests.test_slow"

    def test_expands_env_var_with_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${UNSET_VAR:-default}") == "default"

    def test_returns_empty_for_unset_without_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${UNSET_VAR}") == ""

    def test_expands_in_nested_structures(self) -> None:
        with patch.dict(os.environ, {"A": "x"}):
            data = {"plugins": {"nightlytests": {"listOfTests": ["${A}", "y"]}}}
            result = expand_env_vars(data)
            assert result["plugins"]["nightlytests"]["listOfTests"] == ["x", "y"]

    def test_preserves_non_string_values(self) -> None:
        data = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(data) == data


class TestFlattenProperties:
    """Tests for flatten_properties function."""

    def test_flattens_nested_mapping(self) -> None:
        data = {"plugins": {"nightlytests": {"listOfTests": "A,B"}}}
        assert flatten_properties(data) == {KEY: "A,B"}

    def test_keeps_dotted_keys(self) -> None:
        assert flatten_properties({KEY: "A"}) == {KEY: "A"}

    def test_lists_and_empty_mappings_are_leaves(self) -> None:
        data = {"a": ["x"], "b": {}, "c": None}
        assert flatten_properties(data) == {"a": ["x"], "b": {}, "c": None}

    def test_mixed_styles(self) -> None:
        data = {"plugins": {"nightlytests.listOfTests": "A"}}
        assert flatten_properties(data) == {KEY: "A"}


class TestFindProjectConfig:
    """Tests for find_project_config function."""

    def test_finds_dotted_yml(self, tmp_path: Path) -> None:
        config = tmp_path / ".nightlytests.yml"
        config.write_text("")
        assert find_project_config(tmp_path) == config

    def test_prefers_first_name(self, tmp_path: Path) -> None:
        (tmp_path / "nightlytests.yaml").write_text("")
        first = tmp_path / ".nightlytests.yml"
        first.write_text("")
        assert find_project_config(tmp_path) == first

    def test_returns_none_without_config(self, tmp_path: Path) -> None:
        assert find_project_config(tmp_path) is None


class TestLoadYamlFile:
    """Tests for load_yaml_file function."""

    def test_empty_file_is_empty_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / ".nightlytests.yml"
        path.write_text("")
        assert load_yaml_file(path) == {}

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / ".nightlytests.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_yaml_file(path)


class TestLoadProjectProperties:
    """Tests for load_project_properties function."""

    def test_no_config_file(self, tmp_path: Path) -> None:
        assert load_project_properties(tmp_path) == {}

    def test_nested_config(self, tmp_path: Path) -> None:
        (tmp_path / ".nightlytests.yml").write_text(
            "plugins:\n  nightlytests:\n    listOfTests: com.example.SlowTest,com.example.FlakyTest\n"
        )
        assert load_project_properties(tmp_path) == {
            KEY: "com.example.SlowTest,com.example.FlakyTest"
        }

    def test_list_config(self, tmp_path: Path) -> None:
        (tmp_path / "nightlytests.yml").write_text(
            "plugins.nightlytests.listOfTests:\n  - A\n  - B\n"
        )
        assert load_project_properties(tmp_path) == {KEY: ["A", "B"]}

    def test_empty_value_is_present(self, tmp_path: Path) -> None:
        (tmp_path / ".nightlytests.yml").write_text("plugins.nightlytests.listOfTests:\n")
        assert load_project_properties(tmp_path) == {KEY: None}

    def test_invalid_yaml_raises_config_error(self, tmp_path: Path) -> None:
        (tmp_path / ".nightlytests.yml").write_text("plugins: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_project_properties(tmp_path)

    def test_non_utf8_file_raises_config_error(self, tmp_path: Path) -> None:
        (tmp_path / ".nightlytests.yml").write_bytes(b"plugins.nightlytests.listOfTests: com.example.Caf\xe9Test\n")
        with pytest.raises(ConfigError, match="not valid UTF-8"):
            load_project_properties(tmp_path)

    def test_env_var_expansion(self, tmp_path: Path) -> None:
        (tmp_path / ".nightlytests.yml").write_text(
            "plugins.nightlytests.listOfTests: ${NIGHTLY_ONLY:-tests.test_slow}\n"
        )
        with patch.dict(os.environ, {}, clear=True):
            assert load_project_properties(tmp_path) == {KEY: "tests.test_slow"}
