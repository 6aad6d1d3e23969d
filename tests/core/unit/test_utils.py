"""
Unit tests for clsx_core.utils and clsx_core.config
"""

import json
import logging

import pytest
import yaml

from clsx_core.config import ClsxConfig, configure_logging
from clsx_core.exceptions import ContextError
from clsx_core.utils import load_context, parse_assignment


class TestLoadContext:
    """Tests for context file loading"""

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "ctx.yaml"
        path.write_text(yaml.dump({"active": True, "theme": {"name": "dark"}}))

        assert load_context(str(path)) == {"active": True, "theme": {"name": "dark"}}

    def test_json_file(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text(json.dumps({"active": False}))

        assert load_context(str(path)) == {"active": False}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "ctx.yaml"
        path.write_text("")

        assert load_context(str(path)) == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "ctx.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ContextError, match="must contain a mapping"):
            load_context(str(path))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text("{not json")

        with pytest.raises(ContextError, match="Failed to parse"):
            load_context(str(path))


class TestParseAssignment:
    """Tests for NAME=VALUE parsing"""

    def test_boolean(self):
        assert parse_assignment("active=true") == ("active", True)

    def test_string(self):
        assert parse_assignment("size=lg") == ("size", "lg")

    def test_integer(self):
        assert parse_assignment("count=0") == ("count", 0)

    def test_empty_value(self):
        assert parse_assignment("blank=") == ("blank", "")

    def test_value_with_equals(self):
        assert parse_assignment("expr=a=b") == ("expr", "a=b")

    @pytest.mark.parametrize("text", ["noequals", "=value"])
    def test_invalid(self, text):
        with pytest.raises(ContextError, match="Expected NAME=VALUE"):
            parse_assignment(text)


class TestConfig:
    """Tests for ClsxConfig and logging setup"""

    def test_defaults(self):
        config = ClsxConfig()
        assert config.condition_marker == "=>"
        assert config.delimiter == ","
        assert config.log_level == "WARNING"

    def test_configure_logging_sets_root_level(self):
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("debug")
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_configure_logging_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging("LOUD")
