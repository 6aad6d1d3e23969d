"""
Unit tests for CLI context assembly
"""

import pytest
import yaml

from clsx_core.exceptions import ContextError
from clsx_cli.utils.context import build_context


class TestBuildContext:
    """Tests for merging context files and --set assignments"""

    def test_no_sources(self):
        assert build_context(None, []) == {}

    def test_assignments_only(self):
        assert build_context(None, ["a=true", "b=lg"]) == {"a": True, "b": "lg"}

    def test_assignments_override_file(self, tmp_path):
        path = tmp_path / "ctx.yaml"
        path.write_text(yaml.dump({"a": True, "b": "x"}))

        assert build_context(str(path), ["a=false"]) == {"a": False, "b": "x"}

    def test_bad_assignment(self):
        with pytest.raises(ContextError):
            build_context(None, ["oops"])
