"""
Functional tests for eval command
"""

import json

import pytest
from click.testing import CliRunner

from clsx_cli.main import cli


class TestEvalCommand:
    """Functional tests for clsx eval command"""

    @pytest.fixture
    def runner(self):
        """CLI test runner"""
        return CliRunner()

    @pytest.fixture(autouse=True)
    def isolated_home(self, tmp_path, monkeypatch):
        """Keep user and working-directory config files out of the tests"""
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.chdir(tmp_path)

    def test_eval_help(self, runner):
        """Test eval command help"""
        result = runner.invoke(cli, ['eval', '--help'])

        assert result.exit_code == 0
        assert 'Evaluate a class list EXPRESSION' in result.output

    def test_eval_mixed(self, runner):
        """Test a mixed expression with names and conditions"""
        result = runner.invoke(cli, [
            'eval',
            '"base", dyn, "active" => true, "disabled" => false',
            '--set', 'dyn=dynamic'
        ])

        assert result.exit_code == 0
        assert result.output == "base dynamic active\n"

    def test_eval_keeps_colon_class_names(self, runner):
        """Test that :name: sequences in class names are printed verbatim"""
        result = runner.invoke(cli, ['eval', '"icon:star:lg", "a:heart:b"'])

        assert result.exit_code == 0
        assert result.output == "icon:star:lg a:heart:b\n"

    def test_eval_trailing_comma(self, runner):
        """Test that a trailing comma does not change the result"""
        with_comma = runner.invoke(cli, ['eval', '"a", "b",'])
        without_comma = runner.invoke(cli, ['eval', '"a", "b"'])

        assert with_comma.exit_code == 0
        assert with_comma.output == without_comma.output == "a b\n"

    def test_eval_json_format(self, runner):
        """Test JSON output"""
        result = runner.invoke(cli, ['eval', '"a" => on', '--set', 'on=1', '-f', 'json'])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"expression": '"a" => on', "classes": "a"}

    def test_eval_syntax_error(self, runner):
        """Test that a syntax error exits with code 3 and a suggestion"""
        result = runner.invoke(cli, ['eval', '"a",, "b"'])

        assert result.exit_code == 3
        assert "Empty item" in result.output
        assert "Suggestion" in result.output

    def test_eval_undefined_name(self, runner):
        """Test that undefined names are reported, not ignored"""
        result = runner.invoke(cli, ['eval', '"a" => missing'])

        assert result.exit_code == 3
        assert "is not defined" in result.output

    def test_eval_context_not_mapping(self, runner, tmp_path):
        """Test that a non-mapping context file exits with code 4"""
        context_file = tmp_path / "ctx.yaml"
        context_file.write_text("- a\n")

        result = runner.invoke(cli, ['eval', '"a"', '--context', str(context_file)])

        assert result.exit_code == 4


class TestCLIGroup:
    """Tests for the top-level group"""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert 'clsx' in result.output
        assert '0.1.0' in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        for command in ('build', 'eval', 'config'):
            assert command in result.output
