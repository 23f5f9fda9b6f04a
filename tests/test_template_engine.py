"""Tests for mdinject.template_engine."""

import pytest

from mdinject.errors import (
    FileReadError,
    TemplateError,
    TemplateFileError,
    TemplateParseError,
    TemplateRenderError,
)
from mdinject.models import DEFAULT_TEMPLATE
from mdinject.template_engine import apply_template, read_template_file, render_string


class TestRenderString:
    def test_basic_replacement(self):
        result = render_string("hello {{ name }}", {"name": "world"})
        assert result == "hello world"

    def test_multiple_replacements(self):
        result = render_string("{{ a }} and {{ b }}", {"a": "X", "b": "Y"})
        assert result == "X and Y"

    def test_no_replacement_needed(self):
        result = render_string("no placeholders here", {})
        assert result == "no placeholders here"

    def test_keeps_trailing_newline(self):
        result = render_string("line={{ a }}\n", {"a": "1"})
        assert result == "line=1\n"

    def test_no_html_escaping(self):
        result = render_string("{{ a }}", {"a": "<b>&</b>"})
        assert result == "<b>&</b>"

    def test_undefined_name_is_an_error(self):
        with pytest.raises(TemplateRenderError, match="undefined"):
            render_string("{{ a }} and {{ b }}", {"a": "X"})


class TestApplyTemplate:
    @pytest.mark.parametrize("content", [
        "",
        "plain",
        "two\nlines\n",
        "ends with blank lines\n\n\n",
        "{{ looks like a template }} {% if %}",
        "crlf\r\nline\r\n",
    ])
    def test_default_template_is_pass_through(self, content):
        assert apply_template(DEFAULT_TEMPLATE, content) == content

    def test_code_fence(self):
        template = "```plaintext\n{{ stdin }}```"
        assert apply_template(template, "usage: foo\n") == "```plaintext\nusage: foo\n```"

    def test_control_constructs(self):
        template = "{% for line in stdin.splitlines() %}- {{ line }}\n{% endfor %}"
        assert apply_template(template, "a\nb") == "- a\n- b\n"

    def test_filters(self):
        assert apply_template("{{ stdin | trim | upper }}", "  hi \n") == "HI"

    def test_parse_error(self):
        with pytest.raises(TemplateParseError, match="invalid template"):
            apply_template("{{ stdin ", "x")

    def test_unknown_block_is_parse_error(self):
        with pytest.raises(TemplateParseError):
            apply_template("{% frobnicate %}", "x")

    def test_undefined_attribute(self):
        with pytest.raises(TemplateRenderError):
            apply_template("{{ stdin.no_such_field }}", "x")

    def test_type_error_while_rendering(self):
        with pytest.raises(TemplateRenderError):
            apply_template("{{ stdin + 1 }}", "x")

    def test_recursive_macro(self):
        template = "{% macro f() %}{{ f() }}{% endmacro %}{{ f() }}"
        with pytest.raises(TemplateRenderError):
            apply_template(template, "x")

    def test_errors_share_base_class(self):
        for template in ("{{", "{{ other }}"):
            with pytest.raises(TemplateError):
                apply_template(template, "x")


class TestReadTemplateFile:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "codeblock.j2"
        path.write_text("```\n{{ stdin }}```\n")
        assert read_template_file(path) == "```\n{{ stdin }}```\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(TemplateFileError) as excinfo:
            read_template_file(tmp_path / "nope.j2")
        assert isinstance(excinfo.value, FileReadError)
        assert "nope.j2" in str(excinfo.value)
