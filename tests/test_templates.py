"""Tests for the template engine and banner rendering."""

import pytest

from animator_wrapper.codegen import GeneratorConfig, ParameterDescriptor, ParameterKind, generate_code
from animator_wrapper.codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    csharp_string_literal,
)
from animator_wrapper.codegen.languages.csharp import CSharpWrapperGenerator
from animator_wrapper.codegen.languages.csharp.generator import BANNER_TEMPLATE


class TestCSharpStringLiteral:
    """Tests for C# string quoting."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("plain", '"plain"'),
            ('say "hi"', '"say \\"hi\\""'),
            ("back\\slash", '"back\\\\slash"'),
            ("two\nlines", '"two\\nlines"'),
        ],
    )
    def test_quoting(self, value, expected):
        assert csharp_string_literal(value) == expected


class TestTemplateEngine:
    """Tests for TemplateEngine lookups."""

    def test_builtin_template(self):
        engine = TemplateEngine(builtin_templates={"hello.j2": "Hello {{ name }}\n"})
        assert engine.render_template("hello.j2", {"name": "Foo"}) == "Hello Foo\n"

    def test_directory_overrides_builtin(self, tmp_path):
        (tmp_path / "hello.j2").write_text("Hi {{ name }}", encoding="utf-8")
        engine = TemplateEngine(tmp_path, {"hello.j2": "Hello {{ name }}"})
        assert engine.render_template("hello.j2", {"name": "Foo"}) == "Hi Foo"

    def test_add_template(self):
        engine = TemplateEngine()
        engine.add_template("x.j2", "{{ 1 + 1 }}")
        assert engine.template_exists("x.j2")
        assert engine.render_template("x.j2", {}) == "2"

    def test_csharp_string_filter(self):
        engine = TemplateEngine(builtin_templates={"s.j2": "{{ name | csharp_string }}"})
        assert engine.render_template("s.j2", {"name": 'a"b'}) == '"a\\"b"'

    def test_missing_template(self):
        with pytest.raises(TemplateError):
            TemplateEngine().render_template("missing.j2", {})

    def test_undefined_variable(self):
        engine = TemplateEngine(builtin_templates={"u.j2": "{{ nope }}"})
        with pytest.raises(TemplateError):
            engine.render_template("u.j2", {})

    def test_missing_directory(self, tmp_path):
        with pytest.raises(TemplateError):
            TemplateEngine(tmp_path / "nowhere")


class TestBanner:
    """Tests for the generated-file banner."""

    PARAMETERS = (ParameterDescriptor("speed", ParameterKind.FLOAT, 1),)

    def test_default_banner(self):
        result = generate_code(CSharpWrapperGenerator(), self.PARAMETERS, "Foo")
        banner_lines = BANNER_TEMPLATE.replace("{{ tool_name }}", "AnimatorWrapper").strip()
        assert result.code.startswith("\n" + banner_lines + "\n\nusing System;\n")
        assert "This file was generated by AnimatorWrapper." in result.code

    def test_banner_lines_are_aligned(self):
        result = generate_code(CSharpWrapperGenerator(), self.PARAMETERS, "Foo")
        banner = [line for line in result.code.splitlines() if line.startswith(" *")]
        assert len({len(line) for line in banner}) == 1

    def test_banner_override_from_template_dir(self, tmp_path):
        (tmp_path / "banner.cs.j2").write_text(
            "// Copyright Studio. Generated from {{ controller_name }} as {{ class_name }}.\n",
            encoding="utf-8",
        )
        config = GeneratorConfig(class_name="PlayerAnimator", template_dir=str(tmp_path))
        result = generate_code(CSharpWrapperGenerator(config), self.PARAMETERS, "Player")
        assert result.success
        assert result.code.startswith(
            "// Copyright Studio. Generated from Player as PlayerAnimator.\n\nusing System;"
        )

    def test_banner_override_can_quote_values(self, tmp_path):
        (tmp_path / "banner.cs.j2").write_text(
            "// Source controller: {{ controller_name | csharp_string }}\n",
            encoding="utf-8",
        )
        config = GeneratorConfig(class_name="PlayerAnimator", template_dir=str(tmp_path))
        result = generate_code(CSharpWrapperGenerator(config), self.PARAMETERS, 'Hero "Main"')
        assert result.success
        assert result.code.startswith('// Source controller: "Hero \\"Main\\""\n')

    def test_missing_template_dir_fails_generation(self, tmp_path):
        config = GeneratorConfig(template_dir=str(tmp_path / "nowhere"))
        result = generate_code(CSharpWrapperGenerator(config), self.PARAMETERS, "Foo")
        assert not result.success
        assert isinstance(result.exception, TemplateError)
