"""Tests for per-parameter member synthesis."""

import logging

import pytest

from animator_wrapper.codegen.core.config import AccessModifier
from animator_wrapper.codegen.core.generator import GeneratorError
from animator_wrapper.codegen.core.naming import create_csharp_sanitizer
from animator_wrapper.codegen.core.parameters import ParameterDescriptor, ParameterKind
from animator_wrapper.codegen.core.writer import CodeWriter
from animator_wrapper.codegen.languages.csharp.members import (
    accessor_name,
    csharp_type,
    write_constants,
    write_member,
    write_members,
)

MEMBERS_LOGGER = "animator_wrapper.codegen.languages.csharp.members"


def render_member(parameter, visibility=AccessModifier.PUBLIC):
    writer = CodeWriter()
    written = write_member(writer, parameter, visibility, create_csharp_sanitizer())
    return written, writer.getvalue()


class TestConstants:
    """Tests for hash constants."""

    def test_one_constant_per_parameter_of_any_kind(self):
        parameters = [
            ParameterDescriptor("speed", ParameterKind.FLOAT, 123),
            ParameterDescriptor("aim", ParameterKind.UNSUPPORTED, -5, "Vector2"),
        ]
        writer = CodeWriter()
        write_constants(writer, parameters, create_csharp_sanitizer())
        assert writer.getvalue() == (
            "const int SpeedProperty = 123;\n" "const int AimProperty = -5;\n"
        )


class TestProperties:
    """Tests for typed properties."""

    def test_float_property(self):
        written, code = render_member(
            ParameterDescriptor("speed", ParameterKind.FLOAT, 123)
        )
        assert written
        assert code == (
            "public float Speed\n"
            "{\n"
            "    get => _animator.GetFloat(SpeedProperty);\n"
            "    set { _animator.SetFloat(SpeedProperty, value); }\n"
            "}\n"
        )

    def test_int_property_uses_integer_accessors(self):
        _, code = render_member(ParameterDescriptor("combo", ParameterKind.INT, 1))
        assert "public int Combo" in code
        assert "_animator.GetInteger(ComboProperty)" in code
        assert "_animator.SetInteger(ComboProperty, value)" in code

    def test_bool_property(self):
        _, code = render_member(
            ParameterDescriptor("is_grounded", ParameterKind.BOOL, 1)
        )
        assert "public bool IsGrounded" in code
        assert "_animator.GetBool(IsGroundedProperty)" in code
        assert "_animator.SetBool(IsGroundedProperty, value)" in code

    @pytest.mark.parametrize("visibility", list(AccessModifier))
    def test_visibility_is_applied(self, visibility):
        _, code = render_member(
            ParameterDescriptor("speed", ParameterKind.FLOAT, 1), visibility
        )
        assert code.startswith(f"{visibility.value} float Speed\n")


class TestTriggers:
    """Tests for trigger methods."""

    def test_trigger_method_keeps_raw_name(self):
        written, code = render_member(
            ParameterDescriptor("jump_now", ParameterKind.TRIGGER, 9)
        )
        assert written
        assert code == (
            "public void jump_now()\n"
            "{\n"
            "    _animator.SetTrigger(JumpNowProperty);\n"
            "}\n"
        )

    def test_trigger_visibility(self):
        _, code = render_member(
            ParameterDescriptor("Jump", ParameterKind.TRIGGER, 9),
            AccessModifier.INTERNAL,
        )
        assert code.startswith("internal void Jump()\n")


class TestUnsupported:
    """Tests for parameters of unsupported kinds."""

    def test_nothing_written_and_error_logged(self, caplog):
        caplog.set_level(logging.ERROR, logger=MEMBERS_LOGGER)
        written, code = render_member(
            ParameterDescriptor("aim", ParameterKind.UNSUPPORTED, 1, "Vector2")
        )
        assert not written
        assert code == ""
        messages = [r.getMessage() for r in caplog.records if r.name == MEMBERS_LOGGER]
        assert messages == ["Unsupported parameter type: Vector2"]

    def test_write_members_reports_skips(self, caplog):
        caplog.set_level(logging.ERROR, logger=MEMBERS_LOGGER)
        parameters = [
            ParameterDescriptor("speed", ParameterKind.FLOAT, 1),
            ParameterDescriptor("aim", ParameterKind.UNSUPPORTED, 2, "Vector2"),
            ParameterDescriptor("Jump", ParameterKind.TRIGGER, 3),
        ]
        writer = CodeWriter()
        warnings = write_members(
            writer, parameters, AccessModifier.PUBLIC, create_csharp_sanitizer()
        )
        assert len(warnings) == 1
        assert "Vector2" in warnings[0] and "'aim'" in warnings[0]
        assert "Aim" not in writer.getvalue()

    def test_type_lookups_reject_non_property_kinds(self):
        with pytest.raises(GeneratorError):
            csharp_type(ParameterKind.TRIGGER)
        with pytest.raises(GeneratorError):
            accessor_name(ParameterKind.UNSUPPORTED)


class TestMemberSeparation:
    """Tests for blank lines between members."""

    def test_members_separated_by_single_blank_line(self, speed_and_jump):
        writer = CodeWriter()
        write_members(
            writer, speed_and_jump, AccessModifier.PUBLIC, create_csharp_sanitizer()
        )
        code = writer.getvalue()
        assert "}\n\npublic void Jump()" in code
        assert not code.endswith("\n\n")
