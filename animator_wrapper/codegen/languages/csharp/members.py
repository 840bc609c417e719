"""
Member synthesis for animator wrappers.

Maps each parameter descriptor to its hash constant and, depending on
kind, a typed property or a trigger method.
"""

from typing import List, Sequence

from ....logging_config import get_logger
from ...core.config import AccessModifier
from ...core.generator import GeneratorError
from ...core.naming import NameSanitizer
from ...core.parameters import ParameterDescriptor, ParameterKind
from ...core.writer import CodeWriter

logger = get_logger(__name__)

ANIMATOR_FIELD_NAME = "_animator"

CSHARP_TYPE_MAP = {
    ParameterKind.BOOL: "bool",
    ParameterKind.FLOAT: "float",
    ParameterKind.INT: "int",
}

# Suffix of the Animator.Get*/Set* accessors for each kind
ACCESSOR_NAME_MAP = {
    ParameterKind.BOOL: "Bool",
    ParameterKind.FLOAT: "Float",
    ParameterKind.INT: "Integer",
}


def csharp_type(kind: ParameterKind) -> str:
    try:
        return CSHARP_TYPE_MAP[kind]
    except KeyError:
        raise GeneratorError(f"Unexpected parameter type {kind.value}") from None


def accessor_name(kind: ParameterKind) -> str:
    try:
        return ACCESSOR_NAME_MAP[kind]
    except KeyError:
        raise GeneratorError(f"Unexpected parameter type {kind.value}") from None


def write_constants(
    writer: CodeWriter,
    parameters: Sequence[ParameterDescriptor],
    sanitizer: NameSanitizer,
):
    """One ``const int`` per parameter, whatever its kind."""
    for parameter in parameters:
        writer.line(
            f"const int {sanitizer.constant_name(parameter.name)} = {parameter.name_hash};"
        )


def write_property(
    writer: CodeWriter,
    parameter: ParameterDescriptor,
    visibility: AccessModifier,
    sanitizer: NameSanitizer,
):
    """Typed property reading and writing the parameter through the animator."""
    constant = sanitizer.constant_name(parameter.name)
    accessor = accessor_name(parameter.kind)

    header = (
        f"{visibility.value} {csharp_type(parameter.kind)} "
        f"{sanitizer.member_name(parameter.name)}"
    )
    with writer.block(header):
        writer.line(f"get => {ANIMATOR_FIELD_NAME}.Get{accessor}({constant});")
        writer.line(f"set {{ {ANIMATOR_FIELD_NAME}.Set{accessor}({constant}, value); }}")


def write_trigger(
    writer: CodeWriter,
    parameter: ParameterDescriptor,
    visibility: AccessModifier,
    sanitizer: NameSanitizer,
):
    """Zero-argument method firing the trigger. Keeps the authored name."""
    constant = sanitizer.constant_name(parameter.name)
    with writer.block(f"{visibility.value} void {parameter.name}()"):
        writer.line(f"{ANIMATOR_FIELD_NAME}.SetTrigger({constant});")


def write_member(
    writer: CodeWriter,
    parameter: ParameterDescriptor,
    visibility: AccessModifier,
    sanitizer: NameSanitizer,
) -> bool:
    """
    Write the member for one parameter.

    Returns:
        False if the parameter kind is unsupported and nothing was written
    """
    if parameter.kind in CSHARP_TYPE_MAP:
        write_property(writer, parameter, visibility, sanitizer)
    elif parameter.kind is ParameterKind.TRIGGER:
        write_trigger(writer, parameter, visibility, sanitizer)
    else:
        logger.error("Unsupported parameter type: %s", parameter.kind_label)
        return False
    return True


def write_members(
    writer: CodeWriter,
    parameters: Sequence[ParameterDescriptor],
    visibility: AccessModifier,
    sanitizer: NameSanitizer,
) -> List[str]:
    """
    Write all members, separated by blank lines.

    Returns:
        Warnings for parameters that produced no member
    """
    warnings = []
    for index, parameter in enumerate(parameters):
        if not write_member(writer, parameter, visibility, sanitizer):
            warnings.append(
                f"Unsupported parameter type {parameter.kind_label} "
                f"for '{parameter.name}'; no member generated"
            )
        elif index < len(parameters) - 1:
            writer.blank_line()
    return warnings
