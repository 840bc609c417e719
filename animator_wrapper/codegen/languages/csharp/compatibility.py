"""
Structural compatibility check for generated wrappers.

The emitted ``IsCompatible`` compares an Animator against the parameter
snapshot taken at generation time. Parameters are matched by index, not
by name: the runtime offers no name lookup, so the check relies on the
controller keeping its parameter order.
"""

from typing import List, Sequence

from ...core.naming import NameSanitizer
from ...core.parameters import ParameterDescriptor
from ...core.templates import csharp_string_literal
from ...core.writer import CodeWriter

CANDIDATE_NAME = "animator"
PARAMETER_TYPE_ALIAS = "ParameterType"


def _type_clause(getter: str, parameter: ParameterDescriptor) -> str:
    # Unsupported labels need not exist in the ParameterType enum, so they
    # are compared by name to keep the generated source compilable
    if not parameter.is_supported:
        return f"{getter}.type.ToString() == {csharp_string_literal(parameter.kind_label)}"
    return f"{getter}.type == {PARAMETER_TYPE_ALIAS}.{parameter.kind_label}"


def compatibility_clauses(
    parameters: Sequence[ParameterDescriptor], sanitizer: NameSanitizer
) -> List[str]:
    """
    Boolean clauses of the check, in order.

    Non-null controller, parameter count, then a (type, name hash) pair
    per parameter.
    """
    clauses = [
        f"{CANDIDATE_NAME}.runtimeAnimatorController != null",
        f"{CANDIDATE_NAME}.parameterCount == {len(parameters)}",
    ]
    for index, parameter in enumerate(parameters):
        getter = f"{CANDIDATE_NAME}.GetParameter({index})"
        clauses.append(_type_clause(getter, parameter))
        clauses.append(
            f"{getter}.nameHash == {sanitizer.constant_name(parameter.name)}"
        )
    return clauses


def write_is_compatible(
    writer: CodeWriter,
    parameters: Sequence[ParameterDescriptor],
    sanitizer: NameSanitizer,
):
    clauses = compatibility_clauses(parameters, sanitizer)

    with writer.block(f"static bool IsCompatible(Animator {CANDIDATE_NAME})"):
        writer.line("return (")
        with writer.indented():
            for index, clause in enumerate(clauses):
                suffix = " &&" if index < len(clauses) - 1 else ""
                writer.line(f"{clause}{suffix}")
        writer.line(");")
