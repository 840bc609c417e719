"""
C# animator wrapper generator implementation.

Generates a Unity component exposing an animator controller's parameters
as typed properties and trigger methods.
"""

from contextlib import ExitStack
from typing import Dict, Optional, Sequence

from ...core.config import AccessModifier, GeneratorConfig
from ...core.generator import CodeGenerator, require
from ...core.naming import NameSanitizer, create_csharp_sanitizer
from ...core.parameters import ParameterDescriptor
from ...core.templates import csharp_string_literal
from ...core.writer import CodeWriter
from .compatibility import PARAMETER_TYPE_ALIAS, write_is_compatible
from .members import ANIMATOR_FIELD_NAME, write_constants, write_members

TOOL_NAME = "AnimatorWrapper"
BANNER_TEMPLATE_NAME = "banner.cs.j2"

BANNER_TEMPLATE = """
/*******************************************************************************
 *                             !!! WARNING !!!                                 *
 *                                                                             *
 *         Do not modify this file--any changes will be overwritten.           *
 *                This file was generated by {{ tool_name }}.                  *
 ******************************************************************************/
"""

USINGS = (
    "System",
    "UnityEngine",
    f"{PARAMETER_TYPE_ALIAS} = UnityEngine.AnimatorControllerParameterType",
)


class CSharpWrapperGenerator(CodeGenerator):
    """Code generator for Unity animator wrapper components."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize C# generator with configuration."""
        super().__init__(config)
        self._sanitizer = create_csharp_sanitizer()

    @property
    def language_name(self) -> str:
        return "csharp"

    @property
    def file_extension(self) -> str:
        return ".cs"

    @property
    def sanitizer(self) -> NameSanitizer:
        return self._sanitizer

    def get_builtin_templates(self) -> Dict[str, str]:
        return {BANNER_TEMPLATE_NAME: BANNER_TEMPLATE}

    def generate(
        self, parameters: Sequence[ParameterDescriptor], controller_name: str
    ) -> str:
        """Generate the complete wrapper source file."""
        require(parameters is not None, "parameters == None")
        require(controller_name is not None, "controller_name == None")
        class_name = self.config.class_name
        if class_name is None:
            class_name = controller_name
        require(class_name is not None, "class_name == None")
        require(bool(class_name.strip()), "class name empty")

        parameters = tuple(parameters)
        for index, parameter in enumerate(parameters):
            require(bool(parameter.name), f"parameter #{index} has an empty name")

        self.generation_warnings = []
        config = self.config
        writer = CodeWriter(config.indent_size)

        writer.raw(self._render_banner(controller_name, class_name))
        writer.blank_line()
        for using in USINGS:
            writer.line(f"using {using};")
        writer.blank_line()

        with ExitStack() as scopes:
            if config.has_namespace:
                scopes.enter_context(
                    writer.block(f"namespace {config.namespace_name.strip()}")
                )

            with writer.block(self._class_header(class_name)):
                write_constants(writer, parameters, self.sanitizer)
                writer.blank_line()
                self._write_animator_field(writer, config.visibility)
                writer.blank_line()
                self._write_start(writer, controller_name)
                writer.blank_line()
                self.generation_warnings.extend(
                    write_members(writer, parameters, config.visibility, self.sanitizer)
                )
                writer.blank_line()
                write_is_compatible(writer, parameters, self.sanitizer)
                writer.blank_line()
                self._write_reset(writer)

        require(writer.depth == 0, f"unbalanced blocks (depth {writer.depth})")
        return writer.getvalue()

    def _render_banner(self, controller_name: str, class_name: str) -> str:
        return self.render_template(
            BANNER_TEMPLATE_NAME,
            {
                "tool_name": TOOL_NAME,
                "controller_name": controller_name,
                "class_name": class_name,
            },
        )

    def _class_header(self, class_name: str) -> str:
        # A partial class leaves visibility and base type to the consumer's half
        if self.config.is_partial:
            return f"partial class {class_name}"

        header = f"{AccessModifier.PUBLIC.value} class {class_name}"
        if self.config.base_class.strip():
            header += f" : {self.config.base_class.strip()}"
        return header

    def _write_animator_field(self, writer: CodeWriter, visibility: AccessModifier):
        writer.line(f"[Header({csharp_string_literal(TOOL_NAME)})]")
        tooltip = f"The animator bound to code generated by {TOOL_NAME}"
        writer.line(f"[Tooltip({csharp_string_literal(tooltip)})]")
        writer.line("[SerializeField]")
        writer.line(f"Animator {ANIMATOR_FIELD_NAME} = null;")

        writer.blank_line()

        with writer.block(f"{visibility.value} Animator Animator"):
            writer.line(f"get => {ANIMATOR_FIELD_NAME};")
            writer.line(f"set {{ {ANIMATOR_FIELD_NAME} = value; }}")

    def _write_start(self, writer: CodeWriter, controller_name: str):
        message = (
            f"{TOOL_NAME} is out of sync with RuntimeAnimatorController. "
            f"Check that you have '{controller_name}' assigned or regenerate the wrapper."
        )

        with writer.block("protected void Start()"):
            # Only checked in the editor
            writer.line("#if UNITY_EDITOR")
            writer.line(
                f"if (!IsCompatible({ANIMATOR_FIELD_NAME})) "
                "throw new InvalidOperationException("
            )
            with writer.indented():
                writer.line(csharp_string_literal(message))
            writer.line(");")
            writer.line("#endif")

    def _write_reset(self, writer: CodeWriter):
        with writer.block("void Reset()"):
            writer.line("var animators = GetComponentsInChildren<Animator>();")
            with writer.block("foreach (var animator in animators)"):
                with writer.block("if (IsCompatible(animator))"):
                    writer.line(f"{ANIMATOR_FIELD_NAME} = animator;")
                    writer.line("return;")
            warning = (
                "Unable to find animator with compatible "
                "RuntimeAnimatorController in GameObject"
            )
            writer.line(f"Debug.LogWarning({csharp_string_literal(warning)}, this);")


def create_csharp_generator(config: Optional[GeneratorConfig] = None) -> CSharpWrapperGenerator:
    """Create a C# wrapper generator with the given or default configuration."""
    return CSharpWrapperGenerator(config)
