"""
Base generator interface for wrapper code generation.

Defines the contract that language generators implement, plus the
result container and the error-handling entry point.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...logging_config import get_logger
from .config import GeneratorConfig, get_config_manager
from .naming import NameSanitizer
from .parameters import ParameterDescriptor, ParameterKind
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Raised when a generation precondition is violated."""

    pass


def require(condition: bool, message: str):
    """Fail fast with GeneratorError when a precondition does not hold."""
    if not condition:
        raise GeneratorError(f"Assertion failed: {message}")


class CodeGenerator(ABC):
    """Abstract base class for wrapper generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        # Non-fatal issues found by the most recent generate() call
        self.generation_warnings: List[str] = []

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'csharp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.cs')."""
        pass

    @property
    @abstractmethod
    def sanitizer(self) -> NameSanitizer:
        pass

    def get_builtin_templates(self) -> Dict[str, str]:
        """In-memory templates shipped with the generator."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            template_dir = (
                Path(self.config.template_dir) if self.config.template_dir else None
            )
            self._template_engine = create_template_engine(
                template_dir, self.get_builtin_templates()
            )
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    @abstractmethod
    def generate(
        self, parameters: Sequence[ParameterDescriptor], controller_name: str
    ) -> str:
        """
        Generate the wrapper source for a controller.

        Args:
            parameters: Ordered parameter descriptors
            controller_name: Name of the source controller asset

        Returns:
            Generated code as a string
        """
        pass

    def validate_parameters(
        self, parameters: Sequence[ParameterDescriptor], controller_name: str
    ) -> List[str]:
        """
        Check parameters and configuration for data-quality issues.

        Raises:
            GeneratorError: On name collisions when ``strict_names`` is set

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = get_config_manager().validate_config(self.config)

        if self.config.class_name is None and controller_name:
            if not self.sanitizer.is_valid_identifier(controller_name):
                warnings.append(
                    f"Controller name '{controller_name}' is not a valid class name"
                )

        for parameter in parameters:
            if parameter.kind is ParameterKind.TRIGGER:
                if not self.sanitizer.is_valid_identifier(parameter.name):
                    warnings.append(
                        f"Trigger '{parameter.name}' is not a valid method name"
                    )

        collisions = self.sanitizer.find_collisions(p.name for p in parameters)
        for name, raws in collisions.items():
            message = f"Parameters {', '.join(map(repr, raws))} all map to '{name}'"
            if self.config.strict_names:
                raise GeneratorError(f"Name collision: {message}")
            warnings.append(message)

        return warnings

    def format_code(self, code: str) -> str:
        """
        Strip trailing whitespace and collapse runs of blank lines.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator,
    parameters: Sequence[ParameterDescriptor],
    controller_name: str,
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        parameters: Ordered parameter descriptors
        controller_name: Name of the source controller asset

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        parameters = tuple(parameters)
        warnings = generator.validate_parameters(parameters, controller_name)

        for warning in warnings:
            logger.warning(warning)

        code = generator.generate(parameters, controller_name)
        warnings.extend(generator.generation_warnings)

        formatted_code = generator.format_code(code)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "controller": controller_name,
            "class_name": generator.config.class_name or controller_name,
            "parameter_count": len(parameters),
            "skipped_parameters": sum(1 for p in parameters if not p.is_supported),
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.exception("Code generation failed")
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
