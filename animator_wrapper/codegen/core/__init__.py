"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    generate_code,
    require,
)
from .parameters import (
    ControllerAsset,
    ParameterDescriptor,
    ParameterExtractor,
    ParameterKind,
    convert_controller_dump,
    extract_parameters,
    string_to_hash,
)
from .naming import NameSanitizer, create_csharp_sanitizer, pascal_case
from .config import (
    AccessModifier,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine
from .writer import CodeWriter

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "require",
    # Parameter model
    "ControllerAsset",
    "ParameterDescriptor",
    "ParameterExtractor",
    "ParameterKind",
    "convert_controller_dump",
    "extract_parameters",
    "string_to_hash",
    # Naming utilities
    "NameSanitizer",
    "create_csharp_sanitizer",
    "pascal_case",
    # Configuration system
    "AccessModifier",
    "ConfigError",
    "ConfigManager",
    "GeneratorConfig",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Emission
    "CodeWriter",
]
