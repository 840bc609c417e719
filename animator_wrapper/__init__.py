"""
animator-wrapper: typed C# wrappers for Unity animator controllers.
"""

from .codegen import (
    AccessModifier,
    ControllerAsset,
    GenerationResult,
    GeneratorConfig,
    ParameterDescriptor,
    ParameterKind,
    generate_from_controller,
    generate_from_dump,
)

__version__ = "0.1.0"

__all__ = [
    "AccessModifier",
    "ControllerAsset",
    "GenerationResult",
    "GeneratorConfig",
    "ParameterDescriptor",
    "ParameterKind",
    "generate_from_controller",
    "generate_from_dump",
]
