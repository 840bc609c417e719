"""
Animator wrapper code generation module.

Generates typed C# wrappers from animator controller parameters.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.config import AccessModifier, ConfigError, GeneratorConfig, load_config
from .core.generator import GeneratorError, GenerationResult, generate_code
from .core.naming import pascal_case
from .core.parameters import (
    ControllerAsset,
    ParameterDescriptor,
    ParameterExtractor,
    ParameterKind,
    convert_controller_dump,
    extract_parameters,
)
from .languages.csharp import CSharpWrapperGenerator


def resolve_config(
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GeneratorConfig:
    """Accept a GeneratorConfig, an override dict, a config file path, or None."""
    if isinstance(config, GeneratorConfig):
        return config
    if isinstance(config, (str, Path)):
        return load_config(config_file=config)
    if isinstance(config, dict):
        return load_config(custom_config=config)
    if config is None:
        return load_config()
    raise ConfigError(f"Invalid config type: {type(config)}")


def generate_from_controller(
    asset: ControllerAsset,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    extractor: ParameterExtractor = extract_parameters,
) -> GenerationResult:
    """
    Generate a wrapper for a controller asset.

    Args:
        asset: The controller to wrap
        config: Generator configuration (object, overrides dict, or file path)
        extractor: Callable returning the asset's ordered parameters

    Returns:
        GenerationResult with generated code
    """
    if asset is None:
        return GenerationResult.error("Code generation failed: controller is None")

    try:
        final_config = resolve_config(config)
    except ConfigError as e:
        return GenerationResult.error(f"Configuration error: {e}", exception=e)

    generator = CSharpWrapperGenerator(final_config)
    try:
        parameters = tuple(extractor(asset))
    except Exception as e:
        return GenerationResult.error(f"Parameter extraction failed: {e}", exception=e)

    return generate_code(generator, parameters, asset.name)


def generate_from_dump(
    data: Dict[str, Any],
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GenerationResult:
    """Generate a wrapper from an exported controller dump."""
    try:
        asset = convert_controller_dump(data)
    except ValueError as e:
        return GenerationResult.error(f"Invalid controller dump: {e}", exception=e)
    return generate_from_controller(asset, config)


__all__ = [
    "AccessModifier",
    "ConfigError",
    "ControllerAsset",
    "CSharpWrapperGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "ParameterDescriptor",
    "ParameterKind",
    "convert_controller_dump",
    "extract_parameters",
    "generate_code",
    "generate_from_controller",
    "generate_from_dump",
    "load_config",
    "pascal_case",
    "resolve_config",
]
