"""
Wrapper generation settings.

Settings are layered: dataclass defaults, then an optional JSON file,
then explicit overrides (usually CLI flags). Unknown keys are errors;
questionable C# names are only warnings.
"""

import json
from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .naming import create_csharp_sanitizer


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class AccessModifier(Enum):
    """Visibility applied to generated accessor members."""

    PUBLIC = "public"
    INTERNAL = "internal"
    PROTECTED = "protected"
    PRIVATE = "private"

    @classmethod
    def parse(cls, value: Union[str, "AccessModifier"]) -> "AccessModifier":
        """Accept an AccessModifier or its (case-insensitive) keyword."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ConfigError(f"Invalid visibility '{value}'. Expected one of: {valid}")


@dataclass
class GeneratorConfig:
    """Configuration for a single wrapper generation request."""

    # Class shape
    namespace_name: Optional[str] = None
    class_name: Optional[str] = None  # None: use the controller's name
    visibility: AccessModifier = AccessModifier.PUBLIC
    is_partial: bool = False
    base_class: str = "MonoBehaviour"

    # Code style
    indent_size: int = 4

    # Naming
    strict_names: bool = False  # name collisions become fatal

    # Templates and output
    template_dir: Optional[str] = None
    output_file: Optional[str] = None

    def __post_init__(self):
        self.visibility = AccessModifier.parse(self.visibility)
        if not isinstance(self.indent_size, int) or self.indent_size < 1:
            raise ConfigError(f"indent_size must be a positive integer: {self.indent_size}")

    @property
    def has_namespace(self) -> bool:
        return bool(self.namespace_name and self.namespace_name.strip())


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {
            "namespace_name": None,
            "class_name": None,
            "visibility": AccessModifier.PUBLIC.value,
            "is_partial": False,
            "base_class": "MonoBehaviour",
            "indent_size": 4,
            "strict_names": False,
            "template_dir": None,
            "output_file": None,
        }

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Defaults, overlaid by the file, overlaid by custom_config
        """
        base_config = self._defaults.copy()

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}
        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        return GeneratorConfig(**config_dict)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        config_dict["visibility"] = config.visibility.value

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []
        sanitizer = create_csharp_sanitizer()

        if config.has_namespace:
            for segment in config.namespace_name.strip().split("."):
                if not sanitizer.is_valid_identifier(segment):
                    warnings.append(f"Invalid C# namespace: {config.namespace_name}")
                    break

        if config.class_name is not None and not sanitizer.is_valid_identifier(
            config.class_name
        ):
            warnings.append(f"Invalid C# class name: {config.class_name}")

        if not config.is_partial and not config.base_class.strip():
            warnings.append("Non-partial wrapper has no base class")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)

