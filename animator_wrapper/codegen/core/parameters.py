"""
Core parameter model for code generation.

Converts an exported animator controller dump into the normalized,
ordered parameter list that generators consume.
"""

import zlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Tuple

from .naming import is_identifier


class ParameterKind(Enum):
    """Animator parameter kinds, valued after AnimatorControllerParameterType."""

    BOOL = "Bool"
    FLOAT = "Float"
    INT = "Int"
    TRIGGER = "Trigger"
    UNSUPPORTED = "Unsupported"

    @classmethod
    def from_label(cls, label: str) -> "ParameterKind":
        """Map a Unity type label to a kind; unknown labels are UNSUPPORTED."""
        for kind in cls:
            if kind is not cls.UNSUPPORTED and kind.value == label:
                return kind
        return cls.UNSUPPORTED


# Integer values of AnimatorControllerParameterType, as some exporters write them
UNITY_TYPE_CODES = {
    1: ParameterKind.FLOAT,
    3: ParameterKind.INT,
    4: ParameterKind.BOOL,
    9: ParameterKind.TRIGGER,
}


@dataclass(frozen=True)
class ParameterDescriptor:
    """One control parameter of an animator controller."""

    name: str
    kind: ParameterKind
    name_hash: int
    # Original type label; differs from kind.value only for UNSUPPORTED
    kind_label: str = ""

    def __post_init__(self):
        if not self.kind_label:
            if self.kind is ParameterKind.UNSUPPORTED:
                raise ValueError(f"Unsupported parameter '{self.name}' needs its type label")
            object.__setattr__(self, "kind_label", self.kind.value)
        # The label ends up in generated IsCompatible clauses
        if not is_identifier(self.kind_label):
            raise ValueError(
                f"Parameter '{self.name}' has an invalid type label: {self.kind_label!r}"
            )

    @property
    def is_supported(self) -> bool:
        return self.kind is not ParameterKind.UNSUPPORTED


@dataclass(frozen=True)
class ControllerAsset:
    """An extracted animator controller: its name and ordered parameters."""

    name: str
    parameters: Tuple[ParameterDescriptor, ...] = field(default_factory=tuple)


ParameterExtractor = Callable[[ControllerAsset], Iterable[ParameterDescriptor]]


def extract_parameters(asset: ControllerAsset) -> Tuple[ParameterDescriptor, ...]:
    """Default extractor: the parameters recorded on the asset, in order."""
    return tuple(asset.parameters)


def string_to_hash(name: str) -> int:
    """
    Compute the animator name hash for a parameter name.

    Matches ``Animator.StringToHash``: CRC-32 of the UTF-8 name,
    reinterpreted as a signed 32-bit integer.
    """
    value = zlib.crc32(name.encode("utf-8")) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def _parse_type(param_name: str, value: Any) -> Tuple[ParameterKind, str]:
    """Resolve a dump ``type`` (label or Unity integer code) to kind and label."""
    if value is None:
        raise ValueError(f"Parameter '{param_name}' is missing a 'type'")

    if isinstance(value, int) and not isinstance(value, bool):
        if value not in UNITY_TYPE_CODES:
            raise ValueError(f"Parameter '{param_name}' has unknown type code {value}")
        kind = UNITY_TYPE_CODES[value]
        return kind, kind.value

    if not isinstance(value, str) or not is_identifier(value):
        raise ValueError(f"Parameter '{param_name}' has an invalid type: {value!r}")

    return ParameterKind.from_label(value), value


def convert_controller_dump(data: Dict[str, Any]) -> ControllerAsset:
    """
    Convert an exported controller dump into a ControllerAsset.

    Expected shape::

        {
            "name": "PlayerController",
            "parameters": [
                {"name": "speed", "type": "Float", "nameHash": 123},
                ...
            ]
        }

    ``type`` is required, either as a label or as one of Unity's integer
    codes. ``nameHash`` is optional and computed with :func:`string_to_hash`
    when missing. Parameter order is preserved.

    Raises:
        ValueError: If the dump is structurally invalid.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Expected controller object, got {type(data).__name__}")

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Controller dump is missing a 'name'")

    raw_parameters = data.get("parameters", [])
    if not isinstance(raw_parameters, list):
        raise ValueError("Controller 'parameters' must be a list")

    parameters = []
    for index, entry in enumerate(raw_parameters):
        if not isinstance(entry, dict):
            raise ValueError(f"Parameter #{index} must be an object")

        param_name = entry.get("name")
        if not isinstance(param_name, str) or not param_name:
            raise ValueError(f"Parameter #{index} is missing a 'name'")

        kind, label = _parse_type(param_name, entry.get("type"))
        name_hash = entry.get("nameHash")
        if name_hash is None:
            name_hash = string_to_hash(param_name)
        elif isinstance(name_hash, bool) or not isinstance(name_hash, int):
            raise ValueError(f"Parameter '{param_name}' has a non-integer nameHash")
        elif not -(2**31) <= name_hash < 2**31:
            raise ValueError(f"Parameter '{param_name}' nameHash is not a 32-bit int")

        parameters.append(
            ParameterDescriptor(
                name=param_name,
                kind=kind,
                name_hash=name_hash,
                kind_label=label,
            )
        )

    return ControllerAsset(name=name, parameters=tuple(parameters))
