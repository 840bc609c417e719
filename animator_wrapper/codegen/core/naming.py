"""
Naming utilities for safe code generation.

Handles identifier case conversion, C# keyword checks and name
collision detection for generated members.
"""

import re
from typing import Dict, Iterable, List, Set

# Any run of characters that are not letters or digits separates words
_WORD_SEPARATOR = re.compile(r"[\W_]+")
_IDENTIFIER = re.compile(r"@?[^\W\d]\w*")

FALLBACK_NAME = "Parameter"

CSHARP_RESERVED_WORDS = {
    "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
    "char", "checked", "class", "const", "continue", "decimal", "default",
    "delegate", "do", "double", "else", "enum", "event", "explicit",
    "extern", "false", "finally", "fixed", "float", "for", "foreach",
    "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
    "lock", "long", "namespace", "new", "null", "object", "operator",
    "out", "override", "params", "private", "protected", "public",
    "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
    "stackalloc", "static", "string", "struct", "switch", "this", "throw",
    "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
    "ushort", "using", "virtual", "void", "volatile", "while",
}


def is_identifier(name: str) -> bool:
    """Syntactic C# identifier check (optional ``@`` verbatim prefix)."""
    return bool(name) and _IDENTIFIER.fullmatch(name) is not None


def _capitalize_first(word: str) -> str:
    # Some characters upper-case to several code points (e.g. "ΐ"), which
    # may include combining marks the separator pattern would split on
    first = word[0].upper()
    if len(first) != 1 or _WORD_SEPARATOR.match(first):
        first = word[0]
    return first + word[1:]


def pascal_case(raw: str) -> str:
    """
    Convert a raw parameter name to a PascalCase identifier.

    Words are split on runs of non-alphanumeric characters (underscore
    included). Each word gets its first character upper-cased and keeps
    the rest as authored, so ``moveSpeed`` becomes ``MoveSpeed`` and
    ``is_grounded`` becomes ``IsGrounded``. A leading digit gets a ``_``
    prefix. Applying the function to its own output is a no-op.
    """
    words = [word for word in _WORD_SEPARATOR.split(raw) if word]
    name = "".join(_capitalize_first(word) for word in words)

    if not name:
        return FALLBACK_NAME

    if name[0].isdigit():
        name = f"_{name}"

    return name


class NameSanitizer:
    """Applies case conversion and tracks conflicts between generated names."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
        """
        self.reserved_words = reserved_words or set()
        self._name_cache: Dict[str, str] = {}

    def member_name(self, raw: str) -> str:
        """PascalCase member name for a raw parameter name."""
        if raw not in self._name_cache:
            self._name_cache[raw] = pascal_case(raw)
        return self._name_cache[raw]

    def constant_name(self, raw: str) -> str:
        """Name of the hash constant generated for a parameter."""
        return f"{self.member_name(raw)}Property"

    def is_valid_identifier(self, name: str) -> bool:
        """Check whether name is usable as an identifier in the target language."""
        if not is_identifier(name):
            return False
        return name.startswith("@") or name not in self.reserved_words

    def find_collisions(self, names: Iterable[str]) -> Dict[str, List[str]]:
        """
        Group distinct raw names that normalize to the same identifier.

        Returns:
            Mapping of generated identifier to the raw names producing it,
            only for identifiers produced by more than one raw name.
        """
        groups: Dict[str, List[str]] = {}
        for raw in names:
            converted = self.member_name(raw)
            group = groups.setdefault(converted, [])
            if raw not in group:
                group.append(raw)

        return {name: raws for name, raws in groups.items() if len(raws) > 1}


def create_csharp_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for C#."""
    return NameSanitizer(CSHARP_RESERVED_WORDS)
