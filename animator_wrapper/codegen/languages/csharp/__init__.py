"""
C# code generator module.

Generates Unity animator wrapper components.
"""

from .compatibility import compatibility_clauses, write_is_compatible
from .generator import CSharpWrapperGenerator, create_csharp_generator
from .members import write_constants, write_member, write_members

__all__ = [
    "CSharpWrapperGenerator",
    "create_csharp_generator",
    "compatibility_clauses",
    "write_is_compatible",
    "write_constants",
    "write_member",
    "write_members",
]
