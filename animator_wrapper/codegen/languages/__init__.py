"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .csharp import CSharpWrapperGenerator, create_csharp_generator

__all__ = ["CSharpWrapperGenerator", "create_csharp_generator"]
