"""Backends for static container output generation (Python source)."""

from .codegen import DeclStyle, generate_module, save_module_file

__all__ = ["DeclStyle", "generate_module", "save_module_file"]
