"""Backends for cost-table output generation (Zig)."""

from .zig_generator import DEFAULT_DECL_NAME, DEFAULT_ELEMENT_TYPE, generate_zig, save_zig_file

__all__ = ["DEFAULT_DECL_NAME", "DEFAULT_ELEMENT_TYPE", "generate_zig", "save_zig_file"]
