"""Backends for mznbridge output generation (MiniZinc source)."""

from .minizinc_generator import format_value, render_model, save_model_file, serialize, solve_item

__all__ = ["format_value", "render_model", "save_model_file", "serialize", "solve_item"]
