"""Compile SVG paths into canvas drawing programs."""

from __future__ import annotations

from .codegen import CodeGen, GradientStop, LinearGradient
from .draw import compile_tree, svg_to_canvas_script
from .errors import (
    AttributeValueError,
    LexError,
    PathDataError,
    TranslationError,
    UnknownGradientError,
)
from .path import (
    ResolvedOperation,
    Token,
    TransformContext,
    compile_path,
    tokenize,
    translate,
)

__all__ = [
    "AttributeValueError",
    "CodeGen",
    "GradientStop",
    "LexError",
    "LinearGradient",
    "PathDataError",
    "ResolvedOperation",
    "Token",
    "TransformContext",
    "TranslationError",
    "UnknownGradientError",
    "compile_path",
    "compile_tree",
    "svg_to_canvas_script",
    "tokenize",
    "translate",
]
