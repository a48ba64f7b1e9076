"""Compile SVG path data into canvas drawing operations."""

from __future__ import annotations

from .constants import ARITY, CommandKind
from .lexer import PathLexer, Token, tokenize
from .transform import TransformContext
from .translate import ResolvedOperation, compile_path, translate

__all__ = [
    "ARITY",
    "CommandKind",
    "PathLexer",
    "ResolvedOperation",
    "Token",
    "TransformContext",
    "compile_path",
    "tokenize",
    "translate",
]
