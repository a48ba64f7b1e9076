"""Errors raised while compiling SVG path data and emitting canvas code."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg_canvas.path.lexer import Token


class PathDataError(ValueError):
    """Base class for errors in the path data compiler."""


class LexError(PathDataError):
    """An unrecognized character was found in the path data."""

    def __init__(self, char: str, position: int) -> None:
        """Initialize the error.

        Args:
            char: The offending character, empty at the end of the input.
            position: The cursor position of the offending character.
        """
        self.char = char
        self.position = position
        shown = repr(char) if char else "end of input"
        super().__init__(f"Unrecognized character {shown} at position {position}")


class TranslationError(PathDataError):
    """A token reached the translator that it cannot handle."""

    def __init__(self, token: Token) -> None:
        self.token = token
        super().__init__(f"Unknown token kind {token.kind!r}")


class AttributeValueError(ValueError):
    """An SVG attribute holds a value that cannot be used."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Unsupported value {value!r} for attribute {name!r}")


class UnknownGradientError(LookupError):
    """A gradient was referenced before it was defined."""

    def __init__(self, gradient_id: str) -> None:
        self.gradient_id = gradient_id
        super().__init__(f"No gradient defined with id {gradient_id!r}")
