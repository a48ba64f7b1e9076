"""Tokenize SVG path data into drawing commands."""

from __future__ import annotations

from dataclasses import dataclass

from svg_canvas.errors import LexError

from .constants import ARGUMENT_SEPARATOR, ARITY, COMMAND_KINDS, WHITESPACE, CommandKind


@dataclass(frozen=True)
class Token:
    """A path command with its numeric arguments in document order."""

    kind: CommandKind
    arguments: tuple[float, ...] = ()


class PathLexer:
    """Forward-only lexer over the path data.

    Examples:
        >>> [t.arguments for t in PathLexer("M10-5 L1.5.5z").tokenize()]
        [(10.0, -5.0), (1.5, 0.5), ()]
    """

    def __init__(self, data: str) -> None:
        self.data = data
        self.position = 0

    def _peek(self) -> str:
        """The character under the cursor, empty at the end."""
        return self.data[self.position : self.position + 1]

    def _pop(self) -> str:
        char = self._peek()
        self.position += 1
        return char

    def _skip_whitespace(self) -> None:
        while self._peek() and self._peek() in WHITESPACE:
            self.position += 1

    def _read_number(self) -> float:
        """Read a single number.

        Only one decimal point is allowed per number; a second one starts
        the next number.

        Raises:
            LexError: If no digits could be read.
        """
        self._skip_whitespace()
        start = self.position
        buffer = ""

        if self._peek() == "-":
            buffer += self._pop()

        has_dot = False
        digits = 0
        while (char := self._peek()) and (char.isdigit() or char == "."):
            if char == ".":
                if has_dot:
                    break
                has_dot = True
            else:
                digits += 1
            buffer += self._pop()

        if not digits:
            # "", "-", "." and "-." are not numbers
            raise LexError(self.data[start : start + 1], start)

        return float(buffer)

    def _read_arguments(self, count: int) -> tuple[float, ...]:
        """Read `count` numbers separated by an optional comma."""
        values: list[float] = []
        for ix in range(count):
            if ix:
                self._skip_whitespace()
                if self._peek() == ARGUMENT_SEPARATOR:
                    self._pop()
            values.append(self._read_number())

        return tuple(values)

    def tokenize(self) -> list[Token]:
        """Tokenize the whole path data.

        Raises:
            LexError: If an unrecognized character or a malformed number
                is found.
        """
        tokens: list[Token] = []

        while char := self._peek():
            if char in WHITESPACE:
                self.position += 1
                continue

            kind = COMMAND_KINDS.get(char)
            if kind is None:
                raise LexError(char, self.position)

            self.position += 1
            tokens.append(Token(kind, self._read_arguments(ARITY[kind])))

        return tokens


def tokenize(data: str) -> list[Token]:
    """Tokenize SVG path data.

    Args:
        data: The content of the `d` attribute.

    Returns:
        The commands in document order.
    """
    return PathLexer(data).tokenize()
