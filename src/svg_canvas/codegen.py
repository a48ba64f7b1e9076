"""Emit canvas drawing operations as a self-invoking JavaScript program."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from svg_canvas.errors import UnknownGradientError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from svg_canvas.path import ResolvedOperation

LOGGER = logging.getLogger(__name__)

DEFAULT_RECEIVER = "ctx"
"""Name of the drawing context variable in the generated program."""

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 800

PROGRAM_NAMES = frozenset({"id", "canvas", "document", "crypto"})
"""Names the prologue and epilogue of the program already use."""

JS_KEYWORDS = frozenset(
    "await break case catch class const continue debugger default delete do else "
    "enum export extends false finally for function if import in instanceof let "
    "new null return super switch this throw true try typeof undefined var void "
    "while with yield".split()
)
"""Reserved words that cannot name a variable."""

GRADIENT_VAR_PATTERN = re.compile(r"gradient\d+")
"""Variable names of emitted gradients."""


@dataclass(frozen=True)
class GradientStop:
    """A colour stop at a fractional offset."""

    offset: float
    color: str


@dataclass(frozen=True)
class LinearGradient:
    """A linear gradient between two points."""

    id: str
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    stops: tuple[GradientStop, ...] = field(default_factory=tuple)


def stringify(value: Any) -> str:
    """Convert a value into a JavaScript literal.

    Examples:
        >>> stringify("#000000")
        "'#000000'"
        >>> stringify(10.0), stringify(2.5), stringify(True)
        ('10', '2.5', 'true')
    """
    if isinstance(value, np.generic):
        value = value.item()

    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"

    # bool before int, bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"

    if value is None:
        return "null"

    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)

    return str(value)


class CodeGen:
    """Append-only buffer of canvas statements.

    The statements are emitted in order and wrapped into a fixed prologue,
    which creates the canvas, and a fixed epilogue, which returns the image
    as a data URL.
    """

    def __init__(
        self,
        receiver: str = DEFAULT_RECEIVER,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
    ) -> None:
        """Initialize the generator.

        Args:
            receiver: Variable name of the 2D context in the program.
            width: Width of the canvas. Can be changed until serialization.
            height: Height of the canvas. Can be changed until serialization.

        Raises:
            ValueError: If the receiver is not an identifier or collides with a
                variable of the generated program.
        """
        if (
            not receiver.isidentifier()
            or not receiver.isascii()
            or receiver in JS_KEYWORDS
        ):
            raise ValueError(f"Receiver {receiver!r} is not an identifier")
        if receiver in PROGRAM_NAMES or GRADIENT_VAR_PATTERN.fullmatch(receiver):
            raise ValueError(f"Receiver {receiver!r} is used by the generated program")

        self.receiver = receiver
        self.width = width
        self.height = height
        self._statements: list[str] = []
        self._gradients: dict[str, str] = {}
        self._gradient_count = 0

    def __repr__(self) -> str:
        return (
            f"CodeGen(receiver={self.receiver!r}, width={self.width}, "
            f"height={self.height}, statements={len(self._statements)})"
        )

    def __str__(self) -> str:
        return self.serialize()

    @property
    def statements(self) -> tuple[str, ...]:
        """The emitted statements without prologue and epilogue."""
        return tuple(self._statements)

    def emit_call(self, name: str, *arguments: Any) -> None:
        """Call a method of the drawing context."""
        params = ", ".join(stringify(x) for x in arguments)
        self._statements.append(f"{self.receiver}.{name}({params});")

    def emit_assign(self, name: str, value: Any, raw_literal: bool = False) -> None:
        """Assign a property of the drawing context.

        Args:
            name: The property name, e.g. `fillStyle`.
            value: The value to assign.
            raw_literal: Insert the value verbatim instead of as a literal,
                used to reference a gradient variable.
        """
        literal = str(value) if raw_literal else stringify(value)
        self._statements.append(f"{self.receiver}.{name} = {literal};")

    def emit_operations(self, operations: Iterable[ResolvedOperation]) -> None:
        """Emit a call for every resolved operation."""
        for operation in operations:
            self.emit_call(operation.name, *operation.arguments)

    def define_linear_gradient(
        self,
        gradient_id: str,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        *stops: GradientStop,
    ) -> str:
        """Emit a linear gradient and remember its variable.

        Defining the same id again replaces the previous variable.

        Returns:
            The variable name holding the gradient.
        """
        var = f"gradient{self._gradient_count}"
        self._gradient_count += 1

        coords = ", ".join(stringify(x) for x in (x1, y1, x2, y2))
        self._statements.append(
            f"const {var} = {self.receiver}.createLinearGradient({coords});"
        )
        for stop in stops:
            self._statements.append(
                f"{var}.addColorStop({stringify(stop.offset)}, {stringify(stop.color)});"
            )

        if gradient_id in self._gradients:
            LOGGER.debug("Redefining gradient %r", gradient_id)
        self._gradients[gradient_id] = var

        return var

    def add_gradient(self, gradient: LinearGradient) -> str:
        """Emit a `LinearGradient`."""
        return self.define_linear_gradient(
            gradient.id,
            gradient.x1,
            gradient.y1,
            gradient.x2,
            gradient.y2,
            *gradient.stops,
        )

    def resolve_gradient_var(self, gradient_id: str) -> str:
        """Get the variable of a defined gradient.

        Raises:
            UnknownGradientError: If no gradient with the id was defined.
        """
        try:
            return self._gradients[gradient_id]
        except KeyError:
            raise UnknownGradientError(gradient_id) from None

    def _prologue(self) -> list[str]:
        return [
            "// Initialize canvas",
            "const id = crypto.randomUUID();",
            'const canvas = document.createElement("canvas");',
            'canvas.setAttribute("id", id);',
            f'canvas.setAttribute("width", {stringify(self.width)});',
            f'canvas.setAttribute("height", {stringify(self.height)});',
            f'const {self.receiver} = canvas.getContext("2d");',
            "",
            "// Begin generation",
        ]

    def _epilogue(self) -> list[str]:
        return ["return canvas.toDataURL();"]

    def serialize(self) -> str:
        """The full program text.

        Serializing does not change the buffer, so repeated calls return the
        same text.
        """
        lines = [*self._prologue(), *self._statements, *self._epilogue()]
        body = "".join(f"{line}\n" for line in lines)
        return f"(function () {{\n\n{body}\n}})()"
