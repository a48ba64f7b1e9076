"""Resolve path tokens into absolute canvas operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from svg_canvas.errors import TranslationError

from .constants import BEZIER_CURVE_TO, LINE_TO, MOVE_TO, PAINT, CommandKind
from .lexer import Token, tokenize
from .transform import TransformContext

if TYPE_CHECKING:
    from collections.abc import Iterable

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedOperation:
    """A canvas operation with absolute coordinates."""

    name: str
    arguments: tuple[float, ...] = ()


def _offset(context: TransformContext, is_rel: bool) -> tuple[float, float]:
    """The origin the arguments of a command are relative to."""
    if is_rel:
        return context.current_point
    return 0.0, 0.0


def _resolve_points(token: Token, context: TransformContext) -> list[float]:
    """Resolve (x, y) pairs in document order."""
    ox, oy = _offset(context, token.kind.is_relative)
    args = token.arguments
    resolved: list[float] = []
    for ix in range(0, len(args), 2):
        resolved.extend((args[ix] + ox, args[ix + 1] + oy))
    return resolved


def _parse_vertical_horizontal(
    token: Token, context: TransformContext
) -> tuple[float, float]:
    """Resolve the end point of an axis-aligned line."""
    (value,) = token.arguments
    x, y = context.current_point

    if token.kind in {CommandKind.HORIZONTAL, CommandKind.REL_HORIZONTAL}:
        return (x + value if token.kind.is_relative else value), y

    return x, (y + value if token.kind.is_relative else value)


def _translate_token(token: Token, context: TransformContext) -> list[ResolvedOperation]:
    """Translate a single token and move the current point to its end."""
    kind = token.kind

    if kind in {CommandKind.MOVE_TO, CommandKind.REL_MOVE_TO}:
        x, y = _resolve_points(token, context)
        context.translate(x, y)
        return [ResolvedOperation(MOVE_TO, (x, y))]

    if kind in {
        CommandKind.HORIZONTAL,
        CommandKind.REL_HORIZONTAL,
        CommandKind.VERTICAL,
        CommandKind.REL_VERTICAL,
    }:
        x, y = _parse_vertical_horizontal(token, context)
        context.translate(x, y)
        operation = ResolvedOperation(LINE_TO, (x, y))

    elif kind in {CommandKind.LINE_TO, CommandKind.REL_LINE_TO}:
        x, y = _resolve_points(token, context)
        context.translate(x, y)
        operation = ResolvedOperation(LINE_TO, (x, y))

    elif kind in {CommandKind.CUBIC, CommandKind.REL_CUBIC}:
        points = _resolve_points(token, context)
        context.translate(points[4], points[5])
        operation = ResolvedOperation(BEZIER_CURVE_TO, tuple(points))

    elif kind == CommandKind.CLOSE:
        # the pen stays where it is, no closing segment is drawn
        LOGGER.debug("Ignoring close-subpath at %s", context.current_point)
        return []

    else:
        raise TranslationError(token)

    return [operation, ResolvedOperation(PAINT)]


def translate(
    tokens: Iterable[Token], context: TransformContext | None = None
) -> list[ResolvedOperation]:
    """Resolve tokens into canvas operations with absolute coordinates.

    Every line and curve is followed by a paint marker, so each segment is
    drawn as soon as it is added.

    Args:
        tokens: The tokens of one path in document order.
        context: The current point to start from and to update. A fresh
            context at the origin is used if omitted.

    Returns:
        The resolved operations in document order.

    Raises:
        TranslationError: If a token kind is not supported.

    Example:
        >>> translate(tokenize("m 10,10 l 5,-3"))
        [
        ResolvedOperation(name='moveTo', arguments=(10.0, 10.0)),
        ResolvedOperation(name='lineTo', arguments=(15.0, 7.0)),
        ResolvedOperation(name='stroke', arguments=())
        ]
    """
    if context is None:
        context = TransformContext()

    operations: list[ResolvedOperation] = []
    for token in tokens:
        operations.extend(_translate_token(token, context))

    return operations


def compile_path(
    data: str, context: TransformContext | None = None
) -> list[ResolvedOperation]:
    """Tokenize and translate SVG path data.

    The whole path is tokenized before translation starts, so a lexing
    error leaves the context untouched.
    """
    return translate(tokenize(data), context)
