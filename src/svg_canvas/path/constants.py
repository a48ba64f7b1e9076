"""Constants for the SVG path compiler."""

from __future__ import annotations

from enum import Enum


class CommandKind(Enum):
    """The supported SVG path commands."""

    MOVE_TO = "M"
    REL_MOVE_TO = "m"
    HORIZONTAL = "H"
    REL_HORIZONTAL = "h"
    VERTICAL = "V"
    REL_VERTICAL = "v"
    LINE_TO = "L"
    REL_LINE_TO = "l"
    CUBIC = "C"
    REL_CUBIC = "c"
    CLOSE = "Z"

    @property
    def is_relative(self) -> bool:
        """If the coordinates of the command are relative to the current point."""
        return self.value.islower()


COMMAND_KINDS: dict[str, CommandKind] = {
    **{kind.value: kind for kind in CommandKind},
    "z": CommandKind.CLOSE,
}
"""Command letter to command kind. Close-subpath is case-insensitive."""

ARITY: dict[CommandKind, int] = {
    CommandKind.MOVE_TO: 2,
    CommandKind.REL_MOVE_TO: 2,
    CommandKind.HORIZONTAL: 1,
    CommandKind.REL_HORIZONTAL: 1,
    CommandKind.VERTICAL: 1,
    CommandKind.REL_VERTICAL: 1,
    CommandKind.LINE_TO: 2,
    CommandKind.REL_LINE_TO: 2,
    CommandKind.CUBIC: 6,
    CommandKind.REL_CUBIC: 6,
    CommandKind.CLOSE: 0,
}
"""The number of values expected for each SVG path command."""

WHITESPACE = frozenset(" \t\n\r\f")
"""Characters skipped between commands and before numbers."""

ARGUMENT_SEPARATOR = ","
"""The optional separator between two numbers."""

MOVE_TO = "moveTo"
LINE_TO = "lineTo"
BEZIER_CURVE_TO = "bezierCurveTo"
PAINT = "stroke"
"""Operation committing the current segment to the surface."""
