"""Current point bookkeeping for resolving relative coordinates."""

from __future__ import annotations


class TransformContext:
    """Holds the current point and a stack of saved points."""

    def __init__(self) -> None:
        self._x = 0.0
        self._y = 0.0
        self._saved: list[tuple[float, float]] = []

    def __repr__(self) -> str:
        return f"TransformContext(x={self._x}, y={self._y}, depth={self.depth})"

    @property
    def current_x(self) -> float:
        """The x coordinate of the current point."""
        return self._x

    @property
    def current_y(self) -> float:
        """The y coordinate of the current point."""
        return self._y

    @property
    def current_point(self) -> tuple[float, float]:
        """The current point as (x, y)."""
        return self._x, self._y

    @property
    def depth(self) -> int:
        """The number of open scopes."""
        return len(self._saved)

    def translate(self, x: float, y: float) -> None:
        """Move the current point to the absolute coordinates."""
        self._x = x
        self._y = y

    def begin_scope(self) -> None:
        """Save the current point and restart at the origin."""
        self._saved.append((self._x, self._y))
        self._x, self._y = 0.0, 0.0

    def end_scope(self) -> None:
        """Restore the last saved point, or the origin if nothing was saved."""
        self._x, self._y = self._saved.pop() if self._saved else (0.0, 0.0)

    def reset(self) -> None:
        """Forget all saved points and return to the origin."""
        self._saved.clear()
        self._x, self._y = 0.0, 0.0
