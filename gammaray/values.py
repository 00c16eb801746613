"""Small value types shared across the engine: colours, time steps and rectangles."""

from __future__ import annotations

from dataclasses import dataclass

MATH_PI = 3.1415926535897932384626433833

# Identifiers handed out by windows and by the renderer are plain integers.
WindowID = int
RendererID = int

Vector2 = tuple[float, float]
Vector2i = tuple[int, int]
Size2i = Vector2i
Point2i = Vector2i


@dataclass
class Color:
    """An RGBA colour with float channels; alpha defaults to fully opaque."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def grey(cls, value: float) -> Color:
        """Return an opaque grey with every colour channel set to ``value``."""
        return cls(value, value, value, 1.0)


class Timestep:
    """A span of time stored in seconds."""

    __slots__ = ("_time",)

    def __init__(self, time: float = 0.0) -> None:
        self._time = float(time)

    def __float__(self) -> float:
        return self._time

    def __repr__(self) -> str:
        return f"Timestep({self._time!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Timestep):
            return self._time == other._time
        return NotImplemented

    @property
    def seconds(self) -> float:
        """The span in seconds."""
        return self._time

    @property
    def milliseconds(self) -> float:
        """The span in milliseconds."""
        return self._time * 1000.0


@dataclass
class Rect2:
    """A rectangle with float position and size."""

    position: Vector2 = (0.0, 0.0)
    size: Vector2 = (0.0, 0.0)


@dataclass
class Rect2i:
    """A rectangle with integer position and size."""

    position: Vector2i = (0, 0)
    size: Vector2i = (0, 0)