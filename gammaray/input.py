"""Input events from windows and the state tracker that consumes them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Optional

from .values import Vector2i, WindowID


@dataclass
class InputEvent:
    """Base of all raw input events."""


@dataclass
class InputEventFromWindow(InputEvent):
    window_id: WindowID = 0


@dataclass
class InputEventWithModifiers(InputEventFromWindow):
    shift: bool = False
    alt: bool = False
    ctrl: bool = False
    meta: bool = False


@dataclass
class InputEventKey(InputEventWithModifiers):
    pressed: bool = False
    keycode: int = 0
    echo: bool = False  # a repeat produced by holding the key down


@dataclass
class InputEventMouse(InputEventWithModifiers):
    position: Vector2i = (0, 0)


@dataclass
class InputEventMouseButton(InputEventMouse):
    pressed: bool = False
    button_index: int = 0


@dataclass
class InputEventMouseMotion(InputEventMouse):
    pass


EventDispatchFunc = Callable[[InputEvent], None]


class Input:
    """Tracks key and mouse state; the most recently created instance is the singleton."""

    _singleton: ClassVar[Optional[Input]] = None

    def __init__(self) -> None:
        self._keys_pressed: dict[int, bool] = {}
        self._mouse_velocity: Vector2i = (0, 0)
        self._mouse_position: Vector2i = (0, 0)
        self._dispatch_func: Optional[EventDispatchFunc] = None
        Input._singleton = self

    @classmethod
    def get_singleton(cls) -> Optional[Input]:
        return cls._singleton

    def is_key_pressed(self, keycode: int) -> bool:
        return self._keys_pressed.get(keycode, False)

    @property
    def mouse_position(self) -> Vector2i:
        return self._mouse_position

    @property
    def mouse_velocity(self) -> Vector2i:
        """Movement reported by the latest event; zero after any non-motion event."""
        return self._mouse_velocity

    def process_window_input(self, event: InputEvent) -> None:
        """Update tracked state from an event, then pass it to the registered callback."""
        if isinstance(event, InputEventKey):
            self._keys_pressed[event.keycode] = event.pressed

        self._mouse_velocity = (0, 0)
        if isinstance(event, InputEventMouseMotion):
            x, y = (int(component) for component in event.position)
            old_x, old_y = self._mouse_position
            self._mouse_velocity = (x - old_x, y - old_y)
            self._mouse_position = (x, y)

        if self._dispatch_func is not None:
            self._dispatch_func(event)

    def register_event_callback(self, callback: Optional[EventDispatchFunc]) -> None:
        self._dispatch_func = callback