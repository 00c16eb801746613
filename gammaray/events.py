"""Application events, their categories and type-based dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, ClassVar


def _bit(x: int) -> int:
    # Category bits are produced by shifting the index by one, so index 0 yields 0.
    return x << 1


class EventType(Enum):
    """Every kind of event; the value is the event's display name."""

    NONE = "None"
    WINDOW_CLOSE = "WindowClose"
    WINDOW_RESIZE = "WindowResize"
    WINDOW_FOCUS = "WindowFocus"
    WINDOW_LOST_FOCUS = "WindowLostFocus"
    WINDOW_MOVED = "WindowMoved"
    KEY_PRESSED = "KeyPressed"
    KEY_RELEASED = "KeyReleased"
    MOUSE_BUTTON_PRESSED = "MouseButtonPressed"
    MOUSE_BUTTON_RELEASED = "MouseButtonReleased"
    MOUSE_MOVED = "MouseMoved"
    MOUSE_SCROLLED = "MouseScrolled"


class EventCategory(IntEnum):
    """Category flags an event may belong to."""

    NONE = 0
    APPLICATION = _bit(0)
    INPUT = _bit(1)
    KEYBOARD = _bit(2)
    MOUSE = _bit(3)
    MOUSE_BUTTON = _bit(4)


@dataclass
class Event:
    """Base of all events; ``handled`` stops propagation through layers."""

    event_type: ClassVar[EventType] = EventType.NONE
    category_flags: ClassVar[int] = EventCategory.NONE

    handled: bool = field(default=False, init=False)

    @property
    def name(self) -> str:
        return self.event_type.value

    def is_in_category(self, category: int) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


class EventDispatcher:
    """Routes an event to a handler when the event is of the handler's type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[Event], func: Callable[[Event], bool]) -> bool:
        """Call ``func`` if the event matches ``event_class``; its result marks it handled."""
        if self.event.event_type is not event_class.event_type:
            return False
        self.event.handled = bool(func(self.event))
        return True


@dataclass
class EventKey(Event):
    """Base for keyboard events."""

    category_flags: ClassVar[int] = EventCategory.KEYBOARD | EventCategory.INPUT

    key_code: int = field(default=0)


@dataclass
class EventKeyPressed(EventKey):
    event_type: ClassVar[EventType] = EventType.KEY_PRESSED

    repeat_count: int = 0

    def __str__(self) -> str:
        return f"EventKeyPressed: {self.key_code}"


@dataclass
class EventKeyReleased(EventKey):
    event_type: ClassVar[EventType] = EventType.KEY_RELEASED

    repeat_count: int = 0

    def __str__(self) -> str:
        return f"EventKeyReleased: {self.key_code}"


_MOUSE_FLAGS = EventCategory.MOUSE | EventCategory.INPUT


@dataclass
class EventMouseMoved(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_MOVED
    category_flags: ClassVar[int] = _MOUSE_FLAGS

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"MouseMovedEvent: {self.x:g}, {self.y:g}"


@dataclass
class EventMouseScrolled(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_SCROLLED
    category_flags: ClassVar[int] = _MOUSE_FLAGS

    x_offset: float = 0.0
    y_offset: float = 0.0

    def __str__(self) -> str:
        return f"EventMouseScrolled: {self.x_offset:g}, {self.y_offset:g}"


@dataclass
class EventMousePressed(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_PRESSED
    category_flags: ClassVar[int] = _MOUSE_FLAGS

    button: int = 0

    def __str__(self) -> str:
        return f"EventMousePressed: {self.button}"


@dataclass
class EventMouseReleased(Event):
    event_type: ClassVar[EventType] = EventType.MOUSE_BUTTON_RELEASED
    category_flags: ClassVar[int] = _MOUSE_FLAGS

    button: int = 0

    def __str__(self) -> str:
        return f"EventMouseReleased: {self.button}"


@dataclass
class EventWindowResize(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_RESIZE
    category_flags: ClassVar[int] = EventCategory.APPLICATION

    width: int = 0
    height: int = 0


@dataclass
class EventWindowClose(Event):
    event_type: ClassVar[EventType] = EventType.WINDOW_CLOSE
    category_flags: ClassVar[int] = EventCategory.APPLICATION