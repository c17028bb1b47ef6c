"""Application, keyboard, mouse and gamepad events."""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum, IntFlag
from typing import ClassVar, TypeVar


class PlatformType(IntEnum):
    UNKNOWN = 0
    PC = 1
    CONSOLE = 2


class PlatformDevice(IntEnum):
    UNSPECIFIED = 0
    WINDOWS = 1
    LINUX = 2


class EventType(IntEnum):
    NONE = 0
    WINDOW_CLOSE = 1
    WINDOW_RESIZE = 2
    WINDOW_FOCUS = 3
    WINDOW_LOST_FOCUS = 4
    WINDOW_MOVED = 5
    KEY_PRESSED = 6
    KEY_RELEASED = 7
    MOUSE_BUTTON_PRESSED = 8
    MOUSE_BUTTON_RELEASED = 9
    MOUSE_MOVED = 10
    MOUSE_SCROLLED = 11
    GAMEPAD_CONNECTED = 12
    GAMEPAD_DISCONNECTED = 13


class EventCategory(IntFlag):
    NONE = 0
    INPUT = 1 << 0
    KEYBOARD = 1 << 1
    MOUSE = 1 << 2
    GAMEPAD = 1 << 3
    APPLICATION = 1 << 4


def _num(value: float) -> str:
    return f"{value:g}"


class Event:
    """Base of all events. Only classes with an ``event_type`` can be created."""

    event_type: ClassVar[EventType]
    category_flags: ClassVar[EventCategory]
    name: ClassVar[str]

    def __init__(self) -> None:
        if getattr(type(self), "event_type", None) is None:
            raise TypeError(f"{type(self).__name__} is abstract")
        self.processed = False

    def is_in_category(self, category: EventCategory) -> bool:
        return bool(self.category_flags & category)

    def __str__(self) -> str:
        return self.name


E = TypeVar("E", bound=Event)


class EventDispatcher:
    """Routes an event to a handler that matches its type."""

    def __init__(self, event: Event) -> None:
        self.event = event

    def dispatch(self, event_class: type[E], handler: Callable[[E], bool]) -> bool:
        """Call ``handler`` if the event is of ``event_class``'s type.

        Returns whether the handler was called; the handler's result marks
        the event as processed.
        """
        expected = getattr(event_class, "event_type", None)
        if expected is None or self.event.event_type != expected:
            return False
        self.event.processed |= bool(handler(self.event))  # type: ignore[arg-type]
        return True


class WindowResizeEvent(Event):
    event_type = EventType.WINDOW_RESIZE
    category_flags = EventCategory.APPLICATION
    name = "WindowResize"

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self.width = width
        self.height = height

    def __str__(self) -> str:
        return f"WindowResize Event: {self.width}, {self.height}"


class WindowCloseEvent(Event):
    event_type = EventType.WINDOW_CLOSE
    category_flags = EventCategory.APPLICATION
    name = "WindowClose"


class KeyEvent(Event):
    category_flags = EventCategory.KEYBOARD | EventCategory.INPUT

    def __init__(self, key_code: int) -> None:
        super().__init__()
        self.key_code = key_code


class KeyPressedEvent(KeyEvent):
    event_type = EventType.KEY_PRESSED
    name = "KeyPressed"

    def __init__(self, key_code: int, repeat_count: int) -> None:
        super().__init__(key_code)
        self.repeat_count = repeat_count

    def __str__(self) -> str:
        return f"KeyPressed Event: {self.key_code}({self.repeat_count} repeats)"


class KeyReleasedEvent(KeyEvent):
    event_type = EventType.KEY_RELEASED
    name = "KeyReleased"

    def __str__(self) -> str:
        return f"KeyReleased Event: {self.key_code}"


class MouseMovedEvent(Event):
    event_type = EventType.MOUSE_MOVED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT
    name = "MouseMoved"

    def __init__(self, position: tuple[float, float]) -> None:
        super().__init__()
        x, y = position
        self.position = (float(x), float(y))

    def __str__(self) -> str:
        x, y = self.position
        return f"MouseMoved Event: {_num(x)}, {_num(y)}"


class MouseScrolledEvent(Event):
    event_type = EventType.MOUSE_SCROLLED
    category_flags = EventCategory.MOUSE | EventCategory.INPUT
    name = "MouseScrolled"

    def __init__(self, offset: tuple[float, float]) -> None:
        super().__init__()
        x, y = offset
        self.offset = (float(x), float(y))

    def __str__(self) -> str:
        x, y = self.offset
        return f"MouseScrolled Event: {_num(x)}, {_num(y)}"


class MouseButtonEvent(Event):
    category_flags = EventCategory.MOUSE | EventCategory.INPUT

    def __init__(self, button: int) -> None:
        super().__init__()
        self.button = button


class MouseButtonPressedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_PRESSED
    name = "MouseButtonPressed"

    def __str__(self) -> str:
        return f"MouseButtonPressed Event: {self.button}"


class MouseButtonReleasedEvent(MouseButtonEvent):
    event_type = EventType.MOUSE_BUTTON_RELEASED
    name = "MouseButtonReleased"

    def __str__(self) -> str:
        return f"MouseButtonReleased Event: {self.button}"


class GamepadConnectionEvent(Event):
    category_flags = EventCategory.GAMEPAD | EventCategory.INPUT

    def __init__(self, joystick_id: int) -> None:
        super().__init__()
        self.joystick_id = joystick_id


class GamepadConnectedEvent(GamepadConnectionEvent):
    event_type = EventType.GAMEPAD_CONNECTED
    name = "GamepadConnected"

    def __str__(self) -> str:
        return f"Gamepad Connected ID: {self.joystick_id}"


class GamepadDisconnectedEvent(GamepadConnectionEvent):
    event_type = EventType.GAMEPAD_DISCONNECTED
    name = "GamepadDisconnected"

    def __str__(self) -> str:
        return f"Gamepad Disconnected, ID: {self.joystick_id}"