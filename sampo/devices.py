"""Input devices: the generic base, gamepads, keyboards and mice."""

from __future__ import annotations

from dataclasses import dataclass, field

from sampo.events import Event, EventType
from sampo.input_mapping import (
    ButtonKeyState,
    GamepadAxis,
    GamepadButton,
    GamepadType,
    InputType,
    KeyboardButton,
    MouseButton,
)


@dataclass
class DeviceInformation:
    """Name and identifier reported for a device."""

    name: str = "Unknown device name"
    guid: str = "00000000-0000-0000-0000-000000000000"


class InputDevice:
    """A device that produces input for one user."""

    def __init__(self, input_type: InputType, user_index: int = 0) -> None:
        self.input_type = input_type
        self.user_index = user_index
        self.requires_polling = False
        self.information = DeviceInformation()
        self.poll_count = 0

    @property
    def device_name(self) -> str:
        return self.information.name

    @property
    def device_uid(self) -> str:
        return self.information.guid

    def init_device(self) -> bool:
        """Prepare the device; False if it cannot be used."""
        return True

    def poll_device(self) -> None:
        """Refresh the device state from the platform; counts the polls."""
        self.poll_count += 1


class Gamepad(InputDevice):
    """A gamepad with digital buttons and axes in the range [-1, 1]."""

    def __init__(self, platform_id: int) -> None:
        super().__init__(InputType.GAMEPAD)
        self.platform_id = platform_id
        self.name = "Unknown"
        self.gamepad_type = GamepadType.UNKNOWN
        self._buttons = {b: False for b in GamepadButton if self.is_valid_button(b)}
        self._axes = {a: 0.0 for a in GamepadAxis if self.is_valid_axis(a)}

    @staticmethod
    def is_valid_button(button: GamepadButton) -> bool:
        return GamepadButton.ACTION_DOWN <= button <= GamepadButton.DPAD_LEFT

    @staticmethod
    def is_valid_axis(axis: GamepadAxis) -> bool:
        return GamepadAxis.LEFT_X <= axis <= GamepadAxis.RIGHT_TRIGGER

    def set_button_state(self, button: GamepadButton, is_down: bool) -> None:
        """Record a button as held or released; invalid buttons are ignored."""
        if self.is_valid_button(button):
            self._buttons[GamepadButton(button)] = bool(is_down)

    def is_button_pressed(self, button: GamepadButton) -> bool:
        if not self.is_valid_button(button):
            return False
        return self._buttons[GamepadButton(button)]

    def set_axis_state(self, axis: GamepadAxis, value: float) -> None:
        """Record an axis value, clamped to [-1, 1]; invalid axes are ignored."""
        if self.is_valid_axis(axis):
            self._axes[GamepadAxis(axis)] = min(max(float(value), -1.0), 1.0)

    def axis_value(self, axis: GamepadAxis) -> float:
        if not self.is_valid_axis(axis):
            return 0.0
        return self._axes[GamepadAxis(axis)]

    @staticmethod
    def platform_id_from_event(event: Event) -> int:
        """The joystick id of a gamepad connection event, or -1."""
        if event.event_type in (
            EventType.GAMEPAD_CONNECTED,
            EventType.GAMEPAD_DISCONNECTED,
        ):
            return event.joystick_id  # type: ignore[attr-defined]
        return -1


class Keyboard(InputDevice):
    """A keyboard that tracks whether each key was just pressed or is held."""

    def __init__(self) -> None:
        super().__init__(InputType.KEYBOARD)
        self._keys = {
            k: ButtonKeyState.UP for k in KeyboardButton if self.is_valid_button(k)
        }

    @staticmethod
    def is_valid_button(button: KeyboardButton) -> bool:
        return KeyboardButton.SPACE <= button <= KeyboardButton.MENU

    def set_button_state(self, button: KeyboardButton, is_down: bool) -> None:
        """Update a key: a fresh press is FALLING, a repeated one DOWN."""
        if not self.is_valid_button(button):
            return
        key = KeyboardButton(button)
        current = self._keys[key]
        if not is_down:
            self._keys[key] = ButtonKeyState.UP
        elif current in (ButtonKeyState.FALLING, ButtonKeyState.DOWN):
            self._keys[key] = ButtonKeyState.DOWN
        else:
            self._keys[key] = ButtonKeyState.FALLING

    def is_button_pressed(self, button: KeyboardButton) -> bool:
        return self.key_state(button) is not ButtonKeyState.UP

    def key_state(self, button: KeyboardButton) -> ButtonKeyState:
        """The state of a key; UP for keys that are not valid."""
        if not self.is_valid_button(button):
            return ButtonKeyState.UP
        return self._keys[KeyboardButton(button)]


@dataclass
class MouseState:
    """Cursor position, scroll offset and button states of a mouse."""

    position: tuple[float, float] = (-1.0, -1.0)
    scroll_offset: tuple[float, float] = (0.0, 0.0)
    keys: dict[MouseButton, ButtonKeyState] = field(
        default_factory=lambda: {
            MouseButton(v): ButtonKeyState.UP
            for v in range(MouseButton.BUTTON1, MouseButton.BUTTON8 + 1)
        }
    )


class Mouse(InputDevice):
    """A mouse with position, scroll offset and eight buttons."""

    def __init__(self) -> None:
        super().__init__(InputType.MOUSE)
        self.state = MouseState()

    @staticmethod
    def is_valid_button(button: MouseButton) -> bool:
        return MouseButton.LEFT <= button <= MouseButton.BUTTON8

    @property
    def position(self) -> tuple[float, float]:
        return self.state.position

    @property
    def scroll_offset(self) -> tuple[float, float]:
        return self.state.scroll_offset

    def set_position(self, position: tuple[float, float]) -> None:
        x, y = position
        self.state.position = (float(x), float(y))

    def set_scroll_offset(self, offset: tuple[float, float]) -> None:
        x, y = offset
        self.state.scroll_offset = (float(x), float(y))

    def set_button_state(self, button: MouseButton, is_down: bool) -> None:
        """Record a button as held or released; invalid buttons are ignored."""
        if self.is_valid_button(button):
            self.state.keys[MouseButton(button)] = (
                ButtonKeyState.DOWN if is_down else ButtonKeyState.UP
            )

    def is_button_pressed(self, button: MouseButton) -> bool:
        if not self.is_valid_button(button):
            return False
        return self.state.keys[MouseButton(button)] is not ButtonKeyState.UP