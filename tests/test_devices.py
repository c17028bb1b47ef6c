import pytest

from sampo.devices import DeviceInformation, Gamepad, InputDevice, Keyboard, Mouse
from sampo.events import (
    GamepadConnectedEvent,
    GamepadDisconnectedEvent,
    KeyPressedEvent,
)
from sampo.input_mapping import (
    ButtonKeyState,
    GamepadAxis,
    GamepadButton,
    InputType,
    KeyboardButton,
    MouseButton,
)


def test_device_information_defaults():
    info = DeviceInformation()
    assert info.name == "Unknown device name"
    assert info.guid == "00000000-0000-0000-0000-000000000000"


def test_input_device_properties():
    device = InputDevice(InputType.MOUSE, 2)
    assert device.input_type is InputType.MOUSE
    assert device.user_index == 2
    assert device.requires_polling is False
    assert device.init_device() is True
    assert device.device_name == DeviceInformation().name


@pytest.mark.parametrize("button", list(GamepadButton)[1:])
def test_gamepad_button_round_trip(button):
    pad = Gamepad(1)
    assert pad.is_button_pressed(button) is False
    pad.set_button_state(button, True)
    assert pad.is_button_pressed(button) is True
    pad.set_button_state(button, False)
    assert pad.is_button_pressed(button) is False


def test_gamepad_unknown_button_ignored():
    pad = Gamepad(1)
    pad.set_button_state(GamepadButton.UNKNOWN_BUTTON, True)
    assert pad.is_button_pressed(GamepadButton.UNKNOWN_BUTTON) is False
    assert Gamepad.is_valid_button(GamepadButton.UNKNOWN_BUTTON) is False


@pytest.mark.parametrize("axis", list(GamepadAxis)[1:])
def test_gamepad_axis_round_trip(axis):
    pad = Gamepad(0)
    pad.set_axis_state(axis, 0.25)
    assert pad.axis_value(axis) == 0.25


def test_gamepad_axis_clamped():
    pad = Gamepad(0)
    pad.set_axis_state(GamepadAxis.LEFT_X, 5.0)
    pad.set_axis_state(GamepadAxis.LEFT_Y, -5.0)
    assert pad.axis_value(GamepadAxis.LEFT_X) == 1.0
    assert pad.axis_value(GamepadAxis.LEFT_Y) == -1.0


def test_gamepad_unknown_axis():
    pad = Gamepad(0)
    pad.set_axis_state(GamepadAxis.UNKNOWN_AXIS, 0.5)
    assert pad.axis_value(GamepadAxis.UNKNOWN_AXIS) == 0.0


def test_platform_id_from_event():
    assert Gamepad.platform_id_from_event(GamepadConnectedEvent(3)) == 3
    assert Gamepad.platform_id_from_event(GamepadDisconnectedEvent(7)) == 7
    assert Gamepad.platform_id_from_event(KeyPressedEvent(1, 0)) == -1


def test_gamepad_type():
    pad = Gamepad(9)
    assert pad.input_type is InputType.GAMEPAD
    assert pad.platform_id == 9


def test_keyboard_state_transitions():
    kb = Keyboard()
    assert kb.key_state(KeyboardButton.A) is ButtonKeyState.UP
    kb.set_button_state(KeyboardButton.A, True)
    assert kb.key_state(KeyboardButton.A) is ButtonKeyState.FALLING
    kb.set_button_state(KeyboardButton.A, True)
    assert kb.key_state(KeyboardButton.A) is ButtonKeyState.DOWN
    kb.set_button_state(KeyboardButton.A, True)
    assert kb.key_state(KeyboardButton.A) is ButtonKeyState.DOWN
    assert kb.is_button_pressed(KeyboardButton.A) is True
    kb.set_button_state(KeyboardButton.A, False)
    assert kb.key_state(KeyboardButton.A) is ButtonKeyState.UP
    assert kb.is_button_pressed(KeyboardButton.A) is False


@pytest.mark.parametrize(
    "key", [KeyboardButton.SPACE, KeyboardButton.MENU, KeyboardButton.F12]
)
def test_keyboard_edges(key):
    kb = Keyboard()
    kb.set_button_state(key, True)
    assert kb.is_button_pressed(key) is True
    assert kb.is_button_pressed(KeyboardButton.B) is False


def test_keyboard_unknown_key():
    kb = Keyboard()
    kb.set_button_state(KeyboardButton.UNKNOWN_BUTTON, True)
    assert kb.is_button_pressed(KeyboardButton.UNKNOWN_BUTTON) is False
    assert Keyboard.is_valid_button(KeyboardButton.UNKNOWN_BUTTON) is False


def test_mouse_buttons():
    mouse = Mouse()
    mouse.set_button_state(MouseButton.LEFT, True)
    assert mouse.is_button_pressed(MouseButton.BUTTON1) is True
    assert mouse.is_button_pressed(MouseButton.RIGHT) is False
    mouse.set_button_state(MouseButton.LEFT, False)
    assert mouse.is_button_pressed(MouseButton.LEFT) is False
    mouse.set_button_state(MouseButton.BUTTON8, True)
    assert mouse.state.keys[MouseButton.BUTTON8] is ButtonKeyState.DOWN


def test_mouse_unknown_button():
    mouse = Mouse()
    mouse.set_button_state(MouseButton.UNKNOWN_BUTTON, True)
    assert mouse.is_button_pressed(MouseButton.UNKNOWN_BUTTON) is False


def test_mouse_position_and_scroll():
    mouse = Mouse()
    assert mouse.position == (-1.0, -1.0)
    mouse.set_position((10, 20))
    mouse.set_scroll_offset((0.5, -1.5))
    assert mouse.position == (10.0, 20.0)
    assert mouse.scroll_offset == (0.5, -1.5)