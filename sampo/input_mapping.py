"""Identifiers for input devices, keys, buttons and axes."""

from __future__ import annotations

from enum import IntEnum, auto


class InputType(IntEnum):
    UNKNOWN = 0
    KEYBOARD = 1
    MOUSE = 2
    GAMEPAD = 3


class GamepadType(IntEnum):
    UNKNOWN = 0
    PS4 = 1
    PS5 = 2
    XBOX = 3
    SWITCH = 4


class ButtonKeyState(IntEnum):
    """State of a key: released, pressed this update, or held."""

    UP = 0
    FALLING = 1
    DOWN = 2


class MouseButton(IntEnum):
    UNKNOWN_BUTTON = 0
    BUTTON1 = 1
    BUTTON2 = 2
    BUTTON3 = 3
    BUTTON4 = 4
    BUTTON5 = 5
    BUTTON6 = 6
    BUTTON7 = 7
    BUTTON8 = 8

    LEFT = 1
    MIDDLE = 3
    RIGHT = 2


class KeyboardButton(IntEnum):
    UNKNOWN_BUTTON = 0
    SPACE = auto()
    APOSTROPHE = auto()
    COMMA = auto()
    MINUS = auto()
    PERIOD = auto()
    SLASH = auto()
    KEY_0 = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    KEY_7 = auto()
    KEY_8 = auto()
    KEY_9 = auto()
    SEMICOLON = auto()
    EQUAL = auto()
    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    LEFT_BRACKET = auto()
    BACKSLASH = auto()
    RIGHT_BRACKET = auto()
    GRAVE_ACCENT = auto()
    WORLD_1 = auto()
    WORLD_2 = auto()
    ESCAPE = auto()
    ENTER = auto()
    TAB = auto()
    BACKSPACE = auto()
    INSERT = auto()
    DELETE = auto()
    RIGHT = auto()
    LEFT = auto()
    DOWN = auto()
    UP = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    CAPS_LOCK = auto()
    SCROLL_LOCK = auto()
    NUM_LOCK = auto()
    PRINT_SCREEN = auto()
    PAUSE = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    KP_0 = auto()
    KP_1 = auto()
    KP_2 = auto()
    KP_3 = auto()
    KP_4 = auto()
    KP_5 = auto()
    KP_6 = auto()
    KP_7 = auto()
    KP_8 = auto()
    KP_9 = auto()
    KP_DECIMAL = auto()
    KP_DIVIDE = auto()
    KP_MULTIPLY = auto()
    KP_SUBTRACT = auto()
    KP_ADD = auto()
    KP_ENTER = auto()
    KP_EQUAL = auto()
    LEFT_SHIFT = auto()
    LEFT_CONTROL = auto()
    LEFT_ALT = auto()
    LEFT_SUPER = auto()
    RIGHT_SHIFT = auto()
    RIGHT_CONTROL = auto()
    RIGHT_ALT = auto()
    RIGHT_SUPER = auto()
    MENU = auto()


class GamepadAxis(IntEnum):
    UNKNOWN_AXIS = 0
    LEFT_X = 1
    LEFT_Y = 2
    RIGHT_X = 3
    RIGHT_Y = 4
    LEFT_TRIGGER = 5
    RIGHT_TRIGGER = 6


class GamepadButton(IntEnum):
    UNKNOWN_BUTTON = 0
    ACTION_DOWN = 1
    ACTION_RIGHT = 2
    ACTION_LEFT = 3
    ACTION_UP = 4
    LEFT_BUMPER = 5
    RIGHT_BUMPER = 6
    SELECT = 7
    START = 8
    HOME = 9
    LEFT_STICK = 10
    RIGHT_STICK = 11
    DPAD_UP = 12
    DPAD_RIGHT = 13
    DPAD_DOWN = 14
    DPAD_LEFT = 15