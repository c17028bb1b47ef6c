"""Container for the input devices of an application."""

from __future__ import annotations

from sampo.devices import Gamepad, InputDevice, Keyboard, Mouse
from sampo.events import Event, EventCategory, EventType
from sampo.input_mapping import InputType


class Input:
    """Holds input devices and keeps them up to date."""

    def __init__(self) -> None:
        self._devices: list[InputDevice] = []
        self.mouse: Mouse | None = None
        self.keyboard: Keyboard | None = None
        self.devices_handled = 0

    @property
    def devices(self) -> tuple[InputDevice, ...]:
        return tuple(self._devices)

    def init(self) -> bool:
        """Add the mouse and keyboard; False if either cannot be used."""
        mouse = self.add_input_device(Mouse())
        if mouse is None:
            return False
        self.mouse = mouse  # type: ignore[assignment]
        keyboard = self.add_input_device(Keyboard())
        if keyboard is None:
            return False
        self.keyboard = keyboard  # type: ignore[assignment]
        return True

    def update(self) -> None:
        self.poll_devices()

    def add_input_device(self, device: InputDevice) -> InputDevice | None:
        """Add a device if it initialises; returns it, or None on failure."""
        if not device.init_device():
            return None
        self.devices_handled += 1
        self._devices.append(device)
        return device

    def first_device_index_by_type(self, input_type: InputType) -> int:
        """Index of the first device of a type, or -1."""
        return next(
            (i for i, d in enumerate(self._devices) if d.input_type == input_type),
            -1,
        )

    def input_device(self, index: int) -> InputDevice:
        if not 0 <= index < len(self._devices):
            raise IndexError(f"no input device at index {index}")
        return self._devices[index]

    def devices_by_user_index(self, user_index: int) -> list[InputDevice]:
        return [d for d in self._devices if d.user_index == user_index]

    def devices_of_type(self, input_type: InputType) -> list[InputDevice]:
        return [d for d in self._devices if d.input_type == input_type]

    def gamepad_by_platform_id(self, platform_id: int) -> Gamepad | None:
        return next(
            (
                d
                for d in self._devices
                if isinstance(d, Gamepad) and d.platform_id == platform_id
            ),
            None,
        )

    def on_gamepad_event(self, event: Event) -> None:
        """Add or remove a gamepad on a connection event; others are ignored."""
        if not event.is_in_category(EventCategory.GAMEPAD):
            return
        platform_id = Gamepad.platform_id_from_event(event)
        if platform_id == -1:
            raise ValueError("gamepad event carries no platform id")

        if event.event_type == EventType.GAMEPAD_CONNECTED:
            self.add_input_device(Gamepad(platform_id))
        elif event.event_type == EventType.GAMEPAD_DISCONNECTED:
            if self.gamepad_by_platform_id(platform_id) is None:
                raise LookupError(f"no gamepad with platform id {platform_id}")
            self._devices = [
                d
                for d in self._devices
                if not (isinstance(d, Gamepad) and d.platform_id == platform_id)
            ]

    def poll_devices(self) -> None:
        for device in self._devices:
            if device.requires_polling:
                device.poll_device()