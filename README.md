# sampo

A small framework of building blocks for interactive programs:

- **Layers** (`sampo.layer`): `Layer` with `on_attach`, `on_detach`,
  `on_update`, `on_imgui_render` and `on_event` hooks, and `LayerStack`, which
  keeps regular layers below overlays.
- **Events** (`sampo.events`): window, keyboard, mouse and gamepad events with
  `EventType` and `EventCategory` flags, and `EventDispatcher`, which routes an
  event to a handler for one event class.
- **Input devices** (`sampo.devices`, `sampo.input`, `sampo.input_mapping`):
  `Keyboard`, `Mouse` and `Gamepad` state, and an `Input` container that adds
  and removes gamepads on connection events.
- **Console arguments** (`sampo.console_arguments`): `ConsoleArguments` reads
  `-key value` pairs.
- **Timing** (`sampo.timestep`): `Timestep`, a frame delta in seconds with a
  `milliseconds` property.
- **Graphics helpers** (`sampo.buffer`, `sampo.camera`, `sampo.vector`):
  `BufferLayout` and `BufferElement` with sizes, offsets and stride;
  `ortho()` and `OrthographicCamera`, which produce numpy matrices;
  `Vector2` and `Vector3`.
- **Memory** (`sampo.allocators`, `sampo.memory_benchmark`): `LinearAllocator`,
  `CAllocator`, `TrackingResource` (counts outstanding and leaked blocks),
  `AllocationTracker`, and `Benchmark`, which times allocator workloads.
- **Networking** (`sampo.network`, `sampo.chat`): `TCPSocket` and `UDPSocket`
  wrappers, `SocketAddress` helpers, `select_sockets`, and a small TCP chat
  server and client.
- **Logging** (`sampo.log`): `setup_logging()` attaches console and file
  handlers to the `SAMPO` and `APP` loggers, with an extra `TRACE` level.
- **File states** (`sampo.file_states`): the `FileState` result enum.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Quick tour

### Layers and events

```python
from sampo.layer import Layer, LayerStack
from sampo.events import EventDispatcher, KeyPressedEvent


class GameLayer(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(KeyPressedEvent, self.on_key)

    def on_key(self, event):
        print(event)        # KeyPressed Event: 65(0 repeats)
        return True         # marks the event as processed


stack = LayerStack()
stack.push_layer(GameLayer("game"))

event = KeyPressedEvent(65, 0)
for layer in reversed(stack):
    layer.on_event(event)
    if event.processed:
        break
```

### Command-line arguments

```python
from sampo.console_arguments import ConsoleArguments

args = ConsoleArguments(["app", "-width", "1280", "-title", "demo"])
args.has_argument("width")    # True
args.get_int("width")         # 1280
args.get_string("title")      # "demo"
args.get_string("missing")    # None
```

A key is an argument starting with `-` followed by one that does not; the
dash is dropped. When a key is repeated, the first value is kept.

### Input devices

```python
from sampo.input import Input
from sampo.events import GamepadConnectedEvent
from sampo.input_mapping import GamepadAxis, KeyboardButton, ButtonKeyState

inp = Input()
inp.init()                                  # adds a mouse and a keyboard
inp.keyboard.set_button_state(KeyboardButton.A, True)
inp.keyboard.key_state(KeyboardButton.A)    # ButtonKeyState.FALLING
inp.keyboard.set_button_state(KeyboardButton.A, True)
inp.keyboard.key_state(KeyboardButton.A)    # ButtonKeyState.DOWN

inp.on_gamepad_event(GamepadConnectedEvent(0))
pad = inp.gamepad_by_platform_id(0)
pad.set_axis_state(GamepadAxis.LEFT_X, 2.5)
pad.axis_value(GamepadAxis.LEFT_X)          # 1.0 (clamped)
```

### Buffer layouts

```python
from sampo.buffer import BufferElement, BufferLayout, ShaderDataType

layout = BufferLayout([
    BufferElement(ShaderDataType.FLOAT3, "position"),
    BufferElement(ShaderDataType.FLOAT4, "color"),
])
[e.offset for e in layout]   # [0, 12]
layout.stride                # 28
```

### Linear allocator

```python
from sampo.allocators import LinearAllocator

allocator = LinearAllocator(1024)
allocator.init()
block = allocator.allocate(64, 8)   # a Block with .address and .data
allocator.allocate(32, 16)
allocator.reset()                   # releases everything at once
```

`allocate` raises `MemoryError` when the arena is full; `free` is not
supported and raises `AllocatorError`.

## Chat demo

Two commands run a minimal TCP chat exchange. Both take
`-address host:port` (the default is `192.168.2.138:48000`, so on most
machines the address should be given). Start the server:

```
sampo-chat-server -address 127.0.0.1:48000
```

and, in another terminal, the client:

```
sampo-chat-client -address 127.0.0.1:48000
```

The server greets each new client and replies to every message; the client
reads the greeting, sends one message, reads the reply and disconnects. The
server runs until interrupted. Both write log lines to the console and to
`Sampo.log` in the current directory.

## What this package does not do

There is no window, renderer, debug UI or application main loop here. The
camera and buffer modules only compute matrices and layout data, and the
`on_imgui_render` hook is never driven by anything in the package. Input
devices hold state that your code sets; nothing reads a real keyboard, mouse
or gamepad.