"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator

from sampo.events import Event
from sampo.timestep import Timestep


class Layer:
    """A unit of update, rendering and event handling. Override the hooks.

    The default hooks keep a small record of what reached the layer.
    """

    def __init__(self, name: str = "Unnamed Layer") -> None:
        self.name = name
        self.attached = False
        self.last_delta_time: Timestep | None = None
        self.imgui_frames = 0
        self.events_seen = 0

    def on_attach(self) -> None:
        """Called when the layer is pushed."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is popped."""
        self.attached = False

    def on_update(self, delta_time: Timestep) -> None:
        """Called once per frame."""
        self.last_delta_time = delta_time

    def on_imgui_render(self) -> None:
        """Called when debug UI is drawn."""
        self.imgui_frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event reaching this layer."""
        self.events_seen += 1


class LayerStack:
    """Layers in order, with overlays always kept after the regular layers."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._layer_index = 0

    def _position(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._layer_index, layer)
        self._layer_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        position = self._position(layer)
        if position is not None:
            del self._layers[position]
            self._layer_index = max(0, self._layer_index - 1)

    def pop_overlay(self, overlay: Layer) -> None:
        position = self._position(overlay)
        if position is not None:
            del self._layers[position]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)