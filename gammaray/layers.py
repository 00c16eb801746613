"""Layers and the ordered stack that holds them beneath overlays."""

from __future__ import annotations

from typing import Iterator

from .events import Event


class Layer:
    """A unit of per-frame behaviour; subclasses override the hooks they need."""

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.frames_processed = 0
        self.frames_rendered = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is torn down."""
        self.attached = False

    def on_process(self) -> None:
        """Called once per frame."""
        self.frames_processed += 1

    def on_imgui_render(self) -> None:
        """Called once per frame while the debug UI is drawn."""
        self.frames_rendered += 1

    def on_event(self, event: Event) -> bool:
        """Called for events travelling down the stack; returns whether it is handled."""
        return bool(event.handled)


class LayerStack:
    """Layers kept in order, with overlays always above ordinary layers."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def _index_of(self, layer: Layer) -> int | None:
        return next((i for i, item in enumerate(self._layers) if item is layer), None)

    def push_layer(self, layer: Layer) -> None:
        """Insert a layer above the other layers but below every overlay."""
        self._layers.insert(self._insert_index, layer)
        layer.on_attach()
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Put an overlay on top of everything."""
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Remove a layer if present; absent layers are ignored."""
        index = self._index_of(layer)
        if index is not None:
            del self._layers[index]
            self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove an overlay if present; absent overlays are ignored."""
        index = self._index_of(overlay)
        if index is not None:
            del self._layers[index]

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)