"""The application base, the main loop and the engine that drives them frame by frame."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, ClassVar, Optional

from .events import Event, EventDispatcher, EventWindowClose
from .input import Input
from .layers import Layer, LayerStack
from .scene import SceneServer

_log = logging.getLogger(__name__)


class Application(ABC):
    """Base of user applications; the most recently created one is the singleton."""

    _singleton: ClassVar[Optional[Application]] = None

    def __init__(self) -> None:
        self.running = True
        self.layers = LayerStack()
        Application._singleton = self

    @classmethod
    def get_singleton(cls) -> Optional[Application]:
        return cls._singleton

    @abstractmethod
    def on_process(self, delta_ms: float) -> bool:
        """Per-frame application logic, run before the scene and the layers."""

    def process(self, delta_ms: float) -> bool:
        """Run one frame and return whether the application is still running."""
        self.on_process(delta_ms)

        scene = SceneServer.get_singleton()
        if scene is not None:
            scene.on_update()

        for layer in self.layers:
            layer.on_process()
        for layer in self.layers:
            layer.on_imgui_render()
        return self.running

    def on_event(self, event: Event) -> None:
        """Handle window close, then pass the event down the layers from the top."""
        EventDispatcher(event).dispatch(EventWindowClose, self.on_event_window_close)
        for layer in reversed(self.layers):
            layer.on_event(event)
            if event.handled:
                break
        _log.debug("[%s]", event)

    def on_event_window_close(self, event: EventWindowClose) -> bool:
        self.running = False
        return True

    def push_layer(self, layer: Layer) -> None:
        self.layers.push_layer(layer)


class MainLoop:
    """Advances the current application by one frame."""

    def on_process(self, delta_ms: float) -> bool:
        application = Application.get_singleton()
        if application is None:
            raise RuntimeError("no application has been created")
        # The application is always stepped with a zero delta; it measures time itself.
        return application.process(0.0)


class Engine:
    """Sets up the engine services, starts an application and runs frames."""

    def __init__(self) -> None:
        self.scene_server = SceneServer()
        self.input = Input()
        self.application: Optional[Application] = None
        self.main_loop: Optional[MainLoop] = None
        self.frame = 0

    def start(self, application_factory: Callable[[], Application]) -> bool:
        """Create the application and the main loop."""
        self.application = application_factory()
        self.main_loop = MainLoop()
        _log.debug("Main started")
        return True

    def on_process(self) -> bool:
        """Run one frame; False means the application asked to stop."""
        if self.main_loop is None:
            raise RuntimeError("engine has not been started")
        self.frame += 1
        return self.main_loop.on_process(0.0)

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run frames until the application stops or ``max_frames`` is reached; return the count."""
        frames = 0
        while max_frames is None or frames < max_frames:
            frames += 1
            if not self.on_process():
                break
        return frames

    def shutdown(self) -> bool:
        self.main_loop = None
        self.application = None
        return True