import pytest

from gammaray.application import Application, Engine, MainLoop
from gammaray.events import EventKeyPressed, EventWindowClose
from gammaray.input import Input
from gammaray.layers import Layer
from gammaray.scene import SceneServer


class RecordingApp(Application):
    def __init__(self):
        super().__init__()
        self.deltas = []

    def on_process(self, delta_ms):
        self.deltas.append(delta_ms)
        return True


class ClosingApp(RecordingApp):
    def on_process(self, delta_ms):
        super().on_process(delta_ms)
        if len(self.deltas) == 2:
            self.on_event(EventWindowClose())
        return True


class RecordingLayer(Layer):
    def __init__(self, name, log, consume=False):
        super().__init__(name)
        self.log = log
        self.consume = consume

    def on_attach(self):
        self.log.append((self.name, "attach"))

    def on_process(self):
        self.log.append((self.name, "process"))

    def on_imgui_render(self):
        self.log.append((self.name, "imgui"))

    def on_event(self, event):
        self.log.append((self.name, "event"))
        if self.consume:
            event.handled = True
        return event.handled


def test_singleton_is_latest():
    app = RecordingApp()
    assert Application.get_singleton() is app


def test_process_runs_layers_in_order():
    log = []
    app = RecordingApp()
    assert Application.get_singleton() is app
    app.push_layer(RecordingLayer("a", log))
    app.push_layer(RecordingLayer("b", log))
    assert log == [("a", "attach"), ("b", "attach")]
    log.clear()
    assert Application.process(app, 5.0) is True
    assert app.deltas == [5.0]
    assert log == [("a", "process"), ("b", "process"), ("a", "imgui"), ("b", "imgui")]


def test_process_updates_scene():
    server = SceneServer()
    calls = []
    server.register_for_on_update(lambda: calls.append(1))
    app = RecordingApp()
    app.process(0.0)
    app.process(0.0)
    assert calls == [1, 1]


def test_window_close_stops_running():
    app = RecordingApp()
    event = EventWindowClose()
    app.on_event(event)
    assert event.handled is True
    assert app.running is False
    assert app.process(0.0) is False


def test_events_travel_top_down_until_handled():
    log = []
    app = RecordingApp()
    app.push_layer(RecordingLayer("a", log))
    app.push_layer(RecordingLayer("b", log, consume=True))
    app.layers.push_overlay(RecordingLayer("c", log))
    log.clear()
    event = EventKeyPressed(key_code=65)
    app.on_event(event)
    assert log == [("c", "event"), ("b", "event")]
    assert event.handled is True
    assert app.running is True


def test_main_loop_passes_zero_delta():
    app = RecordingApp()
    assert MainLoop().on_process(16.0) is True
    assert app.deltas == [0.0]


def test_engine_creates_services():
    engine = Engine()
    assert SceneServer.get_singleton() is engine.scene_server
    assert Input.get_singleton() is engine.input


def test_engine_run_counts_frames():
    engine = Engine()
    assert engine.start(RecordingApp) is True
    assert isinstance(engine.application, RecordingApp)
    assert engine.run(max_frames=3) == 3
    assert engine.frame == 3
    assert engine.application.deltas == [0.0, 0.0, 0.0]


def test_engine_run_stops_when_application_closes():
    engine = Engine()
    engine.start(ClosingApp)
    assert engine.run(max_frames=10) == 2
    assert engine.frame == 2


def test_engine_not_started_raises():
    with pytest.raises(RuntimeError):
        Engine().on_process()


def test_engine_shutdown():
    engine = Engine()
    engine.start(RecordingApp)
    assert engine.shutdown() is True
    assert engine.application is None
    with pytest.raises(RuntimeError):
        engine.on_process()