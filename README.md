# gammaray

The core of a small game engine, kept free of any window or graphics
backend, together with two command-line tools that embed resources in
C/C++ headers.

## What is in the package

- `gammaray.values`: `Color` (RGBA floats, `Color.grey(value)`), `Timestep`
  (seconds, with `seconds` and `milliseconds` properties and `float()`),
  `Rect2` and `Rect2i`.
- `gammaray.events`: window, keyboard and mouse events
  (`EventWindowClose`, `EventWindowResize`, `EventKeyPressed`,
  `EventKeyReleased`, `EventMouseMoved`, `EventMouseScrolled`,
  `EventMousePressed`, `EventMouseReleased`). Each has an `EventType` and
  `EventCategory` flags checked with `is_in_category`. `EventDispatcher`
  calls a handler only when the event is of the given class, and the
  handler's result sets `event.handled`.
- `gammaray.layers`: `Layer` with the hooks `on_attach`, `on_detach`,
  `on_process`, `on_imgui_render` and `on_event`, and `LayerStack`, in
  which `push_layer` inserts below every overlay and `push_overlay` puts a
  layer on top. `pop_layer` and `pop_overlay` ignore layers that are not
  present. The stack supports `iter`, `reversed` and `len`.
- `gammaray.keycodes`: the `Key` and `MouseButton` code tables, and
  `native_to_key` / `native_to_mouse_button`, which pass codes through
  unchanged.
- `gammaray.input`: input event dataclasses (`InputEventKey`,
  `InputEventMouseButton`, `InputEventMouseMotion`, ...) and `Input`, which
  records pressed keys, mouse position and mouse velocity from
  `process_window_input` and then calls the callback given to
  `register_event_callback`. Mouse velocity is reset to zero by any event
  that is not a mouse motion. The most recently created `Input` is returned
  by `Input.get_singleton()`.
- `gammaray.scene`: `SceneServer`, which creates entities with
  `create_entity(entity_class, name, scene_id=0)`, stores their components,
  yields `(entity, component, ...)` rows from `view(*types)` and runs the
  callbacks added with `register_for_on_update` on `on_update`. `Entity`
  offers `add_component`, `get_component`, `has_component`,
  `remove_component`, `destroy` and `name`. Every entity gets a
  `ComponentSceneLink`; components derived from `Component` learn their
  `owner` and have `on_init` called.
- `gammaray.components`: `ComponentTransform3D` (with a dirty flag),
  `ComponentRenderTransform3D`, `ComponentTransformRect`,
  `ComponentCamera3D` (whose `view_matrix()` uses `look_at`),
  `ComponentCamera2D`, `ComponentLight3D`, `ComponentMesh3D`,
  `ComponentMeshGUI`, and `ComponentEditorCamera3DMovement`, which on each
  scene update turns the camera from mouse movement (pitch clamped to
  ±89°) and moves it with W, A, S and D.
- `gammaray.concepts`: entity kinds that add components on creation:
  `ConceptCamera3D`, `ConceptEditorCamera3D`, `ConceptCanvasItem`,
  `ConceptMesh3D` and `ConceptMesh3DBox` (a unit cube of 24 white vertices
  and 36 indices).
- `gammaray.buffers`: `ShaderDataType` with `shader_data_type_size`,
  `BufferElement`, `BufferLayout` (computes offsets and stride),
  `VertexBuffer` and `IndexBuffer` holding NumPy arrays, and `VertexArray`,
  which refuses a vertex buffer with an empty layout.
- `gammaray.shader`: `split_shader_source` and `RendererShader`.
- `gammaray.application`: the abstract `Application`, `MainLoop` and
  `Engine`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Scene example

```python
from gammaray.scene import SceneServer
from gammaray.concepts import ConceptMesh3DBox
from gammaray.components import ComponentTransform3D, ComponentMesh3D

scene = SceneServer()
box = scene.create_entity(ConceptMesh3DBox, "Box")
print(box.name)                                   # Box
print(box.get_component(ComponentMesh3D).indices.count)  # 36

for entity, transform in scene.view(ComponentTransform3D):
    transform.position[0] += 1.0
```

## Events and layers

```python
from gammaray.events import EventDispatcher, EventWindowClose
from gammaray.layers import Layer, LayerStack


class Hud(Layer):
    def on_event(self, event):
        print("HUD saw", event)
        return False


stack = LayerStack()
stack.push_layer(Layer("World"))
stack.push_overlay(Hud("HUD"))

event = EventWindowClose()
EventDispatcher(event).dispatch(EventWindowClose, lambda e: True)

for layer in reversed(stack):
    layer.on_event(event)
```

## Running an application

```python
from gammaray.application import Application, Engine


class Game(Application):
    def on_process(self, delta_ms):
        return True


engine = Engine()          # creates the SceneServer and Input
engine.start(Game)
frames = engine.run(max_frames=10)
engine.shutdown()
```

Each frame calls the application's `on_process`, the scene server's
`on_update`, then every layer's `on_process` and `on_imgui_render`.
`Application.on_event` stops the application on `EventWindowClose` and
passes events down the layers from the top until one is handled; `run`
stops when the application is no longer running.

## Shader files

A shader file holds both stages, each introduced by a marker line:

```
#[vertex]
... vertex stage ...
#[fragment]
... fragment stage ...
```

Lines before the first marker are dropped. `split_shader_source` returns
`(vertex_source, fragment_source)`, each kept line ending in a newline.
`RendererShader.load_from_file` reads both stages from such a file and
then calls `compile()`; `setup` sets the name and both sources at once.

## Command-line tools

### gammaray-bin2c

Writes to standard output a C header that embeds files as byte arrays
inside `namespace CoreData`. Each argument is `path|name` or
`path|name|string`:

```
gammaray-bin2c "shaders/default.glsl|default_shader|string" "logo.png|logo"
```

Empty or unreadable files are left out. An argument without both a path
and a name raises `ValueError`.

### gammaray-shader2c

Turns a two-stage shader file into a C++ header defining a shader class
whose constructor holds both stage sources:

```
gammaray-shader2c --in=default.glsl --out=default.gen.h --class=Default --inherits=RendererShaderOpenGL3 --inheritshpath=Drivers/OpenGL3/RendererShaderOpenGL3.h
```

The class is named `RendererShader` followed by the `--class` value. All
five options are required; if any is missing the usage line is printed
instead. `gammaray-shader2c --version` (or `-v`) prints `1.2`.

## What the package does not do

There is no window, no graphics backend and no debug UI. Nothing is drawn:
buffers and vertex arrays only hold data on the CPU,
`RendererShader.compile()` accepts the sources without building anything,
and the `on_imgui_render` hook is called but renders nothing by itself.
Input state changes only through events you pass to
`Input.process_window_input`, and window and input events must be created
by your own code.