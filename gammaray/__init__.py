"""Game engine core: events, layers, input state, an entity-component scene, buffers, shaders and resource-embedding tools."""

__version__ = "0.1.0"

__all__ = [
    "application",
    "bin2c",
    "buffers",
    "components",
    "concepts",
    "events",
    "input",
    "keycodes",
    "layers",
    "scene",
    "shader",
    "shader2c",
    "values",
]