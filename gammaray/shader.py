"""Shader sources split from a single annotated file and the shader that holds them."""

from __future__ import annotations

import os
from typing import Iterable, Union

INVALID_SHADER_ID = 0

VERTEX_MARKER = "#[vertex]"
FRAGMENT_MARKER = "#[fragment]"


def split_shader_source(lines: Iterable[str]) -> tuple[str, str]:
    """Split annotated shader lines into ``(vertex_source, fragment_source)``.

    A line that is exactly ``#[vertex]`` or ``#[fragment]`` directs the lines
    after it into that stage; lines before the first marker are dropped.
    Every kept line is terminated with a newline.
    """
    vertex: list[str] = []
    fragment: list[str] = []
    current: list[str] | None = None
    for line in lines:
        if line == FRAGMENT_MARKER:
            current = fragment
            continue
        if line == VERTEX_MARKER:
            current = vertex
            continue
        if current is not None:
            current.append(line + "\n")
    return "".join(vertex), "".join(fragment)


class RendererShader:
    """A named pair of vertex and fragment shader sources."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.vertex_source = ""
        self.fragment_source = ""
        self.renderer_id = INVALID_SHADER_ID

    def setup(self, vertex_source: str, fragment_source: str, name: str) -> None:
        """Set the name and both sources at once."""
        self.name = name
        self.vertex_source = vertex_source
        self.fragment_source = fragment_source

    def compile(self) -> bool:
        """Build the program from the current sources.

        The base shader has no graphics backend and accepts the sources as they
        are; backends override this and report whether the build succeeded.
        """
        return True

    def load_from_file(self, path: Union[str, os.PathLike]) -> bool:
        """Replace both sources with those read from an annotated file, then compile."""
        with open(path, encoding="utf-8", errors="surrogateescape") as stream:
            vertex, fragment = split_shader_source(line.removesuffix("\n") for line in stream)
        self.vertex_source = vertex
        self.fragment_source = fragment
        return self.compile()