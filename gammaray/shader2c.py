"""Turn an annotated shader file into a C++ shader class with embedded sources."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .shader import split_shader_source

VERSION = "1.2"
CLASS_PREFIX = "RendererShader"
HELP = (
    "shader2c --in=<filepath> --out=<filepath> --class=<classname> "
    "--inherits=<classname> --inheritshpath=<filepath>\n"
)
_BYTES_PER_LINE = 24

_OPTION_FIELDS = {
    "--in": "in_file_path",
    "--out": "out_file_path",
    "--class": "class_name",
    "--inherits": "inherits_class_name",
    "--inheritshpath": "inherits_header_path",
}


@dataclass
class Shader2cOptions:
    in_file_path: str = ""
    out_file_path: str = ""
    class_name: str = ""
    inherits_class_name: str = ""
    inherits_header_path: str = ""
    show_version: bool = False

    def is_complete(self) -> bool:
        """True when every path and class name has been given."""
        return all(
            (
                self.in_file_path,
                self.class_name,
                self.out_file_path,
                self.inherits_class_name,
                self.inherits_header_path,
            )
        )


def parse_args(argv: Sequence[str]) -> Shader2cOptions:
    """Parse ``--key=value`` options; ``--version`` or ``-v`` stops parsing."""
    options = Shader2cOptions()
    for arg in argv:
        if arg in ("--version", "-v"):
            options.show_version = True
            return options
        tokens = [token for token in arg.split("=") if token]
        if not tokens:
            continue
        field_name = _OPTION_FIELDS.get(tokens[0])
        if field_name is not None:
            setattr(options, field_name, tokens[1] if len(tokens) > 1 else "")
    return options


def write_shader_bytes(source: str, source_name: str) -> str:
    """Render ``source`` as a static signed char array named ``source_name``."""
    parts = [f"        static const char {source_name}[] = {{\n            "]
    data = source.encode("utf-8", errors="surrogateescape")
    for count, byte in enumerate(data, start=1):
        parts.append(f"{byte - 256 if byte > 127 else byte}, ")
        if count % _BYTES_PER_LINE == 0:
            parts.append("\n            ")
    parts.append("\n        };")
    return "".join(parts)


def render_class(options: Shader2cOptions, vertex_source: str, fragment_source: str) -> str:
    """Render the generated header holding the shader class."""
    full_name = f"{CLASS_PREFIX}{options.class_name}"
    return "".join(
        (
            "// Generated with GammaRay shader2c.\n",
            "// Probably best if you don't touch this file.\n",
            "#pragma once\n\n",
            f'#include "{options.inherits_header_path}"\n\n\n',
            f"class {full_name} : public {options.inherits_class_name}\n{{\n",
            "public:\n",
            f"    {full_name}()\n",
            "    {\n",
            write_shader_bytes(vertex_source, "_vertexSource"),
            "\n",
            write_shader_bytes(fragment_source, "_fragmentSource"),
            f'\n        Setup(_vertexSource, _fragmentSource, nullptr, "{options.class_name}");',
            "\n    }\n",
            "};",
        )
    )


def _read_shader(path: str) -> tuple[str, str]:
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as stream:
            return split_shader_source(line.removesuffix("\n") for line in stream)
    except OSError:
        # An unreadable input yields a class with empty sources.
        return "", ""


def main(argv: Optional[Sequence[str]] = None) -> int:
    options = parse_args(sys.argv[1:] if argv is None else argv)
    if options.show_version:
        sys.stdout.write(VERSION)
        return 0
    if not options.is_complete():
        sys.stdout.write(HELP)
        return 0
    vertex, fragment = _read_shader(options.in_file_path)
    text = render_class(options, vertex, fragment)
    with open(options.out_file_path, "w", encoding="utf-8", errors="surrogateescape") as out:
        out.write(text)
    return 0