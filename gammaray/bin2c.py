"""Turn binary files into a C header of byte arrays."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Sequence

_PREAMBLE = (
    "// Generated with GammaRay bin2c.\n"
    "// Probably best if you don't touch this file.\n\n"
    "#pragma once\n\n"
    "namespace CoreData {\n\n"
)
_CLOSING = "\n};"
_BYTES_PER_LINE = 16


class OutType(Enum):
    """How an input is meant to be used; both are emitted the same way."""

    BIN = 0
    STRING = 1


@dataclass(frozen=True)
class InOutPair:
    in_file_path: str
    out_variable_name: str
    out_type: OutType = OutType.BIN


def parse_pair(arg: str) -> InOutPair:
    """Parse ``path|name[|string]``; empty fields between separators are skipped."""
    tokens = [token for token in arg.split("|") if token]
    if len(tokens) < 2:
        raise ValueError(f"expected <path>|<name>[|string], got {arg!r}")
    out_type = OutType.STRING if len(tokens) > 2 and tokens[2] == "string" else OutType.BIN
    return InOutPair(tokens[0], tokens[1], out_type)


def render_entry(pair: InOutPair, data: bytes) -> str:
    """Render one array declaration; empty data renders nothing."""
    if not data:
        return ""
    name = pair.out_variable_name
    parts = [f"// File: {pair.in_file_path}\n", f"char {name}_data[] = {{\n    "]
    for count, byte in enumerate(data, start=1):
        parts.append(f"0x{byte:02X},")
        if count % _BYTES_PER_LINE == 0:
            parts.append("\n    ")
    parts.append(f"}};\nconst char* {name} = &{name}_data[0];\n")
    return "".join(parts)


def render_header(pairs: Iterable[InOutPair]) -> str:
    """Render the whole header, skipping inputs that are empty or cannot be read."""
    parts = [_PREAMBLE]
    for pair in pairs:
        try:
            data = Path(pair.in_file_path).read_bytes()
        except OSError:
            continue
        parts.append(render_entry(pair, data))
    parts.append(_CLOSING)
    return "".join(parts)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    pairs = [parse_pair(arg) for arg in args]
    sys.stdout.write(render_header(pairs))
    return 0