"""
Code generation utilities

Indented line builder and C# lexical helpers shared by the generators.
"""

from __future__ import annotations
import re
from typing import List

GENERATED_CODE_HEADER = (
    "//------------------------------------------------------------------------------\n"
    "// <auto-generated>\n"
    "//     This code was generated by a tool.\n"
    "//     Changes to this file may cause incorrect behavior and will be lost if\n"
    "//     the code is regenerated.\n"
    "// </auto-generated>\n"
    "//------------------------------------------------------------------------------\n"
)

# Runs of underscores or of characters that are neither letters nor digits
_WORD_SPLIT = re.compile(r"[\W_]+")


class CodeGen:
    """Code generation helper with indentation support"""

    def __init__(self):
        self._lines: List[str] = []
        self._indent: int = 0
        self._indent_str: str = "    "

    def line(self, text: str = ""):
        """Add a line with current indentation"""
        if text:
            self._lines.append(self._indent_str * self._indent + text)
        else:
            self._lines.append("")

    def lines(self, *texts: str):
        for text in texts:
            self.line(text)

    def indent(self):
        self._indent += 1

    def dedent(self):
        if self._indent > 0:
            self._indent -= 1

    def block(self, header: str):
        """Context manager for a braced block: header, ``{``, body, ``}``."""
        return _BlockContext(self, header)

    def output(self) -> str:
        """Get generated code, newline terminated."""
        return "\n".join(self._lines) + "\n"


class _BlockContext:
    def __init__(self, gen: CodeGen, header: str):
        self._gen = gen
        self._header = header

    def __enter__(self):
        self._gen.line(self._header)
        self._gen.line("{")
        self._gen.indent()
        return self

    def __exit__(self, *args):
        self._gen.dedent()
        self._gen.line("}")


def as_identifier(name: str) -> str:
    """Convert a UXML element name to a PascalCase C# identifier

    Examples:
        start-button -> StartButton
        player_name  -> PlayerName
        2nd-slot     -> _2ndSlot
    """
    result = ""
    for part in _WORD_SPLIT.split(name):
        if part:
            result += part[0].upper() + part[1:]

    if not result:
        return "_"
    if result[0].isdigit():
        result = "_" + result
    return result


def string_literal(value: str) -> str:
    """Quote a string as a C# regular string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'
