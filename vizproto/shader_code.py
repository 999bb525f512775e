"""Shader source fragments that can be composed from other fragments."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ShaderCodeKind(Enum):
    """The stage a piece of shader code belongs to."""

    UNKNOWN = 0
    GENERIC = 1
    FRAGMENT = 2
    VERTEX = 3
    TESSELATION_CONTROL = 4
    TESSELATION_EVALUATION = 5
    GEOMETRY = 6
    COMPUTE = 7

    @classmethod
    def from_name(cls, name: str) -> ShaderCodeKind | None:
        """Map a directive keyword such as ``"vertex"`` to a kind, or ``None``."""
        return _KIND_NAMES.get(name)

    def __str__(self) -> str:
        return _KIND_LABELS[self]


_KIND_NAMES = {
    "generic": ShaderCodeKind.GENERIC,
    "vertex": ShaderCodeKind.VERTEX,
    "fragment": ShaderCodeKind.FRAGMENT,
    "geometry": ShaderCodeKind.GEOMETRY,
    "compute": ShaderCodeKind.COMPUTE,
    "tesselation_control": ShaderCodeKind.TESSELATION_CONTROL,
    "tesselation_evaluation": ShaderCodeKind.TESSELATION_EVALUATION,
}

_KIND_LABELS = {
    ShaderCodeKind.UNKNOWN: "Unknown",
    ShaderCodeKind.GENERIC: "Generic",
    ShaderCodeKind.FRAGMENT: "Fragment",
    ShaderCodeKind.VERTEX: "Vertex",
    ShaderCodeKind.TESSELATION_CONTROL: "Tessellation Control",
    ShaderCodeKind.TESSELATION_EVALUATION: "Tessellation Evaluation",
    ShaderCodeKind.GEOMETRY: "Geometry",
    ShaderCodeKind.COMPUTE: "Compute",
}


class ShaderCode:
    """Lines of shader source plus other codes to prepend or append on composition.

    Codes are compared by identity; the prepend and append sets hold each
    other code at most once.
    """

    def __init__(self, name: str = "", kind: ShaderCodeKind = ShaderCodeKind.UNKNOWN):
        self.name = name
        self.kind = kind
        self._lines: list[str] = []
        self._prepend: list[ShaderCode] = []
        self._append: list[ShaderCode] = []
        self._composed = False

    def add_line(self, line: str) -> None:
        self._lines.append(line)

    def add_to_prepend_set(self, other: ShaderCode) -> None:
        if not self.is_in_prepend_set(other):
            self._prepend.append(other)

    def add_to_append_set(self, other: ShaderCode) -> None:
        if not self.is_in_append_set(other):
            self._append.append(other)

    def is_in_prepend_set(self, other: ShaderCode) -> bool:
        return any(code is other for code in self._prepend)

    def is_in_append_set(self, other: ShaderCode) -> bool:
        return any(code is other for code in self._append)

    def is_empty(self) -> bool:
        return not (self._lines or self._prepend or self._append)

    @staticmethod
    def _lines_of(source: ShaderCode | Iterable[str]) -> list[str]:
        if isinstance(source, ShaderCode):
            return list(source._lines)
        return list(source)

    def append_lines(self, source: ShaderCode | Iterable[str]) -> None:
        """Add the lines of another code, or the given lines, at the end."""
        self._lines.extend(self._lines_of(source))

    def prepend_lines(self, source: ShaderCode | Iterable[str]) -> None:
        """Add the lines of another code, or the given lines, at the start."""
        self._lines[:0] = self._lines_of(source)

    @property
    def lines(self) -> list[str]:
        """A copy of the current lines."""
        return list(self._lines)

    def is_composed(self) -> bool:
        return self._composed

    def compose(self) -> None:
        """Merge the prepend and append sets into the lines, composing them first."""
        if self._composed:
            return
        for other in self._prepend:
            other.compose()
            self.prepend_lines(other)
        for other in self._append:
            other.compose()
            self.append_lines(other)
        self._composed = True

    def create_source(self) -> str:
        """Join the lines into one source text, each line ending in a newline."""
        return "".join(f"{line}\n" for line in self._lines)

    def is_named(self) -> bool:
        return bool(self.name)

    def __str__(self) -> str:
        return self.create_source()

    def __repr__(self) -> str:
        return f"ShaderCode(name={self.name!r}, kind={self.kind.name}, lines={len(self._lines)})"