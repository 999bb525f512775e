"""Process-wide store of shader codes and the dependencies between them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import ClassVar

from .dependency_graph import DependencyGraph
from .shader_code import ShaderCode


class ShaderCodeStore:
    """Holds named and unnamed shader codes and tracks which depend on which.

    One shared store is available through :meth:`instance`.
    """

    _shared: ClassVar[ShaderCodeStore | None] = None

    def __init__(self) -> None:
        self._codes: dict[str, ShaderCode] = {}
        self._unnamed: list[ShaderCode] = []
        self._dependencies = DependencyGraph()

    @classmethod
    def instance(cls) -> ShaderCodeStore:
        """Return the shared store, creating it on first use."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def emplace(self, name: str) -> ShaderCode:
        """Return the code called ``name``, creating an empty one if it is missing."""
        code = self._codes.get(name)
        if code is None:
            code = self._codes[name] = ShaderCode(name)
        return code

    def emplace_unnamed(self) -> ShaderCode:
        """Create and return a new code that has no name."""
        code = ShaderCode()
        self._unnamed.append(code)
        return code

    def add_dependencies(self, name: str, others: Iterable[str]) -> None:
        """Record that ``name`` depends on each of ``others``.

        Missing dependencies are created empty. An empty ``name`` is ignored.
        """
        if not name:
            return
        if not self.contains(name):
            raise KeyError("It is not possible to add dependency to non-existent shader")
        for other in others:
            self._dependencies.add_edge(name, other)
            if not self.contains(other):
                self.emplace(other)

    def insert(self, name: str, code: ShaderCode) -> None:
        """Store ``code`` under ``name`` unless that name is already taken."""
        self._codes.setdefault(name, code)

    def contains(self, name: str) -> bool:
        return name in self._codes

    def get_shader_code(self, name: str) -> ShaderCode:
        try:
            return self._codes[name]
        except KeyError:
            raise KeyError(f"Could not find shader '{name}' in the store") from None

    def compose_all_shaders(self) -> None:
        """Compose every stored code; fails if the dependencies form a cycle."""
        if not self._dependencies.is_acyclic():
            raise ValueError("There is a cyclic dependency between shaders!")
        for code in self._codes.values():
            code.compose()
        for code in self._unnamed:
            code.compose()

    def clear(self) -> None:
        self._codes.clear()
        self._unnamed.clear()
        self._dependencies.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._codes

    def __getitem__(self, name: str) -> ShaderCode:
        return self.get_shader_code(name)