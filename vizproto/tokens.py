"""Token kinds and tokens produced when scanning directive lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """The category of a scanned lexeme."""

    UNKNOWN = 0

    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    COMMA = auto()
    PRAGMA = auto()
    NAMESPACE = auto()

    IDENTIFIER = auto()

    SHADER_DIRECTIVE = auto()
    TYPE = auto()
    NAME = auto()
    APPEND = auto()
    PREPEND = auto()

    PROGRAM_DIRECTIVE = auto()
    PRE = auto()
    POST = auto()
    SHADERS = auto()
    DRAW = auto()

    INCLUDE_DIRECTIVE = auto()
    PATH = auto()

    OPTION_DIRECTIVE = auto()
    ENABLE = auto()
    PERSISTENT = auto()
    VALUE = auto()

    FORMAT = auto()

    LOAD_DIRECTIVE = auto()
    MESH = auto()
    MATERIAL = auto()
    TEXTURE = auto()

    FRAME_BUFFER_DIRECTIVE = auto()

    COPY_IN_DIRECTIVE = auto()
    BEGIN_DIRECTIVE = auto()
    END_DIRECTIVE = auto()
    RESOURCE_STORE_DIRECTIVE = auto()

    SOURCE_LINE = auto()

    @classmethod
    def from_lexeme(cls, lexeme: str) -> TokenKind | None:
        """Map a keyword such as ``"shader"`` to its kind, or ``None`` if it is not one."""
        return _KEYWORDS.get(lexeme)

    def __str__(self) -> str:
        return self.name


_KEYWORDS = {
    "#pragma": TokenKind.PRAGMA,
    "name": TokenKind.NAME,
    "append": TokenKind.APPEND,
    "prepend": TokenKind.PREPEND,
    "pre": TokenKind.PRE,
    "post": TokenKind.POST,
    "texture": TokenKind.TEXTURE,
    "vp": TokenKind.NAMESPACE,
    "shader": TokenKind.SHADER_DIRECTIVE,
    "shaders": TokenKind.SHADERS,
    "type": TokenKind.TYPE,
    "program": TokenKind.PROGRAM_DIRECTIVE,
    "copyin": TokenKind.COPY_IN_DIRECTIVE,
    "include": TokenKind.INCLUDE_DIRECTIVE,
    "end": TokenKind.END_DIRECTIVE,
    "begin": TokenKind.BEGIN_DIRECTIVE,
    "option": TokenKind.OPTION_DIRECTIVE,
    "enable": TokenKind.ENABLE,
    "persistent": TokenKind.PERSISTENT,
    "value": TokenKind.VALUE,
    "format": TokenKind.FORMAT,
    "path": TokenKind.PATH,
    "draw": TokenKind.DRAW,
    "framebuffer": TokenKind.FRAME_BUFFER_DIRECTIVE,
    "resource_store": TokenKind.RESOURCE_STORE_DIRECTIVE,
    "load": TokenKind.LOAD_DIRECTIVE,
    "mesh": TokenKind.MESH,
    "material": TokenKind.MATERIAL,
}


@dataclass(frozen=True)
class Token:
    """A lexeme with its kind and the line it was found on."""

    lexeme: str = ""
    kind: TokenKind = TokenKind.UNKNOWN
    line: int = 0