"""Vertex attributes and the description of which locations they occupy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_FLOAT_SIZE = 4


class AttributeType(Enum):
    """A per-vertex attribute kind."""

    POSITION = 0
    NORMAL = 1
    UV = 2
    TANGENT = 3
    BITANGENT = 4

    @classmethod
    def from_name(cls, name: str) -> AttributeType | None:
        """Map a directive keyword such as ``"xyz"`` to a type, or ``None``."""
        return _TYPE_NAMES.get(name)

    def __str__(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_NAMES = {
    "position": AttributeType.POSITION,
    "xyz": AttributeType.POSITION,
    "uv": AttributeType.UV,
    "normal": AttributeType.NORMAL,
    "tangent": AttributeType.TANGENT,
    "bitangent": AttributeType.BITANGENT,
}

_TYPE_LABELS = {
    AttributeType.POSITION: "Position",
    AttributeType.NORMAL: "Normal",
    AttributeType.UV: "UV",
    AttributeType.TANGENT: "Tangent",
    AttributeType.BITANGENT: "Bitangent",
}

_ELEMENT_COUNTS = {
    AttributeType.POSITION: 3,
    AttributeType.NORMAL: 3,
    AttributeType.UV: 2,
    AttributeType.TANGENT: 3,
    AttributeType.BITANGENT: 3,
}

# Byte offsets inside a vertex laid out as
# position(3f), normal(3f), uv(2f), tangent(3f), bitangent(3f).
_OFFSETS = {
    AttributeType.POSITION: 0 * _FLOAT_SIZE,
    AttributeType.NORMAL: 3 * _FLOAT_SIZE,
    AttributeType.UV: 6 * _FLOAT_SIZE,
    AttributeType.TANGENT: 8 * _FLOAT_SIZE,
    AttributeType.BITANGENT: 11 * _FLOAT_SIZE,
}


@dataclass(frozen=True)
class Attribute:
    """An attribute type bound to a shader location."""

    attribute_type: AttributeType
    location: int

    @staticmethod
    def element_count_from_type(attribute_type: AttributeType) -> int:
        """Number of float components the attribute has."""
        try:
            return _ELEMENT_COUNTS[attribute_type]
        except KeyError:
            raise ValueError(f"unhandled attribute type: {attribute_type!r}") from None

    @staticmethod
    def offset_from_type(attribute_type: AttributeType) -> int:
        """Byte offset of the attribute within a vertex."""
        return _OFFSETS[attribute_type]

    def __str__(self) -> str:
        return f"Attribute({self.attribute_type}, {self.location})"


class AttributeDescription:
    """An ordered list of attributes a mesh provides to a program."""

    def __init__(self) -> None:
        self._attributes: list[Attribute] = []

    def add_attribute(self, attribute_type: AttributeType, location: int) -> None:
        self._attributes.append(Attribute(attribute_type, location))

    @property
    def attributes(self) -> list[Attribute]:
        """A copy of the attributes in the order they were added."""
        return list(self._attributes)

    def __copy__(self) -> AttributeDescription:
        duplicate = AttributeDescription()
        duplicate._attributes = list(self._attributes)
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeDescription):
            return NotImplemented
        return self._attributes == other._attributes

    def __str__(self) -> str:
        return "AttributeDescription(" + ", ".join(map(str, self._attributes)) + ")"