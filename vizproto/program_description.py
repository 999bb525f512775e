"""Descriptions of shader programs and the builder that assembles them."""

from __future__ import annotations

import copy
import dataclasses
import itertools
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Protocol

from .attribute_description import AttributeDescription, AttributeType
from .buffer_description import BufferDescription
from .options import (
    BlendingFactor,
    CullingMode,
    DepthFunction,
    Face,
    FrontFaceMode,
    Options,
    PolygonMode,
)
from .shader_code import ShaderCode


class DrawMode(Enum):
    """Primitive topology used when drawing without a mesh."""

    POINTS = 0
    LINE_STRIP = 1
    LINE_LOOP = 2
    LINES = 3
    LINE_STRIP_ADJACENCY = 4
    LINES_ADJACENCY = 5
    TRIANGLE_STRIP = 6
    TRIANGLE_FAN = 7
    TRIANGLES = 8
    TRIANGLE_STRIP_ADJACENCY = 9
    TRIANGLES_ADJACENCY = 10
    PATCHES = 11


@dataclass(frozen=True)
class DrawCommand:
    """Draw ``count`` vertices using primitive ``mode``."""

    mode: DrawMode
    count: int


class FrameBufferDescription:
    """A frame buffer a program renders into."""

    def __repr__(self) -> str:
        return "FrameBufferDescription()"


@dataclass(frozen=True)
class TextureDescription:
    """A texture bound at a sampler location.

    ``texture`` is compared by identity, as with any object without its own equality.
    """

    location: int = 0
    texture: Any = None
    kind: str = "2D"
    format: str = "RGBA"


class Mesh(Protocol):
    """What a mesh must offer to receive the program's attribute layout."""

    def set_attribute_description(self, description: AttributeDescription) -> None: ...


class ProgramDescription:
    """Everything a shader program needs at runtime.

    Instances are filled in by :class:`ProgramDescriptionBuilder`.
    """

    def __init__(self) -> None:
        self._name = ""
        self._textures: list[TextureDescription] = []
        self._materials: list[Any] = []
        self._buffers: list[BufferDescription] = []
        self._shader_codes: list[ShaderCode] = []
        self._frame_buffer: FrameBufferDescription | None = None
        self._mesh: Mesh | None = None
        self._options = Options()
        self._attribute_description = AttributeDescription()
        self._draw_command: DrawCommand | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def textures(self) -> list[TextureDescription]:
        return list(self._textures)

    @property
    def materials(self) -> list[Any]:
        return list(self._materials)

    @property
    def buffers(self) -> list[BufferDescription]:
        return list(self._buffers)

    @property
    def shader_codes(self) -> list[ShaderCode]:
        return list(self._shader_codes)

    @property
    def attribute_description(self) -> AttributeDescription:
        return self._attribute_description

    @property
    def options(self) -> Options:
        return self._options

    def has_frame_buffer(self) -> bool:
        return self._frame_buffer is not None

    def has_mesh(self) -> bool:
        return self._mesh is not None

    def has_draw_command(self) -> bool:
        return self._draw_command is not None

    @property
    def frame_buffer(self) -> FrameBufferDescription:
        if self._frame_buffer is None:
            raise LookupError("This program description does not have frame buffer")
        return self._frame_buffer

    @property
    def mesh(self) -> Mesh:
        if self._mesh is None:
            raise LookupError("This program description does not have a mesh")
        return self._mesh

    @property
    def draw_command(self) -> DrawCommand:
        if self._draw_command is None:
            raise LookupError("Draw command is not defined for this program!")
        return self._draw_command

    def __repr__(self) -> str:
        return f"ProgramDescription(name={self._name!r})"


class ProgramDescriptionBuilder:
    """Fluent builder of :class:`ProgramDescription` objects."""

    _ids: ClassVar[itertools.count] = itertools.count()

    def __init__(self) -> None:
        self._description = ProgramDescription()
        self._is_name_set = False

    def add_texture(self, description: TextureDescription) -> ProgramDescriptionBuilder:
        """Add a texture; textures are bound in the order they are added."""
        self._description._textures.append(description)
        return self

    def add_texture_at(self, location: int, texture: Any) -> ProgramDescriptionBuilder:
        """Add ``texture`` bound at ``location`` with default kind and format."""
        return self.add_texture(TextureDescription(location=location, texture=texture))

    def set_name(self, name: str) -> ProgramDescriptionBuilder:
        self._is_name_set = True
        self._description._name = name
        return self

    def set_name_from_id(self) -> ProgramDescriptionBuilder:
        """Name the program with the next unique number."""
        self._is_name_set = True
        self._description._name = str(next(self._ids))
        return self

    def create_shader_name(self, original_name: str) -> str:
        """Return ``original_name`` placed in the program's namespace."""
        if not self._is_name_set:
            raise RuntimeError(
                "it is not possible to create shader name if program does not have name"
            )
        return f"{self._description._name}:{original_name}"

    def add_buffer(self, description: BufferDescription) -> ProgramDescriptionBuilder:
        self._description._buffers.append(description)
        return self

    def add_material(self, material: Any) -> ProgramDescriptionBuilder:
        self._description._materials.append(material)
        return self

    def set_mesh(self, mesh: Mesh) -> ProgramDescriptionBuilder:
        self._description._mesh = mesh
        return self

    def add_attribute_to_mesh(
        self, attribute_type: AttributeType, location: int
    ) -> ProgramDescriptionBuilder:
        if not self._description.has_mesh():
            raise RuntimeError("Adding attributes to program description without mesh")
        self._description._attribute_description.add_attribute(attribute_type, location)
        return self

    def add_shader_code(self, code: ShaderCode) -> ProgramDescriptionBuilder:
        self._description._shader_codes.append(code)
        return self

    def set_options(self, options: Options) -> ProgramDescriptionBuilder:
        self._description._options = dataclasses.replace(options)
        return self

    def set_draw_command(self, mode: DrawMode, count: int) -> ProgramDescriptionBuilder:
        self._description._draw_command = DrawCommand(mode, count)
        return self

    def set_polygon_mode(
        self, mode: PolygonMode, face: Face | None = None
    ) -> ProgramDescriptionBuilder:
        """Set the polygon mode of one face, or of both when ``face`` is ``None``."""
        options = self._description._options
        if face is None or face is Face.FRONT:
            options.front_face_polygon_mode = mode
        if face is None or face is Face.BACK:
            options.back_face_polygon_mode = mode
        return self

    def set_culling_mode(self, mode: CullingMode) -> ProgramDescriptionBuilder:
        self._description._options.culling_mode = mode
        return self

    def set_front_face_mode(self, mode: FrontFaceMode) -> ProgramDescriptionBuilder:
        self._description._options.front_face_mode = mode
        return self

    def set_blend_factor(
        self, factor: BlendingFactor, is_source: bool
    ) -> ProgramDescriptionBuilder:
        """Set the source blend factor, or the destination one if ``is_source`` is false."""
        if is_source:
            self._description._options.src_blend_factor = factor
        else:
            self._description._options.dst_blend_factor = factor
        return self

    def set_depth_function(self, function: DepthFunction) -> ProgramDescriptionBuilder:
        self._description._options.depth_function = function
        return self

    def enable_depth_test(self, enabled: bool) -> ProgramDescriptionBuilder:
        self._description._options.is_depth_test_enabled = enabled
        return self

    def enable_face_culling(self, enabled: bool) -> ProgramDescriptionBuilder:
        self._description._options.is_face_culling_enabled = enabled
        return self

    def enable_blending(self, enabled: bool) -> ProgramDescriptionBuilder:
        self._description._options.is_blending_enabled = enabled
        return self

    def set_frame_buffer(
        self, description: FrameBufferDescription
    ) -> ProgramDescriptionBuilder:
        self._description._frame_buffer = description
        return self

    def reset(self) -> ProgramDescriptionBuilder:
        """Discard everything added so far."""
        self._description = ProgramDescription()
        return self

    def build(self) -> ProgramDescription:
        """Return the finished description and start over with an empty one.

        A mesh, if set, receives the collected attribute layout.
        """
        self._is_name_set = False
        description = self._description
        if description._mesh is not None:
            description._mesh.set_attribute_description(
                copy.copy(description._attribute_description)
            )
        self._description = ProgramDescription()
        return description