"""Rendering state options that a program applies before drawing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PolygonMode(Enum):
    POINT = 0
    LINE = 1
    FILL = 2


class Face(Enum):
    FRONT = 0
    BACK = 1


class CullingMode(Enum):
    FRONT = 0
    BACK = 1
    FRONT_AND_BACK = 2


class FrontFaceMode(Enum):
    CW = 0
    CCW = 1


class DepthFunction(Enum):
    NEVER = 0
    LESS = 1
    EQUAL = 2
    LESS_EQUAL = 3
    GREATER = 4
    NOT_EQUAL = 5
    GREATER_EQUAL = 6
    ALWAYS = 7


class BlendingFactor(Enum):
    ZERO = 0
    ONE = 1
    SOURCE_COLOR = 2
    ONE_MINUS_SOURCE_COLOR = 3
    DESTINATION_COLOR = 4
    ONE_MINUS_DESTINATION_COLOR = 5
    SOURCE_ALPHA = 6
    ONE_MINUS_SOURCE_ALPHA = 7
    DESTINATION_ALPHA = 8
    ONE_MINUS_DESTINATION_ALPHA = 9
    CONSTANT_COLOR = 10
    ONE_MINUS_CONSTANT_COLOR = 11
    CONSTANT_ALPHA = 12
    ONE_MINUS_CONSTANT_ALPHA = 13


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class Options:
    """The full set of render-state switches for one program."""

    is_depth_test_enabled: bool = False
    is_blending_enabled: bool = False
    is_face_culling_enabled: bool = False
    front_face_polygon_mode: PolygonMode = PolygonMode.FILL
    back_face_polygon_mode: PolygonMode = PolygonMode.FILL
    culling_mode: CullingMode = CullingMode.BACK
    front_face_mode: FrontFaceMode = FrontFaceMode.CCW
    depth_function: DepthFunction = DepthFunction.LESS
    src_blend_factor: BlendingFactor = BlendingFactor.ONE
    dst_blend_factor: BlendingFactor = BlendingFactor.ZERO

    def __str__(self) -> str:
        rows = [
            f"Is depth test enabled: {_flag(self.is_depth_test_enabled)}",
            f"Is blending enabled: {_flag(self.is_blending_enabled)}",
            f"Is face culling enabled: {_flag(self.is_face_culling_enabled)}",
            f"Front Face Polygon Mode: {self.front_face_polygon_mode.value}",
            f"Back Face Polygon Mode: {self.back_face_polygon_mode.value}",
            f"Culling Mode: {self.culling_mode.value}",
            f"Front Face Mode: {self.front_face_mode.value}",
            f"Depth Function: {self.depth_function.value}",
            f"Source Blend Factor: {self.src_blend_factor.value}",
            f"Destination Blend Factor: {self.dst_blend_factor.value}",
        ]
        return "".join(f"{row}\n" for row in rows)