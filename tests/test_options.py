import dataclasses

import pytest

from vizproto.options import (
    BlendingFactor,
    CullingMode,
    DepthFunction,
    FrontFaceMode,
    Options,
    PolygonMode,
)


def test_default_values():
    opts = Options()
    assert opts.is_depth_test_enabled is False
    assert opts.is_face_culling_enabled is False
    assert opts.is_blending_enabled is False
    assert opts.front_face_polygon_mode is PolygonMode.FILL
    assert opts.back_face_polygon_mode is PolygonMode.FILL
    assert opts.culling_mode is CullingMode.BACK
    assert opts.front_face_mode is FrontFaceMode.CCW
    assert opts.depth_function is DepthFunction.LESS
    assert opts.src_blend_factor is BlendingFactor.ONE
    assert opts.dst_blend_factor is BlendingFactor.ZERO


def test_copy_is_equal():
    opts = Options(is_blending_enabled=True)
    duplicate = dataclasses.replace(opts)
    assert duplicate == opts
    assert duplicate is not opts


def test_string_representation():
    expected = (
        "Is depth test enabled: false\n"
        "Is blending enabled: false\n"
        "Is face culling enabled: false\n"
        "Front Face Polygon Mode: 2\n"
        "Back Face Polygon Mode: 2\n"
        "Culling Mode: 1\n"
        "Front Face Mode: 1\n"
        "Depth Function: 1\n"
        "Source Blend Factor: 1\n"
        "Destination Blend Factor: 0\n"
    )
    assert str(Options()) == expected


def test_string_shows_enabled_flag():
    assert "Is depth test enabled: true\n" in str(Options(is_depth_test_enabled=True))


def test_fresh_constructions_are_equal():
    first = Options()
    second = Options()
    assert first == second
    assert str(first) == str(second)
    assert second.depth_function is DepthFunction.LESS


@pytest.mark.parametrize(
    "field, value",
    [
        ("is_depth_test_enabled", True),
        ("is_blending_enabled", True),
        ("is_face_culling_enabled", True),
        ("front_face_polygon_mode", PolygonMode.POINT),
        ("back_face_polygon_mode", PolygonMode.POINT),
        ("culling_mode", CullingMode.FRONT),
        ("front_face_mode", FrontFaceMode.CW),
        ("depth_function", DepthFunction.NEVER),
        ("src_blend_factor", BlendingFactor.ONE_MINUS_SOURCE_ALPHA),
        ("dst_blend_factor", BlendingFactor.ONE_MINUS_SOURCE_ALPHA),
    ],
)
def test_differing_field_makes_unequal(field, value):
    changed = dataclasses.replace(Options(), **{field: value})
    assert not Options() == changed