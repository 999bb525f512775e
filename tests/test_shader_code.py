import pytest

from vizproto.shader_code import ShaderCode, ShaderCodeKind


def test_fresh_code_has_no_lines():
    assert ShaderCode().lines == []


def test_add_lines():
    code = ShaderCode()
    code.add_line("first line")
    assert code.lines == ["first line"]


def test_prepend_lines():
    code = ShaderCode()
    code.add_line("second line")
    code.prepend_lines(["first line"])
    assert code.lines == ["first line", "second line"]


def test_append_lines():
    code = ShaderCode()
    code.add_line("first line")
    code.append_lines(["second line"])
    assert code.lines == ["first line", "second line"]


def test_prepend_lines_from_other_code():
    first = ShaderCode()
    first.add_line("from first")
    second = ShaderCode()
    second.add_line("from second")
    first.prepend_lines(second)
    assert first.lines == ["from second", "from first"]


def test_append_lines_from_other_code():
    first = ShaderCode()
    first.add_line("from first")
    second = ShaderCode()
    second.add_line("from second")
    first.append_lines(second)
    assert first.lines == ["from first", "from second"]


def test_add_to_append_set():
    first, second = ShaderCode(), ShaderCode()
    first.add_to_append_set(second)
    assert first.is_in_append_set(second)
    assert not first.is_in_prepend_set(second)


def test_add_to_prepend_set():
    first, second = ShaderCode(), ShaderCode()
    first.add_to_prepend_set(second)
    assert first.is_in_prepend_set(second)
    assert not first.is_in_append_set(second)


def test_sets_use_identity():
    first, second, third = ShaderCode(), ShaderCode(), ShaderCode()
    first.add_to_append_set(second)
    assert not first.is_in_append_set(third)


def test_compose_from_append_set():
    source = ShaderCode()
    source.add_line("source line")
    other = ShaderCode()
    other.add_line("append line")
    source.add_to_append_set(other)
    source.compose()
    assert source.lines == ["source line", "append line"]


def test_repeated_append_insertion_is_ignored():
    source = ShaderCode()
    source.add_line("source line")
    other = ShaderCode()
    other.add_line("append line")
    source.add_to_append_set(other)
    source.add_to_append_set(other)
    source.compose()
    assert source.lines == ["source line", "append line"]


def test_compose_from_prepend_set():
    source = ShaderCode()
    source.add_line("source line")
    other = ShaderCode()
    other.add_line("prepend line")
    source.add_to_prepend_set(other)
    source.compose()
    assert source.lines == ["prepend line", "source line"]


def test_repeated_prepend_insertion_is_ignored():
    source = ShaderCode()
    source.add_line("source line")
    other = ShaderCode()
    other.add_line("prepend line")
    source.add_to_prepend_set(other)
    source.add_to_prepend_set(other)
    source.compose()
    assert source.lines == ["prepend line", "source line"]


def test_compose_from_both_sets():
    source = ShaderCode()
    source.add_line("source line")
    before = ShaderCode()
    before.add_line("prepend line")
    after = ShaderCode()
    after.add_line("append line")
    source.add_to_prepend_set(before)
    source.add_to_append_set(after)
    source.compose()
    assert source.lines == ["prepend line", "source line", "append line"]


def test_create_source():
    code = ShaderCode()
    for line in ("first line", "second line", "third line"):
        code.add_line(line)
    assert code.create_source() == "first line\nsecond line\nthird line\n"
    assert str(code) == "first line\nsecond line\nthird line\n"


def test_not_composed_by_default():
    assert ShaderCode().is_composed() is False


def test_compose_marks_composed():
    code = ShaderCode()
    code.compose()
    assert code.is_composed() is True


def test_dependencies_are_composed_too():
    source, before, after = ShaderCode(), ShaderCode(), ShaderCode()
    source.add_line("source line")
    before.add_line("prepend line")
    after.add_line("append line")
    assert not any(c.is_composed() for c in (source, before, after))
    source.add_to_prepend_set(before)
    source.add_to_append_set(after)
    source.compose()
    assert all(c.is_composed() for c in (source, before, after))


def test_composing_twice_does_not_duplicate():
    source = ShaderCode()
    source.add_line("source line")
    other = ShaderCode()
    other.add_line("append line")
    source.add_to_append_set(other)
    source.compose()
    source.compose()
    assert source.is_composed()
    assert source.lines == ["source line", "append line"]


def test_nested_composition():
    top, middle, bottom = ShaderCode(), ShaderCode(), ShaderCode()
    top.add_line("top")
    middle.add_line("middle")
    bottom.add_line("bottom")
    middle.add_to_prepend_set(bottom)
    top.add_to_prepend_set(middle)
    top.compose()
    assert top.lines == ["bottom", "middle", "top"]


@pytest.mark.parametrize("kind", list(ShaderCodeKind))
def test_setting_kind(kind):
    code = ShaderCode()
    code.kind = kind
    assert code.kind is kind


def test_kind_is_unknown_by_default():
    assert ShaderCode().kind is ShaderCodeKind.UNKNOWN


def test_is_empty():
    code = ShaderCode()
    assert code.is_empty() is True
    code.add_line("line")
    assert code.is_empty() is False


def test_is_empty_with_only_dependency():
    code = ShaderCode()
    code.add_to_append_set(ShaderCode())
    assert code.is_empty() is False


def test_naming():
    assert ShaderCode().is_named() is False
    named = ShaderCode("shader")
    assert named.is_named() is True
    assert named.name == "shader"


@pytest.mark.parametrize(
    "name, kind",
    [
        ("generic", ShaderCodeKind.GENERIC),
        ("vertex", ShaderCodeKind.VERTEX),
        ("fragment", ShaderCodeKind.FRAGMENT),
        ("geometry", ShaderCodeKind.GEOMETRY),
        ("compute", ShaderCodeKind.COMPUTE),
        ("tesselation_control", ShaderCodeKind.TESSELATION_CONTROL),
        ("tesselation_evaluation", ShaderCodeKind.TESSELATION_EVALUATION),
    ],
)
def test_kind_from_name(name, kind):
    assert ShaderCodeKind.from_name(name) is kind


def test_kind_from_unknown_name():
    assert ShaderCodeKind.from_name("pixel") is None


@pytest.mark.parametrize(
    "kind, label",
    [
        (ShaderCodeKind.UNKNOWN, "Unknown"),
        (ShaderCodeKind.TESSELATION_CONTROL, "Tessellation Control"),
        (ShaderCodeKind.TESSELATION_EVALUATION, "Tessellation Evaluation"),
        (ShaderCodeKind.COMPUTE, "Compute"),
    ],
)
def test_kind_labels(kind, label):
    assert str(kind) == label