# vizproto

Building blocks for describing GLSL-based visualizations. The package models
what a rendering run needs: shader sources and how they combine, the
dependencies between them, render options, vertex attribute layouts and
complete program descriptions. It also provides the helpers used to recognise
`#pragma vp` directive lines in shader files.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `vizproto.utils`: `ltrim`, `rtrim` and `trim` strip whitespace; `string_to_bool` accepts only `"true"` and `"false"` and raises `ValueError` otherwise; `compile_regular_expression` compiles a pattern and raises `ValueError` with the reason if it is invalid.
- `vizproto.dependency_graph`: `DependencyGraph`, a directed graph of names with `add_node`, `add_edge`, `contains_node`, `contains_edge`, `is_acyclic`, `topology_sort` and `clear`. `topology_sort` lists every node after the nodes it points to, and returns an empty list when the graph has a cycle.
- `vizproto.shader_code`: `ShaderCode` and `ShaderCodeKind`. A code holds lines of source. Other codes can be added to its prepend and append sets; these are compared by identity and added once at most. `compose()` composes them first and then merges their lines in. `create_source()` joins the lines, each followed by a newline. `ShaderCodeKind.from_name` maps keywords such as `"vertex"` to a kind.
- `vizproto.shader_code_store`: `ShaderCodeStore`, a store of named and unnamed shader codes, with one shared instance available through `ShaderCodeStore.instance()`. `add_dependencies` records edges between named codes and creates missing ones. `compose_all_shaders` raises `ValueError` when the dependencies form a cycle. `get_shader_code` raises `KeyError` for unknown names.
- `vizproto.attribute_description`: `AttributeType` (with `from_name`, which also accepts `"xyz"` for position), `Attribute` with `element_count_from_type` and `offset_from_type` (byte offsets in a position/normal/uv/tangent/bitangent vertex of 32-bit floats), and `AttributeDescription`.
- `vizproto.buffer_description`: `BufferDescription`, made of a size and a binding point. A size of zero raises `ValueError`.
- `vizproto.options`: the `Options` dataclass of render state, and the enumerations it uses: `PolygonMode`, `Face`, `CullingMode`, `FrontFaceMode`, `DepthFunction` and `BlendingFactor`. `str(Options())` lists every setting, one per line.
- `vizproto.program_description`: `ProgramDescription` and the fluent `ProgramDescriptionBuilder`, along with `DrawMode`, `DrawCommand`, `TextureDescription` and `FrameBufferDescription`. The `frame_buffer`, `mesh` and `draw_command` properties raise `LookupError` when they are not set. `create_shader_name` raises `RuntimeError` until a name has been set, and again after each `build()`. `set_name_from_id` draws from a counter shared by all builders.
- `vizproto.tokens`: `TokenKind` (with `from_lexeme` for directive keywords) and the `Token` dataclass.
- `vizproto.lexer`: line-level helpers `is_directive`, `is_continuous`, `join_lines`, `is_separator` and `map_token_kind`. The last returns `IDENTIFIER` for words that are not keywords.

## Example

```python
from vizproto.dependency_graph import DependencyGraph
from vizproto.shader_code import ShaderCode
from vizproto.program_description import DrawMode, ProgramDescriptionBuilder

header = ShaderCode()
header.add_line("#version 450")

body = ShaderCode("main")
body.add_line("void main() {}")
body.add_to_prepend_set(header)
body.compose()
print(body.create_source())   # "#version 450\nvoid main() {}\n"

graph = DependencyGraph()
graph.add_edge("A", "B")
graph.add_edge("B", "C")
print(graph.topology_sort())  # ['C', 'B', 'A']

builder = ProgramDescriptionBuilder()
builder.set_name("main")
print(builder.create_shader_name("shader"))  # "main:shader"
description = builder.set_draw_command(DrawMode.LINES, 42).enable_blending(True).build()
print(description.draw_command.count)        # 42
print(description.options.is_blending_enabled)  # True
```

## What this package does not do

- It does not render anything. It opens no window, creates no graphics context and compiles no shaders on a GPU.
- It has no command-line program and no interpreter for shader files. `vizproto.lexer` offers only helpers for single lines; it does not scan whole files into tokens, and no parser turns directives into program descriptions.
- It does not load meshes, materials or textures. A program description stores whatever objects it is given. A mesh only needs a `set_attribute_description` method, which `build()` calls.