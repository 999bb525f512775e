[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vizproto"
version = "0.1.0"
description = "Description layer for prototyping GLSL-based visualizations: shader composition, dependency graphs, render options, program descriptions and directive-line helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["glsl", "shader", "opengl", "visualization", "prototyping", "dependency-graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vizproto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
