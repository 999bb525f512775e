"""Shader composition, dependency graphs, render options, program descriptions and directive-line helpers."""

__version__ = "0.1.0"