"""Description of a GPU buffer by size and binding point."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BufferDescription:
    """A buffer of ``size`` bytes bound at ``binding_point``; size must be non-zero."""

    size: int
    binding_point: int

    def __post_init__(self) -> None:
        if self.size == 0:
            raise ValueError("The size of buffer cannot be 0")