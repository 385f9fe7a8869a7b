"""Vertex coordinates of a mesh."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field


@dataclass
class Geometry:
    """Flat vertex coordinates, ``dim`` values per vertex."""

    x: list[float] = field(default_factory=list)
    dim: int = 3

    def __post_init__(self) -> None:
        self.x = [float(value) for value in self.x]
        self.dim = operator.index(self.dim)
        if self.dim < 1:
            raise ValueError(f"Geometry dimension must be positive, got {self.dim}.")

    @property
    def n_points(self) -> int:
        """Number of vertices held."""
        return len(self.x) // self.dim

    def x_at(self, pos: int) -> list[float]:
        """Return the coordinates of vertex ``pos``."""
        pos = operator.index(pos)
        if not 0 <= pos < self.n_points:
            raise IndexError(
                f"Vertex index ({pos}) out of bounds for {self.n_points} vertices."
            )
        start = pos * self.dim
        return self.x[start : start + self.dim]