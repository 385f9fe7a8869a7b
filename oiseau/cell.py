"""Reference cell shapes and their topology."""

from __future__ import annotations

import enum
from collections.abc import Sequence


class CellKind(enum.IntEnum):
    UNDEFINED = 0
    POINT = 1
    INTERVAL = 2
    TRIANGLE = 3
    QUADRILATERAL = 4
    TETRAHEDRON = 5
    HEXAHEDRON = 6


def _freeze(nested):
    if isinstance(nested, Sequence):
        return tuple(_freeze(item) for item in nested)
    return nested


def _thaw(nested):
    if isinstance(nested, tuple):
        return [_thaw(item) for item in nested]
    return nested


class Cell:
    """A reference cell: its name, dimension, vertex geometry and topology.

    ``topology[d][i]`` describes the i-th entity of dimension ``d`` as a list
    of index lists, the first of which holds the entity's vertices.
    """

    def __init__(
        self,
        kind: CellKind,
        name: str,
        dimension: int,
        geometry: tuple[Sequence[float], tuple[int, int]],
        topology,
        facet: "Cell | None" = None,
        edge: "Cell | None" = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.dimension = dimension
        coords, shape = geometry
        self.geometry: tuple[tuple[float, ...], tuple[int, int]] = (
            tuple(float(c) for c in coords),
            (int(shape[0]), int(shape[1])),
        )
        self.topology = _freeze(topology)
        self.facet = facet
        self.edge = edge

    def get_sub_entities(self, dim0: int, dim1: int) -> list[list[int]]:
        return _thaw(self.topology[dim0][dim1])

    def get_entity_vertices(self, dim: int) -> list[list[int]]:
        return [list(entity[0]) for entity in self.topology[dim]]

    def num_sub_entities(self, dim: int) -> int:
        if dim <= self.dimension:
            return len(self.topology[dim])
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PointCell(Cell):
    def __init__(self) -> None:
        super().__init__(
            CellKind.POINT,
            "point",
            0,
            ([0.0], (1, 1)),
            [
                [
                    [[0]],
                ],
            ],
        )


class IntervalCell(Cell):
    def __init__(self) -> None:
        super().__init__(
            CellKind.INTERVAL,
            "interval",
            1,
            ([0.0, 1.0], (2, 1)),
            [
                [
                    [[0], [0]],
                    [[1], [0]],
                ],
                [
                    [[0, 1], [0]],
                ],
            ],
        )


class TriangleCell(Cell):
    def __init__(self) -> None:
        super().__init__(
            CellKind.TRIANGLE,
            "triangle",
            2,
            ([0.0, 0.0, 1.0, 0.0, 0.0, 1.0], (3, 2)),
            [
                [
                    [[0], [1, 2], [0]],
                    [[1], [0, 2], [0]],
                    [[2], [0, 1], [0]],
                ],
                [
                    [[1, 2], [0], [0]],
                    [[0, 2], [1], [0]],
                    [[0, 1], [2], [0]],
                ],
                [
                    [[0, 1, 2], [0, 1, 2], [0]],
                ],
            ],
            facet=get_cell_type(CellKind.INTERVAL),
            edge=get_cell_type(CellKind.POINT),
        )


class QuadrilateralCell(Cell):
    def __init__(self) -> None:
        super().__init__(
            CellKind.QUADRILATERAL,
            "quadrilateral",
            2,
            ([0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0], (4, 2)),
            [
                [
                    [[0], [0, 3], [0]],
                    [[1], [0, 1], [0]],
                    [[2], [1, 2], [0]],
                    [[3], [2, 3], [0]],
                ],
                [
                    [[0, 1], [0, 1], [0]],
                    [[1, 2], [1, 2], [0]],
                    [[2, 3], [2, 3], [0]],
                    [[3, 0], [3, 0], [0]],
                ],
                [
                    [[0, 1, 2, 3], [0, 1, 2, 3], [0]],
                ],
            ],
            facet=get_cell_type(CellKind.INTERVAL),
            edge=get_cell_type(CellKind.POINT),
        )


class TetrahedronCell(Cell):
    def __init__(self) -> None:
        super().__init__(
            CellKind.TETRAHEDRON,
            "tetrahedron",
            3,
            ([0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0], (4, 3)),
            [
                [
                    [[0], [3, 4, 5], [1, 2, 3], [0]],
                    [[1], [1, 2, 5], [0, 2, 3], [0]],
                    [[2], [0, 2, 4], [0, 1, 3], [0]],
                    [[3], [0, 1, 3], [0, 1, 2], [0]],
                ],
                [
                    [[2, 3], [0], [0, 1], [0]],
                    [[1, 3], [1], [0, 2], [0]],
                    [[1, 2], [2], [0, 3], [0]],
                    [[0, 3], [3], [1, 2], [0]],
                    [[0, 2], [4], [1, 3], [0]],
                    [[0, 1], [5], [2, 3], [0]],
                ],
                [
                    [[1, 2, 3], [0, 1, 2], [0], [0]],
                    [[0, 2, 3], [0, 3, 4], [1], [0]],
                    [[0, 1, 3], [1, 3, 5], [2], [0]],
                    [[0, 1, 2], [2, 4, 5], [3], [0]],
                ],
                [
                    [[0, 1, 2, 3], [0, 1, 2, 3, 4, 5], [0, 1, 2, 3], [0]],
                ],
            ],
            facet=get_cell_type(CellKind.TRIANGLE),
            edge=get_cell_type(CellKind.INTERVAL),
        )


class HexahedronCell(Cell):
    def __init__(self) -> None:
        super().__init__(
            CellKind.HEXAHEDRON,
            "hexahedron",
            3,
            (
                [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0,
                 0.0, 0.0, 1.0, 0.0, 0.0, 1.0, 1.0, 0.0],
                (8, 3),
            ),
            [
                [
                    [[0], [0, 1, 2, 3], [0]],
                    [[1], [4, 5, 6, 7], [0]],
                    [[2], [0, 1, 5, 4], [0]],
                    [[3], [1, 2, 6, 5], [0]],
                    [[4], [2, 3, 7, 6], [0]],
                    [[5], [3, 0, 4, 7], [0]],
                ],
                [
                    [[0, 1], [0, 1], [0]],
                    [[1, 2], [1, 2], [0]],
                    [[2, 3], [2, 3], [0]],
                    [[3, 0], [3, 0], [0]],
                    [[4, 5], [4, 5], [0]],
                    [[5, 6], [5, 6], [0]],
                    [[6, 7], [6, 7], [0]],
                    [[7, 4], [7, 4], [0]],
                    [[0, 4], [0, 4], [0]],
                    [[1, 5], [1, 5], [0]],
                    [[2, 6], [2, 6], [0]],
                    [[3, 7], [3, 7], [0]],
                ],
                [
                    [[0, 1, 2, 3, 4, 5, 6, 7], [0, 1, 2, 3, 4, 5, 6, 7], [0]],
                ],
            ],
            facet=get_cell_type(CellKind.QUADRILATERAL),
            edge=get_cell_type(CellKind.INTERVAL),
        )


_CELL_CLASSES: dict[CellKind, type[Cell]] = {
    CellKind.POINT: PointCell,
    CellKind.INTERVAL: IntervalCell,
    CellKind.TRIANGLE: TriangleCell,
    CellKind.QUADRILATERAL: QuadrilateralCell,
    CellKind.TETRAHEDRON: TetrahedronCell,
    CellKind.HEXAHEDRON: HexahedronCell,
}

_cache: dict[CellKind, Cell] = {}


def get_cell_type(kind: CellKind) -> Cell:
    """Return the shared cell instance for ``kind``."""
    try:
        kind = CellKind(kind)
    except ValueError:
        raise ValueError("Unknown cell type") from None
    cell = _cache.get(kind)
    if cell is not None:
        return cell
    cls = _CELL_CLASSES.get(kind)
    if cls is None:
        raise ValueError("Unknown cell type")
    cell = cls()
    return _cache.setdefault(kind, cell)