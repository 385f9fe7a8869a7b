"""Cell connectivity of a mesh."""

from __future__ import annotations

from dataclasses import dataclass, field

from oiseau.cell import Cell, CellKind


@dataclass
class Topology:
    """Cells given by their vertex indices, and the cell kind of each.

    After :meth:`calculate_connectivity`, ``e_to_e[i][j]`` is the element
    across face ``j`` of element ``i`` (``i`` itself on a boundary) and
    ``e_to_f[i][j]`` is the matching face number in that element.
    """

    conn: list[list[int]] = field(default_factory=list)
    cell_types: list[Cell] = field(default_factory=list)
    e_to_e: list[list[int]] = field(default_factory=list, init=False)
    e_to_f: list[list[int]] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.conn = [list(cell) for cell in self.conn]
        self.cell_types = list(self.cell_types)
        if len(self.conn) != len(self.cell_types):
            raise ValueError(
                f"Got {len(self.conn)} cells but {len(self.cell_types)} cell types."
            )

    def n_cells(self) -> int:
        return len(self.conn)

    def calculate_connectivity(self) -> None:
        """Find the neighbours of every triangle across each of its faces.

        Only triangle cells take part; elements are numbered in the order
        the triangles appear.
        """
        faces: list[list[tuple[int, ...]]] = []
        for cell_conn, cell in zip(self.conn, self.cell_types):
            if cell.kind != CellKind.TRIANGLE:
                continue
            faces.append(
                [
                    tuple(sorted(cell_conn[v] for v in face))
                    for face in cell.get_entity_vertices(1)
                ]
            )

        e_to_e = [[i] * len(cell_faces) for i, cell_faces in enumerate(faces)]
        e_to_f = [list(range(len(cell_faces))) for cell_faces in faces]

        waiting: dict[tuple[int, ...], list[tuple[int, int]]] = {}
        for i, cell_faces in enumerate(faces):
            for j, key in enumerate(cell_faces):
                pending = waiting.setdefault(key, [])
                match = next(
                    (n for n, (other, _) in enumerate(pending) if other != i), None
                )
                if match is None:
                    pending.append((i, j))
                    continue
                other_i, other_j = pending.pop(match)
                e_to_e[other_i][other_j] = i
                e_to_e[i][j] = other_i
                e_to_f[other_i][other_j] = j
                e_to_f[i][j] = other_j

        self.e_to_e = e_to_e
        self.e_to_f = e_to_f