"""Drawing the edges of a mesh on matplotlib-style axes."""

from __future__ import annotations

from typing import Any

from oiseau.mesh import Mesh


def triplot(ax: Any, mesh: Mesh) -> None:
    """Draw every face of every cell as a black line on ``ax``.

    ``ax`` needs a ``plot(xs, ys, color=...)`` method, as matplotlib axes have.
    """
    topology = mesh.topology
    geometry = mesh.geometry
    for cell_conn, cell in zip(topology.conn, topology.cell_types):
        for face in cell.get_entity_vertices(1):
            points = [geometry.x_at(cell_conn[v]) for v in face]
            xs = [point[0] for point in points]
            ys = [point[1] for point in points]
            ax.plot(xs, ys, color="k")