# oiseau

Building blocks for meshes in nodal discontinuous Galerkin codes.

## Modules

- `oiseau.cell`: reference cells `PointCell`, `IntervalCell`, `TriangleCell`,
  `QuadrilateralCell`, `TetrahedronCell` and `HexahedronCell`, each with a
  `kind` (`CellKind`), `name`, `dimension`, `geometry`, `topology`, and a
  `facet` and `edge` cell. `Cell.get_entity_vertices(dim)`,
  `Cell.get_sub_entities(dim0, dim1)` and `Cell.num_sub_entities(dim)` read the
  topology tables. `get_cell_type(kind)` returns one shared instance per
  `CellKind` and raises `ValueError` for an unknown kind.
- `oiseau.geometry`: `Geometry`, flat vertex coordinates (`x`) with `dim`
  values per vertex (3 by default); `n_points` and `x_at(pos)` read them.
- `oiseau.topology`: `Topology`, cell connectivity (`conn`) and the cell of
  each entry (`cell_types`). `calculate_connectivity()` fills `e_to_e` and
  `e_to_f`: for every triangle face, the neighbouring element and its matching
  face number, or the element itself and its own face on a boundary. Only
  triangle cells take part.
- `oiseau.mesh`: `Mesh`, a `topology` together with a `geometry`.
- `oiseau.triplot`: `triplot(ax, mesh)` draws every face of every cell as a
  black line on any object with a matplotlib-style `plot(xs, ys, color=...)`
  method. matplotlib itself is not a dependency.
- `oiseau.jagged_array`: `JaggedArray`, rows of different lengths, with
  `add_row`, `insert_row`, `remove_row`, `add_element`, `at`, `set`,
  `num_rows`, `num_cols`, `total_elements`, `clear` and `is_empty`. Indexing a
  row gives a `RowView` that writes through to the array; bad indices raise
  `IndexError`.
- `oiseau.helper`: `reverse_map(mapping)` swaps keys and values.

## Installation

```
pip install .
```

## Example

```python
from oiseau.cell import CellKind, get_cell_type
from oiseau.geometry import Geometry
from oiseau.jagged_array import JaggedArray
from oiseau.mesh import Mesh
from oiseau.topology import Topology

tri = get_cell_type(CellKind.TRIANGLE)
print(tri.name, tri.dimension)        # triangle 2
print(tri.get_entity_vertices(1))     # [[1, 2], [0, 2], [0, 1]]

topology = Topology(conn=[[0, 1, 2], [1, 3, 2]], cell_types=[tri, tri])
topology.calculate_connectivity()
print(topology.e_to_e)                # [[1, 0, 0], [1, 0, 1]]
print(topology.e_to_f)                # [[1, 1, 2], [0, 0, 2]]

geometry = Geometry([0, 0, 1, 0, 0, 1, 1, 1], dim=2)
mesh = Mesh(topology, geometry)
print(mesh.geometry.x_at(3))          # [1.0, 1.0]

ja = JaggedArray([[1, 2], [], [3, 4, 5]])
ja.add_element(1, 9)
print(ja)
```

## What it does not do

The package does not read or write mesh files: meshes are built in code from
connectivity lists and coordinates. It provides no nodal reference elements,
quadrature rules or differentiation operators, and face connectivity is worked
out for triangle cells only.

## Tests

```
pip install ".[test]"
pytest
```