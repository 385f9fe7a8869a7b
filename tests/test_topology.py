import pytest

from oiseau.cell import CellKind, get_cell_type
from oiseau.topology import Topology

TRI = get_cell_type(CellKind.TRIANGLE)
QUAD = get_cell_type(CellKind.QUADRILATERAL)


def _check_symmetric(topology):
    for i, neighbours in enumerate(topology.e_to_e):
        for j, k in enumerate(neighbours):
            f = topology.e_to_f[i][j]
            if k == i:
                assert f == j
            else:
                assert topology.e_to_e[k][f] == i
                assert topology.e_to_f[k][f] == j


def test_n_cells():
    topology = Topology([[0, 1, 2], [1, 3, 2]], [TRI, TRI])
    assert topology.n_cells() == 2
    assert Topology().n_cells() == 0


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        Topology([[0, 1, 2]], [])


def test_single_triangle_is_all_boundary():
    topology = Topology([[0, 1, 2]], [TRI])
    topology.calculate_connectivity()
    assert topology.e_to_e == [[0, 0, 0]]
    assert topology.e_to_f == [[0, 1, 2]]


def test_two_triangles_share_one_face():
    topology = Topology([[0, 1, 2], [1, 3, 2]], [TRI, TRI])
    topology.calculate_connectivity()
    interior = [
        (i, j)
        for i, row in enumerate(topology.e_to_e)
        for j, k in enumerate(row)
        if k != i
    ]
    assert len(interior) == 2
    # face 0 of the first triangle is edge (1, 2), shared with the second
    assert topology.e_to_e[0][0] == 1
    _check_symmetric(topology)


def test_square_split_in_four_triangles():
    conn = [[0, 1, 4], [1, 2, 4], [2, 3, 4], [3, 0, 4]]
    topology = Topology(conn, [TRI] * 4)
    topology.calculate_connectivity()
    interior = sum(
        1 for i, row in enumerate(topology.e_to_e) for k in row if k != i
    )
    assert interior == 8
    _check_symmetric(topology)


def test_non_triangle_cells_are_skipped():
    topology = Topology([[0, 1, 2, 3], [1, 4, 2]], [QUAD, TRI])
    topology.calculate_connectivity()
    assert len(topology.e_to_e) == 1
    assert topology.e_to_e == [[0, 0, 0]]


def test_recalculation_gives_same_result():
    topology = Topology([[0, 1, 2], [1, 3, 2], [3, 4, 2]], [TRI] * 3)
    topology.calculate_connectivity()
    first = ([row[:] for row in topology.e_to_e], [row[:] for row in topology.e_to_f])
    topology.calculate_connectivity()
    assert (topology.e_to_e, topology.e_to_f) == first
    _check_symmetric(topology)