import pytest

from oiseau.geometry import Geometry


def test_default_geometry_is_empty_3d():
    geometry = Geometry()
    assert geometry.dim == 3
    assert geometry.x == []
    assert geometry.n_points == 0


def test_x_at_returns_point_coordinates_3d():
    coords = [0.0, 0.0, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    geometry = Geometry(coords, 3)
    assert geometry.n_points == 3
    assert geometry.x_at(0) == coords[0:3]
    assert geometry.x_at(1) == coords[3:6]
    assert geometry.x_at(2) == coords[6:9]


def test_x_at_respects_dimension_2d():
    coords = [0.5, 1.5, 2.5, 3.5]
    geometry = Geometry(coords, 2)
    assert geometry.n_points == 2
    assert geometry.x_at(1) == coords[2:4]


def test_points_round_trip_through_x_at():
    coords = [float(v) for v in range(12)]
    geometry = Geometry(coords, 3)
    rebuilt = [c for i in range(geometry.n_points) for c in geometry.x_at(i)]
    assert rebuilt == coords


def test_x_at_out_of_range_raises():
    geometry = Geometry([1.0, 2.0, 3.0], 3)
    with pytest.raises(IndexError):
        geometry.x_at(1)
    with pytest.raises(IndexError):
        geometry.x_at(-1)


def test_invalid_dimension_raises():
    with pytest.raises(ValueError):
        Geometry([1.0], 0)