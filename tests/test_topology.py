import pytest

from gridmesh import (
    NO_NEIGHBOR,
    TopologyError,
    Triangulation,
    boundary_edges,
    extract_edges,
    make_grid_triangulation,
    triangles_by_vertex,
    verify_topology,
)


@pytest.mark.parametrize("xres,yres", [(1, 1), (2, 2), (3, 5)])
def test_edge_count(xres: int, yres: int) -> None:
    tri = make_grid_triangulation(0.0, 1.0, 0.0, 1.0, xres, yres)
    horizontal = xres * (yres + 1)
    vertical = (xres + 1) * yres
    diagonal = xres * yres
    assert len(extract_edges(tri.triangles)) == horizontal + vertical + diagonal


@pytest.mark.parametrize("xres,yres", [(1, 1), (2, 2), (3, 5)])
def test_perimeter_edges(xres: int, yres: int) -> None:
    tri = make_grid_triangulation(0.0, 1.0, 0.0, 1.0, xres, yres)
    edges = boundary_edges(tri)
    assert len(edges) == 2 * (xres + yres)

    # every perimeter edge is unique, and appears nowhere else
    keys = [tuple(sorted(tri.triangles[t].edge(k))) for t, k in edges]
    assert len(set(keys)) == len(keys)
    counts = {}
    for t in tri.triangles:
        for k in range(3):
            key = tuple(sorted(t.edge(k)))
            counts[key] = counts.get(key, 0) + 1
    assert all(counts[key] == 1 for key in keys)
    assert sum(1 for c in counts.values() if c == 2) == len(counts) - len(keys)


def test_triangles_by_vertex(grid_1x1: Triangulation) -> None:
    assert triangles_by_vertex(4, grid_1x1.triangles) == [[0, 1], [1], [0], [0, 1]]


class TestVerifyTopology:
    def test_valid(self, grid_2x2: Triangulation) -> None:
        assert verify_topology(grid_2x2) is True

    def test_empty(self) -> None:
        assert verify_topology(Triangulation()) is True

    def test_vertex_out_of_range(self, grid_2x2: Triangulation) -> None:
        grid_2x2.triangles[3].vertices[1] = 9
        with pytest.raises(TopologyError, match="vertex 9"):
            verify_topology(grid_2x2)

    def test_neighbor_out_of_range(self, grid_2x2: Triangulation) -> None:
        grid_2x2.triangles[0].neighbors[0] = 8
        with pytest.raises(TopologyError, match="neighbor 8"):
            verify_topology(grid_2x2)

    def test_asymmetric_link(self, grid_2x2: Triangulation) -> None:
        grid_2x2.triangles[5].neighbors[2] = NO_NEIGHBOR
        with pytest.raises(TopologyError, match="does not list"):
            verify_topology(grid_2x2)

    def test_wrong_shared_edge(self, grid_1x1: Triangulation) -> None:
        # mirrored link, but across edges that are not the same
        grid_1x1.triangles[0].neighbors = [1, NO_NEIGHBOR, NO_NEIGHBOR]
        grid_1x1.triangles[1].neighbors = [NO_NEIGHBOR, 0, NO_NEIGHBOR]
        with pytest.raises(TopologyError, match="different edges"):
            verify_topology(grid_1x1)

    def test_bad_seed_list(self, grid_2x2: Triangulation) -> None:
        grid_2x2.vertices[2].triangles.append(0)
        with pytest.raises(TopologyError, match="Vertex 2 lists triangle 0"):
            verify_topology(grid_2x2)

    def test_is_value_error(self) -> None:
        assert issubclass(TopologyError, ValueError)
