import numpy as np
import pytest

from gridmesh import NO_NEIGHBOR, Triangle, Triangulation, Vertex


class TestVertex:
    def test_defaults(self) -> None:
        v = Vertex(1.5, -2.0)
        assert v.pos == (1.5, -2.0)
        assert v.triangles == []

    def test_to_array(self) -> None:
        v = Vertex(np.float32(0.5), np.float32(0.25))
        arr = v.to_array()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [0.5, 0.25])

    def test_triangles_not_shared(self) -> None:
        seed = [1, 2]
        v = Vertex(0.0, 0.0, seed)
        v.triangles.append(3)
        assert seed == [1, 2]

    def test_equality(self) -> None:
        assert Vertex(0.0, 1.0, [2]) == Vertex(0.0, 1.0, [2])
        assert Vertex(0.0, 1.0, [2]) != Vertex(0.0, 1.0, [3])


class TestTriangle:
    def test_default_neighbors(self) -> None:
        t = Triangle((0, 1, 2))
        assert t.neighbors == [NO_NEIGHBOR] * 3
        assert all(t.is_boundary(k) for k in range(3))

    @pytest.mark.parametrize("vertices", [(0, 1), (0, 1, 2, 3)])
    def test_wrong_vertex_count(self, vertices: tuple) -> None:
        with pytest.raises(ValueError, match="exactly 3 vertices"):
            Triangle(vertices)

    def test_wrong_neighbor_count(self) -> None:
        with pytest.raises(ValueError, match="exactly 3 neighbors"):
            Triangle((0, 1, 2), (4, 5))

    def test_edges(self) -> None:
        t = Triangle((7, 8, 9), (1, NO_NEIGHBOR, 3))
        assert [t.edge(k) for k in range(3)] == [(7, 8), (8, 9), (9, 7)]
        assert [t.opposite_vertex(k) for k in range(3)] == [9, 7, 8]
        assert t.is_boundary(1)
        assert not t.is_boundary(0)

    def test_neighbor_slot(self) -> None:
        t = Triangle((0, 1, 2), (5, NO_NEIGHBOR, 9))
        assert t.neighbor_slot(9) == 2
        assert t.neighbor_slot(4) is None

    def test_repr_marks_boundary(self) -> None:
        t = Triangle((0, 1, 2), (5, NO_NEIGHBOR, 9))
        assert repr(t) == "Triangle(vertices=(0, 1, 2), neighbors=(5, '-', 9))"


class TestTriangulation:
    def test_empty(self) -> None:
        tri = Triangulation()
        assert tri.is_empty
        assert tri.points().shape == (0, 2)

    def test_add_records(self) -> None:
        tri = Triangulation()
        for x, y in [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]:
            tri.add_vertex(x, y)
        t = tri.add_triangle((0, 1, 2))
        assert tri.n_vertices == 3
        assert tri.n_triangles == 1
        assert tri.triangles[0] is t
        assert not tri.is_empty

    def test_to_arrays(self, grid_2x2: Triangulation) -> None:
        arrays = grid_2x2.to_arrays()
        assert arrays["points"].shape == (9, 2)
        assert arrays["triangles"].shape == (8, 3)
        assert arrays["neighbors"].shape == (8, 3)
        assert arrays["triangles"].dtype == np.uint32
        assert arrays["neighbors"][0, 0] == NO_NEIGHBOR
        assert arrays["triangles"][7].tolist() == [4, 8, 5]

    def test_copy_is_independent(self, grid_2x2: Triangulation) -> None:
        other = grid_2x2.copy()
        assert other.vertices == grid_2x2.vertices
        assert other.triangles == grid_2x2.triangles
        other.vertices[4].triangles.append(99)
        other.triangles[0].neighbors[0] = 3
        assert 99 not in grid_2x2.vertices[4].triangles
        assert grid_2x2.triangles[0].neighbors[0] == NO_NEIGHBOR
