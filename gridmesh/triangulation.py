import numpy as np

from .elements import Vertex, Triangle


# --- The Triangulation Container ---
class Triangulation:
    ''' Index-based triangle mesh: an ordered list of Vertices and of Triangles.

    Position in the list is the only identity a record has; triangles refer
    to vertices and to each other purely by these 0-based indices.
    '''
    def __init__(self):
        self.vertices = []
        self.triangles = []

    def add_vertex(self, x, y):
        """Appends a vertex and returns the object."""
        v = Vertex(x, y)
        self.vertices.append(v)
        return v

    def add_triangle(self, vertices, neighbors=None):
        """Appends a triangle and returns the object."""
        t = Triangle(vertices, neighbors)
        self.triangles.append(t)
        return t

    @property
    def n_vertices(self):
        return len(self.vertices)

    @property
    def n_triangles(self):
        return len(self.triangles)

    @property
    def is_empty(self):
        return not self.vertices and not self.triangles

    def points(self):
        """ Returns all vertex coordinates as an (N, 2) float64 array. """
        pts = np.zeros((self.n_vertices, 2), dtype=np.float64)
        for i, v in enumerate(self.vertices):
            pts[i, 0] = v.x
            pts[i, 1] = v.y
        return pts

    def to_arrays(self):
        """
        Flattens the mesh into solver/plotting-ready numpy arrays.

        Returns a dict with:
          points    (N, 2) float64
          triangles (M, 3) uint32, vertex indices
          neighbors (M, 3) uint32, neighbor triangle indices (NO_NEIGHBOR on the boundary)
        """
        tri_arr = np.zeros((self.n_triangles, 3), dtype=np.uint32)
        nbr_arr = np.zeros((self.n_triangles, 3), dtype=np.uint32)
        for i, t in enumerate(self.triangles):
            tri_arr[i] = t.vertices
            nbr_arr[i] = t.neighbors

        return {
            "points": self.points(),
            "triangles": tri_arr,
            "neighbors": nbr_arr,
        }

    def copy(self):
        """ Returns an independent copy; no lists are shared with the original. """
        new = Triangulation()
        new.vertices = [Vertex(v.x, v.y, v.triangles) for v in self.vertices]
        new.triangles = [Triangle(t.vertices, t.neighbors) for t in self.triangles]
        return new

    def __repr__(self):
        return f"Triangulation({self.n_vertices} vertices, {self.n_triangles} triangles)"
