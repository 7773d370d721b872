import numpy as np

# Reserved "no neighbor" marker: the largest unsigned 32-bit index, never a valid slot
NO_NEIGHBOR = 2**32 - 1

# Establish a tolerance for avoiding floating point errors in area checks
GEOM_TOL = 1e-12


class Vertex:
    ''' Represents a mesh vertex: a 2D position plus the triangles known to touch it.

    This class uses `__slots__` for memory optimization, as grid meshes often
    contain hundreds to millions of vertex instances. The coordinate type is
    whatever the caller built the grid with (plain `float` by default, or a
    numpy scalar type such as `np.float32`).

    Attributes:
        x: The global X-coordinate
        y: The global Y-coordinate
        triangles (list of int): Incident triangle indices, in the order they
            were discovered. For grid-built meshes this is a seed list for a
            downstream triangulation engine, appended to and never re-sorted.
    '''
    __slots__ = ['x', 'y', 'triangles']

    def __init__(self, x, y, triangles=None):
        self.x = x
        self.y = y
        self.triangles = [] if triangles is None else list(triangles)

    @property
    def pos(self):
        ''' Returns the (x, y) coordinate pair as a tuple. '''
        return (self.x, self.y)

    def to_array(self):
        ''' Returns coordinates as a numpy array for calculation. '''
        return np.array([self.x, self.y], dtype=np.float64)

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return (self.x == other.x and self.y == other.y
                and self.triangles == other.triangles)

    def __repr__(self):
        return f'Vertex(x = {float(self.x):10.4f}, y = {float(self.y):10.4f}, triangles = {self.triangles})'



class Triangle:
    ''' Represents a triangle by vertex indices and neighbor triangle indices.

    Vertices and neighbors are plain integer indices into the owning
    triangulation's sequences, never object references.

    Neighbor slot k holds the triangle across the edge running from
    vertices[k] to vertices[(k + 1) % 3]:

               v2
               /\\
           n2 /  \\ n1
             /____\\
           v0  n0  v1

    A slot holding `NO_NEIGHBOR` marks that edge as part of the outer boundary.

    Attributes:
        vertices (list of int): The three vertex indices.
        neighbors (list of int): The three neighbor triangle indices.
    '''
    __slots__ = ['vertices', 'neighbors']

    def __init__(self, vertices, neighbors=None):
        vertices = [int(v) for v in vertices]
        if neighbors is None:
            neighbors = [NO_NEIGHBOR, NO_NEIGHBOR, NO_NEIGHBOR]
        neighbors = [int(n) for n in neighbors]

        if len(vertices) != 3:
            raise ValueError(f'Triangle needs exactly 3 vertices, got {len(vertices)}: {vertices}')
        if len(neighbors) != 3:
            raise ValueError(f'Triangle needs exactly 3 neighbors, got {len(neighbors)}: {neighbors}')

        self.vertices = vertices
        self.neighbors = neighbors

    def edge(self, k):
        ''' Returns the (start, end) vertex indices of the edge behind neighbor slot k. '''
        return self.vertices[k], self.vertices[(k + 1) % 3]

    def opposite_vertex(self, k):
        ''' Returns the vertex index not on the edge behind neighbor slot k. '''
        return self.vertices[(k + 2) % 3]

    def is_boundary(self, k):
        return self.neighbors[k] == NO_NEIGHBOR

    def neighbor_slot(self, tri_index):
        ''' Returns the slot listing triangle `tri_index`, or None if it is not a neighbor. '''
        for k, n in enumerate(self.neighbors):
            if n == tri_index:
                return k
        return None

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.vertices == other.vertices and self.neighbors == other.neighbors

    def __repr__(self):
        nbrs = ['-' if n == NO_NEIGHBOR else n for n in self.neighbors]
        return f"Triangle(vertices={tuple(self.vertices)}, neighbors={tuple(nbrs)})"
