# gridmesh/__init__.py

__version__ = "0.1.0"

# Import Primitives
from .elements import Vertex, Triangle, NO_NEIGHBOR, GEOM_TOL

# Import the Triangulation container
from .triangulation import Triangulation

# Import Grid Construction
from .grid_init import (generate_vertices, generate_triangles,
                        initialize_with_grid, make_grid_triangulation)

# Import Topology Tools
from .topology import (TopologyError, extract_edges, triangles_by_vertex,
                       boundary_edges, verify_topology)

from .quality import MeshQuality
from .plotting import plot_triangulation
