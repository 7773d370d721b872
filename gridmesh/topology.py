"""
gridmesh/topology.py
--------------------
Connectivity queries and consistency checks for an index-based Triangulation.
"""
from .elements import NO_NEIGHBOR


class TopologyError(ValueError):
    """Raised when a triangulation's index structure is inconsistent."""


def extract_edges(triangles):
    """ Returns the set of unique edges as sorted (v_a, v_b) vertex-index pairs. """
    edges = set()
    for t in triangles:
        for k in range(3):
            edges.add(tuple(sorted(t.edge(k))))
    return edges


def triangles_by_vertex(n_vertices, triangles):
    """
    Builds the complete incident-triangle list for every vertex from the
    triangle records (ascending triangle order).
    """
    fans = [[] for _ in range(n_vertices)]
    for t_idx, t in enumerate(triangles):
        for v in t.vertices:
            fans[v].append(t_idx)
    return fans


def boundary_edges(triangulation):
    """ Returns (triangle_index, slot) for every edge with no neighbor across it. """
    result = []
    for t_idx, t in enumerate(triangulation.triangles):
        for k in range(3):
            if t.neighbors[k] == NO_NEIGHBOR:
                result.append((t_idx, k))
    return result


def verify_topology(triangulation):
    """
    Checks the index structure of a triangulation and returns True.

    Raises TopologyError on the first defect found:
      - a triangle vertex index outside the vertex list
      - a neighbor index that is neither valid nor NO_NEIGHBOR
      - a neighbor link that is not mirrored by the other triangle
      - a mirrored link whose two slots do not describe the same edge
      - a vertex seed list naming a triangle that does not use that vertex
    """
    n_verts = triangulation.n_vertices
    n_tris = triangulation.n_triangles
    triangles = triangulation.triangles

    # --- 1. Index Ranges ---
    for t_idx, t in enumerate(triangles):
        for v in t.vertices:
            if not 0 <= v < n_verts:
                raise TopologyError(f"Triangle {t_idx} references vertex {v} "
                                    f"outside [0, {n_verts}).")
        for n in t.neighbors:
            if n != NO_NEIGHBOR and not 0 <= n < n_tris:
                raise TopologyError(f"Triangle {t_idx} references neighbor {n} "
                                    f"outside [0, {n_tris}).")

    # --- 2. Neighbor Symmetry & Shared Edges ---
    for t_idx, t in enumerate(triangles):
        for k, n in enumerate(t.neighbors):
            if n == NO_NEIGHBOR:
                continue
            other = triangles[n]
            back = other.neighbor_slot(t_idx)
            if back is None:
                raise TopologyError(f"Triangle {t_idx} lists {n} as neighbor, "
                                    f"but {n} does not list {t_idx}.")
            if set(t.edge(k)) != set(other.edge(back)):
                raise TopologyError(f"Triangles {t_idx} and {n} are linked across "
                                    f"different edges {t.edge(k)} / {other.edge(back)}.")

    # --- 3. Vertex Seed Lists ---
    for v_idx, v in enumerate(triangulation.vertices):
        for t_idx in v.triangles:
            if not 0 <= t_idx < n_tris:
                raise TopologyError(f"Vertex {v_idx} lists triangle {t_idx} "
                                    f"outside [0, {n_tris}).")
            if v_idx not in triangles[t_idx].vertices:
                raise TopologyError(f"Vertex {v_idx} lists triangle {t_idx}, "
                                    f"which does not use it.")

    return True
