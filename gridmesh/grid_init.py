"""
gridmesh/grid_init.py
---------------------
Builds a triangulation straight from a regular rectangular grid, as an
alternative to starting from a single enclosing super-triangle.

Everything is derived from grid coordinates alone: no point search and no
incremental insertion. Grid node (ix, iy) is vertex iy*(xres+1) + ix; cell
(ix, iy) is split along the diagonal through nodes (ix, iy) and
(ix+1, iy+1) into triangles 2*c and 2*c+1, with c = iy*xres + ix.
"""
from .elements import Vertex, Triangle, NO_NEIGHBOR
from .triangulation import Triangulation


def _check_resolution(xres, yres):
    if xres < 0 or yres < 0:
        raise ValueError(f"Grid resolution must be non-negative, got xres={xres}, yres={yres}")


def generate_vertices(out, xmin, xmax, ymin, ymax, xres, yres, coord_type=float):
    """
    Appends (xres+1)*(yres+1) grid vertices to `out`, row by row (y outer, x inner).

    Parameters:
      out: Destination with an append() method (usually Triangulation.vertices)
      xmin, xmax, ymin, ymax: Grid bounds
      xres, yres: Number of cells along X and Y
      coord_type: Numeric type of the stored coordinates (float, np.float32, ...)

    Each vertex gets the indices of the triangles of its neighboring cells.
    """
    xmin, xmax = coord_type(xmin), coord_type(xmax)
    ymin, ymax = coord_type(ymin), coord_type(ymax)

    # A zero resolution collapses that axis onto its minimum bound
    xstep = (xmax - xmin) / coord_type(xres) if xres else coord_type(0)
    ystep = (ymax - ymin) / coord_type(yres) if yres else coord_type(0)

    for iy in range(yres + 1):
        y = ymin + iy * ystep
        for ix in range(xres + 1):
            x = xmin + ix * xstep
            v = Vertex(x, y)

            i = iy * xres + ix
            # left-up
            if ix > 0 and iy > 0:
                v.triangles.append(2 * (i - xres - 1))
                v.triangles.append(2 * (i - xres - 1) + 1)
            # right-up
            if ix < xres and iy > 0:
                v.triangles.append(2 * (i - xres))
            # left-down
            if ix > 0 and iy < yres:
                v.triangles.append(2 * (i - 1) + 1)
            # right-down
            if ix < xres and iy < yres:
                v.triangles.append(2 * i)
                v.triangles.append(2 * i + 1)

            out.append(v)


def generate_triangles(out, xres, yres):
    """
    Appends 2*xres*yres triangles to `out`, two per cell in row-major cell order.

    Cell corners and the two triangles (rows run downwards):

        0___1           v2
        |\\  |           /\\
        | \\ |        n2/  \\n1
        |__\\|         /____\\
        2   3       v0  n0  v1

    Lower-left triangle (0, 2, 3): left cell, cell below, own pair.
    Upper-right triangle (0, 3, 1): own pair, right cell, cell above.
    """
    i = 0  # running triangle counter, two per cell
    for iy in range(yres):
        for ix in range(xres):
            n = iy * (xres + 1) + ix
            vv = (n, n + 1, n + xres + 1, n + xres + 2)

            out.append(Triangle(
                (vv[0], vv[2], vv[3]),
                (i - 1 if ix > 0 else NO_NEIGHBOR,
                 i + 2 * xres + 1 if iy < yres - 1 else NO_NEIGHBOR,
                 i + 1)))

            out.append(Triangle(
                (vv[0], vv[3], vv[1]),
                (i,
                 i + 2 if ix < xres - 1 else NO_NEIGHBOR,
                 i - 2 * xres if iy > 0 else NO_NEIGHBOR)))

            i += 2


def initialize_with_grid(xmin, xmax, ymin, ymax, xres, yres, out, coord_type=float):
    """
    Fills the Triangulation `out` with a regular grid of triangles.

    `out` is expected to be empty: records are appended, so existing content
    would shift the new index space.
    """
    _check_resolution(xres, yres)
    generate_vertices(out.vertices, xmin, xmax, ymin, ymax, xres, yres, coord_type)
    generate_triangles(out.triangles, xres, yres)


def make_grid_triangulation(xmin, xmax, ymin, ymax, xres, yres, coord_type=float):
    """ Returns a new Triangulation covering the rectangle with xres x yres cells. """
    tri = Triangulation()
    initialize_with_grid(xmin, xmax, ymin, ymax, xres, yres, tri, coord_type)
    return tri
