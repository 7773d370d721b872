"""
ex02_resolution_sweep.py
------------------------
Goal: Build grids of increasing resolution and tabulate counts and timing.
"""
import time

import numpy as np

from gridcore import Display
from gridmesh import make_grid_triangulation, verify_topology

def run():
    disp = Display("Resolution Sweep", "unit square | float32 coordinates")
    disp.header()
    disp.table([("Cells", 8), ("Vertices", 10), ("Triangles", 10), ("Time [s]", 10), ("Valid", 6)])

    for n in [1, 2, 4, 8, 16, 32, 64]:
        t0 = time.time()
        tri = make_grid_triangulation(0.0, 1.0, 0.0, 1.0, n, n, coord_type=np.float32)
        elapsed = time.time() - t0
        disp.row(n * n, tri.n_vertices, tri.n_triangles, elapsed, verify_topology(tri))

    disp.done("Sweep Complete")

if __name__ == "__main__":
    run()
