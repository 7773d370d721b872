"""
ex01_grid_init.py
-----------------
Goal: Build a grid triangulation, check its topology and look at it.
"""
import matplotlib.pyplot as plt

from gridcore import Display
from gridmesh import (Triangulation, initialize_with_grid, verify_topology,
                      boundary_edges, MeshQuality, plot_triangulation)

def run():
    xmin, xmax, ymin, ymax = 0.0, 2.0, 0.0, 2.0
    xres, yres = 4, 3

    disp = Display("Grid Initialization", f"[{xmin}, {xmax}] x [{ymin}, {ymax}] | {xres}x{yres} cells")
    disp.header()

    disp.section("Grid Construction")
    tri = Triangulation()
    initialize_with_grid(xmin, xmax, ymin, ymax, xres, yres, tri)
    disp.grid_summary(tri, xres, yres)

    disp.section("Topology Check")
    try:
        verify_topology(tri)
    except ValueError as e:
        disp.fail(str(e))
        raise
    print(f"   -> OK, {len(boundary_edges(tri))} boundary edges")

    disp.section("Quality")
    MeshQuality(tri).print_report()

    disp.done()

    plot_triangulation(tri, show_indices=True)
    plt.show()

if __name__ == "__main__":
    run()
