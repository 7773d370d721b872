"""
gridcore/display.py
-------------------
Console output for gridmesh scripts: run banner, grid summaries and
fixed-width tables of per-grid statistics.
"""
import time
import numpy as np

RULE = 70


class Display:
    def __init__(self, title, context_info):
        """
        Args:
            title (str): Name of the run (e.g. "Resolution Sweep")
            context_info (str): Bounds / coordinate type (e.g. "[0,1]x[0,1] | float32")
        """
        self.title = title
        self.context = context_info
        self.start_time = time.time()
        self._columns = []

    def header(self):
        print("=" * RULE)
        print(f"gridmesh :: {self.title}")
        print(f"Grid     :: {self.context}")
        print("=" * RULE + "\n")

    def section(self, name):
        print(f"--- {name} ---")

    def grid_summary(self, triangulation, xres, yres):
        """
        Prints cell, vertex and triangle counts of a grid triangulation and
        flags any count that differs from what an xres x yres grid must hold.
        Returns True when all counts match.
        """
        expected = {
            "Vertices": (xres + 1) * (yres + 1),
            "Triangles": 2 * xres * yres,
        }
        got = {
            "Vertices": triangulation.n_vertices,
            "Triangles": triangulation.n_triangles,
        }
        print(f"   Cells     : {xres} x {yres} = {xres * yres}")
        ok = True
        for name in ("Vertices", "Triangles"):
            status = "" if got[name] == expected[name] else f"  [!] expected {expected[name]}"
            ok = ok and not status
            print(f"   {name:<10}: {got[name]}{status}")
        return ok

    def table(self, columns):
        """
        Starts a table. `columns` is a list of (name, width) pairs.
        """
        self._columns = list(columns)
        head = "  ".join(name.rjust(w) for name, w in self._columns)
        print("\n" + head)
        print("-" * len(head))

    def row(self, *values):
        """ Prints one table row; the number of values must match the columns. """
        if len(values) != len(self._columns):
            raise ValueError(f"Expected {len(self._columns)} values, got {len(values)}: {values}")
        print("  ".join(self.format_value(v).rjust(w)
                        for v, (_, w) in zip(values, self._columns)))

    @staticmethod
    def format_value(val):
        if isinstance(val, (bool, np.bool_)):
            return str(val)
        if isinstance(val, (int, np.integer)):
            return f"{int(val):d}"
        if isinstance(val, (float, np.floating)):
            if val == 0:
                return f"{0.0:.4f}"
            # Very small / very large magnitudes in scientific notation
            if not 1e-2 <= abs(val) < 1e5:
                return f"{val:.2e}"
            return f"{val:.4f}"
        return str(val)

    def done(self, message="Run Complete"):
        print(f"\n>> {message} ({time.time() - self.start_time:.2f}s)\n")

    def fail(self, message):
        print(f"\n!! {message} !!\n")
