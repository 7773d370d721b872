"""
gridmesh/quality.py
-------------------
Tools for inspecting the geometry of a Triangulation.
Calculates Area, Minimum Angle and Aspect Ratio per triangle.
"""
import numpy as np
import matplotlib.pyplot as plt

from .elements import GEOM_TOL

# (warning, caution) thresholds
ANGLE_LIMITS = (10.0, 20.0)   # degrees, below is bad
ASPECT_LIMITS = (10.0, 3.0)   # circumradius / (2 * inradius), above is bad


class MeshQuality:
    """
    Inspector class for a Triangulation object.

    Usage:
        inspector = MeshQuality(triangulation)
        inspector.analyze()
        inspector.print_report()
        inspector.plot_histograms()
    """
    def __init__(self, triangulation):
        self.triangulation = triangulation
        # Metric Storage
        self.areas = np.zeros(0)
        self.min_angles = np.zeros(0)
        self.aspect_ratios = np.zeros(0)

        self._analyzed = False

    def analyze(self):
        """
        Computes metrics for all triangles at once (vectorized over the mesh).
        """
        arrays = self.triangulation.to_arrays()
        pts = arrays["points"]
        tris = arrays["triangles"].astype(np.intp)

        p1 = pts[tris[:, 0]]
        p2 = pts[tris[:, 1]]
        p3 = pts[tris[:, 2]]

        # Edge lengths
        a = np.linalg.norm(p2 - p1, axis=1)
        b = np.linalg.norm(p3 - p2, axis=1)
        c = np.linalg.norm(p1 - p3, axis=1)

        # Area (Cross product; winding independent)
        cross = ((p2[:, 0] - p1[:, 0]) * (p3[:, 1] - p1[:, 1]) -
                 (p3[:, 0] - p1[:, 0]) * (p2[:, 1] - p1[:, 1]))
        self.areas = 0.5 * np.abs(cross)

        # Aspect Ratio: circumradius / (2 * inradius), 1.0 for equilateral
        s = 0.5 * (a + b + c)
        ok = self.areas > GEOM_TOL
        ar = np.full(len(self.areas), 999.0)  # Degenerate
        r_in = self.areas[ok] / s[ok]
        r_circ = (a[ok] * b[ok] * c[ok]) / (4.0 * self.areas[ok])
        ar[ok] = r_circ / (2.0 * r_in)
        self.aspect_ratios = ar

        # Angles (Cosine Rule)
        angles = []
        for opp, adj1, adj2 in [(a, b, c), (b, a, c), (c, a, b)]:
            denom = 2.0 * adj1 * adj2
            with np.errstate(divide='ignore', invalid='ignore'):
                cos_theta = (adj1**2 + adj2**2 - opp**2) / denom
            cos_theta = np.clip(np.nan_to_num(cos_theta, nan=1.0), -1.0, 1.0)
            angles.append(np.degrees(np.arccos(cos_theta)))

        self.min_angles = np.min(np.vstack(angles), axis=0)

        self._analyzed = True
        return self

    def summary(self):
        """ Returns the headline numbers: counts, area range, total area, worst angle and stretch. """
        if not self._analyzed: self.analyze()
        if len(self.areas) == 0:
            return {"triangles": 0}
        return {
            "triangles": len(self.areas),
            "area_min": float(self.areas.min()),
            "area_max": float(self.areas.max()),
            "area_total": float(self.areas.sum()),
            "min_angle": float(self.min_angles.min()),
            "max_aspect_ratio": float(self.aspect_ratios.max()),
        }

    def print_report(self):
        """ Prints the summary to stdout, grading angle and stretch against ANGLE_LIMITS / ASPECT_LIMITS. """
        stats = self.summary()
        print(f"--- Mesh Quality: {stats['triangles']} Triangles ---")
        if stats["triangles"] == 0:
            print("   (no triangles)")
            return

        print(f"   Area        : {stats['area_min']:.3e} .. {stats['area_max']:.3e}"
              f"  (total {stats['area_total']:.4g})")
        # A uniform grid gives identical triangles; a spread means uneven bounds handling
        if not np.isclose(stats["area_min"], stats["area_max"]):
            print("   [~] Triangle areas differ across the grid")

        ang = stats["min_angle"]
        print(f"   Min Angle   : {ang:6.2f} deg  {_grade(ang, ANGLE_LIMITS, below=True)}")
        ar = stats["max_aspect_ratio"]
        print(f"   Max Stretch : {ar:6.2f}      {_grade(ar, ASPECT_LIMITS, below=False)}")

    def plot_histograms(self, show=True):
        """ One histogram panel per metric. Returns the Figure. """
        if not self._analyzed: self.analyze()

        panels = [
            (self.min_angles, 'skyblue', "Minimum Angle [deg]", ANGLE_LIMITS[1]),
            (self.aspect_ratios, 'lightgreen', "Aspect Ratio", ASPECT_LIMITS[1]),
            (self.areas, 'salmon', "Triangle Area", None),
        ]
        fig, axes = plt.subplots(1, len(panels), figsize=(15, 4))

        for axis, (data, color, label, limit) in zip(axes, panels):
            axis.set_title(label)
            if len(data) == 0:
                continue
            axis.hist(data, bins=_bins(data), color=color, edgecolor='black')
            if limit is not None:
                axis.axvline(limit, color='red', linestyle='--', label=f'Limit {limit:g}')
                axis.legend()

        fig.suptitle(f"{len(self.areas)} triangles")
        fig.tight_layout()
        if show:
            plt.show()
        return fig


def _grade(value, limits, below):
    ''' Grades against (warning, caution) limits; `below` means small values are bad. '''
    warn, caution = limits
    if (value < warn) if below else (value > warn):
        return "[!] WARNING"
    if (value < caution) if below else (value > caution):
        return "[~] CAUTION"
    return "[OK]"


def _bins(data):
    # Grid meshes are often exactly uniform; a zero-width range needs explicit edges
    lo, hi = data.min(), data.max()
    if np.isclose(lo, hi):
        pad = max(1e-6, abs(lo) * 0.1)
        return np.linspace(lo - pad, hi + pad, 10)
    return 20
