import matplotlib.pyplot as plt


def plot_triangulation(triangulation, ax=None, show_indices=False, show=False):
    """
    Draws the triangle edges of a Triangulation with matplotlib.

    If show_indices is set, vertex indices are written at the vertices (black)
    and triangle indices at the triangle centroids (blue).
    Returns the Axes that was drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))
    ax.set_aspect('equal')

    arrays = triangulation.to_arrays()
    pts = arrays["points"]
    tris = arrays["triangles"]

    if len(tris) > 0:
        ax.triplot(pts[:, 0], pts[:, 1], tris, 'k-', lw=0.5)
    ax.plot(pts[:, 0], pts[:, 1], 'k.', ms=3)

    if show_indices:
        for i, (x, y) in enumerate(pts):
            ax.annotate(str(i), (x, y), fontsize=7, color='black')
        for i, t in enumerate(tris):
            cx, cy = pts[t].mean(axis=0)
            ax.annotate(str(i), (cx, cy), fontsize=7, color='blue', ha='center')

    ax.set_title(f"Grid Triangulation ({len(pts)} vertices, {len(tris)} triangles)")
    if show:
        plt.show()
    return ax
