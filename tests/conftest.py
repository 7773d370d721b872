import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from gridmesh import Triangulation, make_grid_triangulation


@pytest.fixture
def grid_2x2() -> Triangulation:
    return make_grid_triangulation(0.0, 2.0, 0.0, 2.0, 2, 2)


@pytest.fixture
def grid_1x1() -> Triangulation:
    return make_grid_triangulation(0.0, 1.0, 0.0, 1.0, 1, 1)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
