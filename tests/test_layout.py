from dataclasses import replace

import numpy as np
import pytest

from src.core.config import LAYOUT_CONFIG
from src.core.errors import InvalidAlgorithmError
from src.graphs import EdgeGraph
from src.layout import FruchtermanReingold, LayoutFactory, MultiForce, SimpleForceDirected
from src.layout.base import attraction_forces, clamp_distances, repulsion_forces


def test_clamp_distances():
    clamped = clamp_distances(np.array([0.0, np.nan, 1e-20, 3.0]))
    assert np.allclose(clamped, [LAYOUT_CONFIG.min_distance] * 3 + [3.0])


def test_repulsion_pushes_apart():
    forces = repulsion_forces(np.array([[0.0, 0.0], [1.0, 0.0]]), k=2.0)
    # k² / d = 4 a lo largo del eje x
    assert np.allclose(forces, [[-4.0, 0.0], [4.0, 0.0]])


def test_coincident_points_stay_finite():
    forces = repulsion_forces(np.zeros((3, 2)), k=1.0)
    assert np.all(np.isfinite(forces))


def test_attraction_pulls_together():
    forces = attraction_forces(np.array([[0.0, 0.0], [2.0, 0.0]]), [[0, 1]], k=1.0)
    # d² / k = 4 hacia el otro extremo
    assert np.allclose(forces, [[4.0, 0.0], [-4.0, 0.0]])


# Fruchterman-Reingold

def test_fr_place_bounds(chain_graph):
    layout = FruchtermanReingold(chain_graph, seed=7)
    layout.place()
    positions = chain_graph.get_positions()

    W, L = LAYOUT_CONFIG.fr_width, LAYOUT_CONFIG.fr_length
    assert np.all((positions[:, 0] >= -W / 2) & (positions[:, 0] < W / 2))
    assert np.all((positions[:, 1] >= -L / 2) & (positions[:, 1] < L / 2))
    assert np.all(positions[:, 2] == 0)


def test_fr_places_on_construction(chain_graph):
    FruchtermanReingold(chain_graph, seed=1)
    assert not np.allclose(chain_graph.get_positions(), 0)


def test_fr_apply_moves_and_cools(chain_graph):
    layout = FruchtermanReingold(chain_graph, seed=3)
    before = chain_graph.get_positions()

    layout.apply()

    assert not np.allclose(chain_graph.get_positions(), before)
    assert layout.t == pytest.approx(20 * LAYOUT_CONFIG.cooling)
    assert np.all(np.isfinite(chain_graph.get_positions()))


def test_fr_apply_without_edges_is_noop():
    graph = EdgeGraph("0 3")
    graph.detach_vertices(0, 3)
    layout = FruchtermanReingold(graph, seed=0)
    before = graph.get_positions()

    layout.apply()
    assert np.allclose(graph.get_positions(), before)


def test_fr_empty_graph():
    layout = FruchtermanReingold(EdgeGraph())
    layout.place()
    layout.apply()


# Simple Force Directed

def test_sfd_place_bounds(chain_graph):
    SimpleForceDirected(chain_graph)
    positions = chain_graph.get_positions()
    n = chain_graph.get_num_vertices()
    assert np.all(np.abs(positions[:, :2]) <= n / 2)
    assert np.all(positions[:, 2] == 0)


def test_sfd_apply_updates_velocity(path_graph):
    layout = SimpleForceDirected(path_graph)
    before = path_graph.get_positions()

    layout.apply()

    velocities = path_graph.get_velocities()
    assert np.allclose(path_graph.get_positions(), before + velocities)
    assert np.all(np.isfinite(path_graph.get_forces()))


# Multi-Force

def test_mf_pins_vertices(star_graph):
    MultiForce(star_graph)
    assert np.allclose(star_graph.get_positions(), [[1, 1, 0]] * 3)


def test_mf_advances_cursor(star_graph):
    layout = MultiForce(star_graph)
    layout.apply()

    # Las dos aristas comparten el pivote 0
    assert layout.edge_index == 2
    assert layout.visited_vertices == [1, 2]
    assert np.all(np.isfinite(star_graph.get_positions()))

    layout.apply()
    assert layout.edge_index == 2
    assert np.all(np.isfinite(star_graph.get_positions()))


def test_mf_place_fans_out_neighbours(star_graph):
    layout = MultiForce(star_graph)
    layout.place()
    positions = star_graph.get_positions()

    assert np.allclose(positions[0], [1, 1, 0])
    assert np.allclose(positions[1], [1.05, 1, 0])
    assert np.allclose(positions[2], [0.95, 1, 0])


def test_mf_relaxation_cap(star_graph):
    # Umbral inalcanzable: solo el límite de pasos detiene la relajación
    config = replace(LAYOUT_CONFIG, mf_max_relaxation_steps=1, mf_energy_base=-1.0)
    layout = MultiForce(star_graph, config=config)
    layout.apply()
    assert layout.edge_index == 2


def test_mf_empty_graph():
    layout = MultiForce(EdgeGraph())
    layout.place()
    layout.apply()


# Fábrica

@pytest.mark.parametrize('name, cls', [
    ('FruchtermanReingold', FruchtermanReingold),
    ('MultiForce', MultiForce),
    ('SimpleForceDirected', SimpleForceDirected),
])
def test_factory_creates(name, cls, path_graph):
    layout = LayoutFactory.create_algorithm(name, path_graph)
    assert isinstance(layout, cls)
    assert layout.graph is path_graph


def test_factory_unknown(path_graph):
    with pytest.raises(InvalidAlgorithmError):
        LayoutFactory.create_algorithm('Spring', path_graph)
