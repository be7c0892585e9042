"""Layout de Fruchterman-Reingold."""
import math

import numpy as np

from src.core.config import LAYOUT_CONFIG
from src.core.graph import Graph
from .base import LayoutAlgorithm, attraction_forces, repulsion_forces


class FruchtermanReingold(LayoutAlgorithm):
    """
    Repulsión k²/d entre todos los pares y atracción d²/k por arista, con
    k = sqrt(area / n).

    La temperatura `t` decae por `cooling` en cada paso pero no limita el
    desplazamiento.
    """

    name = 'FruchtermanReingold'

    def __init__(self, graph: Graph, config=LAYOUT_CONFIG, seed: int = None):
        super().__init__(graph, config)
        self._rng = np.random.default_rng(seed)
        self.k = 0.0
        self.t = 0.0

        n = graph.get_num_vertices()
        if n != 0:
            self.t = float(n)
            self.k = math.sqrt(config.fr_area / n)
            self.place()

    def apply(self):
        if self.graph.get_num_vertices() == 0 or not self.graph.get_edges():
            return

        positions = self.graph.get_positions()
        forces = self.graph.get_forces()
        xy = positions[:, :2]

        forces[:, :2] = repulsion_forces(xy, self.k, self.config.min_distance)
        forces[:, :2] += attraction_forces(xy, self.graph.get_edges(), self.k, self.config.min_distance)

        positions[:, :2] += forces[:, :2] * self.config.step

        self.graph.set_forces(forces)
        self.graph.set_positions(positions)
        self.t *= self.config.cooling

    def place(self):
        n = self.graph.get_num_vertices()
        if n == 0:
            return

        W, L = self.config.fr_width, self.config.fr_length
        positions = np.zeros((n, 3))
        positions[:, 0] = self._rng.random(n) * W - W / 2
        positions[:, 1] = self._rng.random(n) * L - L / 2

        self.graph.set_positions(positions)
        self._check_duplications(positions)
