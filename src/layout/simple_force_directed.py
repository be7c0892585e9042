"""Layout dirigido por fuerzas simple con velocidad amortiguada."""
import secrets

import numpy as np

from src.core.config import LAYOUT_CONFIG
from src.core.graph import Graph
from .base import LayoutAlgorithm, clamp_distances


class SimpleForceDirected(LayoutAlgorithm):

    name = 'SimpleForceDirected'

    def __init__(self, graph: Graph, config=LAYOUT_CONFIG):
        super().__init__(graph, config)
        self._random = secrets.SystemRandom()

        if graph.get_num_vertices() != 0:
            self.place()

    def apply(self):
        n = self.graph.get_num_vertices()
        if n == 0:
            return

        positions = self.graph.get_positions()
        velocities = self.graph.get_velocities()
        xy = positions[:, :2]

        # Repulsión entre todos los pares: 10 * Δ / (0.25 * d²)
        delta = xy[:, None, :] - xy[None, :, :]
        dist = clamp_distances(np.sqrt(np.sum(delta ** 2, axis=2)), self.config.min_distance)
        rsq = self.config.sfd_distance_factor * dist * dist
        repulsion = self.config.sfd_repulsion * np.sum(delta / rsq[..., None], axis=1)

        # Atracción hacia los vecinos de la matriz de adyacencia: 4 * (u - v)
        adjacent = (self.graph.get_adjacency_matrix() == 1).astype(float)
        attraction = self.config.sfd_attraction * np.sum(adjacent[..., None] * -delta, axis=1)

        forces = np.zeros((n, 3))
        forces[:, :2] = repulsion + attraction

        velocities[:, :2] = (velocities[:, :2] + forces[:, :2]) * self.config.sfd_damping
        positions[:, :2] += velocities[:, :2]

        self.graph.set_forces(forces)
        self.graph.set_velocities(velocities)
        self.graph.set_positions(positions)

    def place(self):
        n = self.graph.get_num_vertices()
        if n == 0:
            return

        positions = np.zeros((n, 3))
        for index in range(n):
            positions[index, 0] = self._random.random() * n - n / 2
            positions[index, 1] = self._random.random() * n - n / 2

        self.graph.set_positions(positions)
        self._check_duplications(positions)
