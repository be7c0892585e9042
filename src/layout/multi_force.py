"""Layout Multi-Force: incorpora los vértices arista a arista."""
import math
from typing import List, Sequence

import numpy as np

from src.core.config import LAYOUT_CONFIG, VERTEX_CONFIG
from src.core.graph import Graph
from src.utils.logger import get_logger
from .base import LayoutAlgorithm, attraction_forces, repulsion_forces

logger = get_logger(__name__)


class MultiForce(LayoutAlgorithm):
    """
    Avanza un cursor sobre la lista canónica de aristas. Mientras quedan
    aristas, cada `apply()` incorpora el siguiente pivote y relaja solo los
    vértices visitados hasta que la energía baja de `10 + 0.1 * |visitados|`.
    Consumidas todas las aristas, cada `apply()` es un paso global.

    El cursor se conserva entre llamadas, así que el resultado depende del
    orden de las llamadas.
    """

    name = 'MultiForce'

    def __init__(self, graph: Graph, config=LAYOUT_CONFIG, vertex_config=VERTEX_CONFIG):
        super().__init__(graph, config)
        self.radius = vertex_config.radius
        self.k = 0.0
        self.t = 0.0
        self.visited_vertices: List[int] = []
        self.edge_index = 0

        n = graph.get_num_vertices()
        if n != 0:
            self.t = float(n)
            self.k = math.sqrt(config.mf_area / n)
            self.pin()

    def pin(self):
        """Fija todos los vértices en (1, 1, 0)."""
        n = self.graph.get_num_vertices()
        positions = np.zeros((n, 3))
        positions[:, :2] = 1.0
        self.graph.set_positions(positions)

    def apply(self):
        edges = self.graph.get_edges()
        if self.graph.get_num_vertices() == 0 or not edges:
            return

        if self.edge_index < len(edges):
            self.place()
            threshold = self.config.mf_energy_base + self.config.mf_energy_per_vertex * len(self.visited_vertices)

            energy = math.inf
            steps = 0
            while energy > threshold:
                if steps >= self.config.mf_max_relaxation_steps:
                    logger.warning(
                        f"Relajación detenida tras {steps} pasos (energía={energy:.3f}, umbral={threshold:.3f})"
                    )
                    break
                energy = self._relax(self.visited_vertices, edges[:self.edge_index])
                steps += 1
        else:
            self._relax(range(self.graph.get_num_vertices()), edges)

    def place(self):
        edges = self.graph.get_edges()
        if self.graph.get_num_vertices() == 0 or not edges or self.edge_index >= len(edges):
            return

        pivot = edges[self.edge_index][0]
        connected_edges = self._get_connected_edges(edges, pivot)
        connected_nodes = self._get_connected_nodes(edges, pivot)

        positions = self.graph.get_positions()
        positions[pivot, 2] = 0.0

        for i in range(connected_edges):
            node = connected_nodes[i]
            angle = (2 * math.pi * self.edge_index) / len(connected_nodes)

            positions[node, 0] += math.cos(angle) * self.radius
            positions[node, 1] += math.sin(angle) * self.radius
            positions[node, 2] = 0.0

            self.edge_index += 1

        self.graph.set_positions(positions)
        self._update_visited_vertices(connected_nodes)

    def _relax(self, indices: Sequence[int], edges: Sequence[Sequence[int]]) -> float:
        """
        Un paso de repulsión (entre `indices`), atracción (sobre `edges`) y
        desplazamiento (de `indices`).

        Returns:
            Energía: máximo de fx + fy entre `indices` (mínimo 0)
        """
        idx = np.asarray(list(indices), dtype=int)
        positions = self.graph.get_positions()
        forces = self.graph.get_forces()
        xy = positions[:, :2]

        # Solo se reinician las fuerzas de los vértices relajados
        forces[idx, :2] = repulsion_forces(xy[idx], self.k, self.config.min_distance)
        forces[:, :2] += attraction_forces(xy, edges, self.k, self.config.min_distance)

        positions[idx, :2] += forces[idx, :2] * self.config.step

        self.graph.set_forces(forces)
        self.graph.set_positions(positions)

        if idx.size == 0:
            return 0.0
        return max(0.0, float(np.max(forces[idx, 0] + forces[idx, 1])))

    def _get_connected_edges(self, edges: Sequence[Sequence[int]], pivot: int) -> int:
        """Aristas consecutivas desde el cursor cuyo origen es `pivot`."""
        count = 1
        while self.edge_index + count < len(edges) and edges[self.edge_index + count][0] == pivot:
            count += 1
        return count

    @staticmethod
    def _get_connected_nodes(edges: Sequence[Sequence[int]], pivot: int) -> List[int]:
        nodes = []
        for v, u in edges:
            if v == pivot:
                nodes.append(u)
            if u == pivot:
                nodes.append(v)
        return nodes

    def _update_visited_vertices(self, nodes: Sequence[int]):
        for node in nodes:
            if node not in self.visited_vertices:
                self.visited_vertices.append(node)
