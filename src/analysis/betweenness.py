"""Centralidad de intermediación por recorridos en anchura."""
from typing import Dict, List, Optional, Tuple

import numpy as np

from src.core.graph import Graph
from src.utils.logger import get_logger
from .base import Centrality

logger = get_logger(__name__)


class Betweenness(Centrality):
    """
    Para cada par (i, j) con i > j recorre el grafo en anchura desde i hasta
    alcanzar j, registrando los enlaces (predecesor, sucesor) explorados.
    El camino se reconstruye hacia atrás desde j y cada vértice del camino
    suma una visita. Los pares sin camino no puntúan.
    """

    name = 'Betweenness'

    def __init__(self):
        super().__init__()
        self.tree: List[List[int]] = []

    def compute_scores(self, graph: Graph) -> np.ndarray:
        n = graph.get_num_vertices()
        values = np.zeros(n, dtype=float)
        self.tree = self._build_tree(graph.get_adjacency_matrix())

        unreachable = 0
        for i in range(n):
            for j in range(i):
                links = self._breadth_first_search(i, j, n)
                if links is None:
                    unreachable += 1
                    continue
                self._mark_path(values, links, i, j)

        if unreachable:
            logger.debug(f"Betweenness: {unreachable} pares sin camino")

        return values

    @staticmethod
    def _build_tree(matrix: np.ndarray) -> List[List[int]]:
        """Lista de vecinos de cada vértice según la matriz de adyacencia."""
        return [np.flatnonzero(row == 1).tolist() for row in matrix]

    def _breadth_first_search(self, start: int, target: int, n: int) -> Optional[List[Tuple[int, int]]]:
        """Enlaces explorados hasta alcanzar `target`, o None si no es alcanzable."""
        queue = [start]
        links: List[Tuple[int, int]] = []
        visited = [False] * n
        visited[start] = True

        index, current = 1, start
        while not self._explore(current, visited, queue, links, target):
            if index >= len(queue):
                return None

            visited[queue[index]] = True
            current = queue[index]
            index += 1

        return links

    def _explore(self, current: int, visited: List[bool], queue: List[int],
                 links: List[Tuple[int, int]], target: int) -> bool:
        for neighbour in self.tree[current]:
            if not visited[neighbour] and neighbour not in queue:
                queue.append(neighbour)

            links.append((current, neighbour))
            if neighbour == target:
                return True

        return False

    @staticmethod
    def _mark_path(values: np.ndarray, links: List[Tuple[int, int]], start: int, end: int):
        # Primer enlace que llega a cada sucesor
        first_link: Dict[int, int] = {}
        for position, (_, successor) in enumerate(links):
            first_link.setdefault(successor, position)

        look_for = end
        values[look_for] += 1

        for k in range(len(links) - 1, -1, -1):
            position = first_link.get(look_for)
            look_for = links[position][0] if position is not None and position <= k else 0
            values[look_for] += 1

            if look_for == start:
                break
