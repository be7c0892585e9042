"""Módulo base para algoritmos de layout dirigidos por fuerzas."""
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from src.core.config import LAYOUT_CONFIG
from src.core.graph import Graph
from src.utils.logger import get_logger

logger = get_logger(__name__)


def clamp_distances(dist: np.ndarray, min_distance: float = LAYOUT_CONFIG.min_distance) -> np.ndarray:
    """Sustituye distancias casi nulas o NaN por `min_distance`."""
    return np.where(np.isnan(dist) | (dist < min_distance), min_distance, dist)


def repulsion_forces(xy: np.ndarray, k: float, min_distance: float = LAYOUT_CONFIG.min_distance) -> np.ndarray:
    """
    Repulsión k²/d entre todos los pares de puntos.
    
    Args:
        xy: Posiciones [n, 2]
        k: Distancia ideal entre vértices
        
    Returns:
        Fuerzas [n, 2]
    """
    if len(xy) == 0:
        return np.zeros((0, 2))

    delta = xy[:, None, :] - xy[None, :, :]  # Broadcasting [n, n, 2]
    dist = clamp_distances(np.sqrt(np.sum(delta ** 2, axis=2)), min_distance)

    repulsion = (k * k) / dist
    np.fill_diagonal(repulsion, 0.0)

    return np.sum(delta / dist[..., None] * repulsion[..., None], axis=1)


def attraction_forces(xy: np.ndarray, edges: Sequence[Sequence[int]], k: float,
                      min_distance: float = LAYOUT_CONFIG.min_distance) -> np.ndarray:
    """Atracción d²/k a lo largo de cada arista [v, u]; fuerzas [n, 2]."""
    forces = np.zeros_like(xy)
    if len(edges) == 0:
        return forces

    pairs = np.asarray(edges, dtype=int)
    delta = xy[pairs[:, 0]] - xy[pairs[:, 1]]
    dist = clamp_distances(np.sqrt(np.sum(delta ** 2, axis=1)), min_distance)

    displacement = delta / dist[:, None] * (dist * dist / k)[:, None]

    # Acumulación con índices repetidos
    np.subtract.at(forces, pairs[:, 0], displacement)
    np.add.at(forces, pairs[:, 1], displacement)

    return forces


class LayoutAlgorithm(ABC):
    """Clase base de los layouts: `place()` siembra posiciones y `apply()` avanza un paso."""

    name = ''

    def __init__(self, graph: Graph, config=LAYOUT_CONFIG):
        self.graph = graph
        self.config = config

    @abstractmethod
    def apply(self):
        """Avanza un paso de simulación."""
        pass

    @abstractmethod
    def place(self):
        """Coloca los vértices en el área del layout."""
        pass

    def _check_duplications(self, positions: np.ndarray):
        """Avisa (sin fallar) de vértices generados en la misma posición x, y."""
        _, inverse, counts = np.unique(positions[:, :2], axis=0, return_inverse=True, return_counts=True)
        duplicated = np.where(counts[np.ravel(inverse)] > 1)[0]

        for index in duplicated:
            logger.warning(f"Posición duplicada generada en el vértice {index}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.graph.get_num_vertices()})"
