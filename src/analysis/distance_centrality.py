"""Centralidad de distancia geométrica."""
import numpy as np
from scipy.spatial.distance import cdist

from src.core.graph import Graph
from .base import Centrality


class DistanceCentrality(Centrality):
    """
    Puntuación = suma de distancias euclídeas (x, y) desde la posición actual
    del vértice al resto. Es una aproximación geométrica, no la suma de
    caminos mínimos del grafo.
    """

    name = 'DistanceCentrality'

    def compute_scores(self, graph: Graph) -> np.ndarray:
        xy = graph.get_positions()[:, :2]
        return cdist(xy, xy).sum(axis=1)
