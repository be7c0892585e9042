"""Centralidad de grado."""
import numpy as np

from src.core.graph import Graph
from .base import Centrality


class DegreeCentrality(Centrality):
    """Puntuación = grado del vértice. No recolorea los vértices seleccionados."""

    name = 'DegreeCentrality'
    skip_selected = True

    def compute_scores(self, graph: Graph) -> np.ndarray:
        return np.array([vertex.get_degree() for vertex in graph.get_vertices()], dtype=float)
