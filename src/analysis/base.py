"""Módulo base de centralidades - Principio de Segregación de Interfaces (ISP)."""
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from src.core.errors import InvalidHSVError, InvalidMaxMinError
from src.core.graph import Graph
from src.core.vertex import Vertex


class Centrality(ABC):
    """
    Clase base de centralidades (Patrón Template Method).

    `apply()` calcula una puntuación por vértice, la normaliza a [0, 1] y la
    convierte en un tono: la puntuación más alta queda en rojo (0) y la más
    baja en azul (240).
    """

    name = ''

    # Los vértices seleccionados conservan su color
    skip_selected = False

    def __init__(self):
        self.scores: np.ndarray = np.zeros(0)

    @abstractmethod
    def compute_scores(self, graph: Graph) -> np.ndarray:
        """Puntuación cruda de cada vértice, en orden de vértices."""
        pass

    def apply(self, graph: Graph):
        """Recolorea todos los vértices del grafo."""
        vertices = graph.get_vertices()
        if not vertices:
            self.scores = np.zeros(0)
            return

        self.scores = np.asarray(self.compute_scores(graph), dtype=float)
        self._recolour(vertices, self.scores)

    def get_metrics(self) -> Dict[str, Any]:
        """Extrae métricas esenciales para APIs/backend."""
        if self.scores.size == 0:
            return {'centrality': self.name, 'scores': [], 'max': 0.0, 'min': 0.0}

        return {
            'centrality': self.name,
            'scores': self.scores.tolist(),
            'max': float(self.scores.max()),
            'min': float(self.scores.min()),
        }

    def _recolour(self, vertices: List[Vertex], scores: Sequence[float]):
        max_value, min_value = float(np.max(scores)), float(np.min(scores))

        for vertex, score in zip(vertices, scores):
            if self.skip_selected and vertex.is_selected():
                continue

            x = 0.0 if max_value == min_value else Centrality.normalize(score, max_value, min_value)
            h = (1 - x) * 240

            vertex.set_colour(*Centrality.hsv_to_rgb(h, 1, 1))

    @staticmethod
    def normalize(x: float, max_value: float, min_value: float) -> float:
        """Normaliza `x` al rango [min_value, max_value]."""
        if max_value < min_value:
            raise InvalidMaxMinError('Maximum value is less than the minimum value')
        return (x - min_value) / (max_value - min_value)

    @staticmethod
    def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
        """Convierte HSV (h en [0, 360], s y v en [0, 1]) a RGB en [0, 1]."""
        if not (0 <= h <= 360 and 0 <= s <= 1 and 0 <= v <= 1):
            raise InvalidHSVError('Color values are not valid')

        if s == 0:
            return v, v, v

        h /= 60
        i = math.floor(h)
        f = h - i
        p = v * (1 - s)
        q = v * (1 - s * f)
        t = v * (1 - s * (1 - f))

        if i == 0:
            return v, t, p
        if i == 1:
            return q, v, p
        if i == 2:
            return p, v, t
        if i == 3:
            return p, q, v
        if i == 4:
            return t, p, v
        return v, p, q
