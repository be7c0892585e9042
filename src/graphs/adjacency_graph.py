"""Grafo definido por una matriz de adyacencia en texto."""
from typing import List

import numpy as np

from src.core.adjacency import lower_edges
from src.core.errors import InvalidAdjacencyMatrixError
from src.core.graph import Graph
from src.utils.logger import get_logger

logger = get_logger(__name__)


class AdjacencyGraph(Graph):
    """
    N líneas de N tokens `0`/`1` separados por espacios.

    La lista canónica de aristas se obtiene del triángulo inferior de la matriz.
    """

    type_name = 'AdjacencyGraph'

    def read(self, content: str):
        self._reset_ids()
        if not content.strip():
            self._install([], np.zeros((0, 0), dtype=np.int8), [])
            return

        rows: List[List[int]] = []
        ncol = -1

        for line in content.splitlines():
            if not line.strip():
                continue

            tokens = Graph.split(line)

            if ncol != -1 and ncol != len(tokens):
                raise InvalidAdjacencyMatrixError('Adjacency Matrix must be simetric')

            if any(token not in (0, 1) for token in tokens):
                raise InvalidAdjacencyMatrixError('Adjacency Matrix must have binary values')

            rows.append(tokens)
            ncol = len(tokens)

        if len(rows) != ncol:
            raise InvalidAdjacencyMatrixError('Adjacency Matrix must be simetric')

        matrix = np.array(rows, dtype=np.int8)
        self._warn_inconsistent(matrix)
        vertices = [self._new_vertex() for _ in rows]

        # Solo el triángulo superior; los vértices no se unen consigo mismos
        for i in range(len(vertices)):
            for j in range(i + 1, len(vertices)):
                if matrix[i, j] == 1:
                    vertices[i].attach_point(vertices[j])
                    vertices[i].update_degree()
                    vertices[j].update_degree()

        self._install(vertices, matrix, self._canonical_edges(matrix))
        logger.debug(f"Matriz de adyacencia {len(rows)}x{ncol} leída")

    @staticmethod
    def _warn_inconsistent(matrix: np.ndarray):
        """Avisa de celdas asimétricas o de la diagonal; la matriz se acepta igualmente."""
        asymmetric = [(int(i), int(j)) for i, j in zip(*np.where(np.triu(matrix != matrix.T, k=1)))]
        diagonal = [int(i) for i in np.flatnonzero(np.diag(matrix))]

        if asymmetric:
            logger.warning(f"Matriz de adyacencia asimétrica en las celdas (i, j): {asymmetric}")
        if diagonal:
            logger.warning(f"Diagonal no nula en los vértices: {diagonal}")

    def _canonical_edges(self, matrix: np.ndarray) -> List[List[int]]:
        return lower_edges(matrix)

    def to_string(self) -> str:
        return '\n'.join(
            ' '.join(str(int(value)) for value in row)
            for row in self.adjacency_matrix
        )
