"""Construcción de matrices de adyacencia binarias usando matrices sparse."""
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import scipy.sparse as sp

from src.utils.logger import get_logger

logger = get_logger(__name__)


def unique_pairs(pairs: Iterable[Sequence[int]]) -> List[Tuple[int, int]]:
    """
    Filtra lazos y pares repetidos (en cualquier orden), conservando el orden
    de la primera aparición.
    """
    seen = set()
    result = []

    for u, v in pairs:
        u, v = int(u), int(v)
        if u == v:
            logger.debug(f"Lazo ignorado en el vértice {u}")
            continue

        key = (min(u, v), max(u, v))
        if key in seen:
            logger.debug(f"Par repetido ignorado: {u} {v}")
            continue

        seen.add(key)
        result.append((u, v))

    return result


def build_adjacency(pairs: Sequence[Tuple[int, int]], num_vertices: int) -> np.ndarray:
    """
    Construye la matriz de adyacencia simétrica y binaria de un grafo no dirigido.
    
    Args:
        pairs: Lista de (u, v) con índices base 0
        num_vertices: Dimensión de la matriz
        
    Returns:
        Matriz densa int8 [n, n]
    """
    if num_vertices == 0:
        return np.zeros((0, 0), dtype=np.int8)

    row, col = [], []
    for u, v in pairs:
        # Grafo no dirigido: añadir ambas direcciones
        row.extend([u, v])
        col.extend([v, u])

    data = np.ones(len(row), dtype=np.int8)
    matrix = sp.coo_matrix((data, (row, col)), shape=(num_vertices, num_vertices))

    # Los duplicados se suman en COO; la matriz es binaria
    return (matrix.toarray() > 0).astype(np.int8)


def upper_edges(matrix: np.ndarray) -> List[List[int]]:
    """Aristas [i, j] recorriendo el triángulo superior (i <= j) por filas."""
    i_indices, j_indices = np.where(np.triu(matrix) == 1)
    return [[int(i), int(j)] for i, j in zip(i_indices, j_indices)]


def lower_edges(matrix: np.ndarray) -> List[List[int]]:
    """Aristas [j, i] recorriendo el triángulo inferior (j < i) por filas."""
    i_indices, j_indices = np.where(np.tril(matrix, k=-1) == 1)
    return [[int(j), int(i)] for i, j in zip(i_indices, j_indices)]
