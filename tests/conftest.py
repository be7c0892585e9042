"""Fixtures compartidas por la suite."""
import os

os.environ.setdefault('MPLBACKEND', 'Agg')

import pytest

from src.graphs import AdjacencyGraph, EdgeGraph

STAR_MATRIX = "0 1 1\n1 0 0\n1 0 0"

MATRIX_MARKET_STAR = (
    "%%MatrixMarket matrix coordinate pattern symmetric\n"
    "% estrella de tres vértices\n"
    "3 3 2\n"
    "2 1\n"
    "3 1\n"
)


@pytest.fixture
def star_graph():
    """Vértice 0 unido a 1 y 2."""
    return AdjacencyGraph(STAR_MATRIX)


@pytest.fixture
def path_graph():
    """Camino 0 - 1 - 2."""
    return EdgeGraph("0 1\n1 2")


@pytest.fixture
def triangle_graph():
    return EdgeGraph(edge_list=[[0, 2], [1, 0], [2, 1]])


@pytest.fixture
def chain_graph():
    """Camino de 20 vértices."""
    return EdgeGraph(edge_list=[[i, i + 1] for i in range(19)])
