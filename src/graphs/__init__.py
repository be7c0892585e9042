"""Graph codecs - Adjacency Matrix, Edge List and Matrix Market."""

from .adjacency_graph import AdjacencyGraph
from .edge_graph import EdgeGraph
from .matrix_market_graph import MatrixMarketGraph
from .factory import GraphFactory

__all__ = ['AdjacencyGraph', 'EdgeGraph', 'MatrixMarketGraph', 'GraphFactory']
