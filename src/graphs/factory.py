"""Fábrica de grafos que detecta el formato a partir de la primera línea."""
from src.core.errors import InvalidGraphError
from src.core.graph import Graph
from src.graphs import mmio
from src.graphs.adjacency_graph import AdjacencyGraph
from src.graphs.edge_graph import EdgeGraph
from src.graphs.matrix_market_graph import MatrixMarketGraph


class GraphFactory:
    """
    Reglas de detección, en orden:
    - prefijo `%%MatrixMarket` -> MatrixMarketGraph
    - línea de longitud <= 4 -> EdgeGraph
    - línea que empieza por `0` o `1` -> AdjacencyGraph
    """

    @staticmethod
    def create_graph(line: str, content: str) -> Graph:
        if line.startswith(mmio.MATRIX_MARKET_BANNER):
            return MatrixMarketGraph(content)

        if len(line) <= 4:
            return EdgeGraph(content)

        if line[:1] in ('0', '1'):
            return AdjacencyGraph(content)

        raise InvalidGraphError('Passed graph is not supported')

    @staticmethod
    def first_line(content: str) -> str:
        lines = content.splitlines()
        return lines[0] if lines else ''

    @classmethod
    def parse(cls, content: str) -> Graph:
        return cls.create_graph(cls.first_line(content), content)
