"""Grafo definido por una lista de aristas `u v` con índices base 0."""
from numbers import Integral
from typing import List, Optional, Sequence

from src.core.errors import InvalidEdgeError, InvalidParamsError
from src.core.graph import Graph


class EdgeGraph(Graph):
    """
    Se construye desde texto o desde una lista explícita de pares, nunca
    desde ambos a la vez.
    """

    type_name = 'EdgeGraph'

    def __init__(self, content: Optional[str] = None, edge_list: Optional[Sequence[Sequence[int]]] = None):
        if content is not None and edge_list is not None:
            raise InvalidParamsError('Cannot define both params')

        super().__init__(content)

        if edge_list is not None:
            self._init(self._validate_edge_list(edge_list))

    def read(self, content: str):
        pairs = []

        for line in content.splitlines():
            if not line.strip():
                continue
            pairs.append(self._validate_edge(Graph.split(line)))

        self._init(pairs)

    def _init(self, pairs: List[List[int]]):
        # Índices base 0: el número de vértices es el máximo extremo + 1
        num_vertices = max((max(pair) for pair in pairs), default=-1) + 1
        self._build_from_pairs(pairs, num_vertices)

    @classmethod
    def _validate_edge_list(cls, edge_list: Sequence[Sequence[int]]) -> List[List[int]]:
        return [cls._validate_edge(edge) for edge in edge_list]

    @staticmethod
    def _validate_edge(edge) -> List[int]:
        try:
            ends = list(edge)
        except TypeError:
            raise InvalidEdgeError('Edges can only have two linked vertices')

        if len(ends) != 2 or not all(isinstance(e, Integral) and not isinstance(e, bool) for e in ends):
            raise InvalidEdgeError('Edges can only have two linked vertices')

        if min(ends) < 0:
            raise InvalidEdgeError(f"Edge {ends[0]} {ends[1]} has a negative endpoint")

        return [int(ends[0]), int(ends[1])]

    def to_string(self) -> str:
        return '\n'.join(f"{i} {j}" for i, j in self.edge_list)
