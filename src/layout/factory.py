"""Fábrica de algoritmos de layout."""
from typing import Dict, List

from src.core.errors import InvalidAlgorithmError
from src.core.graph import Graph
from .base import LayoutAlgorithm
from .fruchterman_reingold import FruchtermanReingold
from .multi_force import MultiForce
from .simple_force_directed import SimpleForceDirected


class LayoutFactory:

    ALGORITHMS: Dict[str, type] = {
        FruchtermanReingold.name: FruchtermanReingold,
        MultiForce.name: MultiForce,
        SimpleForceDirected.name: SimpleForceDirected,
    }

    @classmethod
    def create_algorithm(cls, name: str, graph: Graph) -> LayoutAlgorithm:
        algorithm = cls.ALGORITHMS.get(name)
        if algorithm is None:
            raise InvalidAlgorithmError(f"Passed algorithm '{name}' is not supported")
        return algorithm(graph)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls.ALGORITHMS)
