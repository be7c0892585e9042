"""Factory de centralidades (Patrón Factory Method)."""
from typing import Dict, List, Type

from src.core.errors import InvalidCentralityError
from .base import Centrality
from .betweenness import Betweenness
from .degree_centrality import DegreeCentrality
from .distance_centrality import DistanceCentrality


class CentralityFactory:
    """Crea centralidades por nombre."""

    CENTRALITIES: Dict[str, Type[Centrality]] = {
        Betweenness.name: Betweenness,
        DegreeCentrality.name: DegreeCentrality,
        DistanceCentrality.name: DistanceCentrality,
    }

    @staticmethod
    def create_centrality(name: str) -> Centrality:
        centrality_cls = CentralityFactory.CENTRALITIES.get(name)
        if centrality_cls is None:
            raise InvalidCentralityError(f"'{name}' is not a valid centrality")
        return centrality_cls()

    @staticmethod
    def available() -> List[str]:
        return list(CentralityFactory.CENTRALITIES)
