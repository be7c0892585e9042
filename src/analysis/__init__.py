"""Módulo de centralidades."""
from .base import Centrality
from .betweenness import Betweenness
from .degree_centrality import DegreeCentrality
from .distance_centrality import DistanceCentrality
from .factory import CentralityFactory

__all__ = [
    'Centrality',
    'Betweenness',
    'DegreeCentrality',
    'DistanceCentrality',
    'CentralityFactory',
]
