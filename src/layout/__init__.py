"""
Módulo de layouts dirigidos por fuerzas.

Exporta:
- LayoutAlgorithm (base)
- FruchtermanReingold, SimpleForceDirected, MultiForce
- LayoutFactory
"""

from .base import LayoutAlgorithm
from .fruchterman_reingold import FruchtermanReingold
from .simple_force_directed import SimpleForceDirected
from .multi_force import MultiForce
from .factory import LayoutFactory

__all__ = [
    'LayoutAlgorithm',
    'FruchtermanReingold',
    'SimpleForceDirected',
    'MultiForce',
    'LayoutFactory',
]
