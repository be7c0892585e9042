
from .config import PATHS, VERTEX_CONFIG, LAYOUT_CONFIG, RUNNER_CONFIG, VIZ_CONFIG
from .errors import GraphError
from .edge import Edge
from .vertex import Vertex
from .graph import Graph, GraphAnalyzer
from .runner import TaskRunner

__all__ = [
    'PATHS',
    'VERTEX_CONFIG',
    'LAYOUT_CONFIG',
    'RUNNER_CONFIG',
    'VIZ_CONFIG',
    'GraphError',
    'Edge',
    'Vertex',
    'Graph',
    'GraphAnalyzer',
    'TaskRunner',
]
