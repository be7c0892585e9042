"""Sesión de edición: grafo actual, layout y centralidad activos."""
import threading
from typing import Dict, Optional

from src.analysis import Centrality, CentralityFactory
from src.core.config import RUNNER_CONFIG
from src.core.graph import Graph
from src.core.runner import TaskRunner
from src.graphs import GraphFactory
from src.layout import LayoutAlgorithm, LayoutFactory
from src.utils.logger import get_logger

logger = get_logger(__name__)


def parse(content: str) -> Graph:
    """Detecta el formato por la primera línea y construye el grafo."""
    return GraphFactory.parse(content)


def serialize(graph: Graph) -> str:
    return graph.to_string()


def tick(graph: Graph, layout: LayoutAlgorithm, centrality: Optional[Centrality] = None):
    """Un paso completo: layout y después recoloreado."""
    layout.apply()
    if centrality is not None:
        centrality.apply(graph)


class GraphSession:
    """
    Mantiene el grafo y las estrategias activas.

    Como mucho hay un tick en ejecución: si se pide otro mientras tanto,
    `tick()` devuelve False sin encolarlo. Las cargas solo sustituyen el
    grafo cuando el parseo termina sin error.
    """

    def __init__(self, layout_name: str = 'FruchtermanReingold', centrality_name: Optional[str] = None,
                 delay_ms: int = RUNNER_CONFIG.delay_ms):
        self._lock = threading.Lock()
        self.graph: Graph = parse('')
        self.layout_name = layout_name
        self.layout: LayoutAlgorithm = LayoutFactory.create_algorithm(layout_name, self.graph)
        self.centrality: Optional[Centrality] = None
        if centrality_name is not None:
            self.set_centrality(centrality_name)

        self.runner = TaskRunner(self.tick, delay_ms)
        self.ticks = 0

    # Carga

    def load(self, content: str) -> Graph:
        graph = parse(content)
        self.set_graph(graph)
        return graph

    def load_json(self, data: Dict) -> Graph:
        graph = Graph.from_json(data)
        self.set_graph(graph)
        return graph

    def set_graph(self, graph: Graph):
        """Sustituye el grafo actual y recrea el layout activo sobre él."""
        layout = LayoutFactory.create_algorithm(self.layout_name, graph)
        with self._lock:
            self.graph = graph
            self.layout = layout
            self.ticks = 0
        logger.info(f"Grafo cargado: {graph!r}")

    def serialize(self) -> str:
        return serialize(self.graph)

    # Estrategias

    def set_layout(self, name: str) -> LayoutAlgorithm:
        layout = LayoutFactory.create_algorithm(name, self.graph)
        with self._lock:
            self.layout_name = name
            self.layout = layout
        logger.info(f"Layout activo: {name}")
        return layout

    def set_centrality(self, name: Optional[str]) -> Optional[Centrality]:
        centrality = None if name is None else CentralityFactory.create_centrality(name)
        with self._lock:
            self.centrality = centrality
        logger.info(f"Centralidad activa: {name}")
        return centrality

    def place(self):
        with self._lock:
            self.layout.place()

    def recolour(self) -> bool:
        """Aplica la centralidad activa sin avanzar el layout."""
        with self._lock:
            if self.centrality is None:
                return False
            self.centrality.apply(self.graph)
            return True

    # Mutación

    def attach(self, i: int, j: int) -> bool:
        with self._lock:
            return self.graph.attach_vertices(i, j)

    def detach(self, i: int, j: int):
        with self._lock:
            self.graph.detach_vertices(i, j)

    # Ejecución

    def tick(self) -> bool:
        """Ejecuta un tick; devuelve False si ya había uno en curso."""
        if not self._lock.acquire(blocking=False):
            return False

        try:
            tick(self.graph, self.layout, self.centrality)
            self.ticks += 1
        finally:
            self._lock.release()

        return True

    def start(self) -> bool:
        return self.runner.start()

    def stop(self) -> bool:
        return self.runner.stop()

    def is_running(self) -> bool:
        return self.runner.is_running
