"""Módulo base de grafos: colección de vértices, aristas canónicas y adyacencia."""
import itertools
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import networkx as nx
import numpy as np

from src.core.adjacency import build_adjacency, unique_pairs, upper_edges
from src.core.errors import (
    InvalidAdjacencyMatrixError,
    InvalidGraphError,
    InvalidTokenError,
    InvalidVertexError,
)
from src.core.schema import GraphModel
from src.core.vertex import Vertex
from src.utils.logger import get_logger

logger = get_logger(__name__)


class Graph(ABC):
    """
    Clase base de los grafos (Patrón Template Method).

    Cada variante concreta define `type_name`, sabe leer su formato de texto
    (`read`) y escribirlo (`to_string`). Los vértices se indexan desde 0 en
    orden de construcción y su identificador coincide con su índice.
    """

    type_name = 'Graph'
    _registry: Dict[str, type] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        Graph._registry[cls.type_name] = cls

    def __init__(self, content: Optional[str] = None):
        self._ids = itertools.count()
        self.vertices: List[Vertex] = []
        self.edge_list: List[List[int]] = []
        self.adjacency_matrix = np.zeros((0, 0), dtype=np.int8)

        if content is not None:
            self.read(content)

    # ------------------------------------------------------------------
    # Contrato de los códecs
    # ------------------------------------------------------------------

    @abstractmethod
    def read(self, content: str):
        """Construye el grafo desde texto; si `content` está vacío queda vacío."""
        pass

    @abstractmethod
    def to_string(self) -> str:
        """Serialización textual canónica del formato."""
        pass

    def _canonical_edges(self, matrix: np.ndarray) -> List[List[int]]:
        """Lista canónica de aristas derivada de la matriz."""
        return upper_edges(matrix)

    @staticmethod
    def split(text: str) -> List[int]:
        """Convierte una línea de tokens separados por espacios en enteros."""
        if not text.strip():
            return []

        numbers = []
        for token in text.split():
            try:
                numbers.append(int(token))
            except ValueError:
                raise InvalidTokenError(f"'{token}' is not a number")

        return numbers

    # ------------------------------------------------------------------
    # Construcción
    # ------------------------------------------------------------------

    def _reset_ids(self):
        self._ids = itertools.count()

    def _new_vertex(self) -> Vertex:
        return Vertex(0, 0, 0, vertex_number=next(self._ids))

    def _install(self, vertices: List[Vertex], matrix: np.ndarray, edges: List[List[int]]):
        """Sustituye el estado completo de una sola vez."""
        self.vertices = vertices
        self.adjacency_matrix = matrix
        self.edge_list = edges

    def _build_from_pairs(self, pairs, num_vertices: int):
        """Construye vértices, matriz y aristas a partir de pares (u, v)."""
        self._reset_ids()
        vertices = [self._new_vertex() for _ in range(num_vertices)]
        links = unique_pairs(pairs)

        for u, v in links:
            vertices[u].attach_point(vertices[v])
            vertices[u].update_degree()
            vertices[v].update_degree()

        matrix = build_adjacency(links, num_vertices)
        self._install(vertices, matrix, self._canonical_edges(matrix))

        logger.debug(f"{self.type_name}: {num_vertices} vértices, {len(self.edge_list)} aristas")

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    def get_vertices(self) -> List[Vertex]:
        return self.vertices

    def get_vertex(self, vertex_id: int) -> Vertex:
        if not 0 <= vertex_id < len(self.vertices):
            raise InvalidVertexError(f"vertex {vertex_id} does not exist")
        return self.vertices[vertex_id]

    def get_edges(self) -> List[List[int]]:
        return self.edge_list

    def get_adjacency_matrix(self) -> np.ndarray:
        return self.adjacency_matrix

    def get_num_vertices(self) -> int:
        return len(self.vertices)

    def get_bounding_box(self) -> Tuple[np.ndarray, np.ndarray]:
        """Caja alineada con los ejes (mínimo, máximo) que encierra los vértices."""
        if not self.vertices:
            return np.zeros(3), np.zeros(3)

        positions = self.get_positions()
        return positions.min(axis=0), positions.max(axis=0)

    # Acceso vectorizado para los algoritmos de layout

    def _stack(self, getter: str) -> np.ndarray:
        if not self.vertices:
            return np.zeros((0, 3), dtype=float)
        return np.array([getattr(v, getter)() for v in self.vertices], dtype=float)

    def get_positions(self) -> np.ndarray:
        return self._stack('get_pos')

    def set_positions(self, positions: np.ndarray):
        for vertex, (x, y, z) in zip(self.vertices, positions):
            vertex.set_pos(x, y, z)

    def get_forces(self) -> np.ndarray:
        return self._stack('get_force')

    def set_forces(self, forces: np.ndarray):
        for vertex, (x, y, z) in zip(self.vertices, forces):
            vertex.set_force(x, y, z)

    def get_velocities(self) -> np.ndarray:
        return self._stack('get_velocity')

    def set_velocities(self, velocities: np.ndarray):
        for vertex, (x, y, z) in zip(self.vertices, velocities):
            vertex.set_velocity(x, y, z)

    # ------------------------------------------------------------------
    # Mutación
    # ------------------------------------------------------------------

    def _check_pair(self, i: int, j: int):
        n = len(self.vertices)
        if not (0 <= i < n and 0 <= j < n):
            raise InvalidVertexError(f"pair ({i}, {j}) is out of range for {n} vertices")
        if i == j:
            raise InvalidVertexError('vertices cannot be attached to themselves')

    def attach_vertices(self, i: int, j: int) -> bool:
        """Une i y j manteniendo sincronizados matriz, grados y aristas."""
        self._check_pair(i, j)
        if self.adjacency_matrix[i, j] == 1:
            return False

        self.vertices[i].attach_point(self.vertices[j])
        self.vertices[i].update_degree()
        self.vertices[j].update_degree()

        self.adjacency_matrix[i, j] = 1
        self.adjacency_matrix[j, i] = 1
        self.edge_list = self._canonical_edges(self.adjacency_matrix)
        return True

    def detach_vertices(self, i: int, j: int):
        """Separa i y j; falla si no están unidos."""
        self._check_pair(i, j)
        if self.adjacency_matrix[i, j] != 1:
            raise InvalidVertexError(f"vertices {i} and {j} are not attached")

        v_i, v_j = self.vertices[i], self.vertices[j]
        if v_i.is_attached(v_j):
            v_i.detach_point(v_j)
        elif v_j.is_attached(v_i):
            v_j.detach_point(v_i)

        v_i.set_degree(max(0, v_i.get_degree() - 1))
        v_j.set_degree(max(0, v_j.get_degree() - 1))

        self.adjacency_matrix[i, j] = 0
        self.adjacency_matrix[j, i] = 0
        self.edge_list = self._canonical_edges(self.adjacency_matrix)

    # ------------------------------------------------------------------
    # Serialización JSON
    # ------------------------------------------------------------------

    def to_json(self) -> Dict:
        return {
            'type': self.type_name,
            'vertices': [vertex.to_json() for vertex in self.vertices],
            'edges': [list(edge) for edge in self.edge_list],
            'adjacencyMatrix': self.adjacency_matrix.tolist(),
        }

    @classmethod
    def from_json(cls, data: Dict) -> 'Graph':
        """
        Reconstruye un grafo desde su JSON.

        Los identificadores se reasignan con un generador nuevo y todas las
        referencias a vecinos y extremos de arista se vuelven a enlazar.
        """
        import src.graphs  # noqa: F401  (registra las variantes)

        model = GraphModel.model_validate(data)
        graph_cls = Graph._registry.get(model.type)

        if graph_cls is None or graph_cls is Graph or not issubclass(graph_cls, cls):
            raise InvalidGraphError(f"unknown graph type '{model.type}'")

        graph = graph_cls()
        graph._restore(model)
        return graph

    def _restore(self, model: GraphModel):
        self._reset_ids()
        vertices = []
        id_map: Dict[int, int] = {}

        for vertex_model in model.vertices:
            vertex = self._new_vertex()
            vertex.load_state(vertex_model)
            id_map[vertex_model.vertex_number] = vertex.get_vertex_number()
            vertices.append(vertex)

        def resolve(old_id: int) -> int:
            if old_id not in id_map:
                raise InvalidGraphError(f"vertex reference {old_id} cannot be resolved")
            return id_map[old_id]

        for vertex, vertex_model in zip(vertices, model.vertices):
            vertex.relink(
                [resolve(point) for point in vertex_model.attached_points],
                [(resolve(e.from_), resolve(e.to)) for e in vertex_model.edges],
            )

        n = len(vertices)
        rows = model.adjacency_matrix
        if len(rows) != n or any(len(row) != n for row in rows):
            raise InvalidAdjacencyMatrixError('Adjacency Matrix dimension must match the vertex count')
        matrix = np.array(rows, dtype=np.int8).reshape(n, n)

        self._install(vertices, matrix, [list(edge) for edge in model.edges])

    # ------------------------------------------------------------------
    # Interoperabilidad
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.Graph:
        """Convierte a NetworkX Graph para análisis y dibujo."""
        G = nx.Graph()
        for index, vertex in enumerate(self.vertices):
            x, y, z = vertex.get_pos()
            G.add_node(index, pos=(x, y, z), colour=vertex.get_colour(), text=vertex.get_text())
        G.add_edges_from(tuple(edge) for edge in self.edge_list)
        return G

    # ------------------------------------------------------------------
    # Igualdad estructural
    # ------------------------------------------------------------------

    def _state(self) -> Tuple:
        return (
            tuple(self.vertices),
            tuple(tuple(edge) for edge in self.edge_list),
            self.adjacency_matrix.shape,
            self.adjacency_matrix.astype(np.int8).tobytes(),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash(self._state())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"{self.type_name}(vertices={len(self.vertices)}, "
            f"edges={len(self.edge_list)})"
        )


class GraphAnalyzer:
    """Analiza estadísticas de grafos (SRP)."""

    @staticmethod
    def get_statistics(graph: Graph) -> Dict:
        """Calcula estadísticas comprehensivas del grafo."""
        if graph.get_num_vertices() == 0:
            return {
                'nodos': 0,
                'aristas': 0,
                'densidad': 0,
                'componentes': 0,
                'componente_mayor': 0
            }

        G = graph.to_networkx()
        componentes = list(nx.connected_components(G))

        return {
            'nodos': G.number_of_nodes(),
            'aristas': G.number_of_edges(),
            'densidad': nx.density(G),
            'componentes': len(componentes),
            'componente_mayor': len(max(componentes, key=len)) if componentes else 0
        }
