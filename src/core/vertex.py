"""Vértice del grafo: posición, fuerza, velocidad, color y vecinos."""
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .edge import Edge
from .errors import (
    InvalidDegreeError,
    InvalidLevelError,
    InvalidNumberError,
    InvalidRGBError,
    InvalidVertexError,
)
from .schema import VertexModel


def _update(vector: np.ndarray, x: Optional[float], y: Optional[float], z: Optional[float]):
    if x is not None:
        vector[0] = x
    if y is not None:
        vector[1] = y
    if z is not None:
        vector[2] = z


class Vertex:
    """
    Representación de un vértice.

    Los vecinos se referencian por identificador (`vertex_number`); cada vecino
    adjunto tiene exactamente una `Edge` en la misma posición de `edges`.
    Adjuntar dos veces el mismo vecino, o el propio vértice, es responsabilidad
    del llamador: no se comprueba ni se deduplica.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, vertex_number: int = 0):
        self._selected = False

        self._pos = np.array([x, y, z], dtype=float)
        self._force = np.zeros(3, dtype=float)
        self._velocity = np.zeros(3, dtype=float)
        self._colour: Tuple[float, float, float] = (1.0, 1.0, 1.0)

        self._text = ''

        self._level = 0
        self._degree = 0
        self._vertex_number = 0
        self.set_vertex_number(vertex_number)

        self._attached_points: List[int] = []
        self._edges: List[Edge] = []

    # Selección

    def is_selected(self) -> bool:
        return self._selected

    def set_selected(self, selected: bool):
        self._selected = selected

    # Vectores

    def get_pos(self) -> np.ndarray:
        return self._pos.copy()

    def set_pos(self, x: float = None, y: float = None, z: float = None):
        _update(self._pos, x, y, z)

    def get_force(self) -> np.ndarray:
        return self._force.copy()

    def set_force(self, x: float = None, y: float = None, z: float = None):
        _update(self._force, x, y, z)

    def get_velocity(self) -> np.ndarray:
        return self._velocity.copy()

    def set_velocity(self, x: float = None, y: float = None, z: float = None):
        _update(self._velocity, x, y, z)

    # Atributos visuales

    def get_colour(self) -> Tuple[float, float, float]:
        return self._colour

    def set_colour(self, r: float, g: float, b: float):
        """Actualiza el color; cada componente debe estar en [0, 1]."""
        if not all(0 <= c <= 1 for c in (r, g, b)):
            raise InvalidRGBError('Passed colour is invalid')
        self._colour = (float(r), float(g), float(b))

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str):
        self._text = text

    # Atributos enteros

    def get_level(self) -> int:
        return self._level

    def set_level(self, level: int):
        if level < 0:
            raise InvalidLevelError('level must be a non-negative integer')
        self._level = level

    def get_degree(self) -> int:
        return self._degree

    def set_degree(self, degree: int):
        if degree < 0:
            raise InvalidDegreeError('degree must be a non-negative integer')
        self._degree = degree

    def update_degree(self):
        """Incrementa el grado en uno."""
        self._degree += 1

    def get_vertex_number(self) -> int:
        return self._vertex_number

    def set_vertex_number(self, vertex_number: int):
        if vertex_number < 0:
            raise InvalidNumberError('number must be a non-negative integer')
        self._vertex_number = vertex_number

    # Vecinos

    def get_attached_points(self) -> List[int]:
        return list(self._attached_points)

    def get_edges(self) -> List[Edge]:
        return list(self._edges)

    def is_attached(self, other: 'Vertex') -> bool:
        return other.get_vertex_number() in self._attached_points

    def attach_point(self, other: 'Vertex'):
        """Adjunta `other` y crea la arista (self -> other)."""
        self._attached_points.append(other.get_vertex_number())
        self._edges.append(Edge(self._vertex_number, other.get_vertex_number()))

    def detach_point(self, other: 'Vertex'):
        """Elimina `other` de los vecinos y la arista cuyo extremo es `other`."""
        other_id = other.get_vertex_number()
        if other_id not in self._attached_points:
            raise InvalidVertexError(
                f"vertex {other_id} is not attached to vertex {self._vertex_number}"
            )

        self._attached_points.remove(other_id)
        for index, edge in enumerate(self._edges):
            if edge.get_connect() == other_id:
                del self._edges[index]
                break

    def relink(self, attached_points: Sequence[int], edge_ends: Sequence[Tuple[int, int]]):
        """Reemplaza vecinos y aristas por identificadores ya resueltos."""
        self._attached_points = list(attached_points)
        self._edges = [Edge(base, connect) for base, connect in edge_ends]

    # Copia y serialización

    def clone(self) -> 'Vertex':
        """Copia de contenido idéntico que conserva el mismo identificador."""
        copy = Vertex(*self._pos, vertex_number=self._vertex_number)
        copy._selected = self._selected
        copy._force = self._force.copy()
        copy._velocity = self._velocity.copy()
        copy._colour = self._colour
        copy._text = self._text
        copy._level = self._level
        copy._degree = self._degree
        copy._attached_points = list(self._attached_points)
        copy._edges = [edge.clone() for edge in self._edges]
        return copy

    def to_json(self) -> Dict:
        model = VertexModel(
            selected=self._selected,
            pos=dict(zip('xyz', self._pos.tolist())),
            force=dict(zip('xyz', self._force.tolist())),
            velocity=dict(zip('xyz', self._velocity.tolist())),
            colour=dict(zip('rgb', self._colour)),
            text=self._text,
            level=self._level,
            degree=self._degree,
            vertex_number=self._vertex_number,
            attached_points=list(self._attached_points),
            edges=[{'from': e.get_base(), 'to': e.get_connect()} for e in self._edges],
        )
        return model.model_dump(by_alias=True)

    def load_state(self, model: VertexModel):
        """Carga los atributos propios (no los vecinos) desde un modelo validado."""
        self._selected = model.selected
        self.set_pos(model.pos.x, model.pos.y, model.pos.z)
        self.set_force(model.force.x, model.force.y, model.force.z)
        self.set_velocity(model.velocity.x, model.velocity.y, model.velocity.z)
        self.set_colour(model.colour.r, model.colour.g, model.colour.b)
        self.set_text(model.text)
        self.set_level(model.level)
        self.set_degree(model.degree)

    def _state(self) -> Tuple:
        return (
            tuple(self._pos.tolist()),
            tuple(self._force.tolist()),
            tuple(self._velocity.tolist()),
            self._colour,
            self._text,
            self._level,
            self._degree,
            self._vertex_number,
            tuple(self._attached_points),
            tuple(edge.get_ends() for edge in self._edges),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash(self._state())

    def __repr__(self) -> str:
        x, y, z = self._pos
        return (
            f"Vertex(id={self._vertex_number}, pos=({x:.3f}, {y:.3f}, {z:.3f}), "
            f"degree={self._degree})"
        )
