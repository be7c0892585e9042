"""Arista entre dos vértices, referenciados por su identificador."""
from typing import Tuple

from .errors import InvalidRGBError


class Edge:
    """
    Arista dirigida (base -> connect) propiedad del vértice base.

    Los extremos se guardan como identificadores de vértice, nunca como
    referencias a objetos, para no crear ciclos vértice <-> arista.
    El color usa componentes en el rango [0, 255].
    """

    def __init__(self, base: int, connect: int):
        self._base = base
        self._connect = connect
        self._text = ''
        self._colour: Tuple[int, int, int] = (0, 0, 0)

    def get_base(self) -> int:
        return self._base

    def set_base(self, base: int):
        self._base = base

    def get_connect(self) -> int:
        return self._connect

    def set_connect(self, connect: int):
        self._connect = connect

    def get_text(self) -> str:
        return self._text

    def set_text(self, text: str):
        self._text = text

    def get_colour(self) -> Tuple[int, int, int]:
        return self._colour

    def set_colour(self, r: float, g: float, b: float):
        """Actualiza el color; cada componente debe estar en [0, 255]."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise InvalidRGBError('Passed colour is invalid')
        self._colour = (r, g, b)

    def get_edge_number(self) -> int:
        """Identificador de la arista (función de emparejamiento de Cantor)."""
        total = self._base + self._connect
        return total * (total + 1) // 2 + self._connect

    def get_ends(self) -> Tuple[int, int]:
        return self._base, self._connect

    def clone(self) -> 'Edge':
        copy = Edge(self._base, self._connect)
        copy._text = self._text
        copy._colour = self._colour
        return copy

    def _state(self) -> Tuple:
        return (self._base, self._connect, self._text, self._colour)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash(self._state())

    def __repr__(self) -> str:
        return f"Edge({self._base} -> {self._connect})"
