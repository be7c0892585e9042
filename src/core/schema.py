"""Modelos Pydantic de la serialización JSON del grafo."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Vector3Model(BaseModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class ColourModel(BaseModel):
    r: float = 1.0
    g: float = 1.0
    b: float = 1.0


class EdgeEndsModel(BaseModel):
    """Extremos de una arista por identificador de vértice."""
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(alias='from')
    to: int


class VertexModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected: bool = False
    pos: Vector3Model = Field(default_factory=Vector3Model)
    force: Vector3Model = Field(default_factory=Vector3Model)
    velocity: Vector3Model = Field(default_factory=Vector3Model)
    colour: ColourModel = Field(default_factory=ColourModel)
    text: str = ''
    level: int = 0
    degree: int = 0
    vertex_number: int = Field(default=0, alias='vertexNumber')
    attached_points: List[int] = Field(default_factory=list, alias='attachedPoints')
    edges: List[EdgeEndsModel] = Field(default_factory=list)


class GraphModel(BaseModel):
    """Estado completo del grafo; `type` selecciona el códec a reconstruir."""
    model_config = ConfigDict(populate_by_name=True)

    type: str
    vertices: List[VertexModel] = Field(default_factory=list)
    edges: List[List[int]] = Field(default_factory=list)
    adjacency_matrix: List[List[int]] = Field(default_factory=list, alias='adjacencyMatrix')
