"""
Router de Grafo - Carga, consulta y edición

Endpoints para cargar un grafo desde texto o JSON, consultarlo y
unir/separar pares de vértices.
"""
from fastapi import APIRouter, HTTPException
from typing import List, Dict, Any
from pydantic import BaseModel, Field

from api.session import get_session
from src.core.errors import GraphError
from src.core.graph import GraphAnalyzer
from src.core.schema import GraphModel
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


class GraphContentRequest(BaseModel):
    """Texto del grafo en cualquiera de los formatos soportados."""
    content: str = Field(..., description="Matriz de adyacencia, lista de aristas o Matrix Market")


class GraphSummary(BaseModel):
    """Resumen del grafo actual."""
    type: str
    num_vertices: int
    edges: List[List[int]]
    statistics: Dict[str, Any]


class GraphTextResponse(BaseModel):
    type: str
    content: str


class EdgeRequest(BaseModel):
    i: int = Field(..., ge=0)
    j: int = Field(..., ge=0)


class VertexState(BaseModel):
    """Estado visual de un vértice."""
    id: int
    pos: List[float]
    colour: List[float]
    degree: int
    text: str
    selected: bool


class VerticesResponse(BaseModel):
    total: int
    vertices: List[VertexState]


def _summary() -> GraphSummary:
    graph = get_session().graph
    return GraphSummary(
        type=graph.type_name,
        num_vertices=graph.get_num_vertices(),
        edges=[list(edge) for edge in graph.get_edges()],
        statistics=GraphAnalyzer.get_statistics(graph)
    )


@router.post("/graph", response_model=GraphSummary)
async def load_graph(request: GraphContentRequest):
    """
    Carga un grafo desde texto. El formato se detecta por la primera línea.
    
    Si el texto no es válido el grafo actual no cambia.
    """
    try:
        get_session().load(request.content)
    except GraphError as e:
        logger.error(f"Error al cargar grafo: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return _summary()


@router.get("/graph", response_model=GraphSummary)
async def get_graph():
    """Resumen y estadísticas del grafo actual."""
    return _summary()


@router.get("/graph/text", response_model=GraphTextResponse)
async def get_graph_text():
    """Serialización de texto canónica del grafo actual."""
    session = get_session()
    return GraphTextResponse(type=session.graph.type_name, content=session.serialize())


@router.get("/graph/json")
async def get_graph_json():
    """Estado completo del grafo en JSON."""
    return get_session().graph.to_json()


@router.post("/graph/json", response_model=GraphSummary)
async def load_graph_json(model: GraphModel):
    """Restaura un grafo desde su JSON."""
    try:
        get_session().load_json(model.model_dump(by_alias=True))
    except GraphError as e:
        logger.error(f"Error al restaurar grafo: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return _summary()


@router.post("/graph/edges", response_model=GraphSummary)
async def attach_vertices(request: EdgeRequest):
    """Une los vértices i y j."""
    try:
        get_session().attach(request.i, request.j)
    except GraphError as e:
        logger.error(f"Error al unir vértices: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return _summary()


@router.delete("/graph/edges", response_model=GraphSummary)
async def detach_vertices(i: int, j: int):
    """Separa los vértices i y j."""
    try:
        get_session().detach(i, j)
    except GraphError as e:
        logger.error(f"Error al separar vértices: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return _summary()


@router.get("/graph/vertices", response_model=VerticesResponse)
async def get_vertices():
    """Posición y color de cada vértice para el renderizado."""
    vertices = [
        VertexState(
            id=vertex.get_vertex_number(),
            pos=vertex.get_pos().tolist(),
            colour=list(vertex.get_colour()),
            degree=vertex.get_degree(),
            text=vertex.get_text(),
            selected=vertex.is_selected()
        )
        for vertex in get_session().graph.get_vertices()
    ]
    return VerticesResponse(total=len(vertices), vertices=vertices)
