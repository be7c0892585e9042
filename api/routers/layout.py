"""
Router de Layout

Endpoints para elegir el algoritmo de layout, recolocar los vértices,
avanzar ticks y controlar la ejecución periódica.
"""
from fastapi import APIRouter, HTTPException, Query
from typing import List
from pydantic import BaseModel

from api.session import get_session
from src.core.errors import GraphError
from src.layout import LayoutFactory
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


class LayoutRequest(BaseModel):
    algorithm: str


class LayoutResponse(BaseModel):
    algorithm: str
    available: List[str]
    running: bool
    ticks: int


class TickResponse(BaseModel):
    requested: int
    executed: int
    ticks: int


def _status() -> LayoutResponse:
    session = get_session()
    return LayoutResponse(
        algorithm=session.layout_name,
        available=LayoutFactory.available(),
        running=session.is_running(),
        ticks=session.ticks
    )


@router.get("/layout", response_model=LayoutResponse)
async def get_layout():
    return _status()


@router.post("/layout", response_model=LayoutResponse)
async def set_layout(request: LayoutRequest):
    """Selecciona el algoritmo de layout para el grafo actual."""
    try:
        get_session().set_layout(request.algorithm)
    except GraphError as e:
        logger.error(f"Error al seleccionar layout: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return _status()


@router.post("/layout/place", response_model=LayoutResponse)
async def place_vertices():
    """Recoloca los vértices según el algoritmo activo."""
    get_session().place()
    return _status()


@router.post("/layout/tick", response_model=TickResponse)
def run_ticks(steps: int = Query(default=1, ge=1, le=10000)):
    """
    Ejecuta `steps` ticks (layout y centralidad).

    Se declara síncrono para que FastAPI lo ejecute en el threadpool y no
    bloquee el event loop del runner periódico.
    """
    session = get_session()
    executed = sum(1 for _ in range(steps) if session.tick())
    return TickResponse(requested=steps, executed=executed, ticks=session.ticks)


@router.post("/layout/start", response_model=LayoutResponse)
async def start_runner():
    """Inicia los ticks periódicos; no hace nada si ya están en marcha."""
    get_session().start()
    return _status()


@router.post("/layout/stop", response_model=LayoutResponse)
async def stop_runner():
    get_session().stop()
    return _status()
