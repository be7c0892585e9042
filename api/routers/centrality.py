"""
Router de Centralidad

Endpoints para elegir la centralidad que recolorea los vértices en cada tick.
"""
from fastapi import APIRouter, HTTPException
from typing import List, Optional, Dict, Any
from pydantic import BaseModel

from api.session import get_session
from src.analysis import CentralityFactory
from src.core.errors import GraphError
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


class CentralityRequest(BaseModel):
    """`None` desactiva el recoloreado."""
    centrality: Optional[str] = None
    apply: bool = True


class CentralityResponse(BaseModel):
    centrality: Optional[str]
    available: List[str]
    metrics: Dict[str, Any]


def _status() -> CentralityResponse:
    centrality = get_session().centrality
    return CentralityResponse(
        centrality=centrality.name if centrality is not None else None,
        available=CentralityFactory.available(),
        metrics=centrality.get_metrics() if centrality is not None else {}
    )


@router.get("/centrality", response_model=CentralityResponse)
async def get_centrality():
    return _status()


@router.post("/centrality", response_model=CentralityResponse)
async def set_centrality(request: CentralityRequest):
    """Selecciona la centralidad y, opcionalmente, la aplica de inmediato."""
    session = get_session()
    try:
        session.set_centrality(request.centrality)
        if request.apply:
            session.recolour()
    except GraphError as e:
        logger.error(f"Error al aplicar centralidad: {str(e)}")
        raise HTTPException(status_code=400, detail=str(e))

    return _status()
