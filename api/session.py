"""Sesión compartida por los routers (una por proceso)."""
from typing import Optional

from src.core.session import GraphSession
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Instancia global de la sesión (singleton)
_session: Optional[GraphSession] = None


def get_session() -> GraphSession:
    """Obtiene o crea la sesión de edición."""
    global _session
    if _session is None:
        _session = GraphSession()
        logger.info("GraphSession inicializada")
    return _session


def reset_session() -> GraphSession:
    """Descarta la sesión actual (deteniendo su runner) y crea una nueva."""
    global _session
    if _session is not None:
        _session.stop()
    _session = None
    return get_session()
