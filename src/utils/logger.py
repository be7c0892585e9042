"""Sistema de logging para la aplicación."""
import logging
import os
import sys


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _default_level() -> int:
    """Nivel por defecto, sobrescribible con GRAPH_LOG_LEVEL."""
    name = os.environ.get('GRAPH_LOG_LEVEL', 'INFO').upper()
    return getattr(logging, name, logging.INFO)


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Configura y retorna un logger.
    
    Args:
        name: Nombre del logger (usualmente __name__ del módulo)
        level: Nivel de logging; si es None se lee de GRAPH_LOG_LEVEL
    
    Returns:
        Logger configurado
    """
    logger = logging.getLogger(name)
    
    # Evitar duplicación de handlers
    if logger.handlers:
        return logger
    
    level = _default_level() if level is None else level
    logger.setLevel(level)
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    
    logger.addHandler(console_handler)
    
    return logger


def get_logger(name: str) -> logging.Logger:
    """Obtiene un logger configurado."""
    return setup_logger(name)
