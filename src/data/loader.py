"""Módulo de carga y guardado de grafos en texto y JSON."""
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from src.core.graph import Graph
from src.core.schema import GraphModel
from src.graphs import GraphFactory
from src.utils.helpers import DirectoryManager
from src.utils.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


class GraphLoader:
    """
    Lee y escribe grafos en disco.

    El formato de texto se detecta por la primera línea; el JSON sigue el
    esquema de `GraphModel`.
    """

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    def load(self, path: PathLike) -> Graph:
        content = self._read(Path(path))
        graph = GraphFactory.parse(content)
        logger.info(f"Cargado {path}: {graph!r}")
        return graph

    def load_json(self, path: PathLike) -> Graph:
        content = self._read(Path(path))
        try:
            model = GraphModel.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"JSON inválido en {path}: {e.error_count()} errores")
            raise

        graph = Graph.from_json(model.model_dump(by_alias=True))
        logger.info(f"Cargado {path}: {graph!r}")
        return graph

    def save(self, graph: Graph, path: PathLike) -> Path:
        """Guarda la codificación de texto canónica del grafo."""
        target = DirectoryManager.ensure_parent(Path(path))
        target.write_text(graph.to_string(), encoding=self.encoding)
        logger.info(f"Guardado {target}")
        return target

    def save_json(self, graph: Graph, path: PathLike, indent: int = 2) -> Path:
        target = DirectoryManager.ensure_parent(Path(path))
        model = GraphModel.model_validate(graph.to_json())
        target.write_text(model.model_dump_json(by_alias=True, indent=indent), encoding=self.encoding)
        logger.info(f"Guardado {target}")
        return target

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError:
            raise FileNotFoundError(f"Archivo no encontrado: {path}")
