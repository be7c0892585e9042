"""Utilidades de sistema de archivos."""
import shutil
from pathlib import Path

from src.core.config import PATHS, Paths


class DirectoryManager:

    @staticmethod
    def clean_and_create(paths: Paths = PATHS):
        """Vacía el directorio de salida y recrea snapshots/ y graphs/."""
        if paths.OUTPUT_DIR.exists():
            shutil.rmtree(paths.OUTPUT_DIR)

        for directory in (paths.OUTPUT_DIR, paths.snapshots, paths.graphs):
            directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def ensure_parent(path: Path) -> Path:
        """Crea el directorio padre de un archivo si no existe."""
        path.parent.mkdir(parents=True, exist_ok=True)
        return path
