"""Ejecutor periódico de ticks sobre el bucle asyncio."""
import asyncio
from typing import Callable, Optional

from .config import RUNNER_CONFIG
from src.utils.logger import get_logger

logger = get_logger(__name__)


class TaskRunner:
    """
    Ejecuta una tarea repetidamente con un retardo fijo entre ejecuciones.

    - `start()` con el bucle ya activo no hace nada
    - `stop()` activa la bandera de la ejecución actual, que se comprueba al
      inicio de cada iteración; un tick en curso siempre termina
    - Cada `start()` crea su propia bandera: un bucle detenido no vuelve a
      ejecutar ticks aunque se reinicie el runner antes de que termine
    """

    def __init__(self, task: Callable[[], object], delay_ms: int = RUNNER_CONFIG.delay_ms):
        self._task = task
        self._delay = delay_ms / 1000.0
        self._stop: Optional[asyncio.Event] = None
        self._loop_task: Optional[asyncio.Task] = None
        self.iterations = 0

    @property
    def is_running(self) -> bool:
        return (
            self._loop_task is not None
            and not self._loop_task.done()
            and not self._stop.is_set()
        )

    def start(self) -> bool:
        """Inicia el bucle; requiere un event loop en ejecución."""
        if self.is_running:
            return False

        loop = asyncio.get_running_loop()
        self._stop = asyncio.Event()
        self._loop_task = loop.create_task(self._run_loop(self._stop))
        logger.info(f"TaskRunner iniciado (retardo={self._delay * 1000:.0f} ms)")
        return True

    def stop(self) -> bool:
        """Detiene el bucle tras el tick en curso."""
        if not self.is_running:
            return False

        self._stop.set()
        logger.info(f"TaskRunner detenido tras {self.iterations} iteraciones")
        return True

    async def wait(self):
        """Espera a que el bucle actual termine."""
        if self._loop_task is not None:
            await self._loop_task

    async def _run_loop(self, stop: asyncio.Event):
        try:
            while not stop.is_set():
                self._task()
                self.iterations += 1
                try:
                    # stop() despierta la espera sin agotar el retardo
                    await asyncio.wait_for(stop.wait(), timeout=self._delay)
                except asyncio.TimeoutError:
                    pass
        except Exception:
            logger.exception("Error en la tarea periódica")
            raise
