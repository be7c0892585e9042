"""Inmutabilidad y seguridad de tipos."""
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Paths:

    OUTPUT_DIR: Path = Path('output')

    @property
    def snapshots(self) -> Path:
        return self.OUTPUT_DIR / 'snapshots'

    @property
    def graphs(self) -> Path:
        return self.OUTPUT_DIR / 'graphs'


@dataclass(frozen=True)
class VertexConfig:

    radius: float = 0.05  # Radio de la esfera del vértice


@dataclass(frozen=True)
class LayoutConfig:

    # Fruchterman-Reingold
    fr_width: float = 128.0
    fr_length: float = 72.0

    # Multi-Force
    mf_width: float = 80.0
    mf_length: float = 45.0
    mf_energy_base: float = 10.0
    mf_energy_per_vertex: float = 0.1
    mf_max_relaxation_steps: int = 10000

    # Simple-Force-Directed
    sfd_repulsion: float = 10.0
    sfd_distance_factor: float = 0.25
    sfd_attraction: float = 4.0
    sfd_damping: float = 0.01

    # Comunes
    step: float = 0.0015      # Desplazamiento por unidad de fuerza
    cooling: float = 0.9      # Decaimiento de la temperatura
    min_distance: float = 2e-11

    @property
    def fr_area(self) -> float:
        return self.fr_width * self.fr_length

    @property
    def mf_area(self) -> float:
        return self.mf_width * self.mf_length


@dataclass(frozen=True)
class RunnerConfig:

    delay_ms: int = 10  # Retardo entre ticks


@dataclass(frozen=True)
class VisualizationConfig:
    dpi: int = 150
    node_size: int = 80
    figsize: Tuple[int, int] = (16, 9)
    color_edge: str = '#888888'
    edge_alpha: float = 0.5
    edge_width: float = 0.8
    font_size: int = 8


# Singleton instances
PATHS = Paths()
VERTEX_CONFIG = VertexConfig()
LAYOUT_CONFIG = LayoutConfig()
RUNNER_CONFIG = RunnerConfig()
VIZ_CONFIG = VisualizationConfig()
