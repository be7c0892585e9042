"""Módulo de visualización usando patrones Template Method y Strategy."""
import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt
import networkx as nx
from pathlib import Path
from abc import ABC, abstractmethod
from typing import Dict, Optional
from ..core.config import VIZ_CONFIG
from ..core.graph import Graph
from ..utils.logger import get_logger

logger = get_logger(__name__)


class GraphVisualizer(ABC):
    """Clase base para visualización de grafos (Patrón Template Method)."""
    
    def __init__(self, config=VIZ_CONFIG):
        self.config = config
    
    def visualize(self, graph: Graph, output_path: Path, title: str) -> Optional[Path]:
        """Método plantilla para pipeline de visualización."""
        if graph.get_num_vertices() == 0:
            logger.warning(f"Grafo vacío, no se genera {output_path}")
            return None
        
        G = graph.to_networkx()
        pos = self._calculate_layout(G)
        plt.figure(figsize=self.config.figsize)
        
        self._draw_edges(G, pos)
        self._draw_nodes(G, pos)
        self._add_decorations(title)
        
        return self._save_figure(output_path)
    
    def _calculate_layout(self, G: nx.Graph) -> Dict:
        """Proyecta las posiciones del layout sobre el plano (x, y)."""
        return {n: data['pos'][:2] for n, data in G.nodes(data=True)}
    
    def _draw_edges(self, G: nx.Graph, pos: Dict):
        nx.draw_networkx_edges(
            G, pos,
            alpha=self.config.edge_alpha,
            width=self.config.edge_width,
            edge_color=self.config.color_edge
        )
    
    @abstractmethod
    def _draw_nodes(self, G: nx.Graph, pos: Dict):
        """Dibuja nodos (debe ser implementado por subclases)."""
        pass
    
    def _add_decorations(self, title: str):
        """Agrega título y formato."""
        plt.title(title, fontsize=16, fontweight='bold')
        plt.axis('off')
        plt.tight_layout()
    
    def _save_figure(self, output_path: Path) -> Path:
        """Guarda figura en archivo."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(output_path, dpi=self.config.dpi, bbox_inches='tight')
        plt.close()
        logger.info(f"Imagen guardada en {output_path}")
        return output_path


class LayoutSnapshotVisualizer(GraphVisualizer):
    """Dibuja el grafo con el color asignado a cada vértice."""
    
    def _draw_nodes(self, G: nx.Graph, pos: Dict):
        colours = [data['colour'] for _, data in G.nodes(data=True)]
        nx.draw_networkx_nodes(
            G, pos,
            node_size=self.config.node_size,
            node_color=colours,
            edgecolors='#000000',
            linewidths=0.5
        )


class LabelledSnapshotVisualizer(LayoutSnapshotVisualizer):
    """Igual que el snapshot básico, con el texto de cada vértice (o su índice)."""
    
    def _draw_nodes(self, G: nx.Graph, pos: Dict):
        super()._draw_nodes(G, pos)
        labels = {n: data['text'] or str(n) for n, data in G.nodes(data=True)}
        nx.draw_networkx_labels(G, pos, labels=labels, font_size=self.config.font_size)


class VisualizationFacade:
    """Fachada para todas las operaciones de visualización (Patrón Fachada)."""
    
    def __init__(self, config=VIZ_CONFIG):
        self.config = config
    
    def visualize_snapshot(self, graph: Graph, output_path: Path,
                           title: str = '', labels: bool = False) -> Optional[Path]:
        """Guarda una imagen PNG del estado actual del grafo."""
        visualizer = LabelledSnapshotVisualizer(self.config) if labels else LayoutSnapshotVisualizer(self.config)
        stats = f"{graph.get_num_vertices()} vértices, {len(graph.get_edges())} aristas"
        full_title = f"{title}\n{stats}" if title else stats
        return visualizer.visualize(graph, output_path, full_title)
