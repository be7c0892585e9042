"""Editor de grafos por línea de comandos - carga, layout, centralidad y guardado."""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Agregar src al path
sys.path.insert(0, str(Path(__file__).parent))

from src.core.config import PATHS, VIZ_CONFIG
from src.core.graph import GraphAnalyzer
from src.core.session import GraphSession
from src.data.loader import GraphLoader
from src.analysis import CentralityFactory
from src.layout import LayoutFactory
from src.visualization.visualizers import VisualizationFacade
from src.utils.helpers import DirectoryManager


class GraphEditorApp:
    """Aplicación principal del editor (Patrón Fachada)."""
    
    def __init__(self, layout: str, centrality: Optional[str] = None):
        self.paths = PATHS
        self.loader = GraphLoader()
        self.session = GraphSession(layout_name=layout, centrality_name=centrality)
        self.graph_analyzer = GraphAnalyzer()
        self.visualizer = VisualizationFacade(VIZ_CONFIG)
    
    def run(self, input_path: Path, ticks: int, as_json: bool = False,
            save_text: Optional[Path] = None, save_json: Optional[Path] = None,
            snapshot: Optional[Path] = None, labels: bool = False):
        """Ejecuta la carga, los ticks y las salidas pedidas."""
        graph = self.loader.load_json(input_path) if as_json else self.loader.load(input_path)
        self.session.set_graph(graph)
        
        executed = sum(1 for _ in range(ticks) if self.session.tick())
        if ticks == 0:
            self.session.recolour()
        
        stats = self.graph_analyzer.get_statistics(self.session.graph)
        centrality = self.session.centrality.name if self.session.centrality else '-'
        
        print(f"\n{'Tipo':<20} {'Nodos':>6} {'Aristas':>8} {'Densidad':>10} {'Comp.':>6} {'Ticks':>6}")
        print("=" * 62)
        print(f"{self.session.graph.type_name:<20} {stats['nodos']:>6} {stats['aristas']:>8} "
              f"{stats['densidad']:>10.4f} {stats['componentes']:>6} {executed:>6}")
        print("=" * 62)
        print(f"Layout: {self.session.layout_name}  Centralidad: {centrality}")
        
        if save_text:
            print(f"  - Texto: {self.loader.save(self.session.graph, save_text)}")
        if save_json:
            print(f"  - JSON: {self.loader.save_json(self.session.graph, save_json)}")
        if snapshot:
            output = self.visualizer.visualize_snapshot(
                self.session.graph, snapshot, title=self.session.layout_name, labels=labels
            )
            print(f"  - Imagen: {output}")
        print()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Editor de grafos: layout y centralidades")
    parser.add_argument("input", type=Path, help="Archivo del grafo (matriz, aristas o Matrix Market)")
    parser.add_argument("--json", action="store_true", help="El archivo de entrada es JSON")
    parser.add_argument(
        "--layout", default="FruchtermanReingold", choices=LayoutFactory.available(),
        help="Algoritmo de layout"
    )
    parser.add_argument(
        "--centrality", default=None, choices=CentralityFactory.available(),
        help="Centralidad para colorear los vértices"
    )
    parser.add_argument("--ticks", type=int, default=100, help="Número de ticks a ejecutar")
    parser.add_argument("--save-text", type=Path, default=None, help="Guardar el grafo en texto")
    parser.add_argument("--save-json", type=Path, default=None, help="Guardar el grafo en JSON")
    parser.add_argument(
        "--snapshot", type=Path, nargs="?", const=PATHS.snapshots / "graph.png", default=None,
        help="Guardar una imagen PNG del resultado"
    )
    parser.add_argument("--labels", action="store_true", help="Mostrar etiquetas en la imagen")
    parser.add_argument("--clean", action="store_true", help="Vaciar el directorio de salida antes de empezar")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Punto de entrada."""
    args = parse_args(argv)
    if args.clean:
        DirectoryManager.clean_and_create(PATHS)
    
    app = GraphEditorApp(args.layout, args.centrality)
    app.run(
        args.input, args.ticks,
        as_json=args.json,
        save_text=args.save_text,
        save_json=args.save_json,
        snapshot=args.snapshot,
        labels=args.labels
    )


if __name__ == '__main__':
    main()
