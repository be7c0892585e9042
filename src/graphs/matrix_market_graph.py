"""Grafo en formato Matrix Market (solo coordinate + pattern + symmetric)."""
import numpy as np

from src.core.errors import InvalidEdgeError, PrematureEOFError, UnsupportedTypeError
from src.core.graph import Graph
from src.graphs import mmio
from src.utils.logger import get_logger

logger = get_logger(__name__)

SUPPORTED_TYPECODE = mmio.MMTypecode(mmio.MM_COORDINATE_STR, mmio.MM_PATTERN_STR, mmio.MM_SYMM_STR)


class MatrixMarketGraph(Graph):

    type_name = 'MatrixMarketGraph'

    def read(self, content: str):
        content = content.strip()
        if not content:
            self._reset_ids()
            self._install([], np.zeros((0, 0), dtype=np.int8), [])
            return

        lines = content.splitlines()
        matcode, num_line = mmio.read_banner(lines)

        if not (matcode.is_coordinate() and matcode.is_pattern() and matcode.is_symmetric()):
            raise UnsupportedTypeError(
                "Sorry, this application only supports graphs that are "
                f"[{mmio.MM_COORDINATE_STR}][{mmio.MM_PATTERN_STR}][{mmio.MM_SYMM_STR}], "
                f"not [{matcode.storage}][{matcode.data_type}][{matcode.symmetry}]"
            )

        rows, _, nnz, num_line = mmio.read_coordinate_size(lines, num_line)

        pairs = []
        while len(pairs) < nnz:
            if num_line >= len(lines):
                raise PrematureEOFError(f"Expected {nnz} entries, found {len(pairs)}")

            line = lines[num_line]
            num_line += 1
            if not line.strip():
                continue

            tokens = Graph.split(line)
            if len(tokens) < 2:
                raise InvalidEdgeError(f"Entry '{line.strip()}' must have a row and a column")

            # Índices base 1 en el fichero
            i, j = tokens[0] - 1, tokens[1] - 1
            if not (0 <= i < rows and 0 <= j < rows):
                raise InvalidEdgeError(f"Entry '{line.strip()}' is out of range for {rows} rows")

            pairs.append((i, j))

        self._build_from_pairs(pairs, rows)
        logger.debug(f"Matrix Market: {rows} filas, {nnz} entradas")

    def to_string(self) -> str:
        n = len(self.vertices)
        entries = sorted((min(i, j), max(i, j)) for i, j in self.edge_list)

        lines = [SUPPORTED_TYPECODE.banner(), f"{n} {n} {len(entries)}"]
        lines.extend(f"{i + 1} {j + 1}" for i, j in entries)
        return '\n'.join(lines)
