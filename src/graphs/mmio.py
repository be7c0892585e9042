"""
Lectura de la cabecera Matrix Market.

Basado en la biblioteca de E/S de Matrix Market del NIST
(http://math.nist.gov/MatrixMarket).
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.core.errors import NoHeaderError, PrematureEOFError, UnsupportedTypeError

MATRIX_MARKET_BANNER = '%%MatrixMarket'

MM_MTX_STR = 'matrix'
MM_ARRAY_STR = 'array'
MM_COORDINATE_STR = 'coordinate'
MM_COMPLEX_STR = 'complex'
MM_REAL_STR = 'real'
MM_INT_STR = 'integer'
MM_PATTERN_STR = 'pattern'
MM_GENERAL_STR = 'general'
MM_SYMM_STR = 'symmetric'
MM_HERM_STR = 'hermitian'
MM_SKEW_STR = 'skew-symmetric'

STORAGE_TYPES = (MM_COORDINATE_STR, MM_ARRAY_STR)
DATA_TYPES = (MM_REAL_STR, MM_COMPLEX_STR, MM_PATTERN_STR, MM_INT_STR)
SYMMETRY_TYPES = (MM_GENERAL_STR, MM_SYMM_STR, MM_HERM_STR, MM_SKEW_STR)


@dataclass(frozen=True)
class MMTypecode:
    """Tipo de matriz: objeto, almacenamiento, tipo de dato y simetría."""
    storage: str = MM_COORDINATE_STR
    data_type: str = MM_PATTERN_STR
    symmetry: str = MM_SYMM_STR

    def is_coordinate(self) -> bool:
        return self.storage == MM_COORDINATE_STR

    def is_pattern(self) -> bool:
        return self.data_type == MM_PATTERN_STR

    def is_symmetric(self) -> bool:
        return self.symmetry == MM_SYMM_STR

    def banner(self) -> str:
        return f"{MATRIX_MARKET_BANNER} {MM_MTX_STR} {self.storage} {self.data_type} {self.symmetry}"


def read_banner(lines: List[str]) -> Tuple[MMTypecode, int]:
    """
    Lee la primera línea de cabecera.
    
    Returns:
        (typecode, índice de la siguiente línea)
    """
    tokens = lines[0].split() if lines else []
    if len(tokens) != 5:
        raise PrematureEOFError('Could not process Matrix Market banner')

    banner, mtx, storage, data_type, symmetry = tokens
    if not banner.startswith(MATRIX_MARKET_BANNER):
        raise NoHeaderError('Matrix Market banner not found')

    mtx, storage = mtx.lower(), storage.lower()
    data_type, symmetry = data_type.lower(), symmetry.lower()

    if (mtx != MM_MTX_STR or storage not in STORAGE_TYPES
            or data_type not in DATA_TYPES or symmetry not in SYMMETRY_TYPES):
        raise UnsupportedTypeError(
            f"Unknown Matrix Market type: {mtx} {storage} {data_type} {symmetry}"
        )

    return MMTypecode(storage, data_type, symmetry), 1


def _read_m_n_nz(line: str) -> Optional[Tuple[int, int, int]]:
    parts = line.split()
    if len(parts) != 3:
        return None
    try:
        return int(parts[0]), int(parts[1]), int(parts[2])
    except ValueError:
        return None


def read_coordinate_size(lines: List[str], num_line: int) -> Tuple[int, int, int, int]:
    """
    Salta los comentarios y lee la línea `filas columnas nnz`.
    
    Returns:
        (filas, columnas, nnz, índice de la siguiente línea)
    """
    while num_line < len(lines):
        line = lines[num_line]
        num_line += 1

        if line.startswith('%') or not line.strip():
            continue

        size = _read_m_n_nz(line)
        if size is not None:
            rows, cols, nnz = size
            return rows, cols, nnz, num_line

    raise PrematureEOFError('Could not process Matrix Market size')
