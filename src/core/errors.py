"""Jerarquía de errores del motor de grafos.

Todos los errores son fallos síncronos e inmediatos: ninguna operación que
lance uno de ellos deja estado parcial instalado.
"""


class GraphError(ValueError):
    """Error base del motor."""

    kind = 'GraphError'

    def __init__(self, message: str):
        super().__init__(f"{self.kind} :: {message}")


# Parsing

class InvalidTokenError(GraphError):
    kind = 'InvalidToken'


class InvalidAdjacencyMatrixError(GraphError):
    kind = 'InvalidAdjacencyMatrix'


class InvalidEdgeError(GraphError):
    kind = 'InvalidEdge'


class InvalidParamsError(GraphError):
    kind = 'InvalidParams'


class InvalidGraphError(GraphError):
    kind = 'InvalidGraph'


class MatrixMarketError(GraphError):
    kind = 'MatrixMarket'


class PrematureEOFError(MatrixMarketError):
    kind = 'PrematureEOF'


class NoHeaderError(MatrixMarketError):
    kind = 'NoHeader'


class UnsupportedTypeError(MatrixMarketError):
    kind = 'UnsupportedType'


# Validación de dominio

class InvalidRGBError(GraphError):
    kind = 'InvalidRGB'


class InvalidHSVError(GraphError):
    kind = 'InvalidHSV'


class InvalidMaxMinError(GraphError):
    kind = 'InvalidMaxMin'


class InvalidLevelError(GraphError):
    kind = 'InvalidLevel'


class InvalidDegreeError(GraphError):
    kind = 'InvalidDegree'


class InvalidNumberError(GraphError):
    kind = 'InvalidNumber'


class InvalidVertexError(GraphError):
    kind = 'InvalidVertex'


# Fábricas

class InvalidAlgorithmError(GraphError):
    kind = 'InvalidAlgorithm'


class InvalidCentralityError(GraphError):
    kind = 'InvalidCentrality'
