from typing import Optional, Tuple


class MatrixError(ValueError):
    """Base class for every input validation failure raised by the matrix core."""


class ParseError(MatrixError):
    def __init__(self, message: str, row: Optional[int] = None):
        super().__init__(message)
        self.row = row


class DimensionMismatchError(MatrixError):
    def __init__(self, left: Tuple[int, int], right: Tuple[int, int]):
        super().__init__(
            f"Dimension mismatch: ({left[0]}x{left[1]}) * ({right[0]}x{right[1]}).")
        self.left = left
        self.right = right


class DimensionError(MatrixError):
    pass


class ShapeError(MatrixError):
    def __init__(self, message: str, required: Optional[Tuple[int, int]] = None, actual: Optional[Tuple[int, int]] = None):
        super().__init__(message)
        self.required = required
        self.actual = actual
