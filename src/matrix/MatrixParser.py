import re
from dataclasses import dataclass
from typing import List

import numpy as np

from matrix.LinearAlgebra import LinearAlgebra
from matrix.MatrixErrors import ParseError

# Rows: newline or any run of semicolons, e.g. "1 0; 0 1" or "1 0\n0 1"
ROW_SEPARATOR_RE = re.compile(r"\n|;+")

# Columns: any run of commas and/or whitespace, e.g. "1, 2" or "1 ,  2"
TOKEN_SEPARATOR_RE = re.compile(r"[,\s]+")

# Decimal notation with an optional exponent, or a signed Infinity
NUMBER_RE = re.compile(r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity)")


@dataclass(frozen=True)
class MatrixParser:
    @staticmethod
    def parse_number(token: str) -> float:
        if not NUMBER_RE.fullmatch(token):
            raise ParseError(f"Matrix contains non-numeric value: {token!r}.")
        return float(token)

    @staticmethod
    def split_rows(text: str) -> List[str]:
        rows = (r.strip() for r in ROW_SEPARATOR_RE.split(text.strip()))
        return [r for r in rows if r]

    @staticmethod
    def split_tokens(row: str) -> List[str]:
        return [t for t in TOKEN_SEPARATOR_RE.split(row) if t]

    @staticmethod
    def parse(text: str) -> np.ndarray:
        """Parse delimited text into a rectangular float matrix.

        Text without any rows parses to the empty matrix.
        """
        rows = MatrixParser.split_rows(text)
        if not rows:
            return LinearAlgebra.empty()

        values: List[List[float]] = []
        for i, row in enumerate(rows):
            try:
                values.append([MatrixParser.parse_number(t) for t in MatrixParser.split_tokens(row)])
            except ParseError as ex:
                raise ParseError(str(ex), row=i + 1) from None

        width = len(values[0])
        for i, row in enumerate(values):
            if len(row) != width:
                raise ParseError(
                    f"Matrix has inconsistent row length: row {i + 1} has {len(row)} values, expected {width}.",
                    row=i + 1,
                )

        return np.array(values, dtype=float).reshape(len(values), width)
