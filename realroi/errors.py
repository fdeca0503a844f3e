"""
Exceptions raised by shapes.

Index problems use the built-in ``IndexError``; the classes below cover the
cases a caller needs to tell apart from a plain bad index.
"""


class DimensionMismatchError(IndexError, ValueError):
    """A point has fewer coordinates than the shape's dimensionality."""

    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(f"Point must have at least {expected} coordinates, got {got}")


class UnsupportedOperationError(TypeError):
    """The shape variant does not support the requested mutation."""

    def __init__(self, operation: str, shape=None):
        self.operation = operation
        kind = type(shape).__name__ if shape is not None else "shape"
        super().__init__(f"{kind} does not support {operation}()")
