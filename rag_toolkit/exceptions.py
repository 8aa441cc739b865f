"""Custom exception hierarchy for the text retrieval toolkit."""


class ToolkitError(Exception):
    """Base exception for toolkit errors."""


class InvalidInputError(ToolkitError, ValueError):
    """Raised when arguments or configuration are empty or malformed."""


class DimensionMismatchError(ToolkitError, ValueError):
    """Raised when vectors of unequal length are compared."""

    def __init__(self, expected: int, actual: int) -> None:
        # Both lengths stay in ``args`` so the error survives pickling.
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return f"Vector dimension mismatch: expected {self.expected}, got {self.actual}"


class NotFittedError(ToolkitError):
    """Raised when a vectorizer or index is used before it has been fit."""
