"""Terminal failures raised by the scaffolding pipeline."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a scaffolding run."""


class MissingInputError(ScaffoldError):
    """Raised when no component file path was supplied."""

    def __init__(self, message: str = "Filepath argument is required!") -> None:
        super().__init__(message)


class UnparseableComponentError(ScaffoldError):
    """Raised when no usable component definition could be found."""


class AmbiguousComponentError(ScaffoldError):
    """Raised when the source holds more than one candidate definition."""


__all__ = [
    "AmbiguousComponentError",
    "MissingInputError",
    "ScaffoldError",
    "UnparseableComponentError",
]
