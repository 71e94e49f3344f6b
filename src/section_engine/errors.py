"""Engine error types."""

from typing import Any, Optional


class InvalidInputError(ValueError):
    """
    Raised when a snapshot cannot be used for computation.

    Covers malformed fields (non-numeric values, NaN, out-of-range priority)
    and invalid call parameters. Missing optional values are never an error;
    they fall back to configured defaults.
    """

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []
