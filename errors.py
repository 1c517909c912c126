from __future__ import annotations

from typing import Optional


class ReceiptError(Exception):
    """Base class for errors raised while handling a submitted receipt."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StructuralParseError(ReceiptError):
    """
    Raised when raw input cannot be decoded into a Receipt, including
    purchase dates and times that do not match their exact layout.

    Attributes:
        field (Optional[str]): The top-level receipt field that failed, when known.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ReceiptValidationError(ReceiptError):
    """Raised for the first format rule a decoded Receipt violates."""
