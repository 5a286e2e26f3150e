"""
Custom exceptions for the delta parser.
"""

from typing import Any


class DeltaBlotsError(Exception):
    """Base exception for deltablots errors."""


class RegistrationError(DeltaBlotsError):
    """
    A blot or format variant could not be registered.

    Attributes:
        variant: The object that was rejected
        message: Why it was rejected
    """

    def __init__(self, variant: Any, message: str | None = None):
        self.variant = variant
        name = getattr(variant, "__name__", repr(variant))
        self.message = message or f"Cannot register {name}: it does not implement the variant contract"
        super().__init__(self.message)
