"""Error kinds raised by the generator and its adapters."""

from __future__ import annotations


class IdentipatternError(Exception):
    """Base class for every error this package raises."""


class ValidationError(IdentipatternError, ValueError):
    """The input is not a 64-character hexadecimal string."""


class TargetNotFoundError(IdentipatternError, LookupError):
    """A document adapter could not resolve its target element."""
