"""
Engine Errors - The failure taxonomy shared by every component.

Each error carries a machine-readable code and the HTTP status the API
layer reports it with. Engines raise these; nothing inside the engine
catches them.
"""

from __future__ import annotations
from typing import Any


class DialecticError(Exception):
    """Base class for engine failures."""

    error_code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DialecticError):
    """Bad input shape or value (empty name, wrong item kind, ...)."""

    error_code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(DialecticError):
    """Unknown player, scenario, choice, enemy, item or fallacy."""

    error_code = "NOT_FOUND"
    status_code = 404


class InvalidStateError(DialecticError):
    """Action issued against a concluded or mismatched encounter, or a full loadout."""

    error_code = "INVALID_STATE"
    status_code = 409


class ConflictError(DialecticError):
    """A concurrent writer committed between read and write."""

    error_code = "CONFLICT"
    status_code = 409
