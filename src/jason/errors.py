"""Exceptions raised by jason."""

from __future__ import annotations


class JasonError(Exception):
    """Base exception for jason errors."""

    pass


class ValidationFailed(JasonError, ValueError):
    """Raised by ``ValidatorDiagnostics.try_throw_errors`` when errors were collected.

    The message is deliberately generic. Every collected error has already
    been emitted to the ``jason.diagnostics`` logger before this is raised;
    the same list is kept on ``errors`` for callers that want it.
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = list(errors or [])
