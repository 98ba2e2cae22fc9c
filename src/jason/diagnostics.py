"""Error collection and scope tracking for a validation run.

A single ``ValidatorDiagnostics`` instance is threaded through every
validator taking part in one ``validate`` call. Combinators push a scope
segment before descending into a child and pop it afterwards, and
primitives record errors prefixed with the rendered scope path.

Example:
    >>> diagnostics = ValidatorDiagnostics()
    >>> with diagnostics.scope("friends"):
    ...     with diagnostics.scope(2):
    ...         _ = diagnostics.push_error("the value was not of type 'string'")
    >>> diagnostics.errors
    ["'friends[2]': the value was not of type 'string'"]
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from ._types import Scope
from .errors import ValidationFailed

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to validate data. There is most likely more information above."


def render_path(scopes: tuple[Scope, ...] | list[Scope]) -> str:
    """Render a scope stack in object-path notation.

    Indices render as ``[n]``. A name renders as ``.name`` unless it is the
    first segment or directly follows an index, in which case it renders bare.

    Args:
        scopes: Scope segments, outermost first

    Returns:
        The rendered path, e.g. ``User.friends[2]``
    """
    path = ""
    for i, scope in enumerate(scopes):
        if isinstance(scope, int):
            path += f"[{scope}]"
        elif i == 0 or isinstance(scopes[i - 1], int):
            path += scope
        else:
            path += f".{scope}"
    return path


class ValidatorDiagnostics:
    """Accumulates errors and tracks the current path during validation.

    Errors are append-only and kept in discovery order. The scope stack is
    only ever used as a stack: segments are pushed on descent and popped on
    return.
    """

    def __init__(self) -> None:
        self._errors: list[str] = []
        self._scopes: list[Scope] = []

    def __repr__(self) -> str:
        return f"ValidatorDiagnostics(errors={self._errors!r}, scopes={self._scopes!r})"

    @property
    def errors(self) -> list[str]:
        """A copy of the errors collected so far."""
        return list(self._errors)

    @property
    def scopes(self) -> tuple[Scope, ...]:
        """The current scope stack, outermost first."""
        return tuple(self._scopes)

    @property
    def is_ok(self) -> bool:
        return not self._errors

    def push_scope(self, scope: Scope) -> None:
        self._scopes.append(scope)

    def pop_scope(self) -> None:
        """Remove the innermost scope.

        Raises:
            AssertionError: If there is no scope to pop
        """
        if not self._scopes:
            raise AssertionError("pop_scope() called with an empty scope stack")
        self._scopes.pop()

    @contextmanager
    def scope(self, scope: Scope) -> Iterator["ValidatorDiagnostics"]:
        """Push ``scope`` for the duration of the block.

        The scope is popped even if the block raises, so an exception coming
        out of a user supplied validator cannot leave the stack unbalanced.
        """
        self.push_scope(scope)
        try:
            yield self
        finally:
            self.pop_scope()

    def push_error(self, error: str) -> "ValidatorDiagnostics":
        """Record ``error`` at the current path.

        Args:
            error: Human readable description of the violation

        Returns:
            This diagnostics instance, so a failing check can ``return`` it directly
        """
        entry = f"'{render_path(self._scopes)}': {error}"
        self._errors.append(entry)
        logger.debug(f"Recorded validation error {entry}")
        return self

    def debug(self) -> None:
        """Emit every collected error to the error log without raising."""
        for error in self._errors:
            logger.error(error)

    def try_throw_errors(self) -> None:
        """Raise if any errors were collected.

        The errors are emitted through ``debug()`` first; the raised exception
        only carries a generic message.

        Raises:
            ValidationFailed: If at least one error was collected
        """
        if self._errors:
            self.debug()
            raise ValidationFailed(FAILURE_MESSAGE, self._errors)

    # camelCase names of the public surface
    pushScope = push_scope
    popScope = pop_scope
    pushError = push_error
    tryThrowErrors = try_throw_errors

    @property
    def isOk(self) -> bool:
        return self.is_ok
