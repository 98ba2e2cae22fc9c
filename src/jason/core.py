"""The validator contract shared by every primitive and combinator."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .diagnostics import ValidatorDiagnostics

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """A reusable, immutable check over a runtime value.

    Subclasses implement ``check``; callers use ``validate``. The type
    parameter names the Python type a passing value has and exists for
    static type checkers only.

    Example:
        >>> class Even(Validator[int]):
        ...     def check(self, value, diagnostics):
        ...         if value % 2:
        ...             return diagnostics.push_error(f"'{value}' is not even")
        ...         return diagnostics
        >>> Even().validate(3).errors
        ["'': '3' is not even"]
    """

    def validate(self, value: Any, diagnostics: ValidatorDiagnostics | None = None) -> ValidatorDiagnostics:
        """Validate ``value``, recording any errors on ``diagnostics``.

        Args:
            value: The value to check. It is never modified.
            diagnostics: Diagnostics to record into. A fresh instance is
                created when omitted; pass one in to accumulate errors across
                several calls.

        Returns:
            The diagnostics holding every error found
        """
        if diagnostics is None:
            diagnostics = ValidatorDiagnostics()
        return self.check(value, diagnostics)

    @abstractmethod
    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        """Check ``value`` against this validator's rules."""
        ...
