"""Primitive validators: leaf checks over scalar values.

Each primitive stops at its first failing rule and records a single error
for the value it was given. Sibling fields and items are unaffected.
"""

from typing import Any

from ._types import Predicate
from .converters import is_boolean, is_number, is_string
from .core import Validator
from .diagnostics import ValidatorDiagnostics
from .models import NumberOptions, StringOptions, build_options


class StringValidator(Validator[str]):
    """Matches a ``str`` with optional prefix, suffix and length rules."""

    def __init__(self, options: StringOptions):
        self.options = options

    def __repr__(self) -> str:
        return f"StringValidator({self.options!r})"

    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        opts = self.options

        if not is_string(value):
            return diagnostics.push_error("the value was not of type 'string'")

        if opts.starts_with is not None and not value.startswith(opts.starts_with):
            return diagnostics.push_error(f"'{value}' did not start with '{opts.starts_with}'")

        if opts.ends_with is not None and not value.endswith(opts.ends_with):
            return diagnostics.push_error(f"'{value}' did not end with '{opts.ends_with}'")

        length = opts.length
        if isinstance(length, int):
            if len(value) != length:
                return diagnostics.push_error(f"'{value}' did not have a length of '{length}'")
        elif length is not None:
            if length.min is not None and len(value) < length.min:
                return diagnostics.push_error(
                    f"'{value}' had a length less than the minimum length of '{length.min}'"
                )
            if length.max is not None and len(value) > length.max:
                return diagnostics.push_error(
                    f"'{value}' had a length greater than the maximum length of '{length.max}'"
                )

        if opts.custom_validator is not None:
            return opts.custom_validator(value, diagnostics)

        return diagnostics


class NumberValidator(Validator[float]):
    """Matches a real number (never a bool) within inclusive bounds."""

    def __init__(self, options: NumberOptions):
        self.options = options

    def __repr__(self) -> str:
        return f"NumberValidator({self.options!r})"

    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        opts = self.options

        if not is_number(value):
            return diagnostics.push_error("the value is not of type 'number'")

        if opts.min is not None and value < opts.min:
            return diagnostics.push_error(f"'{value}' is not greater than or equal to '{opts.min}'")

        if opts.max is not None and value > opts.max:
            return diagnostics.push_error(f"'{value}' is not less than or equal to '{opts.max}'")

        if opts.custom_validator is not None:
            return opts.custom_validator(value, diagnostics)

        return diagnostics


class BooleanValidator(Validator[bool]):
    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        if not is_boolean(value):
            return diagnostics.push_error("the value is not of type 'boolean'")
        return diagnostics


class MatchesValidator(Validator[Any]):
    """Passes when a user supplied predicate returns a truthy value."""

    def __init__(self, predicate: Predicate):
        if not callable(predicate):
            raise TypeError(f"matches() expects a callable, got {type(predicate).__name__}")
        self.predicate = predicate

    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        if not self.predicate(value):
            return diagnostics.push_error("the value did not match the predicate")
        return diagnostics


def string(options: StringOptions | dict[str, Any] | None = None, /, **kwargs: Any) -> StringValidator:
    """Create a validator matching a string with the given options.

    Options may be passed as keywords, as a dict or as a ``StringOptions``.

    Example:
        >>> username = string(length={"min": 4, "max": 16})
        >>> username.validate("asd").is_ok
        False
        >>> string({"startsWith": "user-"}).validate("user-0128432").is_ok
        True
    """
    return StringValidator(build_options(StringOptions, options, kwargs))


def number(options: NumberOptions | dict[str, Any] | None = None, /, **kwargs: Any) -> NumberValidator:
    """Create a validator matching a number, optionally within inclusive bounds."""
    return NumberValidator(build_options(NumberOptions, options, kwargs))


def boolean() -> BooleanValidator:
    """Create a validator matching exactly ``True`` or ``False``."""
    return BooleanValidator()


def matches(predicate: Predicate) -> MatchesValidator:
    """Create a validator that passes when ``predicate(value)`` is truthy.

    Exceptions raised by ``predicate`` propagate to the caller of ``validate``.
    """
    return MatchesValidator(predicate)
