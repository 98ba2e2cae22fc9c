"""Validation decorators for jason.

Validate the arguments and the return value of a function with jason
validators. Arguments are checked in a single diagnostics run, one scope per
parameter, so every bad argument is reported before ``ValidationFailed`` is
raised. Values are passed through unchanged.

Example:
    >>> from jason import number, string
    >>> from jason.decorators import validate
    >>>
    >>> @validate(
    ...     input_schema={"name": string(length={"min": 1}), "age": number(min=0)},
    ...     output_schema=string(),
    ... )
    ... def greet(name: str, age: int) -> str:
    ...     return f"Hello {name}, you are {age} years old"
"""

import inspect
from collections.abc import Callable, Mapping
from functools import wraps
from typing import Any, TypeVar

from .core import Validator
from .diagnostics import ValidatorDiagnostics

F = TypeVar("F", bound=Callable[..., Any])

# Scope under which return value errors are reported
RETURN_SCOPE = "return"


class validate:
    """Validation decorator for sync and async functions.

    Args:
        input_schema: Mapping of parameter name to validator
        output_schema: Validator for the return value
    """

    def __init__(
        self,
        input_schema: Mapping[str, Validator[Any]] | None = None,
        output_schema: Validator[Any] | None = None,
    ):
        self.input_schema = dict(input_schema or {})
        self.output_schema = output_schema

    def __call__(self, func: F) -> F:
        """Apply validation to the decorated function."""
        sig = inspect.signature(func)

        missing = set(self.input_schema) - set(sig.parameters)
        if missing:
            raise ValueError(f"Function {func.__name__} has no parameters named {sorted(missing)}")

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                self.validate_arguments(sig, args, kwargs)
                result = await func(*args, **kwargs)
                return self.validate_result(result)

            return async_wrapper  # type: ignore[return-value]

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            self.validate_arguments(sig, args, kwargs)
            result = func(*args, **kwargs)
            return self.validate_result(result)

        return sync_wrapper  # type: ignore[return-value]

    def validate_arguments(
        self, sig: inspect.Signature, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> ValidatorDiagnostics:
        """Validate bound call arguments, defaults included.

        Raises:
            TypeError: If the arguments do not bind to the signature
            ValidationFailed: If any argument fails its validator
        """
        bound = sig.bind(*args, **kwargs)
        bound.apply_defaults()

        diagnostics = ValidatorDiagnostics()
        for name, validator in self.input_schema.items():
            with diagnostics.scope(name):
                validator.validate(bound.arguments.get(name), diagnostics)

        diagnostics.try_throw_errors()
        return diagnostics

    def validate_result(self, result: Any) -> Any:
        """Validate the return value and hand it back unchanged.

        Raises:
            ValidationFailed: If the return value fails ``output_schema``
        """
        if self.output_schema is None:
            return result

        diagnostics = ValidatorDiagnostics()
        with diagnostics.scope(RETURN_SCOPE):
            self.output_schema.validate(result, diagnostics)

        diagnostics.try_throw_errors()
        return result
