"""Combinators: validators built from other validators.

Combinators descend into child validators under a scope segment, so errors
from nested values carry their full path. Every field of an object and every
item of an array is checked, even after an earlier one failed.
"""

from collections.abc import Mapping
from typing import Any

from .converters import as_sequence, is_array, is_object
from .core import Validator
from .diagnostics import ValidatorDiagnostics
from .models import ArrayOptions, build_options


class OptionalValidator(Validator[Any]):
    """Skips ``None``; delegates anything else to the wrapped validator."""

    def __init__(self, validator: Validator[Any]):
        self.validator = validator

    def __repr__(self) -> str:
        return f"OptionalValidator({self.validator!r})"

    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        if value is None:
            return diagnostics
        return self.validator.validate(value, diagnostics)


class ObjectValidator(Validator[dict[str, Any]]):
    """Checks each declared field of a mapping with its own validator.

    Fields are checked in declaration order. A key missing from the value is
    passed to its validator as ``None``, which lets ``optional`` fields pass.
    Keys that are not declared are ignored.
    """

    def __init__(self, fields: Mapping[str, Validator[Any]]):
        for name, validator in fields.items():
            if not isinstance(validator, Validator):
                raise TypeError(
                    f"Field '{name}' must be a Validator, got {type(validator).__name__}"
                )
        self.fields = dict(fields)

    def __repr__(self) -> str:
        return f"ObjectValidator({self.fields!r})"

    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        if not is_object(value):
            return diagnostics.push_error("the value was not of type 'object'")

        for name, validator in self.fields.items():
            with diagnostics.scope(name):
                validator.validate(value.get(name), diagnostics)

        return diagnostics


class ArrayValidator(Validator[list[Any]]):
    """Checks the length of a sequence and then every item in index order."""

    def __init__(self, validator: Validator[Any], options: ArrayOptions):
        self.validator = validator
        self.options = options

    def __repr__(self) -> str:
        return f"ArrayValidator({self.validator!r}, {self.options!r})"

    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        if not is_array(value):
            return diagnostics.push_error("the value is not of type 'array'")

        items = as_sequence(value)
        size = len(items)
        length = self.options.length

        if isinstance(length, int):
            if size != length:
                return diagnostics.push_error(
                    f"the array length of '{size}' is not equal to '{length}'"
                )
        elif length is not None:
            if length.min is not None and size < length.min:
                return diagnostics.push_error(
                    f"the array length of '{size}' is not greater than or equal to '{length.min}'"
                )
            if length.max is not None and size > length.max:
                return diagnostics.push_error(
                    f"the array length of '{size}' is not less than or equal to '{length.max}'"
                )

        for index, item in enumerate(items):
            with diagnostics.scope(index):
                self.validator.validate(item, diagnostics)

        return diagnostics


class LabelledValidator(Validator[Any]):
    """Prefixes every error of the wrapped validator with a constant label.

    The label is pushed and never popped: it stays as the outermost frame
    for the rest of the run. Wrap a whole schema with it rather than nesting
    it under another combinator, where it would also prefix the errors of
    later siblings.
    """

    def __init__(self, label: str, validator: Validator[Any]):
        self.label = label
        self.validator = validator

    def __repr__(self) -> str:
        return f"LabelledValidator({self.label!r}, {self.validator!r})"

    def check(self, value: Any, diagnostics: ValidatorDiagnostics) -> ValidatorDiagnostics:
        diagnostics.push_scope(self.label)
        self.validator.validate(value, diagnostics)
        return diagnostics


def optional(validator: Validator[Any]) -> OptionalValidator:
    """Create a validator matching either ``None`` or the given validator."""
    return OptionalValidator(validator)


def object(fields: Mapping[str, Validator[Any]]) -> ObjectValidator:  # noqa: A001
    """Create a validator matching mappings whose fields match their validators.

    Example:
        >>> from jason.primitives import number, string
        >>> user = object({"name": string(), "age": number(min=0)})
        >>> user.validate({"name": 1, "age": -3}).errors
        ["'name': the value was not of type 'string'", "'age': '-3' is not greater than or equal to '0'"]
    """
    return ObjectValidator(fields)


def array(
    validator: Validator[Any], options: ArrayOptions | dict[str, Any] | None = None, /, **kwargs: Any
) -> ArrayValidator:
    """Create a validator matching a sequence whose items all match ``validator``.

    Args:
        validator: Validator applied to every item
        options: ``ArrayOptions`` or a dict; keyword options are also accepted

    Example:
        >>> from jason.primitives import string
        >>> array(string(), length={"min": 1}).validate([]).is_ok
        False
    """
    return ArrayValidator(validator, build_options(ArrayOptions, options, kwargs))


def labelled(label: str, validator: Validator[Any]) -> LabelledValidator:
    """Create a wrapper that shows ``label`` at the start of every error path.

    Labels render in object-path notation (``User.name``), so PascalCase
    labels help tell them apart from object fields.
    """
    return LabelledValidator(label, validator)
