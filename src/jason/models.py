"""Pydantic models for jason validator options.

Every validator captures its configuration in one of these models when it is
built. The models are frozen, so a schema can be shared and reused without
any risk of its rules changing between runs.

Option fields accept both snake_case names and the camelCase names used by
the public surface (``startsWith``, ``endsWith``, ``customValidator``).

Example:
    >>> from jason.models import StringOptions
    >>> opts = StringOptions(length={"min": 4, "max": 16}, startsWith="user-")
    >>> opts.length
    LengthRange(min=4, max=16)
    >>> opts.starts_with
    'user-'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class JasonBaseModel(BaseModel):
    """Base model for all jason option models.

    - extra="forbid": Rejects any option that is not defined on the model
    - frozen=True: Makes instances immutable once a validator is built
    - populate_by_name=True: Accepts field names as well as their aliases
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class LengthRange(JasonBaseModel):
    """Inclusive length bounds. Either side may be left open.

    Attributes:
        min: Smallest accepted length.
        max: Largest accepted length.
    """

    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> LengthRange:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min length {self.min} is greater than max length {self.max}")
        return self


# An exact length or an inclusive range
Length = Annotated[int, Field(ge=0)] | LengthRange


class StringOptions(JasonBaseModel):
    """Options for the ``string`` validator.

    Attributes:
        length: Exact length, or a ``LengthRange``.
        starts_with: Required prefix.
        ends_with: Required suffix.
        custom_validator: Called as ``custom_validator(value, diagnostics)``
            once every built-in rule passed. Its return value is returned
            from ``validate`` as-is.
    """

    length: Length | None = None
    starts_with: str | None = Field(default=None, alias="startsWith")
    ends_with: str | None = Field(default=None, alias="endsWith")
    custom_validator: Callable[..., Any] | None = Field(default=None, alias="customValidator")


class NumberOptions(JasonBaseModel):
    """Options for the ``number`` validator.

    Attributes:
        min: Inclusive lower bound.
        max: Inclusive upper bound.
        custom_validator: Same contract as ``StringOptions.custom_validator``.
    """

    min: int | float | None = None
    max: int | float | None = None
    custom_validator: Callable[..., Any] | None = Field(default=None, alias="customValidator")

    @model_validator(mode="after")
    def check_bounds(self) -> NumberOptions:
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min {self.min} is greater than max {self.max}")
        return self


class ArrayOptions(JasonBaseModel):
    """Options for the ``array`` validator.

    Attributes:
        length: Exact number of items, or a ``LengthRange``.
    """

    length: Length | None = None


def _by_field_name(model: type[JasonBaseModel], values: dict[str, Any]) -> dict[str, Any]:
    """Rename aliased keys (``startsWith``) to their field names (``starts_with``)."""
    names = {info.alias: name for name, info in model.model_fields.items() if info.alias}
    return {names.get(key, key): value for key, value in values.items()}


def build_options(model: type[JasonBaseModel], options: Any, overrides: dict[str, Any]) -> Any:
    """Build an options model from a model instance, a mapping and/or keyword overrides.

    Args:
        model: The options model class to build
        options: ``None``, an instance of ``model``, or a mapping of option values
        overrides: Keyword options; these win over ``options``

    Returns:
        A frozen instance of ``model``

    Raises:
        TypeError: If ``options`` is of an unsupported type
        pydantic.ValidationError: If an option value is invalid
    """
    if options is None:
        values: dict[str, Any] = {}
    elif isinstance(options, model):
        if not overrides:
            return options
        values = options.model_dump(exclude_unset=True)
    elif isinstance(options, dict):
        values = _by_field_name(model, options)
    else:
        raise TypeError(
            f"Expected {model.__name__}, a dict or None for options, got {type(options).__name__}"
        )

    values.update(_by_field_name(model, overrides))
    return model.model_validate(values)
