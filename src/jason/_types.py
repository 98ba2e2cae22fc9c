"""Type definitions for jason.

This module re-exports the option models and defines the aliases used in
public signatures.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

from .models import ArrayOptions, Length, LengthRange, NumberOptions, StringOptions

if TYPE_CHECKING:
    from .diagnostics import ValidatorDiagnostics

# One path segment: a field name or label, or an array index
Scope: TypeAlias = str | int

# Hook run after the built-in rules of ``string``/``number`` pass
CustomValidator: TypeAlias = Callable[[Any, "ValidatorDiagnostics"], "ValidatorDiagnostics"]

# Predicate used by ``matches``
Predicate: TypeAlias = Callable[[Any], bool]

__all__ = [
    "ArrayOptions",
    "CustomValidator",
    "Length",
    "LengthRange",
    "NumberOptions",
    "Predicate",
    "Scope",
    "StringOptions",
]
