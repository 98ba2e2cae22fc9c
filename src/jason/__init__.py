"""jason - composable data validation with path-annotated diagnostics.

Build a schema from small validators, validate any parsed value against it,
and get back every violation in one pass, each labelled with where in the
value it happened.

## Key Components

### Primitives
- `string`: strings with prefix/suffix/length rules and a custom hook
- `number`: real numbers with inclusive bounds and a custom hook
- `boolean`: exactly `True` or `False`
- `matches`: any value accepted by a predicate

### Combinators
- `object`: mappings, one validator per declared field
- `array`: sequences, one validator for every item plus length rules
- `optional`: `None` or the wrapped validator
- `labelled`: prefixes every error path with a label

### Diagnostics
- `ValidatorDiagnostics`: collected errors and the current scope path
- `ValidationFailed`: raised by `try_throw_errors()` when errors exist

## Quick Example

```python
import jason

user = jason.labelled(
    "User",
    jason.object({
        "id": jason.string(starts_with="user-"),
        "username": jason.string(length={"min": 4, "max": 16}),
        "age": jason.number(min=0),
        "friends": jason.optional(jason.array(jason.string())),
    }),
)

diagnostics = user.validate({"id": "user", "username": "asd", "age": -3})
diagnostics.errors
# ["'User.id': 'user' did not start with 'user-'",
#  "'User.username': 'asd' had a length less than the minimum length of '4'",
#  "'User.age': '-3' is not greater than or equal to '0'"]

diagnostics.try_throw_errors()  # logs the errors above, then raises ValidationFailed
```
"""

from .combinators import (
    ArrayValidator,
    LabelledValidator,
    ObjectValidator,
    OptionalValidator,
    array,
    labelled,
    object,
    optional,
)
from .core import Validator
from .diagnostics import ValidatorDiagnostics, render_path
from .errors import JasonError, ValidationFailed
from .models import ArrayOptions, LengthRange, NumberOptions, StringOptions
from .primitives import (
    BooleanValidator,
    MatchesValidator,
    NumberValidator,
    StringValidator,
    boolean,
    matches,
    number,
    string,
)
from .version import PACKAGE_VERSION as __version__

__all__ = [
    # Contract
    "Validator",
    # Primitives
    "string",
    "number",
    "boolean",
    "matches",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "MatchesValidator",
    # Combinators
    "optional",
    "object",
    "array",
    "labelled",
    "OptionalValidator",
    "ObjectValidator",
    "ArrayValidator",
    "LabelledValidator",
    # Diagnostics
    "ValidatorDiagnostics",
    "render_path",
    # Errors
    "JasonError",
    "ValidationFailed",
    # Options
    "LengthRange",
    "StringOptions",
    "NumberOptions",
    "ArrayOptions",
    "__version__",
]
