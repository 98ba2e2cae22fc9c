"""Load JSON/YAML documents into value trees and validate them.

jason itself works on already parsed values. These helpers cover the common
case of a host receiving a document as text or as a file.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .core import Validator
from .diagnostics import ValidatorDiagnostics

logger = logging.getLogger(__name__)


def load_value(content: str, format: str = "json") -> Any:
    """Parse document text into a value tree.

    Args:
        content: Document content as string
        format: Format of the content ('json' or 'yaml')

    Returns:
        The parsed value (dicts, lists and scalars)

    Raises:
        ValueError: If format is not supported or parsing fails
    """
    if format == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse JSON: {e}") from e
    elif format == "yaml":
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML: {e}") from e
    else:
        raise ValueError(f"Unsupported format: {format}. Use 'json' or 'yaml'")


def load_value_from_file(path: str | Path) -> Any:
    """Load a value tree from a JSON or YAML file.

    Args:
        path: Path to the document

    Returns:
        The parsed value

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported or parsing fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    if path.suffix.lower() in [".yaml", ".yml"]:
        format = "yaml"
    elif path.suffix.lower() == ".json":
        format = "json"
    else:
        raise ValueError(f"Unsupported file extension: {path.suffix}. Use .json, .yaml, or .yml")

    logger.debug(f"Loading {format} document from {path}")
    content = path.read_text(encoding="utf-8")
    return load_value(content, format=format)


def validate_document(
    validator: Validator[Any],
    content: str,
    format: str = "json",
    diagnostics: ValidatorDiagnostics | None = None,
) -> ValidatorDiagnostics:
    """Parse ``content`` and validate the result.

    Example:
        >>> from jason import labelled, number, object, string
        >>> schema = labelled("User", object({"name": string(), "age": number(min=0)}))
        >>> validate_document(schema, '{ "name": "awesomeguy23", "age": 23 }').is_ok
        True
    """
    return validator.validate(load_value(content, format=format), diagnostics)


def validate_file(
    validator: Validator[Any],
    path: str | Path,
    diagnostics: ValidatorDiagnostics | None = None,
) -> ValidatorDiagnostics:
    """Load the document at ``path`` and validate it."""
    return validator.validate(load_value_from_file(path), diagnostics)
