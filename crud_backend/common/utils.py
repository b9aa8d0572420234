"""
Utility Functions Module

Provides identifier validation, JSON conversion and query-string parsing helpers.
"""

import json
from typing import Any

from bson import ObjectId
from pydantic_core import to_jsonable_python

from crud_backend.common.errors import BadRequestError


def is_valid_object_id(value: Any) -> bool:
    """
    Check whether a value is a valid document identifier

    Accepts ObjectId instances and 24-character hex strings.

    Example:
        >>> is_valid_object_id("65f1c2a9e4b0a1b2c3d4e5f6")
        True
        >>> is_valid_object_id("42")
        False
    """
    if isinstance(value, ObjectId):
        return True
    if not isinstance(value, str) or len(value) != 24:
        return False
    return ObjectId.is_valid(value)


def to_jsonable(value: Any) -> Any:
    """
    Convert a value into JSON-safe primitives

    Pydantic models, datetimes and ObjectIds are supported; anything else
    falls back to its string representation.
    """
    return to_jsonable_python(value, fallback=str)


def stable_json(value: Any) -> str:
    """
    Serialize a value deterministically (sorted keys, compact separators)

    Used to build cache keys, so equal conditions always yield the same key.
    """
    return json.dumps(
        to_jsonable(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def parse_sort(sort: str | None) -> dict[str, int]:
    """
    Parse a sort expression such as ``"name,-price"``

    A leading ``-`` means descending order.

    Returns:
        dict[str, int]: Field name to direction (1 or -1), in order
    """
    result: dict[str, int] = {}
    if not sort:
        return result
    for part in sort.split(","):
        part = part.strip()
        if not part:
            continue
        if part.startswith("-"):
            field, direction = part[1:].strip(), -1
        else:
            field, direction = part.lstrip("+").strip(), 1
        if not field or field.startswith("$"):
            raise BadRequestError(
                message=f"Invalid sort field: {part!r}",
                code="invalid_sort",
            )
        result[field] = direction
    return result


def _reject_operators(value: Any, path: str) -> None:
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str) or key.startswith("$"):
                raise BadRequestError(
                    message=f"Operator keys are not allowed in filter: {path}{key}",
                    code="invalid_filter",
                )
            _reject_operators(item, f"{path}{key}.")
    elif isinstance(value, list):
        for item in value:
            _reject_operators(item, path)


def parse_filter(raw: str | None) -> dict[str, Any]:
    """
    Parse a client-supplied filter (JSON object of field conditions)

    Only plain field/value conditions are accepted; ``$``-prefixed keys
    anywhere in the document are rejected.

    Raises:
        BadRequestError: Not valid JSON, not an object, or contains operators
    """
    if raw is None or not raw.strip():
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BadRequestError(
            message="Filter must be a valid JSON object",
            code="invalid_filter",
        ) from e
    if not isinstance(parsed, dict):
        raise BadRequestError(
            message="Filter must be a valid JSON object",
            code="invalid_filter",
        )
    _reject_operators(parsed, "")
    return parsed
