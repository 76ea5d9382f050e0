"""Shared input validators for domain operations.

Pydantic guards the shape of every model; these helpers run first on raw
caller input so that failures surface as the domain ``ValidationError``
rather than as pydantic's own exception type.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic

from jukebox_rooms.domain.shared.exceptions import ValidationError
from jukebox_rooms.domain.shared.messages import ErrorMessages

M = TypeVar("M", bound=pydantic.BaseModel)


def require_text(value: object, field_name: str, max_length: int | None = None) -> str:
    """Validate that a value is a non-blank string and return it stripped.

    Args:
        value: The raw input value.
        field_name: Name of the field for error messages.
        max_length: Optional maximum length after stripping.

    Returns:
        The stripped string.

    Raises:
        ValidationError: If the value is missing, not a string, blank or too long.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            ErrorMessages.FIELD_CANNOT_BE_EMPTY.format(field_name=field_name), field=field_name
        )
    text = value.strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(
            ErrorMessages.FIELD_TOO_LONG.format(field_name=field_name, max_length=max_length),
            field=field_name,
        )
    return text


def optional_text(value: object, field_name: str) -> str | None:
    """Normalise an optional string field: blank becomes ``None``."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(
            ErrorMessages.INVALID_FIELD.format(field_name=field_name, reason="expected a string"),
            field=field_name,
        )
    return value.strip() or None


def validate_model(model_cls: type[M], data: M | Mapping[str, Any]) -> M:
    """Validate raw data into ``model_cls``, translating pydantic failures.

    Args:
        model_cls: The pydantic model to build.
        data: An instance of the model or a mapping of its fields
            (field names or wire aliases).

    Returns:
        A validated model instance.

    Raises:
        ValidationError: With ``field`` set to the first failing location.
    """
    if isinstance(data, model_cls):
        return data
    try:
        return model_cls.model_validate(data)
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(
            ErrorMessages.INVALID_FIELD.format(field_name=field or "input", reason=first["msg"]),
            field=field,
        ) from e
