"""
Schema validation for the 1Shot SDK.

:func:`validate` is the single entry point used by every resource method,
both for caller-supplied parameters and for gateway responses. It converts
pydantic failures into the SDK's own :class:`ValidationError` hierarchy so
that callers never need to import pydantic to handle them.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Literal, Mapping, Type, TypeVar

import pydantic

from .models.errors import (
    FieldError,
    RequestValidationError,
    ResponseValidationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=pydantic.BaseModel)

Source = Literal["request", "response"]


def _format_path(loc: Iterable[Any]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path


def field_errors(exc: pydantic.ValidationError) -> List[FieldError]:
    """Flatten a pydantic error into (path, message) entries.

    Paths use the wire (camelCase) names, e.g. ``accountBalanceDetails.type``
    or ``response[0].id``.
    """
    return [
        FieldError(path=_format_path(err["loc"]), message=err["msg"])
        for err in exc.errors(include_url=False)
    ]


def wire_keys(schema: Type[pydantic.BaseModel], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Rename attribute-name keys to their wire aliases, preserving order.

    Keys that are already aliases, or unknown to the schema, pass through.
    """
    aliases = {
        name: field.alias or name for name, field in schema.model_fields.items()
    }
    return {aliases.get(key, key): value for key, value in data.items()}


def validate(schema: Type[M], candidate: Any, *, source: Source = "request") -> M:
    """Validate ``candidate`` against ``schema``.

    Args:
        schema: The model class describing the expected shape
        candidate: A mapping (or an existing model instance) to check
        source: ``"request"`` for caller input, ``"response"`` for data
            received from the gateway

    Returns:
        The validated model instance

    Raises:
        RequestValidationError: ``source`` is ``"request"`` and validation failed
        ResponseValidationError: ``source`` is ``"response"`` and validation failed
    """
    if isinstance(candidate, Mapping):
        candidate = wire_keys(schema, candidate)
    try:
        return schema.model_validate(candidate)
    except pydantic.ValidationError as exc:
        errors = field_errors(exc)
        error_cls: Type[ValidationError] = (
            ResponseValidationError if source == "response" else RequestValidationError
        )
        logger.debug(
            "%s validation failed for %s: %s",
            source,
            schema.__name__,
            "; ".join(str(e) for e in errors),
        )
        if source == "response":
            message = f"Unexpected {schema.__name__} response from gateway"
        else:
            message = f"Invalid {schema.__name__}"
        raise error_cls(message, errors) from exc
