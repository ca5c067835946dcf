# core/schemas.py
"""
Helpers for validating JSON columns against pydantic schemas.

Embedded sub-documents (availability windows, compliance documents,
notification metadata, ...) live in ``JSONField`` columns. Each one has a
pydantic model describing its shape; the helpers below run that model and
turn pydantic errors into Django ``ValidationError`` so that ``full_clean()``
reports them like any other field error.
"""
from typing import Any, List, Optional, Type

from django.core.exceptions import ValidationError
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError


class EmbeddedSchema(BaseModel):
    """Base for sub-documents stored inside a JSON column."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


def format_errors(exc: PydanticValidationError, prefix: str = "") -> List[str]:
    messages = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"])
        if prefix:
            loc = f"{prefix}.{loc}" if loc else prefix
        messages.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return messages


def validate_document(schema: Type[BaseModel], value: Any, **dump_kwargs) -> Optional[dict]:
    """Validate a single embedded document and return its JSON form."""
    if value is None:
        return None
    if isinstance(value, BaseModel):
        value = value.model_dump()
    try:
        document = schema.model_validate(value)
    except PydanticValidationError as exc:
        raise ValidationError(format_errors(exc))
    return document.model_dump(mode="json", **dump_kwargs)


def validate_documents(schema: Type[BaseModel], values: Any, **dump_kwargs) -> list:
    """Validate a list of embedded documents and return their JSON form."""
    if values is None:
        return []
    if not isinstance(values, (list, tuple)):
        raise ValidationError("Expected a list of entries")

    cleaned, messages = [], []
    for index, value in enumerate(values):
        if isinstance(value, BaseModel):
            value = value.model_dump()
        try:
            cleaned.append(
                schema.model_validate(value).model_dump(mode="json", **dump_kwargs)
            )
        except PydanticValidationError as exc:
            messages.extend(format_errors(exc, prefix=str(index)))
    if messages:
        raise ValidationError(messages)
    return cleaned
