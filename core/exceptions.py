# core/exceptions.py
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import ValidationError as DRFValidationError


def as_drf_validation_error(exc: DjangoValidationError) -> DRFValidationError:
    """Convert a model-layer ValidationError into a 400 response error."""
    if hasattr(exc, "error_dict"):
        return DRFValidationError(detail=exc.message_dict)
    return DRFValidationError(detail=exc.messages)
