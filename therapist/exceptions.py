# therapist/exceptions.py
from django.core.exceptions import ValidationError


class InvalidStatusTransition(ValidationError):
    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Cannot move therapist from '{current}' to '{requested}'",
            code="invalid_transition",
        )


class UnknownComplianceDocument(ValidationError):
    def __init__(self, key):
        self.key = key
        super().__init__(
            f"Unknown compliance document '{key}'", code="unknown_document"
        )
