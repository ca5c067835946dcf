# therapist/validators.py
import math

from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible

# JSONField already maps "invalid" and "invalid_choice" to its own messages,
# so list validators raise with codes outside that set.


@deconstructible
class StringListValidator:
    """A JSON list of non-empty strings."""

    message = "Expected a list of non-empty strings"
    code = "invalid_string_list"

    def __call__(self, value):
        if not isinstance(value, list):
            raise ValidationError(self.message, code=self.code)
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise ValidationError(self.message, code=self.code)

    def __eq__(self, other):
        return isinstance(other, StringListValidator)


@deconstructible
class ChoiceListValidator:
    """A JSON list whose items all belong to a fixed vocabulary."""

    def __init__(self, choices):
        self.choices = list(choices)

    def __call__(self, value):
        if not isinstance(value, list):
            raise ValidationError("Expected a list", code="not_a_list")
        invalid = [item for item in value if item not in self.choices]
        if invalid:
            raise ValidationError(
                "%(values)s is not a valid choice",
                code="invalid_choices",
                params={"values": ", ".join(str(item) for item in invalid)},
            )

    def __eq__(self, other):
        return isinstance(other, ChoiceListValidator) and self.choices == other.choices


@deconstructible
class FiniteNumberValidator:
    """Rejects NaN and infinities, which slip past min/max comparisons."""

    message = "Ensure this value is a finite number."
    code = "not_finite"

    def __call__(self, value):
        if value is not None and not math.isfinite(value):
            raise ValidationError(self.message, code=self.code)

    def __eq__(self, other):
        return isinstance(other, FiniteNumberValidator)
