# therapist/models/__init__.py
from .therapist_profile import TherapistProfile
from .au_therapist_profile import AUTherapistProfile

__all__ = [
    "TherapistProfile",
    "AUTherapistProfile",
]
