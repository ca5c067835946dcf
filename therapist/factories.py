import factory
from decimal import Decimal

from users.factories import TherapistUserFactory
from .choices import Credentials, Specialization, TherapistStatus
from .models import AUTherapistProfile, TherapistProfile


class TherapistProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = TherapistProfile

    user = factory.SubFactory(TherapistUserFactory)
    license_number = factory.Sequence(lambda n: f"LIC-{n:05d}")
    licensed_states = ["CA"]
    specializations = [Specialization.LANGUAGE_DEVELOPMENT]
    credentials = Credentials.SLP
    spoken_languages = ["en"]
    bio = "Speech-language pathologist working with children and adults."
    experience = 5
    hourly_rate = Decimal("60.00")
    availability = [{"day": "Monday", "start_time": "09:00", "end_time": "17:00"}]


class AUTherapistProfileFactory(TherapistProfileFactory):
    class Meta:
        model = AUTherapistProfile

    licensed_states = ["NSW"]
    practice_location = {"state": "NSW", "city": "Sydney", "postcode": "2000"}
    status = TherapistStatus.PENDING

    class Params:
        active = factory.Trait(status=TherapistStatus.ACTIVE)
