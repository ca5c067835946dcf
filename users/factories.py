# users/factories.py
import factory
from django.contrib.auth import get_user_model

User = get_user_model()


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User
        django_get_or_create = ("username",)

    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = factory.Faker("first_name")
    password = factory.django.Password("password123")
    user_type = "client"


class TherapistUserFactory(UserFactory):
    user_type = "therapist"


class AdminUserFactory(UserFactory):
    user_type = "admin"
    is_staff = True
