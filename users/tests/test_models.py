import pytest

from users.factories import AdminUserFactory, TherapistUserFactory, UserFactory


@pytest.mark.django_db
class TestCustomUser:
    def test_defaults_to_client(self):
        user = UserFactory()
        assert user.user_type == "client"
        assert user.is_platform_admin is False

    def test_platform_admins(self):
        assert AdminUserFactory().is_platform_admin is True
        assert UserFactory(is_superuser=True).is_platform_admin is True
        assert TherapistUserFactory().is_platform_admin is False

    def test_user_type_change_is_logged(self, caplog):
        user = UserFactory()
        user.user_type = "therapist"

        with caplog.at_level("INFO", logger="users.models"):
            user.save()

        assert "type changed from client to therapist" in caplog.text
