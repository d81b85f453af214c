import pytest
from django.conf import settings

from vultus.pacts import AvatarOptions


def pytest_configure():
    settings.configure(
        INSTALLED_APPS=["vultus.gates.web.django"],
        TEMPLATES=[{"BACKEND": "django.template.backends.django.DjangoTemplates"}],
        LIBRAVATAR={},
        USE_TZ=True,
    )


@pytest.fixture
def secure_options():
    return AvatarOptions(prefer_https=True)
