from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from pydantic import ValidationError

from vultus.mills import AvatarUriBuilder
from vultus.pacts import AvatarOptions


def get_avatar_options(**overrides: object) -> AvatarOptions:
    """Build avatar options from the ``LIBRAVATAR`` Django setting.

    Keyword overrides win over the setting, e.g. a per-template size. They are
    validated on their own, so a bad override never blames the setting.

    Raises:
        ImproperlyConfigured: If the setting has unknown keys or bad values.
        ValidationError: If an override has an unknown key or a bad value.
    """
    configured = getattr(settings, "LIBRAVATAR", None) or {}
    try:
        options = AvatarOptions.model_validate(configured)
    except ValidationError as exception:
        msg = f"Invalid LIBRAVATAR setting: {exception}"
        raise ImproperlyConfigured(msg) from exception

    if not overrides:
        return options
    validated = AvatarOptions.model_validate(overrides)
    return options.model_copy(update=validated.model_dump(include=set(overrides)))


def get_avatar_uri_builder(**overrides: object) -> AvatarUriBuilder:
    return AvatarUriBuilder(get_avatar_options(**overrides))
