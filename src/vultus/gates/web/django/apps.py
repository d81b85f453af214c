from django.apps import AppConfig


class WebGatesConfig(AppConfig):
    """Django app config exposing the libravatar template filters."""

    name = "vultus.gates.web.django"
    label = "vultus_web"
