from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class HeroesAppConfig(AppConfig):
    name = "heroes"
    label = "heroes"
    verbose_name = _("Heroes Foundation content")
    default_auto_field = "django.db.models.BigAutoField"
