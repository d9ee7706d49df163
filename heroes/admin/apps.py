from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class HeroesAdminAppConfig(AppConfig):
    name = "heroes.admin"
    label = "heroesadmin"
    verbose_name = _("Heroes Foundation dashboard")
