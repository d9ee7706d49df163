from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class HeroesSiteAppConfig(AppConfig):
    name = "heroes.site"
    label = "heroessite"
    verbose_name = _("Heroes Foundation public site")
