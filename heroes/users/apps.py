from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class HeroesUsersAppConfig(AppConfig):
    name = "heroes.users"
    label = "heroesusers"
    verbose_name = _("Heroes Foundation admin users")
    default_auto_field = "django.db.models.BigAutoField"
