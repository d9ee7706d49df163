from django.conf import settings

from heroes.models import SiteSetting


def site_settings(request):
    return {
        "site_settings": SiteSetting.objects.as_dict(),
        "site_name": getattr(settings, "HEROES_SITE_NAME", "Heroes Foundation"),
    }
