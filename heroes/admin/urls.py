from django.urls import include, path

from . import content  # noqa: F401
from .auth import protect_urlpatterns
from .views import account, home
from .views.site_settings import SiteSettingsView
from .viewsets import get_registered_viewsets

urlpatterns = [
    path("", home.home, name="heroesadmin_home"),
    path("settings/", SiteSettingsView.as_view(), name="heroesadmin_site_settings"),
    path("logout/", account.LogoutView.as_view(), name="heroesadmin_logout"),
]

for viewset in get_registered_viewsets():
    urlpatterns.append(
        path(
            "%s/" % viewset.url_prefix,
            include(
                (viewset.get_urlpatterns(), viewset.url_namespace),
                namespace=viewset.url_namespace,
            ),
        )
    )


# Require an active, logged-in admin user
urlpatterns = protect_urlpatterns(urlpatterns)


# These url patterns do not require an authenticated admin user
urlpatterns += [
    path("login/", account.LoginView.as_view(), name="heroesadmin_login"),
]
