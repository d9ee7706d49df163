from django.urls import include, path

from heroes.admin import urls as heroesadmin_urls
from heroes.api.urls import admin_api
from heroes.site import urls as heroessite_urls

urlpatterns = [
    path("admin/", include(heroesadmin_urls)),
    path("api/admin/", admin_api.urls),
    path("", include(heroessite_urls)),
]

handler404 = "heroes.site.views.page_not_found"
