from django.urls import include, path


class HeroesAPIRouter:
    """
    Mounts a set of API viewsets, each under ``<name>/`` with ``<name>`` as
    its URL namespace. Viewsets supply their routes via ``get_urlpatterns()``.
    """

    def __init__(self, url_namespace):
        self.url_namespace = url_namespace
        self._endpoints = {}

    def register_endpoint(self, name, class_):
        self._endpoints[name] = class_

    def get_urlpatterns(self):
        return [
            path("%s/" % name, include((class_.get_urlpatterns(), name)))
            for name, class_ in self._endpoints.items()
        ]

    @property
    def urls(self):
        """
        ``(patterns, app_name, namespace)``, ready to pass to ``path()``::

            path("api/admin/", admin_api.urls),
        """
        return self.get_urlpatterns(), self.url_namespace, self.url_namespace
