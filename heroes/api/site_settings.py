from django.http import Http404
from django.urls import path
from rest_framework.response import Response

from heroes.models import SiteSetting

from .filters import SiteSettingFilterSet
from .serializers import SiteSettingSerializer, SiteSettingUpdateSerializer
from .utils import BadRequestError
from .views import BaseAdminAPIViewSet


class SiteSettingsAPIViewSet(BaseAdminAPIViewSet):
    """
    Site settings are addressed by key rather than id, and are small enough
    to always be listed in full.
    """

    model = SiteSetting
    permission = "site_settings"
    serializer_class = SiteSettingSerializer
    filterset_class = SiteSettingFilterSet
    pagination_class = None
    lookup_field = "setting_key"
    default_ordering = ["category", "setting_key"]

    def listing_view(self, request):
        queryset = self.get_queryset()
        self.check_query_parameters(queryset)
        queryset = self.filter_queryset(queryset)
        serializer = self.get_serializer(queryset, many=True)
        return Response(
            {"meta": {"total_count": len(serializer.data)}, "items": serializer.data}
        )

    def bulk_update_view(self, request):
        if not isinstance(request.data, list):
            raise BadRequestError("Expected a list of settings")

        serializer = SiteSettingUpdateSerializer(data=request.data, many=True)
        serializer.is_valid(raise_exception=True)
        SiteSetting.update_many(
            {item["setting_key"]: item["setting_value"] for item in serializer.data}
        )
        return Response({"success": True, "updated": len(serializer.data)})

    def detail_view(self, request, setting_key):
        return super().detail_view(request, setting_key)

    def update_view(self, request, setting_key):
        instance = self.get_object()
        fields = self.get_request_fields()
        if "setting_value" not in fields:
            raise BadRequestError("setting_value is required")
        instance.setting_value = fields["setting_value"] or ""
        instance.save()
        return Response(self.get_serializer(instance).data)

    def get_object(self):
        try:
            return self.get_queryset().get(setting_key=self.kwargs["setting_key"])
        except SiteSetting.DoesNotExist:
            raise Http404("Setting '%s' not found" % self.kwargs["setting_key"])

    @classmethod
    def get_urlpatterns(cls):
        return [
            path(
                "",
                cls.as_view({"get": "listing_view", "post": "bulk_update_view"}),
                name="listing",
            ),
            path(
                "<str:setting_key>/",
                cls.as_view({"get": "detail_view", "put": "update_view"}),
                name="detail",
            ),
        ]
