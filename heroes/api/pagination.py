from django.conf import settings
from rest_framework.pagination import BasePagination
from rest_framework.response import Response

from .utils import BadRequestError


def get_non_negative_int(request, name, default):
    value = request.GET.get(name, default)
    try:
        value = int(value)
    except (TypeError, ValueError):
        value = -1
    if value < 0:
        raise BadRequestError("%s must be a positive integer" % name)
    return value


class HeroesPagination(BasePagination):
    """
    ``limit`` / ``offset`` pagination, wrapping the page in
    ``{"meta": {"total_count": ...}, "items": [...]}``.
    """

    def paginate_queryset(self, queryset, request, view=None):
        limit_max = getattr(settings, "HEROES_API_LIMIT_MAX", 20)

        offset = get_non_negative_int(request, "offset", 0)
        limit = get_non_negative_int(
            request, "limit", min(20, limit_max) if limit_max else 20
        )
        if limit_max and limit > limit_max:
            raise BadRequestError("limit cannot be higher than %d" % limit_max)

        self.total_count = queryset.count()
        return queryset[offset : offset + limit]

    def get_paginated_response(self, data):
        return Response({"meta": {"total_count": self.total_count}, "items": data})
