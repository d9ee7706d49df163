import logging
from collections.abc import Mapping

from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.urls import path
from django.utils.functional import cached_property
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.authentication import SessionAuthentication
from rest_framework.exceptions import APIException, NotAuthenticated, ValidationError
from rest_framework.exceptions import PermissionDenied as APIPermissionDenied
from rest_framework.permissions import BasePermission
from rest_framework.renderers import BrowsableAPIRenderer, JSONRenderer
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from heroes.exceptions import AnchorNotFoundError, InvalidPositionError
from heroes.images.exceptions import ImageUploadError
from heroes.ordering import Position, position_choices
from heroes.permission_policies import PermissionArrayPolicy

from .pagination import HeroesPagination
from .utils import BadRequestError, ConflictError

logger = logging.getLogger("heroes.api")


class PolicyPermission(BasePermission):
    """
    Grants access when the view's permission policy allows the request's user
    to perform the view's action.
    """

    def has_permission(self, request, view):
        if not request.user or not request.user.is_authenticated:
            raise NotAuthenticated()
        return view.permission_policy.user_has_permission(
            request.user, view.get_permission_action()
        )


class BaseAdminAPIViewSet(GenericViewSet):
    renderer_classes = [JSONRenderer, BrowsableAPIRenderer]
    authentication_classes = [SessionAuthentication]
    permission_classes = [PolicyPermission]

    pagination_class = HeroesPagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = None

    model = None  # Set on subclass
    permission = None  # Set on subclass; a key from AVAILABLE_PERMISSIONS
    default_ordering = None

    known_query_parameters = frozenset(
        [
            "limit",
            "offset",
            # Used by jQuery for cache-busting
            "_",
            # Required by BrowsableAPIRenderer
            "format",
        ]
    )

    @cached_property
    def permission_policy(self):
        return PermissionArrayPolicy(self.model, self.permission)

    def get_permission_action(self):
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return "view"
        elif self.request.method == "POST" and self.action == "create_view":
            return "add"
        elif self.request.method == "DELETE":
            return "delete"
        return "change"

    def get_queryset(self):
        queryset = self.model._default_manager.all()
        if self.default_ordering:
            queryset = queryset.order_by(*self.default_ordering)
        return queryset

    def check_query_parameters(self, queryset):
        """
        Ensure that only valid query parameters are included in the URL.
        """
        query_parameters = set(self.request.GET.keys())

        allowed_query_parameters = set(self.known_query_parameters)
        if self.filterset_class is not None:
            allowed_query_parameters |= set(self.filterset_class.base_filters.keys())

        unknown_parameters = query_parameters - allowed_query_parameters
        if unknown_parameters:
            raise BadRequestError(
                "query parameter is not an operation or a recognised field: %s"
                % ", ".join(sorted(unknown_parameters))
            )

    def get_request_fields(self):
        """
        Return the request body, which must be a JSON object.
        """
        if not isinstance(self.request.data, Mapping):
            raise BadRequestError("Expected a JSON object")
        return self.request.data

    def listing_view(self, request):
        queryset = self.get_queryset()
        self.check_query_parameters(queryset)
        queryset = self.filter_queryset(queryset)
        queryset = self.paginate_queryset(queryset)
        serializer = self.get_serializer(queryset, many=True)
        return self.get_paginated_response(serializer.data)

    def detail_view(self, request, pk):
        instance = self.get_object()
        serializer = self.get_serializer(instance)
        return Response(serializer.data)

    def create_view(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = serializer.save()
        logger.info(
            "%s '%s' created by %s", self.model.__name__, instance, request.user
        )
        return Response(serializer.data, status=status.HTTP_201_CREATED)

    def update_view(self, request, pk):
        instance = self.get_object()
        serializer = self.get_serializer(
            instance, data=request.data, partial=request.method == "PATCH"
        )
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def delete_view(self, request, pk):
        instance = self.get_object()
        self.check_can_delete(instance)
        instance.delete()
        logger.info(
            "%s '%s' deleted by %s", self.model.__name__, instance, request.user
        )
        return Response({"success": True})

    def check_can_delete(self, instance):
        pass

    def handle_exception(self, exc):
        if isinstance(exc, NotAuthenticated):
            data = {"message": str(exc.detail)}
            return Response(data, status=status.HTTP_401_UNAUTHORIZED)
        elif isinstance(exc, (PermissionDenied, APIPermissionDenied)):
            data = {"message": "You do not have permission to perform this action."}
            return Response(data, status=status.HTTP_403_FORBIDDEN)
        elif isinstance(exc, Http404):
            data = {"message": str(exc)}
            return Response(data, status=status.HTTP_404_NOT_FOUND)
        elif isinstance(exc, (BadRequestError, InvalidPositionError)):
            data = {"message": str(exc)}
            return Response(data, status=status.HTTP_400_BAD_REQUEST)
        elif isinstance(exc, ValidationError):
            data = {"message": "Invalid data", "errors": exc.detail}
            return Response(data, status=status.HTTP_400_BAD_REQUEST)
        elif isinstance(exc, (AnchorNotFoundError, ConflictError)):
            data = {"message": str(exc)}
            return Response(data, status=status.HTTP_409_CONFLICT)
        elif isinstance(exc, ImageUploadError):
            data = {"message": str(exc)}
            return Response(data, status=status.HTTP_502_BAD_GATEWAY)
        elif not isinstance(exc, APIException):
            logger.exception("Unhandled error in %s", type(self).__name__)
        return super().handle_exception(exc)

    @classmethod
    def get_urlpatterns(cls):
        """
        This returns a list of URL patterns for the endpoint
        """
        return [
            path(
                "",
                cls.as_view({"get": "listing_view", "post": "create_view"}),
                name="listing",
            ),
            path(
                "<int:pk>/",
                cls.as_view(
                    {
                        "get": "detail_view",
                        "put": "update_view",
                        "patch": "update_view",
                        "delete": "delete_view",
                    }
                ),
                name="detail",
            ),
        ]


class OrderableAPIViewSet(BaseAdminAPIViewSet):
    """
    API endpoint for a manually ordered model. Adds a listing of the positions
    an item can be placed at, and a view that moves an item to one of them.
    """

    default_ordering = ["sort_order", "id"]

    def get_scope_from_request(self):
        scope = {}
        for field_name in self.model.sort_order_scope:
            value = self.request.GET.get(field_name)
            if not value:
                raise BadRequestError("%s is required" % field_name)
            scope[field_name] = value
        return scope

    def positions_view(self, request):
        """
        Returns the items of one sibling collection with the position choices
        for placing an item among them. ``exclude`` leaves out the item being
        placed.
        """
        scope = self.get_scope_from_request()
        siblings = self.model.get_sibling_queryset(**scope)

        exclude = request.GET.get("exclude")
        if exclude:
            try:
                siblings = siblings.exclude(pk=int(exclude))
            except ValueError:
                raise BadRequestError("exclude must be an integer")

        tuples = self.model.siblings_as_tuples(siblings)
        choices = position_choices(tuples)

        return Response(
            {
                "items": [
                    {"id": item.id, "sort_order": item.sort_key, "label": item.label}
                    for item in tuples
                ],
                "choices": [
                    {"value": value, "label": str(label)} for value, label in choices
                ],
            }
        )

    def move_view(self, request, pk):
        instance = self.get_object()
        position = self.get_request_fields().get("placement")
        if not position:
            raise BadRequestError("placement is required")

        instance.move_to(Position.parse(position))
        logger.info(
            "%s '%s' moved to %s (sort order %d) by %s",
            self.model.__name__,
            instance,
            position,
            instance.sort_order,
            request.user,
        )
        serializer = self.get_serializer(instance)
        return Response(serializer.data)

    def get_permission_action(self):
        if self.action == "move_view":
            return "change"
        return super().get_permission_action()

    @classmethod
    def get_urlpatterns(cls):
        return super().get_urlpatterns() + [
            path(
                "positions/",
                cls.as_view({"get": "positions_view"}),
                name="positions",
            ),
            path(
                "<int:pk>/move/",
                cls.as_view({"post": "move_view"}),
                name="move",
            ),
        ]
