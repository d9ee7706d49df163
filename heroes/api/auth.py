import logging

from django.contrib.auth import authenticate, login, logout
from django.urls import path
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .views import BaseAdminAPIViewSet

logger = logging.getLogger("heroes.api")


class AuthAPIViewSet(BaseAdminAPIViewSet):
    """
    Session login for the dashboard. Logging in sets Django's session cookie,
    which every other endpoint authenticates with.
    """

    permission_classes = [AllowAny]
    pagination_class = None

    def login_view(self, request):
        fields = self.get_request_fields()
        email = fields.get("email")
        password = fields.get("password")
        if not email or not password:
            return Response(
                {"message": "Email and password are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        user = authenticate(request._request, username=email, password=password)
        if user is None:
            logger.warning("Failed admin login for '%s'", email)
            return Response(
                {"message": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        login(request._request, user)
        logger.info("Admin user '%s' logged in", user.email)
        return Response({"success": True, "user": user.to_dict()})

    def logout_view(self, request):
        logout(request._request)
        return Response({"success": True})

    def me_view(self, request):
        if not request.user.is_authenticated:
            return Response(
                {"message": "Not authenticated"},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return Response({"user": request.user.to_dict()})

    @classmethod
    def get_urlpatterns(cls):
        return [
            path("login/", cls.as_view({"post": "login_view"}), name="login"),
            path("logout/", cls.as_view({"post": "logout_view"}), name="logout"),
            path("me/", cls.as_view({"get": "me_view"}), name="me"),
        ]
