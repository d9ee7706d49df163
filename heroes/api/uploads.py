from django.urls import path
from rest_framework.response import Response

from heroes.images.backends import get_image_backend
from heroes.images.exceptions import ImageUploadError
from heroes.permission_policies import AuthenticationOnlyPermissionPolicy
from heroes.users.models import AdminUser

from .utils import BadRequestError
from .views import BaseAdminAPIViewSet


class ImageUploadAPIViewSet(BaseAdminAPIViewSet):
    """
    Uploads an image to the CDN on behalf of any logged-in admin user, for
    use in whichever form they are editing.
    """

    permission_policy = AuthenticationOnlyPermissionPolicy(AdminUser)
    pagination_class = None

    def upload_view(self, request):
        file = request.FILES.get("file")
        if file is None:
            raise BadRequestError("No file provided")

        backend = get_image_backend()
        if not (backend.is_configured and backend.upload_preset):
            raise ImageUploadError("Image uploads are not configured")

        result = backend.upload(file, folder=request.data.get("folder"))
        return Response(result)

    @classmethod
    def get_urlpatterns(cls):
        return [
            path("upload/", cls.as_view({"post": "upload_view"}), name="upload"),
        ]
