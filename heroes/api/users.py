from heroes.users.models import AdminUser

from .serializers import AdminUserSerializer
from .utils import BadRequestError, ConflictError
from .views import BaseAdminAPIViewSet


class UsersAPIViewSet(BaseAdminAPIViewSet):
    model = AdminUser
    permission = "user_management"
    serializer_class = AdminUserSerializer
    default_ordering = ["-created_at", "-id"]

    def check_email_available(self, email, instance=None):
        users = AdminUser.objects.filter(email__iexact=email)
        if instance is not None:
            users = users.exclude(pk=instance.pk)
        if users.exists():
            raise ConflictError("A user with this email already exists")

    def create_view(self, request):
        fields = self.get_request_fields()
        email = fields.get("email")
        if not email or not fields.get("password"):
            raise BadRequestError("Email and password are required")
        self.check_email_available(email)
        return super().create_view(request)

    def update_view(self, request, pk):
        email = self.get_request_fields().get("email")
        if email:
            self.check_email_available(email, instance=self.get_object())
        return super().update_view(request, pk)

    def check_can_delete(self, instance):
        if instance.pk == self.request.user.pk:
            raise BadRequestError("You cannot delete your own account")
