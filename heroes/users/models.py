from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils.translation import gettext_lazy as _

from .permissions import ALL, normalize_permissions


class AdminUserManager(BaseUserManager):
    def _create_user(self, email, password, role, permissions, **extra_fields):
        """
        Creates and saves an admin user with the given email and password.
        """
        if not email:
            raise ValueError("An email address is required")
        email = self.normalize_email(email).lower()
        user = self.model(
            email=email,
            role=role,
            permissions=normalize_permissions(role, permissions),
            **extra_fields,
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(
        self, email=None, password=None, role="editor", permissions=None, **extra_fields
    ):
        return self._create_user(email, password, role, permissions, **extra_fields)

    def create_superuser(self, email, password, **extra_fields):
        extra_fields.pop("role", None)
        extra_fields.pop("permissions", None)
        return self._create_user(email, password, "super_admin", [ALL], **extra_fields)

    def get_by_natural_key(self, username):
        return self.get(**{"%s__iexact" % self.model.USERNAME_FIELD: username})


class AdminUser(AbstractBaseUser):
    ROLE_CHOICES = [
        ("super_admin", _("Super admin")),
        ("admin", _("Admin")),
        ("editor", _("Editor")),
    ]

    email = models.EmailField(_("email"), max_length=255, unique=True)
    role = models.CharField(
        _("role"), max_length=20, choices=ROLE_CHOICES, default="editor"
    )
    permissions = models.JSONField(_("permissions"), default=list, blank=True)
    is_active = models.BooleanField(_("active"), default=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"

    objects = AdminUserManager()

    class Meta:
        ordering = ["-created_at"]
        verbose_name = _("admin user")
        verbose_name_plural = _("admin users")

    def __str__(self):
        return self.email

    def clean(self):
        super().clean()
        self.email = self.__class__.objects.normalize_email(self.email).lower()

    @property
    def is_super_admin(self):
        return self.role == "super_admin"

    @property
    def is_staff(self):
        return self.is_active

    def has_permission(self, permission):
        """
        Return whether this user may manage the area named by ``permission``
        (one of the keys in ``heroes.users.permissions.AVAILABLE_PERMISSIONS``).
        """
        if not self.is_active:
            return False
        if self.is_super_admin or ALL in self.permissions:
            return True
        return permission in self.permissions

    def get_full_name(self):
        return self.email

    def get_short_name(self):
        return self.email.split("@")[0]

    def to_dict(self):
        return {
            "id": self.pk,
            "email": self.email,
            "role": self.role,
            "permissions": list(self.permissions),
        }
