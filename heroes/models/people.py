from django.db import models
from django.utils.translation import gettext_lazy as _

from .homepage import ActiveQuerySet
from .orderable import Orderable


class BoardMember(Orderable):
    name = models.CharField(_("name"), max_length=255)
    position = models.CharField(_("position"), max_length=255, blank=True)
    bio = models.TextField(_("bio"), blank=True)
    image = models.URLField(_("image"), max_length=500, blank=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    ordering_label_field = "name"

    class Meta(Orderable.Meta):
        verbose_name = _("board member")
        verbose_name_plural = _("board members")

    def __str__(self):
        return self.name


class TeamMember(Orderable):
    name = models.CharField(_("name"), max_length=255)
    position = models.CharField(_("position"), max_length=255, blank=True)
    bio = models.TextField(_("bio"), blank=True)
    image_url = models.URLField(_("image"), max_length=500, blank=True)
    email = models.EmailField(_("email"), blank=True)
    linkedin_url = models.URLField(_("LinkedIn profile"), max_length=500, blank=True)
    active = models.BooleanField(_("active"), default=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    ordering_label_field = "name"

    objects = ActiveQuerySet.as_manager()

    class Meta(Orderable.Meta):
        verbose_name = _("team member")
        verbose_name_plural = _("team members")

    def __str__(self):
        return self.name
