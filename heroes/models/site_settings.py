from django.db import models, transaction
from django.utils.translation import gettext_lazy as _

# Settings edited on the dashboard's settings form, with the group they are shown in
KNOWN_SETTINGS = {
    "contact_email": ("contact", _("Contact email")),
    "contact_phone": ("contact", _("Contact phone")),
    "contact_address": ("contact", _("Address")),
    "site_description": ("general", _("Site description")),
    "facebook_url": ("social", _("Facebook")),
    "twitter_url": ("social", _("Twitter / X")),
    "instagram_url": ("social", _("Instagram")),
    "linkedin_url": ("social", _("LinkedIn")),
    "youtube_url": ("social", _("YouTube")),
    "bank_name": ("payment", _("Bank name")),
    "account_number": ("payment", _("Account number")),
    "account_name": ("payment", _("Account name")),
    "donate_button_url": ("links", _("Donate button link")),
    "volunteer_button_url": ("links", _("Volunteer button link")),
}


class SiteSettingQuerySet(models.QuerySet):
    def as_dict(self):
        return {
            setting.setting_key: setting.setting_value or "" for setting in self
        }


class SiteSetting(models.Model):
    CATEGORY_CHOICES = [
        ("contact", _("Contact information")),
        ("social", _("Social media")),
        ("payment", _("Payment details")),
        ("links", _("Action links")),
        ("general", _("General")),
    ]

    setting_key = models.CharField(_("key"), max_length=100, unique=True)
    setting_value = models.TextField(_("value"), blank=True)
    category = models.CharField(
        _("category"), max_length=20, choices=CATEGORY_CHOICES, default="general"
    )
    description = models.CharField(_("description"), max_length=255, blank=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = SiteSettingQuerySet.as_manager()

    class Meta:
        ordering = ["category", "setting_key"]
        verbose_name = _("site setting")
        verbose_name_plural = _("site settings")

    def __str__(self):
        return self.setting_key

    @classmethod
    def update_many(cls, values):
        """
        Store a mapping of setting keys to values, creating any settings that
        do not exist yet.
        """
        with transaction.atomic():
            for key, value in values.items():
                category = KNOWN_SETTINGS.get(key, ("general", ""))[0]
                setting = cls.objects.get_or_create(
                    setting_key=key, defaults={"category": category}
                )[0]
                setting.setting_value = value or ""
                setting.save()
