from django.db import models
from django.utils.translation import gettext_lazy as _

from heroes.coreutils import find_available_value, make_section_key

from .orderable import Orderable


class ActiveQuerySet(models.QuerySet):
    def active(self):
        return self.filter(active=True)


class ImpactStat(Orderable):
    ICON_CHOICES = [
        ("trending-up", _("Trending up")),
        ("users", _("Users")),
        ("heart", _("Heart")),
        ("book-open", _("Book")),
        ("home", _("Home")),
        ("star", _("Star")),
        ("target", _("Target")),
        ("award", _("Award")),
        ("map-pin", _("Map pin")),
    ]

    title = models.CharField(_("title"), max_length=255)
    value = models.CharField(_("value"), max_length=50, help_text=_("e.g. 2,500+"))
    description = models.TextField(_("description"), blank=True)
    icon = models.CharField(
        _("icon"), max_length=20, choices=ICON_CHOICES, default="users"
    )
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta(Orderable.Meta):
        verbose_name = _("impact statistic")
        verbose_name_plural = _("impact statistics")

    def __str__(self):
        return self.title


class HeroSlide(Orderable):
    title = models.CharField(_("title"), max_length=255)
    subtitle = models.TextField(_("subtitle"), blank=True)
    image_url = models.URLField(_("image"), max_length=500)
    button_text = models.CharField(_("button text"), max_length=100, blank=True)
    button_link = models.CharField(_("button link"), max_length=500, blank=True)
    button_text_2 = models.CharField(
        _("second button text"), max_length=100, blank=True
    )
    button_link_2 = models.CharField(
        _("second button link"), max_length=500, blank=True
    )
    active = models.BooleanField(_("active"), default=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = ActiveQuerySet.as_manager()

    class Meta(Orderable.Meta):
        verbose_name = _("hero slide")
        verbose_name_plural = _("hero slides")

    def __str__(self):
        return self.title


class Partner(Orderable):
    name = models.CharField(_("name"), max_length=255)
    logo_url = models.URLField(_("logo"), max_length=500)
    website_url = models.URLField(_("website"), max_length=500, blank=True)
    active = models.BooleanField(_("active"), default=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    ordering_label_field = "name"

    objects = ActiveQuerySet.as_manager()

    class Meta(Orderable.Meta):
        verbose_name = _("partner")
        verbose_name_plural = _("partners")

    def __str__(self):
        return self.name


class ImpactTimelineItem(Orderable):
    year = models.PositiveSmallIntegerField(_("year"))
    title = models.CharField(_("title"), max_length=255)
    description = models.TextField(_("description"))
    active = models.BooleanField(_("active"), default=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = ActiveQuerySet.as_manager()

    class Meta(Orderable.Meta):
        verbose_name = _("timeline item")
        verbose_name_plural = _("timeline items")

    def get_ordering_label(self):
        return "%d: %s" % (self.year, self.title)

    def __str__(self):
        return self.get_ordering_label()


class ContentSection(Orderable):
    PAGE_CHOICES = [
        ("home", _("Homepage")),
        ("about", _("About page")),
        ("programs", _("Programs page")),
        ("volunteer", _("Volunteer page")),
        ("donate", _("Donate page")),
        ("contact", _("Contact page")),
        ("global", _("Global (all pages)")),
    ]

    section_key = models.CharField(
        _("section key"),
        max_length=255,
        unique=True,
        blank=True,
        help_text=_("Generated from the page and title when left blank"),
    )
    page_key = models.CharField(
        _("page"), max_length=20, choices=PAGE_CHOICES, default="home"
    )
    title = models.CharField(_("title"), max_length=255)
    subtitle = models.TextField(_("subtitle"), blank=True)
    content = models.TextField(_("content"), blank=True)
    image_url = models.URLField(_("image"), max_length=500, blank=True)
    button_text = models.CharField(_("button text"), max_length=100, blank=True)
    button_link = models.CharField(_("button link"), max_length=500, blank=True)
    active = models.BooleanField(_("active"), default=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    # each page orders its own sections
    sort_order_scope = ("page_key",)

    objects = ActiveQuerySet.as_manager()

    class Meta(Orderable.Meta):
        verbose_name = _("content section")
        verbose_name_plural = _("content sections")

    def save(self, *args, **kwargs):
        if not self.section_key:
            self.section_key = find_available_value(
                ContentSection.objects.exclude(pk=self.pk),
                "section_key",
                make_section_key(self.title, self.page_key),
                separator="_",
            )
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title
