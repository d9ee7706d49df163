from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from heroes.coreutils import ascii_slugify, find_available_value


class PublishedQuerySet(models.QuerySet):
    def published(self):
        return self.filter(published=True)


class SeoFields(models.Model):
    meta_title = models.CharField(_("meta title"), max_length=255, blank=True)
    meta_description = models.TextField(_("meta description"), blank=True)
    meta_keywords = models.CharField(_("meta keywords"), max_length=255, blank=True)
    og_image = models.URLField(_("social sharing image"), max_length=500, blank=True)

    class Meta:
        abstract = True

    def get_meta_title(self):
        return self.meta_title or self.title


class SluggedContent(SeoFields):
    """
    Common fields for content that is published at its own URL.
    """

    title = models.CharField(_("title"), max_length=255)
    slug = models.SlugField(
        _("slug"),
        max_length=255,
        unique=True,
        blank=True,
        help_text=_("Generated from the title when left blank"),
    )
    content = models.TextField(_("content"), blank=True)
    published = models.BooleanField(_("published"), default=False)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = PublishedQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = find_available_value(
                type(self)._default_manager.exclude(pk=self.pk),
                "slug",
                ascii_slugify(self.title) or self._meta.model_name,
            )
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title


class Program(SluggedContent):
    CATEGORY_CHOICES = [
        ("education", _("Education")),
        ("health", _("Health")),
        ("empowerment", _("Empowerment")),
        ("community", _("Community")),
    ]

    description = models.TextField(_("description"), blank=True)
    featured_image = models.URLField(_("featured image"), max_length=500, blank=True)
    gallery_images = models.JSONField(_("gallery images"), default=list, blank=True)
    category = models.CharField(
        _("category"), max_length=20, choices=CATEGORY_CHOICES, default="education"
    )

    class Meta(SluggedContent.Meta):
        verbose_name = _("program")
        verbose_name_plural = _("programs")

    def get_absolute_url(self):
        return reverse("heroessite:program_detail", args=[self.slug])


class Author(models.Model):
    name = models.CharField(_("name"), max_length=255)
    email = models.EmailField(_("email"), blank=True)
    bio = models.TextField(_("bio"), blank=True)
    image = models.URLField(_("image"), max_length=500, blank=True)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name = _("author")
        verbose_name_plural = _("authors")

    def __str__(self):
        return self.name


class BlogPost(SluggedContent):
    excerpt = models.TextField(_("excerpt"), blank=True)
    featured_image = models.URLField(_("featured image"), max_length=500, blank=True)
    gallery_images = models.JSONField(_("gallery images"), default=list, blank=True)
    author = models.ForeignKey(
        Author,
        verbose_name=_("author"),
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="posts",
    )

    class Meta(SluggedContent.Meta):
        verbose_name = _("blog post")
        verbose_name_plural = _("blog posts")

    def get_absolute_url(self):
        return reverse("heroessite:blog_detail", args=[self.slug])


class Page(SluggedContent):
    """
    Editable copy for the static pages (about, donate, volunteer, ...), looked
    up by slug from the page views.
    """

    published = models.BooleanField(_("published"), default=True)

    class Meta(SluggedContent.Meta):
        verbose_name = _("page")
        verbose_name_plural = _("pages")


class Testimonial(models.Model):
    name = models.CharField(_("name"), max_length=255)
    content = models.TextField(_("content"))
    image = models.URLField(_("image"), max_length=500, blank=True)
    location = models.CharField(_("location"), max_length=255, blank=True)
    featured = models.BooleanField(_("featured"), default=False)
    created_at = models.DateTimeField(_("created at"), auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        verbose_name = _("testimonial")
        verbose_name_plural = _("testimonials")

    def __str__(self):
        return self.name
