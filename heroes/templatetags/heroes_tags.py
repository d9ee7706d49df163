from django import template
from django.template.defaultfilters import stringfilter

from heroes.images.backends import RESPONSIVE_WIDTHS, get_image_backend
from heroes.rich_text import render_markdown

register = template.Library()


@register.filter
@stringfilter
def markdown(value):
    return render_markdown(value)


@register.simple_tag
def cdn_image_url(image, width=None, height=None, **options):
    """
    Outputs an optimised delivery URL for an image stored on the CDN, e.g.:

        {% cdn_image_url program.featured_image width=800 height=600 %}

    Images hosted anywhere else are output unchanged.
    """
    if not image:
        return ""
    return get_image_backend().get_optimized_url(
        image, width=width, height=height, **options
    )


@register.simple_tag
def cdn_thumbnail_url(image, size=150):
    if not image:
        return ""
    return get_image_backend().get_thumbnail(image, size=size)


@register.simple_tag
def cdn_srcset(image, **options):
    """
    Outputs a ``srcset`` attribute value covering the standard responsive widths.
    """
    if not image:
        return ""
    backend = get_image_backend()
    if not backend.is_configured:
        return ""

    urls = backend.get_responsive_urls(image, **options)
    return ", ".join(
        "%s %dw" % (urls[name], width) for name, width in RESPONSIVE_WIDTHS.items()
    )


@register.filter
def setting(site_settings, key):
    """
    Looks up a site setting from the ``site_settings`` context variable, which
    may be missing on pages rendered without the context processor.
    """
    if not site_settings:
        return ""
    return site_settings.get(key, "")
