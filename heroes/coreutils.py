import re

from anyascii import anyascii
from django.apps import apps
from django.utils.text import slugify


def string_to_ascii(value):
    """
    Convert a string to ascii.
    """

    return str(anyascii(value))


def ascii_slugify(value):
    """
    Slugify a title for use in URLs, transliterating non-latin characters
    rather than dropping them.
    """
    return slugify(string_to_ascii(value))


def safe_snake_case(value):
    """
    Convert a string to ascii snake case, for use as an identifier.
    """
    slug = ascii_slugify(value)
    return re.sub(r"[-_]+", "_", slug).strip("_")


def make_section_key(title, page_key):
    """
    Build the default ``section_key`` for a content section from its title and
    the page it belongs to, e.g. ``home_our_mission``.
    """
    return "%s_%s" % (page_key, safe_snake_case(title))


def find_available_value(queryset, field_name, requested, separator="-"):
    """
    Return ``requested`` if no row in ``queryset`` uses it for ``field_name``,
    otherwise the first free ``<requested><separator>2``, ``...3`` and so on.
    """
    existing = set(
        queryset.filter(**{"%s__startswith" % field_name: requested}).values_list(
            field_name, flat=True
        )
    )
    value = requested
    number = 2
    while value in existing:
        value = "%s%s%d" % (requested, separator, number)
        number += 1
    return value


def resolve_model_string(model_string, default_app="heroes"):
    """
    Turn ``"app_label.ModelName"`` (or a bare ``"ModelName"`` from
    ``default_app``) into a model class. Model classes pass straight through.

    Raises LookupError for unknown models, ValueError for anything else.
    """
    if isinstance(model_string, type) and hasattr(model_string, "_meta"):
        return model_string

    if not isinstance(model_string, str):
        raise ValueError("Can not resolve %r into a model" % (model_string,))

    app_label, _, model_name = model_string.rpartition(".")
    if "." in app_label or not model_name:
        raise ValueError(
            "Can not resolve %r into a model; use app_label.ModelName" % model_string
        )
    return apps.get_model(app_label or default_app, model_name)
