from django.shortcuts import render
from django.urls import reverse

from heroes.admin.viewsets import get_registered_viewsets
from heroes.users.permissions import AVAILABLE_PERMISSIONS


def home(request):
    """
    The dashboard landing page, listing the sections the user may manage.
    """
    viewsets_by_permission = {
        viewset.permission: viewset for viewset in get_registered_viewsets()
    }

    sections = []
    for key, label, description in AVAILABLE_PERMISSIONS:
        if not request.user.has_permission(key):
            continue
        if key == "site_settings":
            url = reverse("heroesadmin_site_settings")
        elif key in viewsets_by_permission:
            url = viewsets_by_permission[key].menu_url
        else:
            continue
        sections.append(
            {"key": key, "label": label, "description": description, "url": url}
        )

    return render(request, "heroesadmin/home.html", {"sections": sections})
