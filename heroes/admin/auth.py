from functools import update_wrapper

from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.urls import reverse
from django.utils.translation import gettext as _


def reject_request(request):
    if request.headers.get("x-requested-with") == "XMLHttpRequest":
        raise PermissionDenied

    return redirect_to_login(
        request.get_full_path(), login_url=reverse("heroesadmin_login")
    )


def require_admin_access(view_func):
    """
    Decorator for dashboard views: anonymous visitors are sent to the login
    page, and inactive accounts are turned away.
    """

    def decorated_view(request, *args, **kwargs):
        user = request.user

        if user.is_anonymous:
            return reject_request(request)

        if user.is_active:
            return view_func(request, *args, **kwargs)

        if not request.headers.get("x-requested-with") == "XMLHttpRequest":
            messages.error(request, _("You do not have permission to access the admin"))

        return reject_request(request)

    return decorated_view


def protect_urlpatterns(urlpatterns):
    """
    Wrap every view in ``urlpatterns`` (descending into included resolvers)
    with ``require_admin_access``.
    """
    for pattern in urlpatterns:
        if hasattr(pattern, "url_patterns"):
            protect_urlpatterns(pattern.url_patterns)

        callback = getattr(pattern, "callback", None)
        if callback:
            pattern.callback = update_wrapper(require_admin_access(callback), callback)

    return urlpatterns
