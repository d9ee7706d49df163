from django.contrib import messages
from django.contrib.auth import views as auth_views
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.translation import gettext as _


class LoginView(auth_views.LoginView):
    template_name = "heroesadmin/login.html"

    def get_success_url(self):
        return self.get_redirect_url() or reverse("heroesadmin_home")

    def get(self, *args, **kwargs):
        # If user is already logged in, redirect them to the dashboard
        if self.request.user.is_authenticated and self.request.user.is_active:
            return redirect(self.get_success_url())

        return super().get(*args, **kwargs)


class LogoutView(auth_views.LogoutView):
    next_page = "heroesadmin_login"

    def dispatch(self, request, *args, **kwargs):
        response = super().dispatch(request, *args, **kwargs)
        if request.method == "POST":
            messages.success(request, _("You have been logged out."))
        return response
