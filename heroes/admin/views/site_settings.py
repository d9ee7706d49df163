from django.contrib import messages
from django.shortcuts import redirect
from django.utils.translation import gettext as _
from django.utils.translation import gettext_lazy
from django.views.generic.edit import BaseFormView

from heroes.admin.forms import SiteSettingsForm
from heroes.models import SiteSetting
from heroes.permission_policies import PermissionArrayPolicy

from .generic import AdminTemplateMixin, PermissionCheckedMixin


class SiteSettingsView(PermissionCheckedMixin, AdminTemplateMixin, BaseFormView):
    template_name = "heroesadmin/site_settings.html"
    form_class = SiteSettingsForm
    page_title = gettext_lazy("Site settings")
    permission_policy = PermissionArrayPolicy(SiteSetting, "site_settings")
    permission_required = "change"

    def form_valid(self, form):
        form.save()
        messages.success(self.request, _("Site settings updated."))
        return redirect("heroesadmin_site_settings")

    def form_invalid(self, form):
        messages.error(
            self.request, _("The site settings could not be saved due to errors.")
        )
        return super().form_invalid(form)
