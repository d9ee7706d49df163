import logging

from django.contrib import messages
from django.core.exceptions import ImproperlyConfigured, PermissionDenied
from django.db import transaction
from django.http import HttpResponseRedirect
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse
from django.utils.text import capfirst
from django.utils.translation import gettext as _
from django.utils.translation import gettext_lazy
from django.views.generic import ListView, TemplateView
from django.views.generic.base import ContextMixin, TemplateResponseMixin
from django.views.generic.edit import BaseCreateView, BaseDeleteView, BaseUpdateView

from heroes.exceptions import AnchorNotFoundError, InvalidPositionError
from heroes.ordering import Position

logger = logging.getLogger("heroes.admin")


class PermissionCheckedMixin:
    """
    Refuses the request with ``PermissionDenied`` unless ``permission_policy``
    grants the user ``permission_required`` (a single action such as 'add')
    or at least one of ``any_permission_required``.
    """

    permission_policy = None
    permission_required = None
    any_permission_required = None

    def dispatch(self, request, *args, **kwargs):
        if self.permission_policy is not None and not self.has_required_permission():
            raise PermissionDenied
        return super().dispatch(request, *args, **kwargs)

    def has_required_permission(self):
        if self.permission_required is not None:
            if not self.user_has_permission(self.permission_required):
                return False
        if self.any_permission_required is not None:
            return self.user_has_any_permission(self.any_permission_required)
        return True

    def user_has_permission(self, action):
        return self.permission_policy.user_has_permission(self.request.user, action)

    def user_has_any_permission(self, actions):
        return self.permission_policy.user_has_any_permission(
            self.request.user, actions
        )


class AdminTemplateMixin(TemplateResponseMixin, ContextMixin):
    """
    Mixin for views that render a template response using the standard
    dashboard page furniture. Provides accessors for page title and subtitle.
    """

    page_title = ""
    page_subtitle = ""
    template_name = "heroesadmin/generic/base.html"

    def get_page_title(self):
        return self.page_title

    def get_page_subtitle(self):
        return self.page_subtitle

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["page_title"] = self.get_page_title()
        context["page_subtitle"] = self.get_page_subtitle()
        return context


class ModelViewMixin:
    model = None
    index_url_name = None
    add_url_name = None
    edit_url_name = None
    delete_url_name = None
    move_url_name = None

    def get_index_url(self):
        if not self.index_url_name:
            raise ImproperlyConfigured(
                "Subclasses of %s must provide an index_url_name attribute"
                % type(self).__name__
            )
        return reverse(self.index_url_name)

    def get_edit_url(self, instance):
        return reverse(self.edit_url_name, args=(instance.pk,))

    def get_delete_url(self, instance):
        return reverse(self.delete_url_name, args=(instance.pk,))

    def get_move_url(self, instance):
        if self.move_url_name:
            return reverse(self.move_url_name, args=(instance.pk,))

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["model_opts"] = self.model._meta
        context["index_url"] = self.get_index_url()
        return context


class IndexView(PermissionCheckedMixin, ModelViewMixin, AdminTemplateMixin, ListView):
    template_name = "heroesadmin/generic/index.html"
    any_permission_required = ["add", "change", "delete", "view"]
    paginate_by = 20
    default_ordering = None
    list_display = ["__str__"]
    filterset_class = None

    def get_page_title(self):
        return capfirst(self.model._meta.verbose_name_plural)

    def get_queryset(self):
        queryset = self.model._default_manager.all()
        if self.default_ordering:
            queryset = queryset.order_by(*self.default_ordering)

        self.filters = None
        if self.filterset_class is not None:
            self.filters = self.filterset_class(
                self.request.GET, queryset=queryset, request=self.request
            )
            queryset = self.filters.qs
        return queryset

    def get_rows(self, object_list):
        columns = self.get_columns()
        return [
            {
                "instance": instance,
                "values": [self.get_cell_value(instance, column) for column in columns],
                "edit_url": self.get_edit_url(instance),
                "delete_url": self.get_delete_url(instance),
                "move_url": self.get_move_url(instance),
            }
            for instance in object_list
        ]

    def get_columns(self):
        return list(self.list_display)

    def get_column_label(self, column):
        if column == "__str__":
            return capfirst(self.model._meta.verbose_name)
        try:
            return capfirst(self.model._meta.get_field(column).verbose_name)
        except LookupError:
            return capfirst(column.replace("_", " "))

    def get_cell_value(self, instance, column):
        if column == "__str__":
            return str(instance)
        display = getattr(instance, "get_%s_display" % column, None)
        if display is not None:
            return display()
        value = getattr(instance, column)
        if callable(value):
            value = value()
        return value

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["headings"] = [self.get_column_label(c) for c in self.get_columns()]
        context["rows"] = self.get_rows(context["object_list"])
        context["filters"] = self.filters
        context["add_url"] = reverse(self.add_url_name) if self.add_url_name else None
        return context


class SaveFormMixin:
    """
    Shared form handling for the create and edit views: saves inside a
    transaction, logs the change and flashes a message either way.
    """

    success_message = None
    error_message = None
    log_verb = "saved"

    def get_success_url(self):
        return self.get_index_url()

    def save_instance(self):
        """
        Save the validated form and return the instance. Override to add extra
        work around the save.
        """
        return self.form.save()

    def form_valid(self, form):
        self.form = form
        with transaction.atomic():
            self.object = self.save_instance()
        logger.info(
            "%s '%s' %s by %s",
            self.model.__name__,
            self.object,
            self.log_verb,
            self.request.user,
        )
        messages.success(
            self.request,
            capfirst(
                self.success_message
                % {"object": self.object, "model_name": self.model._meta.verbose_name}
            ),
        )
        return redirect(self.get_success_url())

    def form_invalid(self, form):
        self.form = form
        messages.error(
            self.request,
            capfirst(self.error_message % {"model_name": self.model._meta.verbose_name}),
        )
        return super().form_invalid(form)


class CreateView(
    PermissionCheckedMixin,
    ModelViewMixin,
    SaveFormMixin,
    AdminTemplateMixin,
    BaseCreateView,
):
    template_name = "heroesadmin/generic/create.html"
    page_title = gettext_lazy("New")
    permission_required = "add"
    success_message = gettext_lazy("%(model_name)s '%(object)s' created.")
    error_message = gettext_lazy(
        "The %(model_name)s could not be created due to errors."
    )
    log_verb = "created"

    def get_page_subtitle(self):
        return capfirst(self.model._meta.verbose_name)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["action_url"] = reverse(self.add_url_name)
        return context


class EditView(
    PermissionCheckedMixin,
    ModelViewMixin,
    SaveFormMixin,
    AdminTemplateMixin,
    BaseUpdateView,
):
    template_name = "heroesadmin/generic/edit.html"
    page_title = gettext_lazy("Editing")
    permission_required = "change"
    success_message = gettext_lazy("%(model_name)s '%(object)s' updated.")
    error_message = gettext_lazy("The %(model_name)s could not be saved due to errors.")
    log_verb = "updated"

    def get_page_subtitle(self):
        return str(self.object)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["action_url"] = self.get_edit_url(self.object)
        context["can_delete"] = self.user_has_permission("delete")
        if context["can_delete"]:
            context["delete_url"] = self.get_delete_url(self.object)
        return context


class DeleteView(PermissionCheckedMixin, ModelViewMixin, AdminTemplateMixin, BaseDeleteView):
    template_name = "heroesadmin/generic/confirm_delete.html"
    permission_required = "delete"
    page_title = gettext_lazy("Delete")
    success_message = gettext_lazy("%(model_name)s '%(object)s' deleted.")

    def setup(self, request, *args, **kwargs):
        super().setup(request, *args, **kwargs)
        self.object = self.get_object()

    def get_object(self, queryset=None):
        # If the object has already been loaded, return it to avoid another query
        if getattr(self, "object", None):
            return self.object
        return super().get_object(queryset)

    def get_page_subtitle(self):
        return str(self.object)

    def get_success_url(self):
        return self.get_index_url()

    def check_can_delete(self):
        pass

    def delete_action(self):
        with transaction.atomic():
            self.object.delete()

    def form_valid(self, form):
        self.check_can_delete()
        success_url = self.get_success_url()
        success_message = capfirst(
            self.success_message
            % {
                "model_name": capfirst(self.object._meta.verbose_name),
                "object": self.object,
            }
        )
        self.delete_action()
        logger.info(
            "%s '%s' deleted by %s", self.model.__name__, self.object, self.request.user
        )
        messages.success(self.request, success_message)
        return HttpResponseRedirect(success_url)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["action_url"] = self.get_delete_url(self.object)
        context["confirmation_message"] = _(
            "Are you sure you want to delete this %(model_name)s?"
        ) % {"model_name": self.object._meta.verbose_name}
        return context


class MoveView(PermissionCheckedMixin, ModelViewMixin, AdminTemplateMixin, TemplateView):
    """
    Moves an orderable item to a new position among its siblings. Only the
    moved item's sort order is written.
    """

    template_name = "heroesadmin/generic/move.html"
    permission_required = "change"
    page_title = gettext_lazy("Move")

    def setup(self, request, *args, **kwargs):
        super().setup(request, *args, **kwargs)
        self.object = get_object_or_404(self.model, pk=kwargs.get("pk"))

    def get_page_subtitle(self):
        return str(self.object)

    def post(self, request, *args, **kwargs):
        try:
            position = Position.parse(request.POST.get("placement", ""))
            self.object.move_to(position)
        except InvalidPositionError:
            messages.error(request, _("Select a valid position."))
            return redirect(self.get_move_url(self.object))
        except AnchorNotFoundError:
            messages.error(
                request,
                _(
                    "The item you chose to position against no longer exists. "
                    "Please choose the position again."
                ),
            )
            return redirect(self.get_move_url(self.object))

        logger.info(
            "%s '%s' moved to %s by %s",
            self.model.__name__,
            self.object,
            position,
            request.user,
        )
        messages.success(
            request,
            _("'%(object)s' moved.") % {"object": self.object},
        )
        return redirect(self.get_index_url())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["object"] = self.object
        context["siblings"] = self.object.get_siblings()
        context["position_choices"] = self.object.get_position_choices()
        context["action_url"] = self.get_move_url(self.object)
        return context
