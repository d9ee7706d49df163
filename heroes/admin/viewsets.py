from django.core.exceptions import ImproperlyConfigured
from django.forms.models import modelform_factory
from django.urls import path, reverse
from django.utils.functional import cached_property

from heroes.permission_policies import PermissionArrayPolicy

from .forms import OrderableModelForm
from .views import generic

_registry = []


def register_viewset(viewset):
    _registry.append(viewset)
    return viewset


def get_registered_viewsets():
    return list(_registry)


class ViewSet:
    """
    A group of dashboard views sharing one URL prefix and namespace, both
    taken from ``name``. Any class attribute may be overridden by passing it
    as a keyword argument.
    """

    name = None

    def __init__(self, name=None, **kwargs):
        if name:
            self.__dict__["name"] = name
        self.__dict__.update(kwargs)

    def get_common_view_kwargs(self, **kwargs):
        return kwargs

    def construct_view(self, view_class, **kwargs):
        """
        Call ``view_class.as_view()`` with the common view kwargs plus
        ``kwargs``, dropping any the view class has no attribute for.
        """
        initkwargs = {**self.get_common_view_kwargs(), **kwargs}
        return view_class.as_view(
            **{key: value for key, value in initkwargs.items() if hasattr(view_class, key)}
        )

    @cached_property
    def url_namespace(self):
        if not self.name:
            raise ImproperlyConfigured("ViewSet %r has no `name`" % self)
        return self.name

    @property
    def url_prefix(self):
        return self.url_namespace

    def get_urlpatterns(self):
        return []

    def get_url_name(self, view_name):
        return "%s:%s" % (self.url_namespace, view_name)

    @cached_property
    def menu_url(self):
        return reverse(self.get_url_name("index"))


class ModelViewSet(ViewSet):
    """
    A viewset to allow listing, creating, editing and deleting model instances,
    guarded by one of the admin users' permission keys.
    """

    model = None

    #: The permission key (see ``heroes.users.permissions``) that grants access
    permission = None

    index_view_class = generic.IndexView
    add_view_class = generic.CreateView
    edit_view_class = generic.EditView
    delete_view_class = generic.DeleteView

    #: The form class to use for the create and edit views; built from
    #: ``form_fields`` when not given
    form_class = None
    base_form_class = None
    form_fields = None

    list_display = ["__str__"]
    list_per_page = 20
    ordering = None
    filterset_class = None

    def __init__(self, name=None, **kwargs):
        super().__init__(name=name, **kwargs)
        if not self.model:
            raise ImproperlyConfigured(
                "ModelViewSet %r must define a `model` attribute or pass a `model` argument"
                % self
            )
        if not self.permission:
            raise ImproperlyConfigured(
                "ModelViewSet %r must define a `permission` attribute" % self
            )

        self.model_opts = self.model._meta
        self.model_name = self.model_opts.model_name

    @cached_property
    def permission_policy(self):
        return PermissionArrayPolicy(self.model, self.permission)

    @cached_property
    def name(self):
        return self.model_name

    def get_common_view_kwargs(self, **kwargs):
        return super().get_common_view_kwargs(
            **{
                "model": self.model,
                "permission_policy": self.permission_policy,
                "index_url_name": self.get_url_name("index"),
                "add_url_name": self.get_url_name("add"),
                "edit_url_name": self.get_url_name("edit"),
                "delete_url_name": self.get_url_name("delete"),
                **kwargs,
            }
        )

    def get_form_class(self):
        """
        Returns the form class to use for the create / edit forms.
        """
        if self.form_class is not None:
            return self.form_class

        if self.form_fields is None:
            raise ImproperlyConfigured(
                "ModelViewSet %r must specify 'form_class' or 'form_fields'" % self
            )

        kwargs = {}
        if self.base_form_class is not None:
            kwargs["form"] = self.base_form_class
        return modelform_factory(self.model, fields=self.form_fields, **kwargs)

    @property
    def index_view(self):
        return self.construct_view(
            self.index_view_class,
            list_display=self.list_display,
            paginate_by=self.list_per_page,
            default_ordering=self.ordering,
            filterset_class=self.filterset_class,
        )

    @property
    def add_view(self):
        return self.construct_view(self.add_view_class, form_class=self.get_form_class())

    @property
    def edit_view(self):
        return self.construct_view(
            self.edit_view_class, form_class=self.get_form_class()
        )

    @property
    def delete_view(self):
        return self.construct_view(self.delete_view_class)

    def get_urlpatterns(self):
        return [
            path("", self.index_view, name="index"),
            path("new/", self.add_view, name="add"),
            path("edit/<int:pk>/", self.edit_view, name="edit"),
            path("delete/<int:pk>/", self.delete_view, name="delete"),
        ]


class OrderableModelViewSet(ModelViewSet):
    """
    A :class:`ModelViewSet` for models extending ``heroes.models.Orderable``.
    The create and edit forms carry the position control, and each item gets a
    move view.
    """

    base_form_class = OrderableModelForm
    move_view_class = generic.MoveView
    list_display = ["__str__", "sort_order"]
    ordering = ["sort_order", "id"]

    def get_common_view_kwargs(self, **kwargs):
        return super().get_common_view_kwargs(
            move_url_name=self.get_url_name("move"), **kwargs
        )

    def get_form_class(self):
        if self.form_fields is not None and "sort_order" not in self.form_fields:
            self.form_fields = list(self.form_fields) + ["sort_order"]
        return super().get_form_class()

    @property
    def move_view(self):
        return self.construct_view(self.move_view_class)

    def get_urlpatterns(self):
        return super().get_urlpatterns() + [
            path("move/<int:pk>/", self.move_view, name="move"),
        ]
