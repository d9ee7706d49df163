from django import forms
from django.utils.translation import gettext_lazy as _

from heroes.exceptions import AnchorNotFoundError, InvalidPositionError
from heroes.models import KNOWN_SETTINGS, SiteSetting
from heroes.ordering import End, Position, compute_sort_key
from heroes.users.models import AdminUser
from heroes.users.permissions import get_permission_choices, normalize_permissions


class PositionField(forms.CharField):
    """
    A dropdown of the places an item can be put among its siblings. Its value
    is a :class:`~heroes.ordering.Position`.

    Any well-formed position is accepted, not just the listed ones, since the
    dashboard refreshes the options when an item is moved to another page.
    """

    widget = forms.Select

    def __init__(self, *, choices=(), **kwargs):
        super().__init__(**kwargs)
        self.choices = choices

    @property
    def choices(self):
        return self._choices

    @choices.setter
    def choices(self, value):
        self._choices = self.widget.choices = list(value)

    def to_python(self, value):
        value = super().to_python(value)
        if not value:
            return None
        try:
            return Position.parse(value)
        except InvalidPositionError:
            raise forms.ValidationError(
                _("Select a valid position."), code="invalid_position"
            )


class GalleryModelForm(forms.ModelForm):
    """
    Model form for content with a list of gallery image URLs.
    """

    def clean_gallery_images(self):
        images = self.cleaned_data.get("gallery_images") or []
        if not isinstance(images, list):
            raise forms.ValidationError(
                _("Enter a list of image URLs."), code="invalid_gallery"
            )
        return images


class OrderableModelForm(forms.ModelForm):
    """
    Model form for orderable models. Editors either pick a position relative to
    the other items, or type a sort order number directly.
    """

    MODE_POSITION = "position"
    MODE_MANUAL = "manual"

    ordering_mode = forms.ChoiceField(
        label=_("Display order"),
        choices=[
            (MODE_POSITION, _("Position relative")),
            (MODE_MANUAL, _("Manual number")),
        ],
        widget=forms.RadioSelect,
    )
    placement = PositionField(label=_("Position"), required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.siblings = self.instance.get_siblings()

        self.fields["placement"].choices = self.instance.get_position_choices()
        self.fields["sort_order"].required = False
        self.fields["sort_order"].min_value = 0

        if self.instance.pk is None:
            self.initial.setdefault("ordering_mode", self.MODE_POSITION)
            self.initial.setdefault("placement", str(End()))
        else:
            # Saving an existing item keeps its place unless asked otherwise
            self.initial.setdefault("ordering_mode", self.MODE_MANUAL)

    def get_scope(self):
        """
        Return the sibling scope the item will be saved with.
        """
        return {
            field_name: self.cleaned_data.get(
                field_name, getattr(self.instance, field_name)
            )
            for field_name in self.instance.sort_order_scope
        }

    def clean(self):
        cleaned_data = super().clean()

        if cleaned_data.get("ordering_mode") == self.MODE_POSITION:
            position = cleaned_data.get("placement")
            if position is None:
                if not self.has_error("placement"):
                    self.add_error("placement", _("Choose where to place this item."))
                return cleaned_data

            siblings = self.instance.siblings_as_tuples(
                self.instance.get_siblings(self.get_scope())
            )
            try:
                sort_order = compute_sort_key(siblings, position)
            except AnchorNotFoundError:
                self.add_error(
                    "placement",
                    _(
                        "The item you chose to position against no longer exists. "
                        "Please choose the position again."
                    ),
                )
            else:
                # The number input may be absent from the submitted data, in
                # which case the model form leaves the instance value alone
                cleaned_data["sort_order"] = self.instance.sort_order = sort_order
        elif cleaned_data.get("sort_order") is None:
            self.add_error("sort_order", _("Enter a sort order number."))

        return cleaned_data


class SiteSettingsForm(forms.Form):
    """
    All known site settings on one form, grouped by category.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        current = SiteSetting.objects.as_dict()

        for key, (category, label) in KNOWN_SETTINGS.items():
            if key.endswith("_url"):
                field = forms.URLField(label=label, required=False)
            elif key == "contact_email":
                field = forms.EmailField(label=label, required=False)
            elif key in ("contact_address", "site_description"):
                field = forms.CharField(
                    label=label, required=False, widget=forms.Textarea(attrs={"rows": 3})
                )
            else:
                field = forms.CharField(label=label, required=False)
            field.category = category
            field.initial = current.get(key, "")
            self.fields[key] = field

    def get_groups(self):
        """
        Return ``(category label, [bound fields])`` pairs in category order.
        """
        groups = []
        for category, label in SiteSetting.CATEGORY_CHOICES:
            bound_fields = [
                self[name]
                for name, field in self.fields.items()
                if field.category == category
            ]
            if bound_fields:
                groups.append((label, bound_fields))
        return groups

    def save(self):
        SiteSetting.update_many(self.cleaned_data)


class AdminUserForm(forms.ModelForm):
    password = forms.CharField(
        label=_("Password"),
        required=False,
        strip=False,
        widget=forms.PasswordInput(render_value=False),
        help_text=_("Leave blank to keep the current password"),
    )
    permissions = forms.MultipleChoiceField(
        label=_("Permissions"),
        choices=get_permission_choices,
        required=False,
        widget=forms.CheckboxSelectMultiple,
    )

    class Meta:
        model = AdminUser
        fields = ["email", "role", "permissions", "is_active"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance.pk is None:
            self.fields["password"].required = True
            self.fields["password"].help_text = ""

    def clean_email(self):
        email = self.cleaned_data["email"].lower()
        users = AdminUser.objects.filter(email__iexact=email)
        if self.instance.pk is not None:
            users = users.exclude(pk=self.instance.pk)
        if users.exists():
            raise forms.ValidationError(_("A user with this email already exists."))
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.permissions = normalize_permissions(
            user.role, self.cleaned_data.get("permissions")
        )
        if self.cleaned_data.get("password"):
            user.set_password(self.cleaned_data["password"])
        if commit:
            user.save()
        return user
