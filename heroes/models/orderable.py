from django.conf import settings
from django.db import models, transaction

from heroes.ordering import Sibling, compute_sort_key, position_choices


class Orderable(models.Model):
    """
    Base class for models whose rows are ordered by hand in the admin.

    ``sort_order_scope`` names the fields that partition rows into separate
    sibling collections; rows are only ever ordered against other rows with the
    same values for those fields. An empty scope means the whole table is one
    collection.
    """

    sort_order = models.IntegerField(default=0, db_index=True)
    sort_order_field = "sort_order"
    sort_order_scope = ()

    #: Attribute used to describe the item when an editor picks a position
    ordering_label_field = "title"

    class Meta:
        abstract = True
        ordering = ["sort_order", "id"]

    def get_ordering_label(self):
        return str(getattr(self, self.ordering_label_field))

    def get_sort_order_scope(self):
        return {field: getattr(self, field) for field in self.sort_order_scope}

    @classmethod
    def get_sibling_queryset(cls, **scope):
        return cls._default_manager.filter(**scope).order_by(
            cls.sort_order_field, "pk"
        )

    def get_siblings(self, scope=None):
        """
        Return the other rows of this item's collection, in display order.

        ``scope`` overrides the item's own scope values, for working out where
        an item would go if it were moved to another collection.
        """
        if scope is None:
            scope = self.get_sort_order_scope()

        queryset = self.get_sibling_queryset(**scope)
        if self.pk is not None:
            queryset = queryset.exclude(pk=self.pk)
        return queryset

    @classmethod
    def siblings_as_tuples(cls, queryset):
        return [
            Sibling(item.pk, getattr(item, item.sort_order_field), item.get_ordering_label())
            for item in queryset
        ]

    def get_position_choices(self, scope=None):
        return position_choices(self.siblings_as_tuples(self.get_siblings(scope)))

    def compute_sort_order(self, position, scope=None):
        """
        Work out the sort order for this item at ``position`` among its
        siblings. Raises ``AnchorNotFoundError`` if the position refers to a
        row that is not one of them.
        """
        siblings = self.siblings_as_tuples(self.get_siblings(scope))
        return compute_sort_key(siblings, position)

    def move_to(self, position):
        """
        Place this item at ``position`` and save the new sort order. Only this
        row is written; the sort orders of its siblings are left as they are.
        """
        with transaction.atomic():
            setattr(self, self.sort_order_field, self.compute_sort_order(position))
            self.save(update_fields=[self.sort_order_field])

    @classmethod
    def renumber(cls, step=None, **scope):
        """
        Spread the sort orders of a collection back out to multiples of
        ``step``, keeping the current display order. Returns the number of rows
        whose sort order changed.
        """
        if step is None:
            step = getattr(settings, "HEROES_SORT_ORDER_STEP", 10)

        changed = 0
        with transaction.atomic():
            for index, item in enumerate(cls.get_sibling_queryset(**scope), start=1):
                new_sort_order = index * step
                if getattr(item, cls.sort_order_field) != new_sort_order:
                    setattr(item, cls.sort_order_field, new_sort_order)
                    item.save(update_fields=[cls.sort_order_field])
                    changed += 1
        return changed
