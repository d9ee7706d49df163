"""
Sort key allocation for manually ordered collections.

Every orderable item carries an integer sort key; lower keys are displayed
first. When an editor places an item at the start, at the end, or next to an
existing sibling, :func:`compute_sort_key` works out a key for it from the
keys of the other siblings, without touching any of them.

Keys between two neighbours are found by halving the gap between them, so
repeated insertions at the same point eventually run out of room. Once the gap
is 1 the allocator still returns ``anchor + 1``, which collides with the next
sibling's key; ties are then broken by id when listing. Collections can be
spread back out with the ``renumber_sort_order`` management command.
"""

import logging
from collections import namedtuple

from django.utils.translation import gettext as _

from heroes.exceptions import AnchorNotFoundError, InvalidPositionError

logger = logging.getLogger("heroes.ordering")


Sibling = namedtuple("Sibling", ["id", "sort_key", "label"], defaults=[""])


def _as_sibling(item):
    if isinstance(item, Sibling):
        return item
    return Sibling(*item)


class Position:
    """
    Where an item should be placed relative to its siblings.

    Positions are encoded as strings when they travel through forms and API
    payloads: ``start``, ``end``, ``after_<id>`` and ``before_<id>``.
    """

    anchor_id = None

    @classmethod
    def parse(cls, value):
        if isinstance(value, Position):
            return value

        if not isinstance(value, str):
            raise InvalidPositionError("Position must be a string, got %r" % (value,))

        value = value.strip()
        if value == "start":
            return Start()
        if value == "end":
            return End()

        kind, sep, anchor = value.partition("_")
        if sep and kind in ("after", "before"):
            try:
                anchor_id = int(anchor)
            except ValueError:
                pass
            else:
                return After(anchor_id) if kind == "after" else Before(anchor_id)

        raise InvalidPositionError(
            "Unrecognised position %r; expected 'start', 'end', 'after_<id>' "
            "or 'before_<id>'" % value
        )

    def resolve(self, siblings):
        raise NotImplementedError

    def get_anchor(self, siblings):
        for sibling in siblings:
            if sibling.id == self.anchor_id:
                return sibling
        raise AnchorNotFoundError(self.anchor_id)

    def __str__(self):
        if self.anchor_id is None:
            return self.kind
        return "%s_%d" % (self.kind, self.anchor_id)

    def __repr__(self):
        return "<%s %s>" % (type(self).__name__, self)

    def __eq__(self, other):
        return (
            isinstance(other, Position)
            and type(self) is type(other)
            and self.anchor_id == other.anchor_id
        )

    def __hash__(self):
        return hash((self.kind, self.anchor_id))


class Start(Position):
    kind = "start"

    def resolve(self, siblings):
        if not siblings:
            return 1
        return max(0, min(sibling.sort_key for sibling in siblings) - 1)


class End(Position):
    kind = "end"

    def resolve(self, siblings):
        if not siblings:
            return 0
        return max(sibling.sort_key for sibling in siblings) + 1


class After(Position):
    kind = "after"

    def __init__(self, anchor_id):
        self.anchor_id = anchor_id

    def resolve(self, siblings):
        anchor = self.get_anchor(siblings)
        following = [
            sibling.sort_key
            for sibling in siblings
            if sibling.sort_key > anchor.sort_key
        ]
        if not following:
            return anchor.sort_key + 1

        next_key = min(following)
        return anchor.sort_key + max(1, (next_key - anchor.sort_key) // 2)


class Before(Position):
    kind = "before"

    def __init__(self, anchor_id):
        self.anchor_id = anchor_id

    def resolve(self, siblings):
        anchor = self.get_anchor(siblings)
        preceding = [
            sibling.sort_key
            for sibling in siblings
            if sibling.sort_key < anchor.sort_key
        ]
        if not preceding:
            return max(0, anchor.sort_key - 1)

        prev_key = max(preceding)
        return prev_key + max(1, (anchor.sort_key - prev_key) // 2)


def compute_sort_key(siblings, position):
    """
    Return the sort key for an item placed at ``position`` among ``siblings``.

    ``siblings`` is a sequence of ``(id, sort_key)`` pairs (or :class:`Sibling`
    tuples) for the other items of the collection, not including the item being
    placed. ``position`` is a :class:`Position` or its string encoding.

    Raises :class:`~heroes.exceptions.AnchorNotFoundError` if the position
    refers to an id that is not among the siblings.
    """
    siblings = [_as_sibling(item) for item in siblings]
    position = Position.parse(position)
    sort_key = position.resolve(siblings)

    if any(sibling.sort_key == sort_key for sibling in siblings):
        logger.warning(
            "Sort key %d for position '%s' collides with an existing sibling; "
            "the collection may need renumbering",
            sort_key,
            position,
        )

    return sort_key


def position_choices(siblings):
    """
    Return the ``(value, label)`` options offered to an editor choosing where
    to put an item: the beginning, after each sibling, before the sibling that
    follows it, and the end.
    """
    siblings = sorted(
        (_as_sibling(item) for item in siblings), key=lambda sibling: sibling.sort_key
    )

    choices = [(str(Start()), _("Place at the beginning"))]
    for index, sibling in enumerate(siblings):
        choices.append(
            (str(After(sibling.id)), _('After "%(label)s"') % {"label": sibling.label})
        )
        if index < len(siblings) - 1:
            following = siblings[index + 1]
            choices.append(
                (
                    str(Before(following.id)),
                    _('Before "%(label)s"') % {"label": following.label},
                )
            )
    choices.append((str(End()), _("Place at the end")))
    return choices
