class AnchorNotFoundError(LookupError):
    """
    Raised when a position such as ``after_<id>`` or ``before_<id>`` refers to
    a sibling that is not part of the sibling set the sort key is computed
    against. This usually means the caller's copy of the collection is stale;
    it should re-fetch the siblings and retry, or fall back to placing the
    item at the end.
    """

    def __init__(self, anchor_id):
        self.anchor_id = anchor_id
        super().__init__("No sibling with id %s to position against" % anchor_id)


class InvalidPositionError(ValueError):
    """
    Raised when a position string cannot be parsed. Valid values are
    ``start``, ``end``, ``after_<id>`` and ``before_<id>``.
    """

    pass
