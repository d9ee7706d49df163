class BadRequestError(Exception):
    pass


class ConflictError(Exception):
    pass