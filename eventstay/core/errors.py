"""
Domain error kinds raised by the service layer.

Services never set HTTP status codes themselves; each error kind carries the
status the API layer should answer with, and the exception handlers in
eventstay.api.exception_handlers do the mapping.
"""

from typing import Optional


class DomainError(Exception):
    status_code = 400
    kind = "DomainError"
    default_message = "Request could not be processed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(DomainError):
    status_code = 400
    kind = "BadRequestError"
    default_message = "Bad request"


class UnauthorizedError(DomainError):
    status_code = 401
    kind = "UnauthorizedError"
    default_message = "You must be signed in to continue"


class CannotListHotelsError(DomainError):
    status_code = 402
    kind = "CannotListHotelsError"
    default_message = "Cannot list hotels: ticket must be paid, in person and include a hotel"


class CannotBookError(DomainError):
    """
    A booking rule failed. Deliberately coarse: a missing enrollment, an unpaid
    ticket, a ticket without hotel, a full room and a missing booking to change
    all surface as this single kind.
    """

    status_code = 403
    kind = "CannotBookError"
    default_message = "Cannot book this room"


class NotFoundError(DomainError):
    status_code = 404
    kind = "NotFoundError"
    default_message = "No result for this search"


class ConflictError(DomainError):
    status_code = 409
    kind = "ConflictError"
    default_message = "Resource already exists"
