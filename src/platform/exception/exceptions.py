class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """Malformed or missing input, rejected before any state is touched"""


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatConflictError(ConflictError):
    """Requested seats overlap an existing reservation; retry with other seats"""

    def __init__(self, message: str = 'One or more seats are already reserved') -> None:
        super().__init__(message)


class PastShowtimeError(ConflictError):
    def __init__(
        self, message: str = 'Cannot cancel a reservation for a past showtime'
    ) -> None:
        super().__init__(message)


class StorageFailureError(CustomBaseError):
    """Transaction or connectivity failure; the whole operation is safe to retry"""

    def __init__(self, message: str = 'Storage failure, please retry') -> None:
        super().__init__(message, 500)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = 'Invalid or expired token') -> None:
        super().__init__(message)
