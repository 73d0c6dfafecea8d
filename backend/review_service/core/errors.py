from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "InvalidArgument"
    NOT_FOUND = "NotFound"
    CANCELED = "Canceled"
    INTERNAL = "Internal"


class ReviewServiceError(Exception):
    """Base of the four caller-visible outcome kinds.

    ``detail`` keeps the underlying exception for diagnostics only; it is never
    rendered to callers.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, detail: BaseException | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidArgumentError(ReviewServiceError):
    kind = ErrorKind.INVALID_ARGUMENT


class NotFoundError(ReviewServiceError):
    kind = ErrorKind.NOT_FOUND


class CanceledError(ReviewServiceError):
    kind = ErrorKind.CANCELED


class InternalError(ReviewServiceError):
    kind = ErrorKind.INTERNAL
