class LockboxError(Exception):
    """Base error carrying the HTTP status it is reported with."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(LockboxError):
    """Missing or malformed input."""

    status_code = 400


class ConflictError(LockboxError):
    """The resource already exists."""

    status_code = 400


class Unauthorized(LockboxError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class NotFound(LockboxError):
    """The resource does not exist or belongs to another user.

    Both cases use the same error so that callers cannot learn about the
    existence of records they do not own.
    """

    status_code = 404


class InvalidCredentials(LockboxError):
    # Same status as ValidationError so a failed login reveals nothing more.
    status_code = 400

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class InternalError(LockboxError):
    status_code = 500
