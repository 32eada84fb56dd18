class ServiceError(Exception):
    """Base class for failures the API layer turns into client responses."""

    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 409


class UnauthorizedError(ServiceError):
    status_code = 401


class ValidationError(ServiceError):
    status_code = 400


class InvalidEnumError(ValidationError):
    pass
