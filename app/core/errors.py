class CatalogError(Exception):
    """Base for failures surfaced to the caller as a rejected call."""

    code = "catalog_error"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Unauthenticated(CatalogError):
    code = "unauthenticated"
    status_code = 401


class InvalidToken(CatalogError):
    code = "invalid_token"
    status_code = 401


class Unauthorized(CatalogError):
    code = "unauthorized"
    status_code = 403


class InvalidCode(CatalogError):
    code = "invalid_code"
    status_code = 400


class NotFound(CatalogError):
    code = "not_found"
    status_code = 404


class DuplicateName(CatalogError):
    code = "duplicate_name"
    status_code = 409


class TagInUse(CatalogError):
    code = "tag_in_use"
    status_code = 409


class ValidationFailed(CatalogError):
    code = "validation_failed"
    status_code = 422
