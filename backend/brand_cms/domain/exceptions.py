class BrandPageError(Exception):
    """Base class for every condition raised by the brand page core."""

    status_code = 400

    @property
    def kind(self) -> str:
        return type(self).__name__


class Unauthenticated(BrandPageError):
    status_code = 401


class PermissionDenied(BrandPageError):
    status_code = 403


class PageNotFound(BrandPageError):
    status_code = 404


class PageDisabled(BrandPageError):
    status_code = 404


class SourceNotFound(BrandPageError):
    status_code = 404


class MalformedSource(BrandPageError):
    status_code = 422


class InvariantViolation(BrandPageError):
    status_code = 400


class InvalidTransition(BrandPageError):
    status_code = 409


class DuplicateBrandPage(BrandPageError):
    status_code = 409


class TransientIOFailure(BrandPageError):
    """Storage or asset backend unreachable; the operation may be retried."""

    status_code = 503
