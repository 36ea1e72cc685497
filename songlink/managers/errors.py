from http import HTTPStatus

__all__ = ("SongLinkError", "BadRequest", "UpstreamError")


class SongLinkError(Exception):
    """Base error carrying the HTTP status it should be answered with"""

    def __init__(self, message: str, status: int = 500):
        super().__init__(message, status)
        self.message = message
        self.status = status

    @property
    def reason(self) -> str:
        try:
            return HTTPStatus(self.status).phrase
        except ValueError:
            return "Unknown Error"


class BadRequest(SongLinkError):
    def __init__(self, message: str = "Bad Request"):
        super().__init__(message, 400)


class UpstreamError(SongLinkError):
    """The matching API answered with a non-success status"""

    def __init__(self, status: int, reason: str):
        super().__init__(reason, status)
