# yt_export/exceptions.py

from enum import Enum


class ErrorKind(Enum):
    """The closed set of failure categories, each mapped to a process exit code."""

    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    HTTP_STATUS = "http-status"
    API_PAYLOAD = "api-payload"
    FILESYSTEM = "filesystem"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    ErrorKind.CONFIGURATION: 2,
    ErrorKind.TRANSPORT: 3,
    ErrorKind.HTTP_STATUS: 4,
    ErrorKind.API_PAYLOAD: 5,
    ErrorKind.FILESYSTEM: 6,
}


class YtExportError(Exception):
    """
    Base exception for all errors raised by yt_export.

    Extra keyword arguments (e.g. `channel_id`, `page`) are kept on the
    instance so callers can report where the failure happened.
    """

    kind: ErrorKind

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context
        for key, value in context.items():
            setattr(self, key, value)

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code


class ConfigurationError(YtExportError):
    """Raised when required settings (such as the API key) are missing."""

    kind = ErrorKind.CONFIGURATION


class TransportError(YtExportError):
    """Raised when a search request fails before any response is received."""

    kind = ErrorKind.TRANSPORT


class HttpStatusError(YtExportError):
    """Raised when the search endpoint answers with a non-2xx status."""

    kind = ErrorKind.HTTP_STATUS

    def __init__(self, message: str, status_code: int, body: str = "", **context):
        super().__init__(message, **context)
        self.status_code = status_code
        self.body = body


class ApiResponseError(YtExportError):
    """Raised when a 2xx response carries an `error` object in its JSON body."""

    kind = ErrorKind.API_PAYLOAD

    def __init__(self, message: str, payload=None, **context):
        super().__init__(message, **context)
        self.payload = payload


class MalformedResponseError(ApiResponseError):
    """Raised when a response body is not a JSON object."""


class ExportError(YtExportError):
    """Raised when the CSV file cannot be written."""

    kind = ErrorKind.FILESYSTEM

    def __init__(self, message: str, path=None, **context):
        super().__init__(message, **context)
        self.path = path
