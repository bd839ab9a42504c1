class ConnectWiseError(Exception):
    """Base exception for ConnectWise Manage client errors"""
    def __init__(self, message, http_status=None, raw_error=None):
        self.message = message
        self.http_status = http_status
        self.raw_error = raw_error
        super().__init__(self.message)


class ConfigurationError(ConnectWiseError):
    """Required client settings are missing or invalid"""


class TransportError(ConnectWiseError):
    """The HTTP exchange itself failed (connection, timeout, TLS)"""


class HTTPStatusError(ConnectWiseError):
    """The API answered with a non-2xx status code"""


class ParseError(ConnectWiseError):
    """The response body or a response header could not be understood"""


class ApplicationError(ConnectWiseError):
    """
    A 2xx response that carries an error payload.

    ConnectWise reports some validation failures inside an otherwise
    successful response, either as an ``errors`` list or a ``message``.
    """
    def __init__(self, message, errors=None, http_status=None, raw_error=None):
        self.errors = errors or []
        super().__init__(message, http_status=http_status, raw_error=raw_error)


class NotFoundError(ConnectWiseError):
    """A looked-up item is not present in the response"""


class CustomFieldNotFoundError(NotFoundError):
    def __init__(self, caption, path=None):
        self.caption = caption
        self.path = path
        message = f"Custom field '{caption}' not found"
        if path:
            message = f"{message} on {path}"
        super().__init__(message)
