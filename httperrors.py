"""Errors raised while building or sending a request"""


class HTTPClientError(Exception):
    """Base class for every error that aborts a request"""
    pass

class ArgumentCountError(HTTPClientError):
    """Raised when the command line does not carry exactly one URL."""
    pass

class UrlParseError(HTTPClientError):
    """Raised when a URL string cannot be parsed."""
    pass

class UnsupportedProtocolError(HTTPClientError):
    """Raised when the URL scheme is anything but plain http."""
    pass

class InvalidHeaderFormat(HTTPClientError):
    """Raised when a -H value has no colon."""
    def __init__(self, header):
        super().__init__(f"invalid header format: {header}. Expected 'Key: Value'")
        self.header = header

class ConnectionError(HTTPClientError):
    """Raised when the TCP connection cannot be opened."""
    pass

class SendError(HTTPClientError):
    """Raised when writing the request fails."""
    pass
