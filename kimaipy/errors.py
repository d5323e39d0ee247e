"""Exceptions raised by kimaiPy."""
from typing import Any, Optional


class KimaiError(Exception):
    """Base class for all kimaiPy errors."""


class TransportError(KimaiError):
    """The request never produced a response (DNS, connection, timeout)."""

    def __init__(self, cause: Exception):
        super().__init__(f"Request failed: {cause}")
        self.cause = cause


class ServerError(KimaiError):
    """The server answered with an error payload containing a ``message``."""

    def __init__(self, code: Any, message: str):
        if code is None:
            super().__init__(f"Server error: {message}")
        else:
            super().__init__(f"Server error {code}: {message}")
        self.code = code
        self.message = message


class ParseError(KimaiError):
    """The response body was not valid JSON."""

    def __init__(self, status_code: Optional[int], body: str):
        snippet = body[:200]
        super().__init__(f"Invalid JSON in response (HTTP {status_code}): {snippet!r}")
        self.status_code = status_code
        self.body = body


class NotFoundError(KimaiError):
    """A name could not be resolved to an id."""

    def __init__(self, endpoint: str, name: str):
        super().__init__(f"No entry named '{name}' found in {endpoint}")
        self.endpoint = endpoint
        self.name = name


class ConfigMissing(KimaiError):
    """No usable settings file was found."""


class ConfigError(KimaiError):
    """The settings file exists but cannot be parsed."""
