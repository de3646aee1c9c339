"""Exceptions raised while talking to Granola."""

from __future__ import annotations


class GranolaError(Exception):
    """Base class for every failure in this package."""


class ConfigError(GranolaError):
    """The Granola credential file is missing."""


class AuthError(GranolaError):
    """The credential file exists but holds no usable access token."""


class ParseError(GranolaError):
    """A file or response body was not valid JSON."""


class TransportError(GranolaError):
    """The API answered with a non-2xx status, or could not be reached."""

    def __init__(self, status: int | None, body: str) -> None:
        self.status = status
        self.body = body
        if status is None:
            super().__init__(f"Request failed: {body}")
        else:
            super().__init__(f"API error {status}: {body}")
