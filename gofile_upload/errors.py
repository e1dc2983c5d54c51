#!/usr/bin/env python3
"""
Exception types raised by the GoFile uploader.

Every error is terminal for an invocation; the CLI reports the message and
exits non-zero.
"""

from typing import Optional

DEFAULT_SNIPPET_LENGTH = 500


class GoFileUploadError(Exception):
    """Base class for all uploader errors."""


class InvalidArgument(GoFileUploadError):
    """Bad or missing command line input."""


class FileAccessError(GoFileUploadError):
    """The source file is missing or unreadable."""


class FileReadError(FileAccessError):
    """The source file could not be opened when building or sending the request."""


class NetworkError(GoFileUploadError):
    """No connection could be established, even after retrying."""


class ResponseError(GoFileUploadError):
    """
    An error raised while interpreting a received response.

    Keeps the raw body around so it can be shown for diagnosis.
    """

    def __init__(
        self,
        message: str,
        body: str = "",
        snippet_length: int = DEFAULT_SNIPPET_LENGTH,
    ):
        super().__init__(message)
        self.message = message
        self.body = body
        self.snippet_length = snippet_length

    @property
    def snippet(self) -> str:
        """The body truncated to ``snippet_length`` characters."""
        if len(self.body) <= self.snippet_length:
            return self.body
        return self.body[: self.snippet_length] + "..."


class HttpError(ResponseError):
    """The server answered with a status other than 200."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        snippet_length: int = DEFAULT_SNIPPET_LENGTH,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"Server returned HTTP {status_code}", body, snippet_length
        )
        self.status_code = status_code


class MalformedResponseError(ResponseError):
    """The body is not a JSON object."""


class ApiError(ResponseError):
    """The body is well-formed JSON but reports a failed upload."""
