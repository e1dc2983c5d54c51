#!/usr/bin/env python3
"""
Interpretation of the GoFile.io upload response.

The body is parsed once; the fields shown to the user are then read from
that document. Every field is optional because the API may omit any of them.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from .config import config
from .errors import ApiError, HttpError, MalformedResponseError, NetworkError
from .gofile_client import TransportFailure, TransportOutcome
from .logging_utils import get_logger

logger = get_logger(__name__)

EXPECTED_STATUS = 200


@dataclass(frozen=True)
class UploadResult:
    """Details of a completed upload as reported by the server."""

    download_page: Optional[str] = None
    file_id: Optional[str] = None
    parent_folder: Optional[str] = None
    file_name: Optional[str] = None
    md5: Optional[str] = None
    captured_at: datetime = field(default_factory=lambda: datetime.now().astimezone())


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def interpret(outcome: TransportOutcome, snippet_length: Optional[int] = None) -> UploadResult:
    """
    Validate a transport outcome and extract the upload details.

    Args:
        outcome: Result of GoFileClient.execute()
        snippet_length: Characters of the body kept for error display (default from config)

    Returns:
        UploadResult stamped with the current local time

    Raises:
        NetworkError: The transport never got a response
        HttpError: The status code is not 200
        MalformedResponseError: The body is not a JSON object
        ApiError: The JSON status is not "ok"
    """
    if snippet_length is None:
        snippet_length = config.get("snippet_length")

    if isinstance(outcome, TransportFailure):
        raise NetworkError(f"Upload failed - check your connection: {outcome.cause}")

    body = outcome.body
    if outcome.status_code != EXPECTED_STATUS:
        logger.debug(f"Unexpected HTTP status {outcome.status_code}")
        raise HttpError(outcome.status_code, body, snippet_length)

    try:
        document = json.loads(body)
    except ValueError as e:
        logger.debug(f"Response is not JSON: {e}")
        raise MalformedResponseError(
            "Invalid JSON response from server", body, snippet_length
        ) from e

    if not isinstance(document, dict):
        raise MalformedResponseError(
            "Invalid JSON response from server: expected an object", body, snippet_length
        )

    status = document.get("status", "error")
    logger.debug(f"API Status: {status}")

    if status != "ok":
        message = document.get("error") or document.get("status") or "Unknown error"
        raise ApiError(str(message), body, snippet_length)

    data = document.get("data")
    if not isinstance(data, dict):
        data = {}

    result = UploadResult(
        download_page=_optional_str(data, "downloadPage"),
        file_id=_optional_str(data, "fileId"),
        parent_folder=_optional_str(data, "parentFolder"),
        file_name=_optional_str(data, "fileName"),
        md5=_optional_str(data, "md5"),
    )
    logger.debug(f"Extraction successful - Download: {result.download_page}")
    return result
