#!/usr/bin/env python3
"""
Console output for upload results and errors.
"""

import sys
from typing import List, Optional, Tuple

from .errors import ApiError, GoFileUploadError, ResponseError
from .options import UploadRequestConfig
from .response import UploadResult
from .utils import (
    BLUE,
    GREEN,
    END,
    pad_string,
    get_visual_width,
    print_info,
    print_error,
    print_separator,
    print_success,
)

TIME_FORMAT = "%Y-%m-%d %H:%M:%S %Z"
SEPARATOR_WIDTH = 63


def _result_rows(result: UploadResult) -> List[Tuple[str, str, str]]:
    rows = []
    if result.download_page is not None:
        rows.append((GREEN, "Download Page:", result.download_page))
    if result.file_name is not None:
        rows.append((BLUE, "File Name:", result.file_name))
    if result.file_id is not None:
        rows.append((BLUE, "File ID:", result.file_id))
    if result.parent_folder is not None:
        rows.append((BLUE, "Folder ID:", result.parent_folder))
    if result.md5 is not None:
        rows.append((BLUE, "MD5 Hash:", result.md5))
    rows.append((BLUE, "Upload Time:", result.captured_at.strftime(TIME_FORMAT).strip()))
    return rows


def report_result(result: UploadResult, upload_config: Optional[UploadRequestConfig] = None) -> None:
    """
    Print the details of a completed upload.

    Fields the server did not return are left out.

    Args:
        result: Interpreted upload response
        upload_config: Options of the upload; when it had no folder, a hint
            about reusing the returned folder ID is shown
    """
    rows = _result_rows(result)
    label_width = max(get_visual_width(label) for _, label, _ in rows) + 1

    print()
    print_separator("═", SEPARATOR_WIDTH)
    print_success("Upload completed successfully!")
    print_separator("═", SEPARATOR_WIDTH)
    print()

    for color, label, value in rows:
        print(f"{color}{pad_string(label, label_width)}{END}{value}")

    if result.parent_folder and (upload_config is None or not upload_config.folder_id):
        print()
        print_info(f"Use this for future uploads: --folder {result.parent_folder}")
    print()


def report_error(error: GoFileUploadError) -> None:
    """
    Print an error summary to stderr, followed by the response body when there is one.
    """
    message = str(error)
    if isinstance(error, ApiError):
        message = f"API Error: {message}"
    print_error(message)

    if isinstance(error, ResponseError) and error.body:
        print(f"\nResponse:\n{error.snippet}", file=sys.stderr)
