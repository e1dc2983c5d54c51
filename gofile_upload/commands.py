#!/usr/bin/env python3
"""
Command Handlers Module

Runs one upload through endpoint selection, request building, transport,
response interpretation and reporting.
"""

import os
import logging

from .endpoints import resolve
from .gofile_client import GoFileClient
from .options import UploadRequestConfig
from .reporter import report_result
from .request_builder import build_request
from .response import UploadResult, interpret
from .utils import format_size, print_info

logger = logging.getLogger("gofile_uploader")


def handle_upload_command(
    client: GoFileClient, upload_config: UploadRequestConfig
) -> UploadResult:
    """
    Handle the file upload command.

    Args:
        client: GoFile transport client
        upload_config: Validated upload options

    Returns:
        The interpreted upload result

    Raises:
        GoFileUploadError: On the first failure of any stage
    """
    endpoint = resolve(upload_config.region)
    request = build_request(upload_config, endpoint)

    print_info(f"File size: {format_size(os.path.getsize(upload_config.file_path))}")
    print_info(f"Server: {endpoint}")
    print_info(f"Uploading: {request.file_name}")
    print_info("Guest upload" if upload_config.is_guest else "Authenticated upload")
    if upload_config.folder_id:
        logger.debug(f"Folder ID: {upload_config.folder_id}")

    outcome = client.execute(request)
    result = interpret(outcome)
    logger.info(f"Uploaded {request.file_name} to {result.download_page or endpoint}")

    report_result(result, upload_config)
    return result
