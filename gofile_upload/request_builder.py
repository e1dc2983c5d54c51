#!/usr/bin/env python3
"""
Builds the multipart upload request for GoFile.io.
"""

import os
import mimetypes
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from requests_toolbelt import MultipartEncoder

from .errors import FileReadError
from .logging_utils import get_logger
from .options import UploadRequestConfig

logger = get_logger(__name__)

FILE_FIELD = "file"
FOLDER_FIELD = "folderId"


@dataclass(frozen=True)
class UploadRequest:
    """Description of one multipart POST: target, text fields, headers and the file part."""

    url: str
    file_path: str
    file_name: str
    mime_type: str = "application/octet-stream"
    fields: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def part_names(self) -> Tuple[str, ...]:
        """Names of every multipart part, text fields first and the file last."""
        return tuple(self.fields) + (FILE_FIELD,)

    @contextmanager
    def open_encoder(self) -> Iterator[Tuple[MultipartEncoder, int]]:
        """
        Open the file read-only and wrap it in a streaming multipart encoder.

        Yields the encoder and the size of the opened file. The file is closed
        when the context exits, whatever the outcome.

        Raises:
            FileReadError: If the file cannot be opened
        """
        try:
            file_obj = open(self.file_path, "rb")
        except OSError as e:
            logger.debug(f"Cannot open {self.file_path}: {e}")
            raise FileReadError(f"Can't read file: {self.file_path} ({e.strerror or e})") from e

        try:
            file_size = os.fstat(file_obj.fileno()).st_size
            encoder = MultipartEncoder(
                fields={
                    **self.fields,
                    FILE_FIELD: (self.file_name, file_obj, self.mime_type),
                }
            )
            yield encoder, file_size
        finally:
            file_obj.close()


def build_request(upload_config: UploadRequestConfig, endpoint: str) -> UploadRequest:
    """
    Assemble the upload request for a validated config.

    Args:
        upload_config: Validated options
        endpoint: Upload URL from endpoints.resolve()

    Returns:
        UploadRequest with a folderId field only when a folder is set and an
        Authorization header only when a token is set

    Raises:
        FileReadError: If the file cannot be opened for reading
    """
    file_path = upload_config.file_path
    try:
        with open(file_path, "rb"):
            pass
    except OSError as e:
        logger.debug(f"Cannot open {file_path}: {e}")
        raise FileReadError(f"Can't read file: {file_path} ({e.strerror or e})") from e

    file_name = os.path.basename(file_path)
    mime_type = mimetypes.guess_type(file_name)[0] or "application/octet-stream"
    logger.debug(f"Using MIME type {mime_type} for file {file_name}")

    fields = {}
    if upload_config.folder_id:
        fields[FOLDER_FIELD] = upload_config.folder_id

    headers = {}
    if upload_config.auth_token:
        headers["Authorization"] = f"Bearer {upload_config.auth_token}"

    return UploadRequest(
        url=endpoint,
        file_path=file_path,
        file_name=file_name,
        mime_type=mime_type,
        fields=fields,
        headers=headers,
    )
