#!/usr/bin/env python3
"""
GoFile.io upload transport.

Sends an UploadRequest and reports what came back, keeping the HTTP status
and the body as separate values. Only connection-level failures are retried;
any response the server actually sends is handed back for interpretation.
"""

import time
import requests
from dataclasses import dataclass
from requests_toolbelt import MultipartEncoderMonitor
from tqdm import tqdm
from typing import Optional, Union

from .config import config
from .errors import FileReadError
from .logging_utils import get_logger
from .request_builder import UploadRequest
from .utils import format_size, format_speed, format_time, mask_token

logger = get_logger(__name__)


@dataclass(frozen=True)
class TransportSuccess:
    """A response was received; it may still carry a non-2xx status."""

    status_code: int
    body: str


@dataclass(frozen=True)
class TransportFailure:
    """No response could be obtained."""

    cause: str


TransportOutcome = Union[TransportSuccess, TransportFailure]


class GoFileClient:
    """Executes GoFile.io upload requests with connect timeout and bounded retry."""

    def __init__(
        self,
        connect_timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        debug: bool = False,
        show_progress: bool = True,
    ):
        """
        Initialize the GoFile client.

        Args:
            connect_timeout: Seconds allowed to establish a connection (default from config)
            max_retries: Maximum number of connection attempts (default from config)
            retry_delay: Delay in seconds between attempts (default from config)
            debug: Log verbose transport diagnostics
            show_progress: Draw a progress bar while uploading (never in debug mode)
        """
        self.session = requests.Session()
        self.connect_timeout = (
            connect_timeout if connect_timeout is not None else config.get("connect_timeout")
        )
        self.max_retries = max(
            1, max_retries if max_retries is not None else config.get("max_retries")
        )
        self.retry_delay = retry_delay if retry_delay is not None else config.get("retry_delay")
        self.debug = debug
        self.show_progress = show_progress and not debug

    def _is_retryable_error(self, exception: Exception) -> bool:
        """
        Determine if an error is a connection-level failure worth retrying.

        Args:
            exception: The exception that occurred

        Returns:
            bool: True if the error is retryable, False otherwise
        """
        return isinstance(
            exception,
            (
                requests.exceptions.ConnectionError,
                requests.exceptions.Timeout,
                requests.exceptions.ChunkedEncodingError,
            ),
        )

    def execute(self, request: UploadRequest) -> TransportOutcome:
        """
        Send the upload request, retrying on transient connection failures.

        Args:
            request: The request to send

        Returns:
            TransportSuccess with the status code and body of the received response,
            or TransportFailure when no response could be obtained

        Raises:
            FileReadError: If the file cannot be opened or read at send time
        """
        self._log_request(request)
        last_exception = None

        for attempt in range(1, self.max_retries + 1):
            try:
                logger.debug(f"Attempt {attempt}/{self.max_retries}: POST {request.url}")
                response = self._perform_upload(request)
            except KeyboardInterrupt:
                # Don't retry on user interrupt
                raise
            except requests.exceptions.RequestException as e:
                last_exception = e

                if not self._is_retryable_error(e):
                    logger.debug(f"Upload failed (non-retryable): {e}")
                    return TransportFailure(cause=str(e))

                if attempt < self.max_retries:
                    logger.warning(
                        f"Upload attempt {attempt}/{self.max_retries} failed: {e}. "
                        f"Retrying in {self.retry_delay}s..."
                    )
                    time.sleep(self.retry_delay)
                else:
                    logger.debug(
                        f"Upload failed after {self.max_retries} attempts: {e}"
                    )
                continue

            self._log_response(response)
            return TransportSuccess(status_code=response.status_code, body=response.text)

        # All retries exhausted
        return TransportFailure(
            cause=f"no connection after {self.max_retries} attempts: {last_exception}"
        )

    def _perform_upload(self, request: UploadRequest) -> requests.Response:
        """
        Internal method to perform a single POST, with progress tracking.

        The encoder is rebuilt on every call so a retry streams the file from the start.
        """
        start_time = time.time()

        with request.open_encoder() as (encoder, file_size):
            with tqdm(
                total=file_size,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                desc=f"↑ {request.file_name}",
                bar_format="{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]{postfix}",
                disable=not self.show_progress,
            ) as pbar:
                last_bytes = [0]

                def on_progress(monitor):
                    delta = monitor.bytes_read - last_bytes[0]
                    if delta > 0:
                        # The encoder also counts multipart framing bytes
                        pbar.update(min(delta, max(0, file_size - pbar.n)))
                        last_bytes[0] = monitor.bytes_read
                        elapsed = time.time() - start_time
                        if elapsed > 0:
                            pbar.set_postfix_str(format_speed(monitor.bytes_read / elapsed))

                monitor = MultipartEncoderMonitor(encoder, on_progress)

                try:
                    response = self.session.post(
                        request.url,
                        data=monitor,
                        headers={**request.headers, "Content-Type": monitor.content_type},
                        timeout=(self.connect_timeout, None),
                    )
                except requests.exceptions.RequestException:
                    raise
                except OSError as e:
                    # RequestException is itself an OSError; only local read failures land here
                    logger.debug(f"Reading {request.file_path} failed mid-upload: {e}")
                    raise FileReadError(
                        f"Can't read file: {request.file_path} ({e.strerror or e})"
                    ) from e

                if pbar.n < file_size:
                    pbar.update(file_size - pbar.n)

        elapsed_time = time.time() - start_time
        speed = file_size / elapsed_time if elapsed_time > 0 else 0
        logger.debug(
            f"Sent {format_size(file_size)} in {format_time(elapsed_time)} "
            f"at {format_speed(speed)}"
        )
        return response

    def _log_request(self, request: UploadRequest) -> None:
        if not self.debug:
            return
        safe_headers = {
            name: (f"Bearer {mask_token(value[len('Bearer '):])}" if name == "Authorization" else value)
            for name, value in request.headers.items()
        }
        logger.debug(f"Upload URL: {request.url}")
        logger.debug(f"Form fields: {request.fields}")
        logger.debug(f"File part: {request.file_name} ({request.mime_type})")
        logger.debug(f"Request headers: {safe_headers}")
        logger.debug(
            f"Connect timeout: {self.connect_timeout}s, "
            f"attempts: {self.max_retries}, retry delay: {self.retry_delay}s"
        )

    def _log_response(self, response: requests.Response) -> None:
        if not self.debug:
            return
        logger.debug(f"HTTP Status Code: {response.status_code}")
        logger.debug(f"Response headers: {dict(response.headers)}")
        logger.debug(f"Response body: {response.text}")
