#!/usr/bin/env python3
"""
GoFile Uploader - Command Line Interface

A tool for uploading a file to GoFile.io as a guest or with an account token.
"""

from typing import Optional, Sequence

from .gofile_client import GoFileClient
from .logging_utils import setup_logging, get_logger
from .commands import handle_upload_command
from .errors import GoFileUploadError
from .options import UploadRequestConfig, parse_arguments, validate_config
from .reporter import report_error

# Get logger for this module
logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def _initialize_application(upload_config: UploadRequestConfig) -> GoFileClient:
    """
    Initialize the application components.

    Args:
        upload_config: Parsed command line options

    Returns:
        The transport client
    """
    # Configure logging
    setup_logging(verbose=upload_config.debug)

    if upload_config.debug:
        logger.info("Debug mode ENABLED")

    return GoFileClient(debug=upload_config.debug)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse the command line, upload the file and report the result.

    Args:
        argv: Command line tokens (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    try:
        upload_config = parse_arguments(argv)
        client = _initialize_application(upload_config)
        validate_config(upload_config)
        handle_upload_command(client, upload_config)
    except GoFileUploadError as e:
        logger.debug(f"{type(e).__name__}: {e}", exc_info=True)
        report_error(e)
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.warning("Upload cancelled by user")
        return EXIT_INTERRUPTED

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
