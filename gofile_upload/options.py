#!/usr/bin/env python3
"""
Command line option model.

Turns argv into a validated, immutable UploadRequestConfig that is passed
explicitly to every later stage.
"""

import os
import argparse
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import __version__
from .endpoints import DEFAULT_REGION, REGION_ENDPOINTS
from .errors import InvalidArgument, FileAccessError


@dataclass(frozen=True)
class UploadRequestConfig:
    """Resolved options for one upload."""

    file_path: str
    auth_token: Optional[str] = None
    folder_id: Optional[str] = None
    region: str = DEFAULT_REGION
    debug: bool = False

    @property
    def is_guest(self) -> bool:
        return not self.auth_token


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises InvalidArgument instead of exiting with status 2."""

    def error(self, message):
        raise InvalidArgument(f"{message}\nUse -h for help")


def _create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = _RaisingArgumentParser(
        prog="gofile-uploader",
        description="Upload a file to GoFile.io as a guest or with your account token",
        epilog="Get your API token at https://gofile.io/myProfile. "
        "Guest uploads need no token; uploading into a folder does.",
    )

    parser.add_argument("file_path", nargs="*", help="Path to the file you want to upload")
    parser.add_argument(
        "-t", "--token", help="Your GoFile.io API token (optional for guest uploads)"
    )
    parser.add_argument(
        "-f",
        "--folder",
        metavar="FOLDER_ID",
        help="Upload into an existing folder (requires --token)",
    )
    parser.add_argument(
        "-r",
        "--region",
        default=DEFAULT_REGION,
        help=f"Upload server region: {', '.join(REGION_ENDPOINTS)} (default: {DEFAULT_REGION})",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="Enable debug mode (verbose output)"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> UploadRequestConfig:
    """
    Parse command line tokens into an UploadRequestConfig.

    Only parsing happens here; call validate_config() before using the result.
    -h/--help and --version print and exit with status 0.

    Args:
        argv: Tokens to parse (default: sys.argv[1:])

    Returns:
        UploadRequestConfig built from the tokens

    Raises:
        InvalidArgument: On unknown flags, missing flag values or more than one file path
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    paths: List[str] = args.file_path
    if len(paths) > 1:
        raise InvalidArgument(
            f"Only one file can be uploaded at a time, got {len(paths)}: {' '.join(paths)}"
        )

    return UploadRequestConfig(
        file_path=paths[0] if paths else "",
        auth_token=args.token or None,
        folder_id=args.folder or None,
        region=args.region,
        debug=args.debug,
    )


def validate_config(upload_config: UploadRequestConfig) -> None:
    """
    Check that a parsed config can be uploaded.

    Args:
        upload_config: Config returned by parse_arguments()

    Raises:
        InvalidArgument: Folder without token, or no file given
        FileAccessError: File missing, not a regular file, or unreadable
    """
    if upload_config.folder_id and not upload_config.auth_token:
        raise InvalidArgument("Folder upload requires an API token (use --token)")

    file_path = upload_config.file_path
    if not file_path:
        raise InvalidArgument("No file specified!\nUse -h for help")

    if not os.path.isfile(file_path):
        raise FileAccessError(f"File not found: {file_path}")

    if not os.access(file_path, os.R_OK):
        raise FileAccessError(f"File is not readable: {file_path}")


def build_config(argv: Optional[Sequence[str]] = None) -> UploadRequestConfig:
    """Parse and validate argv in one step."""
    upload_config = parse_arguments(argv)
    validate_config(upload_config)
    return upload_config
