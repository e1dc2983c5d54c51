#!/usr/bin/env python3
"""
Utility functions for the GoFile uploader.
"""

import sys
import wcwidth
from typing import Optional, Union

BLUE = "\033[94m"
GREEN = "\033[92m"
RED = "\033[91m"
END = "\033[0m"


def format_time(seconds: float) -> str:
    """
    Format seconds into a human-readable time string (HH:MM:SS).

    Args:
        seconds: Number of seconds

    Returns:
        Human-readable time string
    """
    hours, remainder = divmod(int(seconds), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    else:
        return f"{seconds}s"


def format_size(size_bytes: Union[int, float]) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable string with appropriate unit (B, KB, MB, GB)
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.2f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def format_speed(bytes_per_second: float) -> str:
    """
    Format a speed in bytes/second to a human-readable string.

    Args:
        bytes_per_second: Speed in bytes per second

    Returns:
        Human-readable string with appropriate unit (B/s, KB/s, MB/s, GB/s)
    """
    if bytes_per_second < 1024:
        return f"{bytes_per_second:.2f} B/s"
    elif bytes_per_second < 1024 * 1024:
        return f"{bytes_per_second / 1024:.2f} KB/s"
    elif bytes_per_second < 1024 * 1024 * 1024:
        return f"{bytes_per_second / (1024 * 1024):.2f} MB/s"
    else:
        return f"{bytes_per_second / (1024 * 1024 * 1024):.2f} GB/s"


def mask_token(token: Optional[str]) -> str:
    """Hide all but the last four characters of a token for log output."""
    if not token:
        return ""
    if len(token) <= 4:
        return "*" * len(token)
    return "*" * (len(token) - 4) + token[-4:]


def get_visual_width(text) -> int:
    """
    Calculate the visual width of text, considering emojis and other wide characters.

    Args:
        text: The string to calculate visual width for

    Returns:
        int: The visual width of the text
    """
    width = wcwidth.wcswidth(str(text))
    # Non-printable characters make wcswidth give up
    return width if width >= 0 else len(str(text))


def pad_string(text, width) -> str:
    """
    Left-align a string to the given visual width, taking into account wide characters like emojis.

    Args:
        text: The string to pad
        width: The desired visual width

    Returns:
        str: The padded string
    """
    text_str = str(text)
    visual_width = get_visual_width(text_str)
    return text_str + " " * max(0, width - visual_width)


def print_separator(char: str = "=", width: int = 50) -> None:
    """
    Print a separator line.

    Args:
        char: Character to use for the separator
        width: Width of the separator line
    """
    print(char * width)


def print_info(message: str) -> None:
    """Print an informational message."""
    print(f"{BLUE}ℹ{END} {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    print(f"{GREEN}✓{END} {message}")


def print_error(message: str) -> None:
    """Print an error line to stderr, prefixed so it stands out from info output."""
    print(f"{RED}ERROR:{END} {message}", file=sys.stderr)
