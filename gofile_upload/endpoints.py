#!/usr/bin/env python3
"""
Upload endpoint selection.

GoFile exposes one upload host per geographic region plus a global host
that routes automatically.
"""

from .logging_utils import get_logger

logger = get_logger(__name__)

DEFAULT_REGION = "auto"

REGION_ENDPOINTS = {
    "auto": "https://upload.gofile.io/uploadfile",
    "eu": "https://upload-eu-par.gofile.io/uploadfile",
    "na": "https://upload-na-phx.gofile.io/uploadfile",
    "ap-sgp": "https://upload-ap-sgp.gofile.io/uploadfile",
    "ap-hkg": "https://upload-ap-hkg.gofile.io/uploadfile",
    "ap-tyo": "https://upload-ap-tyo.gofile.io/uploadfile",
    "sa": "https://upload-sa-sao.gofile.io/uploadfile",
}


def resolve(region: str) -> str:
    """
    Map a region name to its upload URL.

    Unknown regions are not an error: a warning is logged and the global
    endpoint is returned.

    Args:
        region: One of the keys of REGION_ENDPOINTS

    Returns:
        str: Absolute upload URL
    """
    endpoint = REGION_ENDPOINTS.get(region)
    if endpoint is None:
        logger.warning(f"Unknown region '{region}', using {DEFAULT_REGION}")
        return REGION_ENDPOINTS[DEFAULT_REGION]
    return endpoint
