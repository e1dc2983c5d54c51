#!/usr/bin/env python3
"""
Logging utilities for the GoFile uploader.
Provides console output on stderr.
"""

import sys
import logging

def setup_logging(verbose=False):
    """
    Configure console logging.
    
    Args:
        verbose: Whether to show debug output in the console
        
    Returns:
        The configured root logger
    """
    # Root logger configuration
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    
    # Clear existing handlers to avoid duplication
    logger.handlers = []
    
    # Console handler on stderr so stdout carries only the upload report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)
    
    # urllib3 logs each connection attempt and response line at DEBUG
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)
    
    return logger

def get_logger(name):
    """
    Get a named logger.
    
    Args:
        name: The name for the logger
        
    Returns:
        A named logger
    """
    return logging.getLogger(name)
