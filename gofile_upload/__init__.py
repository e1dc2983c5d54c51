#!/usr/bin/env python3
"""
GoFile Upload - upload a single file to GoFile.io from the command line.
"""

__version__ = "1.0.0"
