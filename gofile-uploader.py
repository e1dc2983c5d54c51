#!/usr/bin/env python3
"""
GoFile Uploader - Command Line Interface
A tool for uploading a file to GoFile.io as a guest or with an account token
"""

import sys

from gofile_upload import gofile_uploader

if __name__ == "__main__":
    sys.exit(gofile_uploader.main())
