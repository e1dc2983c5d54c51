#!/usr/bin/env python3
"""Tests for console reporting."""

import os
import sys
from datetime import datetime, timezone

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from gofile_upload.errors import ApiError, HttpError, InvalidArgument, NetworkError
from gofile_upload.options import UploadRequestConfig
from gofile_upload.reporter import report_error, report_result
from gofile_upload.response import UploadResult

CAPTURED = datetime(2024, 5, 17, 14, 3, 9, tzinfo=timezone.utc)


class TestReportResult:
    """Tests for report_result."""

    def test_full_result(self, capsys):
        """Should print every present field."""
        result = UploadResult(
            download_page="https://gofile.io/d/abc",
            file_id="abc",
            parent_folder="fold1",
            file_name="f.txt",
            md5="d41d8cd98f00b204e9800998ecf8427e",
            captured_at=CAPTURED,
        )
        report_result(result, UploadRequestConfig(file_path="f.txt"))

        out = capsys.readouterr().out
        assert "Upload completed successfully!" in out
        assert "https://gofile.io/d/abc" in out
        assert "f.txt" in out
        assert "fold1" in out
        assert "d41d8cd98f00b204e9800998ecf8427e" in out
        assert "2024-05-17 14:03:09 UTC" in out
        assert "--folder fold1" in out

    def test_absent_fields_skipped(self, capsys):
        """Should leave out labels for fields the server did not send."""
        report_result(UploadResult(download_page="https://gofile.io/d/abc", captured_at=CAPTURED))

        out = capsys.readouterr().out
        assert "Download Page:" in out
        assert "MD5 Hash:" not in out
        assert "Folder ID:" not in out
        assert "--folder" not in out
        assert "Upload Time:" in out

    def test_no_folder_hint_when_folder_given(self, capsys):
        """The reuse hint is only shown when no folder was requested."""
        report_result(
            UploadResult(parent_folder="fold1", captured_at=CAPTURED),
            UploadRequestConfig(file_path="f.txt", auth_token="t", folder_id="fold1"),
        )
        out = capsys.readouterr().out
        assert "Folder ID:" in out
        assert "--folder fold1" not in out


class TestReportError:
    """Tests for report_error."""

    def test_plain_error(self, capsys):
        report_error(InvalidArgument("No file specified!"))
        captured = capsys.readouterr()
        assert "ERROR:" in captured.err
        assert "No file specified!" in captured.err
        assert "Response:" not in captured.err
        assert captured.out == ""

    def test_network_error_has_no_body(self, capsys):
        report_error(NetworkError("Upload failed - check your connection: refused"))
        err = capsys.readouterr().err
        assert "check your connection" in err
        assert "Response:" not in err

    def test_http_error_shows_body(self, capsys):
        report_error(HttpError(502, "<html>bad gateway</html>"))
        err = capsys.readouterr().err
        assert "HTTP 502" in err
        assert "Response:" in err
        assert "<html>bad gateway</html>" in err

    def test_api_error_prefix(self, capsys):
        report_error(ApiError("quota exceeded", '{"status":"error","error":"quota exceeded"}'))
        err = capsys.readouterr().err
        assert "API Error: quota exceeded" in err
        assert '"error":"quota exceeded"' in err
