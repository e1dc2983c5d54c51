#!/usr/bin/env python3
"""Tests for building the multipart upload request."""

import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from gofile_upload.errors import FileAccessError, FileReadError
from gofile_upload.options import UploadRequestConfig
from gofile_upload.request_builder import build_request

URL = "https://upload.gofile.io/uploadfile"


class TestBuildRequest:
    """Tests for build_request."""

    def test_guest_request(self, temp_file):
        """Guest upload has only the file part and no headers."""
        request = build_request(UploadRequestConfig(file_path=temp_file), URL)
        assert request.url == URL
        assert request.part_names == ("file",)
        assert request.fields == {}
        assert request.headers == {}
        assert request.file_name == os.path.basename(temp_file)
        assert request.mime_type == "text/plain"

    def test_token_adds_bearer_header_only(self, temp_file):
        """A token adds the Authorization header and no form field."""
        request = build_request(
            UploadRequestConfig(file_path=temp_file, auth_token="secret"), URL
        )
        assert request.headers == {"Authorization": "Bearer secret"}
        assert request.part_names == ("file",)

    def test_token_and_folder(self, temp_file):
        """A folder adds the folderId part next to the file."""
        request = build_request(
            UploadRequestConfig(file_path=temp_file, auth_token="secret", folder_id="f1"),
            URL,
        )
        assert request.fields == {"folderId": "f1"}
        assert request.part_names == ("folderId", "file")
        assert request.headers == {"Authorization": "Bearer secret"}

    def test_unknown_extension_mime_type(self, tmp_path):
        """Should fall back to application/octet-stream."""
        path = tmp_path / "blob.zzzunknown"
        path.write_bytes(b"\x00\x01")
        request = build_request(UploadRequestConfig(file_path=str(path)), URL)
        assert request.mime_type == "application/octet-stream"

    def test_unopenable_file(self, tmp_path):
        """Should raise FileReadError if the path cannot be opened."""
        with pytest.raises(FileReadError):
            build_request(UploadRequestConfig(file_path=str(tmp_path)), URL)

    def test_missing_file_is_file_access_error(self):
        """FileReadError is a kind of FileAccessError."""
        with pytest.raises(FileAccessError):
            build_request(UploadRequestConfig(file_path="/nonexistent/file.txt"), URL)


class TestOpenEncoder:
    """Tests for UploadRequest.open_encoder."""

    def test_encoder_parts(self, temp_file):
        """The encoded body carries exactly the mandated parts."""
        request = build_request(
            UploadRequestConfig(file_path=temp_file, auth_token="secret", folder_id="f1"),
            URL,
        )
        with request.open_encoder() as (encoder, file_size):
            assert file_size == os.path.getsize(temp_file)
            assert set(encoder.fields) == {"file", "folderId"}
            assert encoder.content_type.startswith("multipart/form-data")
            body = encoder.to_string()

        assert b'name="folderId"' in body
        assert b"f1" in body
        assert f'filename="{request.file_name}"'.encode() in body
        assert b"Test file content for upload testing" in body
        assert b"secret" not in body

    def test_guest_encoder_has_only_file(self, temp_file):
        """Guest upload body has no folderId part."""
        request = build_request(UploadRequestConfig(file_path=temp_file), URL)
        with request.open_encoder() as (encoder, _):
            assert list(encoder.fields) == ["file"]
            assert b"folderId" not in encoder.to_string()

    def test_file_closed_after_use(self, temp_file):
        """The file handle is closed when the context exits."""
        request = build_request(UploadRequestConfig(file_path=temp_file), URL)
        with request.open_encoder() as (encoder, _):
            file_obj = encoder.fields["file"][1]
            assert not file_obj.closed
        assert file_obj.closed

    def test_file_closed_on_error(self, temp_file):
        """The file handle is closed even if the body raises."""
        request = build_request(UploadRequestConfig(file_path=temp_file), URL)
        with pytest.raises(RuntimeError):
            with request.open_encoder() as (encoder, _):
                file_obj = encoder.fields["file"][1]
                raise RuntimeError("boom")
        assert file_obj.closed

    def test_file_removed_before_send(self, temp_file):
        """Should raise FileReadError if the file disappears after building."""
        request = build_request(UploadRequestConfig(file_path=temp_file), URL)
        os.unlink(temp_file)
        with pytest.raises(FileReadError):
            with request.open_encoder():
                pass
