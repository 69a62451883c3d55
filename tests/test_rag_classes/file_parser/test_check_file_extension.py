"""test_check_file_extension.py
Test check_file_extension function.
"""
import pytest

from resume_match_rag.exceptions import FileNotSupportedError

from resume_match_rag.rag_classes.file_parser.helpers.check_file_extension import check_file_extension

class TestCheckFileExtension:
    """Tests for the check_file_extension utility."""

    def test_valid_extension_returns_lowercase(self):
        assert check_file_extension("resume.PDF", [".pdf", ".txt"]) == ".pdf"

    def test_dot_in_filename_not_extension(self):
        assert check_file_extension("resume.v1.txt", [".pdf", ".txt"]) == ".txt"

    def test_multi_dot_extension(self):
        assert check_file_extension("notes.tar.gz", [".gz", ".tar.gz"]) == ".tar.gz"

    def test_unsupported_extension_raises_error(self):
        supported = [".pdf", ".txt"]
        with pytest.raises(FileNotSupportedError) as exc_info:
            check_file_extension("resume.docx", supported)

        err = exc_info.value
        assert err.extension == ".docx"
        assert err.supported_extensions == supported

    def test_no_extension_raises_error(self):
        with pytest.raises(FileNotSupportedError) as exc_info:
            check_file_extension("resume", [".pdf", ".txt"])
        assert exc_info.value.extension == ""
