"""file_parser.py

Holds abstract FileParser class inherited by filetype-specific parsers.
"""

import os
from abc import ABC, abstractmethod

from resume_match_rag.config import MATCHER_DEFAULTS
from resume_match_rag.exceptions import FileTooLargeError, FileEmptyError

from resume_match_rag.rag_classes.file_parser.helpers.check_file_extension import check_file_extension
from resume_match_rag.rag_classes.file_parser.helpers.clean_text import clean_text

class FileParser(ABC):
    """
    Abstract base class representing a generic document-to-text parser.

    All concrete parsers must implement the `_read_text` method.

    Args:
        file_path (str): Path to the file to parse.
        max_file_size_mb (float | None, optional): Maximum allowed file size in megabytes.
            If None, no size limit is enforced. Defaults to MATCHER_DEFAULTS.MAX_FILE_SIZE_MB.

    Attributes:
        file_path (str): Path to the file.
        max_file_size_mb (float | None): Maximum allowed file size.
    """
    # Parent level allowance of file extensions supported in at least one concrete class
    ALLOWED_EXTENSIONS = [".pdf", ".txt"]

    # Extensions supported by a specific concrete class (to be overwritten by children)
    SUPPORTED_EXTENSIONS = []

    def __init__(
        self,
        file_path: str,
        max_file_size_mb: float | None = MATCHER_DEFAULTS.MAX_FILE_SIZE_MB
    ):
        self.file_path = file_path
        self.max_file_size_mb = max_file_size_mb
        self._validate_file()
        check_file_extension(self.file_path, self.SUPPORTED_EXTENSIONS)

    def _validate_file(self):
        """Validate whether the file can be parsed by this parser.

        Raises:
            FileNotFoundError: Raised if the file cannot be found at file_path
            FileTooLargeError: Raised if the file exceeds the max_file_size_mb
        """
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"File not found: {self.file_path}")

        if self.max_file_size_mb is not None:
            # 1 MB = 1024 * 1024 bytes
            max_size_bytes = self.max_file_size_mb * 1024 * 1024
            actual_size_bytes = os.path.getsize(self.file_path)

            if actual_size_bytes > max_size_bytes:
                raise FileTooLargeError(
                    max_size=max_size_bytes,
                    actual_size=actual_size_bytes
                )

    def parse(self) -> str:
        """
        Read the file and return its cleaned text.

        Returns:
            str: Text with normalized newlines and no surrounding whitespace.

        Raises:
            FileOpenError: If the file cannot be opened or decoded.
            FileEmptyError: If the file contains no readable text.
        """
        text = clean_text(self._read_text())
        if not text:
            raise FileEmptyError(str(self.file_path))
        return text

    @abstractmethod
    def _read_text(self) -> str:
        """Return the raw text content of `self.file_path`."""
        pass
