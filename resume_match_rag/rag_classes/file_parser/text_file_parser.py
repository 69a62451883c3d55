"""text_file_parser.py

Holds TextFileParser class.
"""
from resume_match_rag.exceptions import FileOpenError

from resume_match_rag.rag_classes.file_parser.file_parser import FileParser

class TextFileParser(FileParser):
    """Concrete parser for UTF-8 plain text documents (.txt)."""
    SUPPORTED_EXTENSIONS = ['.txt']

    def _read_text(self) -> str:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileOpenError(str(self.file_path), str(e))
