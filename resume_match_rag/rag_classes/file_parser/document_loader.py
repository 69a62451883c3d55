"""document_loader.py
Dispatches a file path to the matching FileParser and returns cleaned text.
"""
from typing import Optional

from resume_match_rag.config import MATCHER_DEFAULTS

from resume_match_rag.rag_classes.file_parser.file_parser import FileParser
from resume_match_rag.rag_classes.file_parser.helpers.check_file_extension import check_file_extension
from resume_match_rag.rag_classes.file_parser.pdf_parser import PDFParser
from resume_match_rag.rag_classes.file_parser.text_file_parser import TextFileParser

FILETYPE_PARSER_MAP = {
    ".pdf": PDFParser,
    ".txt": TextFileParser,
}


def load_document_text(
    file_path: str,
    max_file_size_mb: Optional[float] = MATCHER_DEFAULTS.MAX_FILE_SIZE_MB,
) -> str:
    """
    Load a resume or job description file as cleaned plain text.

    Args:
        file_path (str): Path to a `.pdf` or `.txt` file.
        max_file_size_mb (float | None): Size limit; None disables the check.

    Returns:
        str: Cleaned document text.

    Raises:
        FileNotSupportedError: If the extension is neither `.pdf` nor `.txt`.
        FileNotFoundError: If the file does not exist.
        FileTooLargeError: If the file exceeds `max_file_size_mb`.
        FileOpenError: If the file cannot be read.
        FileEmptyError: If no text could be extracted.
    """
    extension = check_file_extension(file_path, FileParser.ALLOWED_EXTENSIONS)
    parser_cls = FILETYPE_PARSER_MAP[extension]
    return parser_cls(file_path, max_file_size_mb=max_file_size_mb).parse()
