"""field_extractor.py
Holds abstract FieldExtractor class inherited by field-specific extractors.
"""
import re
from abc import ABC, abstractmethod
from typing import Any, List, Literal, Optional

from resume_match_rag.exceptions import FieldExtractionError, FieldExtractionConfigError

# Define allowed extraction methods (if implemented)
EXTRACTION_METHODS = Literal[
    "regex",
    "keyword",
    "rule",
]

class FieldExtractor(ABC):
    """
    Abstract base class for extracting a single structured fact from resume or
    job description text. Concrete extractors must implement the `extract` method.

    Extractors signal "nothing found" by raising FieldExtractionError; the
    DocumentExtractor catches it and falls back to the field's default value,
    so extraction as a whole never fails.

    Extraction Methods:
        - regex: Uses regular expressions to identify patterns in text.
        - keyword: Case-insensitive substring search over a fixed vocabulary.
        - rule: Simple positional heuristics (e.g. leading lines).
    """
    # Define supported methods and a default method in each subclass
    SUPPORTED_EXTRACTION_METHODS: List[str] = []
    DEFAULT_EXTRACTION_METHOD = None

    def __init__(
        self,
        text: Optional[str] = None,
        extraction_method: Optional[EXTRACTION_METHODS] = None,
    ):
        """
        Args:
            text (Optional[str]): Document text to search. May be assigned later.
            extraction_method (EXTRACTION_METHODS | None): Which extraction strategy to use.
                Defaults to the subclass's default method.
        """
        self.text = text
        self.extraction_method = extraction_method

        self._validate_extraction_method()

    @staticmethod
    def _requires_text(func):
        """Decorator to ensure `self.text` is a string before execution."""
        def wrapper(self, *args, **kwargs):
            if not isinstance(getattr(self, "text", None), str):
                raise FieldExtractionConfigError(
                    message=f"{func.__name__} requires self.text to be set before running."
                )
            return func(self, *args, **kwargs)
        return wrapper

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "extract" in cls.__dict__:
            cls.extract = cls._requires_text(cls.extract)

    def _validate_extraction_method(self) -> None:
        """
        Validate and set the extraction method for the FieldExtractor instance.

        If no method is provided, it defaults to the class's `DEFAULT_EXTRACTION_METHOD`.

        Raises:
            NotImplementedError: If `extraction_method` is not in
                `SUPPORTED_EXTRACTION_METHODS`.
            ValueError: If no `SUPPORTED_EXTRACTION_METHODS` are defined in the subclass.
        """
        if self.extraction_method:
            if self.extraction_method not in self.SUPPORTED_EXTRACTION_METHODS:
                raise NotImplementedError(
                    f"Unsupported extraction_method '{self.extraction_method}' for {self.__class__.__name__}"
                )
        else:
            if not self.SUPPORTED_EXTRACTION_METHODS:
                raise ValueError(f"{self.__class__.__name__} must define SUPPORTED_EXTRACTION_METHODS")
            self.extraction_method = self.DEFAULT_EXTRACTION_METHOD

    @abstractmethod
    def extract(self) -> Any:
        """
        Extract the field from `self.text` using the chosen `extraction_method`.

        Returns:
            Any: The extracted field value.

        Raises:
            NotImplementedError: If the extraction method is not implemented.
            FieldExtractionError: If nothing could be extracted.
            FieldExtractionConfigError: If `self.text` was never set.
        """
        pass

    # ----------------------
    # REGEX HANDLING
    # ----------------------
    def _regex_search(
        self,
        pattern: str,
        text: Optional[str] = None,
        ignore_case: bool = True,
        dotall: bool = False,
    ) -> re.Match:
        """
        Return the first match of `pattern` in `text` (defaults to `self.text`).

        Raises:
            FieldExtractionError: If the pattern does not match.
        """
        flags = re.IGNORECASE if ignore_case else 0
        if dotall:
            flags |= re.DOTALL

        search_text = self.text if text is None else text
        match = re.search(pattern, search_text, flags)
        if not match:
            raise FieldExtractionError(
                message=f"No regex match could be found. pattern: `{pattern}`",
                text=search_text,
            )
        return match
