"""document_extractor.py
Utilizes FieldExtractor subclasses to fill a ResumeData or JobDescriptionData
instance from raw document text.
"""
import copy
import sys
from typing import Dict, List, Type, TypeVar

from resume_match_rag.logging import LoggerFactory
from resume_match_rag.rag_classes.matching.field_extractor import FieldExtractor
from resume_match_rag.rag_classes.matching.extractor_map import verify_extractor_map

logger_factory = LoggerFactory()

DataT = TypeVar("DataT")


class DocumentExtractor:
    """
    Orchestrates extraction of every field outlined in an extractor_map.

    The extractor_map allows multiple "backup" extractors per field. If one
    extractor raises, the next in the list is attempted. When all of them fail
    the field keeps the default value of `data_class`, so `extract()` never
    fails on malformed input.

    Attributes:
        text (str): Document text every extractor runs on.
        extractor_map (Dict[str, List[FieldExtractor]]): Field names -> extractors
            to try in order.
        data_class (type): Dataclass to fill (ResumeData or JobDescriptionData).
    """

    def __init__(
        self,
        text: str,
        extractor_map: Dict[str, List[FieldExtractor]],
        data_class: Type[DataT],
    ):
        verify_extractor_map(extractor_map, data_class)
        self.text = text if isinstance(text, str) else ""
        self.extractor_map = extractor_map
        self.data_class = data_class

    def _extract_field_with_fallback(self, field_name: str) -> object:
        """
        Attempt to extract a single field using all configured extractors.

        Extractors are copied before `text` is assigned, so shared extractor
        templates are never mutated.

        Returns:
            object: Extracted value, or the `data_class` default if all extractors fail.
        """
        for extractor in self.extractor_map.get(field_name, []):
            try:
                bound_extractor = copy.copy(extractor)
                bound_extractor.text = self.text
                return bound_extractor.extract()
            except Exception as e:
                if not any("pytest" in arg for arg in sys.argv):
                    first_line = (str(e).splitlines() or [""])[0]
                    logger_factory.get_extractor_field_logger(field_name).info(
                        f"Field '{field_name}' fell back in extractor "
                        f"'{type(extractor).__name__}': {first_line}"
                    )
                # Continue to next extractor

        return getattr(self.data_class(), field_name)

    def extract(self) -> DataT:
        """
        Extract all fields outlined in self.extractor_map.

        Returns:
            DataT: A `data_class` instance with `raw_text` set to the document text.
        """
        data = self.data_class(raw_text=self.text)
        for field_name in self.extractor_map:
            setattr(data, field_name, self._extract_field_with_fallback(field_name))
        return data
