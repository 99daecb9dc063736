# src/ldoc_gen/parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedSource


class SourceParser(ABC):
    @abstractmethod
    def parse(self, source: str) -> ParsedSource:
        """
        Parse source text into a read-only syntax tree.

        Requirements:
        - Deterministic output for same input
        - Top-level statements and comments are direct children of the root
        - Raises SourceParseError when the text is rejected
        """
        raise NotImplementedError
