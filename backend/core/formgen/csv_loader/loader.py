# csv_loader/loader.py
"""
Main entry point of the csv_loader.
"""

import logging
from typing import Optional

from .models import CsvParseOptions, RawTable
from .encoding import EncodingResolver
from .tokenizer import CsvTokenizer

logger = logging.getLogger(__name__)


class CsvLoader:
    """Loads CSV content from text or uploaded bytes."""

    @classmethod
    def load_text(cls, text: str, options: Optional[CsvParseOptions] = None) -> RawTable:
        """
        Tokenizes already decoded CSV text.

        Raises:
            ParseError, EmptyInputError
        """
        return CsvTokenizer.tokenize(text, options)

    @classmethod
    def load_bytes(cls, content: bytes, options: Optional[CsvParseOptions] = None) -> RawTable:
        """
        Decodes uploaded bytes and tokenizes them.

        Args:
            content: Raw file content
            options: Parse options

        Returns:
            RawTable, with an encoding warning prepended when the fallback was used

        Raises:
            ParseError, EmptyInputError
        """
        text, encoding, warning = EncodingResolver.decode(content)
        logger.info(f"Decoded CSV upload: {len(content)} bytes, encoding={encoding}")

        table = CsvTokenizer.tokenize(text, options)
        if warning is None:
            return table

        return RawTable(
            headers=table.headers,
            rows=table.rows,
            delimiter=table.delimiter,
            warnings=(warning,) + table.warnings
        )
