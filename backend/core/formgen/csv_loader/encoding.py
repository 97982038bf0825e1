# csv_loader/encoding.py
"""
Encoding resolution for uploaded CSV content.
"""

import logging
from typing import Optional, Tuple

import chardet

from .models import NormalizedError
from .errors import CsvLoaderErrors
from ..exceptions import ParseError, EmptyInputError

logger = logging.getLogger(__name__)


class EncodingResolver:
    """Detects and resolves the encoding of raw CSV bytes."""

    # Fallback priority order
    ENCODING_PRIORITY = ['utf-8-sig', 'utf-8', 'cp1252', 'latin-1']

    ENCODING_MAP = {
        'utf-8': 'utf-8',
        'utf-8-sig': 'utf-8-sig',
        'ascii': 'utf-8',
        'windows-1252': 'cp1252',
        'iso-8859-1': 'latin-1'
    }

    # Only the first bytes are inspected by chardet
    DETECTION_WINDOW = 10000

    @classmethod
    def decode(cls, raw_data: bytes) -> Tuple[str, str, Optional[NormalizedError]]:
        """
        Decodes raw CSV bytes into text.

        Args:
            raw_data: Uploaded file content

        Returns:
            Tuple (text, encoding, warning)

        Raises:
            EmptyInputError: the payload is empty
            ParseError: the payload is binary
        """
        if not raw_data or not raw_data.strip():
            raise EmptyInputError(CsvLoaderErrors.empty_file().message)

        if raw_data.startswith(b'\xef\xbb\xbf'):
            return raw_data.decode('utf-8-sig'), 'utf-8-sig', None

        if b'\x00' in raw_data[:cls.DETECTION_WINDOW]:
            raise ParseError("Unreadable CSV content: binary data detected")

        result = chardet.detect(raw_data[:cls.DETECTION_WINDOW])
        detected_encoding = (result.get('encoding') or '').lower()
        confidence = result.get('confidence') or 0

        if confidence > 0.7 and detected_encoding:
            normalized = cls.ENCODING_MAP.get(detected_encoding, detected_encoding)
            try:
                return raw_data.decode(normalized, errors='strict'), normalized, None
            except (UnicodeDecodeError, LookupError):
                logger.debug(f"chardet suggested {normalized} but decoding failed")

        for encoding in cls.ENCODING_PRIORITY[:-1]:
            try:
                return raw_data.decode(encoding, errors='strict'), encoding, None
            except (UnicodeDecodeError, LookupError):
                continue

        # latin-1 maps every byte, so the last resort always decodes
        last_resort = cls.ENCODING_PRIORITY[-1]
        return raw_data.decode(last_resort), last_resort, CsvLoaderErrors.encoding_fallback(last_resort)
