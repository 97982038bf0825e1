# csv_loader/dialect.py
"""
CSV dialect detection.
"""

import csv
import re
from typing import List, Optional, Tuple

from .models import CsvDialectInfo, NormalizedError
from .errors import CsvLoaderErrors


class DialectDetector:
    """Detects the CSV dialect (delimiter, quotes)."""

    COMMON_DELIMITERS = [',', ';', '|', '\t']

    SAMPLE_LINES = 10

    @classmethod
    def detect_dialect(cls, text: str) -> Tuple[CsvDialectInfo, Optional[NormalizedError]]:
        """
        Detects the dialect from the first lines of the text.

        Args:
            text: Decoded CSV content

        Returns:
            Tuple (dialect_info, warning)
        """
        sample_lines = [line for line in text.splitlines() if line.strip()][:cls.SAMPLE_LINES]
        if not sample_lines:
            return CsvDialectInfo(), CsvLoaderErrors.csv_dialect_detection_failed()

        # A single column file has no delimiter to sniff
        if not any(d in line for line in sample_lines for d in cls.COMMON_DELIMITERS):
            return CsvDialectInfo(), None

        # Only the delimiter is sniffed; quoting stays RFC-4180 ("" escapes a quote)
        try:
            dialect = csv.Sniffer().sniff('\n'.join(sample_lines), delimiters=''.join(cls.COMMON_DELIMITERS))
            info = CsvDialectInfo(delimiter=dialect.delimiter)
            if info.delimiter in cls.COMMON_DELIMITERS:
                return info, None
        except csv.Error:
            pass

        return cls._heuristic_detection(sample_lines)

    @classmethod
    def _heuristic_detection(cls, sample_lines: List[str]) -> Tuple[CsvDialectInfo, Optional[NormalizedError]]:
        """Heuristic detection when csv.Sniffer fails."""
        delimiter_counts = {delim: 0 for delim in cls.COMMON_DELIMITERS}

        for line in sample_lines:
            for delim in cls.COMMON_DELIMITERS:
                # Delimiters outside quotes only
                pattern = re.compile(fr'{re.escape(delim)}(?=(?:[^\"]*\"[^\"]*\")*[^\"]*$)')
                delimiter_counts[delim] += len(pattern.findall(line))

        most_common = max(delimiter_counts.items(), key=lambda x: x[1])

        if most_common[1] == 0:
            return CsvDialectInfo(delimiter=','), CsvLoaderErrors.csv_dialect_detection_failed()

        return CsvDialectInfo(delimiter=most_common[0]), None
