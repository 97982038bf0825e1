# csv_loader/tokenizer.py
"""
Splits raw CSV text into a RawTable.
"""

import csv
import io
import logging
from typing import List, Optional, Tuple

from .models import CsvDialectInfo, CsvParseOptions, NormalizedError, RawTable
from .errors import CsvLoaderErrors
from .dialect import DialectDetector
from ..exceptions import EmptyInputError, ParseError

logger = logging.getLogger(__name__)


class CsvTokenizer:
    """Tokenizes CSV text honoring quoted fields and escaped quotes."""

    # Share of control/replacement characters above which text is considered binary
    BINARY_CHAR_RATIO = 0.1
    BINARY_SCAN_WINDOW = 10000

    @classmethod
    def tokenize(cls, text: str, options: Optional[CsvParseOptions] = None) -> RawTable:
        """
        Parses CSV text into headers and rows.

        Args:
            text: Raw CSV content
            options: Parse options (delimiter, header presence, row cap)

        Returns:
            RawTable whose rows all have len(headers) cells

        Raises:
            EmptyInputError: the text has no non-blank line
            ParseError: binary content, empty header row or malformed quoting
        """
        options = options or CsvParseOptions()

        if text is None or not text.strip():
            raise EmptyInputError(CsvLoaderErrors.empty_file().message)

        cls._check_readable(text)

        warnings: List[NormalizedError] = []
        dialect = cls._resolve_dialect(text, options, warnings)

        records = cls._read_records(text, dialect, options.skip_empty_rows)
        if not records:
            raise EmptyInputError(CsvLoaderErrors.empty_file().message)

        if options.has_header:
            header_line, header_row = records[0]
            data_records = records[1:]
            headers = cls._build_headers(header_row, header_line, warnings)
        else:
            data_records = records
            headers = [f"Column {i + 1}" for i in range(len(records[0][1]))]

        if options.max_rows is not None and len(data_records) > options.max_rows:
            data_records = data_records[:options.max_rows]
            warnings.append(CsvLoaderErrors.rows_truncated(options.max_rows))

        rows = []
        expected = len(headers)
        for row_index, (_, row) in enumerate(data_records):
            if len(row) != expected:
                warnings.append(CsvLoaderErrors.row_column_mismatch(row_index, expected, len(row)))
                row = (row + [""] * expected)[:expected]
            rows.append(tuple(row))

        logger.debug(f"Tokenized CSV: {len(headers)} columns, {len(rows)} rows, "
                     f"delimiter={dialect.delimiter!r}, warnings={len(warnings)}")

        return RawTable(
            headers=tuple(headers),
            rows=tuple(rows),
            delimiter=dialect.delimiter,
            warnings=tuple(warnings)
        )

    @classmethod
    def _check_readable(cls, text: str) -> None:
        """Rejects binary content decoded as text."""
        window = text[:cls.BINARY_SCAN_WINDOW]
        if "\x00" in window:
            raise ParseError("Unreadable CSV content: binary data detected")

        suspicious = sum(
            1 for ch in window
            if ch == "\ufffd" or (ord(ch) < 32 and ch not in "\t\r\n")
        )
        if suspicious / len(window) > cls.BINARY_CHAR_RATIO:
            raise ParseError("Unreadable CSV content: too many control characters")

    @classmethod
    def _resolve_dialect(cls, text: str, options: CsvParseOptions,
                         warnings: List[NormalizedError]) -> CsvDialectInfo:
        if options.delimiter != "auto":
            return CsvDialectInfo(delimiter=options.delimiter)

        dialect, warning = DialectDetector.detect_dialect(text)
        if warning:
            warnings.append(warning)
        return dialect

    @classmethod
    def _read_records(cls, text: str, dialect: CsvDialectInfo,
                      skip_empty_rows: bool = True) -> List[Tuple[int, List[str]]]:
        """Reads (line_number, cells) records. Leading and trailing blank lines are always dropped."""
        reader = csv.reader(
            io.StringIO(text, newline=''),
            delimiter=dialect.delimiter,
            quotechar=dialect.quotechar,
            doublequote=dialect.doublequote,
            skipinitialspace=dialect.skipinitialspace,
            strict=True
        )

        records = []
        try:
            for row in reader:
                if not row or (len(row) == 1 and not row[0].strip()):
                    if records and not skip_empty_rows:
                        records.append((reader.line_num, [""]))
                    continue
                records.append((reader.line_num, [cell.strip() for cell in row]))
        except csv.Error as e:
            raise ParseError(f"Malformed CSV: {e}", line_number=reader.line_num) from e

        while records and records[-1][1] == [""]:
            records.pop()

        return records

    @classmethod
    def _build_headers(cls, header_row: List[str], line_number: int,
                       warnings: List[NormalizedError]) -> List[str]:
        if not any(cell for cell in header_row):
            raise ParseError("Header row is empty", line_number=line_number)

        headers = []
        seen = set()
        for i, cell in enumerate(header_row):
            name = cell
            if not name:
                name = f"Column {i + 1}"
                warnings.append(CsvLoaderErrors.empty_column_name(i, name))
            if name in seen:
                warnings.append(CsvLoaderErrors.duplicated_column(i, name))
            seen.add(name)
            headers.append(name)

        return headers
