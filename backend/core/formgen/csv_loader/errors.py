# csv_loader/errors.py
"""
Normalized errors of the csv_loader.
"""

from .models import ErrorSeverity, NormalizedError


class CsvLoaderErrors:
    """Factory of normalized errors."""

    @staticmethod
    def empty_file() -> NormalizedError:
        return NormalizedError(
            code="EMPTY_FILE",
            severity=ErrorSeverity.FATAL,
            message="CSV file is empty"
        )

    @staticmethod
    def empty_column_name(col_index: int, replacement: str) -> NormalizedError:
        return NormalizedError(
            code="EMPTY_COLUMN_NAME",
            severity=ErrorSeverity.WARNING,
            message=f"Empty column name in header, using '{replacement}'",
            row_index=0,
            column_index=col_index,
            value=replacement
        )

    @staticmethod
    def duplicated_column(col_index: int, column_name: str) -> NormalizedError:
        return NormalizedError(
            code="DUPLICATED_COLUMN",
            severity=ErrorSeverity.WARNING,
            message=f"Duplicated column name: '{column_name}'",
            row_index=0,
            column_index=col_index,
            value=column_name
        )

    @staticmethod
    def row_column_mismatch(row_index: int, expected: int, actual: int) -> NormalizedError:
        action = "padded" if actual < expected else "truncated"
        return NormalizedError(
            code="ROW_COLUMN_COUNT_MISMATCH",
            severity=ErrorSeverity.ERROR,
            message=f"Row has {actual} columns, expected {expected} ({action})",
            row_index=row_index
        )

    @staticmethod
    def rows_truncated(max_rows: int) -> NormalizedError:
        return NormalizedError(
            code="ROWS_TRUNCATED",
            severity=ErrorSeverity.WARNING,
            message=f"Only the first {max_rows} data rows were read"
        )

    @staticmethod
    def encoding_fallback(encoding: str) -> NormalizedError:
        return NormalizedError(
            code="ENCODING_FALLBACK",
            severity=ErrorSeverity.WARNING,
            message=f"Encoding could not be detected reliably, content decoded as {encoding}"
        )

    @staticmethod
    def csv_dialect_detection_failed() -> NormalizedError:
        return NormalizedError(
            code="CSV_DIALECT_DETECTION_FAILED",
            severity=ErrorSeverity.WARNING,
            message="Could not detect the CSV delimiter, using ','"
        )
