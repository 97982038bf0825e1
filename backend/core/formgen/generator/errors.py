# generator/errors.py
"""
Normalized errors of the form generator.
"""

from ..csv_loader.models import ErrorSeverity, NormalizedError
from ..exceptions import FormGenerationError


class GeneratorErrors:
    """Factory of normalized errors."""

    @staticmethod
    def from_exception(error: FormGenerationError) -> NormalizedError:
        """Fatal error reported instead of a form."""
        return NormalizedError(
            code=error.code,
            severity=ErrorSeverity.FATAL,
            message=str(error),
            row_index=getattr(error, "line_number", None)
        )

    @staticmethod
    def unknown_override_column(column_index: int, total_columns: int) -> NormalizedError:
        return NormalizedError(
            code="UNKNOWN_OVERRIDE_COLUMN",
            severity=ErrorSeverity.WARNING,
            message=f"Override targets column {column_index}, but the table has {total_columns} columns",
            column_index=column_index
        )

    @staticmethod
    def empty_column(column_index: int, column_name: str) -> NormalizedError:
        return NormalizedError(
            code="EMPTY_COLUMN",
            severity=ErrorSeverity.WARNING,
            message=f"Column '{column_name}' has no values; defaulted to text",
            column_index=column_index,
            value=column_name
        )

    @staticmethod
    def too_many_options(column_index: int, column_name: str, count: int, limit: int) -> NormalizedError:
        return NormalizedError(
            code="TOO_MANY_OPTIONS",
            severity=ErrorSeverity.WARNING,
            message=f"Column '{column_name}' has {count} distinct values; options omitted (limit {limit})",
            column_index=column_index,
            value=column_name
        )
