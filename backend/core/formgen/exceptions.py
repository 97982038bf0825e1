# formgen/exceptions.py
"""
Exceptions raised by the inference pipeline.
"""

from typing import Optional


class FormGenerationError(Exception):
    """Base error for the CSV to form inference pipeline."""

    code = "FORM_GENERATION_ERROR"

    def __init__(self, message: str, source: Optional[str] = None):
        self.message = message
        self.source = source
        self.source_context = f" (source: {source})" if source else ""
        super().__init__(f"{message}{self.source_context}")


class ParseError(FormGenerationError):
    """Malformed or unreadable CSV content."""

    code = "CSV_PARSE_ERROR"

    def __init__(self,
                 message: str,
                 line_number: Optional[int] = None,
                 source: Optional[str] = None):
        self.line_number = line_number
        context = f" at line {line_number}" if line_number else ""
        super().__init__(f"{message}{context}", source)


class EmptyInputError(FormGenerationError):
    """The input yields zero usable columns."""

    code = "EMPTY_INPUT"

    def __init__(self, message: str = "CSV input contains no columns", source: Optional[str] = None):
        super().__init__(message, source)
