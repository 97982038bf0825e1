# csv_loader/__init__.py
"""
Micromodule that turns raw CSV content into a RawTable.
"""

from .loader import CsvLoader
from .tokenizer import CsvTokenizer
from .models import RawTable, CsvParseOptions, NormalizedError, ErrorSeverity, CsvDialectInfo
from .errors import CsvLoaderErrors

__all__ = [
    'CsvLoader',
    'CsvTokenizer',
    'RawTable',
    'CsvParseOptions',
    'NormalizedError',
    'ErrorSeverity',
    'CsvDialectInfo',
    'CsvLoaderErrors'
]
