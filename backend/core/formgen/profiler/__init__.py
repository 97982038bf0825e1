# profiler/__init__.py
"""
Micromodule that summarizes the values of each CSV column.
"""

from .profiler import ColumnProfiler
from .models import ColumnProfile, is_null

__all__ = [
    'ColumnProfiler',
    'ColumnProfile',
    'is_null'
]
