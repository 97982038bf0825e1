# reporting/__init__.py
"""
Data quality reporting for parsed CSV tables.
"""

from .analyzer import QualityAnalyzer
from .models import DataQualityMetrics, ColumnQuality

__all__ = [
    'QualityAnalyzer',
    'DataQualityMetrics',
    'ColumnQuality'
]
