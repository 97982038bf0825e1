# formgen/__init__.py
"""
CSV to form-field type inference engine.
"""

from .orchestrator import FormGenerationOrchestrator
from .config import InferenceConfig, DEFAULT_CONFIG
from .csv_loader import CsvLoader, CsvParseOptions, RawTable
from .profiler import ColumnProfiler, ColumnProfile
from .detector import TypeDetector, FieldType, TypeDetectionResult
from .generator import (
    FormGenerator, GeneratedForm, GeneratedField, GenerationOptions,
    FieldOverride, DetectionStrategy
)
from .reporting import QualityAnalyzer, DataQualityMetrics
from .models import GenerationResult, AnalysisResult
from .exceptions import FormGenerationError, ParseError, EmptyInputError

__all__ = [
    'FormGenerationOrchestrator',
    'InferenceConfig',
    'DEFAULT_CONFIG',
    'CsvLoader',
    'CsvParseOptions',
    'RawTable',
    'ColumnProfiler',
    'ColumnProfile',
    'TypeDetector',
    'FieldType',
    'TypeDetectionResult',
    'FormGenerator',
    'GeneratedForm',
    'GeneratedField',
    'GenerationOptions',
    'FieldOverride',
    'DetectionStrategy',
    'QualityAnalyzer',
    'DataQualityMetrics',
    'GenerationResult',
    'AnalysisResult',
    'FormGenerationError',
    'ParseError',
    'EmptyInputError'
]
