# detector/__init__.py
"""
Micromodule that infers a form field type for each profiled column.
"""

from .detector import TypeDetector
from .rule_registry import RuleRegistry
from .models import (
    FieldType,
    TypeDetectionResult,
    AlternativeType,
    ValidationSuggestion,
    RuleScore,
    RuleConfiguration
)
from .semantic import semantic_hint

__all__ = [
    'TypeDetector',
    'RuleRegistry',
    'FieldType',
    'TypeDetectionResult',
    'AlternativeType',
    'ValidationSuggestion',
    'RuleScore',
    'RuleConfiguration',
    'semantic_hint'
]
