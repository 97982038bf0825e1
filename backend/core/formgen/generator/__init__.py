# generator/__init__.py
"""
Micromodule that assembles detected columns into a form schema.
"""

from .generator import FormGenerator
from .errors import GeneratorErrors
from .models import (
    DetectionStrategy,
    FieldValidation,
    GeneratedField,
    GenerationMetadata,
    GeneratedForm,
    FormPreview,
    FieldOverride,
    GenerationOptions
)

__all__ = [
    'FormGenerator',
    'GeneratorErrors',
    'DetectionStrategy',
    'FieldValidation',
    'GeneratedField',
    'GenerationMetadata',
    'GeneratedForm',
    'FormPreview',
    'FieldOverride',
    'GenerationOptions'
]
