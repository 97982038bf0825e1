# generator/models.py
"""
Form schema models produced by the generator.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from enum import Enum

from ..detector.models import FieldType


class DetectionStrategy(Enum):
    AUTO = "auto"                  # keep every detection
    CONSERVATIVE = "conservative"  # fall back to text below 0.8
    AGGRESSIVE = "aggressive"      # never fall back


@dataclass(frozen=True)
class FieldValidation:
    min: Optional[float] = None
    max: Optional[float] = None
    pattern: Optional[str] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    step: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in self.to_dict().values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "min": self.min,
            "max": self.max,
            "pattern": self.pattern,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "step": self.step
        }


@dataclass(frozen=True)
class GeneratedField:
    """One field of the generated form, derived from one CSV column."""
    id: str
    label: str
    type: FieldType
    required: bool
    placeholder: str
    confidence: float
    column_index: int
    options: Tuple[str, ...] = ()
    validation: Optional[FieldValidation] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type.value,
            "required": self.required,
            "placeholder": self.placeholder,
            "confidence": self.confidence,
            "column_index": self.column_index,
            "options": list(self.options) if self.options else None,
            "validation": self.validation.to_dict() if self.validation else None,
            "properties": dict(self.properties)
        }


@dataclass(frozen=True)
class GenerationMetadata:
    total_fields: int
    detected_types: Dict[str, int]
    confidence_scores: List[float]
    average_confidence: float
    processing_time_ms: float
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_fields": self.total_fields,
            "detected_types": dict(self.detected_types),
            "confidence_scores": list(self.confidence_scores),
            "average_confidence": self.average_confidence,
            "processing_time_ms": self.processing_time_ms,
            "warnings": list(self.warnings),
            "recommendations": list(self.recommendations)
        }


@dataclass(frozen=True)
class GeneratedForm:
    """Form schema generated from one CSV upload. Never mutated."""
    title: str
    description: str
    fields: Tuple[GeneratedField, ...]
    metadata: GenerationMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "fields": [f.to_dict() for f in self.fields],
            "metadata": self.metadata.to_dict()
        }


@dataclass(frozen=True)
class FormPreview:
    estimated_fields: int
    complexity_score: float
    user_interaction_required: bool
    suggested_improvements: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "estimated_fields": self.estimated_fields,
            "complexity_score": self.complexity_score,
            "user_interaction_required": self.user_interaction_required,
            "suggested_improvements": list(self.suggested_improvements)
        }


@dataclass(frozen=True)
class FieldOverride:
    """User correction applied to one column, by index."""
    column_index: int
    field_type: Optional[FieldType] = None
    label: Optional[str] = None
    required: Optional[bool] = None
    options: Optional[Tuple[str, ...]] = None
    validation: Optional[FieldValidation] = None


@dataclass(frozen=True)
class GenerationOptions:
    title: str = "Generated Form"
    description: str = "Form generated from CSV data"
    include_preview: bool = True
    field_overrides: Tuple[FieldOverride, ...] = ()
    detection_strategy: DetectionStrategy = DetectionStrategy.AUTO

    def override_for(self, column_index: int) -> Optional[FieldOverride]:
        for override in self.field_overrides:
            if override.column_index == column_index:
                return override
        return None
