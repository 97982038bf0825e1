# detector/models.py
"""
Data models of the type detector.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from enum import Enum


class FieldType(Enum):
    # Basic input
    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    PASSWORD = "password"
    URL = "url"
    SEARCH = "search"
    # Date and time
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    MONTH = "month"
    WEEK = "week"
    YEAR = "year"
    # Long text
    TEXTAREA = "textarea"
    RICH_TEXT = "rich-text"
    MARKDOWN = "markdown"
    # Selection
    SELECT = "select"
    MULTISELECT = "multiselect"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    YESNO = "yesno"
    TOGGLE = "toggle"
    # Financial
    MONEY = "money"
    PERCENTAGE = "percentage"
    CURRENCY = "currency"
    # Contact
    PHONE = "phone"
    ADDRESS = "address"
    COUNTRY = "country"
    STATE = "state"
    ZIPCODE = "zipcode"
    # File and media
    FILE = "file"
    IMAGE = "image"
    SIGNATURE = "signature"
    AUDIO = "audio"
    VIDEO = "video"
    # Rating and scale
    RATING = "rating"
    SLIDER = "slider"
    RANGE = "range"
    LIKERT = "likert"
    # Specialized
    COLOR = "color"
    TAGS = "tags"
    AUTOCOMPLETE = "autocomplete"
    LOCATION = "location"
    MATRIX = "matrix"

    @property
    def is_enumerable(self) -> bool:
        return self in ENUMERABLE_TYPES


ENUMERABLE_TYPES = frozenset({
    FieldType.SELECT,
    FieldType.MULTISELECT,
    FieldType.CHECKBOX,
    FieldType.RADIO,
    FieldType.YESNO,
})


@dataclass(frozen=True)
class RuleScore:
    """Outcome of one rule evaluated against one column."""
    rule_id: str
    field_type: FieldType
    score: float
    matched: int
    total: int
    reasoning: str
    options: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AlternativeType:
    field_type: FieldType
    confidence: float
    reasoning: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field_type": self.field_type.value,
            "confidence": self.confidence,
            "reasoning": self.reasoning
        }


@dataclass(frozen=True)
class ValidationSuggestion:
    """Validation rule suggested from the observed values."""
    type: str                    # pattern | min | max | maxLength
    value: Optional[Any]
    message: str
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "value": self.value,
            "message": self.message,
            "confidence": self.confidence
        }


@dataclass(frozen=True)
class TypeDetectionResult:
    """Inferred field type and confidence for one column."""
    column_index: int
    column_name: str
    field_type: FieldType
    confidence: float
    reasoning: str
    options: Tuple[str, ...] = ()
    alternatives: Tuple[AlternativeType, ...] = field(default_factory=tuple)
    validation_suggestions: Tuple[ValidationSuggestion, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "column_index": self.column_index,
            "column_name": self.column_name,
            "field_type": self.field_type.value,
            "confidence": self.confidence,
            "reasoning": self.reasoning,
            "options": list(self.options),
            "alternatives": [alt.to_dict() for alt in self.alternatives],
            "validation_suggestions": [s.to_dict() for s in self.validation_suggestions]
        }


@dataclass
class RuleConfiguration:
    """Configuration of one registered rule."""
    rule_id: str
    enabled: bool = True
    priority: int = 0
    params: Dict[str, Any] = field(default_factory=dict)
