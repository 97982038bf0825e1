# detector/suggestions.py
"""
Validation suggestions derived from the detected type and observed values.
"""

from typing import List

from .models import FieldType, ValidationSuggestion
from .patterns import (
    EMAIL_PATTERN, PHONE_PATTERN, URL_PATTERN, ZIPCODE_PATTERN, NUMBER_PATTERN,
    is_number
)
from ..profiler.models import ColumnProfile

PATTERN_BY_TYPE = {
    FieldType.EMAIL: (EMAIL_PATTERN, "Please enter a valid email address", 0.95),
    FieldType.PHONE: (PHONE_PATTERN, "Please enter a valid phone number", 0.9),
    FieldType.URL: (URL_PATTERN, "Please enter a valid URL", 0.95),
    FieldType.ZIPCODE: (ZIPCODE_PATTERN, "Please enter a valid ZIP code", 0.9),
    FieldType.NUMBER: (NUMBER_PATTERN, "Please enter a valid number", 0.9),
}

TEXTUAL_TYPES = frozenset({
    FieldType.TEXT,
    FieldType.TEXTAREA,
    FieldType.EMAIL,
    FieldType.URL,
    FieldType.ADDRESS,
})

MIN_SUGGESTED_MAX_LENGTH = 255


def build_suggestions(field_type: FieldType, profile: ColumnProfile) -> List[ValidationSuggestion]:
    suggestions = []
    values = profile.non_null_values

    if field_type in PATTERN_BY_TYPE:
        pattern, message, confidence = PATTERN_BY_TYPE[field_type]
        suggestions.append(ValidationSuggestion(
            type="pattern",
            value=pattern,
            message=message,
            confidence=confidence
        ))

    if field_type in TEXTUAL_TYPES and values:
        avg_length = sum(len(value) for value in values) / len(values)
        max_length = max(int(avg_length * 2), MIN_SUGGESTED_MAX_LENGTH)
        suggestions.append(ValidationSuggestion(
            type="maxLength",
            value=max_length,
            message=f"Maximum {max_length} characters",
            confidence=0.7
        ))

    if field_type == FieldType.NUMBER:
        numbers = [float(value) for value in values if is_number(value)]
        if numbers:
            suggestions.append(ValidationSuggestion(
                type="min",
                value=min(numbers),
                message=f"Observed minimum is {min(numbers):g}",
                confidence=0.6
            ))
            suggestions.append(ValidationSuggestion(
                type="max",
                value=max(numbers),
                message=f"Observed maximum is {max(numbers):g}",
                confidence=0.6
            ))

    return suggestions
