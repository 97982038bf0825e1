# generator/placeholders.py
"""
Placeholder text and type-specific widget properties per field type.
"""

from typing import Any, Dict

from ..detector.models import FieldType

# Types whose placeholder is built from the column label
_LABEL_PLACEHOLDER = "Enter {label}..."

PLACEHOLDERS = {
    FieldType.TEXT: _LABEL_PLACEHOLDER,
    FieldType.EMAIL: "Enter email address...",
    FieldType.PASSWORD: "Enter password...",
    FieldType.NUMBER: "Enter number...",
    FieldType.URL: "https://example.com",
    FieldType.SEARCH: "Search...",
    FieldType.DATE: "Select date...",
    FieldType.DATETIME: "Select date and time...",
    FieldType.TIME: "Select time...",
    FieldType.MONTH: "Select month...",
    FieldType.WEEK: "Select week...",
    FieldType.YEAR: "Select year...",
    FieldType.TEXTAREA: _LABEL_PLACEHOLDER,
    FieldType.RICH_TEXT: _LABEL_PLACEHOLDER,
    FieldType.MARKDOWN: _LABEL_PLACEHOLDER,
    FieldType.SELECT: "Select an option...",
    FieldType.MULTISELECT: "Select options...",
    FieldType.CHECKBOX: "Select options...",
    FieldType.RADIO: "Select an option...",
    FieldType.YESNO: "Select Yes or No",
    FieldType.TOGGLE: "Toggle on/off",
    FieldType.MONEY: "$0.00",
    FieldType.PERCENTAGE: "0%",
    FieldType.CURRENCY: "$0.00",
    FieldType.PHONE: "(555) 123-4567",
    FieldType.ADDRESS: "Enter address...",
    FieldType.COUNTRY: "Select country...",
    FieldType.STATE: "Select state...",
    FieldType.ZIPCODE: "12345",
    FieldType.FILE: "Choose file...",
    FieldType.IMAGE: "Choose image...",
    FieldType.SIGNATURE: "Type your name...",
    FieldType.AUDIO: "Choose audio file...",
    FieldType.VIDEO: "Choose video file...",
    FieldType.RATING: "Rate from 1-5",
    FieldType.SLIDER: "Adjust slider",
    FieldType.RANGE: "Select range",
    FieldType.LIKERT: "Select option",
    FieldType.COLOR: "#000000",
    FieldType.TAGS: "Add tags...",
    FieldType.AUTOCOMPLETE: "Start typing...",
    FieldType.LOCATION: "Enter location...",
    FieldType.MATRIX: "Select options...",
}

FIELD_PROPERTIES = {
    FieldType.RATING: {"rating_max": 5},
    FieldType.SLIDER: {"slider_min": 0, "slider_max": 100, "slider_step": 1},
    FieldType.TEXTAREA: {"textarea_rows": 4},
    FieldType.MONEY: {"currency": "USD"},
    FieldType.CURRENCY: {"currency": "USD"},
    FieldType.PERCENTAGE: {"percentage_decimals": 2},
    FieldType.DATE: {"date_format": "YYYY-MM-DD"},
}


def placeholder_for(field_type: FieldType, label: str) -> str:
    template = PLACEHOLDERS.get(field_type, _LABEL_PLACEHOLDER)
    return template.format(label=label.lower())


def properties_for(field_type: FieldType) -> Dict[str, Any]:
    return dict(FIELD_PROPERTIES.get(field_type, {}))
