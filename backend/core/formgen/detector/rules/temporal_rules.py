# detector/rules/temporal_rules.py
"""
Rule: parseable dates.
"""

from .base_rule import ValueMatchRule
from ..models import FieldType
from ..patterns import is_date


class DateRule(ValueMatchRule):
    label = "dates"

    def __init__(self):
        super().__init__(
            rule_id="date",
            description="Values that parse with a known date format"
        )

    @property
    def field_type(self):
        return FieldType.DATE

    def matches(self, value: str) -> bool:
        return is_date(value)
