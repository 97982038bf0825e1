# detector/rules/numeric_rules.py
"""
Rules: numeric types (number, money, percentage).
"""

from .base_rule import ValueMatchRule
from ..models import FieldType
from ..patterns import MONEY_RE, PERCENTAGE_RE, is_number


class NumberRule(ValueMatchRule):
    """Plain integers and decimals, no thousands separators nor symbols."""
    label = "numbers"

    def __init__(self):
        super().__init__(
            rule_id="number",
            description="Values that parse as numbers"
        )

    @property
    def field_type(self):
        return FieldType.NUMBER

    def matches(self, value: str) -> bool:
        return is_number(value)


class MoneyRule(ValueMatchRule):
    label = "money amounts"

    def __init__(self):
        super().__init__(
            rule_id="money",
            description="Amounts with optional currency symbol and thousands separators"
        )

    @property
    def field_type(self):
        return FieldType.MONEY

    def matches(self, value: str) -> bool:
        return bool(MONEY_RE.match(value))


class PercentageRule(ValueMatchRule):
    label = "percentages"

    def __init__(self):
        super().__init__(
            rule_id="percentage",
            description="Numbers followed by a percent sign"
        )

    @property
    def field_type(self):
        return FieldType.PERCENTAGE

    def matches(self, value: str) -> bool:
        return bool(PERCENTAGE_RE.match(value))
