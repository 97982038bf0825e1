# detector/rules/__init__.py
"""
Exports every detection rule.
"""

from .base_rule import BaseRule, ValueMatchRule
from .choice_rules import YesNoRule, SelectRule
from .numeric_rules import NumberRule, MoneyRule, PercentageRule
from .pattern_rules import EmailRule, UrlRule, PhoneRule, ZipcodeRule, AddressRule
from .temporal_rules import DateRule
from .text_rules import TextareaRule

# Every available rule, in tie-break priority order (first wins)
ALL_RULES = {
    "yesno": YesNoRule,
    "number": NumberRule,
    "select": SelectRule,
    "email": EmailRule,
    "url": UrlRule,
    "date": DateRule,
    "zipcode": ZipcodeRule,
    "phone": PhoneRule,
    "money": MoneyRule,
    "percentage": PercentageRule,
    "address": AddressRule,
    "textarea": TextareaRule
}

__all__ = [
    'BaseRule',
    'ValueMatchRule',
    'YesNoRule',
    'SelectRule',
    'NumberRule',
    'MoneyRule',
    'PercentageRule',
    'EmailRule',
    'UrlRule',
    'PhoneRule',
    'ZipcodeRule',
    'AddressRule',
    'DateRule',
    'TextareaRule',
    'ALL_RULES'
]
