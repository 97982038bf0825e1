# detector/rules/pattern_rules.py
"""
Rules: regex-based contact types (email, url, phone, zipcode, address).
"""

from .base_rule import ValueMatchRule
from ..models import FieldType
from ..patterns import EMAIL_RE, URL_RE, ZIPCODE_RE, ADDRESS_RE, is_phone


class EmailRule(ValueMatchRule):
    label = "email addresses"

    def __init__(self):
        super().__init__(
            rule_id="email",
            description="Values shaped like local@domain.tld"
        )

    @property
    def field_type(self):
        return FieldType.EMAIL

    def matches(self, value: str) -> bool:
        return bool(EMAIL_RE.match(value))


class UrlRule(ValueMatchRule):
    label = "URLs"

    def __init__(self):
        super().__init__(
            rule_id="url",
            description="Values starting with http://, https:// or www."
        )

    @property
    def field_type(self):
        return FieldType.URL

    def matches(self, value: str) -> bool:
        return bool(URL_RE.match(value))


class PhoneRule(ValueMatchRule):
    label = "phone numbers"

    def __init__(self):
        super().__init__(
            rule_id="phone",
            description="Digits with phone separators, 7 to 15 digits long"
        )

    @property
    def field_type(self):
        return FieldType.PHONE

    def matches(self, value: str) -> bool:
        return is_phone(value)


class ZipcodeRule(ValueMatchRule):
    label = "postal codes"

    def __init__(self):
        super().__init__(
            rule_id="zipcode",
            description="US ZIP or ZIP+4 codes"
        )

    @property
    def field_type(self):
        return FieldType.ZIPCODE

    def matches(self, value: str) -> bool:
        return bool(ZIPCODE_RE.match(value))


class AddressRule(ValueMatchRule):
    label = "street addresses"

    def __init__(self):
        super().__init__(
            rule_id="address",
            description="House number followed by a street name and suffix"
        )

    @property
    def field_type(self):
        return FieldType.ADDRESS

    def matches(self, value: str) -> bool:
        return bool(ADDRESS_RE.match(value))
