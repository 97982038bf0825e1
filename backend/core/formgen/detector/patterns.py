# detector/patterns.py
"""
Value patterns shared by detection rules and validation suggestions.
"""

import re
from datetime import datetime

EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
URL_PATTERN = r'^(https?://|www\.)\S+$'
PHONE_PATTERN = r'^\+?[\d\s\-\(\)\.]{7,20}$'
ZIPCODE_PATTERN = r'^\d{5}(-\d{4})?$'
NUMBER_PATTERN = r'^[-+]?(\d+(\.\d*)?|\.\d+)$'
MONEY_PATTERN = r'^-?[\$€£]?\s?-?(\d{1,3}(,\d{3})+|\d+)(\.\d{1,2})?$'
PERCENTAGE_PATTERN = r'^-?\d+(\.\d+)?\s?%$'
ADDRESS_PATTERN = (
    r'^\d+[A-Za-z]?\s+[\w\s\.\']+?\s'
    r'(st|street|ave|avenue|rd|road|blvd|boulevard|ln|lane|dr|drive|ct|court|way|pl|place|'
    r'ter|terrace|pkwy|parkway|hwy|highway|cir|circle)\b\.?.*$'
)

EMAIL_RE = re.compile(EMAIL_PATTERN)
URL_RE = re.compile(URL_PATTERN, re.IGNORECASE)
PHONE_RE = re.compile(PHONE_PATTERN)
ZIPCODE_RE = re.compile(ZIPCODE_PATTERN)
NUMBER_RE = re.compile(NUMBER_PATTERN)
MONEY_RE = re.compile(MONEY_PATTERN)
PERCENTAGE_RE = re.compile(PERCENTAGE_PATTERN)
ADDRESS_RE = re.compile(ADDRESS_PATTERN, re.IGNORECASE)

# Phone numbers carry between 7 and 15 digits (E.164 upper bound)
PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 15

BOOLEAN_VALUES = {"yes", "no", "y", "n", "true", "false"}

DATE_FORMATS = [
    "%Y-%m-%d", "%Y/%m/%d",
    "%m/%d/%Y", "%d/%m/%Y",
    "%m-%d-%Y", "%d-%m-%Y",
    "%d.%m.%Y",
    "%b %d, %Y", "%B %d, %Y",
    "%d %b %Y", "%d %B %Y",
    "%Y-%m-%d %H:%M:%S", "%Y-%m-%dT%H:%M:%S",
    "%m/%d/%Y %H:%M", "%d/%m/%Y %H:%M",
]


def is_number(value: str) -> bool:
    if not NUMBER_RE.match(value):
        return False
    try:
        float(value)
        return True
    except ValueError:
        return False


def is_date(value: str) -> bool:
    for fmt in DATE_FORMATS:
        try:
            datetime.strptime(value, fmt)
            return True
        except ValueError:
            continue
    return False


def is_phone(value: str) -> bool:
    if not PHONE_RE.match(value):
        return False
    digits = sum(1 for ch in value if ch.isdigit())
    return PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS


def is_boolean(value: str) -> bool:
    return value.lower() in BOOLEAN_VALUES
