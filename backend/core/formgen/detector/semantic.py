# detector/semantic.py
"""
Header-name hints: keywords in a column name that suggest a field type.
"""

import re
from typing import List, Optional, Tuple

from .models import FieldType

# Keyword -> hinted type. The first keyword found in the header wins.
SEMANTIC_HINTS = {
    "email": FieldType.EMAIL,
    "mail": FieldType.EMAIL,
    "phone": FieldType.PHONE,
    "telephone": FieldType.PHONE,
    "mobile": FieldType.PHONE,
    "cell": FieldType.PHONE,
    "tel": FieldType.PHONE,
    "website": FieldType.URL,
    "url": FieldType.URL,
    "homepage": FieldType.URL,
    "link": FieldType.URL,
    "zip": FieldType.ZIPCODE,
    "zipcode": FieldType.ZIPCODE,
    "postal": FieldType.ZIPCODE,
    "postcode": FieldType.ZIPCODE,
    "address": FieldType.ADDRESS,
    "street": FieldType.ADDRESS,
    "country": FieldType.COUNTRY,
    "state": FieldType.STATE,
    "province": FieldType.STATE,
    "price": FieldType.MONEY,
    "cost": FieldType.MONEY,
    "amount": FieldType.MONEY,
    "salary": FieldType.MONEY,
    "budget": FieldType.MONEY,
    "fee": FieldType.MONEY,
    "percent": FieldType.PERCENTAGE,
    "percentage": FieldType.PERCENTAGE,
    "pct": FieldType.PERCENTAGE,
    "birthday": FieldType.DATE,
    "dob": FieldType.DATE,
    "date": FieldType.DATE,
    "time": FieldType.TIME,
    "description": FieldType.TEXTAREA,
    "comment": FieldType.TEXTAREA,
    "comments": FieldType.TEXTAREA,
    "note": FieldType.TEXTAREA,
    "notes": FieldType.TEXTAREA,
    "message": FieldType.TEXTAREA,
    "feedback": FieldType.TEXTAREA,
    "bio": FieldType.TEXTAREA,
    "rating": FieldType.RATING,
    "signature": FieldType.SIGNATURE,
    "photo": FieldType.IMAGE,
    "image": FieldType.IMAGE,
    "avatar": FieldType.IMAGE,
    "picture": FieldType.IMAGE,
    "attachment": FieldType.FILE,
    "resume": FieldType.FILE,
    "file": FieldType.FILE,
    "color": FieldType.COLOR,
    "colour": FieldType.COLOR,
    "tags": FieldType.TAGS,
    "location": FieldType.LOCATION,
    "password": FieldType.PASSWORD,
}

_CAMEL_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')
_SEPARATORS = re.compile(r'[^A-Za-z0-9]+')


def header_tokens(column_name: str) -> List[str]:
    """Splits 'homePhone', 'home_phone' or 'Home Phone' into ['home', 'phone']."""
    spaced = _CAMEL_BOUNDARY.sub(" ", column_name or "")
    return [token.lower() for token in _SEPARATORS.split(spaced) if token]


def semantic_hint(column_name: str) -> Optional[Tuple[FieldType, str]]:
    """
    Type hinted by the column name.

    Returns:
        (field_type, keyword) or None when no keyword matches
    """
    tokens = header_tokens(column_name)
    if not tokens:
        return None

    joined = "".join(tokens)
    if joined in SEMANTIC_HINTS:
        return SEMANTIC_HINTS[joined], joined

    present = set(tokens)
    for keyword, field_type in SEMANTIC_HINTS.items():
        if keyword in present:
            return field_type, keyword

    return None
