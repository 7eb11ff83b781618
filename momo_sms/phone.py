import re
from typing import Optional

from .config import config

# Ugandan mobile numbers: optional +256 or 0 prefix, then 7XX / 3XX and 8 digits
VALID_PHONE_PATTERN = re.compile(r'^(\+256|0)?[37]\d{8}$')


def normalize(raw: Optional[str], country_code: str = None) -> str:
    """Standardize phone number to international format (+256...)"""
    country_code = country_code or config.COUNTRY_CODE

    # Remove all non-digits
    digits = re.sub(r'\D', '', raw or '')

    if digits.startswith('0'):
        return '+' + country_code + digits[1:]
    elif digits.startswith(country_code):
        return '+' + digits
    elif len(digits) == 9:
        return '+' + country_code + digits

    # May be malformed, left for the caller to judge
    return '+' + digits


def is_valid_phone(raw: Optional[str]) -> bool:
    """Check a user-entered number looks like a Ugandan mobile number"""
    if not raw:
        return False
    return bool(VALID_PHONE_PATTERN.match(raw.strip()))
