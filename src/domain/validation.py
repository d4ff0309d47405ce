"""
Field validation for SMS requests.

Pure functions: each returns None on success or raises the matching domain
error. No trimming or normalization is applied to the checked value.
"""

import re
from typing import Any

from .errors import InvalidMessageError, InvalidPhoneError

# "+", a non-zero leading digit, then 10-14 more digits (ASCII only)
PHONE_NUMBER_PATTERN = re.compile(r'\+[1-9][0-9]{10,14}')

MIN_MESSAGE_LENGTH = 5
MAX_MESSAGE_LENGTH = 200


def validate_phone(value: Any) -> None:
    """
    Check that value is an E.164 style phone number.

    Raises:
        InvalidPhoneError: If value is not a string or does not match
            PHONE_NUMBER_PATTERN across the whole string
    """
    if not isinstance(value, str) or not PHONE_NUMBER_PATTERN.fullmatch(value):
        raise InvalidPhoneError()


def validate_message(value: Any) -> None:
    """
    Check that value is a message of 5 to 200 characters.

    Length is counted in code points (len of the str).

    Raises:
        InvalidMessageError: If value is not a string or its length is out of bounds
    """
    if not isinstance(value, str) or not MIN_MESSAGE_LENGTH <= len(value) <= MAX_MESSAGE_LENGTH:
        raise InvalidMessageError()
