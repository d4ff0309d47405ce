"""
Tests for phone number and message validation.
"""

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.validation import validate_phone, validate_message
from domain.errors import InvalidPhoneError, InvalidMessageError


class TestValidatePhone:
    """Test E.164 phone number validation."""

    @pytest.mark.parametrize("phone_number", [
        "+447973631360",       # UK mobile, 12 digits
        "+12025550123",        # 11 digits (minimum)
        "+123456789012345",    # 15 digits (maximum)
        "+919876543210",
    ])
    def test_valid_phone_numbers(self, phone_number):
        """Test valid numbers pass without raising."""
        assert validate_phone(phone_number) is None

    @pytest.mark.parametrize("phone_number", [
        None,                   # missing
        447973631360,           # wrong type
        "ABCDEFGHIJK",          # not digits
        "447973631360",         # missing +
        "+047973631360",        # leading zero
        "+1202555012",          # 10 digits (too short)
        "+1234567890123456",    # 16 digits (too long)
        " +447973631360",       # leading whitespace
        "+447973631360 ",       # trailing whitespace
        "+447973631360\n",      # trailing newline
        "+44 7973 631360",      # internal spaces
        "+４４7973631360",       # non-ASCII digits
        "",
    ])
    def test_invalid_phone_numbers(self, phone_number):
        """Test malformed numbers raise InvalidPhoneError."""
        with pytest.raises(InvalidPhoneError, match="^Please enter a valid mobile number$"):
            validate_phone(phone_number)


class TestValidateMessage:
    """Test message length validation."""

    @pytest.mark.parametrize("message", [
        "a" * 5,
        "a" * 200,
        "Thank you for using our service.",
    ])
    def test_valid_messages(self, message):
        """Test messages of 5-200 characters pass."""
        assert validate_message(message) is None

    @pytest.mark.parametrize("message", [
        None,           # missing
        12345,          # wrong type
        "",
        "ABC",
        "a" * 4,
        "a" * 201,
        "a" * 300,
    ])
    def test_invalid_messages(self, message):
        """Test out-of-bounds messages raise InvalidMessageError."""
        with pytest.raises(InvalidMessageError, match="between 5 - 200 characters"):
            validate_message(message)

    def test_length_counts_code_points(self):
        """Test non-ASCII characters count once each."""
        assert validate_message("é" * 200) is None
        assert validate_message("😀" * 5) is None

        with pytest.raises(InvalidMessageError):
            validate_message("😀" * 201)
