"""
Data models for the SMS dispatch domain.
"""

from dataclasses import dataclass
from typing import Any, Dict

# Publish response from the delivery channel, passed through as-is
DispatchResult = Any


@dataclass(frozen=True)
class SmsRequest:
    """
    Phone number and message extracted from a queued notification.

    Values are held exactly as they appeared in the payload. They are not
    typed or checked until validation runs.

    Attributes:
        phone_number: Destination number (expected E.164, e.g. "+447973631360")
        message: SMS text body
    """
    phone_number: Any
    message: Any

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'SmsRequest':
        """Build a request from the inner JSON payload (missing keys become None)."""
        return cls(
            phone_number=payload.get('phoneNumber'),
            message=payload.get('message')
        )

    @property
    def masked_phone_number(self) -> str:
        """Phone number with all but the last four characters hidden, for logs."""
        if not isinstance(self.phone_number, str):
            return f"<{type(self.phone_number).__name__}>"
        visible = self.phone_number[-4:]
        return '*' * (len(self.phone_number) - len(visible)) + visible

    def __repr__(self) -> str:
        """Log-safe representation (no full number, no message body)."""
        length = len(self.message) if isinstance(self.message, str) else None
        return f"SmsRequest(phone_number={self.masked_phone_number}, message_length={length})"
