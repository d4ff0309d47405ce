"""
Domain errors for the SMS pipeline.

Every failure surfaced to the caller is one of these classes. Each carries a
single fixed, user-facing message so transport or parsing detail never leaks
out of an invocation.
"""


class SmsPipelineError(Exception):
    """Base class for all user-facing SMS pipeline failures."""

    message = "Error sending message, please try again."

    def __init__(self):
        super().__init__(self.message)


class StructureError(SmsPipelineError):
    """Raised when the queued batch, envelope or payload is malformed."""

    message = "Please enter a valid mobile number and message"


class InvalidPhoneError(SmsPipelineError):
    """Raised when the phone number is missing or not E.164 formatted."""

    message = "Please enter a valid mobile number"


class InvalidMessageError(SmsPipelineError):
    """Raised when the message text is missing or out of length bounds."""

    message = "Please enter a message between 5 - 200 characters"


class DeliveryError(SmsPipelineError):
    """Raised when the delivery channel fails for any reason."""

    message = "Error sending message, please try again."
