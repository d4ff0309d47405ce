"""
SMS processing pipeline - core business logic.

Handles exactly one queued SMS request per invocation:
1. Extract the request from the SQS record (two-layer JSON)
2. Validate the phone number
3. Validate the message text
4. Dispatch to the delivery channel
5. Return the channel's result

Each step short-circuits by raising an SmsPipelineError. Nothing is
committed before dispatch, so there is nothing to roll back on failure.
"""

import logging
from typing import Any, Dict, List, Optional

from .dispatcher import Publisher, dispatch
from .errors import SmsPipelineError
from .extractor import extract_sms_request
from .models import DispatchResult
from .validation import validate_message, validate_phone
from services import sns as sns_service

logger = logging.getLogger(__name__)


class SmsProcessor:
    """
    Runs the extract -> validate -> dispatch pipeline for one SQS batch.

    Holds no state between calls apart from the publisher it was built with.
    """

    def __init__(self, publisher: Optional[Publisher] = None):
        """
        Initialize SMS processor.

        Args:
            publisher: Delivery channel capability. Defaults to SNS direct publish.
        """
        self._publisher = publisher or sns_service.publish_sms

    def process(self, records: List[Dict[str, Any]]) -> DispatchResult:
        """
        Process a batch containing a single SQS record.

        Args:
            records: The 'Records' list from the SQS event

        Returns:
            The delivery channel's result

        Raises:
            StructureError: Batch or notification is malformed
            InvalidPhoneError: Phone number missing or invalid
            InvalidMessageError: Message missing or out of bounds
            DeliveryError: Delivery channel failed
        """
        try:
            request = extract_sms_request(records)
            logger.info(f"Extracted: {request!r}")

            validate_phone(request.phone_number)
            validate_message(request.message)

            result = dispatch(request, self._publisher)

        except SmsPipelineError as e:
            logger.warning(f"SMS rejected ({type(e).__name__}): {e}")
            raise

        logger.info(f"SMS accepted for delivery: {request.masked_phone_number}")
        return result
