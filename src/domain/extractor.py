"""
Message extraction from queued SNS notifications.

The ingress publishes to an SNS topic, which wraps the user payload in a
notification envelope before delivering it to SQS. Extraction therefore
parses twice:
1. SQS record body -> SNS envelope (must be a JSON object)
2. Envelope 'Message' -> inner payload with phoneNumber and message

Malformed JSON in either layer raises StructureError; JSON errors never
escape raw. An inner payload that is not an object yields no fields.
"""

import json
import logging
from typing import Any, Dict, List

from .errors import StructureError
from .models import SmsRequest

logger = logging.getLogger(__name__)


def extract_sms_request(records: List[Dict[str, Any]]) -> SmsRequest:
    """
    Extract the SMS request from a batch of exactly one SQS record.

    Args:
        records: The 'Records' list from the SQS event

    Returns:
        SmsRequest: Unvalidated phone number and message

    Raises:
        StructureError: If the batch, envelope or payload is malformed
    """
    if not isinstance(records, list) or len(records) != 1:
        count = len(records) if isinstance(records, list) else type(records).__name__
        logger.warning(f"Expected exactly 1 record, got {count}")
        raise StructureError()

    record = records[0]
    if not isinstance(record, dict):
        logger.warning(f"SQS record is not an object: {type(record).__name__}")
        raise StructureError()

    envelope = parse_envelope(record.get('body'))
    payload = parse_payload(envelope)

    return SmsRequest.from_payload(payload)


def parse_envelope(body: Any) -> Dict[str, Any]:
    """
    Parse the SQS record body into the SNS notification envelope.

    Raises:
        StructureError: If body is not a string holding a JSON object
    """
    return _load_json_object(body, 'SQS record body')


def parse_payload(envelope: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the envelope's 'Message' field into the inner SMS payload.

    A payload that is valid JSON but not an object (array, string, number,
    boolean) carries no phoneNumber or message, so it is returned as an
    empty dict and left for field validation to reject.

    Raises:
        StructureError: If 'Message' is missing or empty, is not valid JSON,
            or holds JSON null
    """
    message = envelope.get('Message')
    if not message:
        logger.warning("Notification envelope has no 'Message' field")
        raise StructureError()

    label = "envelope 'Message'"
    if isinstance(message, str):
        payload = _load_json(message, label)
    elif isinstance(message, (int, float)):
        # Numbers and true already are their own JSON value
        payload = message
    else:
        logger.warning(f"{label} is not a string: {type(message).__name__}")
        raise StructureError()

    if payload is None:
        logger.warning(f"{label} is JSON null")
        raise StructureError()

    if not isinstance(payload, dict):
        logger.warning(f"{label} is not a JSON object: {type(payload).__name__}")
        return {}

    return payload


def _load_json_object(raw: Any, label: str) -> Dict[str, Any]:
    if not isinstance(raw, str):
        logger.warning(f"{label} is not a string: {type(raw).__name__}")
        raise StructureError()

    parsed = _load_json(raw, label)
    if not isinstance(parsed, dict):
        logger.warning(f"{label} is not a JSON object: {type(parsed).__name__}")
        raise StructureError()

    return parsed


def _load_json(raw: str, label: str) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.warning(f"{label} is not valid JSON: {e}")
        raise StructureError() from e
