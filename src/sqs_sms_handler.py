"""
AWS Lambda handler for sending SMS messages queued in SQS.

Thin orchestration layer that delegates to SmsProcessor.
Policy: The SQS event source uses a batch size of 1. Success returns the
SNS publish response; any failure raises, so the message is left on the
queue for redelivery under the queue's own retry policy.
"""

import json
import logging
import os
from typing import Dict, Any

from domain.sms_processor import SmsProcessor
from services import sns as sns_service

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Configure logging
logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)

# Add console handler for local testing (AWS Lambda provides handlers automatically)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Initialize processor once at module level (reused across invocations)
sms_processor = SmsProcessor()


def lambda_handler(event: Dict[str, Any], context: Any) -> Any:
    """
    Validate one queued SMS request and publish it through SNS.

    Args:
        event: Lambda event with SQS records (exactly one expected)
        context: Lambda context

    Returns:
        The SNS publish response

    Raises:
        SmsPipelineError: With a user-facing message; fails the invocation
    """
    records = event.get('Records')
    request_id = getattr(context, 'aws_request_id', 'UNKNOWN')
    batch_size = len(records) if isinstance(records, list) else 0

    logger.info(f"Environment: {ENVIRONMENT}, request: {request_id}")
    logger.info(f"Processing batch of {batch_size} message(s)")

    if batch_size == 1 and isinstance(records[0], dict):
        logger.info(f"SQS message: {records[0].get('messageId', 'UNKNOWN')}")

    result = sms_processor.process(records)

    logger.info("SMS handed to delivery channel")
    return result


def health_check(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Simple health check endpoint for monitoring.
    """
    return {
        'statusCode': 200,
        'body': json.dumps({
            'status': 'healthy',
            'environment': ENVIRONMENT,
            'smsType': sns_service.SMS_TYPE or None,
            'senderIdConfigured': sns_service.is_configured_for_sender_id()
        })
    }
