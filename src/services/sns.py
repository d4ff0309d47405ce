"""
SNS operations for SMS delivery.

This module publishes SMS messages directly to phone numbers through
Amazon SNS. It is the delivery channel behind the dispatcher.
"""

import logging
import os
from typing import Any, Dict

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

VALID_SMS_TYPES = ('Transactional', 'Promotional')

# Optional delivery settings from environment
SMS_TYPE = os.environ.get('SMS_TYPE', '')
SMS_SENDER_ID = os.environ.get('SMS_SENDER_ID', '')

# Configure SNS client with timeouts; redelivery is left to the queue
sns_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,  # 10 seconds to establish connection
    read_timeout=30      # 30 seconds max for reading response
)

region = os.environ.get('AWS_REGION', os.environ.get('AWS_DEFAULT_REGION', 'us-east-1'))

# Initialize SNS client at module level (thread-safe, reused across invocations)
sns_client = boto3.client('sns', region_name=region, config=sns_config)
logger.info(f"SNS client initialized: region={region}, connect=10s, read=30s, max_attempts=1")


def is_configured_for_sender_id() -> bool:
    """Check if a sender ID is configured for outgoing SMS."""
    return bool(SMS_SENDER_ID)


def message_attributes() -> Dict[str, Dict[str, str]]:
    """
    Build SNS SMS message attributes from configuration.

    Returns:
        Dict of MessageAttributes (empty if nothing is configured)
    """
    attributes = {}

    if SMS_TYPE:
        if SMS_TYPE in VALID_SMS_TYPES:
            attributes['AWS.SNS.SMS.SMSType'] = {
                'DataType': 'String',
                'StringValue': SMS_TYPE
            }
        else:
            logger.warning(f"Ignoring unsupported SMS_TYPE: {SMS_TYPE}")

    if is_configured_for_sender_id():
        attributes['AWS.SNS.SMS.SenderID'] = {
            'DataType': 'String',
            'StringValue': SMS_SENDER_ID
        }

    return attributes


def publish_sms(phone_number: str, message: str) -> Dict[str, Any]:
    """
    Publish an SMS message directly to a phone number.

    Args:
        phone_number: E.164 destination number
        message: SMS text body

    Returns:
        Dict: The SNS publish response (includes 'MessageId')

    Raises:
        ClientError: If the SNS publish call fails
        BotoCoreError: On connection or timeout failures

    Example:
        >>> response = publish_sms("+447973631360", "Thank you for using our service.")
        >>> response['MessageId']
        '6f3b5c1e-...'
    """
    params = {
        'PhoneNumber': phone_number,
        'Message': message,
    }
    attributes = message_attributes()
    if attributes:
        params['MessageAttributes'] = attributes

    try:
        response = sns_client.publish(**params)
        logger.info(f"Published SMS: message_id={response.get('MessageId')}")
        return response

    except ClientError as e:
        error_code = e.response.get('Error', {}).get('Code', 'Unknown')
        error_message = e.response.get('Error', {}).get('Message', str(e))

        logger.error(
            f"Failed to publish SMS: "
            f"error_code={error_code}, error_message={error_message}"
        )
        raise
    except Exception as e:
        logger.error(f"Failed to publish SMS: {type(e).__name__}: {e}")
        raise
