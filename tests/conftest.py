"""
Pytest configuration and fixtures for all tests.
"""

import json
import os
import sys
import pytest
from unittest.mock import Mock

# Add src and hooks to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../hooks'))

# Set up test environment variables before importing any modules
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.setdefault('TARGET_FUNCTION', 'send-sms-test:live')


def make_sqs_event(payload=None, body=None):
    """Build a single-record SQS event wrapping payload in an SNS envelope."""
    if body is None:
        body = json.dumps({
            'Type': 'Notification',
            'TopicArn': 'arn:aws:sns:us-east-1:123456789012:api-topic',
            'Message': json.dumps(payload if payload is not None else {})
        })
    return {
        'Records': [{
            'messageId': '19dd0b57-b21e-4ac1-bd88-01bbb068cb78',
            'receiptHandle': 'MessageReceiptHandle',
            'body': body,
            'eventSource': 'aws:sqs',
            'eventSourceARN': 'arn:aws:sqs:us-east-1:123456789012:lambda-queue',
            'awsRegion': 'us-east-1'
        }]
    }


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables for all tests."""
    # Environment variables are already set above
    yield


@pytest.fixture
def valid_payload():
    """Phone number and message that pass validation."""
    return {
        'phoneNumber': '+447973631360',
        'message': 'Thank you for using our service.'
    }


@pytest.fixture
def make_event():
    """Factory for single-record SQS events."""
    return make_sqs_event


@pytest.fixture
def mock_context():
    """Mock Lambda context."""
    context = Mock()
    context.aws_request_id = "test-request-id"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:send-sms-test"
    context.function_name = "send-sms-test"
    return context
