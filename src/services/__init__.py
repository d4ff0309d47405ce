"""
AWS service functions for Lambda handler operations.

This package contains the SNS delivery channel used by the SMS pipeline.
"""

__all__ = ['sns']
