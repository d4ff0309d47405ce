"""
Dispatch of validated SMS requests to the delivery channel.
"""

import logging
import time
from typing import Any, Callable

from .errors import DeliveryError
from .models import DispatchResult, SmsRequest

logger = logging.getLogger(__name__)

# publish(destination, body) -> channel response
Publisher = Callable[[str, str], Any]


def dispatch(request: SmsRequest, publisher: Publisher) -> DispatchResult:
    """
    Send a validated request through the delivery channel.

    The publisher is called exactly once; no retries. Any failure is logged
    with its traceback and replaced with DeliveryError, so transport detail
    is not exposed to the caller.

    Args:
        request: Request that has passed phone and message validation
        publisher: Delivery channel capability, publish(destination, body)

    Returns:
        The publisher's result, unmodified

    Raises:
        DeliveryError: If the publisher raises anything
    """
    logger.info(f"Dispatching SMS to {request.masked_phone_number}")
    start_time = time.time()

    try:
        result = publisher(request.phone_number, request.message)
    except Exception as e:
        logger.error(
            f"Delivery failed for {request.masked_phone_number}: "
            f"{type(e).__name__}: {e}",
            exc_info=True
        )
        raise DeliveryError() from None

    logger.info(f"Dispatch completed: {time.time() - start_time:.3f}s")
    return result
