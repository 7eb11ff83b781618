"""
Per-SMS pipeline used by the mobile app before syncing to the backend:
relevance check, parse, then build the sync request payload.
Sending the payload is left to the caller.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from .exceptions import DeviceNotRegisteredError, SmsRejectedError
from .models import ParsedTransaction
from .sms_parser import is_relevant, parse_or_raise

logger = logging.getLogger(__name__)


def build_sync_request(device_id: str, message: str, parsed: ParsedTransaction,
                       timestamp: datetime = None) -> Dict:
    """Map a parsed transaction into the SMS sync request schema"""
    if timestamp is None:
        timestamp = datetime.now(timezone.utc)

    return {
        'device_id': device_id,
        'sender': parsed.counterparty,
        'message': message,
        'amount': parsed.amount,
        'type': parsed.direction.value,
        'timestamp': timestamp.isoformat(),
        'reference': parsed.reference,
        'network': parsed.network.value,
    }


def process_sms(sender: str, message: str, device_id: Optional[str],
                timestamp: datetime = None) -> Optional[Dict]:
    """
    Parse an incoming SMS and return the sync request, or None when the
    message is skipped or rejected
    """
    if not is_relevant(sender, message):
        logger.info(f"Not a Mobile Money message from {sender!r}, skipping")
        return None

    try:
        parsed = parse_or_raise(sender, message)
    except SmsRejectedError as e:
        logger.error(f"Failed to parse SMS from {sender!r}: {e.reason.value}")
        return None

    if not device_id:
        raise DeviceNotRegisteredError("Device not registered. Please register your device first.")

    logger.info(f"{parsed.direction.value} of {parsed.amount:,.0f} on {parsed.network.value} ready to sync")
    return build_sync_request(device_id, message, parsed, timestamp)
