from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Network(str, Enum):
    MTN = 'MTN'
    AIRTEL = 'AIRTEL'


class Direction(str, Enum):
    CASH_IN = 'Cash In'
    CASH_OUT = 'Cash Out'


class Rejection(str, Enum):
    """Reasons a message is refused by the parser"""
    NO_NETWORK_DETECTED = 'NoNetworkDetected'
    NO_VALID_AMOUNT = 'NoValidAmount'


@dataclass(frozen=True)
class ParsedTransaction:
    amount: float
    direction: Direction
    network: Network
    counterparty: str
    reference: Optional[str] = None

    def to_dict(self) -> Dict:
        """Plain dict using the labels the mobile app syncs with"""
        return {
            'amount': self.amount,
            'type': self.direction.value,
            'reference': self.reference,
            'network': self.network.value,
            'sender': self.counterparty,
        }
