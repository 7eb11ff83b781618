"""
SMS Parser for Uganda Mobile Money Transactions (MTN, Airtel)
Uses ordered regex patterns and string matching, first match wins at every step

Example messages:
- "You have received UGX 150,000 from John Okello. Your new balance is UGX 350,000. Ref: MTN123456"
- "You have successfully sent UGX 75,000 to +256700987654. Balance: UGX 225,000. Txn: AT111222"
"""

import re
import math
import logging
from typing import List, Optional, Tuple, Union
from unidecode import unidecode

from .config import config
from .exceptions import SmsRejectedError
from .models import Direction, Network, ParsedTransaction, Rejection

logger = logging.getLogger(__name__)

ParseResult = Union[ParsedTransaction, Rejection]

# Capitalized word, Latin-1 accented letters included (e.g. "José", "Müller")
NAME_WORD = r'[A-ZÀ-ÖØ-Þ][a-zß-öø-ÿ]+'


class SMSParser:
    def __init__(self, currency_code: str = None):
        self.currency_code = (currency_code or config.CURRENCY_CODE).upper()
        currency = re.escape(self.currency_code)

        # Sender labels used by the MoMo services
        self.known_senders = ['mtn', 'airtel', 'mobile money']

        # Body keywords, deliberately broad
        self.keywords = [
            self.currency_code.lower(), 'received', 'sent', 'paid', 'withdrawn',
            'mobile money', 'transaction',
        ]

        # Checked in order, MTN wins when both appear
        self.networks: List[Tuple[str, Network]] = [
            ('mtn', Network.MTN),
            ('airtel', Network.AIRTEL),
        ]

        self.cash_in_keywords = ['received', 'receive', 'deposited', 'deposit', 'credited']
        self.cash_out_keywords = [
            'sent', 'send', 'paid', 'pay', 'withdrawn', 'withdraw',
            'debited', 'transferred', 'transfer',
        ]

        self.patterns = {
            'amount': [
                re.compile(currency + r'\s+([\d,]+)', re.IGNORECASE),
                re.compile(currency + r'([\d,]+)', re.IGNORECASE),
                re.compile(r'([\d,]+)\s+' + currency, re.IGNORECASE),
                re.compile(r'([\d,]+)' + currency, re.IGNORECASE),
            ],
            # Labels are case-insensitive, the code itself is uppercase letters and digits
            'reference': [
                re.compile(r'(?i:\b(?:reference|ref))[\s:]*([A-Z0-9]+)'),
                re.compile(r'(?i:\b(?:transaction|txn)(?:\s*id)?)[\s:]*([A-Z0-9]+)'),
                re.compile(r'(?i:\bid)[\s:]*([A-Z0-9]+)'),
            ],
            'name': [
                re.compile(r'\b(?:from|to)\s+(' + NAME_WORD + r'(?:\s+' + NAME_WORD + r')?)'),
                re.compile(r'\b(?:from|to)\s+(' + NAME_WORD + r'\s+' + NAME_WORD + r')'),
            ],
            'phone': [
                re.compile(r'\b(?:from|to)\s*(\+?\d{10,13})', re.IGNORECASE),
            ],
        }

    def is_relevant(self, sender: str, body: str) -> bool:
        """Loose filter for Mobile Money notifications"""
        sender_lower = (sender or '').lower()
        body_lower = (body or '').lower()

        has_sender = any(s in sender_lower for s in self.known_senders)
        has_keywords = any(k in body_lower for k in self.keywords)

        return has_sender or has_keywords

    def clean_amount(self, amount_str: str) -> Optional[float]:
        """Convert amount string to a finite positive float"""
        # Remove thousands separators
        cleaned = amount_str.replace(',', '')
        try:
            amount = float(cleaned)
        except ValueError:
            return None

        if not math.isfinite(amount) or amount <= 0:
            return None
        return amount

    def clean_name(self, name: str) -> str:
        """Collapse whitespace and transliterate to ASCII"""
        cleaned = re.sub(r'\s+', ' ', name.strip())
        return unidecode(cleaned)

    def extract_network(self, text: str) -> Optional[Network]:
        text_lower = text.lower()
        for keyword, network in self.networks:
            if keyword in text_lower:
                return network
        return None

    def extract_amount(self, text: str) -> Optional[float]:
        """Only the first matching pattern is considered"""
        for pattern in self.patterns['amount']:
            match = pattern.search(text)
            if match:
                return self.clean_amount(match.group(1))
        return None

    def extract_direction(self, text: str) -> Direction:
        text_lower = text.lower()

        # Cash In takes precedence over Cash Out
        if any(keyword in text_lower for keyword in self.cash_in_keywords):
            return Direction.CASH_IN

        if any(keyword in text_lower for keyword in self.cash_out_keywords):
            return Direction.CASH_OUT

        # Default to Cash In if unclear
        return Direction.CASH_IN

    def extract_reference(self, text: str) -> Optional[str]:
        """Handles formats like: "Ref: MTN123456", "Txn: AT111222", "Txn ID: AT987654" """
        for pattern in self.patterns['reference']:
            match = pattern.search(text)
            if match:
                return match.group(1)
        return None

    def extract_counterparty(self, text: str) -> Optional[str]:
        """Name after from/to, then a phone number after from/to"""
        for pattern in self.patterns['name']:
            match = pattern.search(text)
            if match:
                return self.clean_name(match.group(1))

        for pattern in self.patterns['phone']:
            match = pattern.search(text)
            if match:
                return match.group(1)

        return None

    def parse(self, sender: str, body: str) -> ParseResult:
        """
        Main parsing function, returns a ParsedTransaction or the Rejection reason
        """
        sender = sender or ''
        body = body or ''

        # The Airtel sender label is often the only place the carrier is named
        network = self.extract_network(body) or self.extract_network(sender)
        if network is None:
            logger.debug(f"Rejected SMS from {sender!r}: no network detected")
            return Rejection.NO_NETWORK_DETECTED

        amount = self.extract_amount(body)
        if amount is None:
            logger.debug(f"Rejected SMS from {sender!r}: no valid amount")
            return Rejection.NO_VALID_AMOUNT

        return ParsedTransaction(
            amount=amount,
            direction=self.extract_direction(body),
            network=network,
            counterparty=self.extract_counterparty(body) or sender,
            reference=self.extract_reference(body),
        )


# Global parser instance
_parser = SMSParser()


def is_relevant(sender: str, body: str) -> bool:
    """
    Public function to check whether an SMS is a Mobile Money notification
    """
    return _parser.is_relevant(sender, body)


def parse(sender: str, body: str) -> ParseResult:
    """
    Public function to parse SMS text
    """
    return _parser.parse(sender, body)


def parse_or_raise(sender: str, body: str) -> ParsedTransaction:
    result = _parser.parse(sender, body)
    if isinstance(result, Rejection):
        raise SmsRejectedError(result)
    return result
