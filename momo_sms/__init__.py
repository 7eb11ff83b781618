from .models import Direction, Network, ParsedTransaction, Rejection
from .phone import is_valid_phone, normalize
from .sms_parser import SMSParser, is_relevant, parse, parse_or_raise

__all__ = [
    'Direction',
    'Network',
    'ParsedTransaction',
    'Rejection',
    'SMSParser',
    'is_relevant',
    'is_valid_phone',
    'normalize',
    'parse',
    'parse_or_raise',
]
