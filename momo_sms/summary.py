"""
Dashboard totals over parsed transactions
"""

from typing import Dict, Iterable

import pandas as pd

from .config import config
from .models import Direction, ParsedTransaction

COLUMNS = ['amount', 'type', 'network', 'sender', 'reference']


def to_frame(transactions: Iterable[ParsedTransaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per transaction"""
    rows = [t.to_dict() for t in transactions]
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize(transactions: Iterable[ParsedTransaction]) -> Dict:
    df = to_frame(transactions)

    cash_in = float(df.loc[df['type'] == Direction.CASH_IN.value, 'amount'].sum())
    cash_out = float(df.loc[df['type'] == Direction.CASH_OUT.value, 'amount'].sum())

    return {
        'cash_in': cash_in,
        'cash_out': cash_out,
        'balance': cash_in - cash_out,
        'count': len(df),
    }


def format_amount(amount: float, currency: str = None) -> str:
    """Format an amount as e.g. "UGX 150,000" (no minor units)"""
    currency = currency or config.CURRENCY_CODE
    return f"{currency} {amount:,.0f}"
