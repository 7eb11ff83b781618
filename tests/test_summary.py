from momo_sms.models import Direction, Network, ParsedTransaction
from momo_sms.summary import format_amount, summarize, to_frame

TRANSACTIONS = [
    ParsedTransaction(150000.0, Direction.CASH_IN, Network.MTN, "John Okello", "MTN123456"),
    ParsedTransaction(50000.0, Direction.CASH_OUT, Network.MTN, "Jane Auma", "MTN789012"),
    ParsedTransaction(200000.0, Direction.CASH_IN, Network.AIRTEL, "+256700123456", "AT987654"),
]


def test_to_frame():
    df = to_frame(TRANSACTIONS)
    assert list(df.columns) == ['amount', 'type', 'network', 'sender', 'reference']
    assert len(df) == 3
    assert df.loc[2, 'network'] == 'AIRTEL'


def test_summarize():
    assert summarize(TRANSACTIONS) == {
        'cash_in': 350000.0,
        'cash_out': 50000.0,
        'balance': 300000.0,
        'count': 3,
    }


def test_summarize_empty():
    summary = summarize([])
    assert summary['balance'] == 0
    assert summary['count'] == 0


def test_format_amount():
    assert format_amount(150000) == "UGX 150,000"
    assert format_amount(1234567.4, currency="KES") == "KES 1,234,567"
