import pytest

from momo_sms.sms_parser import SMSParser

# Sample SMS messages for the supported carriers
TEST_SMS_SAMPLES = [
    {
        "name": "MTN received",
        "sender": "MTN Mobile Money",
        "text": "You have received UGX 150,000 from John Okello. Your new balance is UGX 350,000. Ref: MTN123456",
        "expected": {"amount": 150000, "type": "Cash In", "network": "MTN",
                     "sender": "John Okello", "reference": "MTN123456"},
    },
    {
        "name": "MTN sent",
        "sender": "MTN Mobile Money",
        "text": "You have sent UGX 50,000 to Jane Auma. Your new balance is UGX 300,000. Ref: MTN789012",
        "expected": {"amount": 50000, "type": "Cash Out", "network": "MTN",
                     "sender": "Jane Auma", "reference": "MTN789012"},
    },
    {
        "name": "Airtel received",
        "sender": "Airtel",
        "text": "Dear customer, you have received UGX 200,000 from +256700123456. Txn ID: AT987654",
        "expected": {"amount": 200000, "type": "Cash In", "network": "AIRTEL",
                     "sender": "+256700123456", "reference": "AT987654"},
    },
    {
        "name": "Airtel sent",
        "sender": "Airtel",
        "text": "You have successfully sent UGX 75,000 to +256700987654. Balance: UGX 225,000. Txn: AT111222",
        "expected": {"amount": 75000, "type": "Cash Out", "network": "AIRTEL",
                     "sender": "+256700987654", "reference": "AT111222"},
    },
]


@pytest.fixture
def parser():
    return SMSParser(currency_code="UGX")
