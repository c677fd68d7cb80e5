from decimal import Decimal

from iran_sms_parser.parsed_transaction import ParsedTransaction
from iran_sms_parser.transaction_type import TransactionType


def make_txn(amount="500000", body="خرید500,000\nمانده2,542,509"):
    return ParsedTransaction(
        amount=Decimal(amount),
        type=TransactionType.EXPENSE,
        sms_body=body,
        sender="KESHAVARZI",
        timestamp=1700000000,
        bank_name="Keshavarzi Bank",
        balance=Decimal("2542509"),
        balance_parsed=True,
    )


def test_transaction_id_is_stable():
    assert make_txn().generate_transaction_id() == make_txn().generate_transaction_id()
    assert len(make_txn().generate_transaction_id()) == 32


def test_transaction_id_ignores_amount_scale():
    assert make_txn("500000").generate_transaction_id() == make_txn("500000.00").generate_transaction_id()


def test_transaction_id_depends_on_body():
    assert make_txn().generate_transaction_id() != make_txn(body="خرید500,000").generate_transaction_id()


def test_to_dict():
    data = make_txn().to_dict()

    assert data["amount"] == "500000"
    assert data["type"] == "EXPENSE"
    assert data["balance"] == "2542509"
    assert data["balance_parsed"] is True
    assert data["currency"] == "IRR"
    assert data["merchant"] is None
    assert data["transaction_id"] == make_txn().generate_transaction_id()
