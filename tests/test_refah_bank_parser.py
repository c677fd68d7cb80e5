from decimal import Decimal

import pytest

from iran_sms_parser.bank import RefahBankParser
from iran_sms_parser.transaction_type import TransactionType


CARD_INCOME = "بانک رفاه\nحساب207853186\nکارت5,000,000+\nمانده81,108,644\n11/13-00:43"
PURCHASE = "بانک رفاه\nحساب207853186\nخرید2,450,000-\nمانده76,108,644\n11/12-19:14"
CARD_DEPOSIT = "بانک رفاه\nحساب207853186\nکارت3,000,000+\nمانده75,780,644\n11/12-12:30"
WITHDRAWAL = (
    "بانك رفاه\n"
    "حساب 207853186\n"
    "برداشت570,000-\n"
    "خريد اينترنتي از پرداخت الکترونيک سپش·پ137842 \n"
    "مانده108,009,244\n"
    "4/11/11-11:15"
)


@pytest.fixture
def parser():
    return RefahBankParser()


@pytest.mark.parametrize(
    "sender, message, amount, txn_type, merchant, balance",
    [
        ("REFAH", CARD_INCOME, "5000000", TransactionType.INCOME, "Card Transaction", "81108644"),
        ("Refah Bank", PURCHASE, "2450000", TransactionType.EXPENSE, "Purchase", "76108644"),
        ("RF-BANK", WITHDRAWAL, "570000", TransactionType.EXPENSE, "Withdrawal", "108009244"),
        ("BANK REFAH", CARD_DEPOSIT, "3000000", TransactionType.INCOME, "Card Transaction", "75780644"),
    ],
)
def test_parses_documented_messages(parser, sender, message, amount, txn_type, merchant, balance):
    txn = parser.parse(message, sender)

    assert txn is not None
    assert txn.amount == Decimal(amount)
    assert txn.currency == "IRR"
    assert txn.type == txn_type
    assert txn.merchant == merchant
    assert txn.balance == Decimal(balance)
    assert txn.account_last4 == "53186"
    assert txn.reference is None


def test_card_flag_follows_keyword_only(parser):
    assert parser.detect_is_card(CARD_INCOME) is True
    assert parser.detect_is_card(WITHDRAWAL) is False


def test_short_account_number_is_kept_whole(parser):
    assert parser.extract_account_last4("حساب 123\nکارت5,000,000+") == "123"


@pytest.mark.parametrize("sender", ["REFAH", "refahbank", "IRAN REFAH", "RF-BANK", "Refah-Bank-IR"])
def test_can_handle(parser, sender):
    assert parser.can_handle(sender)


@pytest.mark.parametrize("sender", ["RF", "REFAH-SMS", "BLU"])
def test_rejects_other_senders(parser, sender):
    assert not parser.can_handle(sender)


def test_bank_name_alone_is_accepted(parser):
    # acceptance by bank name still needs a signed amount to produce a record
    message = "بانک رفاه\nبه اطلاع می رساند"

    assert parser.is_transaction_message(message)
    assert parser.parse(message, "REFAH") is None


def test_unsigned_amount_gives_no_type(parser):
    message = "حساب207853186\nکارت5,000,000\nمانده81,108,644"

    assert parser.extract_amount(message) is None
    assert parser.extract_transaction_type(message) is None
