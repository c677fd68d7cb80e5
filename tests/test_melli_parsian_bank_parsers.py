from decimal import Decimal

import pytest

from iran_sms_parser.bank import MelliBankParser, ParsianBankParser
from iran_sms_parser.transaction_type import TransactionType


@pytest.fixture
def melli():
    return MelliBankParser()


@pytest.fixture
def parsian():
    return ParsianBankParser()


# -----------------------------------------------------------------------------
# Melli
# -----------------------------------------------------------------------------
def test_melli_transfer_out(melli):
    message = "بانک ملی\nانتقال:3,409,000-\nمانده:12,500,000\n0312-14:20"
    txn = melli.parse(message, "+98700717")

    assert txn is not None
    assert txn.amount == Decimal("3409000")
    assert txn.type == TransactionType.EXPENSE
    assert txn.merchant == "Transfer"
    assert txn.balance == Decimal("12500000")
    assert txn.currency == "IRR"


def test_melli_transfer_in_uses_trailing_sign(melli):
    message = "انتقالي:20,000,000+\nمانده:32,500,000"
    txn = melli.parse(message, "MELLI")

    assert txn.amount == Decimal("20000000")
    assert txn.type == TransactionType.INCOME
    assert txn.merchant == "Transfer"


def test_melli_internet_purchase(melli):
    message = "خريداينترنتي:318,340-\nمانده:5,000,000"
    txn = melli.parse(message, "BANK MELLI")

    assert txn.amount == Decimal("318340")
    assert txn.type == TransactionType.EXPENSE
    assert txn.merchant == "Internet Purchase"


def test_melli_spaced_internet_purchase(melli):
    message = "خرید اینترنتی: 1,250,000\nمانده: 3,750,000"

    assert melli.extract_amount(message) == Decimal("1250000")
    assert melli.extract_transaction_type(message) == TransactionType.EXPENSE
    assert melli.extract_merchant(message, "MELLI") == "Internet Purchase"


def test_melli_generic_amount_before_keyword(melli):
    message = "مبلغ 2,000,000 ریال واریز شد"

    assert melli.extract_amount(message) == Decimal("2000000")
    assert melli.extract_transaction_type(message) == TransactionType.INCOME
    assert melli.extract_merchant(message, "MELLI") == "Deposit"


def test_melli_payment_request_is_rejected(melli):
    assert not melli.is_transaction_message("درخواست پرداخت مبلغ 500,000 ریال")


def test_melli_card_number_merchant_fallback(melli):
    assert melli.extract_merchant("کارت 6037-9912-3456-7890", "MELLI") == "Card 6037-9912-3456-7890"
    assert melli.extract_account_last4("کارت 6037-9912-3456-7890") == "9912"


def test_melli_investment_keyword_wins(melli):
    message = "صندوق سرمایه گذاری\nواریز:5,000,000+"

    assert melli.extract_transaction_type(message) == TransactionType.INVESTMENT


def test_melli_first_matching_amount_rule_decides(melli):
    # a tiny keyed amount is not replaced by a later generic one
    assert melli.extract_amount("برداشت:500-\n+2,000,000") is None


@pytest.mark.parametrize("sender", ["+98700717", "+9870017", "MELLI", "Bank Melli Iran", "+98-MELI", "MELLI-BANK"])
def test_melli_can_handle(melli, sender):
    assert melli.can_handle(sender)


@pytest.mark.parametrize("sender", ["MELI", "+98700999", "PARSIAN"])
def test_melli_rejects_other_senders(melli, sender):
    assert not melli.can_handle(sender)


# -----------------------------------------------------------------------------
# Parsian
# -----------------------------------------------------------------------------
def test_parsian_deposit(parsian):
    message = "مبلغ 2,500,000 ریال واریز شد\nمانده: 10,000,000"
    txn = parsian.parse(message, "PARSIAN")

    assert txn is not None
    assert txn.amount == Decimal("2500000")
    assert txn.type == TransactionType.INCOME
    assert txn.balance == Decimal("10000000")
    assert txn.merchant is None
    assert txn.bank_name == "Parsian Bank"


def test_parsian_withdrawal(parsian):
    message = "1,200,000-\nبرداشت از حساب\nمانده: 8,800,000"
    txn = parsian.parse(message, "PARSIANBANK")

    assert txn.amount == Decimal("1200000")
    assert txn.type == TransactionType.EXPENSE
    assert txn.balance == Decimal("8800000")


def test_parsian_any_plus_sign_means_income(parsian):
    assert parsian.extract_transaction_type("برداشت + کارمزد") == TransactionType.INCOME


@pytest.mark.parametrize("sender", ["PARSIAN", "parsian bank", "PERSIANBANK", "PERSIAN"])
def test_parsian_exact_senders(parsian, sender):
    assert parsian.can_handle(sender)


@pytest.mark.parametrize("sender", ["PARSIAN BANK IRAN", "BANK PARSIAN", "+98PARSIAN"])
def test_parsian_has_no_fuzzy_match(parsian, sender):
    assert not parsian.can_handle(sender)


def test_card_flag_includes_debit_card_terms(melli, parsian):
    assert melli.detect_is_card("کارت بدهی شما")
    assert parsian.detect_is_card("Debit Card 1234")
    assert not parsian.detect_is_card("حساب 1234")
