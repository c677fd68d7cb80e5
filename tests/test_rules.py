import re
from decimal import Decimal

from iran_sms_parser.bank import clean_merchant_name, is_investment_transaction, is_valid_merchant_name
from iran_sms_parser.rules import (
    ExtractionRule,
    amount_group,
    first_match,
    keyword_rule,
    parse_decimal,
    rule_names,
    suffix_group,
    to_amount,
)


def test_first_matching_rule_decides_even_without_value():
    rules = [
        ExtractionRule("tiny", re.compile(r"fee (\d+)"), amount_group(1)),
        ExtractionRule("large", re.compile(r"total (\d+)"), amount_group(1)),
    ]

    assert first_match(rules, "fee 500 total 250000") is None
    assert first_match(rules, "total 250000") == Decimal("250000")
    assert first_match(rules, "nothing here") is None
    assert rule_names(rules) == ["tiny", "large"]


def test_parse_decimal():
    assert parse_decimal("12,500,000") == Decimal("12500000")
    assert parse_decimal("-3,409,000") == Decimal("-3409000")
    assert parse_decimal("1,250.50") == Decimal("1250.50")
    assert parse_decimal("ریال") is None


def test_to_amount_is_unsigned_and_thresholded():
    assert to_amount("-3,409,000") == Decimal("3409000")
    assert to_amount("1,000") == Decimal("1000")
    assert to_amount("999") is None


def test_suffix_group_keeps_short_numbers_whole():
    pattern = re.compile(r"acc (\d+)")
    transform = suffix_group(4)

    assert transform(pattern.search("acc 207853186")) == "3186"
    assert transform(pattern.search("acc 12")) == "12"


def test_keyword_rule_ignores_case():
    rule = keyword_rule("credited", "income")

    assert rule.apply("Amount CREDITED to account") == (True, "income")
    assert rule.apply("debited") == (False, None)


def test_merchant_name_validation():
    assert is_valid_merchant_name("Purchase")
    assert not is_valid_merchant_name("A")
    assert not is_valid_merchant_name("1234")
    assert not is_valid_merchant_name("USING")
    assert not is_valid_merchant_name("از")
    assert not is_valid_merchant_name("pay@bank")
    assert clean_merchant_name("  Deposit ") == "Deposit"


def test_investment_keywords():
    assert is_investment_transaction("units allotted in mutual fund")
    assert is_investment_transaction("خرید واحد صندوق سرمایه گذاری")
    assert not is_investment_transaction("خرید500,000")
