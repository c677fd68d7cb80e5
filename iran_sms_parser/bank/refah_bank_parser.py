from ..compiled_patterns import CompiledPatterns
from ..constants import Keywords
from ..rules import ExtractionRule, amount_group, decimal_group, keyword_rules, sign_group, suffix_group
from .base_iranian_bank_parser import BaseIranianBankParser

# Refah account numbers are identified by their last five digits.
REFAH_ACCOUNT_SUFFIX_LENGTH = 5


class RefahBankParser(BaseIranianBankParser):
    """
    Refah Bank parser.

    The sign trails the amount, which follows the verb or the card keyword:

        بانک رفاه
        حساب207853186
        کارت5,000,000+
        مانده81,108,644
        11/13-00:43
    """

    BANK_ID = "refah"

    SENDER_ALIASES = frozenset({
        "REFAH", "REFAHBANK", "REFAH BANK", "BANK REFAH",
        "BANKREFAH", "IRAN REFAH", "RF-BANK",
    })
    SENDER_NAME_TOKENS = ("refah",)

    AMOUNT_RULES = [
        ExtractionRule("verb amount sign", CompiledPatterns.Refah.VERB_AMOUNT_SIGN, amount_group(2)),
    ]
    TYPE_RULES = [
        ExtractionRule("trailing sign", CompiledPatterns.Refah.VERB_AMOUNT_SIGN, sign_group(3)),
    ]
    MERCHANT_RULES = keyword_rules([
        (Keywords.CARD, "Card Transaction"),
        (Keywords.PURCHASE, "Purchase"),
        (Keywords.WITHDRAWAL, "Withdrawal"),
        (Keywords.DEPOSIT, "Deposit"),
    ])
    MERCHANT_FALLBACK = "Bank Transaction"
    ACCOUNT_RULES = [
        ExtractionRule("account number", CompiledPatterns.Refah.ACCOUNT, suffix_group(REFAH_ACCOUNT_SUFFIX_LENGTH)),
    ]
    BALANCE_RULES = [
        ExtractionRule("remaining balance", CompiledPatterns.Refah.BALANCE, decimal_group()),
    ]

    def get_bank_name(self) -> str:
        return "Refah Bank"

    def has_transaction_signature(self, message: str) -> bool:
        has_transaction_pattern = CompiledPatterns.Refah.VERB_DIGITS_SIGN.search(message) is not None
        has_balance_indicator = Keywords.BALANCE_REMAINING in message
        has_bank_name = "رفاه" in message or "refah" in message.lower()

        return (has_transaction_pattern and has_balance_indicator) or has_bank_name
