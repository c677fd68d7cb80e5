from ..compiled_patterns import CompiledPatterns
from ..constants import Keywords
from ..rules import ExtractionRule, amount_group, decimal_group, pattern_rule, sign_group, text_group
from .base_iranian_bank_parser import BaseIranianBankParser


class ResalatBankParser(BaseIranianBankParser):
    """
    Resalat Bank parser.

    The sign in front of the amount carries the direction and the first line
    is the bank reference:

        10.10055857.1
        +120,000,000
        11/11_19:43
        مانده: 120,025,817
    """

    BANK_ID = "resalat"

    SENDER_ALIASES = frozenset({
        "RESALAT", "RESALATBANK", "RESALAT BANK", "BANK RESALAT",
        "BANKRESALAT", "IRAN RESALAT",
    })
    SENDER_NAME_TOKENS = ("resalat",)

    AMOUNT_RULES = [
        ExtractionRule("signed amount", CompiledPatterns.Resalat.SIGNED_AMOUNT, amount_group(2)),
    ]
    TYPE_RULES = [
        ExtractionRule("amount sign", CompiledPatterns.Resalat.SIGNED_AMOUNT, sign_group(1)),
    ]
    MERCHANT_RULES = [
        pattern_rule("plus amount", CompiledPatterns.Common.PLUS_AMOUNT, "Income Transaction"),
        pattern_rule("minus amount", CompiledPatterns.Common.MINUS_AMOUNT, "Expense Transaction"),
    ]
    MERCHANT_FALLBACK = "Bank Transaction"
    REFERENCE_RULES = [
        ExtractionRule("leading dotted id", CompiledPatterns.Resalat.REFERENCE, text_group()),
    ]
    BALANCE_RULES = [
        ExtractionRule("remaining balance", CompiledPatterns.Resalat.BALANCE, decimal_group()),
    ]

    def get_bank_name(self) -> str:
        return "Resalat Bank"

    def has_transaction_signature(self, message: str) -> bool:
        has_amount_with_sign = (
            CompiledPatterns.Common.PLUS_AMOUNT.search(message) is not None
            or CompiledPatterns.Common.MINUS_AMOUNT.search(message) is not None
        )
        return has_amount_with_sign and Keywords.BALANCE_REMAINING in message
