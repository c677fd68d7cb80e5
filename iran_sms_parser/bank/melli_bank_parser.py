from ..compiled_patterns import CompiledPatterns
from ..constants import Keywords
from ..rules import (
    ExtractionRule,
    amount_group,
    contains_any,
    decimal_group,
    keyword_rules,
    pattern_rule,
    sign_group,
    text_group,
)
from ..transaction_type import TransactionType
from .base_iranian_bank_parser import BaseIranianBankParser

MELLI_TRANSACTION_PATTERNS = [
    Keywords.INTERNET_PURCHASE_ARABIC_YEH,
    Keywords.INTERNET_PURCHASE,
    Keywords.PURCHASE,
    Keywords.TRANSFER,
    Keywords.WITHDRAWAL,
    Keywords.TRANSFER_ARABIC_YEH,
    Keywords.DEPOSIT,
]


def card_number_rule() -> ExtractionRule:
    return ExtractionRule(
        "card number",
        CompiledPatterns.Common.CARD_NUMBER,
        lambda match: f"Card {match.group(1)}",
    )


class MelliBankParser(BaseIranianBankParser):
    """
    Bank Melli parser for Iranian banking SMS messages.
    Amounts follow a keyword and a colon with the sign at the end
    (انتقال:3,409,000- / انتقالي:20,000,000+), or stand next to a bare sign.
    """

    BANK_ID = "melli"

    SENDER_ALIASES = frozenset({
        "+98700717", "+98700017", "+9870017",
        "MELLI", "MELLIBANK", "MELLI BANK", "BANK MELLI", "BANKMELLI",
        "IRAN MELLI", "BANK MELLI IRAN",
    })
    SENDER_NAME_TOKENS = ("melli",)

    REJECT_PAYMENT_REQUESTS = True

    AMOUNT_RULES = [
        ExtractionRule("keyword colon amount", CompiledPatterns.Melli.KEYWORD_COLON_AMOUNT, amount_group(2)),
        ExtractionRule("internet purchase amount", CompiledPatterns.Melli.INTERNET_PURCHASE_AMOUNT, amount_group(1)),
        ExtractionRule("keyword or sign after amount", CompiledPatterns.Generic.KEYWORD_OR_SIGN_AMOUNT, amount_group(1)),
        ExtractionRule("signed amount", CompiledPatterns.Generic.SIGNED_AMOUNT, amount_group(1)),
    ]
    TYPE_RULES = (
        [ExtractionRule("keyword colon sign", CompiledPatterns.Melli.KEYWORD_COLON_SIGN, sign_group(3))]
        + keyword_rules([
            (Keywords.DEPOSIT, TransactionType.INCOME),
            ("credited", TransactionType.INCOME),
        ])
        + [pattern_rule("plus amount", CompiledPatterns.Common.PLUS_AMOUNT, TransactionType.INCOME)]
        + keyword_rules([
            (Keywords.WITHDRAWAL, TransactionType.EXPENSE),
            (Keywords.PAYMENT, TransactionType.EXPENSE),
            (Keywords.PURCHASE, TransactionType.EXPENSE),
            (Keywords.TRANSFER, TransactionType.EXPENSE),
            (Keywords.CONSUMPTION, TransactionType.EXPENSE),
            (Keywords.INTERNET_PURCHASE_ARABIC_YEH, TransactionType.EXPENSE),
            (Keywords.INTERNET_PURCHASE, TransactionType.EXPENSE),
            (Keywords.TRANSFER_ARABIC_YEH + ":", TransactionType.EXPENSE),
        ])
    )
    MERCHANT_RULES = keyword_rules([
        (Keywords.INTERNET_PURCHASE, "Internet Purchase"),
        (Keywords.INTERNET_PURCHASE_ARABIC_YEH, "Internet Purchase"),
        (Keywords.PURCHASE, "Purchase"),
        (Keywords.TRANSFER, "Transfer"),
        (Keywords.WITHDRAWAL, "Withdrawal"),
        (Keywords.TRANSFER_ARABIC_YEH, "Transfer"),
        (Keywords.DEPOSIT, "Deposit"),
    ]) + [card_number_rule()]
    ACCOUNT_RULES = [
        ExtractionRule("masked number", CompiledPatterns.Common.MASKED_SUFFIX, text_group()),
    ]
    BALANCE_RULES = [
        ExtractionRule("remaining balance", CompiledPatterns.Common.BALANCE_OPTIONAL_COLON, decimal_group()),
    ]
    CARD_KEYWORDS = Keywords.CARD_FLAGS_EXTENDED

    TRANSACTION_PATTERNS = MELLI_TRANSACTION_PATTERNS

    def get_bank_name(self) -> str:
        return "Melli Bank"

    def can_handle(self, sender: str) -> bool:
        if super().can_handle(sender):
            return True

        lower = sender.lower()
        return sender.startswith("+98") and ("melli" in lower or "meli" in lower)

    def has_transaction_signature(self, message: str) -> bool:
        lower = message.lower()
        return (
            contains_any(lower, self.TRANSACTION_PATTERNS)
            or contains_any(lower, Keywords.GENERIC_TRANSACTION)
            or "+" in message
            or "-" in message
        )
