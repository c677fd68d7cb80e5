from ..compiled_patterns import CompiledPatterns
from ..constants import Keywords
from ..rules import ExtractionRule, amount_group, keyword_rules, pattern_rule
from ..transaction_type import TransactionType
from .melli_bank_parser import MelliBankParser, card_number_rule


class ParsianBankParser(MelliBankParser):
    """
    Parsian Bank parser for Iranian banking SMS messages.
    Shares Melli's classifier but only the generic amount rules, and only
    answers to its exact sender ids.
    """

    BANK_ID = "parsian"

    SENDER_ALIASES = frozenset({
        "PARSIANBANK", "PARSIAN", "PARSIAN BANK", "PERSIANBANK", "PERSIAN",
    })
    SENDER_NAME_TOKENS = ()

    AMOUNT_RULES = [
        ExtractionRule("keyword or sign after amount", CompiledPatterns.Generic.KEYWORD_OR_SIGN_AMOUNT, amount_group(1)),
        ExtractionRule("signed amount", CompiledPatterns.Generic.SIGNED_AMOUNT, amount_group(1)),
    ]
    TYPE_RULES = (
        keyword_rules([
            (Keywords.DEPOSIT, TransactionType.INCOME),
            ("+", TransactionType.INCOME),
            ("credited", TransactionType.INCOME),
        ])
        + [pattern_rule("plus amount", CompiledPatterns.Common.PLUS_AMOUNT, TransactionType.INCOME)]
        + keyword_rules([
            (Keywords.WITHDRAWAL, TransactionType.EXPENSE),
            (Keywords.PAYMENT, TransactionType.EXPENSE),
            (Keywords.PURCHASE, TransactionType.EXPENSE),
            (Keywords.TRANSFER, TransactionType.EXPENSE),
            (Keywords.CONSUMPTION, TransactionType.EXPENSE),
        ])
    )
    MERCHANT_RULES = [card_number_rule()]

    TRANSACTION_PATTERNS = [
        Keywords.INTERNET_PURCHASE_ARABIC_YEH,
        Keywords.TRANSFER,
        Keywords.WITHDRAWAL,
        Keywords.TRANSFER_ARABIC_YEH,
        Keywords.DEPOSIT,
    ]

    def get_bank_name(self) -> str:
        return "Parsian Bank"

    def can_handle(self, sender: str) -> bool:
        return sender.upper() in self.SENDER_ALIASES
