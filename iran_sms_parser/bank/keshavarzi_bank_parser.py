from ..compiled_patterns import CompiledPatterns
from ..constants import Keywords
from ..rules import ExtractionRule, amount_group, decimal_group, keyword_rules, text_group
from ..transaction_type import TransactionType
from .base_iranian_bank_parser import BaseIranianBankParser


class KeshavarziBankParser(BaseIranianBankParser):
    """
    Keshavarzi Bank parser.

    Messages carry the verb glued to an unsigned amount, then the balance and
    the masked card:

        خرید500,000
        مانده2,542,509
        041001-12:29
        کارت8783*
        bki.ir

    The deposit verb is spelled with Arabic yeh (واريز).
    """

    BANK_ID = "keshavarzi"

    SENDER_ALIASES = frozenset({
        "KESHAVARZI", "KESHAVARZIBANK", "KESHAVARZI BANK", "BANK KESHAVARZI",
        "BANKKESHAVARZI", "IRAN KESHAVARZI", "KESH", "BKI",
    })
    SENDER_NAME_TOKENS = ("keshavarzi", "kesh")
    SENDER_CONTEXT_TOKENS = ("iran", "bank", "bki")

    AMOUNT_RULES = [
        ExtractionRule("verb amount", CompiledPatterns.Keshavarzi.VERB_AMOUNT, amount_group(2)),
    ]
    TYPE_RULES = keyword_rules([
        (Keywords.DEPOSIT_ARABIC_YEH, TransactionType.INCOME),
        (Keywords.PURCHASE, TransactionType.EXPENSE),
        (Keywords.WITHDRAWAL, TransactionType.EXPENSE),
    ])
    MERCHANT_RULES = keyword_rules([
        (Keywords.DEPOSIT_ARABIC_YEH, "Deposit"),
        (Keywords.PURCHASE, "Purchase"),
        (Keywords.WITHDRAWAL, "Withdrawal"),
    ])
    MERCHANT_FALLBACK = "Bank Transaction"
    ACCOUNT_RULES = [
        ExtractionRule("card suffix", CompiledPatterns.Keshavarzi.CARD_SUFFIX, text_group()),
    ]
    BALANCE_RULES = [
        ExtractionRule("remaining balance", CompiledPatterns.Keshavarzi.BALANCE, decimal_group()),
    ]

    def get_bank_name(self) -> str:
        return "Keshavarzi Bank"

    def has_transaction_signature(self, message: str) -> bool:
        has_transaction_pattern = CompiledPatterns.Keshavarzi.VERB_DIGITS.search(message) is not None
        has_balance_indicator = Keywords.BALANCE_REMAINING in message
        has_card_indicator = Keywords.CARD in message
        has_bank_domain = "bki.ir" in message.lower()

        return has_transaction_pattern and (has_balance_indicator or has_card_indicator or has_bank_domain)
