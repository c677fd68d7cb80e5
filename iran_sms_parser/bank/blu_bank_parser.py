from ..compiled_patterns import CompiledPatterns
from ..constants import Keywords
from ..rules import ExtractionRule, amount_group, decimal_group, keyword_rules
from ..transaction_type import TransactionType
from .base_iranian_bank_parser import BaseIranianBankParser


class BluBankParser(BaseIranianBankParser):
    """
    Blu Bank parser. Blu sends prose deposit notices:

        بلو
        واریز پول
        عرشیا عزیز، 8,200,000 ریال به حساب شما نشست.
        موجودی: 100,029,351 ریال
    """

    BANK_ID = "blu"

    SENDER_ALIASES = frozenset({
        "BLU", "BLUBANK", "BLU BANK", "BANK BLU", "BANKBLU", "IRAN BLU",
    })
    SENDER_NAME_TOKENS = ("blu",)

    AMOUNT_RULES = [
        ExtractionRule("rial amount", CompiledPatterns.Blu.RIAL_AMOUNT, amount_group(1)),
    ]
    TYPE_RULES = keyword_rules([
        (Keywords.DEPOSIT, TransactionType.INCOME),
    ])
    MERCHANT_RULES = keyword_rules([
        (Keywords.DEPOSIT, "Deposit"),
        (Keywords.MONEY, "Money Transfer"),
    ])
    MERCHANT_FALLBACK = "Bank Transaction"
    BALANCE_RULES = [
        ExtractionRule("available balance", CompiledPatterns.Blu.BALANCE, decimal_group()),
    ]

    def get_bank_name(self) -> str:
        return "Blu Bank"

    def has_transaction_signature(self, message: str) -> bool:
        has_bank_name = "بلو" in message
        has_deposit_pattern = Keywords.DEPOSIT in message and Keywords.MONEY in message
        has_amount_in_rials = Keywords.RIAL in message
        has_balance_pattern = Keywords.BALANCE_AVAILABLE in message

        return has_bank_name and (has_deposit_pattern or has_amount_in_rials or has_balance_pattern)
