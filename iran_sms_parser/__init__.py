from .compiled_patterns import CompiledPatterns
from .constants import Constants, Keywords
from .parsed_transaction import ParsedTransaction
from .transaction_type import TransactionType
from .bank import BankParser, BankParserFactory, BankParserRegistry
from .currency_totals import CurrencyGroupedTotals, CurrencyTotals, group_by_currency

__all__ = [
    "BankParser",
    "BankParserFactory",
    "BankParserRegistry",
    "CompiledPatterns",
    "Constants",
    "CurrencyGroupedTotals",
    "CurrencyTotals",
    "Keywords",
    "ParsedTransaction",
    "TransactionType",
    "group_by_currency",
]
