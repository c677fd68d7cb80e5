from .bank_parser import BankParser, clean_merchant_name, is_investment_transaction, is_valid_merchant_name
from .base_iranian_bank_parser import BaseIranianBankParser
from .bank_parser_registry import BankParserRegistry
from .bank_parser_factory import BankParserFactory

from .blu_bank_parser import BluBankParser
from .keshavarzi_bank_parser import KeshavarziBankParser
from .melli_bank_parser import MelliBankParser
from .parsian_bank_parser import ParsianBankParser
from .refah_bank_parser import RefahBankParser
from .resalat_bank_parser import ResalatBankParser

__all__ = [
    "BankParser",
    "BaseIranianBankParser",
    "BankParserRegistry",
    "BankParserFactory",
    "BluBankParser",
    "KeshavarziBankParser",
    "MelliBankParser",
    "ParsianBankParser",
    "RefahBankParser",
    "ResalatBankParser",
    "clean_merchant_name",
    "is_investment_transaction",
    "is_valid_merchant_name",
]
