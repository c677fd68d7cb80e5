from typing import List, Optional

from ..parsed_transaction import ParsedTransaction
from .bank_parser import BankParser
from .bank_parser_registry import BankParserRegistry
from .blu_bank_parser import BluBankParser
from .keshavarzi_bank_parser import KeshavarziBankParser
from .melli_bank_parser import MelliBankParser
from .parsian_bank_parser import ParsianBankParser
from .refah_bank_parser import RefahBankParser
from .resalat_bank_parser import ResalatBankParser


class BankParserFactory:
    """
    Factory for creating bank-specific parsers based on SMS sender.
    """

    _registry = BankParserRegistry([
        KeshavarziBankParser(),
        ResalatBankParser(),
        RefahBankParser(),
        BluBankParser(),
        MelliBankParser(),
        ParsianBankParser(),
    ])

    @classmethod
    def get_parser(cls, sender: str) -> Optional[BankParser]:
        """
        Returns the appropriate bank parser for the given sender.
        Returns None if no specific parser is found.
        """
        return cls._registry.get_parser(sender)

    @classmethod
    def get_parser_by_id(cls, bank_id: str) -> Optional[BankParser]:
        return cls._registry.get_parser_by_id(bank_id)

    @classmethod
    def get_parser_by_name(cls, bank_name: str) -> Optional[BankParser]:
        """
        Returns the bank parser for the given bank name.
        Returns None if no specific parser is found.
        """
        for parser in cls._registry.all():
            if parser.get_bank_name() == bank_name:
                return parser
        return None

    @classmethod
    def get_all_parsers(cls) -> List[BankParser]:
        """
        Returns all available bank parsers.
        """
        return cls._registry.all()

    @classmethod
    def parse(cls, sender: str, message: str, timestamp: int = 0) -> Optional[ParsedTransaction]:
        return cls._registry.parse(sender, message, timestamp)

    @classmethod
    def is_known_bank_sender(cls, sender: str) -> bool:
        """
        Checks if the sender belongs to any known bank.
        """
        return cls._registry.get_parser(sender) is not None
