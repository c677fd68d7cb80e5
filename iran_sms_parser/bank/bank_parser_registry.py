import logging
from typing import Dict, List, Optional

from ..parsed_transaction import ParsedTransaction
from .bank_parser import BankParser

logger = logging.getLogger(__name__)


class BankParserRegistry:
    """
    Ordered collection of bank parsers. The first parser whose sender
    matcher accepts a sender wins; overlapping heuristics are settled by
    list order alone.
    """

    def __init__(self, parsers: List[BankParser]):
        self.parsers = parsers
        self._by_id: Dict[str, BankParser] = {
            parser.BANK_ID or parser.get_bank_name(): parser
            for parser in parsers
        }

    def get_parser(self, sender: str) -> Optional[BankParser]:
        for parser in self.parsers:
            if parser.can_handle(sender):
                return parser
        return None

    def get_parser_by_id(self, bank_id: str) -> Optional[BankParser]:
        return self._by_id.get(bank_id)

    def bank_ids(self) -> List[str]:
        return list(self._by_id)

    def parse(self, sender: str, message: str, timestamp: int = 0) -> Optional[ParsedTransaction]:
        parser = self.get_parser(sender)
        if parser is None:
            logger.debug("No parser for sender %r", sender)
            return None
        return parser.parse(message, sender, timestamp)

    def all(self) -> List[BankParser]:
        return self.parsers
