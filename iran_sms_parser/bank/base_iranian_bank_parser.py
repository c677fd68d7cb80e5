import logging
from abc import abstractmethod
from decimal import Decimal
from typing import FrozenSet, List, Optional, Sequence

from ..constants import Constants, Keywords
from ..rules import ExtractionRule, contains_any, first_match
from ..transaction_type import TransactionType
from .bank_parser import BankParser

logger = logging.getLogger(__name__)


class BaseIranianBankParser(BankParser):
    """
    Base class for Iranian bank parsers.

    A bank is described by the class attributes below: sender aliases, the
    ordered extraction rules for every field and its keyword tables. The
    only code a bank has to supply is its bank name and its positive
    transaction signature.
    """

    SENDER_ALIASES: FrozenSet[str] = frozenset()
    SENDER_NAME_TOKENS: Sequence[str] = ()
    SENDER_CONTEXT_TOKENS: Sequence[str] = ("iran", "bank")

    REJECT_PAYMENT_REQUESTS = False

    AMOUNT_RULES: List[ExtractionRule] = []
    TYPE_RULES: List[ExtractionRule] = []
    MERCHANT_RULES: List[ExtractionRule] = []
    MERCHANT_FALLBACK: Optional[str] = None
    REFERENCE_RULES: List[ExtractionRule] = []
    ACCOUNT_RULES: List[ExtractionRule] = []
    BALANCE_RULES: List[ExtractionRule] = []
    CARD_KEYWORDS: Sequence[str] = Keywords.CARD_FLAGS

    def get_currency(self) -> str:
        return Constants.Currency.IRR

    # -------------------------------------------------------------------------
    # can_handle
    # -------------------------------------------------------------------------
    def can_handle(self, sender: str) -> bool:
        if sender.upper() in self.SENDER_ALIASES:
            return True

        lower = sender.lower()
        return (
            any(token in lower for token in self.SENDER_NAME_TOKENS)
            and any(token in lower for token in self.SENDER_CONTEXT_TOKENS)
        )

    # -------------------------------------------------------------------------
    # is_transaction_message
    # -------------------------------------------------------------------------
    def is_transaction_message(self, message: str) -> bool:
        lower = message.lower()

        if contains_any(lower, Keywords.OTP):
            logger.debug("%s: rejected OTP message", self.get_bank_name())
            return False

        if contains_any(lower, Keywords.PROMOTIONAL):
            logger.debug("%s: rejected promotional message", self.get_bank_name())
            return False

        if self.REJECT_PAYMENT_REQUESTS and Keywords.REQUEST in lower and Keywords.PAYMENT in lower:
            logger.debug("%s: rejected payment request", self.get_bank_name())
            return False

        return self.has_transaction_signature(message)

    @abstractmethod
    def has_transaction_signature(self, message: str) -> bool:
        """Bank-specific positive test, run after the noise filters."""
        ...

    # -------------------------------------------------------------------------
    # Field extractors
    # -------------------------------------------------------------------------
    def extract_amount(self, message: str) -> Optional[Decimal]:
        return first_match(self.AMOUNT_RULES, message)

    def extract_transaction_type(self, message: str) -> Optional[TransactionType]:
        if self.is_investment_transaction(message.lower()):
            return TransactionType.INVESTMENT
        return first_match(self.TYPE_RULES, message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        merchant = first_match(self.MERCHANT_RULES, message)
        if merchant is None:
            merchant = self.MERCHANT_FALLBACK
        if merchant is None:
            return None

        merchant = self.clean_merchant_name(merchant)
        return merchant if self.is_valid_merchant_name(merchant) else None

    def extract_reference(self, message: str) -> Optional[str]:
        return first_match(self.REFERENCE_RULES, message)

    def extract_account_last4(self, message: str) -> Optional[str]:
        return first_match(self.ACCOUNT_RULES, message)

    def find_balance(self, message: str) -> Optional[Decimal]:
        return first_match(self.BALANCE_RULES, message)

    def detect_is_card(self, message: str) -> bool:
        lower = message.lower()
        return any(kw in lower for kw in self.CARD_KEYWORDS)
