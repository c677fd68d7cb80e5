import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from ..constants import Constants, Keywords
from ..parsed_transaction import ParsedTransaction
from ..transaction_type import TransactionType

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Shared defaults, usable on their own or through BankParser
# -----------------------------------------------------------------------------
def is_investment_transaction(lower_message: str) -> bool:
    return any(kw in lower_message for kw in Keywords.INVESTMENT)


def clean_merchant_name(merchant: str) -> str:
    return merchant.strip()


def is_valid_merchant_name(name: str) -> bool:
    return (
        len(name) >= Constants.Parsing.MIN_MERCHANT_NAME_LENGTH
        and any(c.isalpha() for c in name)
        and name.upper() not in Keywords.MERCHANT_STOPWORDS
        and not name.isdigit()
        and "@" not in name
    )


class BankParser(ABC):
    """
    Base class for bank-specific message parsers.
    Each bank should extend this class and implement its specific parsing logic.
    Parsers keep no state between calls, so one instance serves every message.
    """

    BANK_ID: str = ""

    @abstractmethod
    def get_bank_name(self) -> str:
        """Returns the name of the bank this parser handles."""
        ...

    @abstractmethod
    def get_currency(self) -> str:
        """Returns the currency used by this bank."""
        ...

    @abstractmethod
    def can_handle(self, sender: str) -> bool:
        """Checks if this parser can handle messages from the given sender."""
        ...

    @abstractmethod
    def is_transaction_message(self, message: str) -> bool:
        ...

    @abstractmethod
    def extract_amount(self, message: str) -> Optional[Decimal]:
        ...

    @abstractmethod
    def extract_transaction_type(self, message: str) -> Optional[TransactionType]:
        ...

    def parse(self, sms_body: str, sender: str, timestamp: int = 0) -> Optional[ParsedTransaction]:
        """Parses an SMS message and extracts transaction information."""
        if not self.can_handle(sender):
            logger.debug("%s: sender %r not handled", self.get_bank_name(), sender)
            return None

        if not self.is_transaction_message(sms_body):
            logger.debug("%s: not a transaction message", self.get_bank_name())
            return None

        amount = self.extract_amount(sms_body)
        if amount is None:
            logger.debug("%s: no amount found", self.get_bank_name())
            return None

        txn_type = self.extract_transaction_type(sms_body)
        if txn_type is None:
            logger.debug("%s: no transaction type found", self.get_bank_name())
            return None

        balance = self.find_balance(sms_body)

        return ParsedTransaction(
            amount=amount,
            type=txn_type,
            merchant=self.extract_merchant(sms_body, sender),
            reference=self.extract_reference(sms_body),
            account_last4=self.extract_account_last4(sms_body),
            balance=balance if balance is not None else Decimal("0"),
            balance_parsed=balance is not None,
            sms_body=sms_body,
            sender=sender,
            timestamp=timestamp,
            bank_name=self.get_bank_name(),
            is_from_card=self.detect_is_card(sms_body),
            currency=self.get_currency(),
        )

    def is_investment_transaction(self, lower_message: str) -> bool:
        return is_investment_transaction(lower_message)

    def extract_merchant(self, message: str, sender: str) -> Optional[str]:
        return None

    def extract_reference(self, message: str) -> Optional[str]:
        return None

    def extract_account_last4(self, message: str) -> Optional[str]:
        return None

    def find_balance(self, message: str) -> Optional[Decimal]:
        """The balance as written in the message, or None when there is none."""
        return None

    def extract_balance(self, message: str) -> Decimal:
        # Zero stands in for a missing balance; find_balance keeps the difference.
        balance = self.find_balance(message)
        return balance if balance is not None else Decimal("0")

    def detect_is_card(self, message: str) -> bool:
        return False

    def clean_merchant_name(self, merchant: str) -> str:
        return clean_merchant_name(merchant)

    def is_valid_merchant_name(self, name: str) -> bool:
        return is_valid_merchant_name(name)
