from decimal import Decimal, ROUND_HALF_UP
import hashlib
from typing import Any, Dict, Optional

from .transaction_type import TransactionType

class ParsedTransaction:
    def __init__(
        self,
        amount: Decimal,
        type: TransactionType,
        sms_body: str,
        sender: str,
        timestamp: int,
        bank_name: str,
        merchant: Optional[str] = None,
        reference: Optional[str] = None,
        account_last4: Optional[str] = None,
        balance: Decimal = Decimal("0"),
        balance_parsed: bool = False,
        is_from_card: bool = False,
        currency: str = "IRR",
    ):
        self.amount = amount
        self.type = type
        self.merchant = merchant
        self.reference = reference
        self.account_last4 = account_last4
        self.balance = balance
        # balance defaults to zero; this tells a real zero from a missing one
        self.balance_parsed = balance_parsed
        self.sms_body = sms_body
        self.sender = sender
        self.timestamp = timestamp
        self.bank_name = bank_name
        self.is_from_card = is_from_card
        self.currency = currency

    def generate_transaction_id(self) -> str:
        normalized_amount = self.amount.quantize(Decimal("0.00"), rounding=ROUND_HALF_UP)

        # Use SMS body hash for reliable deduplication
        sms_body_hash = hashlib.md5(self.sms_body.encode()).hexdigest()[:16]

        data = f"{self.sender}|{normalized_amount}|{sms_body_hash}"
        return hashlib.md5(data.encode()).hexdigest()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": str(self.amount),
            "type": self.type.value,
            "merchant": self.merchant,
            "reference": self.reference,
            "account_last4": self.account_last4,
            "balance": str(self.balance),
            "balance_parsed": self.balance_parsed,
            "bank_name": self.bank_name,
            "is_from_card": self.is_from_card,
            "currency": self.currency,
            "transaction_id": self.generate_transaction_id(),
        }

    def __repr__(self) -> str:
        return (
            f"ParsedTransaction(amount={self.amount}, type={self.type.value}, "
            f"merchant={self.merchant!r}, bank_name={self.bank_name!r})"
        )
