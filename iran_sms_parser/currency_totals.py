from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from .constants import Constants
from .parsed_transaction import ParsedTransaction
from .transaction_type import TransactionType

ZERO = Decimal("0")


class CurrencyTotals:
    """Financial totals for a single currency."""

    def __init__(
        self,
        currency: str,
        income: Decimal = ZERO,
        expenses: Decimal = ZERO,
        credit: Decimal = ZERO,
        transfer: Decimal = ZERO,
        investment: Decimal = ZERO,
        transaction_count: int = 0,
        net_worth: Decimal = ZERO,
    ):
        self.currency = currency
        self.income = income
        self.expenses = expenses
        self.credit = credit
        self.transfer = transfer
        self.investment = investment
        self.transaction_count = transaction_count
        # actual account balances ("maneh"), not a flow total
        self.net_worth = net_worth

    @property
    def net_balance(self) -> Decimal:
        return self.income - self.expenses - self.credit - self.transfer - self.investment

    def calculate_net_value(self, net_display_type: str = Constants.NetDisplay.DEFAULT) -> Decimal:
        """
        "maneh" shows the current balance, anything else income minus outflows.
        """
        if net_display_type == Constants.NetDisplay.MANEH:
            return self.net_worth
        return self.net_balance

    def to_dict(self) -> Dict[str, object]:
        return {
            "currency": self.currency,
            "income": self.income,
            "expenses": self.expenses,
            "credit": self.credit,
            "transfer": self.transfer,
            "investment": self.investment,
            "transaction_count": self.transaction_count,
            "net_worth": self.net_worth,
            "net_balance": self.net_balance,
        }


class CurrencyGroupedTotals:
    def __init__(
        self,
        totals_by_currency: Optional[Dict[str, CurrencyTotals]] = None,
        available_currencies: Optional[List[str]] = None,
        transaction_count: int = 0,
    ):
        self.totals_by_currency = totals_by_currency or {}
        self.available_currencies = available_currencies or []
        self.transaction_count = transaction_count

    def get_totals_for_currency(self, currency: str) -> CurrencyTotals:
        return self.totals_by_currency.get(currency) or CurrencyTotals(currency=currency)

    def has_any_currency(self) -> bool:
        return len(self.available_currencies) > 0

    def get_primary_currency(self) -> str:
        for preferred in ("AED", "INR"):
            if preferred in self.available_currencies:
                return preferred
        if self.available_currencies:
            return self.available_currencies[0]
        return "INR"

    def get_all_totals_combined(self) -> CurrencyTotals:
        if not self.totals_by_currency:
            return CurrencyTotals(currency="ALL")

        totals = list(self.totals_by_currency.values())
        return CurrencyTotals(
            currency="ALL",
            income=sum((t.income for t in totals), ZERO),
            expenses=sum((t.expenses for t in totals), ZERO),
            credit=sum((t.credit for t in totals), ZERO),
            transfer=sum((t.transfer for t in totals), ZERO),
            investment=sum((t.investment for t in totals), ZERO),
            transaction_count=sum(t.transaction_count for t in totals),
            net_worth=sum((t.net_worth for t in totals), ZERO),
        )

    def has_multiple_currencies(self) -> bool:
        return len(self.totals_by_currency) > 1


def group_by_currency(transactions: Iterable[ParsedTransaction]) -> CurrencyGroupedTotals:
    """
    Sums parsed transactions per currency. Net worth adds up the most recent
    parsed balance of every (bank, account) pair; records whose balance was
    not actually present in the message are left out of it.
    """
    totals: Dict[str, CurrencyTotals] = {}
    latest_balance: Dict[Tuple[str, str, Optional[str]], Tuple[int, Decimal]] = {}

    for txn in transactions:
        current = totals.setdefault(txn.currency, CurrencyTotals(currency=txn.currency))
        if txn.type == TransactionType.INCOME:
            current.income += txn.amount
        elif txn.type == TransactionType.EXPENSE:
            current.expenses += txn.amount
        elif txn.type == TransactionType.INVESTMENT:
            current.investment += txn.amount
        current.transaction_count += 1

        if txn.balance_parsed:
            key = (txn.currency, txn.bank_name, txn.account_last4)
            seen = latest_balance.get(key)
            if seen is None or txn.timestamp >= seen[0]:
                latest_balance[key] = (txn.timestamp, txn.balance)

    for (currency, _bank, _account), (_ts, balance) in latest_balance.items():
        totals[currency].net_worth += balance

    return CurrencyGroupedTotals(
        totals_by_currency=totals,
        available_currencies=list(totals),
        transaction_count=sum(t.transaction_count for t in totals.values()),
    )


def totals_frame(grouped: CurrencyGroupedTotals) -> pd.DataFrame:
    rows = [totals.to_dict() for totals in grouped.totals_by_currency.values()]
    columns = [
        "currency", "income", "expenses", "credit", "transfer",
        "investment", "transaction_count", "net_worth", "net_balance",
    ]
    return pd.DataFrame(rows, columns=columns)
