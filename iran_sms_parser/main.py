import argparse
import logging
import os
import sys
from typing import List, Optional

import pandas as pd

from .bank.bank_parser_factory import BankParserFactory
from .constants import Constants
from .currency_totals import group_by_currency, totals_frame
from .parsed_transaction import ParsedTransaction

logger = logging.getLogger(__name__)

PARSED_COLUMNS = [
    "parsed_amount", "parsed_type", "merchant", "reference",
    "account_last4", "balance", "balance_parsed", "bank_name",
    "is_from_card", "currency", "transaction_id",
]


def _to_timestamp(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def parse_sms_frame(df: pd.DataFrame):
    """
    Parses every row of an SMS inbox frame (columns: address, body, date).
    Returns the frame extended with the parsed columns and the parsed records.
    """
    rows = []
    transactions: List[ParsedTransaction] = []

    for record in df.to_dict("records"):
        sender = str(record.get("address") or "")
        body = str(record.get("body") or "")
        timestamp = _to_timestamp(record.get("date"))

        parsed = {column: "" for column in PARSED_COLUMNS}
        txn = BankParserFactory.parse(sender, body, timestamp)
        if txn:
            transactions.append(txn)
            parsed.update({
                "parsed_amount": str(txn.amount),
                "parsed_type": txn.type.value,
                "merchant": txn.merchant or "",
                "reference": txn.reference or "",
                "account_last4": txn.account_last4 or "",
                "balance": str(txn.balance),
                "balance_parsed": txn.balance_parsed,
                "bank_name": txn.bank_name,
                "is_from_card": txn.is_from_card,
                "currency": txn.currency,
                "transaction_id": txn.generate_transaction_id(),
            })
        rows.append(parsed)

    parsed_df = pd.DataFrame(rows, columns=PARSED_COLUMNS, index=df.index)
    return pd.concat([df, parsed_df], axis=1), transactions


def format_summary(transactions: List[ParsedTransaction], net_display: str) -> str:
    grouped = group_by_currency(transactions)
    if not grouped.has_any_currency():
        return "No transactions parsed."

    report = ["=" * 60, "  CURRENCY TOTALS", "=" * 60]
    report.append(totals_frame(grouped).to_string(index=False))
    report.append("-" * 60)
    for currency in grouped.available_currencies:
        net = grouped.get_totals_for_currency(currency).calculate_net_value(net_display)
        report.append(f"Net ({net_display}) {currency}: {net}")
    return "\n".join(report)


def process_sms_data(input_path: str, output_path: str, summary: bool = False,
                     net_display: str = Constants.NetDisplay.DEFAULT) -> int:
    logger.info("Reading from %s", input_path)
    df = pd.read_csv(input_path, dtype={"address": str, "body": str}, keep_default_na=False)

    out_df, transactions = parse_sms_frame(df)
    out_df.to_csv(output_path, index=False, encoding="utf-8")

    logger.info("Processed %d messages, parsed %d transactions", len(df), len(transactions))
    logger.info("Output saved to %s", output_path)

    if summary:
        print(format_summary(transactions, net_display))
    return len(transactions)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse Iranian bank SMS exports into transactions.")
    parser.add_argument("input", help="CSV with address, body and date columns")
    parser.add_argument("output", help="where to write the parsed CSV")
    parser.add_argument("--summary", action="store_true", help="print per-currency totals")
    parser.add_argument(
        "--net-display",
        choices=[Constants.NetDisplay.DEFAULT, Constants.NetDisplay.MANEH],
        default=Constants.NetDisplay.DEFAULT,
        help="net value shown in the summary: income minus outflows, or balance (maneh)",
    )
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if not os.path.exists(args.input):
        logger.error("Input file not found: %s", args.input)
        return 1

    process_sms_data(args.input, args.output, summary=args.summary, net_display=args.net_display)
    return 0


if __name__ == "__main__":
    sys.exit(main())
