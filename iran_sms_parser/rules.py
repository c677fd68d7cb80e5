import re
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Optional, Pattern, Sequence, Tuple

from .constants import Constants
from .transaction_type import TransactionType


class ExtractionRule:
    """
    One step of an extractor: a compiled pattern plus the transform applied
    to its match. Extractors hold an ordered list of these and the first rule
    whose pattern matches decides the result, even when its transform
    yields None.
    """

    def __init__(self, name: str, pattern: Pattern, transform: Callable[[re.Match], Any]):
        self.name = name
        self.pattern = pattern
        self.transform = transform

    def apply(self, message: str) -> Tuple[bool, Any]:
        match = self.pattern.search(message)
        if match is None:
            return False, None
        return True, self.transform(match)

    def __repr__(self) -> str:
        return f"ExtractionRule({self.name!r})"


def first_match(rules: Sequence[ExtractionRule], message: str) -> Any:
    for rule in rules:
        matched, value = rule.apply(message)
        if matched:
            return value
    return None


def rule_names(rules: Sequence[ExtractionRule]) -> List[str]:
    return [rule.name for rule in rules]


# -----------------------------------------------------------------------------
# Transforms
# -----------------------------------------------------------------------------
def parse_decimal(raw: str) -> Optional[Decimal]:
    clean = re.sub(r"[^\d,.+-]", "", raw, flags=re.ASCII).replace(",", "")
    try:
        return Decimal(clean)
    except (InvalidOperation, ValueError):
        return None


def to_amount(raw: str) -> Optional[Decimal]:
    """Unsigned amount, or None when unparseable or below the minimum."""
    value = parse_decimal(raw)
    if value is None:
        return None
    value = abs(value)
    return value if value >= Constants.Parsing.MIN_AMOUNT else None


def amount_group(group: int = 1) -> Callable[[re.Match], Optional[Decimal]]:
    return lambda match: to_amount(match.group(group))


def decimal_group(group: int = 1) -> Callable[[re.Match], Optional[Decimal]]:
    return lambda match: parse_decimal(match.group(group))


def text_group(group: int = 1) -> Callable[[re.Match], str]:
    return lambda match: match.group(group)


def suffix_group(length: int, group: int = 1) -> Callable[[re.Match], str]:
    # shorter numbers are returned whole
    return lambda match: match.group(group)[-length:]


def sign_group(group: int = 1) -> Callable[[re.Match], TransactionType]:
    def transform(match: re.Match) -> TransactionType:
        return TransactionType.INCOME if match.group(group) == "+" else TransactionType.EXPENSE
    return transform


# -----------------------------------------------------------------------------
# Rule builders
# -----------------------------------------------------------------------------
def keyword_rule(keyword: str, value: Any) -> ExtractionRule:
    """Literal, case-insensitive keyword mapped to a fixed value."""
    return ExtractionRule(keyword, re.compile(re.escape(keyword), re.IGNORECASE), lambda match: value)


def pattern_rule(name: str, pattern: Pattern, value: Any) -> ExtractionRule:
    return ExtractionRule(name, pattern, lambda match: value)


def keyword_rules(table: Sequence[Tuple[str, Any]]) -> List[ExtractionRule]:
    return [keyword_rule(keyword, value) for keyword, value in table]


def contains_any(message: str, keywords: Sequence[str]) -> bool:
    return any(kw in message for kw in keywords)
