import re

# ASCII digits only: Persian digits only ever appear in dates and times.
_FLAGS = re.ASCII

AMOUNT = r"\d{1,3}(?:,\d{3})*(?:\.\d{1,2})?"
INTEGER_AMOUNT = r"\d{1,3}(?:,\d{3})*"
LOOSE_AMOUNT = r"\d{1,3}(?:,\d{3})*|\d+"


class CompiledPatterns:
    class Common:
        PLUS_AMOUNT = re.compile(r"\+(" + LOOSE_AMOUNT + r")", _FLAGS)
        MINUS_AMOUNT = re.compile(r"-(" + LOOSE_AMOUNT + r")", _FLAGS)
        CARD_NUMBER = re.compile(r"(\d{4}[-\s]?\d{4}[-\s]?\d{4}[-\s]?\d{4})", _FLAGS)
        MASKED_SUFFIX = re.compile(r"\d{4}[-\s]?(\d{4})", _FLAGS)
        BALANCE_OPTIONAL_COLON = re.compile(r"مانده\s*:?\s*(" + INTEGER_AMOUNT + r")", _FLAGS)

    class Generic:
        KEYWORD_OR_SIGN_AMOUNT = re.compile(
            r"(?:مبلغ\s*)?(" + LOOSE_AMOUNT + r")(?:\s*(?:ریال|تومان))?\s*(?:برداشت|واریز|انتقال|خرید|[-+])",
            _FLAGS,
        )
        SIGNED_AMOUNT = re.compile(r"[+-](" + LOOSE_AMOUNT + r")", _FLAGS)

    class Keshavarzi:
        # خرید500,000 / واريز4,000,000 / برداشت24,000
        VERB_AMOUNT = re.compile(r"(خرید|واريز|برداشت)\s*(" + AMOUNT + r")", _FLAGS)
        VERB_DIGITS = re.compile(r"(خرید|واريز|برداشت)\s*\d+", _FLAGS)
        CARD_SUFFIX = re.compile(r"کارت\s*(\d{4})\*?", _FLAGS)
        BALANCE = re.compile(r"مانده\s*(" + AMOUNT + r")", _FLAGS)

    class Resalat:
        # 10.10055857.1 / +120,000,000 / مانده: 120,025,817
        SIGNED_AMOUNT = re.compile(r"([+-])(" + AMOUNT + r")", _FLAGS)
        REFERENCE = re.compile(r"^(\d+\.\d+\.\d+)", _FLAGS)
        BALANCE = re.compile(r"مانده\s*:\s*(" + AMOUNT + r")", _FLAGS)

    class Refah:
        # کارت5,000,000+ / خرید2,450,000- / حساب207853186
        VERB_AMOUNT_SIGN = re.compile(r"(کارت|خرید|برداشت|واریز)\s*(" + AMOUNT + r")([+-])", _FLAGS)
        VERB_DIGITS_SIGN = re.compile(r"(کارت|خرید|برداشت|واریز)\s*\d+[+-]", _FLAGS)
        ACCOUNT = re.compile(r"حساب\s*(\d+)", _FLAGS)
        BALANCE = re.compile(r"مانده\s*(" + AMOUNT + r")", _FLAGS)

    class Blu:
        # 8,200,000 ریال / موجودی: 100,029,351 ریال
        RIAL_AMOUNT = re.compile(r"(" + AMOUNT + r")\s*ریال", _FLAGS)
        BALANCE = re.compile(r"موجودی\s*:\s*(" + AMOUNT + r")\s*ریال", _FLAGS)

    class Melli:
        # خريداينترنتي:318,340- / انتقال:3,409,000- / انتقالي:20,000,000+
        KEYWORD_COLON_AMOUNT = re.compile(
            r"(خريداينترنتي|انتقال|برداشت|انتقالي|واریز|خرید):\s*([+-]?" + AMOUNT + r")",
            _FLAGS,
        )
        INTERNET_PURCHASE_AMOUNT = re.compile(r"خرید\s+اینترنتی:\s*([+-]?" + AMOUNT + r")", _FLAGS)
        KEYWORD_COLON_SIGN = re.compile(
            r"(انتقال|انتقالي|واریز|خرید):\s*(" + AMOUNT + r")([-+])",
            _FLAGS,
        )
