import os
from decimal import Decimal


class Constants:
    class Parsing:
        # Iranian banks report in Rial; anything smaller is a date, time or code.
        MIN_AMOUNT = Decimal("1000")
        MIN_MERCHANT_NAME_LENGTH = 2

    class Currency:
        IRR = "IRR"

    class NetDisplay:
        DEFAULT = "default"
        MANEH = "maneh"

    class Api:
        HOST = os.environ.get("SMS_PARSER_HOST", "0.0.0.0")
        PORT = int(os.environ.get("SMS_PARSER_PORT", "8000"))


class Keywords:
    """
    Localized keyword tables shared by the Iranian bank parsers.
    Words marked "Arabic yeh" are spelled with U+064A as the banks send them.
    """

    OTP = ["otp", "رمز یکبار مصرف", "کد تایید"]
    PROMOTIONAL = ["تبلیغ", "پیشنهاد", "تخفیف", "cashback offer"]

    REQUEST = "درخواست"
    PAYMENT = "پرداخت"

    PURCHASE = "خرید"
    WITHDRAWAL = "برداشت"
    DEPOSIT = "واریز"
    DEPOSIT_ARABIC_YEH = "واريز"
    TRANSFER = "انتقال"
    TRANSFER_ARABIC_YEH = "انتقالي"
    CONSUMPTION = "مصرف"
    INTERNET_PURCHASE = "خرید اینترنتی"
    INTERNET_PURCHASE_ARABIC_YEH = "خريداينترنتي"
    CARD = "کارت"
    MONEY = "پول"
    BALANCE_REMAINING = "مانده"
    BALANCE_AVAILABLE = "موجودی"
    RIAL = "ریال"

    CARD_FLAGS = ["کارت", "card", "debit card", "credit card"]
    CARD_FLAGS_EXTENDED = CARD_FLAGS + ["کارت بدهی", "کارت اعتباری"]

    GENERIC_TRANSACTION = [
        "مبلغ", "ریال", "تومان", "irr", "toman",
        "برداشت", "واریز", "پرداخت", "خرید", "انتقال",
        "debit", "credit", "spent", "received", "transferred", "paid",
    ]

    INVESTMENT = [
        "mutual fund", "elss", "folio", "demat", "stockbroker",
        "digital gold", "sovereign gold", "clearing corporation",
        "صندوق سرمایه", "سرمایه گذاری", "سرمایه‌گذاری", "سبدگردان", "بورس",
    ]

    MERCHANT_STOPWORDS = {
        "USING", "VIA", "THROUGH", "BY", "WITH", "FOR", "TO", "FROM", "AT", "THE",
        "استفاده", "از", "توسط", "از طریق", "برای", "به", "در", "و", "با",
    }
