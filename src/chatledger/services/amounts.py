"""Amount extraction for expense messages.

Finds the first number in a message, optionally prefixed by a currency glyph.
Only whole numbers and numbers with exactly two decimal places are
recognised; there is no support for thousands separators, negative values or
decimal commas.
"""

import re
from dataclasses import dataclass
from decimal import Decimal

CURRENCY_SYMBOLS: tuple[str, ...] = ("£", "$")

# "£3.50", "$12", "12" - a trailing ".5" is not part of the amount
AMOUNT_PATTERN = re.compile(r"([£$])?(\d+(?:\.\d{2})?)", re.ASCII)


@dataclass(frozen=True)
class ExtractedAmount:
    """First amount found in a message."""

    value: Decimal
    currency: str | None  # glyph directly in front of the number, if any
    matched_text: str


def extract_amount(text: str) -> ExtractedAmount | None:
    """Return the first amount in ``text``, or None if it holds no digits.

    Later numbers are ignored: "2 coffees for 7.40" yields 2.
    """
    match = AMOUNT_PATTERN.search(text)
    if not match:
        return None
    return ExtractedAmount(
        value=Decimal(match.group(2)),
        currency=match.group(1),
        matched_text=match.group(0),
    )


def has_currency_symbol(text: str) -> bool:
    return any(symbol in text for symbol in CURRENCY_SYMBOLS)
