"""Chat replies for parsed messages."""

from decimal import Decimal

from chatledger.config import settings
from chatledger.services.categories import DEFAULT_CATEGORY
from chatledger.services.intent import IntentKind, ParsedIntent

GREETING = (
    "Hi! I'm your expense tracker assistant. Try typing something like "
    "'Coffee £3.50' or 'Remind me to pay rent tomorrow'!"
)

INPUT_HINT = 'Try: "Coffee £3.50", "Remind me to pay bills", "Add call dentist to my tasks"'

FALLBACK_RESPONSE = (
    "I didn't quite understand that. Try something like "
    "'Lunch £12' or 'Remind me to call John tomorrow'."
)


def format_currency(amount: Decimal, symbol: str | None = None) -> str:
    """Format an amount for display, e.g. Decimal("1234.5") -> "£1,234.50"."""
    symbol = settings.currency_symbol if symbol is None else symbol
    return f"{symbol}{amount:,.2f}"


def format_response(intent: ParsedIntent, currency_symbol: str | None = None) -> str:
    """Build the assistant's reply for a parsed message."""
    if intent.kind is IntentKind.EXPENSE and intent.amount is not None:
        amount = format_currency(intent.amount, currency_symbol)
        return f"✅ Logged expense: {amount} for {intent.category or DEFAULT_CATEGORY}"
    if intent.kind is IntentKind.REMINDER:
        return f"⏰ Reminder set: {intent.description}"
    if intent.kind is IntentKind.TASK:
        return f"📝 Task added: {intent.description}"
    if intent.kind is IntentKind.NOTE:
        return f"📄 Note saved: {intent.description}"
    return FALLBACK_RESPONSE
