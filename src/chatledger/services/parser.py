"""Rule-based message parser.

Turns one chat message into exactly one ParsedIntent. Intents are decided by
an ordered cascade of rules; the first rule whose predicate holds builds the
result and the rest are skipped. The order matters because the keyword sets
overlap: "Remind me to pay rent tomorrow" has an expense keyword ("rent") but
must stay a reminder, and "Add 12 for lunch" has a task keyword but is an
expense.

Order:
1. reminder - mentions "remind"
2. expense  - has an amount plus some expense evidence
3. task     - mentions "task", "add", "todo" or "to-do"
4. note     - mentions "note", "remember" or "save"
5. unknown  - everything else
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Any, cast

import pytz

from chatledger.config import settings
from chatledger.services.amounts import ExtractedAmount, extract_amount, has_currency_symbol
from chatledger.services.categories import categorize, has_category_keyword
from chatledger.services.dates import resolve_reminder_date
from chatledger.services.descriptions import extract_description
from chatledger.services.intent import IntentKind, ParsedIntent
from chatledger.services.text import trim

logger = logging.getLogger(__name__)

REMINDER_KEYWORDS = ("remind", "reminder")
SPEND_VERBS = ("spent", "cost", "paid")
TASK_KEYWORDS = ("task", "add", "todo", "to-do")
NOTE_KEYWORDS = ("note", "remember", "save")

# Bare amounts with a word attached: "12 lunch", "lunch 12". Digits and word
# characters are ASCII only while the gap may be any Unicode whitespace.
AMOUNT_THEN_WORD = re.compile(r"^[0-9]+(\.[0-9]{2})?\s*[A-Za-z0-9_]+")
WORD_THEN_AMOUNT = re.compile(r"[A-Za-z0-9_]+\s*[0-9]+(\.[0-9]{2})?$")


def normalize(text: Any) -> str:
    """Lower-cased, trimmed copy of a message used for keyword matching."""
    return trim(_coerce(text)).lower()


def _coerce(text: Any) -> str:
    if text is None:
        return ""
    return text if isinstance(text, str) else str(text)


@dataclass(frozen=True)
class Message:
    """A message as seen by the rules."""

    original: str  # trimmed, case preserved
    normalized: str
    amount: ExtractedAmount | None
    now: datetime

    def mentions(self, keywords: tuple[str, ...]) -> bool:
        return any(keyword in self.normalized for keyword in keywords)


@dataclass(frozen=True)
class IntentRule:
    kind: IntentKind
    matches: Callable[[Message], bool]
    build: Callable[[Message], ParsedIntent]


def _is_reminder(message: Message) -> bool:
    return message.mentions(REMINDER_KEYWORDS)


def _is_expense(message: Message) -> bool:
    if message.amount is None:
        return False
    return (
        has_currency_symbol(message.normalized)
        or message.mentions(SPEND_VERBS)
        or has_category_keyword(message.normalized)
        or bool(AMOUNT_THEN_WORD.search(message.original))
        or bool(WORD_THEN_AMOUNT.search(message.original))
    )


def _is_task(message: Message) -> bool:
    return message.mentions(TASK_KEYWORDS)


def _is_note(message: Message) -> bool:
    return message.mentions(NOTE_KEYWORDS)


def _always(message: Message) -> bool:
    return True


def _build_reminder(message: Message) -> ParsedIntent:
    return ParsedIntent(
        kind=IntentKind.REMINDER,
        description=extract_description(IntentKind.REMINDER, message.original),
        date=resolve_reminder_date(message.normalized, message.now),
        raw_text=message.original,
    )


def _build_expense(message: Message) -> ParsedIntent:
    return ParsedIntent(
        kind=IntentKind.EXPENSE,
        description=message.original,
        amount=cast(ExtractedAmount, message.amount).value,
        category=categorize(message.normalized),
        raw_text=message.original,
    )


def _build_stripped(kind: IntentKind) -> Callable[[Message], ParsedIntent]:
    def build(message: Message) -> ParsedIntent:
        return ParsedIntent(
            kind=kind,
            description=extract_description(kind, message.original),
            raw_text=message.original,
        )

    return build


def _build_unknown(message: Message) -> ParsedIntent:
    return ParsedIntent(
        kind=IntentKind.UNKNOWN,
        description=message.original,
        raw_text=message.original,
    )


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(IntentKind.REMINDER, _is_reminder, _build_reminder),
    IntentRule(IntentKind.EXPENSE, _is_expense, _build_expense),
    IntentRule(IntentKind.TASK, _is_task, _build_stripped(IntentKind.TASK)),
    IntentRule(IntentKind.NOTE, _is_note, _build_stripped(IntentKind.NOTE)),
    IntentRule(IntentKind.UNKNOWN, _always, _build_unknown),
)


class Parser:
    """Classifies chat messages into expenses, reminders, tasks and notes.

    The parser holds no state between calls; the same instance can be shared
    across threads.
    """

    rules = INTENT_RULES

    def __init__(
        self,
        timezone: str | None = None,
        clock: Callable[[tzinfo], datetime] | None = None,
    ):
        """Initialize the parser.

        Args:
            timezone: IANA timezone for reminder dates. Defaults to settings.user_timezone.
            clock: Returns "now" for a timezone. Defaults to datetime.now.
        """
        self.timezone = pytz.timezone(timezone or settings.user_timezone)
        self._clock = clock or datetime.now

    def parse(self, text: Any, now: datetime | None = None) -> ParsedIntent:
        """Classify a message. Never raises; unrecognised input is UNKNOWN."""
        original = trim(_coerce(text))
        message = Message(
            original=original,
            normalized=normalize(original),
            amount=extract_amount(original),
            now=now or self._clock(self.timezone),
        )

        for rule in self.rules:
            if rule.matches(message):
                logger.debug(f"Classified {original!r} as {rule.kind.value}")
                return rule.build(message)

        # unreachable: the last rule always matches
        return _build_unknown(message)


_parser: Parser | None = None


def get_parser() -> Parser:
    """Get the shared Parser instance."""
    global _parser
    if _parser is None:
        _parser = Parser()
    return _parser


def reset_parser() -> None:
    """Drop the shared Parser (useful for testing)."""
    global _parser
    _parser = None


def classify(text: Any, now: datetime | None = None) -> ParsedIntent:
    """Classify one message with the shared parser.

    Args:
        text: The message as typed by the user
        now: Reference time for reminder dates. Defaults to the current time
            in the configured timezone.

    Returns:
        ParsedIntent with exactly one kind
    """
    return get_parser().parse(text, now=now)
