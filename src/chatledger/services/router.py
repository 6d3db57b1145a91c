"""Hand-off of confirmed intents to record sinks.

The parser only proposes; once the user confirms a proposal, the router
assigns an identifier and a creation timestamp and passes the finished record
to the sink registered for its collection. Cancelling a proposal is simply
never calling ``confirm``.
"""

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from chatledger.services.categories import DEFAULT_CATEGORY
from chatledger.services.intent import IntentKind, ParsedIntent

logger = logging.getLogger(__name__)


class TargetCollection(Enum):
    """Collections that can receive confirmed records."""

    EXPENSES = "expenses"
    REMINDERS = "reminders"
    TASKS = "tasks"
    NOTES = "notes"


@dataclass
class ConfirmedRecord:
    """A parsed intent enriched with identity, ready for storage."""

    id: str
    target: TargetCollection
    description: str
    created_at: datetime
    amount: Decimal | None = None
    category: str | None = None
    due_date: datetime | None = None  # reminders only
    completed: bool = False  # tasks only


RecordSink = Callable[[ConfirmedRecord], None]


class NoSinkRegisteredError(LookupError):
    """Raised when a record is confirmed for a collection nobody handles."""


class RecordRouter:
    """Routes confirmed intents to the sink for their collection."""

    INTENT_ROUTES = {
        IntentKind.EXPENSE: TargetCollection.EXPENSES,
        IntentKind.REMINDER: TargetCollection.REMINDERS,
        IntentKind.TASK: TargetCollection.TASKS,
        IntentKind.NOTE: TargetCollection.NOTES,
    }

    def __init__(
        self,
        sinks: dict[TargetCollection, RecordSink] | None = None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._sinks: dict[TargetCollection, RecordSink] = dict(sinks or {})
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._clock = clock or (lambda: datetime.now(UTC))

    def register(self, target: TargetCollection, sink: RecordSink) -> None:
        """Attach the sink that stores records of one collection."""
        self._sinks[target] = sink

    def target_for(self, intent: ParsedIntent) -> TargetCollection | None:
        """Collection an intent belongs to, or None for unknown input."""
        return self.INTENT_ROUTES.get(intent.kind)

    def build_record(self, intent: ParsedIntent) -> ConfirmedRecord:
        """Attach an id and creation time to an actionable intent.

        Raises:
            ValueError: If the intent is UNKNOWN.
        """
        target = self.target_for(intent)
        if target is None:
            raise ValueError(f"Cannot build a record from a {intent.kind.value} intent")

        created_at = self._clock()
        record = ConfirmedRecord(
            id=self._id_factory(),
            target=target,
            description=intent.description,
            created_at=created_at,
        )

        if target is TargetCollection.EXPENSES:
            record.amount = intent.amount
            record.category = intent.category or DEFAULT_CATEGORY
            # An empty description falls back to the raw message
            record.description = intent.description or intent.raw_text
        elif target is TargetCollection.REMINDERS:
            record.due_date = intent.date or created_at

        return record

    def confirm(self, intent: ParsedIntent) -> ConfirmedRecord | None:
        """Store a confirmed intent through its collection's sink.

        Returns:
            The stored record, or None if the intent was not actionable.

        Raises:
            NoSinkRegisteredError: If no sink handles the intent's collection.
        """
        target = self.target_for(intent)
        if target is None:
            logger.debug(f"Ignoring confirmation of {intent.kind.value} intent")
            return None

        sink = self._sinks.get(target)
        if sink is None:
            raise NoSinkRegisteredError(f"No sink registered for {target.value}")

        record = self.build_record(intent)
        sink(record)
        logger.info(f"Recorded {target.value} entry {record.id}")
        return record
