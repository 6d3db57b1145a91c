"""Tests for handing confirmed intents to record sinks."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
import pytz

from chatledger.services.intent import IntentKind, ParsedIntent
from chatledger.services.router import (
    ConfirmedRecord,
    NoSinkRegisteredError,
    RecordRouter,
    TargetCollection,
)

CREATED_AT = datetime(2024, 5, 1, 8, 0, tzinfo=pytz.UTC)


def make_router(**sinks) -> RecordRouter:
    return RecordRouter(
        sinks={TargetCollection[name.upper()]: sink for name, sink in sinks.items()},
        id_factory=lambda: "rec-1",
        clock=lambda: CREATED_AT,
    )


class TestRecordRouter:
    def test_targets(self):
        router = RecordRouter()
        assert router.target_for(ParsedIntent(IntentKind.EXPENSE, "x")) == TargetCollection.EXPENSES
        assert router.target_for(ParsedIntent(IntentKind.REMINDER, "x")) == TargetCollection.REMINDERS
        assert router.target_for(ParsedIntent(IntentKind.TASK, "x")) == TargetCollection.TASKS
        assert router.target_for(ParsedIntent(IntentKind.NOTE, "x")) == TargetCollection.NOTES
        assert router.target_for(ParsedIntent(IntentKind.UNKNOWN, "x")) is None

    def test_confirm_expense(self):
        sink = MagicMock()
        router = make_router(expenses=sink)
        intent = ParsedIntent(
            kind=IntentKind.EXPENSE,
            description="Coffee £3.50",
            amount=Decimal("3.50"),
            category="Food",
            raw_text="Coffee £3.50",
        )

        record = router.confirm(intent)

        sink.assert_called_once_with(record)
        assert record == ConfirmedRecord(
            id="rec-1",
            target=TargetCollection.EXPENSES,
            description="Coffee £3.50",
            created_at=CREATED_AT,
            amount=Decimal("3.50"),
            category="Food",
        )

    def test_reminder_keeps_due_date(self):
        sink = MagicMock()
        router = make_router(reminders=sink)
        due = datetime(2024, 5, 2, 8, 0, tzinfo=pytz.UTC)
        intent = ParsedIntent(kind=IntentKind.REMINDER, description="pay rent", date=due)

        record = router.confirm(intent)

        assert record.due_date == due
        assert record.created_at == CREATED_AT

    def test_reminder_without_date_defaults_to_creation_time(self):
        router = make_router()
        record = router.build_record(ParsedIntent(kind=IntentKind.REMINDER, description="x"))
        assert record.due_date == CREATED_AT

    def test_task_starts_incomplete(self):
        tasks = []
        router = make_router(tasks=tasks.append)

        record = router.confirm(ParsedIntent(kind=IntentKind.TASK, description="call dentist"))

        assert tasks == [record]
        assert record.completed is False
        assert record.amount is None

    def test_note(self):
        notes = []
        router = make_router()
        router.register(TargetCollection.NOTES, notes.append)

        router.confirm(ParsedIntent(kind=IntentKind.NOTE, description="Check receipts"))

        assert [n.description for n in notes] == ["Check receipts"]

    def test_unknown_is_ignored(self):
        sink = MagicMock()
        router = make_router(notes=sink)
        assert router.confirm(ParsedIntent(kind=IntentKind.UNKNOWN, description="??")) is None
        sink.assert_not_called()

    def test_missing_sink_raises(self):
        router = make_router()
        with pytest.raises(NoSinkRegisteredError):
            router.confirm(ParsedIntent(kind=IntentKind.TASK, description="x"))

    def test_build_record_rejects_unknown(self):
        router = make_router()
        with pytest.raises(ValueError):
            router.build_record(ParsedIntent(kind=IntentKind.UNKNOWN, description="x"))

    def test_default_ids_are_unique(self):
        router = RecordRouter()
        intent = ParsedIntent(kind=IntentKind.NOTE, description="x")
        first = router.build_record(intent)
        second = router.build_record(intent)
        assert first.id != second.id
        assert first.created_at.tzinfo is not None
