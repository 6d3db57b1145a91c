from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any


class IntentKind(Enum):
    """The single record type a sentence is classified as."""

    EXPENSE = "expense"
    REMINDER = "reminder"
    TASK = "task"
    NOTE = "note"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ParsedIntent:
    kind: IntentKind
    description: str
    amount: Decimal | None = None
    category: str | None = None
    date: datetime | None = None
    raw_text: str = ""

    @property
    def is_actionable(self) -> bool:
        """Whether a caller can turn this into a stored record."""
        return self.kind is not IntentKind.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "description": self.description,
            "amount": str(self.amount) if self.amount is not None else None,
            "category": self.category,
            "date": self.date.isoformat() if self.date else None,
            "raw_text": self.raw_text,
        }
