"""Description extraction for reminders, tasks and notes.

Each kind has an ordered list of instruction phrases. Every phrase is removed
at most once (its first occurrence, case-insensitive) from the result of the
previous step, and the remainder is trimmed.

Because removal is substring based, later phrases can miss their target after
an earlier phrase ate part of it: in "Add call dentist to my tasks" the
"task" rule strips the "task" of "tasks" before "to my tasks" is tried, which
leaves "call dentist to my s".
"""

import re

from chatledger.services.intent import IntentKind
from chatledger.services.text import trim


def _phrase(words: str, eat_spaces: bool = True) -> re.Pattern[str]:
    """Compile an instruction phrase, optionally with the whitespace after it.

    Case folding is ASCII only, so U+017F (long s) does not match "s"; the
    trailing whitespace class stays Unicode.
    """
    return re.compile(f"(?ai:{words})" + (r"\s*" if eat_spaces else ""))


STRIPPING_RULES: dict[IntentKind, tuple[re.Pattern[str], ...]] = {
    IntentKind.REMINDER: (
        _phrase("remind me to"),
        _phrase("reminder:?"),
    ),
    IntentKind.TASK: (
        _phrase("add"),
        _phrase("task:?"),
        _phrase("to my tasks?", eat_spaces=False),
        _phrase("todo:?"),
        _phrase("to-do:?"),
    ),
    IntentKind.NOTE: (
        _phrase("note:?"),
        _phrase("remember:?"),
        _phrase("save:?"),
    ),
}


def extract_description(kind: IntentKind, text: str) -> str:
    """Strip the instruction phrases for ``kind`` from the original message.

    Kinds without stripping rules (expenses, unknown input) get the trimmed
    message back unchanged.
    """
    description = text
    for pattern in STRIPPING_RULES.get(kind, ()):
        description = pattern.sub("", description, count=1)
    return trim(description)
