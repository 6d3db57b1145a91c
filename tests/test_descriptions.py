import pytest

from chatledger.services.descriptions import STRIPPING_RULES, extract_description
from chatledger.services.intent import IntentKind


class TestExtractDescription:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Remind me to pay rent tomorrow", "pay rent tomorrow"),
            ("remind me tocall mum", "call mum"),
            ("Reminder: bins out", "bins out"),
            ("REMINDER bins out", "bins out"),
            ("Remind me about the boiler", "Remind me about the boiler"),
        ],
    )
    def test_reminder(self, text, expected):
        assert extract_description(IntentKind.REMINDER, text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Add call dentist", "call dentist"),
            ("task: fix the gate", "fix the gate"),
            ("todo: laundry", "laundry"),
            ("to-do: laundry", "laundry"),
        ],
    )
    def test_task(self, text, expected):
        assert extract_description(IntentKind.TASK, text) == expected

    def test_task_plural_leaves_fragment(self):
        text = "Add call dentist to my tasks"
        assert extract_description(IntentKind.TASK, text) == "call dentist to my s"

    def test_only_first_occurrence_is_removed(self):
        text = "add milk and add eggs"
        assert extract_description(IntentKind.TASK, text) == "milk and add eggs"

    def test_removal_inside_words(self):
        # "add" is removed from inside "address" as well
        text = "update address"
        assert extract_description(IntentKind.TASK, text) == "update ress"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Note: Check receipts", "Check receipts"),
            ("remember: locker 14", "locker 14"),
            ("Save: this recipe", "this recipe"),
        ],
    )
    def test_note(self, text, expected):
        assert extract_description(IntentKind.NOTE, text) == expected

    def test_kinds_without_rules_are_trimmed_only(self):
        assert extract_description(IntentKind.EXPENSE, "  Add £5 note ") == "Add £5 note"
        assert extract_description(IntentKind.UNKNOWN, " hello ") == "hello"

    def test_rule_table_covers_stripped_kinds(self):
        assert set(STRIPPING_RULES) == {IntentKind.REMINDER, IntentKind.TASK, IntentKind.NOTE}


NBSP = chr(0x00A0)
KELVIN = chr(0x212A)
LONG_S = chr(0x017F)


class TestCaseFolding:
    def test_kelvin_sign_is_not_k(self):
        text = f"tas{KELVIN} list"
        assert extract_description(IntentKind.TASK, text) == text

    def test_long_s_is_not_s(self):
        text = f"{LONG_S}ave the date"
        assert extract_description(IntentKind.NOTE, text) == text

    def test_ascii_case_is_ignored(self):
        assert extract_description(IntentKind.NOTE, "SaVe: the date") == "the date"

    def test_unicode_space_after_phrase_is_removed(self):
        text = f"milk, then add{NBSP}{NBSP}eggs"
        assert extract_description(IntentKind.TASK, text) == "milk, then eggs"
