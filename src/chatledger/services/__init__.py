"""chatledger services module.

The message parser and its collaborators. Imports are lazy so that pulling in
one helper does not load the whole package.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS: dict[str, tuple[str, str]] = {
    # Intent model
    "IntentKind": ("chatledger.services.intent", "IntentKind"),
    "ParsedIntent": ("chatledger.services.intent", "ParsedIntent"),
    # Parser
    "IntentRule": ("chatledger.services.parser", "IntentRule"),
    "INTENT_RULES": ("chatledger.services.parser", "INTENT_RULES"),
    "Parser": ("chatledger.services.parser", "Parser"),
    "classify": ("chatledger.services.parser", "classify"),
    "get_parser": ("chatledger.services.parser", "get_parser"),
    "normalize": ("chatledger.services.parser", "normalize"),
    "reset_parser": ("chatledger.services.parser", "reset_parser"),
    # Amounts
    "ExtractedAmount": ("chatledger.services.amounts", "ExtractedAmount"),
    "extract_amount": ("chatledger.services.amounts", "extract_amount"),
    # Categories
    "CATEGORY_KEYWORDS": ("chatledger.services.categories", "CATEGORY_KEYWORDS"),
    "DEFAULT_CATEGORY": ("chatledger.services.categories", "DEFAULT_CATEGORY"),
    "categorize": ("chatledger.services.categories", "categorize"),
    # Descriptions
    "STRIPPING_RULES": ("chatledger.services.descriptions", "STRIPPING_RULES"),
    "extract_description": ("chatledger.services.descriptions", "extract_description"),
    # Dates
    "resolve_reminder_date": ("chatledger.services.dates", "resolve_reminder_date"),
    # Responses
    "format_currency": ("chatledger.services.responses", "format_currency"),
    "format_response": ("chatledger.services.responses", "format_response"),
    # Router
    "ConfirmedRecord": ("chatledger.services.router", "ConfirmedRecord"),
    "NoSinkRegisteredError": ("chatledger.services.router", "NoSinkRegisteredError"),
    "RecordRouter": ("chatledger.services.router", "RecordRouter"),
    "TargetCollection": ("chatledger.services.router", "TargetCollection"),
    # Summary
    "SpendingSummary": ("chatledger.services.summary", "SpendingSummary"),
    "summarize_spending": ("chatledger.services.summary", "summarize_spending"),
    # Text
    "trim": ("chatledger.services.text", "trim"),
}

__all__ = list(_EXPORTS.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_name, attr_name = _EXPORTS[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_EXPORTS.keys()))
