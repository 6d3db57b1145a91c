"""Sentry error tracking integration for chatledger.

Usage:
    from chatledger.sentry import init_sentry
    init_sentry(dsn=settings.sentry_dsn)

    from chatledger.sentry import capture_exception
    try:
        risky_operation()
    except Exception as e:
        capture_exception(e)
        raise
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any, cast

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

if TYPE_CHECKING:
    from sentry_sdk._types import Event, Hint

logger = logging.getLogger(__name__)

_initialized = False

# Message text can hold amounts and personal notes
SENSITIVE_KEYS = {"text", "raw_text", "description", "sentry_dsn"}


def init_sentry(
    dsn: str | None = None,
    environment: str = "production",
    release: str | None = None,
) -> bool:
    """Initialize Sentry SDK for error tracking.

    Args:
        dsn: Sentry DSN. Empty/None DSN disables Sentry.
        environment: Environment name (production, staging, development).
        release: Release version. If None, taken from the installed package.

    Returns:
        True if Sentry was initialized, False if skipped.
    """
    global _initialized

    if _initialized:
        logger.debug("Sentry already initialized")
        return True

    if not dsn:
        logger.debug("No SENTRY_DSN configured, error tracking disabled")
        return False

    if release is None:
        try:
            release = f"chatledger@{version('chatledger')}"
        except PackageNotFoundError:
            release = "chatledger@unknown"

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        integrations=[LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)],
        send_default_pii=False,
        before_send=_before_send,
    )

    _initialized = True
    logger.info(f"Sentry initialized: environment={environment}, release={release}")
    return True


def _before_send(event: Event, hint: Hint) -> Event | None:
    """Scrub message text from events before they leave the process."""
    if "extra" in event:
        _scrub_dict(cast(dict[str, Any], event["extra"]))

    if "breadcrumbs" in event:
        breadcrumbs = cast(dict[str, Any], event["breadcrumbs"])
        for breadcrumb in breadcrumbs.get("values", []):
            if "data" in breadcrumb:
                _scrub_dict(breadcrumb["data"])

    return event


def _scrub_dict(data: dict[str, Any]) -> None:
    """Scrub sensitive keys from a dictionary in-place."""
    for key in list(data.keys()):
        if key.lower() in SENSITIVE_KEYS:
            data[key] = "[REDACTED]"
        elif isinstance(data[key], dict):
            _scrub_dict(data[key])


def capture_exception(error: BaseException) -> str | None:
    """Report an exception. Returns the event id, or None when disabled."""
    if not _initialized:
        return None
    return sentry_sdk.capture_exception(error)


def flush(timeout: float = 2.0) -> None:
    """Send pending events before the process exits."""
    if _initialized:
        sentry_sdk.flush(timeout=timeout)


def is_enabled() -> bool:
    """Check if Sentry error tracking is active."""
    return _initialized
