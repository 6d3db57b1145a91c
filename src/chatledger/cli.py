import argparse
import json
import logging
import sys
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import TextIO

from chatledger.config import settings
from chatledger.sentry import capture_exception, init_sentry
from chatledger.sentry import flush as sentry_flush

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def classify_text(text: str, out: TextIO | None = None) -> None:
    """Print the parsed intent for one message as JSON, followed by the reply."""
    from chatledger.services.parser import classify
    from chatledger.services.responses import format_response

    out = out or sys.stdout
    intent = classify(text)
    print(json.dumps(intent.to_dict(), ensure_ascii=False, indent=2), file=out)
    print(format_response(intent), file=out)


def run_chat(
    lines: Iterable[str],
    out: TextIO | None = None,
    confirm: bool = True,
) -> dict[str, int]:
    """Interactive capture loop over input lines.

    Each message is parsed and proposed; when ``confirm`` is set the next line
    is read as the yes/no answer. Confirmed records are kept in memory for the
    session only.

    Returns:
        Number of stored records per collection.
    """
    from chatledger.services.parser import classify
    from chatledger.services.responses import (
        GREETING,
        INPUT_HINT,
        format_currency,
        format_response,
    )
    from chatledger.services.router import RecordRouter, TargetCollection
    from chatledger.services.summary import summarize_spending

    out = out or sys.stdout
    stored: dict[TargetCollection, list] = {target: [] for target in TargetCollection}
    router = RecordRouter(sinks={target: stored[target].append for target in TargetCollection})

    print(GREETING, file=out)
    print(INPUT_HINT, file=out)

    messages = iter(lines)
    for line in messages:
        text = line.strip()
        if not text:
            continue

        intent = classify(text)
        if not intent.is_actionable:
            print(format_response(intent), file=out)
            continue

        if confirm:
            print(f"Save this {intent.kind.value}? {intent.description} [y/N]", file=out)
            answer = next(messages, "").strip().lower()
            if answer not in ("y", "yes"):
                print("Cancelled.", file=out)
                continue

        router.confirm(intent)
        print(format_response(intent), file=out)

    summary = {target.value: len(records) for target, records in stored.items()}
    print("\nSession summary:", file=out)
    for name, count in summary.items():
        print(f"  {name}: {count}", file=out)

    if stored[TargetCollection.EXPENSES]:
        spending = summarize_spending(stored[TargetCollection.EXPENSES], datetime.now(UTC))
        print("\nSpending:", file=out)
        print(f"  Today: {format_currency(spending.today)}", file=out)
        print(f"  This week: {format_currency(spending.this_week)}", file=out)
        for category, total in spending.by_category:
            print(f"  {category}: {format_currency(total)}", file=out)
    return summary


def check_config(out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print("chatledger Configuration Check\n", file=out)

    checks = [
        ("User timezone", settings.user_timezone),
        ("Currency symbol", settings.currency_symbol),
        ("Log level", settings.log_level),
        ("Sentry DSN", "configured" if settings.has_sentry else "MISSING (optional)"),
    ]
    for name, value in checks:
        print(f"  {name}: {value}", file=out)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Chat-style expense, task and reminder capture")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    classify_parser = subparsers.add_parser("classify", help="Parse a single message")
    classify_parser.add_argument("text", nargs="+", help="Message to parse")

    chat_parser = subparsers.add_parser("chat", help="Read messages from stdin")
    chat_parser.add_argument(
        "--no-confirm",
        action="store_true",
        help="Store every recognised message without asking",
    )

    subparsers.add_parser("check", help="Check configuration")

    args = parser.parse_args(argv)

    setup_logging()

    init_sentry(
        dsn=settings.sentry_dsn if settings.has_sentry else None,
        environment=settings.sentry_environment,
    )

    try:
        if args.command == "classify":
            classify_text(" ".join(args.text))
        elif args.command == "chat":
            run_chat(sys.stdin, confirm=not args.no_confirm)
        elif args.command == "check":
            check_config()
        else:
            parser.print_help()
    except Exception as e:
        logger.exception("Command failed")
        capture_exception(e)
        raise
    finally:
        sentry_flush(timeout=2.0)


if __name__ == "__main__":
    main()
