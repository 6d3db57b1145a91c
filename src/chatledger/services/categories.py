"""Keyword table for expense categories.

Categories are checked in table order and the first one with a keyword that
appears anywhere in the message wins, so "train ticket" is Transport rather
than Entertainment. Keywords are plain lower-case substrings: "bus" also hits
"business" and "gas" hits "vegas".
"""

from collections.abc import Iterator

DEFAULT_CATEGORY = "General"

CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Food",
        (
            "lunch",
            "dinner",
            "breakfast",
            "coffee",
            "restaurant",
            "meal",
            "food",
            "pizza",
            "burger",
            "sandwich",
        ),
    ),
    ("Transport", ("taxi", "uber", "bus", "train", "fuel", "petrol", "gas", "parking", "transport")),
    ("Shopping", ("shopping", "clothes", "shirt", "shoes", "book", "amazon", "store")),
    ("Entertainment", ("cinema", "movie", "game", "concert", "ticket", "entertainment")),
    ("Health", ("doctor", "medicine", "pharmacy", "hospital", "dentist", "health")),
    ("Bills", ("bill", "electricity", "water", "internet", "phone", "rent", "mortgage")),
    ("Groceries", ("groceries", "supermarket", "tesco", "sainsbury", "asda", "market")),
)


def category_names() -> list[str]:
    """All category labels in table order, followed by the default."""
    return [label for label, _ in CATEGORY_KEYWORDS] + [DEFAULT_CATEGORY]


def all_keywords() -> Iterator[str]:
    for _, keywords in CATEGORY_KEYWORDS:
        yield from keywords


def categorize(text: str) -> str:
    """Map lower-cased message text to a category label.

    Args:
        text: Normalized (lower-cased, trimmed) message

    Returns:
        The first matching category label, or DEFAULT_CATEGORY
    """
    for label, keywords in CATEGORY_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return label
    return DEFAULT_CATEGORY


def has_category_keyword(text: str) -> bool:
    return any(keyword in text for keyword in all_keywords())
