"""Whitespace handling shared by the parser and description extraction."""

# Removed from both ends of a message: tab, line breaks, Unicode space
# separators and the byte-order mark. str.strip() alone keeps U+FEFF and also
# removes U+001C..U+001F and U+0085, which are not treated as blanks here.
TRIM_CHARS = "".join(
    chr(code)
    for code in (
        0x0009, 0x000A, 0x000B, 0x000C, 0x000D, 0x0020,  # ASCII blanks
        0x00A0, 0x1680,  # no-break space, ogham space mark
        *range(0x2000, 0x200B),  # en quad .. hair space
        0x2028, 0x2029,  # line and paragraph separators
        0x202F, 0x205F, 0x3000,
        0xFEFF,  # byte-order mark
    )
)


def trim(text: str) -> str:
    return text.strip(TRIM_CHARS)
