"""
Text cleanup utilities for text extracted from uploaded PDFs.
"""

from __future__ import annotations

import re
import unicodedata


def normalize_text(text: str) -> str:
    """Normalize whitespace, strip bad unicode, and clean up raw extracted text."""
    text = unicodedata.normalize("NFKC", text)

    replacements = {
        "\u2019": "'",   # right single quote
        "\u2018": "'",   # left single quote
        "\u201c": '"',   # left double quote
        "\u201d": '"',   # right double quote
        "\u00a0": " ",   # non-breaking space
        "\u200b": "",    # zero-width space
        "\ufeff": "",    # BOM
    }
    for old, new in replacements.items():
        text = text.replace(old, new)

    # PDF extraction leaves hyphenated line breaks ("devel-\nopment")
    text = re.sub(r"(\w)-\n(\w)", r"\1\2", text)

    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(lines).strip()


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
