"""Cell and header clean-up for spreadsheet exports."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s\u00a0\-./]+")
_NON_WORD = re.compile(r"[^\w]")
_KEYWORD_SPLIT = re.compile(r"[,;]+")


def normalize_column_name(name: str) -> str:
    """Map a header cell onto a lookup key.

    ``"Department Name"``, ``"\\ufeffdepartment-name "`` and ``"Lat."`` become
    ``"department_name"``, ``"department_name"`` and ``"lat"``.
    """
    key = name.replace("\ufeff", "").strip().lower()
    key = _SEPARATORS.sub("_", key)
    return _NON_WORD.sub("", key).strip("_")


def clean_string(value: str | None) -> str | None:
    """Trimmed cell text; blank cells become None."""
    if value is None:
        return None
    return value.strip() or None


def parse_keywords(raw: str | None) -> tuple[str, ...]:
    """Parse keyword cells like 'garbage, trash; no water' into a tuple.

    Commas and semicolons separate keywords; spaces inside a keyword are kept
    so multi-word phrases survive. Duplicates are dropped, first one wins.
    """
    if not raw:
        return ()
    keywords: list[str] = []
    for part in _KEYWORD_SPLIT.split(raw):
        kw = " ".join(part.split()).lower()
        if kw and kw not in keywords:
            keywords.append(kw)
    return tuple(keywords)
