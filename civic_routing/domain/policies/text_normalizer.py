"""Free-text canonicalization used before keyword matching."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    """Lower-case, replace anything outside ``[a-z0-9 ]`` with a space,
    collapse whitespace runs and trim.

    Total: ``None`` and empty input give ``""``.
    """
    if not text:
        return ""
    text = _NON_ALNUM.sub(" ", text.lower())
    # \s also matches non-ASCII whitespace, which the step above left alone
    return _WHITESPACE.sub(" ", text).strip()
