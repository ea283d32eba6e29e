"""KeywordClassifier — infer the responsible department from issue text."""

from __future__ import annotations

import re
from typing import Sequence

from civic_routing.domain.entities.department import Department
from civic_routing.domain.policies.keyword_rules import DepartmentRule, KeywordRuleSet
from civic_routing.domain.policies.text_normalizer import normalize_text


def _keyword_weight(text: str, keyword: str) -> int:
    """Word count of ``keyword`` if it occurs in ``text`` as a whole phrase, else 0.

    Both arguments must already be normalized.
    """
    if not keyword:
        return 0
    words = keyword.split(" ")
    pattern = r"\b" + r"\s+".join(re.escape(w) for w in words) + r"\b"
    return len(words) if re.search(pattern, text) else 0


def score_rule(text: str, rule: DepartmentRule) -> int:
    """Sum of weights of every keyword in ``rule`` found in normalized ``text``."""
    return sum(_keyword_weight(text, normalize_text(kw)) for kw in rule.keywords)


def classify_department_name(
    description: str | None,
    issue_type: str | None,
    rules: KeywordRuleSet,
) -> str | None:
    """Pure function: pick the department whose keywords best match the issue.

    Business rules:
      1. Text is ``issue_type`` + ``description``, normalized.
      2. Each matching keyword adds its word count to its rule's score, so
         "street light" outweighs "light".
      3. Highest score wins; on a tie the rule listed first wins.
      4. No keyword matched anywhere → None.
    """
    text = normalize_text(f"{issue_type or ''} {description or ''}")
    if not text:
        return None

    best_name: str | None = None
    best_score = 0
    for rule in rules:
        score = score_rule(text, rule)
        if score > best_score:
            best_score = score
            best_name = rule.department_name

    return best_name


def resolve_department_id(
    department_name: str | None,
    departments: Sequence[Department],
) -> int | None:
    """Map a classified department name onto a directory record.

    Names are compared normalized. If several records share the name the first
    in the caller's order is used; no record → None.
    """
    if not department_name:
        return None
    wanted = normalize_text(department_name)
    for dept in departments:
        if normalize_text(dept.name) == wanted:
            return dept.id
    return None
