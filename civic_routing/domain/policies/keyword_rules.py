"""Keyword rule table — department names paired with trigger words/phrases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class DepartmentRule:
    department_name: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class KeywordRuleSet:
    """Immutable, ordered collection of rules.

    Order matters: when two rules score equally the earlier one wins.
    """

    rules: tuple[DepartmentRule, ...]

    @classmethod
    def from_mapping(cls, mapping: Iterable[tuple[str, Iterable[str]]]) -> "KeywordRuleSet":
        return cls(
            rules=tuple(
                DepartmentRule(department_name=name, keywords=tuple(keywords))
                for name, keywords in mapping
            )
        )

    def __iter__(self) -> Iterator[DepartmentRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def department_names(self) -> list[str]:
        return [r.department_name for r in self.rules]


def default_rule_set() -> KeywordRuleSet:
    """Stock municipal rule table. Department names must match the directory."""
    return KeywordRuleSet.from_mapping([
        ("Sanitation", [
            "garbage", "trash", "waste", "dustbin", "litter", "cleaning",
            "sweep", "dump", "overflow", "sewage", "drain", "drainage",
        ]),
        ("Water", [
            "water", "leak", "pipeline", "tap", "no water", "low pressure", "sewer",
        ]),
        ("Electricity", [
            "electric", "streetlight", "street light", "light", "power",
            "outage", "transformer", "wire", "pole",
        ]),
        ("PWD", [
            "road", "pothole", "street", "footpath", "sidewalk", "zebra",
            "speed breaker", "traffic", "signage", "pavement", "asphalt", "highway",
        ]),
    ])
