"""CSV loader — reads the department directory and the keyword rule table.

Both files come from spreadsheets, so headers are matched through alias
tables and the delimiter is taken from the header line.
"""

from __future__ import annotations

import csv
import logging
import math
from pathlib import Path
from typing import Mapping

from civic_routing.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    parse_keywords,
)
from civic_routing.domain.entities.department import Department
from civic_routing.domain.policies.keyword_rules import DepartmentRule, KeywordRuleSet

logger = logging.getLogger(__name__)

Row = dict[str, str | None]

# field → accepted header spellings, after normalize_column_name
DEPARTMENT_COLUMNS: dict[str, tuple[str, ...]] = {
    "id": ("id", "department_id", "departmentid", "dept_id"),
    "name": ("name", "department_name", "departmentname", "department"),
    "latitude": ("latitude", "lat"),
    "longitude": ("longitude", "lon", "lng", "long"),
}

RULE_COLUMNS: dict[str, tuple[str, ...]] = {
    "department": ("department", "department_name", "departmentname"),
    "keywords": ("keywords", "keyword", "terms"),
}

_DELIMITERS = (",", ";", "\t")


def _detect_delimiter(header_line: str) -> str:
    """Delimiter occurring most often in the header; comma when none occurs."""
    best = max(_DELIMITERS, key=header_line.count)
    return best if header_line.count(best) else ","


def _read_rows(file_path: Path) -> tuple[list[str], list[tuple[int, Row]]]:
    """Return the normalized header and ``(line number, row)`` pairs."""
    with open(file_path, encoding="utf-8-sig", newline="") as f:
        delimiter = _detect_delimiter(f.readline())
        f.seek(0)
        reader = csv.DictReader(f, delimiter=delimiter)
        if not reader.fieldnames:
            raise ValueError(f"CSV file {file_path} has no header row")
        columns = [normalize_column_name(c) for c in reader.fieldnames]
        reader.fieldnames = columns
        rows = [
            (reader.line_num, {k: clean_string(v) for k, v in raw.items() if k is not None})
            for raw in reader
        ]

    logger.info("Read %d rows from %s (delimiter %r)", len(rows), file_path.name, delimiter)
    return columns, rows


def _warn_missing_columns(
    file_path: Path, columns: list[str], expected: Mapping[str, tuple[str, ...]]
) -> None:
    for field, aliases in expected.items():
        if not any(alias in columns for alias in aliases):
            logger.warning(
                "%s: no %s column (looked for %s)", file_path.name, field, ", ".join(aliases)
            )


def _pick(row: Row, aliases: tuple[str, ...]) -> str | None:
    """First non-blank value among ``aliases``."""
    return next((row[a] for a in aliases if row.get(a)), None)


def load_departments(file_path: Path) -> list[Department]:
    """Load the department directory, keeping file order.

    Rows missing an id, a name or a finite coordinate are skipped.
    """
    columns, rows = _read_rows(file_path)
    _warn_missing_columns(file_path, columns, DEPARTMENT_COLUMNS)

    departments = []
    for line_no, row in rows:
        dept_id = _parse_int(_pick(row, DEPARTMENT_COLUMNS["id"]))
        name = _pick(row, DEPARTMENT_COLUMNS["name"])
        lat = _parse_float(_pick(row, DEPARTMENT_COLUMNS["latitude"]))
        lon = _parse_float(_pick(row, DEPARTMENT_COLUMNS["longitude"]))

        if dept_id is None or name is None or lat is None or lon is None:
            logger.warning("%s line %d: incomplete department row, skipping", file_path.name, line_no)
            continue

        departments.append(Department(id=dept_id, name=name, latitude=lat, longitude=lon))
    logger.info("Parsed %d departments", len(departments))
    return departments


def load_keyword_rules(file_path: Path) -> KeywordRuleSet:
    """Load the keyword rule table. Row order becomes rule priority on ties."""
    columns, rows = _read_rows(file_path)
    _warn_missing_columns(file_path, columns, RULE_COLUMNS)

    rules = []
    for line_no, row in rows:
        name = _pick(row, RULE_COLUMNS["department"])
        keywords = parse_keywords(_pick(row, RULE_COLUMNS["keywords"]))
        if not name or not keywords:
            logger.warning("%s line %d: rule without department or keywords, skipping", file_path.name, line_no)
            continue
        rules.append(DepartmentRule(department_name=name, keywords=keywords))
    logger.info("Parsed %d keyword rules", len(rules))
    return KeywordRuleSet(rules=tuple(rules))


def _parse_float(value: str | None) -> float | None:
    """Finite float from a cell; decimal commas accepted."""
    if not value:
        return None
    try:
        parsed = float(value.replace(",", "."))
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def _parse_int(value: str | None) -> int | None:
    """Integer id from a cell; spreadsheet floats like "4.0" accepted."""
    if not value:
        return None
    try:
        return int(float(value.replace(",", ".")))
    except (ValueError, OverflowError):
        return None
