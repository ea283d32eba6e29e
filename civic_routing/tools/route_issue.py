"""Route an issue from the command line.

Usage:
    python -m civic_routing.tools.route_issue allocate --description "Pothole on MG road" --lat 12.97 --lon 77.59
    python -m civic_routing.tools.route_issue allocate --description "..." --lat 0 --lon 0 --department-id 7
    python -m civic_routing.tools.route_issue allocate ... --departments data/departments.csv --rules data/department_rules.csv
    python -m civic_routing.tools.route_issue distance --from 12.97 77.59 --to 12.93 77.62
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from civic_routing.adapters.csv_loader.loader import load_departments, load_keyword_rules
from civic_routing.adapters.memory.repositories import (
    InMemoryDepartmentRepository,
    InMemoryIssueRepository,
)
from civic_routing.application.use_cases.create_issue import CreateIssueUseCase
from civic_routing.config import settings
from civic_routing.domain.entities.allocation import CreatedIssue
from civic_routing.domain.entities.issue import IssueIntake
from civic_routing.domain.errors import RoutingError
from civic_routing.domain.policies.keyword_rules import KeywordRuleSet, default_rule_set
from civic_routing.domain.value_objects.geo_point import distance_km

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SERVER_ERROR = 1
EXIT_CLIENT_ERROR = 2


def build_rule_set(rules_path: str | None) -> KeywordRuleSet:
    """Rule table from CSV when a path is configured, otherwise the stock table."""
    if rules_path:
        return load_keyword_rules(Path(rules_path))
    return default_rule_set()


async def _allocate(args: argparse.Namespace) -> CreatedIssue:
    departments_path = Path(args.departments)
    if departments_path.exists():
        departments = load_departments(departments_path)
    else:
        logger.warning("Departments file not found: %s", departments_path)
        departments = []

    use_case = CreateIssueUseCase(
        department_repo=InMemoryDepartmentRepository(departments),
        issue_repo=InMemoryIssueRepository(),
        rules=build_rule_set(args.rules),
        max_description_length=settings.description_max_length,
    )
    intake = IssueIntake(
        citizen_id=args.citizen_id,
        description=args.description,
        latitude=args.lat,
        longitude=args.lon,
        issue_type=args.issue_type,
        address=args.address,
    )
    return await use_case.execute(intake, explicit_department_id=args.department_id)


def _print_allocation(created: CreatedIssue) -> None:
    allocation = created.allocation
    print(f"Issue:       {created.issue.id}")
    print(f"Department:  {allocation.department_id}")
    print(f"Strategy:    {allocation.strategy.value}")
    if allocation.nearest_candidate is not None:
        print(f"Nearest:     {allocation.nearest_candidate.name} ({allocation.distance_display})")
    print(f"Reason:      {allocation.reason}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Department allocation & distance tools")
    sub = parser.add_subparsers(dest="command", required=True)

    alloc = sub.add_parser("allocate", help="Allocate a department for a new issue")
    alloc.add_argument("--description", required=True)
    alloc.add_argument("--issue-type", default=None)
    alloc.add_argument("--lat", type=float, required=True)
    alloc.add_argument("--lon", type=float, required=True)
    alloc.add_argument("--address", default=None)
    alloc.add_argument("--citizen-id", type=int, default=0)
    alloc.add_argument(
        "--department-id", type=int, default=None,
        help="Explicit department; skips keyword and distance matching",
    )
    alloc.add_argument(
        "--departments", default=settings.departments_csv_path,
        help=f"Departments CSV (default: {settings.departments_csv_path})",
    )
    alloc.add_argument(
        "--rules", default=settings.keyword_rules_path or None,
        help="Keyword rules CSV (default: built-in rule table)",
    )

    dist = sub.add_parser("distance", help="Great-circle distance between two points")
    dist.add_argument("--from", dest="origin", type=float, nargs=2, metavar=("LAT", "LON"), required=True)
    dist.add_argument("--to", dest="target", type=float, nargs=2, metavar=("LAT", "LON"), required=True)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.command == "distance":
        km = distance_km(*args.origin, *args.target)
        print(f"{km:.3f} km ({km * 1000:.0f} m)")
        return EXIT_OK

    try:
        created = asyncio.run(_allocate(args))
    except RoutingError as e:
        logger.error("%s", e)
        return EXIT_CLIENT_ERROR if e.client_error else EXIT_SERVER_ERROR

    _print_allocation(created)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
