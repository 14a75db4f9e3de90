# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from eventdex.app import load_catalog_file, parse_event_dates, resolve_species_lines
from eventdex.config import (
    ConfigurationError,
    configure_logging,
    get_date_rules,
    get_log_level,
    get_matching_rules,
)
from eventdex.domain.catalog import DomainKind
from eventdex.domain.species import DuplicateLine, ResolvedLine, TierLine, UnresolvedLine

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from eventdex.domain.date_ranges import DateRange
    from eventdex.domain.species import LineOutcome

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="eventdex",
        description="Resolve scraped species mentions and normalize event dates",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dates = subparsers.add_parser("dates", help="Parse event date phrases into ranges")
    dates.add_argument("phrases", nargs="+", metavar="PHRASE", help="Date phrase to parse")

    match = subparsers.add_parser("match", help="Resolve species lines against a catalog")
    match.add_argument(
        "--catalog",
        type=str,
        required=True,
        help="Path to a game-master style JSON catalog",
    )
    match.add_argument(
        "--domain",
        type=DomainKind,
        choices=list(DomainKind),
        default=DomainKind.NORMAL,
        help="Catalog restriction to resolve against (default: normal)",
    )
    match.add_argument(
        "--kind",
        type=str,
        help="Tier annotation applied until the first tier header line",
    )
    match.add_argument(
        "--outcomes",
        action="store_true",
        help="Print the outcome of every line instead of only resolved species",
    )
    match.add_argument(
        "lines",
        nargs="*",
        metavar="LINE",
        help="Lines to resolve (read from stdin when omitted)",
    )

    return parser.parse_args(list(argv))


def _range_payload(date_range: DateRange) -> dict[str, object]:
    return {
        "start": date_range.start,
        "end": date_range.end,
        "start_iso": date_range.start_datetime.isoformat(),
        "end_iso": date_range.end_datetime.isoformat(),
    }


def _outcome_payload(outcome: LineOutcome) -> dict[str, object]:
    payload: dict[str, object] = {"line": outcome.line, "status": str(outcome.status)}
    if isinstance(outcome, ResolvedLine):
        payload.update(
            species_id=outcome.result.species_id,
            shiny=outcome.result.shiny,
            kind=outcome.result.kind,
        )
    elif isinstance(outcome, UnresolvedLine):
        payload.update(issue=str(outcome.issue.kind), candidates=list(outcome.issue.candidates))
    elif isinstance(outcome, DuplicateLine):
        payload.update(species_id=outcome.species_id)
    elif isinstance(outcome, TierLine):
        payload.update(label=outcome.label)
    else:
        payload.update(reason=outcome.reason)
    return payload


def _read_lines(args: argparse.Namespace) -> list[str]:
    if args.lines:
        return list(args.lines)
    return [line.rstrip("\n") for line in sys.stdin]


def _run_dates(args: argparse.Namespace) -> None:
    parsed = parse_event_dates(args.phrases, rules=get_date_rules())
    output = [
        {"phrase": phrase, "ranges": [_range_payload(item) for item in ranges]}
        for phrase, ranges in parsed.items()
    ]
    print(json.dumps(output, indent=2))


def _run_match(args: argparse.Namespace) -> None:
    outcomes = resolve_species_lines(
        _read_lines(args),
        args.catalog_index,
        domain_kind=args.domain,
        kind=args.kind,
        rules=get_matching_rules(),
    )
    if args.outcomes:
        output = [_outcome_payload(outcome) for outcome in outcomes]
    else:
        output = [
            _outcome_payload(outcome) for outcome in outcomes if isinstance(outcome, ResolvedLine)
        ]
    print(json.dumps(output, indent=2))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        configure_logging(level=get_log_level())
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid logging configuration")
        sys.exit(2)

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        if parsed_args.command == "match":
            get_matching_rules()
            parsed_args.catalog_index = load_catalog_file(parsed_args.catalog)
        else:
            get_date_rules()
    except (ConfigurationError, OSError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "dates":
            _run_dates(parsed_args)
        elif parsed_args.command == "match":
            _run_match(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
