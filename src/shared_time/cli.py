from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence

from .api.models import AvailabilityPayload
from .bootstrap import configure_logging
from .config import get_settings
from .domain import CalendarEvent
from .engine import compute_availability

logger = logging.getLogger(__name__)


def _load_events(path: Optional[Path]) -> List[CalendarEvent]:
    if path is None:
        return []
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a JSON list of events.")
    return [CalendarEvent.from_record(record) for record in records]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Shared availability command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compute_parser = subparsers.add_parser("compute", help="Compute shared availability from two JSON event files.")
    compute_parser.add_argument("--now", required=True, help="ISO-8601 reference instant.")
    compute_parser.add_argument("--horizon-days", type=int, default=None)
    compute_parser.add_argument("--events-a", type=Path, default=None, help="JSON list of the first party's events.")
    compute_parser.add_argument("--events-b", type=Path, default=None, help="JSON list of the second party's events.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the availability functions.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server exposing the availability tools.")
    mcp_parser.add_argument("--host", default="127.0.0.1")
    mcp_parser.add_argument("--port", type=int, default=8765)

    return parser


def run_compute(args: argparse.Namespace) -> int:
    availability = get_settings().availability
    now = datetime.fromisoformat(args.now.replace("Z", "+00:00"))
    result = compute_availability(
        now,
        _load_events(args.events_a),
        _load_events(args.events_b),
        horizon_days=availability.horizon_days if args.horizon_days is None else args.horizon_days,
        rules=availability.rules,
    )
    print(AvailabilityPayload.from_domain(result).model_dump_json(by_alias=True, indent=2))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.info("Shared Time CLI starting: %s", args.command)

    if args.command == "compute":
        try:
            return run_compute(args)
        except ValueError as exc:
            parser.error(str(exc))
    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        from .services.mcp import run_mcp_server

        run_mcp_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
