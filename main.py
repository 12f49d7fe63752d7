"""CLI entrypoint: search GitHub users by bio."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.console import Console

from aggregator import SearchSession, SearchStatus, build_aggregator
from config import get_logging_settings
from outputs import render_session
from utils.logger import setup_logger


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Find GitHub users by searching their bio descriptions")
    parser.add_argument("keyword", help="Text to match against user bios")
    parser.add_argument("--location", "-l", default="", help="Filter by location")
    parser.add_argument("--page", "-p", type=int, default=1, help="Result page (10 users per page)")
    parser.add_argument("--json", action="store_true", help="Print the result page as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args(argv)
    if args.page < 1:
        parser.error("--page must be >= 1")
    return args


async def run(args: argparse.Namespace, console: Console) -> int:
    async with build_aggregator() as aggregator:
        session = SearchSession(aggregator, keyword=args.keyword, location=args.location)
        with console.status("Searching...", spinner="dots"):
            status = await session.search(args.page)

    if args.json and status in (SearchStatus.POPULATED, SearchStatus.EMPTY):
        payload = {
            "items": [user.model_dump(mode="json") for user in session.users],
            "total_count": session.total_count,
            "current_page": args.page if status == SearchStatus.EMPTY else session.current_page,
        }
        console.print_json(data=payload)
    else:
        render_session(console, session)

    return 1 if status == SearchStatus.ERROR else 0


def main(argv=None) -> None:
    args = _parse_args(argv)
    log_settings = get_logging_settings()
    setup_logger(
        level=logging.DEBUG if args.verbose else log_settings.level,
        log_file=log_settings.file,
        use_rich=log_settings.use_rich,
    )
    sys.exit(asyncio.run(run(args, Console())))


if __name__ == "__main__":
    main()
