#!/usr/bin/env python3
"""
covid-tracker command line

Fetches data from the disease.sh public API and prints it as colored tables.

Usage examples:
    covid-tracker summary
    covid-tracker summary --country India
    covid-tracker list --sort today-deaths --limit 20
    covid-tracker live
    covid-tracker timeline "United States" --days 90 --subject cases
    covid-tracker timeline --days 0 --saveplot world.png     # all history, whole world
"""

import argparse
import logging
import sys

from . import __version__, commands
from .config import Settings
from .models import Subject
from .sorting import SortKey
from .table import RichWriter


def build_parser():
    parser = argparse.ArgumentParser(prog="covid-tracker", description="COVID-19 statistics in the terminal")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--api-base", help="API root URL (default $COVID_API_BASE or disease.sh)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds (default 10)")
    parser.add_argument("--no-color", action="store_true", help="Print without colors.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-vv for debug).")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("summary", help="Global totals, or one territory with --country.")
    p.add_argument("--country", "-c", type=str, help="Country name (e.g. India or 'United States')")

    p = sub.add_parser("list", help="Every territory, sorted descending.")
    p.add_argument("--sort", "-s", type=SortKey, choices=list(SortKey), default=SortKey.CASES,
                   metavar="{" + ",".join(k.value for k in SortKey) + "}", help="Sort key (default cases).")
    p.add_argument("--limit", "-n", type=int, help="Only print the first N territories.")

    sub.add_parser("live", help="Print changes every 1-10 minutes until interrupted.")

    p = sub.add_parser("timeline", help="Historical totals per day.")
    p.add_argument("territory", nargs="?", default="all", help="Country name, or 'all' (default) for the world.")
    p.add_argument("--days", "-d", type=int, default=30,
                   help="Number of days (default 30). Use 0 or negative for all history.")
    p.add_argument("--subject", type=Subject, choices=list(Subject),
                   metavar="{" + ",".join(s.value for s in Subject) + "}",
                   help="Show only this metric, with a bar graph.")
    p.add_argument("--chronological", action="store_true", help="Sort dates by calendar date.")
    p.add_argument("--saveplot", type=str, default=None, help="Also save a PNG chart to this filename.")
    return parser


def configure_logging(verbosity):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    settings = Settings.from_env(api_base=args.api_base, timeout=args.timeout)
    writer = RichWriter(color=not args.no_color)

    try:
        if args.command == "summary":
            return commands.summary(args.country, settings, writer)
        if args.command == "list":
            return commands.list_countries(args.sort, args.limit, settings, writer)
        if args.command == "live":
            return commands.live(settings, writer)
        return commands.timeline(
            args.territory, args.days, args.subject, chronological=args.chronological,
            savepath=args.saveplot, settings=settings, writer=writer,
        )
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
