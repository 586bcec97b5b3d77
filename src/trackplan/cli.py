"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .catalog import format_talk_line, load_catalog, read_catalog, sample_catalog
from .config import DEFAULT_CONFIG, dump_config, load_config, save_config
from .errors import TrackplanError
from .logging_utils import setup_logging
from .renderer import render_schedule_markdown, render_schedule_text
from .schedule_io import dumps_schedule, save_schedule
from .scheduler import schedule

EXIT_UNSCHEDULED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trackplan", description="Two-track conference scheduler."
    )
    sub = parser.add_subparsers(dest="command")

    schedule_cmd = sub.add_parser("schedule", help="Schedule a talk catalog.")
    schedule_cmd.add_argument(
        "path", nargs="?", default="-", help="Catalog file (.txt, .yml, .json) or - for stdin."
    )
    schedule_cmd.add_argument("--config", help="Session window config (YAML).")
    schedule_cmd.add_argument(
        "--format",
        choices=["text", "markdown", "json"],
        default="text",
        help="Output format.",
    )
    schedule_cmd.add_argument("--out", help="Write output to a file.")
    schedule_cmd.add_argument(
        "--sample", action="store_true", help="Use the bundled sample catalog."
    )
    schedule_cmd.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with {EXIT_UNSCHEDULED} when a talk cannot be scheduled.",
    )
    schedule_cmd.add_argument("--log-dir", default="logs", help="Log directory.")
    schedule_cmd.add_argument(
        "--debug", action="store_true", help="Verbose logging to stderr."
    )

    config_cmd = sub.add_parser("config", help="Print or write the default config.")
    config_cmd.add_argument("--out", help="Write the config to a file.")

    sub.add_parser("sample", help="Print the sample catalog.")
    return parser


def _run_schedule(args: argparse.Namespace) -> int:
    logger, _log_path = setup_logging(
        log_dir=args.log_dir,
        level=logging.DEBUG if args.debug else logging.INFO,
        console=bool(args.debug),
    )
    config = load_config(args.config) if args.config else DEFAULT_CONFIG

    if args.sample:
        talks = sample_catalog()
    elif args.path == "-":
        talks = read_catalog(sys.stdin)
    else:
        talks = load_catalog(args.path)
    logger.info("Scheduling %d talks", len(talks))

    result = schedule(talks, config)
    if args.format == "json" and args.out:
        save_schedule(args.out, result, config)
        print(f"Wrote {args.out}")
    else:
        if args.format == "json":
            output = dumps_schedule(result, config)
        elif args.format == "markdown":
            output = render_schedule_markdown(result, config)
        else:
            output = render_schedule_text(result, config)

        if args.out:
            with open(args.out, "w", encoding="utf-8") as handle:
                handle.write(output)
            print(f"Wrote {args.out}")
        else:
            sys.stdout.write(output)

    if args.strict and not result.complete:
        logger.info("Strict mode: %d talks unscheduled", len(result.unscheduled))
        return EXIT_UNSCHEDULED
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        if args.command == "schedule":
            return _run_schedule(args)

        if args.command == "config":
            if args.out:
                if os.path.exists(args.out):
                    print(f"Refusing to overwrite {args.out}", file=sys.stderr)
                    return 1
                save_config(args.out, DEFAULT_CONFIG)
                print(f"Wrote {args.out}")
            else:
                sys.stdout.write(dump_config(DEFAULT_CONFIG))
            return 0

        if args.command == "sample":
            for talk in sample_catalog():
                print(format_talk_line(talk))
            return 0
    except (TrackplanError, OSError) as exc:
        logger = logging.getLogger("trackplan")
        if logger.handlers:
            logger.error("%s failed: %s", args.command, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
