#!/usr/bin/env python3
"""FTP Traffic Analyzer - Entry point"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from ftptraffic import VERSION, TrafficAnalyzer, load_extensions, print_report, report_to_json
from ftptraffic.config import DEFAULT_ENDINGS_FILE, DEFAULT_LOG_FILE

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbosity: int):
    level = {-1: logging.WARNING, 0: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="FTP Traffic Analyzer - Download statistics from access logs",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfile", nargs="?", default=DEFAULT_LOG_FILE,
                        help=f"Log file to analyze (default: {DEFAULT_LOG_FILE})")
    parser.add_argument("-e", "--endings", default=DEFAULT_ENDINGS_FILE,
                        help=f"File with one extension per line (default: {DEFAULT_ENDINGS_FILE})")
    parser.add_argument("-x", "--ext", action="append", metavar="EXT",
                        help="Extension to track, repeatable, overrides the endings file")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_const", const=1, default=0,
                           dest="verbosity", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_const", const=-1,
                           dest="verbosity", help="Warnings only")
    parser.add_argument("--version", action="version", version=f"FTPTrafficAnalyzer v{VERSION}")

    args = parser.parse_args(argv)
    setup_logging(args.verbosity)

    extensions = args.ext if args.ext else load_extensions(args.endings).extensions
    analyzer = TrafficAnalyzer(extensions=extensions, console=None if args.json else console)

    try:
        result = analyzer.analyze_file(args.logfile)
    except FileNotFoundError as e:
        err_console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if args.json:
        print(report_to_json(result))
    else:
        print_report(result, console)

    if args.output:
        try:
            with open(args.output, 'w') as f:
                f.write(report_to_json(result))
        except OSError as e:
            err_console.print(f"[red]Error:[/] cannot write {args.output}: {e}")
            sys.exit(1)
        if not args.json:
            console.print(f"\n[green]Report saved to:[/] {args.output}")


if __name__ == "__main__":
    main()
