#!/usr/bin/env python3
"""
ALACYCLE CLI
------------
Command-line front end: translates user commands into CycleEngine calls
and renders the outcome.

  alacycle [next]   switch to the next color scheme (default)
  alacycle list     show the declared schemes, marking the active one
  alacycle current  print the active scheme name

Author: Alacycle Team
Date: 2026-10-19
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from alacycle.cli.formatter import CycleFormatter, console
from alacycle.core.engine import CycleEngine
from alacycle.core.errors import AlacycleError
from alacycle.core.settings import Settings
from alacycle.cycling.catalog import AnchorCatalog

VERSION = "1.0.0"


class AlacycleCLI:
    """
    CLI wrapper around the CycleEngine. Maps every AlacycleError to
    exit status 1 with the error kind on stderr.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="alacycle",
            description="Alacycle - cycle the color scheme of your terminal config",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = CycleFormatter()
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("--version", action="version", version=f"alacycle v{VERSION}")
        self.parser.add_argument("-c", "--config", type=Path, default=None,
                                 help="Config file to cycle (skips the XDG/HOME search)")
        self.parser.add_argument("--app", default=None,
                                 help="Application name used for the config search (default: alacritty)")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        next_parser = subparsers.add_parser("next", help="Switch to the next color scheme")
        # Suppressed defaults so flags given before `next` survive the subparser
        self._add_next_flags(next_parser, default=argparse.SUPPRESS)

        subparsers.add_parser("list", help="List color schemes in declaration order")
        subparsers.add_parser("current", help="Print the active color scheme")

        # Bare `alacycle` behaves like `alacycle next`
        self._add_next_flags(self.parser)

    def _add_next_flags(self, parser: argparse.ArgumentParser, default=None):
        flag_default = False if default is None else default
        parser.add_argument("--dry-run", action="store_true", default=flag_default,
                            help="Preview the switch without writing")
        parser.add_argument("--diff", action="store_true", default=flag_default,
                            help="Show the line-level diff of the change")
        parser.add_argument("--backup", action="store_true", default=default,
                            help="Copy the original config aside before writing")
        parser.add_argument("-q", "--quiet", action="store_true", default=flag_default,
                            help="Only print the new scheme name")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s"
        )

    def _build_engine(self, args: argparse.Namespace) -> CycleEngine:
        settings = Settings.from_env().override(
            config_path=args.config.expanduser() if args.config else None,
            app_name=args.app,
            backup=getattr(args, "backup", None),
        )
        return CycleEngine(settings)

    def _run_next(self, engine: CycleEngine, args: argparse.Namespace):
        report = engine.cycle(dry_run=args.dry_run)
        if args.diff:
            self.formatter.display_diff(report["original_content"], report["content"],
                                        Path(report["config_path"]).name)
        self.formatter.show_switch(report, quiet=args.quiet)

    def _run_list(self, engine: CycleEngine):
        context = engine.inspect()
        catalog = AnchorCatalog(context.anchors)
        self.formatter.print_anchor_table(catalog, context.reference.anchor,
                                          str(engine.resolve_config()))

    def _run_current(self, engine: CycleEngine):
        context = engine.inspect()
        console.print(context.reference.anchor, markup=False, highlight=False)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit status."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        try:
            engine = self._build_engine(args)
            if args.command == "list":
                self._run_list(engine)
            elif args.command == "current":
                self._run_current(engine)
            else:
                self._run_next(engine, args)
        except AlacycleError as e:
            self.formatter.print_error(e.kind, str(e))
            return 1
        except OSError as e:
            self.formatter.print_error("IOError", str(e))
            return 1
        return 0


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(AlacycleCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    main()
