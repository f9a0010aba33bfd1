"""
hporecord command line.

    hporecord check [PATH]   decode + validate a journal, report findings
    hporecord fmt [PATH]     rewrite a journal to stdout in canonical form

PATH defaults to $HPORECORD_JOURNAL (a .env file is loaded first).
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .codec import encode
from .config import JournalConfig
from .errors import DecodeError
from .journal import RecordJournal
from .validation import validate_records

logger = logging.getLogger(__name__)


class CommandHandler:
    """Runs subcommands against a journal and renders results."""

    def __init__(self, journal: RecordJournal, console: Console):
        self.journal = journal
        self.console = console

    def handle_check(self) -> int:
        """Validate the journal. Returns the process exit code."""
        if not self.journal.path.exists():
            self.console.print(f"[red]No such journal: {self.journal.path}[/red]")
            return 2

        try:
            report = validate_records(self.journal)
        except DecodeError as e:
            self.console.print(f"[red]Malformed record:[/red] {e}")
            return 1

        if report["errors"] or report["warnings"]:
            table = Table(title=f"Findings in {self.journal.path}")
            table.add_column("Level")
            table.add_column("Message")
            for msg in report["errors"]:
                table.add_row("[red]error[/red]", msg)
            for msg in report["warnings"]:
                table.add_row("[yellow]warning[/yellow]", msg)
            self.console.print(table)

        status = "[green]✓ valid[/green]" if report["valid"] else "[red]✗ invalid[/red]"
        self.console.print(
            f"{status}: {report['n_records']} record(s), "
            f"{len(report['errors'])} error(s), {len(report['warnings'])} warning(s)"
        )
        return 0 if report["valid"] else 1

    def handle_fmt(self, out=None) -> int:
        """Re-encode every record. Returns the process exit code."""
        out = out or sys.stdout
        try:
            for record in self.journal:
                out.write(encode(record) + "\n")
        except DecodeError as e:
            self.console.print(f"[red]Malformed record:[/red] {e}")
            return 1
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hporecord",
        description="Inspect hyperparameter-optimization record journals",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("check", "Decode and validate a journal"),
        ("fmt", "Print a journal in canonical encoding"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path", nargs="?", default=None, help="Journal path")
        cmd.add_argument(
            "--skip-malformed",
            action="store_true",
            default=None,
            help="Skip undecodable lines instead of failing",
        )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = JournalConfig.from_env(args.path)
    if args.skip_malformed:
        config = config.model_copy(update={"skip_malformed": True})
    logger.debug(f"Using journal config {config}")

    handler = CommandHandler(RecordJournal.from_config(config), Console(stderr=True))
    if args.command == "check":
        return handler.handle_check()
    return handler.handle_fmt()


if __name__ == "__main__":
    sys.exit(main())
