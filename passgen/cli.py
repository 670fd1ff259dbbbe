"""CLI for passgen: generate passwords and manage the saved defaults."""

import argparse
import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DEFAULTS, config_path, load_config, request_from_config, save_config, set_value
from .errors import ConfigError, PassgenError
from .generator import Generator

logger = logging.getLogger("passgen")

# passwords must reach the terminal unchanged: no folding, no :emoji: codes
console = Console(soft_wrap=True, emoji=False, highlight=False)


def positive_int(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def cmd_generate(args):
    cfg = load_config()
    request = request_from_config(
        cfg,
        length=args.length,
        include_uppercase=False if args.no_upper else None,
        include_lowercase=False if args.no_lower else None,
        include_digits=False if args.no_digits else None,
        include_symbols=False if args.no_symbols else None,
    )
    copies = args.copies if args.copies is not None else cfg.get("copies", 1)
    logger.debug("Generating %d password(s) for %r", copies, request)

    generator = Generator()
    try:
        # generate everything first so an error never leaves partial output
        passwords = [generator.generate(request) for _ in range(copies)]
    except PassgenError as e:
        console.print(f"[red]Failed to generate password: {escape(str(e))}[/red]")
        return 1
    for i, pw in enumerate(passwords):
        console.print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    return 0

# Config subcommands

def cmd_config_show(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Setting")
    table.add_column("Value")
    for key in DEFAULTS:
        table.add_row(key, str(cfg[key]))
    console.print(table)
    return 0


def cmd_config_set(args):
    try:
        cfg = set_value(load_config(), args.key, args.value)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    save_config(cfg)
    console.print(f"[green]Saved[/green] {args.key} = {cfg[args.key]}")
    return 0


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="passgen")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, help="Password length (default from config)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--copies", type=positive_int, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    c = sub.add_parser("config", help="Show or change saved defaults")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Print the effective settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change one setting")
    c_set.add_argument("key", choices=list(DEFAULTS), help="Setting name")
    c_set.add_argument("value", help="New value")
    c_set.set_defaults(func=cmd_config_set)

    args = parser.parse_args(argv)
    _setup_logging(args.log_level)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
