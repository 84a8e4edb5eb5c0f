"""
basedir.cli

Command-line interface for basedir: print the XDG base directories as the
current environment resolves them.

Responsibilities:
- Parse CLI arguments and dispatch subcommands.
- Optionally layer a YAML file of XDG_* overrides over the real environment.
- Print every directory (show) or a single one (get).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from .config import layered_environ, load_overrides
from .errors import BaseDirError
from .log import setup_logging
from .xdg import LOOKUPS, resolve, resolve_all

# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def build_environ(env_file: str | None) -> dict[str, str] | None:
    """
    Decide which environment the lookups read.

    Without --env-file the lookups read os.environ directly (None here).
    """
    if not env_file:
        return None
    overrides = load_overrides(Path(env_file).expanduser())
    return layered_environ(overrides)


def format_value(value: str | list[str] | None) -> str:
    if value is None:
        return "(unset)"
    if isinstance(value, list):
        return ":".join(value)
    return value

# ---------------------------------------------------------------------------
# Subcommand: show
# ---------------------------------------------------------------------------

def cmd_show(args: argparse.Namespace) -> int:
    """Print every base directory, failed lookups included as unset."""
    resolved = resolve_all(environ=build_environ(args.env_file))

    if args.format == "yaml":
        sys.stdout.write(yaml.safe_dump(resolved, sort_keys=False))
        return 0

    for name, value in resolved.items():
        print(f"{name}: {format_value(value)}")
    return 0

# ---------------------------------------------------------------------------
# Subcommand: get
# ---------------------------------------------------------------------------

def cmd_get(args: argparse.Namespace) -> int:
    value = resolve(args.name, environ=build_environ(args.env_file))
    if isinstance(value, list):
        for entry in value:
            print(entry)
    else:
        print(value)
    return 0

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct top-level argument parser and subcommands.
    """
    p = argparse.ArgumentParser(prog="basedir")
    p.add_argument("-v", "--verbose", action="store_true", help="Log fallback decisions")
    p.add_argument("--env-file", default=None, help="YAML mapping of XDG_* overrides")
    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("show", help="Print every XDG base directory")
    ps.add_argument("--format", choices=["text", "yaml"], default="text", help="Output format")
    ps.set_defaults(func=cmd_show)

    pg = sub.add_parser("get", help="Print a single XDG base directory")
    pg.add_argument("name", choices=list(LOOKUPS), help="Directory to resolve")
    pg.set_defaults(func=cmd_get)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return int(args.func(args))
    except BaseDirError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
