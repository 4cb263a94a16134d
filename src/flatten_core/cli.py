"""``flatten-json`` command line entry point.

Reads a JSON document from a file or stdin and prints it flattened::

    $ echo '{"foo": {"jim": "bean"}}' | flatten-json --style rails
    {"foo[jim]":"bean"}

    $ echo '{"meh": [1.01, 2]}' | flatten-json --list --sorted
    meh.0.1.01
    meh.1.2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO

import colorlog

from .config import FlattenConfig
from .errors import FlattenError
from .keys import Style
from .text import flatten_all_text, flatten_text

logger = logging.getLogger("flatten_core")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class _CLIHandler(colorlog.StreamHandler):
    """Stderr handler installed by the CLI, replaced on each ``main()`` call."""


def _configure_logging(debug: bool) -> None:
    """Attach a coloured handler for the current stderr to the package logger."""
    for old in [h for h in logger.handlers if isinstance(h, _CLIHandler)]:
        logger.removeHandler(old)
    handler = _CLIHandler(sys.stderr)
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(levelname)s:%(name)s:%(reset)s %(message)s",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    ))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flatten-json",
        description="Flatten nested JSON into single-level keys.",
    )
    parser.add_argument("input", nargs="?", default="-",
                        help="Input JSON file, or '-' for stdin (default).")
    parser.add_argument("--config", type=Path,
                        help="YAML file with prefix/style/sorted/mode defaults.")
    parser.add_argument("--prefix", help="String prepended to every key.")
    parser.add_argument("--style", choices=[s.name.lower() for s in Style],
                        help="Key separator style (default: dot).")
    parser.add_argument("--list", dest="mode", action="store_const", const="list",
                        help="Emit one '<key>.<value>' line per leaf instead of a JSON object.")
    parser.add_argument("--sorted", action="store_true", default=None,
                        help="Sort list output.")
    parser.add_argument("--output", "-o", type=Path,
                        help="Write to this file instead of stdout.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _resolve_config(args: argparse.Namespace) -> FlattenConfig:
    config = FlattenConfig.load(args.config) if args.config else FlattenConfig()
    return config.replace(
        prefix=args.prefix,
        style=Style.parse(args.style) if args.style else None,
        sorted=args.sorted,
        mode=args.mode,
    )


def render(config: FlattenConfig, text: str) -> str:
    """Flatten *text* according to *config* and return the complete output."""
    if config.mode == "list":
        entries = flatten_all_text(text, config.prefix, config.style, sorted=config.sorted)
        return "".join(entry + "\n" for entry in entries)
    return flatten_text(text, config.prefix, config.style) + "\n"


def run(config: FlattenConfig, text: str, dest: IO[str]) -> None:
    """Flatten *text* according to *config* and write the result to *dest*."""
    dest.write(render(config, text))


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.debug)

    try:
        config = _resolve_config(args)
        logger.debug("using %s", config)
        output = render(config, _read_input(args.input))
        # the output file is only opened once flattening has succeeded
        if args.output:
            args.output.write_text(output, encoding="utf-8")
        else:
            sys.stdout.write(output)
    except (FlattenError, json.JSONDecodeError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
