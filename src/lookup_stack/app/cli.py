from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from lookup_stack.config.composition import build_log_sink, build_lookup, load_stack_config
from lookup_stack.config.loader import ConfigError
from lookup_stack.config.models import LoggingConfig, StackConfig
from lookup_stack.contract.errors import NotFoundError
from lookup_stack.contract.lookup import Lookup
from lookup_stack.observability.sinks import JsonlLogSink, LogSink

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lookup-stack", description="Resolve keys through a configured lookup stack")
    parser.add_argument("--config", required=True, help="Path to YAML stack config")
    parser.add_argument("--log-sink", choices=["none", "stderr", "jsonl"], help="Override logging.sink")
    parser.add_argument("--log-path", help="Override logging.path (selects the jsonl sink)")
    commands = parser.add_subparsers(dest="command", required=True)
    get_cmd = commands.add_parser("get", help="Print the value for KEY as JSON")
    get_cmd.add_argument("key")
    has_cmd = commands.add_parser("has", help="Print whether KEY resolves")
    has_cmd.add_argument("key")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Caller passes argv for testability.
    return build_parser().parse_args(argv)


def apply_logging_overrides(config: StackConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config.
    if args.log_sink is None and args.log_path is None:
        return
    sink = args.log_sink
    if sink is None:
        sink = "jsonl"
    path = args.log_path if args.log_path is not None else config.logging.path
    try:
        config.logging = LoggingConfig(sink=sink, path=path)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config_path = Path(args.config)
    log: LogSink | None = None
    try:
        config = load_stack_config(config_path)
        apply_logging_overrides(config, args)
        base_dir = config_path.resolve().parent
        log = build_log_sink(config.logging, base_dir=base_dir)
        lookup = build_lookup(config, base_dir=base_dir, log=log)
    except ConfigError as exc:
        _close(log)
        sys.stderr.write(f"config error: {exc}\n")
        return EXIT_CONFIG

    try:
        if args.command == "has":
            found = lookup.has(args.key)
            sys.stdout.write(("true" if found else "false") + "\n")
            return EXIT_OK if found else EXIT_MISSING
        try:
            value = lookup.get(args.key)
        except NotFoundError as exc:
            sys.stderr.write(f"{exc}\n")
            return EXIT_MISSING
        sys.stdout.write(json.dumps(render_value(value), ensure_ascii=False, default=str) + "\n")
        return EXIT_OK
    finally:
        _close(log)


def render_value(value: object) -> object:
    # The contract has no key listing, so a nested node is reported by type only.
    if isinstance(value, Lookup):
        return {"lookup": type(value).__name__}
    return value


def _close(log: LogSink | None) -> None:
    if isinstance(log, JsonlLogSink):
        log.close()
