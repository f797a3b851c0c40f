from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from arg_input.api import open_reader
from arg_input.config.loader import ConfigError, load_config
from arg_input.config.models import AppConfig, OutputConfig
from arg_input.domain.errors import SourcesUnavailable
from arg_input.domain.records import Line
from arg_input.kernel.chained_reader import ChainedReader
from arg_input.observability.logging import LogMessage
from arg_input.observability.sinks import build_log_sink
from arg_input.ports.log_sink import LogSink

# Undecorated output is copied in chunks of this size.
COPY_CHUNK = 64 * 1024


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arg-input",
        description="Concatenate files (or '-' for standard input) to standard output.",
    )
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("-n", "--number", action="store_true", default=None, help="Number all output lines")
    parser.add_argument(
        "--show-source",
        action="store_true",
        default=None,
        help="Prefix each line with its source name and line number within that source",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail without output if any named file cannot be opened",
    )
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level")
    parser.add_argument("--log-jsonl", help="Write logs to this JSONL file instead of stderr")
    parser.add_argument("files", nargs="*", help="Input files; '-' reads standard input")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    # Intermixed parsing lets flags sit between file names, as with cat.
    return build_parser().parse_intermixed_args(argv)


def apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI flags take precedence over config; unset flags leave config values alone.
    if args.number is not None:
        config.output.number_lines = args.number
    if args.show_source is not None:
        config.output.show_source = args.show_source
    if args.strict is not None:
        config.input.strict = args.strict
    if args.log_level is not None:
        config.logging.level = args.log_level
    if args.log_jsonl is not None:
        config.logging.sink = "jsonl"
        config.logging.path = args.log_jsonl


def format_line(line: Line, output: OutputConfig) -> bytes:
    prefix = ""
    if output.number_lines:
        prefix += f"{line.global_line_number:6d}\t"
    if output.show_source:
        prefix += f"{line.source_name}:{line.current_line_number}:"
    return prefix.encode("utf-8") + line.payload


def copy_stream(reader: ChainedReader, out: BinaryIO, output: OutputConfig) -> None:
    if output.number_lines or output.show_source:
        for line in reader:
            out.write(format_line(line, output))
        return
    while True:
        chunk = reader.read_bytes(COPY_CHUNK)
        if chunk is None:
            return
        out.write(chunk)


def run(
    argv: Sequence[str] | None = None,
    *,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    log_sink: LogSink | None = None,
) -> int:
    """Copy the chained inputs to stdout.

    Exit codes: 0 when every source was read, 1 when any source was
    skipped (or strict preflight failed), 2 on configuration errors.
    """
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else AppConfig()
        apply_cli_overrides(config, args)
        sink = log_sink or build_log_sink(config.logging.sink, config.logging.level, config.logging.path)
    except (ConfigError, ValueError) as exc:
        print(f"arg-input: {exc}", file=sys.stderr)
        return 2

    out = stdout if stdout is not None else sys.stdout.buffer
    reader_kwargs: dict[str, object] = {} if stdin is None else {"stdin": stdin}
    try:
        try:
            reader = open_reader(args.files, strict=config.input.strict, log_sink=sink, **reader_kwargs)
        except SourcesUnavailable as exc:
            for error in exc.errors:
                sink.emit(
                    LogMessage(
                        level="ERROR",
                        message="source unavailable",
                        fields={"source": error.source, "cause": str(error.cause)},
                    )
                )
            return 1
        with reader:
            copy_stream(reader, out, config.output)
        out.flush()
        return 1 if reader.errors else 0
    finally:
        close = getattr(sink, "close", None)
        if callable(close) and log_sink is None:
            close()
