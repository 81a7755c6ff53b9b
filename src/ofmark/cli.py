#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/cli.py
"""Command line interface for ofmark.

Processes one note and writes the rendered HTML fragment::

    ofmark notes/today.md --slug notes/today --known-slugs slugs.txt
    ofmark note.md --set enableCheckbox=true --set mermaid=false --out note.html
    ofmark note.md --metadata

Exit codes: 0 success, 1 processing error, 2 validation or configuration
error, 3 file error.

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from ofmark import __version__
from ofmark.config import discover_config_file, load_options
from ofmark.constants import DEFAULT_SLUG
from ofmark.exceptions import ConfigError, FileError, OfmarkError, ValidationError
from ofmark.logging_utils import configure_logging
from ofmark.options import ObsidianOptions
from ofmark.transforms.pipeline import Pipeline, ProcessedDocument
from ofmark.utils.text import slugify_file_path

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code."""
    if isinstance(exception, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    return EXIT_ERROR


def parse_override(text: str) -> tuple[str, bool]:
    """Parse a ``key=value`` option override.

    Raises
    ------
    argparse.ArgumentTypeError
        If the text is not ``key=value`` or the value is not a boolean word

    """
    key, sep, raw_value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Expected key=value, got '{text}'")

    value = raw_value.strip().lower()
    if value in _TRUE_VALUES:
        return key.strip(), True
    if value in _FALSE_VALUES:
        return key.strip(), False
    raise argparse.ArgumentTypeError(f"Option '{key.strip()}' expects true or false, got '{raw_value}'")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ofmark",
        description="Render an Obsidian-flavored markdown note to an HTML fragment.",
    )
    parser.add_argument("input", help="Note file to process ('-' reads standard input)")
    parser.add_argument("--slug", help="Page slug of the note (default: derived from the file path)")
    parser.add_argument("--known-slugs", metavar="FILE", help="File listing every known note slug, one per line")
    parser.add_argument("--config", metavar="FILE", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Do not search for a configuration file")
    parser.add_argument(
        "--set",
        dest="overrides",
        metavar="KEY=VALUE",
        action="append",
        type=parse_override,
        default=[],
        help="Override an option flag, e.g. --set enableCheckbox=true (repeatable)",
    )
    parser.add_argument("--out", "-o", metavar="FILE", help="Write output to FILE instead of standard output")
    parser.add_argument(
        "--metadata",
        action="store_true",
        help="Write a JSON object with the HTML, tags, diagram flag and block ids",
    )
    parser.add_argument("--resources", action="store_true", help="Append the required inline scripts and styles")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write log output to FILE")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument(
        "--debug-stage",
        dest="debug_stages",
        metavar="MODULE",
        action="append",
        default=[],
        help="Log one transform module at DEBUG, e.g. --debug-stage callouts (repeatable)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(f"Cannot read {path}: {e}", file_path=path, original_error=e) from e


def load_known_slugs(path: str) -> set[str]:
    """Read a slug list file, one slug per line; blank lines and ``#`` comments are skipped."""
    slugs = set()
    for line in _read_text(path).splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            slugs.add(line)
    logger.debug(f"Loaded {len(slugs)} known slug(s) from {path}")
    return slugs


def _default_slug(input_path: str) -> str:
    if input_path == "-":
        return DEFAULT_SLUG
    path = Path(input_path).resolve()
    try:
        path = path.relative_to(Path.cwd().resolve())
    except ValueError:
        # Outside the working directory; use the bare file name
        path = Path(path.name)
    return slugify_file_path(path.as_posix(), exclude_ext=True)


def _resolve_options(parsed_args: argparse.Namespace) -> ObsidianOptions:
    config_path: Optional[Path] = Path(parsed_args.config) if parsed_args.config else None
    if config_path is None and not parsed_args.no_config:
        start_dir = Path(parsed_args.input).parent if parsed_args.input != "-" else None
        config_path = discover_config_file(start_dir)
        if config_path is not None:
            logger.info(f"Using configuration file {config_path}")
    return load_options(config_path, dict(parsed_args.overrides))


def _format_output(
    processed: ProcessedDocument, html: str, pipeline: Pipeline, parsed_args: argparse.Namespace
) -> str:
    if parsed_args.resources:
        html = f"{html}{pipeline.external_resources().to_html()}\n"
    if not parsed_args.metadata:
        return html

    payload: dict[str, Any] = {
        "slug": processed.context.slug,
        "html": html,
        "tags": processed.context.tags,
        "has_mermaid_diagram": processed.context.has_mermaid_diagram,
        "blocks": sorted(processed.context.blocks),
        "frontmatter": processed.document.metadata,
        "options": pipeline.options.to_dict(),
    }
    return json.dumps(payload, indent=2, default=str) + "\n"


def _write_output(text: str, out: Optional[str]) -> None:
    if out is None:
        sys.stdout.write(text)
        return
    try:
        Path(out).write_text(text, encoding="utf-8")
    except OSError as e:
        raise FileError(f"Cannot write {out}: {e}", file_path=out, original_error=e) from e


def main(args: list[str] | None = None) -> int:
    """Execute the CLI entry point and return the exit code."""
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits on --help, --version and usage errors
        return EXIT_SUCCESS if e.code in (0, None) else EXIT_VALIDATION_ERROR

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(
        log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        stage_levels=dict.fromkeys(parsed_args.debug_stages, logging.DEBUG),
    )

    try:
        options = _resolve_options(parsed_args)
        all_slugs = load_known_slugs(parsed_args.known_slugs) if parsed_args.known_slugs else None
        slug = parsed_args.slug or _default_slug(parsed_args.input)

        pipeline = Pipeline(options=options, all_slugs=all_slugs)
        processed = pipeline.process(_read_text(parsed_args.input), slug=slug)
        html = pipeline.render(processed.document)
        _write_output(_format_output(processed, html, pipeline, parsed_args), parsed_args.out)
    except OfmarkError as e:
        logger.debug("Processing failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
