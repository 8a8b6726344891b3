"""Command line entry point for the milu utilities.

Usage:
    milu generate-env-docs .env.example
    milu generate-env-docs .env.example --output docs/environment-variables.md
    milu generate-env-docs .env.example --stdout
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from milu.config import LOG_FORMAT, load_settings
from milu.env_docs.pipeline import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser with one sub-command per utility."""
    parser = argparse.ArgumentParser(prog="milu", description="A CLI tool for Milú Frontend convenience utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    env_docs = subparsers.add_parser(
        "generate-env-docs",
        help="Generate .env file documentation from Milú annotations",
        description="Generate a markdown table documenting every variable of an annotated .env file",
    )
    env_docs.add_argument("file", type=Path, help="The .env file to generate documentation from")
    env_docs.add_argument("-o", "--output", type=Path, default=None, help="Output markdown file (default: environment-variables.md)")
    env_docs.add_argument("--stdout", action="store_true", help="Write the table to standard output instead of a file")
    env_docs.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def generate_env_docs(env_file: Path, output_file: Path | None) -> int:
    """Document `env_file` into `output_file` (stdout when None).  Returns the row count.

    The input is opened before the output so a missing input leaves no file behind.
    A leading UTF-8 byte order mark is dropped.  Raises ValueError when the output
    would overwrite the input.
    """
    if output_file is not None and output_file.resolve() == env_file.resolve():
        raise ValueError(f"Output file {output_file} is the input file; refusing to overwrite it")

    with open(env_file, "r", encoding="utf-8-sig") as src:
        lines = (line.rstrip("\r\n") for line in src)
        if output_file is None:
            return run(lines, sys.stdout)

        logger.info("Documenting %s -> %s", env_file, output_file)
        with open(output_file, "w", encoding="utf-8") as dst:
            return run(lines, dst)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the selected command, and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(Path.cwd() / ".env")
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        logger.error("Invalid configuration: %s", exc)
        return 1

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level, format=LOG_FORMAT)

    output_file = None if args.stdout else (args.output or settings.output_file)
    try:
        generate_env_docs(args.file, output_file)
    except UnicodeDecodeError as exc:
        logger.error("Could not read %s as UTF-8: %s", args.file, exc)
        return 1
    except (OSError, ValueError) as exc:
        logger.error("Could not generate documentation for %s: %s", args.file, exc)
        return 1

    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
