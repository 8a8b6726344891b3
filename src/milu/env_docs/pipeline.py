"""Annotated .env -> markdown table pipeline.

Walks the input lines once.  Annotation lines accumulate into the current
row; each variable line splits into key and default value, flushes the row,
and resets the accumulator.  Annotations after the last variable line are
never flushed.

A variable line without '=' still flushes whatever annotations were gathered,
with empty key and default value cells.  Earlier releases produced that shape,
so it is kept and only logged.
"""

import io
import logging
from collections.abc import Iterable, Iterator
from typing import TextIO

from milu.env_docs.accumulator import FieldAccumulator
from milu.env_docs.classifiers import LineKind, classify, is_blank
from milu.env_docs.formatting import render_header, render_row
from milu.env_docs.patterns import KEY_VALUE_SEPARATOR
from milu.env_docs.schema import EnvDocRow, FieldSlot

logger = logging.getLogger(__name__)


# ─── Row Iterator ────────────────────────────────────────────────────────────


def iter_rows(lines: Iterable[str]) -> Iterator[EnvDocRow]:
    """Yield one EnvDocRow per variable line, in input order."""
    accumulator = FieldAccumulator()

    for line_no, raw_line in enumerate(lines, start=1):
        if is_blank(raw_line):
            continue

        kind, content = classify(raw_line)
        if kind is not LineKind.ENV_VARIABLE:
            accumulator.add(kind.slot, content)
            continue

        # Split NODE_ENV=development on the first '=' only
        key, sep, value = content.partition(KEY_VALUE_SEPARATOR)
        if sep:
            accumulator.add(FieldSlot.ENV_VARIABLE, key)
            accumulator.add(FieldSlot.DEFAULT_VALUE, value)
        else:
            logger.warning("Line %d has no '=' (%r); emitting row with empty key and default", line_no, content)

        row = accumulator.snapshot()
        logger.debug("Flushing row for %r at line %d", row.key, line_no)
        yield row
        accumulator.clear()

    if accumulator:
        logger.debug("Discarding %d annotation slot(s) after the last variable", len(accumulator))


# ─── Main Pipeline Step ──────────────────────────────────────────────────────


def run(lines: Iterable[str], sink: TextIO) -> int:
    """Write the markdown table for `lines` to `sink`, one row per flush.

    The header is always written, even when no variable is declared.  Write
    errors from the sink propagate unchanged.  Returns the number of rows.
    """
    sink.write(render_header())
    n_rows = 0
    for row in iter_rows(lines):
        sink.write(render_row(row))
        n_rows += 1
    logger.info("Wrote %d environment variable row(s)", n_rows)
    return n_rows


def generate(lines: Iterable[str]) -> str:
    """Return the full markdown table for `lines` as a string."""
    buffer = io.StringIO()
    run(lines, buffer)
    return buffer.getvalue()
