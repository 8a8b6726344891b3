"""Markdown rendering for the environment-variable table.

Row cells are written without padding around the pipes, matching the output
of earlier versions of the tool; the header keeps its spaced layout.
"""

from milu.env_docs.patterns import TABLE_HEADER, TABLE_HEADER_SEPARATOR
from milu.env_docs.schema import EnvDocRow


def render_header() -> str:
    """Return the column-title line and the dash separator line."""
    return f"{TABLE_HEADER}\n{TABLE_HEADER_SEPARATOR}\n"


def render_row(row: EnvDocRow) -> str:
    """Render a row as '|key|responsible|...|docs|' followed by a newline."""
    return "|" + "|".join(row.cells()) + "|\n"
