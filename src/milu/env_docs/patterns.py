"""Annotation prefixes, suffixes and markdown table constants.

An annotated .env file looks like:

    # [@responsible=platform-team]
    # [@type=string]
    # [@secret=false]
    # [@policy=required]
    # [@docs=https://example.com/node-env]
    # Runtime mode of the application
    NODE_ENV=development

Used by classifiers.py (line matching) and formatting.py (table output).
"""

# ─── Annotation Markers ───────────────────────────────────────────────────────

# Bare comment marker; also the free-text description prefix
COMMENT_MARKER = "#"

RESPONSIBLE_PREFIX = "# [@responsible="
TYPE_PREFIX = "# [@type="
SECRET_PREFIX = "# [@secret="
POLICY_PREFIX = "# [@policy="
DOCS_PREFIX = "# [@docs="
DESCRIPTION_PREFIX = COMMENT_MARKER

# Closing bracket shared by every [@name=...] annotation
ANNOTATION_SUFFIX = "]"

# Key/value separator on a variable line; only the first occurrence splits
KEY_VALUE_SEPARATOR = "="

# Joins repeated contributions to the same column
VALUE_SEPARATOR = ","


# ─── Markdown Table ──────────────────────────────────────────────────────────

COLUMN_TITLES = (
    "Key",
    "Responsible",
    "Type",
    "Secret",
    "Policy",
    "Default value",
    "Description",
    "Docs",
)

TABLE_HEADER = "| " + " | ".join(COLUMN_TITLES) + " |"

TABLE_HEADER_SEPARATOR = "| " + " | ".join("---------" for _ in COLUMN_TITLES) + " |"
