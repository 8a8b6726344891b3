"""Line classification helpers for annotated .env files.

Each raw line is trimmed and matched against the annotation prefixes in a
fixed priority order.  The free-text description prefix ("#") is a prefix of
every bracketed annotation, so it is tested last, and anything that is not a
comment is treated as a variable declaration.
"""

from enum import Enum

from milu.env_docs.patterns import (
    ANNOTATION_SUFFIX,
    COMMENT_MARKER,
    DESCRIPTION_PREFIX,
    DOCS_PREFIX,
    POLICY_PREFIX,
    RESPONSIBLE_PREFIX,
    SECRET_PREFIX,
    TYPE_PREFIX,
)
from milu.env_docs.schema import FieldSlot


class LineKind(Enum):
    """Semantic kind of a line, declared in matching priority order.

    Each value is a (prefix, suffix) pair; ENV_VARIABLE is the catch-all.
    """

    RESPONSIBLE = (RESPONSIBLE_PREFIX, ANNOTATION_SUFFIX)
    TYPE = (TYPE_PREFIX, ANNOTATION_SUFFIX)
    SECRET = (SECRET_PREFIX, ANNOTATION_SUFFIX)
    POLICY = (POLICY_PREFIX, ANNOTATION_SUFFIX)
    DOCS = (DOCS_PREFIX, ANNOTATION_SUFFIX)
    DESCRIPTION = (DESCRIPTION_PREFIX, "")
    ENV_VARIABLE = ("", "")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def suffix(self) -> str:
        return self.value[1]

    @property
    def slot(self) -> FieldSlot:
        """Column that content of this kind accumulates into."""
        return _KIND_SLOTS[self]


_KIND_SLOTS: dict[LineKind, FieldSlot] = {
    LineKind.RESPONSIBLE: FieldSlot.RESPONSIBLE,
    LineKind.TYPE: FieldSlot.TYPE,
    LineKind.SECRET: FieldSlot.SECRET,
    LineKind.POLICY: FieldSlot.POLICY,
    LineKind.DOCS: FieldSlot.DOCS,
    LineKind.DESCRIPTION: FieldSlot.DESCRIPTION,
    LineKind.ENV_VARIABLE: FieldSlot.ENV_VARIABLE,
}


def is_blank(raw_line: str) -> bool:
    """Return True for lines that carry nothing: empty, whitespace, or a bare '#'."""
    stripped = raw_line.strip()
    return stripped in ("", COMMENT_MARKER)


def get_line_kind(line: str) -> LineKind:
    """Return the first LineKind (in priority order) whose prefix starts the trimmed line."""
    stripped = line.strip()
    for kind in LineKind:
        # ENV_VARIABLE has an empty prefix, so the loop always ends here at the latest
        if stripped.startswith(kind.prefix):
            return kind
    return LineKind.ENV_VARIABLE


def extract_content(line: str, kind: LineKind) -> str:
    """Strip the kind's prefix and suffix from the trimmed line, best effort.

    A missing prefix or suffix is not an error: that stage simply leaves the
    text as it was, so an unclosed "# [@type=string" yields "string".
    """
    stripped = line.strip()
    return stripped.removeprefix(kind.prefix).removesuffix(kind.suffix).strip()


def classify(raw_line: str) -> tuple[LineKind, str]:
    """Classify a raw line and extract its payload.

    Callers are expected to drop blank lines (see is_blank) first.
    """
    kind = get_line_kind(raw_line)
    return kind, extract_content(raw_line, kind)
