"""Unit tests for line classification and content extraction.

Tests cover:
  - is_blank: lines skipped before classification
  - get_line_kind: prefix matching in priority order
  - extract_content: best-effort prefix/suffix stripping
  - classify: the combined (kind, content) result
"""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from milu.env_docs.classifiers import LineKind, classify, extract_content, get_line_kind, is_blank
from milu.env_docs.schema import FieldSlot

# ===========================================================================
# is_blank tests
# ===========================================================================


class TestIsBlank:

    @pytest.mark.parametrize("line", ["", "   ", "\n", "\t\r\n", "#", "  #  ", "#\n"])
    def test_blank_lines(self, line):
        assert is_blank(line) is True

    @pytest.mark.parametrize("line", ["# a note", "##", "PORT=8080", "FOO", "# [@type=string]"])
    def test_non_blank_lines(self, line):
        assert is_blank(line) is False


# ===========================================================================
# get_line_kind tests
# ===========================================================================


class TestGetLineKind:

    def test_priority_order(self):
        assert list(LineKind) == [
            LineKind.RESPONSIBLE,
            LineKind.TYPE,
            LineKind.SECRET,
            LineKind.POLICY,
            LineKind.DOCS,
            LineKind.DESCRIPTION,
            LineKind.ENV_VARIABLE,
        ]

    def test_description_prefix_shadows_annotations(self):
        """Every bracketed annotation prefix starts with '#', so DESCRIPTION must come after them."""
        for kind in (LineKind.RESPONSIBLE, LineKind.TYPE, LineKind.SECRET, LineKind.POLICY, LineKind.DOCS):
            assert kind.prefix.startswith(LineKind.DESCRIPTION.prefix)

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("# [@responsible=alice]", LineKind.RESPONSIBLE),
            ("# [@type=string]", LineKind.TYPE),
            ("# [@secret=true]", LineKind.SECRET),
            ("# [@policy=required]", LineKind.POLICY),
            ("# [@docs=https://example.com]", LineKind.DOCS),
            ("# free text", LineKind.DESCRIPTION),
            ("PORT=8080", LineKind.ENV_VARIABLE),
            ("FOO", LineKind.ENV_VARIABLE),
        ],
    )
    def test_each_kind(self, line, expected):
        assert get_line_kind(line) is expected

    def test_surrounding_whitespace_ignored(self):
        assert get_line_kind("   # [@type=string]  \n") is LineKind.TYPE

    def test_unknown_annotation_is_description(self):
        assert get_line_kind("# [@owner=alice]") is LineKind.DESCRIPTION

    def test_missing_space_after_hash_is_description(self):
        assert get_line_kind("#[@type=string]") is LineKind.DESCRIPTION

    def test_annotation_prefix_is_case_sensitive(self):
        assert get_line_kind("# [@TYPE=string]") is LineKind.DESCRIPTION


# ===========================================================================
# extract_content tests
# ===========================================================================


class TestExtractContent:

    def test_bracketed_annotation(self):
        assert extract_content("# [@responsible=alice]", LineKind.RESPONSIBLE) == "alice"

    def test_missing_closing_bracket_keeps_payload(self):
        assert extract_content("# [@type=string", LineKind.TYPE) == "string"

    def test_only_one_closing_bracket_removed(self):
        assert extract_content("# [@docs=see [1]]", LineKind.DOCS) == "see [1]"

    def test_missing_prefix_keeps_line(self):
        assert extract_content("string]", LineKind.TYPE) == "string"

    def test_description_hash_removed(self):
        assert extract_content("# a note", LineKind.DESCRIPTION) == "a note"

    def test_description_without_space(self):
        assert extract_content("#a note", LineKind.DESCRIPTION) == "a note"

    def test_description_keeps_trailing_bracket(self):
        assert extract_content("# see [docs]", LineKind.DESCRIPTION) == "see [docs]"

    def test_env_variable_identity(self):
        assert extract_content("  PORT=8080  ", LineKind.ENV_VARIABLE) == "PORT=8080"

    def test_payload_commas_passed_through(self):
        assert extract_content("# [@policy=a,b]", LineKind.POLICY) == "a,b"


# ===========================================================================
# classify tests
# ===========================================================================


class TestClassify:

    def test_type_annotation(self):
        assert classify("# [@type=string]") == (LineKind.TYPE, "string")

    def test_description(self):
        assert classify("# The port to listen on") == (LineKind.DESCRIPTION, "The port to listen on")

    def test_variable_line(self):
        assert classify("PORT=8080\n") == (LineKind.ENV_VARIABLE, "PORT=8080")

    def test_unknown_annotation_keeps_brackets(self):
        assert classify("# [@owner=alice]") == (LineKind.DESCRIPTION, "[@owner=alice]")


class TestLineKindSlot:

    def test_annotation_slots(self):
        assert LineKind.RESPONSIBLE.slot is FieldSlot.RESPONSIBLE
        assert LineKind.TYPE.slot is FieldSlot.TYPE
        assert LineKind.SECRET.slot is FieldSlot.SECRET
        assert LineKind.POLICY.slot is FieldSlot.POLICY
        assert LineKind.DOCS.slot is FieldSlot.DOCS
        assert LineKind.DESCRIPTION.slot is FieldSlot.DESCRIPTION

    def test_variable_slot(self):
        assert LineKind.ENV_VARIABLE.slot is FieldSlot.ENV_VARIABLE

    def test_no_kind_maps_to_default_value(self):
        assert FieldSlot.DEFAULT_VALUE not in {kind.slot for kind in LineKind}
