"""
Unit tests for the FilterSpec data model and name matchers.
"""

import re

import pytest
from pydantic import ValidationError

from lookfor.models.filter_spec import (
    FilterSpec,
    InvalidPatternError,
    LiteralMatcher,
    PatternMatcher,
    TypeFilter,
    build_name_matcher
)
from lookfor.models.entry import EntryType


class TestBuildNameMatcher:
    """Test cases for name matcher construction."""

    def test_no_name(self):
        assert build_name_matcher(None) is None
        assert build_name_matcher(None, use_regex=True) is None

    def test_literal(self):
        matcher = build_name_matcher("foo")

        assert isinstance(matcher, LiteralMatcher)
        assert matcher.kind == "literal"
        assert matcher.text == "foo"

    def test_pattern(self):
        matcher = build_name_matcher("^foo$", use_regex=True)

        assert isinstance(matcher, PatternMatcher)
        assert matcher.kind == "pattern"
        assert matcher.source == "^foo$"
        assert isinstance(matcher.regex, re.Pattern)

    def test_invalid_pattern(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            build_name_matcher("[", use_regex=True)

        error = exc_info.value
        assert error.pattern == "["
        assert error.detail
        assert str(error).startswith("Invalid regex '[': ")

    def test_invalid_pattern_ignored_in_literal_mode(self):
        matcher = build_name_matcher("[", use_regex=False)
        assert matcher.matches("a[b")


class TestFilterSpec:
    """Test cases for FilterSpec."""

    def test_defaults(self):
        spec = FilterSpec()

        assert spec.name is None
        assert spec.extension is None
        assert spec.entry_type == TypeFilter.ANY
        assert spec.max_depth is None
        assert spec.show_hidden is False
        assert not spec.has_name_filter()
        assert not spec.has_extension_filter()

    def test_from_options(self):
        spec = FilterSpec.from_options(
            name="^test_",
            regex=True,
            ext="rs",
            entry_type="file",
            max_depth=3,
            hidden=True
        )

        assert isinstance(spec.name, PatternMatcher)
        assert spec.extension == "rs"
        assert spec.entry_type == TypeFilter.FILE
        assert spec.max_depth == 3
        assert spec.show_hidden is True

    def test_regex_without_name_has_no_effect(self):
        spec = FilterSpec.from_options(regex=True)
        assert spec.name is None

    def test_invalid_pattern_fails_construction(self):
        with pytest.raises(InvalidPatternError):
            FilterSpec.from_options(name="(unclosed", regex=True)

    def test_extension_kept_verbatim(self):
        assert FilterSpec(extension=".txt").extension == ".txt"
        assert FilterSpec(extension="txt").extension == "txt"

    def test_entry_type_from_string(self):
        assert FilterSpec(entry_type="DIR").entry_type == TypeFilter.DIR

    def test_invalid_entry_type(self):
        with pytest.raises(ValidationError, match="Invalid type filter"):
            FilterSpec(entry_type="socket")

    def test_negative_max_depth(self):
        with pytest.raises(ValidationError):
            FilterSpec(max_depth=-1)

    def test_is_immutable(self):
        spec = FilterSpec()

        with pytest.raises(ValidationError):
            spec.show_hidden = True

    def test_name_variant_from_dict(self):
        spec = FilterSpec.model_validate({'name': {'kind': 'literal', 'text': 'abc'}})
        assert isinstance(spec.name, LiteralMatcher)

    def test_to_dict(self):
        spec = FilterSpec.from_options(name="og", ext="txt", entry_type="file")

        assert spec.to_dict() == {
            'name': 'og',
            'name_mode': 'literal',
            'extension': 'txt',
            'entry_type': 'file',
            'max_depth': None,
            'show_hidden': False,
        }

    def test_str(self):
        spec = FilterSpec.from_options(name="og", max_depth=2)
        text = str(spec)

        assert "Name (literal): 'og'" in text
        assert "Max depth: 2" in text
        assert "Hidden: skipped" in text


class TestTypeFilter:
    """Test cases for TypeFilter.accepts."""

    def test_accepts(self):
        assert TypeFilter.FILE.accepts(EntryType.FILE)
        assert not TypeFilter.FILE.accepts(EntryType.OTHER)
        assert TypeFilter.DIR.accepts(EntryType.DIR)
        assert not TypeFilter.DIR.accepts(EntryType.FILE)
        assert all(TypeFilter.ANY.accepts(t) for t in EntryType)
