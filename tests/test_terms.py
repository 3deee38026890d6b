"""Tests for literal escaping, URI segment extraction and id validation."""

from __future__ import annotations

import re

import pytest

from wikiquery.errors import InvalidInputError, MalformedUriError
from wikiquery.sparql.terms import (
    escape_literal,
    last_segment,
    require_entity_id,
    require_language_tag,
)

# ---------------------------------------------------------------------------
# escape_literal
# ---------------------------------------------------------------------------


class TestEscapeLiteral:
    def test_plain_text_unchanged(self) -> None:
        assert escape_literal("Douglas Adams") == "Douglas Adams"

    def test_double_quote(self) -> None:
        assert escape_literal('say "hi"') == 'say \\"hi\\"'

    def test_single_quote(self) -> None:
        assert escape_literal("O'Brien") == "O\\'Brien"

    def test_backslash(self) -> None:
        assert escape_literal("a\\b") == "a\\\\b"

    def test_newline_passes_through(self) -> None:
        assert escape_literal("a\nb") == "a\nb"

    @pytest.mark.parametrize(
        "text",
        ['"', "'", "\\", '\\"', 'x"""@en } } DROP ALL #', "\\'\\\""],
    )
    def test_no_unescaped_metacharacters(self, text: str) -> None:
        escaped = escape_literal(text)
        # Strip every escape pair; nothing breaking a literal may remain.
        stripped = re.sub(r"\\.", "", escaped, flags=re.DOTALL)
        assert not set(stripped) & {'"', "'", "\\"}

    def test_returns_new_string(self) -> None:
        original = 'a"b'
        escaped = escape_literal(original)
        assert original == 'a"b'
        assert escaped != original


# ---------------------------------------------------------------------------
# last_segment
# ---------------------------------------------------------------------------


class TestLastSegment:
    def test_entity_uri(self) -> None:
        assert last_segment("http://www.wikidata.org/entity/Q42") == "Q42"

    def test_property_uri(self) -> None:
        assert last_segment("http://www.wikidata.org/prop/direct/P106") == "P106"

    def test_ignores_query_and_fragment(self) -> None:
        assert last_segment("https://www.wikidata.org/entity/Q42?x=1#frag") == "Q42"

    def test_trailing_slash_fails(self) -> None:
        with pytest.raises(MalformedUriError):
            last_segment("http://www.wikidata.org/entity/")

    def test_empty_path_fails(self) -> None:
        with pytest.raises(MalformedUriError) as exc_info:
            last_segment("http://www.wikidata.org")
        assert exc_info.value.uri == "http://www.wikidata.org"


# ---------------------------------------------------------------------------
# require_entity_id
# ---------------------------------------------------------------------------


class TestRequireEntityId:
    def test_accepts_short_code(self) -> None:
        assert require_entity_id("Q8006577") == "Q8006577"

    @pytest.mark.parametrize(
        "value",
        ["", "Q", "q42", "P106", "42", "Q42 ", "Q42\n", "Q42}", "wd:Q42", None, 42],
    )
    def test_rejects_other_shapes(self, value: object) -> None:
        with pytest.raises(InvalidInputError):
            require_entity_id(value)


# ---------------------------------------------------------------------------
# require_language_tag
# ---------------------------------------------------------------------------


class TestRequireLanguageTag:
    @pytest.mark.parametrize("tag", ["en", "pt-br", "zh-Hant-TW", "[AUTO_LANGUAGE]"])
    def test_accepts_tags(self, tag: str) -> None:
        assert require_language_tag(tag) == tag

    @pytest.mark.parametrize(
        "tag",
        ["", "en\nfr", "en\r", 'en"', "en,fr", "en fr", "-en", "en-", "[auto_language]", None],
    )
    def test_rejects_everything_else(self, tag: object) -> None:
        with pytest.raises(InvalidInputError):
            require_language_tag(tag)
