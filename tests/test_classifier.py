"""
Tests for input classification.

Covers URL detection, bang prefixes, the default search fallback, and the
URL-before-bang ordering.
"""

import pytest

from spotlight.search.classifier import (
    SEARCH_ICON,
    URL_ICON,
    BangIntent,
    SearchIntent,
    UrlIntent,
    encode_query,
    intent_icon,
    is_likely_url,
    parse_input,
)
from spotlight.search.engines import DEFAULT_ENGINES, EngineDescriptor, EngineRegistry

GOOGLE = DEFAULT_ENGINES["g"]
GITHUB = DEFAULT_ENGINES["gh"]


class TestIsLikelyUrl:
    """Test the dot/no-space and scheme heuristic."""

    @pytest.mark.parametrize("text", ["github.com", "a.b", "docs.python.org/3/", "  x.io  "])
    def test_dot_without_space(self, text):
        assert is_likely_url(text) is True

    def test_dot_with_space_is_not_url(self):
        assert is_likely_url("version 1.2") is False

    def test_explicit_scheme(self):
        assert is_likely_url("http://localhost") is True
        assert is_likely_url("https://localhost") is True

    def test_plain_words(self):
        assert is_likely_url("localhost") is False
        assert is_likely_url("rust lang") is False


class TestParseInputUrl:
    """Test URL intents and scheme completion."""

    def test_scheme_is_added(self):
        intent = parse_input("github.com")
        assert intent == UrlIntent(target_url="https://github.com", display_text="github.com")
        assert intent.kind == "url"

    def test_existing_scheme_is_kept(self):
        intent = parse_input("http://example.org/a?b=c")
        assert intent.target_url == "http://example.org/a?b=c"

    def test_input_is_trimmed(self):
        intent = parse_input("   example.org  ")
        assert intent.target_url == "https://example.org"
        assert intent.display_text == "example.org"

    def test_url_wins_over_bang_prefix(self):
        intent = parse_input("gh.com")
        assert isinstance(intent, UrlIntent)
        assert intent.target_url == "https://gh.com"


class TestParseInputBang:
    """Test engine prefixes with and without a query."""

    def test_bare_prefix_opens_homepage(self):
        intent = parse_input("gh")
        assert isinstance(intent, BangIntent)
        assert intent.target_url == GITHUB.homepage
        assert intent.query == ""
        assert intent.display_text == "Open GitHub"
        assert intent.engine_name == "GitHub"

    def test_prefix_with_query(self):
        intent = parse_input("gh rust lang")
        assert intent.kind == "bang"
        assert intent.query == "rust lang"
        assert intent.target_url == GITHUB.query_template + "rust%20lang"
        assert intent.display_text == "GitHub: rust lang"
        assert intent.icon == GITHUB.icon

    def test_prefix_is_case_insensitive(self):
        intent = parse_input("Y lofi beats")
        assert isinstance(intent, BangIntent)
        assert intent.engine_name == "YouTube"

    def test_interior_whitespace_is_kept(self):
        intent = parse_input("gh  rust   lang  ")
        assert intent.query == "rust   lang"

    def test_unknown_prefix_falls_back_to_search(self):
        intent = parse_input("openai gpt")
        assert isinstance(intent, SearchIntent)
        assert intent.target_url == GOOGLE.query_template + "openai%20gpt"

    def test_non_letter_prefix_falls_back_to_search(self):
        intent = parse_input("g2 something")
        assert intent.kind == "search"


class TestParseInputSearch:
    """Test the default engine fallback."""

    def test_search_display_and_icon(self):
        intent = parse_input("weather tomorrow")
        assert intent.display_text == 'Search Google for "weather tomorrow"'
        assert intent.icon == GOOGLE.icon

    def test_custom_default_engine(self):
        engines = dict(DEFAULT_ENGINES)
        engines["d"] = EngineDescriptor(
            key="d", name="DuckDuckGo",
            query_template="https://duckduckgo.com/?q=",
            homepage="https://duckduckgo.com",
        )
        registry = EngineRegistry(engines, default_key="d")
        intent = parse_input("what is a monad", registry)
        assert intent.target_url == "https://duckduckgo.com/?q=what%20is%20a%20monad"
        assert intent.display_text == 'Search DuckDuckGo for "what is a monad"'

    def test_blank_input_has_no_intent(self):
        assert parse_input("") is None
        assert parse_input("   ") is None


class TestEncodeQuery:
    """Test percent-encoding of the query substring."""

    def test_reserved_characters(self):
        assert encode_query("a&b=c/d?e#f") == "a%26b%3Dc%2Fd%3Fe%23f"

    def test_unreserved_characters_survive(self):
        assert encode_query("A-z_0.9!~*'()") == "A-z_0.9!~*'()"

    def test_unicode(self):
        assert encode_query("café") == "caf%C3%A9"


class TestIntentIcon:
    """Test the search box glyph for each intent."""

    def test_bang_uses_engine_icon(self):
        assert intent_icon(parse_input("y music")) == DEFAULT_ENGINES["y"].icon

    def test_url_uses_globe(self):
        assert intent_icon(parse_input("example.com")) == URL_ICON

    def test_search_and_blank_use_magnifier(self):
        assert intent_icon(parse_input("hello world")) == SEARCH_ICON
        assert intent_icon(None) == SEARCH_ICON
