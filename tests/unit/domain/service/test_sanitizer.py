"""Unit tests for ContentSanitizer."""

from html.parser import HTMLParser

import pytest

from remark.config import SubmissionSettings
from remark.domain.service import ContentSanitizer

ALLOWED = {
    "a": {"href", "title"},
    "code": set(),
    "i": set(),
    "strong": set(),
}

HOSTILE_INPUTS = [
    "<script><b>x</b></script>",
    "<script>alert(1)</script>after",
    '<a href="javascript:alert(1)">click</a>',
    '<a href="http://example.com" onclick="evil()">link</a>',
    '<a href="http://example.com">never closed',
    "<strong><i>nested <code>deep</strong></i></code>",
    "<div><p>para</p></div>",
    '<img src="x" onerror="alert(1)">tail',
    "<iframe src='http://evil.example'></iframe>",
    "<svg><script>alert(1)</script></svg>",
    "<style>body { display: none }</style>visible",
    "<!-- hidden -->comment",
    '<a href="http://example.com" style="color:red" title="t">styled</a>',
    "<STRONG>shout</STRONG>",
    "<<script>>",
    "<i <b>>broken</b>",
    '<a href=" javascript:alert(1)">spaced</a>',
    "<code><a href='http://example.com'>in code</a></code>",
    "1 < 2 && 3 > 2",
]


class TagCollector(HTMLParser):
    """Collects every start tag and its attribute names."""

    def __init__(self) -> None:
        super().__init__()
        self.tags: list[tuple[str, set[str]]] = []

    def handle_starttag(self, tag, attrs):
        self.tags.append((tag, {name for name, _ in attrs}))

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)


def collect_tags(html: str) -> list[tuple[str, set[str]]]:
    collector = TagCollector()
    collector.feed(html)
    collector.close()
    return collector.tags


@pytest.fixture
def sanitizer() -> ContentSanitizer:
    return ContentSanitizer(SubmissionSettings())


class TestSanitizeText:
    """Tests for rich comment text."""

    def test_allowed_markup_is_kept(self, sanitizer):
        """Allow-listed tags pass through unchanged."""
        text = "<strong>bold</strong> and <i>italic</i> with <code>x = 1</code>"

        assert sanitizer.sanitize_text(text) == text

    def test_link_keeps_permitted_attributes_only(self, sanitizer):
        """Links keep href and title but lose everything else."""
        result = sanitizer.sanitize_text(
            '<a href="http://example.com" title="t" onclick="evil()" class="c">link</a>'
        )

        assert 'href="http://example.com"' in result
        assert 'title="t"' in result
        assert "onclick" not in result
        assert "class" not in result
        assert ">link</a>" in result

    def test_script_is_removed_with_its_content(self, sanitizer):
        """Script elements disappear entirely, leaving the text around them."""
        result = sanitizer.sanitize_text("<script>alert(1)</script>after")

        assert result == "after"

    @pytest.mark.parametrize(
        "text",
        [
            "<style>body{display:none}</style>v",
            "<textarea>typed</textarea>v",
            "<noscript><i>hidden</i></noscript>v",
            "<option>choice</option>v",
            "<SCRIPT type=\"text/javascript\">evil()</SCRIPT>v",
        ],
    )
    def test_content_bearing_elements_are_dropped(self, sanitizer, text):
        assert sanitizer.sanitize_text(text) == "v"

    def test_markup_nested_in_script_is_dropped(self, sanitizer):
        """Tags hidden inside a script element do not leak, nor does their text."""
        assert sanitizer.sanitize_text("<script><b>x</b></script>") == ""

    def test_unclosed_script_swallows_the_rest(self, sanitizer):
        assert sanitizer.sanitize_text("keep<script>alert(1)") == "keep"

    def test_javascript_href_is_dropped(self, sanitizer):
        """Links with unsafe protocols lose their href."""
        result = sanitizer.sanitize_text('<a href="javascript:alert(1)">click</a>')

        assert "javascript" not in result
        assert "click" in result

    def test_unclosed_link_is_closed(self, sanitizer):
        """Unmatched tags are balanced instead of swallowing the rest."""
        result = sanitizer.sanitize_text('<a href="http://example.com">open')

        assert "open" in result
        assert result.count("<a") == result.count("</a>")

    def test_disallowed_block_tags_are_unwrapped(self, sanitizer):
        """Tags outside the allow-list are removed, their text kept."""
        result = sanitizer.sanitize_text("<div><p>para</p></div><code>x</code>")

        assert result == "para<code>x</code>"

    def test_comments_are_stripped(self, sanitizer):
        """HTML comments are removed."""
        assert sanitizer.sanitize_text("<!-- hidden -->comment") == "comment"

    def test_bare_angle_brackets_are_escaped(self, sanitizer):
        """Stray comparison operators end up as entities."""
        result = sanitizer.sanitize_text("1 < 2")

        assert result == "1 &lt; 2"

    def test_uppercase_tags_are_normalized(self, sanitizer):
        """Tag names are matched case-insensitively."""
        assert sanitizer.sanitize_text("<STRONG>shout</STRONG>") == (
            "<strong>shout</strong>"
        )

    def test_only_markup_yields_empty_text(self, sanitizer):
        """Input made only of disallowed markup sanitizes to nothing."""
        assert sanitizer.sanitize_text("<div></div>  <p></p>") == ""

    @pytest.mark.parametrize("text", HOSTILE_INPUTS)
    def test_output_stays_within_allow_list(self, sanitizer, text):
        """No tag or attribute outside the allow-list ever survives."""
        result = sanitizer.sanitize_text(text)

        for tag, attributes in collect_tags(result):
            assert tag in ALLOWED, f"{tag!r} leaked from {text!r}"
            assert attributes <= ALLOWED[tag], f"{attributes!r} leaked from {text!r}"
        assert "javascript:" not in result

    @pytest.mark.parametrize("text", HOSTILE_INPUTS)
    def test_sanitizing_is_idempotent(self, sanitizer, text):
        """Sanitizing sanitized text changes nothing."""
        once = sanitizer.sanitize_text(text)

        assert sanitizer.sanitize_text(once) == once

    def test_allow_list_comes_from_settings(self):
        """A narrower allow-list is honoured."""
        sanitizer = ContentSanitizer(
            SubmissionSettings(allowed_tags={"code": frozenset()})
        )

        result = sanitizer.sanitize_text("<strong>a</strong><code>b</code>")

        assert result == "a<code>b</code>"


class TestSanitizePlain:
    """Tests for plain-text fields."""

    def test_markup_is_removed(self, sanitizer):
        assert sanitizer.sanitize_plain("<b>Bob</b>") == "Bob"

    def test_special_characters_are_escaped(self, sanitizer):
        assert sanitizer.sanitize_plain("Tom & Jerry") == "Tom &amp; Jerry"

    def test_email_is_unchanged(self, sanitizer):
        assert sanitizer.sanitize_plain("alice@example.com") == "alice@example.com"

    def test_script_content_is_dropped(self, sanitizer):
        assert sanitizer.sanitize_plain("<script>alert(1)</script>Bob") == "Bob"

    def test_blank_becomes_none(self, sanitizer):
        assert sanitizer.sanitize_plain("   ") is None
        assert sanitizer.sanitize_plain(None) is None

    def test_idempotent(self, sanitizer):
        once = sanitizer.sanitize_plain('<i>x</i> & "y" <z')

        assert sanitizer.sanitize_plain(once) == once
