"""Markup sanitization for untrusted comment fields.

Comment text goes through two passes, both working on the html5lib token
stream produced by bleach rather than on raw text:

1. A general-purpose pass that removes script-bearing elements together with
   their content, drops other unsafe markup, HTML comments and links with
   unsafe protocols, while keeping common formatting tags.
2. An allow-list pass that keeps only the configured tags and attributes.

Plain fields (name, email, home page) keep no markup at all.
"""

from bleach import html5lib_shim
from bleach.sanitizer import Cleaner

from remark.config import SubmissionSettings

# Formatting markup considered harmless by the general-purpose pass
GENERAL_TAGS = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "blockquote",
        "br",
        "code",
        "em",
        "i",
        "li",
        "ol",
        "p",
        "pre",
        "span",
        "strong",
        "ul",
    }
)
GENERAL_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "acronym": ["title"],
}

# Elements removed along with everything inside them
DROP_CONTENT_TAGS = frozenset({"script", "style", "textarea", "noscript", "option"})

TAG_TOKENS = {"StartTag", "EndTag", "EmptyTag"}


class DropContentFilter(html5lib_shim.Filter):
    """Removes DROP_CONTENT_TAGS elements and all tokens nested in them.

    The elements have to be let through the tokenizer (listed as allowed tags)
    so that html5lib parses their content as raw text instead of markup.
    """

    def __iter__(self):
        depth = 0
        for token in super().__iter__():
            if token["type"] in TAG_TOKENS and token["name"] in DROP_CONTENT_TAGS:
                if token["type"] == "StartTag":
                    depth += 1
                elif token["type"] == "EndTag":
                    depth = max(depth - 1, 0)
                continue
            if depth == 0:
                yield token


class ContentSanitizer:
    """Sanitizes comment text and plain-text fields.

    Both passes are idempotent: sanitizing sanitized output returns it unchanged.
    """

    def __init__(self, settings: SubmissionSettings) -> None:
        """Initialize sanitizer.

        Args:
            settings: Submission settings holding the tag allow-list
        """
        protocols = sorted(settings.allowed_protocols)
        self._general = Cleaner(
            tags=GENERAL_TAGS | DROP_CONTENT_TAGS,
            attributes=GENERAL_ATTRIBUTES,
            protocols=protocols,
            strip=True,
            strip_comments=True,
            filters=[DropContentFilter],
        )
        self._allow_list = Cleaner(
            tags=frozenset(settings.allowed_tags),
            attributes={
                tag: sorted(attributes)
                for tag, attributes in settings.allowed_tags.items()
                if attributes
            },
            protocols=protocols,
            strip=True,
            strip_comments=True,
        )
        self._plain = Cleaner(
            tags=DROP_CONTENT_TAGS,
            attributes={},
            strip=True,
            strip_comments=True,
            filters=[DropContentFilter],
        )

    def sanitize_text(self, text: str) -> str:
        """Sanitize rich comment text.

        Args:
            text: Raw text as submitted

        Returns:
            Text containing only allow-listed tags and attributes
        """
        cleaned = self._general.clean(text)
        return self._allow_list.clean(cleaned).strip()

    def sanitize_plain(self, value: str | None) -> str | None:
        """Strip all markup from a plain-text field and escape what remains.

        Args:
            value: Raw field value

        Returns:
            Escaped value, or None if nothing is left
        """
        if value is None:
            return None
        cleaned = self._plain.clean(value).strip()
        return cleaned or None
