#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the dialect grammar functions."""

import pytest

from ofmark.grammar import (
    canonicalize_callout,
    is_external_url,
    is_numeric_tag,
    is_obsidian_uri,
    is_tweet_url,
    is_video_url,
    parse_block_reference,
    parse_callout_directive,
    parse_image_embed_alias,
    parse_wikilink,
    parse_youtube_url,
    sub_wikilinks,
)


@pytest.mark.unit
class TestParseWikilink:
    """Test wikilink matching."""

    def test_plain_target(self):
        """Test a bare target."""
        link = parse_wikilink("[[Some Note]]")
        assert link is not None
        assert link.target == "Some Note"
        assert link.anchor is None
        assert link.alias is None
        assert link.embedded is False

    def test_anchor_and_alias(self):
        """Test target, anchor and alias together."""
        link = parse_wikilink("[[Some Note#Heading|shown]]")
        assert (link.target, link.anchor, link.alias) == ("Some Note", "Heading", "shown")

    def test_embed_marker(self):
        """Test the leading ! marks an embed."""
        link = parse_wikilink("![[photo.png|300]]")
        assert link.embedded is True
        assert link.target == "photo.png"
        assert link.alias == "300"

    def test_escaped_alias_separator(self):
        """Test the table-escaped alias separator."""
        link = parse_wikilink(r"[[Note\|alias]]")
        assert link.target == "Note"
        assert link.alias == "alias"

    def test_same_note_anchor(self):
        """Test an anchor without a target."""
        link = parse_wikilink("[[#Section]]")
        assert link.target == ""
        assert link.anchor == "Section"

    def test_block_anchor(self):
        """Test a block reference anchor keeps its caret."""
        link = parse_wikilink("[[note#^claim-1]]")
        assert link.anchor == "^claim-1"

    def test_blank_alias_is_none(self):
        """Test a whitespace alias is treated as absent."""
        assert parse_wikilink("[[Note|  ]]").alias is None

    def test_not_a_wikilink(self):
        """Test non-matching text returns None."""
        assert parse_wikilink("[Note](url)") is None
        assert parse_wikilink("[[a]] and [[b]]") is None

    def test_sub_wikilinks_receives_source(self):
        """Test substitution passes the literal match text."""
        result = sub_wikilinks("x [[a|b]] y", lambda link, source: f"<{source}:{link.alias}>")
        assert result == "x <[[a|b]]:b> y"


@pytest.mark.unit
class TestCalloutDirective:
    """Test callout directive parsing."""

    def test_kind_metadata_title(self):
        """Test a directive with metadata and title."""
        directive = parse_callout_directive("[!warning|meta] Custom Title")
        assert directive.kind == "warning"
        assert directive.metadata == "meta"
        assert directive.fold == ""
        assert directive.title == "Custom Title"
        assert directive.collapsible is False

    def test_alias_kind(self):
        """Test alias kinds map to canonical kinds and keep the raw spelling."""
        directive = parse_callout_directive("[!TLDR]")
        assert directive.kind == "abstract"
        assert directive.raw_kind == "TLDR"
        assert directive.title == ""

    @pytest.mark.parametrize(
        "line,fold,collapsible,collapsed",
        [
            ("[!note]- Closed", "-", True, True),
            ("[!note]+ Open", "+", True, False),
            ("[!note] Static", "", False, False),
        ],
    )
    def test_fold_markers(self, line, fold, collapsible, collapsed):
        """Test fold markers."""
        directive = parse_callout_directive(line)
        assert directive.fold == fold
        assert directive.collapsible is collapsible
        assert directive.collapsed is collapsed

    def test_custom_kind(self):
        """Test unknown kinds pass through lower-cased."""
        assert parse_callout_directive("[!My-Kind] x").kind == "my-kind"

    def test_not_a_directive(self):
        """Test ordinary quote text is not a directive."""
        assert parse_callout_directive("Just a quote") is None
        assert parse_callout_directive("[note] no bang") is None

    def test_canonicalize_is_idempotent(self):
        """Test canonicalizing a canonical kind is a no-op."""
        for kind in ("tldr", "hint", "error", "cite", "custom"):
            once = canonicalize_callout(kind)
            assert canonicalize_callout(once) == once

    @pytest.mark.parametrize(
        "alias,kind",
        [("summary", "abstract"), ("hint", "tip"), ("done", "success"), ("faq", "question"), ("error", "danger")],
    )
    def test_alias_table(self, alias, kind):
        """Test a selection of alias mappings."""
        assert canonicalize_callout(alias) == kind


@pytest.mark.unit
class TestImageEmbedAlias:
    """Test image embed alias parsing."""

    @pytest.mark.parametrize(
        "alias,expected",
        [
            (None, ("", "auto", "auto")),
            ("", ("", "auto", "auto")),
            ("300", ("", "300", "auto")),
            ("100x200", ("", "100", "200")),
            ("A cat", ("A cat", "auto", "auto")),
            ("A cat|100", ("A cat", "100", "auto")),
            ("A cat|100x200", ("A cat", "100", "200")),
            ("A cat|100x", ("A cat", "100", "auto")),
        ],
    )
    def test_alias_forms(self, alias, expected):
        """Test the accepted alias forms."""
        dims = parse_image_embed_alias(alias)
        assert (dims.alt, dims.width, dims.height) == expected


@pytest.mark.unit
class TestPredicates:
    """Test small classification helpers."""

    def test_external_url(self):
        """Test absolute http(s) detection is case-insensitive."""
        assert is_external_url("https://example.com")
        assert is_external_url("HTTP://example.com")
        assert not is_external_url("notes/other")
        assert not is_external_url("ftp://example.com")

    def test_numeric_tag(self):
        """Test digit-and-slash values are numeric."""
        assert is_numeric_tag("42")
        assert is_numeric_tag("42/7")
        assert not is_numeric_tag("v2")

    def test_video_url(self):
        """Test video extensions at the end of a URL."""
        assert is_video_url("media/intro.mp4")
        assert is_video_url("https://cdn.example.com/clip.webm")
        assert not is_video_url("photo.png")
        assert not is_video_url("intro.mp4.txt")

    def test_obsidian_uri(self):
        """Test obsidian:// detection."""
        assert is_obsidian_uri("obsidian://open?vault=notes")
        assert not is_obsidian_uri("https://obsidian.md")

    def test_tweet_url(self):
        """Test twitter.com and x.com status links."""
        assert is_tweet_url("https://twitter.com/someone/status/1234567890")
        assert is_tweet_url("https://x.com/someone/status/1234567890")
        assert not is_tweet_url("https://x.com/someone")


@pytest.mark.unit
class TestBlockReference:
    """Test trailing block id markers."""

    def test_trailing_marker(self):
        """Test a marker at the end of text."""
        ref = parse_block_reference("A claim worth linking ^claim-1")
        assert ref.text == "A claim worth linking"
        assert ref.block_id == "claim-1"

    def test_marker_only(self):
        """Test a standalone marker."""
        ref = parse_block_reference("^table-1")
        assert ref.text == ""
        assert ref.block_id == "table-1"

    def test_caret_inside_word(self):
        """Test a caret not preceded by whitespace is not a marker."""
        assert parse_block_reference("x^2") is None

    def test_marker_not_at_end(self):
        """Test a marker followed by more text is ignored."""
        assert parse_block_reference("^id then more") is None


@pytest.mark.unit
class TestYouTubeUrl:
    """Test YouTube link resolution."""

    def test_watch_url(self):
        """Test a watch link."""
        assert parse_youtube_url("https://www.youtube.com/watch?v=dQw4w9WgXcQ") == (
            "https://www.youtube.com/embed/dQw4w9WgXcQ"
        )

    def test_short_url(self):
        """Test a youtu.be link."""
        assert parse_youtube_url("https://youtu.be/dQw4w9WgXcQ") == "https://www.youtube.com/embed/dQw4w9WgXcQ"

    def test_video_in_playlist(self):
        """Test a video with a playlist keeps the list."""
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PL123"
        assert parse_youtube_url(url) == "https://www.youtube.com/embed/dQw4w9WgXcQ?list=PL123"

    def test_playlist_only(self):
        """Test a playlist link."""
        url = "https://www.youtube.com/playlist?list=PL123"
        assert parse_youtube_url(url) == "https://www.youtube.com/embed/videoseries?list=PL123"

    def test_other_host(self):
        """Test non-YouTube links are not resolved."""
        assert parse_youtube_url("https://vimeo.com/watch?v=dQw4w9WgXcQ") is None
