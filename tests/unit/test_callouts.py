#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for callout restructuring."""

import pytest

from ofmark.ast import BlockQuote, Document, HTMLBlock, Link, Paragraph, Text
from ofmark.ast.utils import HTML_TAG_KEY, get_render_attrs
from ofmark.transforms import CalloutTransform, normalize_callout_lines
from ofmark.transforms.callouts import CALLOUT_KEY, callout_title_markup, default_callout_title


def _callout(*children):
    doc = Document(children=[BlockQuote(children=list(children))])
    return CalloutTransform().transform(doc).children[0]


def _title_inner(title_block: HTMLBlock) -> str:
    start = title_block.content.index('<div class="callout-title-inner">') + len('<div class="callout-title-inner">')
    end = title_block.content.index("</div>", start)
    return title_block.content[start:end]


@pytest.mark.unit
class TestCalloutStructure:
    """Test the rebuilt callout tree."""

    def test_title_metadata_and_content(self):
        """Test a callout with metadata, custom title and a body paragraph."""
        callout = _callout(
            Paragraph(content=[Text(content="[!warning|meta] Custom Title")]),
            Paragraph(content=[Text(content="body")]),
        )
        assert get_render_attrs(callout) == {
            "class": ["callout", "warning"],
            "data-callout": "warning",
            "data-callout-fold": False,
            "data-callout-metadata": "meta",
        }
        title, content = callout.children
        assert isinstance(title, HTMLBlock)
        assert _title_inner(title) == "<p>Custom Title</p>"
        assert isinstance(content, BlockQuote)
        assert get_render_attrs(content) == {"class": ["callout-content"]}
        assert content.metadata[HTML_TAG_KEY] == "div"
        assert content.children[0].content[0].content == "body"

    def test_default_title_uses_canonical_kind(self):
        """Test an untitled alias callout is titled after its canonical kind."""
        callout = _callout(Paragraph(content=[Text(content="[!tldr]")]))
        assert get_render_attrs(callout)["data-callout"] == "abstract"
        assert _title_inner(callout.children[0]) == "<p>Abstract</p>"
        assert len(callout.children) == 1

    def test_custom_kind_title(self):
        """Test hyphens in custom kinds become spaces in the default title."""
        assert default_callout_title("my-custom-kind") == "My custom kind"

    def test_remaining_lines_become_body(self):
        """Test lines after the directive in the same paragraph form a body paragraph."""
        callout = _callout(Paragraph(content=[Text(content="[!note] Title\nfirst line\nsecond line")]))
        title, body = callout.children
        assert isinstance(body, Paragraph)
        assert body.content[0].content == "first line\nsecond line"

    def test_title_with_inline_siblings(self):
        """Test inline nodes after the directive text join the title."""
        callout = _callout(
            Paragraph(content=[Text(content="[!info] See"), Link(url="notes/other", content=[Text(content="other")])])
        )
        assert _title_inner(callout.children[0]) == '<p>See <a href="notes/other">other</a></p>'

    def test_foldable(self):
        """Test fold markers add the collapsible classes and icon."""
        collapsed = _callout(Paragraph(content=[Text(content="[!faq]- Closed")]))
        assert get_render_attrs(collapsed)["class"] == ["callout", "question", "is-collapsible", "is-collapsed"]
        assert get_render_attrs(collapsed)["data-callout-fold"] is True
        assert "fold-callout-icon" in collapsed.children[0].content

        expanded = _callout(Paragraph(content=[Text(content="[!faq]+ Open")]))
        assert get_render_attrs(expanded)["class"] == ["callout", "question", "is-collapsible"]

    def test_callout_directive_recorded(self):
        """Test the parsed directive is stored on the node."""
        callout = _callout(Paragraph(content=[Text(content="[!TIP|wide] Hi")]))
        directive = callout.metadata[CALLOUT_KEY]
        assert directive.kind == "tip"
        assert directive.raw_kind == "TIP"
        assert directive.metadata == "wide"


@pytest.mark.unit
class TestCalloutPassThrough:
    """Test block quotes that are not callouts."""

    def test_plain_quote(self):
        """Test an ordinary quote is unchanged."""
        quote = _callout(Paragraph(content=[Text(content="Just a quote")]))
        assert CALLOUT_KEY not in quote.metadata
        assert get_render_attrs(quote) == {}
        assert quote.children[0].content[0].content == "Just a quote"

    def test_empty_quote(self):
        """Test an empty quote is unchanged."""
        quote = _callout()
        assert quote.children == []

    def test_quote_starting_with_link(self):
        """Test a quote whose first inline is not text is unchanged."""
        quote = _callout(Paragraph(content=[Link(url="x", content=[Text(content="[!note]")])]))
        assert CALLOUT_KEY not in quote.metadata

    def test_nested_callout(self):
        """Test callouts nested inside a callout body are restructured."""
        inner = BlockQuote(children=[Paragraph(content=[Text(content="[!bug] Inner")])])
        outer = _callout(Paragraph(content=[Text(content="[!note] Outer")]), inner)
        content = outer.children[-1]
        nested = content.children[0]
        assert get_render_attrs(nested)["data-callout"] == "bug"

    def test_idempotent(self):
        """Test running the stage twice does not restructure again."""
        doc = Document(children=[BlockQuote(children=[Paragraph(content=[Text(content="[!note] Title")])])])
        once = CalloutTransform().transform(doc)
        twice = CalloutTransform().transform(once)
        assert len(twice.children[0].children) == len(once.children[0].children)
        assert get_render_attrs(twice.children[0]) == get_render_attrs(once.children[0])


@pytest.mark.unit
class TestCalloutHelpers:
    """Test the markup helpers and text normalization."""

    def test_title_markup(self):
        """Test the title block markup."""
        assert callout_title_markup("<p>T</p>", collapsible=False) == (
            '<div class="callout-title"><div class="callout-icon"></div>'
            '<div class="callout-title-inner"><p>T</p></div></div>'
        )

    def test_normalize_inserts_break(self):
        """Test a quoted empty line follows each directive line."""
        assert normalize_callout_lines("> [!note] Title\n> body") == "> [!note] Title\n> \n> body"

    def test_normalize_leaves_other_text(self):
        """Test text without directives is unchanged."""
        src = "> quote\n\nplain [!note] text"
        assert normalize_callout_lines(src) == src
