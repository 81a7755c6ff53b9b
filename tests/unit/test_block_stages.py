#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the mermaid, block reference, embed, checkbox and application link stages."""

import json

import pytest

from ofmark.ast import (
    BlockQuote,
    CodeBlock,
    Document,
    HTMLInline,
    Image,
    Link,
    List,
    ListItem,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
)
from ofmark.ast.utils import get_render_attrs
from ofmark.renderers.html import CHECKBOX_INTERACTIVE_KEY
from ofmark.transforms import (
    BlockReferenceTransform,
    CheckboxTransform,
    DocumentContext,
    MermaidTransform,
    ObsidianUriTransform,
    TweetEmbedTransform,
    YouTubeEmbedTransform,
)


@pytest.mark.unit
class TestMermaidTransform:
    """Test diagram fence tagging."""

    def test_mermaid_block(self):
        """Test a mermaid block is tagged and the document flagged."""
        context = DocumentContext()
        source = 'graph TD\n  A-->B["quoted"]\n'
        doc = Document(children=[CodeBlock(content=source, language="mermaid")])
        block = MermaidTransform(context).transform(doc).children[0]
        assert context.has_mermaid_diagram is True
        attrs = get_render_attrs(block)
        assert attrs["class"] == ["mermaid"]
        assert json.loads(attrs["data-clipboard"]) == source
        assert block.content == source

    def test_other_language(self):
        """Test other code blocks are untouched."""
        context = DocumentContext()
        doc = Document(children=[CodeBlock(content="print(1)", language="python")])
        block = MermaidTransform(context).transform(doc).children[0]
        assert context.has_mermaid_diagram is False
        assert get_render_attrs(block) == {}


@pytest.mark.unit
class TestBlockReferenceTransform:
    """Test block id markers."""

    def test_paragraph_marker(self):
        """Test a trailing marker becomes the paragraph id."""
        context = DocumentContext()
        doc = Document(children=[Paragraph(content=[Text(content="A claim worth linking ^claim-1")])])
        paragraph = BlockReferenceTransform(context).transform(doc).children[0]
        assert paragraph.content[0].content == "A claim worth linking"
        assert get_render_attrs(paragraph) == {"id": "claim-1"}
        assert context.blocks["claim-1"] is paragraph

    def test_marker_after_inline_node(self):
        """Test a marker-only trailing text node after other inline nodes is dropped."""
        doc = Document(
            children=[Paragraph(content=[Link(url="x", content=[Text(content="link")]), Text(content=" ^ref")])]
        )
        paragraph = BlockReferenceTransform().transform(doc).children[0]
        assert len(paragraph.content) == 1
        assert isinstance(paragraph.content[0], Link)
        assert get_render_attrs(paragraph) == {"id": "ref"}

    def test_standalone_marker_attaches_to_previous_block(self):
        """Test a marker-only paragraph moves its id onto the preceding table."""
        context = DocumentContext()
        table = Table(
            header=TableRow(cells=[TableCell(content=[Text(content="a")])], is_header=True),
            rows=[TableRow(cells=[TableCell(content=[Text(content="1")])])],
        )
        doc = Document(children=[table, Paragraph(content=[Text(content="^table-1")])])
        result = BlockReferenceTransform(context).transform(doc)
        assert len(result.children) == 1
        assert isinstance(result.children[0], Table)
        assert get_render_attrs(result.children[0]) == {"id": "table-1"}
        assert "table-1" in context.blocks

    def test_standalone_marker_first_in_document(self):
        """Test a leading marker-only paragraph is kept as text."""
        doc = Document(children=[Paragraph(content=[Text(content="^lonely")])])
        result = BlockReferenceTransform().transform(doc)
        assert result.children[0].content[0].content == "^lonely"
        assert get_render_attrs(result.children[0]) == {}

    def test_list_item_marker(self):
        """Test a marker in a list item's text becomes the item id."""
        context = DocumentContext()
        doc = Document(
            children=[List(ordered=False, items=[ListItem(children=[Paragraph(content=[Text(content="item ^i-1")])])])]
        )
        item = BlockReferenceTransform(context).transform(doc).children[0].items[0]
        assert get_render_attrs(item) == {"id": "i-1"}
        assert get_render_attrs(item.children[0]) == {}
        assert item.children[0].content[0].content == "item"
        assert context.blocks["i-1"] is item

    def test_marker_inside_quote(self):
        """Test standalone markers inside a block-quote."""
        quote = BlockQuote(
            children=[Paragraph(content=[Text(content="quoted")]), Paragraph(content=[Text(content="^q")])]
        )
        result = BlockReferenceTransform().transform(Document(children=[quote]))
        inner = result.children[0].children
        assert len(inner) == 1
        assert get_render_attrs(inner[0]) == {"id": "q"}

    def test_duplicate_ids_last_wins(self):
        """Test the last block with a repeated id is recorded."""
        context = DocumentContext()
        doc = Document(
            children=[
                Paragraph(content=[Text(content="first ^dup")]),
                Paragraph(content=[Text(content="second ^dup")]),
            ]
        )
        result = BlockReferenceTransform(context).transform(doc)
        assert context.blocks["dup"] is result.children[1]


@pytest.mark.unit
class TestExternalEmbeds:
    """Test YouTube and tweet embeds."""

    def test_youtube(self):
        """Test a YouTube image becomes an iframe player."""
        doc = Document(children=[Paragraph(content=[Image(url="https://youtu.be/dQw4w9WgXcQ")])])
        node = YouTubeEmbedTransform().transform(doc).children[0].content[0]
        assert isinstance(node, HTMLInline)
        assert node.content == (
            '<iframe class="external-embed youtube" allow="fullscreen" frameborder="0" width="600px" '
            'src="https://www.youtube.com/embed/dQw4w9WgXcQ"></iframe>'
        )

    def test_tweet(self):
        """Test a tweet image becomes a tweet blockquote."""
        url = "https://x.com/someone/status/1234567890"
        doc = Document(children=[Paragraph(content=[Image(url=url)])])
        node = TweetEmbedTransform().transform(doc).children[0].content[0]
        assert node.content == f'<blockquote class="twitter-tweet"><a href="{url}">{url}</a></blockquote>'

    def test_ordinary_images_kept(self):
        """Test other images pass through both stages."""
        doc = Document(children=[Paragraph(content=[Image(url="photo.png")])])
        result = TweetEmbedTransform().transform(YouTubeEmbedTransform().transform(doc))
        assert isinstance(result.children[0].content[0], Image)


@pytest.mark.unit
class TestCheckboxTransform:
    """Test interactive checkboxes."""

    def test_task_item_flagged(self):
        """Test task items become interactive."""
        doc = Document(
            children=[
                List(
                    ordered=False,
                    items=[
                        ListItem(children=[Paragraph(content=[Text(content="done")])], task_status="checked"),
                        ListItem(children=[Paragraph(content=[Text(content="plain")])]),
                    ],
                )
            ]
        )
        task, plain = CheckboxTransform().transform(doc).children[0].items
        assert task.metadata[CHECKBOX_INTERACTIVE_KEY] is True
        assert get_render_attrs(task) == {"class": ["task-list-item"]}
        assert CHECKBOX_INTERACTIVE_KEY not in plain.metadata
        assert get_render_attrs(plain) == {}


@pytest.mark.unit
class TestObsidianUriTransform:
    """Test application link marking."""

    def test_obsidian_link(self):
        """Test obsidian:// links get the class."""
        doc = Document(
            children=[Paragraph(content=[Link(url="obsidian://open?vault=x", content=[Text(content="open")])])]
        )
        link = ObsidianUriTransform().transform(doc).children[0].content[0]
        assert get_render_attrs(link) == {"class": ["obsidian-uri"]}

    def test_existing_classes_kept(self):
        """Test existing classes are preserved."""
        link = Link(url="obsidian://open", content=[], metadata={"render_attrs": {"class": ["tag-link"]}})
        result = ObsidianUriTransform().transform(Document(children=[Paragraph(content=[link])]))
        assert get_render_attrs(result.children[0].content[0])["class"] == ["tag-link", "obsidian-uri"]

    def test_web_link_untouched(self):
        """Test ordinary links are not marked."""
        doc = Document(children=[Paragraph(content=[Link(url="https://obsidian.md", content=[])])])
        link = ObsidianUriTransform().transform(doc).children[0].content[0]
        assert get_render_attrs(link) == {}
