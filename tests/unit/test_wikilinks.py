#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for wikilink and embed resolution."""

import pytest

from ofmark.ast import Document, HTMLInline, Image, Link, Paragraph, Text, WikiLink
from ofmark.ast.utils import get_render_attrs, is_generated
from ofmark.options import ObsidianOptions
from ofmark.transforms import DocumentContext, WikilinkTransform, resolve_link


def _resolve(link: WikiLink, context: DocumentContext | None = None, options: ObsidianOptions | None = None):
    doc = Document(children=[Paragraph(content=[link])])
    result = WikilinkTransform(context, options).transform(doc)
    return result.children[0].content[0]


@pytest.mark.unit
class TestWikilinkLinks:
    """Test non-embedded wikilinks."""

    def test_internal_link(self):
        """Test a plain link slugs its target."""
        node = _resolve(WikiLink(target="Some Note"))
        assert isinstance(node, Link)
        assert node.url == "Some-Note"
        assert node.content[0].content == "Some Note"

    def test_anchor_and_alias(self):
        """Test the anchor is appended and the alias becomes the text."""
        node = _resolve(WikiLink(target="Some Note", anchor="Heading", alias="shown"))
        assert node.url == "Some-Note#Heading"
        assert node.content[0].content == "shown"

    def test_same_note_anchor(self):
        """Test an anchor-only link."""
        node = _resolve(WikiLink(target="", anchor="Section"))
        assert node.url == "#Section"
        assert node.content[0].content == "Section"

    def test_external_target(self):
        """Test absolute URLs are used unchanged."""
        node = _resolve(WikiLink(target="https://example.com/page", alias="site"))
        assert isinstance(node, Link)
        assert node.url == "https://example.com/page"
        assert node.content[0].content == "site"

    @pytest.mark.parametrize("all_slugs", [None, set(), {"notes/other"}])
    def test_external_target_never_broken(self, all_slugs):
        """Test absolute URLs stay verbatim links under broken-link suppression."""
        context = DocumentContext(slug="notes/today", all_slugs=all_slugs)
        options = ObsidianOptions(disable_broken_wikilinks=True)
        node = _resolve(WikiLink(target="https://example.com"), context, options)
        assert isinstance(node, Link)
        assert node.url == "https://example.com"
        assert node.content[0].content == "https://example.com"

    def test_broken_link_marker(self, context):
        """Test unknown targets render as broken markers when suppression is on."""
        options = ObsidianOptions(disable_broken_wikilinks=True)
        node = _resolve(WikiLink(target="Missing Note"), context, options)
        assert isinstance(node, HTMLInline)
        assert node.content == '<a class="internal broken">Missing Note</a>'
        assert is_generated(node)

    def test_known_link_not_broken(self, context):
        """Test known targets stay links when suppression is on."""
        options = ObsidianOptions(disable_broken_wikilinks=True)
        node = _resolve(WikiLink(target="notes/other"), context, options)
        assert isinstance(node, Link)
        assert node.url == "notes/other"

    def test_unknown_link_without_suppression(self):
        """Test unknown targets are still links by default."""
        node = _resolve(WikiLink(target="Missing Note"))
        assert isinstance(node, Link)

    def test_no_slugs_means_all_broken(self):
        """Test a context without known slugs treats every target as unknown."""
        options = ObsidianOptions(disable_broken_wikilinks=True)
        resolution = resolve_link("Anything", None, None, DocumentContext(), options)
        assert resolution.broken is True
        assert resolution.url is None


@pytest.mark.unit
class TestWikilinkEmbeds:
    """Test embedded wikilinks."""

    def test_image_with_width(self):
        """Test an image embed with a width alias."""
        node = _resolve(WikiLink(target="photo.png", alias="300", embedded=True))
        assert isinstance(node, Image)
        assert node.url == "photo.png"
        assert get_render_attrs(node) == {"width": "300", "height": "auto", "alt": ""}

    def test_image_with_alt_and_size(self):
        """Test an image embed with alt text and both dimensions."""
        node = _resolve(WikiLink(target="assets/My Cat.JPG", alias="A cat|100x200", embedded=True))
        assert node.url == "assets/My-Cat.JPG"
        assert get_render_attrs(node) == {"width": "100", "height": "200", "alt": "A cat"}

    def test_video(self):
        """Test a video embed."""
        node = _resolve(WikiLink(target="diagram.mp4", embedded=True))
        assert isinstance(node, HTMLInline)
        assert node.content == '<video src="diagram.mp4" controls></video>'

    def test_webm_is_video(self):
        """Test webm resolves as video rather than audio."""
        node = _resolve(WikiLink(target="clip.webm", embedded=True))
        assert node.content.startswith("<video")

    def test_audio(self):
        """Test an audio embed."""
        node = _resolve(WikiLink(target="voice memo.mp3", embedded=True))
        assert node.content == '<audio src="voice-memo.mp3" controls></audio>'

    def test_pdf(self):
        """Test a pdf embed."""
        node = _resolve(WikiLink(target="paper.pdf", embedded=True))
        assert node.content == '<iframe src="paper.pdf" class="pdf"></iframe>'

    def test_transclude(self):
        """Test a note embed becomes a transclude placeholder."""
        node = _resolve(WikiLink(target="Other Note", anchor="Section", embedded=True))
        assert isinstance(node, HTMLInline)
        assert node.metadata["transclude"] is True
        assert 'data-url="Other-Note"' in node.content
        assert 'data-block="#Section"' in node.content
        assert 'href="Other-Note#Section"' in node.content
        assert "Transclude of Other-Note#Section" in node.content


@pytest.mark.unit
class TestWikilinkTransformBehavior:
    """Test general transform behavior."""

    def test_input_not_mutated(self):
        """Test the original document is left untouched."""
        link = WikiLink(target="Some Note")
        doc = Document(children=[Paragraph(content=[Text(content="see "), link])])
        WikilinkTransform().transform(doc)
        assert doc.children[0].content[1] is link

    def test_other_nodes_kept(self):
        """Test surrounding inline nodes are preserved."""
        doc = Document(children=[Paragraph(content=[Text(content="see "), WikiLink(target="a")])])
        result = WikilinkTransform().transform(doc)
        assert result.children[0].content[0].content == "see "
