#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the stage registry and stage metadata."""

import threading

import pytest

from ofmark.ast import Document, Paragraph, Text
from ofmark.exceptions import InvalidOptionsError
from ofmark.options import ObsidianOptions
from ofmark.transforms import (
    DocumentContext,
    ObsidianTransform,
    StageMetadata,
    StageRegistry,
    TagTransform,
    stage_registry,
)

DEFAULT_ORDER = [
    "wikilinks",
    "highlights",
    "tags",
    "video-embeds",
    "callouts",
    "mermaid",
    "block-references",
    "youtube-embeds",
    "tweet-embeds",
    "obsidian-uri",
]


class ShoutTransform(ObsidianTransform):
    """Upper-case every text node."""

    def visit_text(self, node: Text) -> Text:
        return Text(content=node.content.upper())


@pytest.mark.unit
class TestStageRegistry:
    """Test registry behavior."""

    def test_singleton(self):
        """Test every instantiation returns the global registry."""
        assert StageRegistry() is stage_registry

    def test_builtin_stages_registered(self, clean_registry):
        """Test built-in stages load on first access."""
        names = clean_registry.list_stages()
        for name in DEFAULT_ORDER + ["inline-html", "checkbox"]:
            assert name in names
        assert names == sorted(names)

    def test_default_order(self, clean_registry):
        """Test the stages enabled by default and their order."""
        assert [m.name for m in clean_registry.enabled_stages(ObsidianOptions())] == DEFAULT_ORDER

    def test_inline_html_runs_after_tags(self, clean_registry):
        """Test the raw-HTML stage sits between tags and video embeds."""
        options = ObsidianOptions(enable_in_html_embed=True, enable_checkbox=True)
        names = [m.name for m in clean_registry.enabled_stages(options)]
        assert names.index("tags") < names.index("inline-html") < names.index("video-embeds")
        assert names[-2:] == ["checkbox", "obsidian-uri"]

    def test_disabled_stages_excluded(self, clean_registry):
        """Test flags switch their stages off."""
        options = ObsidianOptions(callouts=False, mermaid=False)
        names = [m.name for m in clean_registry.enabled_stages(options)]
        assert "callouts" not in names
        assert "mermaid" not in names

    def test_register_and_unregister(self, clean_registry):
        """Test registering a custom stage."""
        clean_registry.register(
            StageMetadata(name="shout", description="Upper-case text", transformer_class=ShoutTransform, priority=200)
        )
        assert clean_registry.has_stage("shout")
        assert clean_registry.enabled_stages(ObsidianOptions())[-1].name == "shout"
        assert clean_registry.unregister("shout") is True
        assert clean_registry.unregister("shout") is False

    def test_overwrite_logs_warning(self, clean_registry, caplog):
        """Test re-registering a name logs a warning."""
        metadata = StageMetadata(name="tags", description="Replacement", transformer_class=TagTransform, priority=50)
        with caplog.at_level("WARNING", logger="ofmark.transforms.registry"):
            clean_registry.register(metadata)
        assert "already registered" in caplog.text
        assert clean_registry.get_metadata("tags") is metadata

    def test_get_unknown(self, clean_registry):
        """Test unknown names raise KeyError."""
        with pytest.raises(KeyError):
            clean_registry.get_metadata("nope")

    def test_clear_reloads_builtins(self, clean_registry):
        """Test clearing the registry restores built-ins on next access."""
        clean_registry.unregister("tags")
        clean_registry.clear()
        assert clean_registry.has_stage("tags")

    def test_concurrent_first_access_waits_for_loading(self, clean_registry, monkeypatch):
        """Test a second thread never sees a half-loaded registry."""
        loading = threading.Event()
        release = threading.Event()

        def slow_discover(self):
            loading.set()
            release.wait(5)
            return 0

        monkeypatch.setattr(StageRegistry, "discover_plugins", slow_discover)
        results = {}
        first = threading.Thread(target=lambda: results.setdefault("first", clean_registry.list_stages()))
        second = threading.Thread(target=lambda: results.setdefault("second", clean_registry.list_stages()))

        first.start()
        assert loading.wait(5)
        second.start()
        second.join(0.2)
        assert second.is_alive()

        release.set()
        first.join(5)
        second.join(5)
        assert results["first"] == results["second"]
        assert set(DEFAULT_ORDER) <= set(results["second"])


@pytest.mark.unit
class TestStageMetadata:
    """Test metadata validation and instantiation."""

    def test_empty_name(self):
        """Test an empty name is rejected."""
        with pytest.raises(ValueError, match="name"):
            StageMetadata(name="", description="x", transformer_class=ShoutTransform)

    def test_wrong_class(self):
        """Test the transformer class must be a stage."""
        with pytest.raises(ValueError, match="ObsidianTransform"):
            StageMetadata(name="bad", description="x", transformer_class=dict)  # type: ignore[arg-type]

    def test_negative_priority(self):
        """Test negative priorities are rejected."""
        with pytest.raises(ValueError, match="Priority"):
            StageMetadata(name="bad", description="x", transformer_class=ShoutTransform, priority=-1)

    def test_unknown_option(self):
        """Test option names must be ObsidianOptions fields."""
        with pytest.raises(ValueError, match="Unknown option"):
            StageMetadata(name="bad", description="x", transformer_class=ShoutTransform, option="sparkles")

    def test_always_enabled_without_option(self):
        """Test a stage without an option is always enabled."""
        metadata = StageMetadata(name="shout", description="x", transformer_class=ShoutTransform)
        assert metadata.is_enabled(ObsidianOptions(wikilinks=False)) is True

    def test_create_instance(self):
        """Test instances are bound to the given context and options."""
        context = DocumentContext(slug="a/b")
        options = ObsidianOptions(enable_checkbox=True)
        metadata = StageMetadata(name="shout", description="x", transformer_class=ShoutTransform)
        stage = metadata.create_instance(context, options)
        assert stage.context is context
        assert stage.options is options
        doc = stage.transform(Document(children=[Paragraph(content=[Text(content="hi")])]))
        assert doc.children[0].content[0].content == "HI"

    def test_stage_rejects_wrong_options(self):
        """Test stages validate their options type."""
        with pytest.raises(InvalidOptionsError):
            ShoutTransform(options={"highlight": True})  # type: ignore[arg-type]
