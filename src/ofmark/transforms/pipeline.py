#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/pipeline.py
"""Per-document processing pipeline.

The pipeline runs the fixed sequence for one note:

1. Raw-text normalization (callout directive lines)
2. Tokenization into the dialect AST
3. The enabled dialect stages, in registry priority order
4. Front-matter tag merge
5. Rendering (optional)

Each call to :meth:`Pipeline.process` gets its own :class:`DocumentContext`
and its own stage instances, so one pipeline may process notes from several
threads at once.

Examples
--------
    >>> pipeline = Pipeline(all_slugs={"index", "notes/other"})
    >>> processed = pipeline.process("Links to [[notes/other]] #todo", slug="index")
    >>> processed.context.tags
    ['todo']
    >>> html = pipeline.render(processed.document)

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Any, Optional

from ofmark.ast.nodes import DIALECT_NODE_TYPES, Document
from ofmark.ast.transforms import extract_nodes
from ofmark.constants import DEFAULT_SLUG
from ofmark.exceptions import InvalidOptionsError, RenderingError, TransformError
from ofmark.options import ObsidianOptions
from ofmark.parsers.markdown import MarkdownParser
from ofmark.renderers.html import HtmlRenderer
from ofmark.resources import ExternalResources, external_resources
from ofmark.transforms.context import DocumentContext
from ofmark.transforms.metadata import StageMetadata
from ofmark.transforms.registry import StageRegistry, stage_registry
from ofmark.transforms.text import normalize_callout_lines
from ofmark.utils.text import slug_tag

logger = logging.getLogger(__name__)

TAGS_METADATA_KEY = "tags"


@dataclass
class ProcessedDocument:
    """A transformed document together with its side-channel context."""

    document: Document
    context: DocumentContext


def merge_tags(existing: Any, collected: list[str]) -> list[str]:
    """Merge collected tag slugs into front-matter tags.

    Front-matter tags may be a list or a single (comma or space separated)
    string. Each one is tag-slugged, so values differing only in case
    collapse to one entry. Order is preserved and duplicates are dropped.

    Examples
    --------
    >>> merge_tags(["Draft", "project"], ["project", "todo"])
    ['draft', 'project', 'todo']

    """
    if existing is None:
        base: list[str] = []
    elif isinstance(existing, str):
        base = [part for part in existing.replace(",", " ").split() if part]
    elif isinstance(existing, (list, tuple)):
        base = [str(tag) for tag in existing if tag is not None]
    else:
        base = [str(existing)]

    merged: list[str] = []
    for tag in [*(slug_tag(tag) for tag in base), *collected]:
        if tag and tag not in merged:
            merged.append(tag)
    return merged


class Pipeline:
    """Run the dialect stages over notes.

    Parameters
    ----------
    options : ObsidianOptions, optional
        Feature toggles shared by every processed note
    all_slugs : set of str, optional
        Slugs of every known note, used for broken-link detection
    registry : StageRegistry, optional
        Stage registry, defaults to the global registry

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an ObsidianOptions instance

    """

    def __init__(
        self,
        options: Optional[ObsidianOptions] = None,
        all_slugs: Optional[AbstractSet[str]] = None,
        registry: Optional[StageRegistry] = None,
    ):
        """Initialize the pipeline."""
        if options is not None and not isinstance(options, ObsidianOptions):
            raise InvalidOptionsError("pipeline", ObsidianOptions, type(options))
        self.options = options or ObsidianOptions()
        self.all_slugs = frozenset(all_slugs) if all_slugs is not None else None
        self.registry = registry or stage_registry
        self._parser = MarkdownParser(self.options)

    def stages(self) -> list[StageMetadata]:
        """Return the stages enabled by the pipeline options, in execution order."""
        return self.registry.enabled_stages(self.options)

    def text_transform(self, src: str) -> str:
        """Normalize raw note text before tokenization."""
        if self.options.callouts:
            src = normalize_callout_lines(src)
        return src

    def parse(self, src: str) -> Document:
        """Normalize and tokenize note text.

        Raises
        ------
        ParsingError
            If the text cannot be tokenized

        """
        return self._parser.parse(self.text_transform(src))

    def transform(self, document: Document, context: DocumentContext) -> Document:
        """Apply every enabled stage to a document.

        Parameters
        ----------
        document : Document
            Tokenized note; it is not modified
        context : DocumentContext
            Per-document state the stages write to

        Returns
        -------
        Document
            Transformed document

        Raises
        ------
        TransformError
            If a stage raises or returns something other than a Document

        """
        result = document
        stages = self.stages()
        logger.debug(f"Applying {len(stages)} stage(s) to {context.slug}")

        for metadata in stages:
            logger.debug(f"Applying stage: {metadata.name}")
            try:
                transformed = metadata.create_instance(context, self.options).transform(result)
            except Exception as e:
                logger.error(f"Stage {metadata.name} failed on {context.slug}: {e}", exc_info=True)
                raise TransformError(
                    f"Stage '{metadata.name}' failed: {e}", transform_name=metadata.name, original_error=e
                ) from e

            if not isinstance(transformed, Document):
                raise TransformError(
                    f"Stage '{metadata.name}' must return Document, got {type(transformed).__name__}",
                    transform_name=metadata.name,
                )
            result = transformed

        leftovers = extract_nodes(result, DIALECT_NODE_TYPES)
        if leftovers:
            kinds = sorted({type(node).__name__ for node in leftovers})
            logger.warning(
                f"{len(leftovers)} dialect node(s) left unresolved in {context.slug} ({', '.join(kinds)}); "
                "they render as source text"
            )
        return result

    def process(self, src: str, slug: str = DEFAULT_SLUG) -> ProcessedDocument:
        """Parse and transform one note.

        Collected tags are merged into ``document.metadata["tags"]``.

        Parameters
        ----------
        src : str
            Note text
        slug : str, default = "index"
            The note's page slug

        Returns
        -------
        ProcessedDocument
            Transformed document and its context

        """
        context = DocumentContext(slug=slug, all_slugs=self.all_slugs)
        document = self.transform(self.parse(src), context)
        if context.tags or TAGS_METADATA_KEY in document.metadata:
            document.metadata[TAGS_METADATA_KEY] = merge_tags(document.metadata.get(TAGS_METADATA_KEY), context.tags)
        return ProcessedDocument(document=document, context=context)

    def render(self, document: Document) -> str:
        """Render a transformed document to an HTML fragment.

        Raises
        ------
        RenderingError
            If the renderer fails

        """
        try:
            return HtmlRenderer().render_to_string(document)
        except Exception as e:
            logger.error(f"Rendering failed: {e}", exc_info=True)
            raise RenderingError(f"Failed to render document: {e}", rendering_stage="html", original_error=e) from e

    def external_resources(self) -> ExternalResources:
        """Return the client assets required by the pipeline options."""
        return external_resources(self.options)
