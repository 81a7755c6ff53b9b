#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/parsers/markdown.py
"""Note text to AST converter.

This module tokenizes note text with mistune and builds the AST consumed by
the dialect stages. Dialect syntax is tokenized into its own node kinds
(WikiLink, Highlight, Tag) by the inline plugins in
:mod:`ofmark.parsers.obsidian_plugins`; YAML front matter becomes the
document metadata.

"""

from __future__ import annotations

import logging
from typing import Any, Literal, Optional

import mistune
import yaml

from ofmark.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Highlight,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Tag,
    Text,
    ThematicBreak,
    WikiLink,
)
from ofmark.exceptions import InvalidOptionsError, ParsingError
from ofmark.options import ObsidianOptions
from ofmark.parsers import obsidian_plugins

logger = logging.getLogger(__name__)


class MarkdownParser:
    r"""Convert note text to AST representation.

    Parameters
    ----------
    options : ObsidianOptions or None, default = None
        Feature toggles; ``wikilinks``, ``highlight``, ``parse_tags`` and
        ``comments`` decide which dialect plugins are registered

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("See [[Other Note]] and #project")
        >>> [type(node).__name__ for node in doc.children[0].content]
        ['Text', 'WikiLink', 'Text', 'Tag']

    """

    def __init__(self, options: ObsidianOptions | None = None):
        """Initialize the parser and build the mistune instance."""
        if options is not None and not isinstance(options, ObsidianOptions):
            raise InvalidOptionsError("markdown", ObsidianOptions, type(options))
        self.options = options or ObsidianOptions()
        self._markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)

    def _plugins(self) -> list[Any]:
        plugins: list[Any] = ["strikethrough", "table", "task_lists"]
        if self.options.highlight:
            plugins.append("mark")
        if self.options.comments:
            plugins.append(obsidian_plugins.comments)
        if self.options.wikilinks:
            plugins.append(obsidian_plugins.wikilinks)
        if self.options.parse_tags:
            plugins.append(obsidian_plugins.tags)
        return plugins

    def parse(self, input_data: str) -> Document:
        """Parse note text into an AST Document.

        Parameters
        ----------
        input_data : str
            Note text, optionally starting with YAML front matter

        Returns
        -------
        Document
            AST document node; front matter fields are its metadata

        Raises
        ------
        ParsingError
            If the input is not a string or tokenization fails

        """
        if not isinstance(input_data, str):
            raise ParsingError(
                f"Note text must be a string, got {type(input_data).__name__}", parsing_stage="input_validation"
            )

        content, metadata = self._extract_frontmatter(input_data)

        try:
            tokens, _state = self._markdown.parse(content)
        except Exception as e:
            raise ParsingError(f"Failed to tokenize note text: {e}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children, metadata=metadata)

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Extract YAML front matter (--- ... ---).

        Malformed front matter is logged and ignored; the block is still
        removed from the note text.

        Returns
        -------
        tuple[str, dict]
            Content with front matter removed and the parsed mapping

        """
        if not (content.startswith("---\n") or content.startswith("---\r\n")):
            return content, {}

        lines = content.splitlines(keepends=True)
        end_index = -1

        for i in range(1, len(lines)):
            if lines[i].strip() == "---":
                end_index = i
                break

        if end_index <= 0:
            return content, {}

        yaml_content = "".join(lines[1:end_index])
        remaining_content = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring malformed front matter: {e}")
            return remaining_content, {}

        if data is None:
            return remaining_content, {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring front matter that is not a mapping ({type(data).__name__})")
            return remaining_content, {}
        return remaining_content, data

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node; None for blank lines and unknown tokens

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items - treat like paragraph
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a code block token, taking the language from the first word of the info string."""
        attrs = token.get("attrs", {})
        info_string = (attrs.get("info") or "").strip()

        metadata: dict[str, Any] = {}
        language = None
        if info_string:
            metadata["info_string"] = info_string
            language = info_string.split(maxsplit=1)[0]

        return CodeBlock(content=token.get("raw", ""), language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        children = token.get("children", [])
        items = [self._process_list_item(child) for child in children if isinstance(child, dict)]

        return List(
            ordered=attrs.get("ordered", False),
            items=items,
            start=attrs.get("start", 1) or 1,
            tight=token.get("tight", attrs.get("tight", True)),
        )

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process a list item token, including task list items."""
        content = self._process_tokens(token.get("children", []))

        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs", {})
        if token.get("type") == "task_list_item" or "checked" in attrs:
            task_status = "checked" if attrs.get("checked") else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        header = None
        rows = []
        alignments: list[Any] = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_cells(part.get("children", []))
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            alignment = cell_token.get("attrs", {}).get("align", None)
            content = self._process_inline_tokens(cell_token.get("children", []))
            cells.append(TableCell(content=content, alignment=alignment))
        return cells

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Adjacent text and soft line breaks are merged into a single Text node
        joined with ``"\\n"``, so line-based grammars (callout directives,
        block references) see the paragraph's lines.

        """
        nodes: list[Node] = []

        for token in tokens:
            token_type = token.get("type", "")
            if token_type in ("text", "softbreak"):
                raw = "\n" if token_type == "softbreak" else token.get("raw", "")
                if nodes and isinstance(nodes[-1], Text):
                    nodes[-1] = Text(content=nodes[-1].content + raw)
                else:
                    nodes.append(Text(content=raw))
                continue

            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title", None),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        # Alt text is in children, not attrs
        alt_parts = [child.get("raw", "") for child in token.get("children", []) if child.get("type") == "text"]
        return Image(url=attrs.get("url", ""), alt_text="".join(alt_parts), title=attrs.get("title", None))

    def _handle_wikilink_token(self, token: dict[str, Any]) -> WikiLink:
        attrs = token["attrs"]
        return WikiLink(
            target=attrs["target"],
            anchor=attrs.get("anchor"),
            alias=attrs.get("alias"),
            embedded=attrs.get("embedded", False),
        )

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node; None for unknown tokens

        """
        token_type = token.get("type", "")
        children = token.get("children", [])

        if token_type == "strong":
            return Strong(content=self._process_inline_tokens(children))
        elif token_type == "emphasis":
            return Emphasis(content=self._process_inline_tokens(children))
        elif token_type == "strikethrough":
            return Strikethrough(content=self._process_inline_tokens(children))
        elif token_type == "mark":
            return Highlight(content=self._process_inline_tokens(children))
        elif token_type == "codespan":
            return Code(content=token.get("raw", ""))
        elif token_type == "link":
            return self._handle_link_token(token)
        elif token_type == "image":
            return self._handle_image_token(token)
        elif token_type == "linebreak":
            return LineBreak()
        elif token_type == "inline_html":
            return HTMLInline(content=token.get("raw", ""))
        elif token_type == obsidian_plugins.WIKILINK_TOKEN:
            return self._handle_wikilink_token(token)
        elif token_type == obsidian_plugins.TAG_TOKEN:
            return Tag(value=token["attrs"]["value"])

        logger.debug(f"Skipping unsupported inline token: {token_type}")
        return None


def markdown_to_ast(markdown_content: str, options: ObsidianOptions | None = None) -> Document:
    r"""Convert note text to AST.

    This is a convenience function that creates a parser and parses the text
    in one step.

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\\n\\n==World==")
    >>> len(doc.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)
