#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/checkbox.py
"""Interactive task list checkboxes."""

from __future__ import annotations

from ofmark.ast.nodes import ListItem, Node
from ofmark.ast.utils import with_render_attrs
from ofmark.renderers.html import CHECKBOX_INTERACTIVE_KEY
from ofmark.transforms.base import ObsidianTransform

TASK_LIST_ITEM_CLASS = "task-list-item"


class CheckboxTransform(ObsidianTransform):
    """Make task list checkboxes toggleable.

    Task items get class ``task-list-item`` and are flagged so the renderer
    emits an enabled ``checkbox-toggle`` input instead of a disabled one. The
    checkbox script persists the toggled state in the browser.
    """

    def visit_list_item(self, node: ListItem) -> Node:
        """Flag a task ListItem as interactive."""
        item = super().visit_list_item(node)
        if node.task_status is None:
            return item

        item.metadata[CHECKBOX_INTERACTIVE_KEY] = True
        return with_render_attrs(item, {"class": [TASK_LIST_ITEM_CLASS]})
