#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/resources.py
"""Client-side assets required by the rendered output.

Callouts need the fold toggle script, interactive checkboxes need the
checkbox script, and mermaid diagrams need the diagram loader plus its
stylesheet. Assets ship as package data under ``ofmark/static`` and are
returned inline so a host can embed them into the page.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from typing import Literal, Optional

from ofmark.constants import (
    CALLOUT_SCRIPT,
    CHECKBOX_SCRIPT,
    MERMAID_SCRIPT,
    MERMAID_STYLESHEET,
    STATIC_PACKAGE,
    LoadTime,
)
from ofmark.exceptions import FileError
from ofmark.options import ObsidianOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JSResource:
    """An inline script to load with the page.

    Parameters
    ----------
    name : str
        Asset file name
    script : str
        Script source
    load_time : {'beforeDOMReady', 'afterDOMReady'}, default = 'afterDOMReady'
        When the host should run the script
    module_type : {'script', 'module'}, default = 'script'
        ``module`` scripts must be loaded with ``type="module"``

    """

    name: str
    script: str
    load_time: LoadTime = "afterDOMReady"
    module_type: Literal["script", "module"] = "script"

    def to_html(self) -> str:
        """Render the resource as a ``<script>`` element."""
        type_attr = ' type="module"' if self.module_type == "module" else ""
        return f"<script{type_attr}>{self.script}</script>"


@dataclass(frozen=True)
class CSSResource:
    """An inline stylesheet."""

    name: str
    content: str

    def to_html(self) -> str:
        """Render the resource as a ``<style>`` element."""
        return f"<style>{self.content}</style>"


@dataclass(frozen=True)
class ExternalResources:
    """Scripts and stylesheets required by a set of options."""

    js: list[JSResource] = field(default_factory=list)
    css: list[CSSResource] = field(default_factory=list)

    def to_html(self) -> str:
        """Render every resource, stylesheets first."""
        return "\n".join([*(c.to_html() for c in self.css), *(j.to_html() for j in self.js)])


@lru_cache(maxsize=None)
def load_static_asset(name: str) -> str:
    """Read a bundled asset by file name.

    Raises
    ------
    FileError
        If the asset is missing from the installed package

    """
    try:
        return resources.files(STATIC_PACKAGE).joinpath(name).read_text(encoding="utf-8")
    except (OSError, ModuleNotFoundError) as e:
        raise FileError(f"Bundled asset not found: {name}", file_path=name, original_error=e) from e


def external_resources(options: Optional[ObsidianOptions] = None) -> ExternalResources:
    """Return the client assets required by ``options``.

    Examples
    --------
    >>> [js.name for js in external_resources(ObsidianOptions(enable_checkbox=True)).js]
    ['checkbox.inline.js', 'callout.inline.js', 'mermaid.inline.js']

    """
    options = options or ObsidianOptions()
    js: list[JSResource] = []
    css: list[CSSResource] = []

    if options.enable_checkbox:
        js.append(JSResource(name=CHECKBOX_SCRIPT, script=load_static_asset(CHECKBOX_SCRIPT)))

    if options.callouts:
        js.append(JSResource(name=CALLOUT_SCRIPT, script=load_static_asset(CALLOUT_SCRIPT)))

    if options.mermaid:
        js.append(JSResource(name=MERMAID_SCRIPT, script=load_static_asset(MERMAID_SCRIPT), module_type="module"))
        css.append(CSSResource(name=MERMAID_STYLESHEET, content=load_static_asset(MERMAID_STYLESHEET)))

    logger.debug("Resolved %d script(s) and %d stylesheet(s)", len(js), len(css))
    return ExternalResources(js=js, css=css)
