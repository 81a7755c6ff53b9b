#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/ofmark/transforms/registry.py
"""Stage registry for the dialect transform pipeline.

The registry holds the built-in stages plus any stage published by another
package under the ``ofmark.stages`` entry point group. The pipeline asks it
for the stages enabled by a given options object, in execution order.

Examples
--------
List the registered stages:

    >>> from ofmark.transforms import stage_registry
    >>> stage_registry.list_stages()
    ['block-references', 'callouts', 'checkbox', ...]

Stages enabled by default, in order:

    >>> [m.name for m in stage_registry.enabled_stages(ObsidianOptions())]
    ['wikilinks', 'highlights', 'tags', 'video-embeds', 'callouts', 'mermaid', ...]

"""

from __future__ import annotations

import importlib.metadata
import logging
import threading
from typing import TYPE_CHECKING, Optional

from ofmark.options import ObsidianOptions

if TYPE_CHECKING:
    from ofmark.transforms.metadata import StageMetadata

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "ofmark.stages"


class StageRegistry:
    """Registry for managing transform stages.

    This singleton class provides a central registry for all stages. Built-in
    stages and entry point plugins are loaded on first access.

    """

    _instance: Optional[StageRegistry] = None
    _stages: dict[str, StageMetadata]
    _initialized: bool
    _lock: threading.RLock

    def __new__(cls) -> StageRegistry:
        """Create or return singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._stages = {}
            cls._instance._initialized = False
            cls._instance._lock = threading.RLock()
        return cls._instance

    def _ensure_initialized(self) -> None:
        """Register built-in stages and run plugin discovery once."""
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            from ofmark.transforms._builtin_metadata import BUILTIN_STAGES

            for metadata in BUILTIN_STAGES:
                self._stages.setdefault(metadata.name, metadata)
            self.discover_plugins()
            # Readers skip the lock once this is set, so it must come last
            self._initialized = True

    def register(self, metadata: StageMetadata) -> None:
        """Register a stage with its metadata.

        If a stage with the same name is already registered, it is overwritten
        and a warning is logged.
        """
        self._ensure_initialized()
        self._add(metadata)

    def _add(self, metadata: StageMetadata) -> None:
        with self._lock:
            if metadata.name in self._stages:
                logger.warning(f"Stage '{metadata.name}' already registered, overwriting")
            self._stages[metadata.name] = metadata
        logger.debug(f"Registered stage: {metadata.name}")

    def unregister(self, name: str) -> bool:
        """Unregister a stage, returning False if it was not registered."""
        self._ensure_initialized()
        if name in self._stages:
            del self._stages[name]
            logger.debug(f"Unregistered stage: {name}")
            return True
        return False

    def get_metadata(self, name: str) -> StageMetadata:
        """Get metadata for a stage.

        Raises
        ------
        KeyError
            If the stage is not registered

        """
        self._ensure_initialized()

        if name not in self._stages:
            raise KeyError(f"Stage '{name}' not registered")

        return self._stages[name]

    def has_stage(self, name: str) -> bool:
        """Check if a stage is registered."""
        self._ensure_initialized()
        return name in self._stages

    def list_stages(self) -> list[str]:
        """List all registered stage names, sorted alphabetically."""
        self._ensure_initialized()
        return sorted(self._stages.keys())

    def enabled_stages(self, options: ObsidianOptions) -> list[StageMetadata]:
        """Return the stages enabled by ``options`` in execution order.

        Stages are ordered by priority; ties keep registration order.
        """
        self._ensure_initialized()
        enabled = [metadata for metadata in self._stages.values() if metadata.is_enabled(options)]
        return sorted(enabled, key=lambda metadata: metadata.priority)

    def discover_plugins(self) -> int:
        """Discover and register stages from the ``ofmark.stages`` entry point group.

        Returns
        -------
        int
            Number of stages discovered and registered

        """
        from ofmark.transforms.metadata import StageMetadata

        discovered_count = 0
        for ep in importlib.metadata.entry_points().select(group=ENTRY_POINT_GROUP):
            try:
                metadata = ep.load()
            except (ImportError, AttributeError) as e:
                logger.warning(f"Failed to load stage entry point '{ep.name}': {e}")
                continue

            if not isinstance(metadata, StageMetadata):
                logger.warning(f"Entry point '{ep.name}' did not return StageMetadata, skipping")
                continue

            self._add(metadata)
            discovered_count += 1
            logger.debug(f"Discovered stage from entry point: {ep.name}")

        if discovered_count:
            logger.info(f"Discovered {discovered_count} stage(s) from entry points")
        return discovered_count

    def clear(self) -> None:
        """Clear all registered stages; built-ins are reloaded on next access.

        This is primarily useful for testing.
        """
        with self._lock:
            self._initialized = False
            self._stages.clear()
        logger.debug("Cleared stage registry")


# Global registry instance (preferred access pattern)
stage_registry = StageRegistry()

__all__ = [
    "ENTRY_POINT_GROUP",
    "StageRegistry",
    "stage_registry",
]
