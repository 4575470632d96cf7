"""
Template Cache

Holds the template and theme stores for the lifetime of a provider (or of
the process, for the shared instance). Entries are only ever added with
insert-if-absent semantics and are never updated, evicted, or expired.
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from fancytemplates.core.models import Template


logger = logging.getLogger(__name__)


class CacheState(Enum):
    """Population state of a TemplateCache."""
    UNINITIALIZED = "uninitialized"
    POPULATED = "populated"


@dataclass
class CacheStats:
    """Cache population statistics."""
    scans: int = 0
    files_read: int = 0
    duplicate_templates: int = 0
    duplicate_themes: int = 0


class TemplateCache:
    """
    Two independent stores populated once and read many times.

    - templates: ``"{lang}:{key}:{ContentType}" -> Template``
    - themes: ``"{themeName}{extension}" -> raw theme text``

    Population is serialized through ``populating()``; once a scan has
    finished the cache is marked POPULATED and later scanners skip it.
    Reads take no lock because nothing mutates the stores after population.
    """

    def __init__(self):
        self._templates: Dict[str, Template] = {}
        self._themes: Dict[str, str] = {}
        self._state = CacheState.UNINITIALIZED
        self._lock = threading.RLock()
        self.stats = CacheStats()

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def is_populated(self) -> bool:
        return self._state is CacheState.POPULATED

    @property
    def templates(self) -> Mapping[str, Template]:
        """Read-only view of the template store."""
        return MappingProxyType(self._templates)

    @property
    def themes(self) -> Mapping[str, str]:
        """Read-only view of the theme store."""
        return MappingProxyType(self._themes)

    @property
    def template_count(self) -> int:
        return len(self._templates)

    @property
    def theme_count(self) -> int:
        return len(self._themes)

    @contextmanager
    def populating(self) -> Iterator["TemplateCache"]:
        """
        Hold the population lock for the duration of a scan.

        Concurrent scanners block here until the first one finishes. The
        cache is marked POPULATED only when the block exits without an
        exception; on failure both stores are emptied so the next scan
        starts from scratch.
        """
        with self._lock:
            try:
                yield self
            except BaseException:
                logger.debug(
                    f"Population failed, discarding {len(self._templates)} templates "
                    f"and {len(self._themes)} themes"
                )
                self._templates.clear()
                self._themes.clear()
                raise
            self._state = CacheState.POPULATED

    def add_template(self, lookup_key: str, template: Template) -> bool:
        """
        Insert a template unless the key is already present.

        Returns:
            True if the template was inserted, False if the key existed
        """
        with self._lock:
            if lookup_key in self._templates:
                self.stats.duplicate_templates += 1
                logger.debug(f"Ignoring duplicate template key: {lookup_key}")
                return False
            self._templates[lookup_key] = template
            return True

    def add_theme(self, theme_key: str, content: str) -> bool:
        """
        Insert a theme unless the key is already present.

        Returns:
            True if the theme was inserted, False if the key existed
        """
        with self._lock:
            if theme_key in self._themes:
                self.stats.duplicate_themes += 1
                return False
            self._themes[theme_key] = content
            return True

    def get_template(self, lookup_key: str) -> Optional[Template]:
        return self._templates.get(lookup_key)

    def get_theme(self, theme_key: str) -> Optional[str]:
        return self._themes.get(theme_key)

    def template_keys(self) -> List[str]:
        """Sorted lookup keys of every cached template."""
        return sorted(self._templates)

    def theme_names(self) -> List[str]:
        """Sorted file names of every cached theme."""
        return sorted(self._themes)

    def record_file_read(self) -> None:
        self.stats.files_read += 1


# Process-wide cache shared by providers created without an explicit cache
_shared_cache = TemplateCache()


def get_shared_cache() -> TemplateCache:
    """Get the process-wide template cache instance."""
    return _shared_cache
