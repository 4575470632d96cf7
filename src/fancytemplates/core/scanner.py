"""
Template Store Scanner

Walks a template root directory once and fills a TemplateCache:

    <root>/
      themes/             optional, flat files keyed by file name
      <lang>/             two-letter code or recognized culture name
        <key>.txt|.html|.json|.xml|.md
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from fancytemplates.core.cache import TemplateCache
from fancytemplates.core.content_types import REGISTRY
from fancytemplates.core.cultures import is_language_code
from fancytemplates.core.exceptions import ConfigurationError, ErrorCode, ErrorContext
from fancytemplates.core.models import THEMES_DIRECTORY_NAME, Template, build_lookup_key


logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Summary of a single scan."""
    root: Path
    skipped: bool = False
    languages: List[str] = field(default_factory=list)
    skipped_directories: List[str] = field(default_factory=list)
    templates_added: int = 0
    themes_added: int = 0
    files_read: int = 0


def read_file(path: Path) -> str:
    """Read the full text of a template or theme file."""
    return path.read_text(encoding='utf-8')


class TemplateStoreScanner:
    """
    One-time directory scan that populates a TemplateCache.

    The scan is skipped entirely when the cache is already populated; in that
    case the root directory is not even checked for existence.
    """

    def __init__(self, root: Union[str, Path], cache: TemplateCache):
        """
        Args:
            root: Template root directory
            cache: Cache to populate
        """
        self.root = Path(root)
        self.cache = cache

    def scan(self) -> ScanResult:
        """
        Populate the cache from the root directory.

        Returns:
            ScanResult describing what was loaded

        Raises:
            ConfigurationError: If the root directory does not exist
            OSError: If a template or theme file cannot be read
        """
        result = ScanResult(root=self.root)

        if self._already_loaded():
            result.skipped = True
            return result

        with self.cache.populating():
            # Another scanner may have finished while we waited on the lock
            if self._already_loaded():
                result.skipped = True
                return result

            if not self.root.is_dir():
                raise ConfigurationError(
                    f"The template path '{self.root}' was not found.",
                    error_code=ErrorCode.CONFIG_DIRECTORY_NOT_FOUND,
                    config_key='template_path',
                    config_value=str(self.root),
                    context=ErrorContext(operation='scan', file_path=str(self.root))
                )

            if self.cache.theme_count == 0:
                self._scan_themes(result)

            if self.cache.template_count == 0:
                self._scan_languages(result)

            self.cache.stats.scans += 1

        logger.info(
            f"Loaded {result.templates_added} templates in {len(result.languages)} "
            f"languages and {result.themes_added} themes from {self.root}"
        )
        return result

    def _already_loaded(self) -> bool:
        return self.cache.is_populated or (
            self.cache.template_count > 0 and self.cache.theme_count > 0
        )

    def _scan_themes(self, result: ScanResult) -> None:
        themes_dir = self.root / THEMES_DIRECTORY_NAME
        if not themes_dir.is_dir():
            logger.debug(f"No themes directory in {self.root}")
            return

        for theme_file in sorted(p for p in themes_dir.iterdir() if p.is_file()):
            content = self._read(theme_file, result)
            if self.cache.add_theme(theme_file.name, content):
                result.themes_added += 1

    def _scan_languages(self, result: ScanResult) -> None:
        for directory in sorted(p for p in self.root.iterdir() if p.is_dir()):
            language_code = directory.name

            if not is_language_code(language_code):
                logger.debug(f"Skipping directory {directory.name}: not a language code")
                result.skipped_directories.append(language_code)
                continue

            result.languages.append(language_code)
            self._scan_language(directory, language_code, result)

    def _scan_language(self, directory: Path, language_code: str, result: ScanResult) -> None:
        files = sorted(p for p in directory.iterdir() if p.is_file())

        for extension in REGISTRY.scanned_extensions():
            content_type = REGISTRY.type_for_extension(extension)
            mime = REGISTRY.mime_for(content_type)

            for template_file in files:
                if template_file.suffix.lower() != extension:
                    continue

                template = Template(
                    language_code=language_code,
                    content_type=mime,
                    content=self._read(template_file, result)
                )
                lookup_key = build_lookup_key(language_code, template_file.stem, content_type)
                if self.cache.add_template(lookup_key, template):
                    result.templates_added += 1
                    logger.debug(f"Loaded template {lookup_key} from {template_file}")

    def _read(self, path: Path, result: ScanResult) -> str:
        content = read_file(path)
        result.files_read += 1
        self.cache.record_file_read()
        return content
