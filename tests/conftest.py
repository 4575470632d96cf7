"""
Shared Test Configuration and Fixtures

Builds template directory trees in temporary folders and isolates tests
from configuration files and environment variables on the host.
"""

from pathlib import Path
from typing import Dict

import pytest

from fancytemplates.core.cache import TemplateCache
from fancytemplates.core.config import ProviderConfig
from fancytemplates.provider import FileTemplateProvider


THEMED_FILES = {
    'themes/default.txt': "Header\n$BODY$\nFooter",
    'themes/default.html': "<html><body>$BODY$</body></html>",
    'themes/double.txt': "$BODY$ | $BODY$",
    'themes/blank.txt': "   \n",
    'themes/nomarker.txt': "Static theme text",
    'en/greet.txt': "Hello $NAME$",
    'en/greet.html': "<p>Hello $NAME$</p>",
    'en/stamp.txt': "Sent $DATE$ at $TIME$ ($DATETIME$)",
    'en/data.json': '{"name": "$NAME$"}',
    'en/feed.xml': "<feed>$NAME$</feed>",
    'en/notes.md': "# Notes for $NAME$",
    'en/ignored.csv': "name,$NAME$",
    'fr/greet.txt': "Bonjour $NAME$",
    'en-US/greet.txt': "Howdy $NAME$",
    'junkdir/greet.txt': "Never loaded",
}

PLAIN_FILES = {
    'en/greet.txt': "Hello $NAME$",
    'en/stamp.txt': "$DATE$|$TIME$|$DATETIME$",
    'de/greet.txt': "Hallo $NAME$",
}


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Write a mapping of relative paths to file contents under root."""
    root.mkdir(parents=True, exist_ok=True)
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
    return root


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch):
    """Keep host config files and FANCYTEMPLATES_* variables out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("FANCYTEMPLATES_TEMPLATE_PATH", raising=False)
    monkeypatch.delenv("FANCYTEMPLATES_DEFAULT_LANGUAGE", raising=False)
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def themed_root(tmp_path: Path) -> Path:
    """Template root with themes, several languages, and a junk folder."""
    return write_tree(tmp_path / "themed", THEMED_FILES)


@pytest.fixture
def plain_root(tmp_path: Path) -> Path:
    """Template root without a themes folder."""
    return write_tree(tmp_path / "plain", PLAIN_FILES)


@pytest.fixture
def cache() -> TemplateCache:
    """Fresh, unpopulated template cache."""
    return TemplateCache()


@pytest.fixture
def themed_provider(themed_root: Path, cache: TemplateCache) -> FileTemplateProvider:
    """Provider over the themed template root with its own cache."""
    return FileTemplateProvider(ProviderConfig(template_path=themed_root), cache=cache)


@pytest.fixture
def plain_provider(plain_root: Path) -> FileTemplateProvider:
    """Provider over the unthemed template root with its own cache."""
    return FileTemplateProvider(ProviderConfig(template_path=plain_root), cache=TemplateCache())
