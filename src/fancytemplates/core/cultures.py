"""
Culture name catalogue.

Reference list of culture names (``en``, ``en-US``, ``sr-Latn-RS``) used to
decide which template subdirectories are language folders. The list is
derived from the standard library's locale alias table.
"""

import locale
import re
from functools import lru_cache
from typing import FrozenSet

_LANGUAGE_PATTERN = re.compile(r'^[A-Za-z]{2,3}$')
_REGION_PATTERN = re.compile(r'^([A-Za-z]{2}|\d{3})$')

# glibc locale modifiers that name a script
_SCRIPT_MODIFIERS = {
    'latin': 'Latn',
    'cyrillic': 'Cyrl',
    'devanagari': 'Deva',
    'arabic': 'Arab',
}

# Neutral script cultures with no region in the alias table
_EXTRA_CULTURES = ('zh-Hans', 'zh-Hant', 'sr-Latn', 'sr-Cyrl', 'uz-Latn', 'uz-Cyrl')


@lru_cache(maxsize=1)
def known_cultures() -> FrozenSet[str]:
    """Lower-cased set of every recognized culture name."""
    names = {name.lower() for name in _EXTRA_CULTURES}

    for alias in locale.locale_alias.values():
        base, _, modifier = alias.partition('@')
        base = base.split('.')[0]
        language, _, region = base.partition('_')

        if not _LANGUAGE_PATTERN.match(language):
            continue
        names.add(language.lower())

        if not region or not _REGION_PATTERN.match(region):
            continue
        names.add(f"{language}-{region}".lower())

        script = _SCRIPT_MODIFIERS.get(modifier.lower())
        if script:
            names.add(f"{language}-{script}-{region}".lower())

    return frozenset(names)


def is_recognized_culture(name: str) -> bool:
    """Case-insensitive membership test against the culture catalogue."""
    return bool(name) and name.lower() in known_cultures()


def is_language_code(name: str) -> bool:
    """A folder name is a language code if it is two characters long or a known culture."""
    return len(name) == 2 or is_recognized_culture(name)


def two_letter_language(name: str) -> str:
    """
    Primary language subtag of a culture name.

    Args:
        name: Culture name such as "en-US", "fr-CA" or "de"

    Returns:
        Lower-cased language subtag ("en", "fr", "de")
    """
    return name.strip().split('-', 1)[0].lower()
