"""
Token Substitution Engine

Replaces ``$TOKEN$`` markers in resolved content with caller-supplied values,
injecting the reserved DATETIME, DATE, and TIME tokens when they are absent.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional


class CommonTokens:
    """Reserved token names filled in automatically."""
    DATETIME = "DATETIME"
    DATE = "DATE"
    TIME = "TIME"


# Culture-neutral formats (month/day/year, 24-hour clock)
DATETIME_FORMAT = "%m/%d/%Y %H:%M:%S"
DATE_FORMAT = "%m/%d/%Y"
TIME_FORMAT = "%H:%M"


def token_marker(name: str) -> str:
    """Literal marker text for a token name: ``$NAME$``."""
    return f"${name.upper()}$"


def reserved_token_values(now: Optional[datetime] = None) -> Dict[str, str]:
    """
    Values for the reserved tokens at a given instant.

    Args:
        now: Instant to format (defaults to the current UTC time)

    Returns:
        Mapping of DATETIME, DATE, and TIME to formatted strings
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)

    return {
        CommonTokens.DATETIME: now.strftime(DATETIME_FORMAT),
        CommonTokens.DATE: now.strftime(DATE_FORMAT),
        CommonTokens.TIME: now.strftime(TIME_FORMAT),
    }


def replace_tokens(
    content: str,
    token_values: Optional[Mapping[str, Any]],
    now: Optional[datetime] = None
) -> str:
    """
    Replace template tokens with the supplied values.

    Tokens are applied one at a time in the mapping's insertion order, each
    replacing every ``$KEY$`` occurrence in the content produced so far. A
    value that itself contains a marker can therefore be replaced again by a
    later token. The reserved tokens are appended after the caller's tokens.

    Args:
        content: Content in which to find and replace tokens
        token_values: Token values keyed by name, or None to skip substitution
        now: Instant used for the reserved tokens (defaults to current UTC time)

    Returns:
        Content with tokens replaced
    """
    if token_values is None:
        return content

    # Work on a copy so the caller's mapping is left untouched
    values: Dict[str, Any] = dict(token_values)
    for name, value in reserved_token_values(now).items():
        if name not in values:
            values[name] = value

    result = content
    for name, value in values.items():
        result = result.replace(token_marker(name), '' if value is None else str(value))

    return result
