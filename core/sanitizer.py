"""
Sanitizer Module
Normalizes raw selector and at-rule text so regex matching downstream is reliable.
"""

import re

from .errors import InvalidInputError

_MULTI_SPACE = re.compile(r'\s{2,}')
_COLON_SPACING = re.compile(r'\s?:\s?')


def sanitize_at_rule(condition: str) -> str:
    """
    Lowercase an at-rule or condition and tighten its spacing.

    Only the first ``( `` and the first `` )`` are tightened; colons lose the
    whitespace on both sides everywhere.

    Raises:
        InvalidInputError: if ``condition`` is not a string
    """
    if not isinstance(condition, str):
        raise InvalidInputError('condition must be a string')

    sanitized = condition.lower()
    sanitized = _MULTI_SPACE.sub(' ', sanitized)
    sanitized = sanitized.replace('( ', '(', 1)
    sanitized = sanitized.replace(' )', ')', 1)
    sanitized = _COLON_SPACING.sub(':', sanitized)
    return sanitized.strip()


def sanitize_selector(selector: str) -> str:
    """Lowercase a selector, collapse runs of whitespace and trim it."""
    if not isinstance(selector, str):
        raise InvalidInputError('selector must be a string')

    return _MULTI_SPACE.sub(' ', selector.lower()).strip()
