"""Wire tag names <-> canonical entity type identifiers."""

from __future__ import annotations

import re

# Canonical identifiers separate namespace segments with a dot (ns/sub_type -> Ns.SubType).
NAMESPACE_SEPARATOR = "."

_LEADING_WORD = re.compile(r"^[a-z\d]*")
_SEPARATED_WORD = re.compile(r"(?:_|(/))([a-z\d]*)", re.IGNORECASE)
_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def resolve_name(term: str) -> str:
    """Camelize a lower-case, underscored wire tag into a type identifier.

    ``two_words`` becomes ``TwoWords`` and ``ns/sub_type`` becomes
    ``Ns.SubType``. Consecutive separators collapse since empty words
    contribute no text.

    Args:
        term: Wire tag name (lower-case, ``_`` and ``/`` separated).

    Returns:
        Canonical type identifier used for registry lookups.
    """
    camelized = _LEADING_WORD.sub(lambda m: m.group(0).capitalize(), term, count=1)
    return _SEPARATED_WORD.sub(_camelize_word, camelized)


def _camelize_word(match: re.Match[str]) -> str:
    word = match.group(2)
    if not word:
        return ""
    prefix = NAMESPACE_SEPARATOR if match.group(1) else ""
    return prefix + word.capitalize()


def underscore(identifier: str) -> str:
    """Inverse of resolve_name: ``StatusMessage`` -> ``status_message``.

    Args:
        identifier: Class name or dotted canonical identifier.

    Returns:
        Lower-case wire tag name.
    """
    word = identifier.replace(NAMESPACE_SEPARATOR, "/")
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.lower()
