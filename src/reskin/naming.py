"""Derive replacement names from a repository directory name."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from .schema import ReplacementPair

__all__ = [
    "DEFAULT_ACRONYMS",
    "derive_names",
    "derive_replacement",
    "parse_acronyms",
    "title_word",
]


DEFAULT_ACRONYMS: frozenset[str] = frozenset(
    {"ai", "api", "http", "https", "xml", "json", "sql", "id", "ip"}
)
_WORD_SEPARATOR = "-"


def parse_acronyms(value: str | Iterable[str] | None) -> frozenset[str]:
    """Return the acronym set described by ``value``.

    ``value`` is either a comma separated string, as found in the
    ``ACRONYM_LIST`` environment variable, or an iterable of words. Entries are
    stripped and lowercased; empty entries are dropped. When nothing usable is
    left the :data:`DEFAULT_ACRONYMS` are returned.
    """

    if value is None:
        return DEFAULT_ACRONYMS
    if isinstance(value, str):
        value = value.split(",")

    words = frozenset(word.strip().lower() for word in value if word.strip())
    return words or DEFAULT_ACRONYMS


def title_word(word: str, acronyms: AbstractSet[str] = DEFAULT_ACRONYMS) -> str:
    """Capitalise a single word, upper-casing it entirely if it is an acronym.

    Only the first character is forced to upper case; the remainder of a
    non-acronym word is preserved as written.
    """

    if word.lower() in acronyms:
        return word.upper()
    return word[:1].upper() + word[1:]


def derive_names(basename: str, acronyms: AbstractSet[str] = DEFAULT_ACRONYMS) -> tuple[str, str]:
    """Return ``(new_lower, new_title)`` for a hyphen separated ``basename``.

    >>> derive_names("my-api-tool")
    ('my-api-tool', 'My API Tool')
    """

    words = [word for word in basename.split(_WORD_SEPARATOR) if word]
    title = " ".join(title_word(word, acronyms) for word in words)
    return basename, title


def derive_replacement(basename: str, acronyms: AbstractSet[str] = DEFAULT_ACRONYMS) -> ReplacementPair:
    """Build the :class:`ReplacementPair` used for a whole run."""

    new_lower, new_title = derive_names(basename, acronyms)
    return ReplacementPair(new_lower=new_lower, new_title=new_title)
