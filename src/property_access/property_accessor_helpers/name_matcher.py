"""Property name comparison under a case-sensitivity policy."""

from __future__ import annotations

import unicodedata


def _canonical(name: str) -> str:
    return unicodedata.normalize("NFC", name)


def _folded(name: str) -> str:
    # casefold output is not guaranteed to be NFC
    return unicodedata.normalize("NFC", _canonical(name).casefold())


def names_match(candidate: str, query: str, case_sensitive: bool) -> bool:
    """Compare two property names.

    Canonically equivalent spellings always compare equal. Case-insensitive
    comparison uses full Unicode case folding rather than an ASCII fold, so
    ``"STRASSE"`` matches ``"straße"``.
    """
    if candidate == query:
        return True
    if case_sensitive:
        return _canonical(candidate) == _canonical(query)
    return _folded(candidate) == _folded(query)


class NameMatcher:
    """Matches candidate names against one query with a fixed policy."""

    def __init__(self, query: str, case_sensitive: bool) -> None:
        self.query = query
        self.case_sensitive = case_sensitive
        self._key = _canonical(query) if case_sensitive else _folded(query)

    def matches(self, candidate: str) -> bool:
        if candidate == self.query:
            return True
        if self.case_sensitive:
            return _canonical(candidate) == self._key
        return _folded(candidate) == self._key


__all__ = ["NameMatcher", "names_match"]
