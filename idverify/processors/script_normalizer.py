"""
Latin/Cyrillic script conversion and canonical comparison forms.

Bosnian and Serbian cards print the same word in both alphabets. Matching is
done on a canonical form: lower-cased, transliterated to Latin, with
diacritics folded and punctuation removed.
"""

from __future__ import annotations

import re
import unicodedata

from idverify.core.const import (
    CYRILLIC_TO_LATIN_MAPPING,
    DIACRITIC_FOLDING,
    LATIN_TO_CYRILLIC_MAPPING,
)

_CYR_TO_LATIN = str.maketrans(CYRILLIC_TO_LATIN_MAPPING)
_DIACRITICS = str.maketrans(
    {
        **DIACRITIC_FOLDING,
        **{k.upper(): v.upper() for k, v in DIACRITIC_FOLDING.items()},
    }
)

# Longest keys first so digraphs (lj, nj, dž) are consumed before single letters
_LATIN_TOKEN = re.compile(
    "|".join(
        re.escape(key)
        for key in sorted(LATIN_TO_CYRILLIC_MAPPING, key=len, reverse=True)
    )
)
_NON_ALNUM = re.compile(r"[^\w\s]|_")
_NON_ALNUM_TO_SPACE = re.compile(r"[\W_]+")
_WS = re.compile(r"\s+")


def latin_to_cyrillic(text: str | None) -> str:
    """Convert Latin script text to Serbian Cyrillic. Display only."""
    if not text:
        return ""
    return _LATIN_TOKEN.sub(lambda m: LATIN_TO_CYRILLIC_MAPPING[m.group(0)], text)


def cyrillic_to_latin(text: str | None) -> str:
    """Convert Serbian Cyrillic text to Latin script. Display only."""
    if not text:
        return ""
    return text.translate(_CYR_TO_LATIN)


def strip_diacritics(text: str) -> str:
    text = text.translate(_DIACRITICS)
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _fold(text: str) -> str:
    return strip_diacritics(cyrillic_to_latin(text.lower()))


def to_canonical(text: str | None) -> str:
    """
    Canonical comparison form of any string.

    Lower-cased, Cyrillic transliterated to Latin, diacritics removed,
    non-alphanumerics dropped and whitespace collapsed. Total and idempotent.
    """
    if not text:
        return ""
    folded = _NON_ALNUM.sub("", _fold(text))
    return _WS.sub(" ", folded).strip()


def to_search_form(text: str | None) -> str:
    """
    Like ``to_canonical`` but punctuation becomes a word break, so
    ``"PREZIME/SURNAME"`` yields ``"prezime surname"``. Used for whole-word
    token lookups.
    """
    if not text:
        return ""
    spaced = _NON_ALNUM_TO_SPACE.sub(" ", _fold(text))
    return _WS.sub(" ", spaced).strip()


def contains_token(text: str | None, tokens: tuple[str, ...] | list[str]) -> bool:
    """True if any token (word or phrase) occurs in ``text`` as whole words, in either script."""
    haystack = f" {to_search_form(text)} "
    if haystack.isspace():
        return False
    for token in tokens:
        needle = to_search_form(token)
        if needle and f" {needle} " in haystack:
            return True
    return False


def strings_match(a: str | None, b: str | None) -> bool:
    """
    Script-, case- and diacritic-insensitive equality.

    Values whose canonical forms are both empty (``None``, ``""``, ``"!!!"``)
    are equal; the name comparison modes treat empty values separately.
    """
    return to_canonical(a) == to_canonical(b)
