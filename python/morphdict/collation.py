"""Russian collation for dictionary ordering.

Orders lines the way a Russian reader expects rather than by code point:
    - Letters follow the alphabet, with "ё" sharing the place of "е"
    - Accent and case variants sort next to their base letter
    - Punctuation < digits < Cyrillic < Latin < other scripts

Comparison is done in three levels, as in the Unicode collation algorithm:
base letters first, then diacritics, then case (lowercase first).
"""

import unicodedata
from functools import lru_cache

CYRILLIC_ALPHABET = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"

# Russian alphabet with the other Cyrillic letters slotted after their
# neighbours, as in the Unicode root order
CYRILLIC_ORDER = "абвгдђеєжзѕиійјклљмнњопрстћуфхцчџшщъыьэюя"

# Letters that share a base letter's primary weight: letter -> (base, secondary)
CYRILLIC_VARIANTS: dict[str, tuple[str, int]] = {
    "ё": ("е", 1),
    "ґ": ("г", 1),
    "ї": ("і", 1),
}

# Whitespace and punctuation in Unicode root order; unlisted symbols follow
SYMBOL_ORDER = (
    "\t \u00a0"
    "_-‐–—,;:!?.…"
    "'‘’\"“”«»"
    "()[]{}@*/\\&#%`^+<=>|~$"
)

SYMBOL_WEIGHTS = {char: position for position, char in enumerate(SYMBOL_ORDER)}

# Script groups, lowest sorts first
GROUP_SYMBOL = 0
GROUP_DIGIT = 1
GROUP_CYRILLIC = 2
GROUP_LATIN = 3
GROUP_OTHER = 4


def _build_weights() -> dict[str, tuple[int, int]]:
    weights: dict[str, tuple[int, int]] = {}
    for position, letter in enumerate(CYRILLIC_ORDER):
        weights[letter] = (position, 0)
    for letter, (base, secondary) in CYRILLIC_VARIANTS.items():
        weights[letter] = (weights[base][0], secondary)
    return weights


# letter -> (primary, secondary)
CYRILLIC_WEIGHTS = _build_weights()


def _is_cyrillic(char: str) -> bool:
    return unicodedata.name(char, "").startswith("CYRILLIC")


@lru_cache(maxsize=None)
def char_weights(char: str) -> tuple[tuple[int, int], int, int]:
    """Get collation weights for a single character.

    Args:
        char: Single character.

    Returns:
        Tuple of ((group, primary), secondary, tertiary).
    """
    lower = char.lower()
    tertiary = 0 if char == lower else 1

    # Direct table hit covers the alphabet, including ё and й
    if lower in CYRILLIC_WEIGHTS:
        primary, secondary = CYRILLIC_WEIGHTS[lower]
        return (GROUP_CYRILLIC, primary), secondary, tertiary

    # Fall back to Unicode decomposition: base letter + combining marks
    decomposed = unicodedata.normalize("NFD", lower)
    base = decomposed[0] if decomposed else lower
    marks = sum(1 for c in decomposed[1:] if unicodedata.combining(c))

    if base in CYRILLIC_WEIGHTS:
        primary, secondary = CYRILLIC_WEIGHTS[base]
        return (GROUP_CYRILLIC, primary), secondary + marks, tertiary

    if _is_cyrillic(base) and base.isalpha():
        # Cyrillic letters outside the table go after я
        return (GROUP_CYRILLIC, len(CYRILLIC_WEIGHTS) + ord(base)), marks, tertiary

    if base.isascii() and base.isalpha():
        return (GROUP_LATIN, ord(base)), marks, tertiary

    if base.isdigit():
        return (GROUP_DIGIT, unicodedata.digit(base, 0)), 0, 0

    if base.isalpha():
        return (GROUP_OTHER, ord(base)), marks, tertiary

    if base in SYMBOL_WEIGHTS:
        return (GROUP_SYMBOL, SYMBOL_WEIGHTS[base]), 0, 0
    return (GROUP_SYMBOL, len(SYMBOL_WEIGHTS) + ord(base)), 0, 0


def collation_key(text: str) -> tuple:
    """Build a sort key for a line.

    Args:
        text: Line to order.

    Returns:
        Key comparing primary weights first, then secondary, then
        tertiary, then the raw text.
    """
    primary = []
    secondary = []
    tertiary = []
    for char in text:
        p, s, t = char_weights(char)
        primary.append(p)
        secondary.append(s)
        tertiary.append(t)
    return (tuple(primary), tuple(secondary), tuple(tertiary), text)


def compare(a: str, b: str) -> int:
    """Compare two lines by Russian collation.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if the strings are equal.
    """
    key_a = collation_key(a)
    key_b = collation_key(b)
    return (key_a > key_b) - (key_a < key_b)


def collate(lines) -> list[str]:
    """Return lines sorted by Russian collation."""
    return sorted(lines, key=collation_key)
