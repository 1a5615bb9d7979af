"""Set operations over decoded dictionary lines.

Three operations back the add, delete and sort commands:
    - normalize: deduplicate and sort one collection
    - merge: add new lines to a collection, deduplicated and sorted
    - subtract: filter lines out of a collection, keeping its order

Lines are compared by exact string equality. Ordering is applied only
when the output sequence is built, through a collation key that
defaults to Russian collation and can be swapped for tests or other
languages.

Subtract deliberately neither sorts nor deduplicates; run normalize
afterwards when a clean dictionary is needed.
"""

from typing import Callable, Iterable

from .collation import collation_key
from .schema import MergeResult, NormalizeResult, SubtractResult

SortKey = Callable[[str], object]


def normalize(lines: list[str], key: SortKey = collation_key) -> NormalizeResult:
    """Deduplicate and sort a collection.

    Args:
        lines: Decoded lines.
        key: Sort key for ordering output.

    Returns:
        NormalizeResult with sorted unique words and the number of
        duplicates dropped.
    """
    word_set = set(lines)
    words = sorted(word_set, key=key)
    return NormalizeResult(
        words=words,
        duplicates_removed=len(lines) - len(words),
        total=len(words),
    )


def merge(
    primary: Iterable[str],
    secondary: Iterable[str],
    key: SortKey = collation_key,
) -> MergeResult:
    """Add lines from secondary to primary.

    Only the first occurrence of a line not already in primary counts
    as added.

    Args:
        primary: Existing dictionary lines.
        secondary: New lines.
        key: Sort key for ordering output.

    Returns:
        MergeResult with sorted union, added count and total.
    """
    word_set = set(primary)
    added = 0
    for word in secondary:
        if word not in word_set:
            word_set.add(word)
            added += 1

    words = sorted(word_set, key=key)
    return MergeResult(words=words, added=added, total=len(words))


def subtract(primary: list[str], rejected: Iterable[str]) -> SubtractResult:
    """Remove every line found in rejected from primary.

    Args:
        primary: Existing dictionary lines.
        rejected: Lines to remove.

    Returns:
        SubtractResult with remaining lines in original order.
    """
    reject_set = set(rejected)
    words = [word for word in primary if word not in reject_set]
    return SubtractResult(
        words=words,
        removed=len(primary) - len(words),
        total=len(words),
    )
