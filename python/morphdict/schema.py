"""Data structures for morphdict.

Core concept:
    - A dictionary file is raw bytes in one of two encodings
    - Decoding yields a LineCollection: non-blank lines, terminators removed
    - Set operations return result records carrying the output and counts

Example:
    b"\\xea\\xee\\xf2\\n"  (windows-1251)  ->  ["кот"]
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EncodingLabel(Enum):
    """Encoding identifier returned by classification."""

    UTF8 = "utf-8"
    WINDOWS1251 = "windows-1251"
    UNKNOWN = "unknown"

    @property
    def is_known(self) -> bool:
        """True if the label can be used to decode and encode."""
        return self is not EncodingLabel.UNKNOWN

    @property
    def codec(self) -> Optional[str]:
        """Python codec name used for encoding, or None for UNKNOWN."""
        return _CODECS.get(self)

    @property
    def read_codec(self) -> Optional[str]:
        """Codec used for decoding (strips a UTF-8 byte order mark)."""
        if self is EncodingLabel.UTF8:
            return "utf-8-sig"
        return self.codec

    def __str__(self) -> str:
        return self.value


_CODECS = {
    EncodingLabel.UTF8: "utf-8",
    EncodingLabel.WINDOWS1251: "cp1251",
}


@dataclass
class NormalizeResult:
    """Result of deduplicating and sorting one collection."""

    words: list[str] = field(default_factory=list)
    duplicates_removed: int = 0
    total: int = 0

    def __repr__(self) -> str:
        return (
            f"NormalizeResult({self.total} words, "
            f"{self.duplicates_removed} dupes removed)"
        )


@dataclass
class MergeResult:
    """Result of adding new words to a dictionary."""

    words: list[str] = field(default_factory=list)
    added: int = 0
    total: int = 0

    def __repr__(self) -> str:
        return f"MergeResult(+{self.added}, {self.total} words)"


@dataclass
class SubtractResult:
    """Result of removing words from a dictionary."""

    words: list[str] = field(default_factory=list)
    removed: int = 0
    total: int = 0

    def __repr__(self) -> str:
        return f"SubtractResult(-{self.removed}, {self.total} words)"
