"""Encoding detection for dictionary files.

Only two encodings are recognised: UTF-8 and Windows-1251. A buffer is
accepted as one of them when it decodes cleanly and contains real
Cyrillic letters. Anything else is reported as unknown.

UTF-8 is tried first: Windows-1251 text with Cyrillic letters is almost
never valid UTF-8, while UTF-8 Cyrillic always decodes as some (wrong)
Windows-1251 text.
"""

import re
from pathlib import Path

from .schema import EncodingLabel

# Basic Russian range А..я (U+0410..U+044F)
CYRILLIC_PATTERN = re.compile(r"[А-Яа-я]")
REPLACEMENT_CHAR = "\ufffd"

# Tried in order, first match wins
CANDIDATES: list[EncodingLabel] = [
    EncodingLabel.UTF8,
    EncodingLabel.WINDOWS1251,
]


def looks_cyrillic(text: str) -> bool:
    """Check decoded text for Cyrillic letters and no replacement marks.

    Args:
        text: Decoded text.

    Returns:
        True if text has at least one Cyrillic letter and no U+FFFD.
    """
    if REPLACEMENT_CHAR in text:
        return False
    return CYRILLIC_PATTERN.search(text) is not None


def classify(buffer: bytes) -> EncodingLabel:
    """Classify a raw byte buffer as one of the supported encodings.

    Never raises; falls back to EncodingLabel.UNKNOWN.

    Args:
        buffer: Raw file content.

    Returns:
        UTF8, WINDOWS1251 or UNKNOWN.
    """
    for label in CANDIDATES:
        # Undecodable bytes become U+FFFD and fail the check below
        text = bytes(buffer).decode(label.codec, errors="replace")
        if looks_cyrillic(text):
            return label
    return EncodingLabel.UNKNOWN


def detect_encoding(filepath: Path | str) -> EncodingLabel:
    """Read a file and classify its content.

    Args:
        filepath: Path to the file.

    Returns:
        Detected EncodingLabel.

    Raises:
        OSError: If the file cannot be read.
    """
    return classify(Path(filepath).read_bytes())
