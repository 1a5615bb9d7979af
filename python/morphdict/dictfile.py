"""Dictionary file reading and writing.

Simple format: one word per line, UTF-8 or Windows-1251.
Empty and whitespace-only lines are skipped on read.

Writes are all-or-nothing: the whole file is encoded in memory, written
to a temporary file next to the target and moved over it, so a failed
command never leaves a half-written dictionary behind.
"""

import logging
import os
import re
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from .encoding import classify
from .errors import UnencodableLineError, UnknownEncodingError
from .schema import EncodingLabel

logger = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class DictionaryFile:
    """A dictionary read from disk together with its detected encoding."""

    path: Path
    encoding: EncodingLabel
    lines: list[str] = field(default_factory=list)

    def require_known(self) -> "DictionaryFile":
        """Raise UnknownEncodingError unless the encoding was detected."""
        if not self.encoding.is_known:
            raise UnknownEncodingError(str(self.path))
        return self

    def __repr__(self) -> str:
        return f"DictionaryFile({self.path.name}: {self.encoding}, {len(self.lines)} lines)"


def read_raw(filepath: Path | str) -> bytes:
    """Read raw file content.

    Raises:
        OSError: If the file is missing or unreadable.
    """
    return Path(filepath).read_bytes()


def split_lines(text: str) -> list[str]:
    """Split text on any line terminator, dropping blank lines.

    Args:
        text: Decoded file content.

    Returns:
        Lines without terminators; surrounding spaces of non-blank
        lines are kept.
    """
    return [line for line in LINE_BREAK.split(text) if line.strip()]


def decode_lines(buffer: bytes, encoding: EncodingLabel) -> list[str]:
    """Decode a raw buffer into a LineCollection.

    Args:
        buffer: Raw file content.
        encoding: Encoding detected for the buffer.

    Returns:
        Non-blank lines.

    Raises:
        UnknownEncodingError: If encoding is UNKNOWN.
    """
    if not encoding.is_known:
        raise UnknownEncodingError()
    return split_lines(buffer.decode(encoding.read_codec, errors="replace"))


def read_dictionary(filepath: Path | str) -> DictionaryFile:
    """Read a file, detect its encoding and decode it.

    Encoding is detected from the same bytes that get decoded. When
    detection fails the returned lines are empty; check `encoding` or
    call `require_known()` before using them.

    Raises:
        OSError: If the file cannot be read.
    """
    filepath = Path(filepath)
    buffer = read_raw(filepath)
    encoding = classify(buffer)
    logger.debug("Detected %s for %s (%d bytes)", encoding, filepath, len(buffer))

    if not encoding.is_known:
        return DictionaryFile(path=filepath, encoding=encoding)

    lines = decode_lines(buffer, encoding)
    logger.debug("Read %d lines from %s", len(lines), filepath)
    return DictionaryFile(path=filepath, encoding=encoding, lines=lines)


def encode_lines(
    lines: list[str],
    encoding: EncodingLabel,
    newline: str = "\n",
    errors: str = "strict",
) -> bytes:
    """Encode lines, appending a terminator after each.

    Args:
        lines: Lines to encode.
        encoding: Target encoding.
        newline: Line terminator.
        errors: "strict" to raise on unencodable characters, "replace"
            to substitute "?".

    Returns:
        Encoded file content.

    Raises:
        UnknownEncodingError: If encoding is UNKNOWN.
        UnencodableLineError: If a line cannot be encoded and errors is
            "strict".
    """
    if not encoding.is_known:
        raise UnknownEncodingError()

    chunks = []
    for line_num, line in enumerate(lines, start=1):
        try:
            chunks.append((line + newline).encode(encoding.codec, errors=errors))
        except UnicodeEncodeError as e:
            raise UnencodableLineError(line, encoding.value, line_num) from e
    return b"".join(chunks)


def write_lines(
    filepath: Path | str,
    lines: list[str],
    encoding: EncodingLabel,
    newline: str = "\n",
    errors: str = "strict",
) -> int:
    """Write lines to a file, replacing it atomically.

    Args:
        filepath: Destination file.
        lines: Lines to write.
        encoding: Target encoding.
        newline: Line terminator.
        errors: Policy for unencodable characters, see encode_lines().

    Returns:
        Number of bytes written.
    """
    filepath = Path(filepath)
    payload = encode_lines(lines, encoding, newline=newline, errors=errors)

    # Write through symlinks: replace the file the link points to
    target = filepath.resolve()
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        if target.exists():
            os.chmod(tmp_name, target.stat().st_mode & 0o7777)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info("Saved %s (%s)", filepath, encoding)
    return len(payload)
