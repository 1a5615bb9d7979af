"""Dictionary commands: add, delete, sort and detect.

Each command runs one full cycle:
    read -> detect encoding -> decode -> set operation -> encode -> write

The dictionary is always written back in the encoding it was read in,
whatever the encoding of the words file. Nothing is written when the
dictionary's encoding cannot be detected.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from . import lineset
from .config import Settings
from .dictfile import DictionaryFile, read_dictionary, write_lines
from .encoding import detect_encoding
from .schema import EncodingLabel, MergeResult, NormalizeResult, SubtractResult

logger = logging.getLogger(__name__)


@dataclass
class CommandReport:
    """Outcome of a dictionary command."""

    command: str
    path: str
    encoding: EncodingLabel
    result: Union[MergeResult, SubtractResult, NormalizeResult]
    source_encoding: Optional[EncodingLabel] = None  # Words file, if any

    def summary(self) -> str:
        """One-line human-readable summary."""
        r = self.result
        if isinstance(r, MergeResult):
            return f"Added {r.added} words. Total words in dictionary: {r.total}"
        if isinstance(r, SubtractResult):
            return f"Deleted {r.removed} words. Words left in dictionary: {r.total}"
        return (
            f"Dictionary sorted. Duplicates removed: {r.duplicates_removed}. "
            f"Total words: {r.total}"
        )


def _load(filepath: Path | str, role: str) -> DictionaryFile:
    dictionary = read_dictionary(filepath)
    logger.info("%s encoding: %s", role, dictionary.encoding)
    return dictionary.require_known()


def _save(dictionary: DictionaryFile, words: list[str], settings: Settings) -> None:
    write_lines(
        dictionary.path,
        words,
        dictionary.encoding,
        newline=settings.newline,
        errors=settings.unencodable,
    )


def add_words(
    dict_path: Path | str,
    new_words_path: Path | str,
    settings: Optional[Settings] = None,
) -> CommandReport:
    """Add words from a second file to a dictionary.

    Args:
        dict_path: Dictionary to update.
        new_words_path: File with words to add.
        settings: Write options (defaults from config).

    Returns:
        CommandReport with a MergeResult.

    Raises:
        UnknownEncodingError: If either file's encoding is unknown.
        UnencodableLineError: If a new word does not fit the
            dictionary's encoding.
        OSError: On read or write failure.
    """
    settings = settings or Settings.from_config()
    logger.info("Adding words from %s to %s...", new_words_path, dict_path)

    dictionary = _load(dict_path, "Dictionary")
    new_words = _load(new_words_path, "New words file")

    result = lineset.merge(dictionary.lines, new_words.lines)
    _save(dictionary, result.words, settings)

    return CommandReport(
        command="add",
        path=str(dictionary.path),
        encoding=dictionary.encoding,
        source_encoding=new_words.encoding,
        result=result,
    )


def delete_words(
    dict_path: Path | str,
    words_path: Path | str,
    settings: Optional[Settings] = None,
) -> CommandReport:
    """Delete every word listed in a second file from a dictionary.

    Remaining lines keep their order; no sorting or deduplication.

    Returns:
        CommandReport with a SubtractResult.
    """
    settings = settings or Settings.from_config()
    logger.info("Deleting words from %s listed in %s...", dict_path, words_path)

    dictionary = _load(dict_path, "Dictionary")
    rejected = _load(words_path, "Words to delete file")

    result = lineset.subtract(dictionary.lines, rejected.lines)
    _save(dictionary, result.words, settings)

    return CommandReport(
        command="delete",
        path=str(dictionary.path),
        encoding=dictionary.encoding,
        source_encoding=rejected.encoding,
        result=result,
    )


def sort_dictionary(
    dict_path: Path | str,
    settings: Optional[Settings] = None,
) -> CommandReport:
    """Sort a dictionary and remove duplicates.

    Returns:
        CommandReport with a NormalizeResult.
    """
    settings = settings or Settings.from_config()
    logger.info("Sorting dictionary %s...", dict_path)

    dictionary = _load(dict_path, "Dictionary")
    logger.info("Lines read: %d", len(dictionary.lines))

    result = lineset.normalize(dictionary.lines)
    _save(dictionary, result.words, settings)

    return CommandReport(
        command="sort",
        path=str(dictionary.path),
        encoding=dictionary.encoding,
        result=result,
    )


def detect(filepath: Path | str) -> EncodingLabel:
    """Detect the encoding of a file without modifying it."""
    encoding = detect_encoding(filepath)
    logger.debug("%s: %s", filepath, encoding)
    return encoding
