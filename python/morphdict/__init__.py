"""morphdict - Encoding-aware maintenance of morphological word lists.

A toolkit for keeping flat, one-word-per-line dictionaries in order.
Dictionaries may be stored as UTF-8 or Windows-1251; the encoding is
detected from file content and preserved on every write.

Core concepts:
    - A dictionary is read, its encoding detected, and decoded into lines
    - Lines are merged, subtracted or normalized as sets
    - Output is ordered by Russian collation, not by code point

Example:
    "пёс" sorts between "кот" and "рысь", and "ёж" sorts next to "еж"

Usage:
    from morphdict import commands

    report = commands.add_words("словари/животные.txt", "новые_слова.txt")
    print(report.result.added, report.result.total)

    from morphdict.encoding import classify
    from morphdict.lineset import normalize

    label = classify(raw_bytes)
    result = normalize(["банан", "яблоко", "груша", "банан"])
"""

__version__ = "0.1.0"
