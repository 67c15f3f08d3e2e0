"""
words.py

Loads the dictionary of candidate words.
No numpy here, just clean text handling.
"""

import re
from pathlib import Path


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DICTIONARY_PATH = DATA_DIR / "dictionary.txt"

WORD_REGEX = re.compile(r"^[a-z]+$")


def load_word_list(path):
    """
    Load a newline-separated word list into a Python list.

    Blank lines are skipped and words are lowercased. Anything that is not a
    plain a-z word raises ValueError naming the offending line.
    """
    words = []
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            word = line.strip().lower()
            if not word:
                continue
            if not WORD_REGEX.match(word):
                raise ValueError(f"{path}:{lineno}: not a lowercase a-z word: {word!r}")
            words.append(word)
    return words


def load_words(path=DICTIONARY_PATH):
    """
    Returns:
        words: the ordered dictionary of candidate words
    """
    # Default path is relative to this source tree so execution is robust even
    # when Python is launched from a different current working directory.
    return load_word_list(path)
